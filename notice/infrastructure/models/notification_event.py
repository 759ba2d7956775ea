"""SQLAlchemy model for per-user notification state transitions."""

from sqlalchemy import Column, DateTime, Index, Integer, String

from notice.infrastructure.database import Base


class NotificationEventModel(Base):
    """Append-only history of states applied to entries by users."""

    __tablename__ = "notice_event"
    __table_args__ = (Index("ix_notice_event_entry_user", "entry_id", "username"),)

    id = Column(Integer, primary_key=True, index=True)
    entry_id = Column(String(255), nullable=False)
    username = Column(String(255), nullable=False)
    state = Column(String(32), nullable=False)
    timestamp = Column(DateTime(), nullable=False)


__all__ = ["NotificationEventModel"]
