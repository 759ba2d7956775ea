"""SQLAlchemy model for portal preferences."""

from sqlalchemy import JSON, Column, Integer, String, UniqueConstraint

from notice.infrastructure.database import Base


class PortalPreferenceModel(Base):
    """String-array preference of one user on one portal instance."""

    __tablename__ = "notice_portal_preference"
    __table_args__ = (
        UniqueConstraint("username", "instance_id", "name", name="uq_notice_preference"),
    )

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), nullable=False, index=True)
    instance_id = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    preference_values = Column(JSON, nullable=False, default=list)


__all__ = ["PortalPreferenceModel"]
