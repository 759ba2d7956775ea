"""Persistence helpers for notification history events."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notice.domain.entities import HistoryEvent, NotificationState
from notice.infrastructure.models import NotificationEventModel
from notice.utils import from_storage_datetime, to_storage_datetime, utc_now


class NotificationEventRepository:
    """Append and query :class:`HistoryEvent` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for(self, *, entry_id: str, username: str) -> Sequence[HistoryEvent]:
        query = (
            self.session.query(NotificationEventModel)
            .filter(NotificationEventModel.entry_id == entry_id)
            .filter(NotificationEventModel.username == username)
            .order_by(NotificationEventModel.timestamp.asc(), NotificationEventModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get_latest(self, *, entry_id: str, username: str) -> HistoryEvent | None:
        model = (
            self.session.query(NotificationEventModel)
            .filter(NotificationEventModel.entry_id == entry_id)
            .filter(NotificationEventModel.username == username)
            .order_by(NotificationEventModel.timestamp.desc(), NotificationEventModel.id.desc())
            .first()
        )
        return self._to_entity(model) if model is not None else None

    def create(self, event: HistoryEvent) -> HistoryEvent:
        model = NotificationEventModel(
            entry_id=event.entry_id,
            username=event.username,
            state=event.state.value,
            timestamp=to_storage_datetime(event.timestamp or utc_now()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: NotificationEventModel) -> HistoryEvent:
        return HistoryEvent(
            id=model.id,
            entry_id=model.entry_id,
            username=model.username,
            state=NotificationState(model.state),
            timestamp=from_storage_datetime(model.timestamp),
        )


__all__ = ["NotificationEventRepository"]
