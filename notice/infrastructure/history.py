"""History/State service implementations."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence

from sqlalchemy.orm import Session

from notice.domain.entities import HistoryEvent, NotificationEntry, NotificationState
from notice.infrastructure.repositories import NotificationEventRepository
from notice.utils import is_blank, utc_now

logger = logging.getLogger(__name__)


def _require_entry_id(entry: NotificationEntry) -> str:
    if is_blank(entry.id):
        raise ValueError("Notification entries need an id to carry history")
    return entry.id


class SqlAlchemyHistoryService:
    """Store history events in the ``notice_event`` table.

    Every call opens its own session so the service can be shared between
    requests. Applying the state that is already the latest one for the
    entry and user records nothing. The check and the insert are serialized
    within the process; separate processes sharing a database can still both
    record the same state.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory
        self._lock = threading.Lock()

    def apply_state(
        self, entry: NotificationEntry, username: str, state: NotificationState
    ) -> None:
        entry_id = _require_entry_id(entry)
        with self._lock:
            self._apply_state(entry_id, username, state)

    def _apply_state(self, entry_id: str, username: str, state: NotificationState) -> None:
        session = self._session_factory()
        try:
            repository = NotificationEventRepository(session)
            latest = repository.get_latest(entry_id=entry_id, username=username)
            if latest is not None and latest.state is state:
                return
            repository.create(
                HistoryEvent(
                    id=None,
                    entry_id=entry_id,
                    username=username,
                    state=state,
                    timestamp=utc_now(),
                )
            )
            logger.info("Applied state %s to %s for %s", state.value, entry_id, username)
        finally:
            session.close()

    def get_history(self, entry: NotificationEntry, username: str) -> Sequence[HistoryEvent]:
        entry_id = _require_entry_id(entry)
        session = self._session_factory()
        try:
            return NotificationEventRepository(session).list_for(
                entry_id=entry_id, username=username
            )
        finally:
            session.close()


class InMemoryHistoryService:
    """Process-local history, used when no database is configured and in tests."""

    def __init__(self) -> None:
        self._events: list[HistoryEvent] = []
        self._lock = threading.Lock()

    def apply_state(
        self, entry: NotificationEntry, username: str, state: NotificationState
    ) -> None:
        entry_id = _require_entry_id(entry)
        with self._lock:
            matching = [
                event
                for event in self._events
                if event.entry_id == entry_id and event.username == username
            ]
            if matching and matching[-1].state is state:
                return
            self._events.append(
                HistoryEvent(
                    id=len(self._events) + 1,
                    entry_id=entry_id,
                    username=username,
                    state=state,
                    timestamp=utc_now(),
                )
            )

    def get_history(self, entry: NotificationEntry, username: str) -> Sequence[HistoryEvent]:
        entry_id = _require_entry_id(entry)
        with self._lock:
            return [
                event
                for event in self._events
                if event.entry_id == entry_id and event.username == username
            ]

    def all_events(self) -> list[HistoryEvent]:
        with self._lock:
            return list(self._events)


__all__ = ["InMemoryHistoryService", "SqlAlchemyHistoryService"]
