"""Portal preference store implementations."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from notice.domain.exceptions import PreferenceStoreError
from notice.infrastructure.repositories import PortalPreferenceRepository

logger = logging.getLogger(__name__)


class SqlAlchemyPreferenceStore:
    """Preferences of one user on one portal instance, kept in the database.

    Values set with :meth:`set_values` are buffered until :meth:`store`
    writes them in one transaction. Storage failures surface as
    :class:`PreferenceStoreError`.
    """

    def __init__(
        self, session_factory: Callable[[], Session], *, username: str, instance_id: str
    ) -> None:
        self._session_factory = session_factory
        self._username = username
        self._instance_id = instance_id
        self._pending: dict[str, list[str]] = {}

    def get_values(self, name: str, default: Sequence[str] = ()) -> list[str]:
        if name in self._pending:
            return list(self._pending[name])
        session = self._session_factory()
        try:
            values = PortalPreferenceRepository(session).get_values(
                username=self._username, instance_id=self._instance_id, name=name
            )
        except SQLAlchemyError as exc:
            raise PreferenceStoreError(f"Could not read preference '{name}'") from exc
        finally:
            session.close()
        return list(default) if values is None else values

    def set_values(self, name: str, values: Iterable[str]) -> None:
        self._pending[name] = list(values)

    def store(self) -> None:
        if not self._pending:
            return
        session = self._session_factory()
        try:
            PortalPreferenceRepository(session).save_values(
                username=self._username, instance_id=self._instance_id, values=self._pending
            )
        except SQLAlchemyError as exc:
            session.rollback()
            raise PreferenceStoreError(
                f"Could not store preferences for {self._username} on {self._instance_id}"
            ) from exc
        finally:
            session.close()
        logger.debug(
            "Stored preferences %s for %s on %s",
            sorted(self._pending),
            self._username,
            self._instance_id,
        )
        self._pending.clear()


class InMemoryPreferenceStore:
    """Dictionary-backed preferences; values become visible to readers on ``store``."""

    def __init__(self, initial: dict[str, Sequence[str]] | None = None) -> None:
        self._stored: dict[str, list[str]] = {
            name: list(values) for name, values in (initial or {}).items()
        }
        self._pending: dict[str, list[str]] = {}
        self._lock = threading.Lock()
        self.store_count = 0

    def get_values(self, name: str, default: Sequence[str] = ()) -> list[str]:
        with self._lock:
            if name in self._pending:
                return list(self._pending[name])
            return list(self._stored.get(name, default))

    def set_values(self, name: str, values: Iterable[str]) -> None:
        with self._lock:
            self._pending[name] = list(values)

    def store(self) -> None:
        with self._lock:
            self._stored.update(self._pending)
            self._pending.clear()
            self.store_count += 1

    def stored_values(self, name: str) -> list[str] | None:
        with self._lock:
            values = self._stored.get(name)
            return list(values) if values is not None else None


__all__ = ["InMemoryPreferenceStore", "SqlAlchemyPreferenceStore"]
