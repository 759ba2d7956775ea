"""Contracts for the collaborators that hold per-user notification state."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from notice.domain.entities import HistoryEvent, NotificationEntry, NotificationState


class NotificationHistoryService(Protocol):
    """Durable, append-only record of state transitions per user and entry."""

    def apply_state(
        self, entry: "NotificationEntry", username: str, state: "NotificationState"
    ) -> None:
        """Record that ``state`` now applies to ``entry`` for ``username``."""

    def get_history(
        self, entry: "NotificationEntry", username: str
    ) -> Sequence["HistoryEvent"]:
        """Return the events recorded for ``entry`` and ``username``, oldest first."""


class PreferenceStore(Protocol):
    """String-array preferences scoped to one user and one portal instance."""

    def get_values(self, name: str, default: Sequence[str] = ()) -> list[str]:
        ...

    def set_values(self, name: str, values: Iterable[str]) -> None:
        ...

    def store(self) -> None:
        """Persist every value set since the last call."""


__all__ = ["NotificationHistoryService", "PreferenceStore"]
