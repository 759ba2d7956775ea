"""Record of a per-user state transition on a notification entry."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .state import NotificationState


@dataclass(frozen=True)
class HistoryEvent:
    """A state applied to an entry by a user at a point in time."""

    id: int | None
    entry_id: str
    username: str
    state: NotificationState
    timestamp: datetime | None


__all__ = ["HistoryEvent"]
