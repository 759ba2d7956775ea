"""Workflow states a notification entry can be in."""

from __future__ import annotations

from enum import Enum


class NotificationState(str, Enum):
    """Tag describing where an entry is in an applicable workflow."""

    ISSUED = "ISSUED"
    READ = "READ"
    COMPLETED = "COMPLETED"
    DISMISSED = "DISMISSED"


__all__ = ["NotificationState"]
