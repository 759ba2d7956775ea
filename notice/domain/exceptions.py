"""Errors raised by the notification core."""

from __future__ import annotations


class NoticeError(Exception):
    """Base class for errors raised by the notification core."""


class ActionTargetError(NoticeError):
    """An action was invoked without a usable target entry."""


class NotificationNotFoundError(NoticeError, LookupError):
    """No entry or action matches the requested identifiers."""


class PreferenceStoreError(NoticeError):
    """Reading or persisting portal preferences failed."""


__all__ = [
    "NoticeError",
    "ActionTargetError",
    "NotificationNotFoundError",
    "PreferenceStoreError",
]
