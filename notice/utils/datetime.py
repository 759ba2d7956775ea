"""Timestamps recorded on history events."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def to_storage_datetime(value: datetime) -> datetime:
    """Return ``value`` as a naive UTC datetime.

    SQLite ``DATETIME`` columns drop the offset, so every event timestamp is
    normalized to UTC before it is written. Naive input is taken to be UTC.
    """

    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def from_storage_datetime(value: datetime) -> datetime:
    """Attach UTC to a timestamp read back from the ``notice_event`` table."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
