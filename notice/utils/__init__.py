"""Utility helpers for reusable functionality."""

from .datetime import from_storage_datetime, to_storage_datetime, utc_now
from .text import is_blank

__all__ = [
    "from_storage_datetime",
    "is_blank",
    "to_storage_datetime",
    "utc_now",
]
