"""Terminal sources that produce raw notification responses."""

from .aggregate import AggregatingNotificationSource
from .cache import CachingNotificationSource

__all__ = ["AggregatingNotificationSource", "CachingNotificationSource"]
