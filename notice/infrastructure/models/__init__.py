"""ORM models used by the application infrastructure."""

from .notification_event import NotificationEventModel
from .portal_preference import PortalPreferenceModel

__all__ = ["NotificationEventModel", "PortalPreferenceModel"]
