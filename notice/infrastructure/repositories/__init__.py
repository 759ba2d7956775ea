"""Repository implementations for infrastructure layer."""

from .notification_event_repository import NotificationEventRepository
from .portal_preference_repository import PortalPreferenceRepository

__all__ = ["NotificationEventRepository", "PortalPreferenceRepository"]
