"""Filters installed by the application out of the box."""

from __future__ import annotations

from notice.domain.services import NotificationHistoryService

from .api_url_support import ApiUrlSupportFilter
from .read_state import PortalReadStateFilter, PreferenceStoreFactory, ReadStateSupportFilter
from .registry import FilterRegistry

READ_STATE_FILTER = "readState"
PORTAL_READ_STATE_FILTER = "portalReadState"
API_URL_FILTER = "apiUrl"


def build_default_registry(
    history: NotificationHistoryService, preferences_for: PreferenceStoreFactory
) -> FilterRegistry:
    """Return a registry holding the read-state and API URL filters."""

    registry = FilterRegistry()
    registry.register(READ_STATE_FILTER, ReadStateSupportFilter(history))
    registry.register(PORTAL_READ_STATE_FILTER, PortalReadStateFilter(preferences_for))
    registry.register(API_URL_FILTER, ApiUrlSupportFilter())
    return registry


__all__ = [
    "API_URL_FILTER",
    "PORTAL_READ_STATE_FILTER",
    "READ_STATE_FILTER",
    "build_default_registry",
]
