"""Notification filters and the chain that runs them."""

from .api_url_support import REST_API_URL_FORMAT, ApiUrlSupportFilter, compute_url_base
from .base import (
    ORDER_EARLY,
    ORDER_LATE,
    ORDER_NORMAL,
    ORDER_VERY_EARLY,
    ORDER_VERY_LATE,
    FilterContext,
    NotificationFilter,
    NotificationFilterChain,
    NotificationSource,
    run_filters,
    sort_by_order,
)
from .read_state import (
    DEFAULT_READ_ACTION_ID,
    PortalReadStateFilter,
    PreferenceStoreFactory,
    ReadStateSupportFilter,
)
from .registry import FilterRegistry
from .defaults import (
    API_URL_FILTER,
    PORTAL_READ_STATE_FILTER,
    READ_STATE_FILTER,
    build_default_registry,
)

__all__ = [
    "API_URL_FILTER",
    "PORTAL_READ_STATE_FILTER",
    "READ_STATE_FILTER",
    "ORDER_EARLY",
    "ORDER_LATE",
    "ORDER_NORMAL",
    "ORDER_VERY_EARLY",
    "ORDER_VERY_LATE",
    "DEFAULT_READ_ACTION_ID",
    "REST_API_URL_FORMAT",
    "ApiUrlSupportFilter",
    "FilterContext",
    "FilterRegistry",
    "NotificationFilter",
    "NotificationFilterChain",
    "NotificationSource",
    "PortalReadStateFilter",
    "PreferenceStoreFactory",
    "ReadStateSupportFilter",
    "build_default_registry",
    "compute_url_base",
    "run_filters",
    "sort_by_order",
]
