"""Domain entities exposed by the application."""

from .action import (
    ACTION_TYPES,
    ApiActionContext,
    NotificationAction,
    PortalActionContext,
    action_type_for,
    register_action,
)
from .attribute import NotificationAttribute
from .entry import NotificationEntry
from .history_event import HistoryEvent
from .read_action import (
    READ_NOTIFICATION_IDS_PREFERENCE,
    ReadAction,
    get_read_notices,
    is_read,
    remove_read_notices,
    set_read_notices,
)
from .response import NotificationCategory, NotificationError, NotificationResponse
from .state import NotificationState

__all__ = [
    "ACTION_TYPES",
    "ApiActionContext",
    "HistoryEvent",
    "NotificationAction",
    "NotificationAttribute",
    "NotificationCategory",
    "NotificationEntry",
    "NotificationError",
    "NotificationResponse",
    "NotificationState",
    "PortalActionContext",
    "READ_NOTIFICATION_IDS_PREFERENCE",
    "ReadAction",
    "action_type_for",
    "get_read_notices",
    "is_read",
    "register_action",
    "remove_read_notices",
    "set_read_notices",
]
