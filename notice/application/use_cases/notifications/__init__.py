"""Use cases for fetching notifications and acting on them."""

from .fetch_notifications import fetch_notifications
from .invoke_action import find_action, invoke_api_action, invoke_portal_action

__all__ = [
    "fetch_notifications",
    "find_action",
    "invoke_api_action",
    "invoke_portal_action",
]
