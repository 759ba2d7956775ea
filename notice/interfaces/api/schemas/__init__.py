from .notification import (
    ActionInvocationRead,
    NotificationActionRead,
    NotificationCategoryRead,
    NotificationEntryRead,
    NotificationErrorRead,
    NotificationResponseRead,
)

__all__ = [
    "ActionInvocationRead",
    "NotificationActionRead",
    "NotificationCategoryRead",
    "NotificationEntryRead",
    "NotificationErrorRead",
    "NotificationResponseRead",
]
