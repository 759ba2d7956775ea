"""Action toggling or recording the READ state of an entry."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from notice.domain.exceptions import ActionTargetError
from notice.domain.services import NotificationHistoryService, PreferenceStore
from notice.utils import is_blank

from .action import ApiActionContext, NotificationAction, PortalActionContext, register_action
from .entry import NotificationEntry
from .state import NotificationState

logger = logging.getLogger(__name__)

READ_NOTIFICATION_IDS_PREFERENCE = "notice.ReadAction.READ_NOTIFICATION_IDS"
"""Portal preference holding the ids of the entries a user marked as read."""

MARK_AS_READ_LABEL = "MARK AS READ"
MARK_AS_UNREAD_LABEL = "MARK AS UNREAD"


@register_action
class ReadAction(NotificationAction):
    """Marks an entry as read.

    From the portal the action is a toggle over a preference holding read ids,
    so invoking it twice restores the original state. Through the REST API it
    records a durable READ event once; there is no way to record UNREAD through
    this path, so further invocations do nothing.

    The unread toggle only exists in the portal and is never offered to REST
    clients.
    """

    kind = "read"

    def __init__(self, label: str = MARK_AS_READ_LABEL, *, id: str | None = None) -> None:
        super().__init__(label, id=id)
        self._marks_read = True

    @classmethod
    def create_read_instance(cls, *, id: str | None = None) -> "ReadAction":
        return cls(MARK_AS_READ_LABEL, id=id)

    @classmethod
    def create_unread_instance(cls, *, id: str | None = None) -> "ReadAction":
        action = cls(MARK_AS_UNREAD_LABEL, id=id)
        action._marks_read = False
        return action

    def supports_api(self) -> bool:
        return self._marks_read

    def invoke_portal(self, context: PortalActionContext) -> None:
        notification_id = _require_entry_id(self.require_target())
        read_notices = get_read_notices(context.preferences)
        if notification_id in read_notices:
            read_notices.discard(notification_id)
        else:
            read_notices.add(notification_id)
        set_read_notices(context.preferences, read_notices)

    def invoke_api(self, context: ApiActionContext) -> None:
        entry = self.require_target()
        _require_entry_id(entry)
        if is_read(context.history, entry, context.username):
            logger.debug(
                "Entry %s already read by %s; nothing to record", entry.id, context.username
            )
            return
        context.history.apply_state(entry, context.username, NotificationState.READ)


def get_read_notices(preferences: PreferenceStore) -> set[str]:
    """Return the ids stored in the read-notices preference."""

    return set(preferences.get_values(READ_NOTIFICATION_IDS_PREFERENCE, ()))


def set_read_notices(preferences: PreferenceStore, notification_ids: Iterable[str]) -> None:
    """Replace the read-notices preference and persist it immediately."""

    preferences.set_values(READ_NOTIFICATION_IDS_PREFERENCE, sorted(set(notification_ids)))
    preferences.store()


def remove_read_notices(preferences: PreferenceStore, ids_to_remove: Iterable[str]) -> None:
    """Forget ``ids_to_remove`` from the read-notices preference."""

    current = get_read_notices(preferences)
    current.difference_update(ids_to_remove)
    set_read_notices(preferences, current)


def is_read(
    history: NotificationHistoryService, entry: NotificationEntry, username: str
) -> bool:
    """Return ``True`` when the history holds a READ event for ``username``."""

    for event in history.get_history(entry, username):
        if event.state is NotificationState.READ:
            logger.debug("Found a READ event: %s", event)
            return True
    return False


def _require_entry_id(entry: NotificationEntry) -> str:
    if is_blank(entry.id):
        raise ActionTargetError(f"Entry '{entry.title}' has no id and cannot be acted upon")
    return entry.id


__all__ = [
    "MARK_AS_READ_LABEL",
    "MARK_AS_UNREAD_LABEL",
    "READ_NOTIFICATION_IDS_PREFERENCE",
    "ReadAction",
    "get_read_notices",
    "is_read",
    "remove_read_notices",
    "set_read_notices",
]
