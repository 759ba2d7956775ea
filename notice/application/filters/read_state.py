"""Filters exposing the read state of entries."""

from __future__ import annotations

import logging
from collections.abc import Callable

from notice.domain.entities import (
    NotificationEntry,
    NotificationResponse,
    NotificationState,
    ReadAction,
    get_read_notices,
    is_read,
)
from notice.domain.services import NotificationHistoryService, PreferenceStore
from notice.utils import is_blank

from .base import ORDER_LATE, ORDER_NORMAL, FilterContext, NotificationFilter, NotificationFilterChain

logger = logging.getLogger(__name__)

DEFAULT_READ_ACTION_ID = "read"

PreferenceStoreFactory = Callable[[str, str], PreferenceStore]
"""Builds the preference store of ``(username, portal_instance)``."""


class ReadStateSupportFilter(NotificationFilter):
    """Apply durable read state from the history service.

    Every entry with an id is offered a :class:`ReadAction`; the ones the user
    already read also get the READ state. Portal requests take their read state
    from the portal preferences instead, so the history is not consulted.
    """

    def __init__(
        self,
        history: NotificationHistoryService,
        *,
        action_id: str = DEFAULT_READ_ACTION_ID,
        order: int = ORDER_NORMAL,
    ) -> None:
        super().__init__(order)
        self._history = history
        self._action_id = action_id

    def do_filter(
        self, context: FilterContext, chain: NotificationFilterChain
    ) -> NotificationResponse:
        response = chain.do_filter()
        rslt = response.clone_if_not_cloned()

        for entry in rslt.entries():
            if is_blank(entry.id):
                continue
            if context.portal_instance is None and is_read(
                self._history, entry, context.username
            ):
                entry.states = entry.states | {NotificationState.READ}
            _ensure_read_action(entry, ReadAction.create_read_instance(id=self._action_id))
        return rslt


class PortalReadStateFilter(NotificationFilter):
    """Apply the toggleable read state kept in portal preferences.

    Only active for requests made on behalf of a portal instance. Entries whose
    id is in the read set get the READ state and an unread toggle; the others
    lose READ and get a read toggle.
    """

    def __init__(
        self,
        preferences_for: PreferenceStoreFactory,
        *,
        action_id: str = DEFAULT_READ_ACTION_ID,
        order: int = ORDER_LATE,
    ) -> None:
        super().__init__(order)
        self._preferences_for = preferences_for
        self._action_id = action_id

    def do_filter(
        self, context: FilterContext, chain: NotificationFilterChain
    ) -> NotificationResponse:
        response = chain.do_filter()
        if context.portal_instance is None:
            return response

        read_ids = get_read_notices(
            self._preferences_for(context.username, context.portal_instance)
        )
        rslt = response.clone_if_not_cloned()
        for entry in rslt.entries():
            if is_blank(entry.id):
                continue
            if entry.id in read_ids:
                entry.states = entry.states | {NotificationState.READ}
                toggle = ReadAction.create_unread_instance(id=self._action_id)
            else:
                entry.states = entry.states - {NotificationState.READ}
                toggle = ReadAction.create_read_instance(id=self._action_id)
            _ensure_read_action(entry, toggle, replace=True)
        logger.debug(
            "Applied %d portal read ids for %s on %s",
            len(read_ids),
            context.username,
            context.portal_instance,
        )
        return rslt


def _ensure_read_action(
    entry: NotificationEntry, action: ReadAction, *, replace: bool = False
) -> None:
    actions = list(entry.available_actions)
    if action in actions:
        if not replace:
            return
        actions[actions.index(action)] = action
    else:
        actions.append(action)
    entry.available_actions = actions


__all__ = [
    "DEFAULT_READ_ACTION_ID",
    "PortalReadStateFilter",
    "PreferenceStoreFactory",
    "ReadStateSupportFilter",
]
