"""Use cases invoking an action on a rendered notification."""

from __future__ import annotations

import logging

from notice.domain.entities import (
    ApiActionContext,
    NotificationAction,
    NotificationResponse,
    PortalActionContext,
)
from notice.domain.exceptions import NotificationNotFoundError

logger = logging.getLogger(__name__)


def find_action(
    response: NotificationResponse, *, action_id: str, notification_id: str
) -> NotificationAction:
    """Locate action ``action_id`` on entry ``notification_id``."""

    entry = response.find_entry(notification_id)
    if entry is None:
        raise NotificationNotFoundError(f"Notification '{notification_id}' not found")
    action = entry.find_action(action_id)
    if action is None:
        raise NotificationNotFoundError(
            f"Action '{action_id}' not available on notification '{notification_id}'"
        )
    return action


def invoke_api_action(
    response: NotificationResponse,
    *,
    action_id: str,
    notification_id: str,
    context: ApiActionContext,
) -> NotificationAction:
    """Invoke an action on behalf of a REST API client."""

    action = find_action(response, action_id=action_id, notification_id=notification_id)
    action.invoke_api(context)
    logger.info(
        "User %s invoked %s on notification %s", context.username, action_id, notification_id
    )
    return action


def invoke_portal_action(
    response: NotificationResponse,
    *,
    action_id: str,
    notification_id: str,
    context: PortalActionContext,
) -> NotificationAction:
    """Invoke an action from a portal interaction."""

    action = find_action(response, action_id=action_id, notification_id=notification_id)
    action.invoke_portal(context)
    logger.info("Portal action %s invoked on notification %s", action_id, notification_id)
    return action
