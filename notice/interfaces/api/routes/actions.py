"""Endpoints invoking actions on notifications."""

from __future__ import annotations

import logging
from dataclasses import replace

from fastapi import APIRouter, Depends, HTTPException, Query, status

from notice.application.filters import (
    FilterContext,
    FilterRegistry,
    NotificationSource,
    PreferenceStoreFactory,
)
from notice.application.use_cases.notifications import (
    fetch_notifications,
    invoke_api_action,
    invoke_portal_action,
)
from notice.config import get_settings
from notice.domain.entities import ApiActionContext, PortalActionContext
from notice.domain.exceptions import NotificationNotFoundError, PreferenceStoreError
from notice.domain.services import NotificationHistoryService
from notice.infrastructure.security import verify_csrf_token
from notice.interfaces.api.dependencies import (
    get_filter_context,
    get_filter_registry,
    get_history_service,
    get_notification_source,
    get_preference_store_factory,
)
from notice.interfaces.api.schemas import ActionInvocationRead

logger = logging.getLogger(__name__)

router = APIRouter(tags=["actions"])


@router.post("/api/v2/action/{action_id}/{notification_id}", response_model=ActionInvocationRead)
def invoke_action(
    action_id: str,
    notification_id: str,
    csrf: str | None = Query(default=None, alias="_csrf"),
    context: FilterContext = Depends(get_filter_context),
    registry: FilterRegistry = Depends(get_filter_registry),
    source: NotificationSource = Depends(get_notification_source),
    history: NotificationHistoryService = Depends(get_history_service),
) -> ActionInvocationRead:
    """Invoke ``action_id`` on ``notification_id`` for the authenticated user."""

    settings = get_settings()
    if not verify_csrf_token(csrf, context.username, settings.csrf_secret):
        logger.warning("Rejected action %s for %s: bad CSRF token", action_id, context.username)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid CSRF token")

    response = fetch_notifications(
        registry=registry,
        source=source,
        context=context,
        explicit_order=settings.filter_order,
    )
    try:
        action = invoke_api_action(
            response,
            action_id=action_id,
            notification_id=notification_id,
            context=ApiActionContext(username=context.username, history=history),
        )
    except NotificationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    return ActionInvocationRead(
        action_id=action_id, notification_id=notification_id, label=action.label
    )


@router.post(
    "/portal/{instance_id}/action/{action_id}/{notification_id}",
    response_model=ActionInvocationRead,
)
def invoke_portal_action_endpoint(
    instance_id: str,
    action_id: str,
    notification_id: str,
    context: FilterContext = Depends(get_filter_context),
    registry: FilterRegistry = Depends(get_filter_registry),
    source: NotificationSource = Depends(get_notification_source),
    preferences_for: PreferenceStoreFactory = Depends(get_preference_store_factory),
) -> ActionInvocationRead:
    """Invoke ``action_id`` as the portal instance ``instance_id`` would."""

    portal_context = replace(context, portal_instance=instance_id)
    try:
        response = fetch_notifications(
            registry=registry,
            source=source,
            context=portal_context,
            explicit_order=get_settings().filter_order,
        )
        action = invoke_portal_action(
            response,
            action_id=action_id,
            notification_id=notification_id,
            context=PortalActionContext(
                preferences=preferences_for(context.username, instance_id)
            ),
        )
    except NotificationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except PreferenceStoreError as exc:
        logger.exception("Portal preferences unavailable for %s: %s", context.username, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not store the read state",
        ) from exc

    return ActionInvocationRead(
        action_id=action_id, notification_id=notification_id, label=action.label
    )
