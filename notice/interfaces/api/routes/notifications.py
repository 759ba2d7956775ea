"""Endpoints returning the filtered notifications of the current user."""

from __future__ import annotations

from dataclasses import replace

from fastapi import APIRouter, Depends

from notice.application.filters import FilterContext, FilterRegistry, NotificationSource
from notice.application.use_cases.notifications import fetch_notifications
from notice.config import get_settings
from notice.interfaces.api.dependencies import (
    get_filter_context,
    get_filter_registry,
    get_notification_source,
)
from notice.interfaces.api.schemas import NotificationResponseRead
from notice.interfaces.api.serialization import response_to_schema

router = APIRouter(tags=["notifications"])


@router.get(
    "/api/v2/notifications",
    response_model=NotificationResponseRead,
    response_model_exclude_none=True,
)
def list_notifications(
    context: FilterContext = Depends(get_filter_context),
    registry: FilterRegistry = Depends(get_filter_registry),
    source: NotificationSource = Depends(get_notification_source),
) -> NotificationResponseRead:
    """Return the notifications of the authenticated user."""

    response = fetch_notifications(
        registry=registry,
        source=source,
        context=context,
        explicit_order=get_settings().filter_order,
    )
    return response_to_schema(response)


@router.get(
    "/portal/{instance_id}/notifications",
    response_model=NotificationResponseRead,
    response_model_exclude_none=True,
)
def list_portal_notifications(
    instance_id: str,
    context: FilterContext = Depends(get_filter_context),
    registry: FilterRegistry = Depends(get_filter_registry),
    source: NotificationSource = Depends(get_notification_source),
) -> NotificationResponseRead:
    """Return the notifications rendered by portal instance ``instance_id``."""

    response = fetch_notifications(
        registry=registry,
        source=source,
        context=replace(context, portal_instance=instance_id),
        explicit_order=get_settings().filter_order,
    )
    return response_to_schema(response)
