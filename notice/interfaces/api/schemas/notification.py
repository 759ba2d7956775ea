"""Pydantic models describing the notification wire format."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from notice.domain.entities import NotificationState


class WireModel(BaseModel):
    """Base model using camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NotificationActionRead(WireModel):
    """Action offered on an entry."""

    kind: str = Field(..., description="Registered action kind, e.g. 'read'")
    id: str | None = None
    label: str = ""
    api_url: str | None = None


class NotificationEntryRead(WireModel):
    """Single notification.

    ``attributes`` maps each attribute name to its values instead of listing
    ``{name, values}`` objects.
    """

    source: str | None = None
    id: str | None = None
    title: str
    url: str | None = None
    link_text: str | None = None
    priority: int = Field(default=0, ge=0, le=5)
    due_date: datetime | None = None
    image: str | None = None
    body: str | None = None
    attributes: dict[str, list[str]] = Field(default_factory=dict)
    available_actions: list[NotificationActionRead] = Field(default_factory=list)
    states: list[NotificationState] = Field(default_factory=list)


class NotificationCategoryRead(WireModel):
    title: str
    entries: list[NotificationEntryRead] = Field(default_factory=list)


class NotificationErrorRead(WireModel):
    source: str
    error: str


class NotificationResponseRead(WireModel):
    """Notifications of one user grouped by category."""

    categories: list[NotificationCategoryRead] = Field(default_factory=list)
    errors: list[NotificationErrorRead] = Field(default_factory=list)


class ActionInvocationRead(WireModel):
    """Outcome of invoking an action."""

    action_id: str
    notification_id: str
    label: str = ""


__all__ = [
    "ActionInvocationRead",
    "NotificationActionRead",
    "NotificationCategoryRead",
    "NotificationEntryRead",
    "NotificationErrorRead",
    "NotificationResponseRead",
    "WireModel",
]
