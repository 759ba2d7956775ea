"""Conversion between notification entities and their wire schemas."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from notice.domain.entities import (
    NotificationAction,
    NotificationAttribute,
    NotificationCategory,
    NotificationEntry,
    NotificationError,
    NotificationResponse,
    action_type_for,
)
from notice.interfaces.api.schemas import (
    NotificationActionRead,
    NotificationCategoryRead,
    NotificationEntryRead,
    NotificationErrorRead,
    NotificationResponseRead,
)


def attributes_to_wire(attributes: Iterable[NotificationAttribute]) -> dict[str, list[str]]:
    """Collapse attributes into a mapping of name to values."""

    return {attribute.name: list(attribute.values) for attribute in attributes}


def attributes_from_wire(payload: Mapping[str, Sequence[str]]) -> list[NotificationAttribute]:
    """Expand a name-to-values mapping back into attributes, keeping key order."""

    return [NotificationAttribute(name=name, values=list(values)) for name, values in payload.items()]


def action_to_schema(action: NotificationAction) -> NotificationActionRead:
    return NotificationActionRead(
        kind=action.kind, id=action.id, label=action.label, api_url=action.api_url
    )


def action_from_schema(schema: NotificationActionRead) -> NotificationAction:
    """Build the registered action class for ``schema.kind``.

    ``api_url`` is computed per request and is not restored.
    """

    action_cls = action_type_for(schema.kind)
    return action_cls(schema.label, id=schema.id)


def entry_to_schema(entry: NotificationEntry) -> NotificationEntryRead:
    return NotificationEntryRead(
        source=entry.source,
        id=entry.id,
        title=entry.title,
        url=entry.url,
        link_text=entry.link_text,
        priority=entry.priority,
        due_date=entry.due_date,
        image=entry.image,
        body=entry.body,
        attributes=attributes_to_wire(entry.attributes),
        available_actions=[action_to_schema(action) for action in entry.available_actions],
        states=sorted(entry.states, key=lambda state: state.value),
    )


def entry_from_schema(schema: NotificationEntryRead) -> NotificationEntry:
    return NotificationEntry(
        source=schema.source,
        id=schema.id,
        title=schema.title,
        url=schema.url,
        link_text=schema.link_text,
        priority=schema.priority,
        due_date=schema.due_date,
        image=schema.image,
        body=schema.body,
        attributes=attributes_from_wire(schema.attributes),
        available_actions=[action_from_schema(action) for action in schema.available_actions],
        states=schema.states,
    )


def response_to_schema(response: NotificationResponse) -> NotificationResponseRead:
    return NotificationResponseRead(
        categories=[
            NotificationCategoryRead(
                title=category.title,
                entries=[entry_to_schema(entry) for entry in category.entries],
            )
            for category in response.categories
        ],
        errors=[
            NotificationErrorRead(source=error.source, error=error.error)
            for error in response.errors
        ],
    )


def response_from_schema(schema: NotificationResponseRead) -> NotificationResponse:
    return NotificationResponse(
        categories=[
            NotificationCategory(
                title=category.title,
                entries=[entry_from_schema(entry) for entry in category.entries],
            )
            for category in schema.categories
        ],
        errors=[NotificationError(source=error.source, error=error.error) for error in schema.errors],
    )


def dump_response(response: NotificationResponse) -> dict[str, Any]:
    """Return the JSON-ready wire representation of ``response``."""

    return response_to_schema(response).model_dump(by_alias=True, exclude_none=True, mode="json")


def load_response(payload: Mapping[str, Any]) -> NotificationResponse:
    """Parse a wire payload into a :class:`NotificationResponse`."""

    return response_from_schema(NotificationResponseRead.model_validate(payload))


__all__ = [
    "action_from_schema",
    "action_to_schema",
    "attributes_from_wire",
    "attributes_to_wire",
    "dump_response",
    "entry_from_schema",
    "entry_to_schema",
    "load_response",
    "response_from_schema",
    "response_to_schema",
]
