"""Behaviors a recipient can invoke on a notification entry.

Every action kind implements the same fixed set of capabilities: it carries an
optional ``id``, a display ``label``, an optional ``api_url`` computed late in
the filter chain, a non-owning reference to its ``target`` entry, and it can be
invoked either from a portal interaction or through the REST API. Concrete
kinds register themselves in :data:`ACTION_TYPES` under their ``kind`` tag so
wire payloads can be turned back into the right class.
"""

from __future__ import annotations

import copy
import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, TypeVar

from notice.domain.exceptions import ActionTargetError
from notice.domain.services import NotificationHistoryService, PreferenceStore

if TYPE_CHECKING:
    from .entry import NotificationEntry


@dataclass(frozen=True)
class PortalActionContext:
    """Collaborators available when an action is invoked from the portal UI."""

    preferences: PreferenceStore


@dataclass(frozen=True)
class ApiActionContext:
    """Collaborators available when an action is invoked through the REST API."""

    username: str
    history: NotificationHistoryService


class NotificationAction(ABC):
    """Base class for every action kind."""

    kind: ClassVar[str]

    def __init__(self, label: str = "", *, id: str | None = None) -> None:
        self.id = id
        self.label = label
        self.api_url: str | None = None
        self._target_ref: weakref.ReferenceType[NotificationEntry] | None = None

    @property
    def target(self) -> "NotificationEntry | None":
        if self._target_ref is None:
            return None
        return self._target_ref()

    @target.setter
    def target(self, entry: "NotificationEntry | None") -> None:
        self._target_ref = weakref.ref(entry) if entry is not None else None

    def require_target(self) -> "NotificationEntry":
        """Return the attached entry or fail when the action was never attached."""

        entry = self.target
        if entry is None:
            raise ActionTargetError(
                f"{type(self).__name__} (id={self.id!r}) is not attached to an entry"
            )
        return entry

    def supports_api(self) -> bool:
        """Return whether the action may be invoked through the REST API."""

        return True

    @abstractmethod
    def invoke_portal(self, context: PortalActionContext) -> None:
        """Perform the action for a portal interaction."""

    @abstractmethod
    def invoke_api(self, context: ApiActionContext) -> None:
        """Perform the action for a REST API call."""

    def clone(self) -> "NotificationAction":
        return copy.copy(self)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, NotificationAction):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.kind, self.id))

    def __repr__(self) -> str:
        target = self.target
        return (
            f"{type(self).__name__}(id={self.id!r}, label={self.label!r}, "
            f"api_url={self.api_url!r}, target={target.id if target else None!r})"
        )


ACTION_TYPES: dict[str, type[NotificationAction]] = {}

_ActionT = TypeVar("_ActionT", bound=type[NotificationAction])


def register_action(cls: _ActionT) -> _ActionT:
    """Class decorator adding ``cls`` to :data:`ACTION_TYPES` under its ``kind``."""

    kind = cls.kind
    existing = ACTION_TYPES.get(kind)
    if existing is not None and existing is not cls:
        raise ValueError(f"Action kind '{kind}' is already registered to {existing.__name__}")
    ACTION_TYPES[kind] = cls
    return cls


def action_type_for(kind: str) -> type[NotificationAction]:
    """Return the action class registered for ``kind``."""

    try:
        return ACTION_TYPES[kind]
    except KeyError as exc:
        raise ValueError(f"Unknown action kind '{kind}'") from exc


__all__ = [
    "ACTION_TYPES",
    "ApiActionContext",
    "NotificationAction",
    "PortalActionContext",
    "action_type_for",
    "register_action",
]
