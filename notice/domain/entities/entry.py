"""A single notification and its open-ended collections."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from datetime import datetime

from .action import NotificationAction
from .attribute import NotificationAttribute
from .state import NotificationState


class NotificationEntry:
    """One notification delivered to a user.

    A handful of members are strongly typed because the framework handles them
    specially. Everything else goes into the open-ended collections:
    ``attributes`` (metadata shown to the user), ``available_actions`` (things
    the user can do) and ``states`` (where the entry is in its workflow).

    The collection setters copy their input, so a caller that keeps mutating its
    own list afterwards does not affect the entry. The getters return tuples and
    frozensets for the same reason. ``id`` is only required for entries that
    offer actions and must be unique within one user's notifications.
    """

    def __init__(
        self,
        *,
        title: str,
        source: str | None = None,
        id: str | None = None,
        url: str | None = None,
        link_text: str | None = None,
        priority: int = 0,
        due_date: datetime | None = None,
        image: str | None = None,
        body: str | None = None,
        attributes: Iterable[NotificationAttribute] = (),
        available_actions: Iterable[NotificationAction] = (),
        states: Iterable[NotificationState] = (),
    ) -> None:
        self.source = source
        self.id = id
        self.title = title
        self.url = url
        self.link_text = link_text
        self.priority = priority
        self.due_date = due_date
        self.image = image
        self.body = body
        self.attributes = attributes
        self.available_actions = available_actions
        self.states = states

    @property
    def attributes(self) -> tuple[NotificationAttribute, ...]:
        return tuple(self._attributes)

    @attributes.setter
    def attributes(self, attributes: Iterable[NotificationAttribute]) -> None:
        copied = list(attributes)
        names = [attribute.name for attribute in copied]
        if len(names) != len(set(names)):
            raise ValueError(f"Attribute names must be unique, got {names}")
        self._attributes = copied

    @property
    def available_actions(self) -> tuple[NotificationAction, ...]:
        return tuple(self._available_actions)

    @available_actions.setter
    def available_actions(self, actions: Iterable[NotificationAction]) -> None:
        attached: list[NotificationAction] = []
        for action in actions:
            # An action belongs to the entry it was most recently attached to
            action.target = self
            attached.append(action)
        self._available_actions = attached

    @property
    def states(self) -> frozenset[NotificationState]:
        return frozenset(self._states)

    @states.setter
    def states(self, states: Iterable[NotificationState]) -> None:
        self._states = set(states)

    def get_attribute(self, name: str) -> list[str] | None:
        """Return a copy of the values of attribute ``name``, if present."""

        for attribute in self._attributes:
            if attribute.name == name:
                return list(attribute.values)
        return None

    def find_action(self, action_id: str) -> NotificationAction | None:
        for action in self._available_actions:
            if action.id == action_id:
                return action
        return None

    def clone(self) -> "NotificationEntry":
        """Return a deep copy; attributes and actions are cloned too."""

        rslt = copy.copy(self)
        rslt.attributes = [attribute.clone() for attribute in self._attributes]
        rslt.available_actions = [action.clone() for action in self._available_actions]
        rslt.states = self._states
        return rslt

    def __repr__(self) -> str:
        return (
            f"NotificationEntry(id={self.id!r}, source={self.source!r}, title={self.title!r}, "
            f"priority={self.priority!r}, states={sorted(state.value for state in self._states)})"
        )


__all__ = ["NotificationEntry"]
