"""Named registry of notification filters."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .base import (
    FilterContext,
    NotificationFilter,
    NotificationFilterChain,
    NotificationSource,
    sort_by_order,
)

logger = logging.getLogger(__name__)


class FilterRegistry:
    """Hold filters by name and build chains from them.

    Third parties add behaviour by registering a filter; the invocation order
    comes from each filter's ``order`` unless an explicit list of names is
    supplied.
    """

    def __init__(self) -> None:
        self._filters: dict[str, NotificationFilter] = {}

    def register(self, name: str, notification_filter: NotificationFilter) -> None:
        if name in self._filters:
            raise ValueError(f"A filter named '{name}' is already registered")
        self._filters[name] = notification_filter
        logger.debug("Registered notification filter %s as '%s'", notification_filter, name)

    def unregister(self, name: str) -> NotificationFilter:
        try:
            return self._filters.pop(name)
        except KeyError as exc:
            raise ValueError(f"No filter named '{name}' is registered") from exc

    def names(self) -> list[str]:
        return list(self._filters)

    def get(self, name: str) -> NotificationFilter | None:
        return self._filters.get(name)

    def ordered(self, explicit_order: Sequence[str] = ()) -> list[NotificationFilter]:
        """Return the registered filters in invocation order (outermost first).

        ``explicit_order`` names filters from outermost to innermost; filters it
        does not mention run inside the listed ones, sorted by ``order``.
        """

        if not explicit_order:
            return sort_by_order(list(self._filters.values()))

        unknown = [name for name in explicit_order if name not in self._filters]
        if unknown:
            raise ValueError(f"Unknown filters in explicit order: {', '.join(unknown)}")
        if len(set(explicit_order)) != len(explicit_order):
            raise ValueError("Explicit filter order lists a filter more than once")

        listed = [self._filters[name] for name in explicit_order]
        rest = [
            notification_filter
            for name, notification_filter in self._filters.items()
            if name not in explicit_order
        ]
        return listed + sort_by_order(rest)

    def build_chain(
        self,
        source: NotificationSource,
        context: FilterContext,
        explicit_order: Sequence[str] = (),
    ) -> NotificationFilterChain:
        return NotificationFilterChain(self.ordered(explicit_order), source, context)


__all__ = ["FilterRegistry"]
