"""Chain-of-responsibility engine for notification filters.

A filter receives the :class:`FilterContext` of the current request and the
rest of the chain. It calls ``chain.do_filter()`` to obtain the response
produced by everything after it (ultimately the notification source), then
either returns that response untouched or clones it with
``clone_if_not_cloned()`` and returns the modified clone.

Because a filter does its work once the inner chain has returned, the filter
with the highest ``order`` is placed outermost and sees the final result of
every other filter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from notice.domain.entities import NotificationResponse

ORDER_VERY_EARLY = -1000
ORDER_EARLY = -100
ORDER_NORMAL = 0
ORDER_LATE = 100
ORDER_VERY_LATE = 1000


@dataclass(frozen=True)
class FilterContext:
    """Request-scoped information shared by every filter of one chain pass."""

    username: str
    request_url: str = ""
    context_path: str = ""
    csrf_token: str | None = None
    portal_instance: str | None = None
    attributes: Mapping[str, Any] = field(default_factory=dict)


NotificationSource = Callable[[FilterContext], NotificationResponse]
"""Terminal of a chain: produces the raw response for a request."""


class NotificationFilter(ABC):
    """Base class for response transformers."""

    def __init__(self, order: int = ORDER_NORMAL) -> None:
        self.order = order

    @abstractmethod
    def do_filter(
        self, context: FilterContext, chain: "NotificationFilterChain"
    ) -> NotificationResponse:
        """Return the response for ``context``, possibly modified."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(order={self.order})"


class NotificationFilterChain:
    """Immutable cursor over filters in invocation order (outermost first)."""

    def __init__(
        self,
        filters: Sequence[NotificationFilter],
        source: NotificationSource,
        context: FilterContext,
        *,
        position: int = 0,
    ) -> None:
        self._filters = tuple(filters)
        self._source = source
        self._context = context
        self._position = position

    @property
    def filters(self) -> tuple[NotificationFilter, ...]:
        return self._filters

    @property
    def context(self) -> FilterContext:
        return self._context

    def do_filter(self) -> NotificationResponse:
        """Run the filter at the cursor, or the source once filters are exhausted."""

        if self._position >= len(self._filters):
            return self._source(self._context)
        current = self._filters[self._position]
        remaining = NotificationFilterChain(
            self._filters, self._source, self._context, position=self._position + 1
        )
        return current.do_filter(self._context, remaining)


def sort_by_order(filters: Sequence[NotificationFilter]) -> list[NotificationFilter]:
    """Return ``filters`` in invocation order: highest ``order`` first.

    Filters sharing an order keep their relative position.
    """

    return sorted(filters, key=lambda notification_filter: -notification_filter.order)


def run_filters(
    filters: Sequence[NotificationFilter],
    source: NotificationSource,
    context: FilterContext,
) -> NotificationResponse:
    """Sort ``filters`` by order and run them over ``source``."""

    return NotificationFilterChain(sort_by_order(filters), source, context).do_filter()


__all__ = [
    "ORDER_EARLY",
    "ORDER_LATE",
    "ORDER_NORMAL",
    "ORDER_VERY_EARLY",
    "ORDER_VERY_LATE",
    "FilterContext",
    "NotificationFilter",
    "NotificationFilterChain",
    "NotificationSource",
    "run_filters",
    "sort_by_order",
]
