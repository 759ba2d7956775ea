"""Aggregate passed through the notification filter chain."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .entry import NotificationEntry


@dataclass
class NotificationCategory:
    """Entries sharing the same category title."""

    title: str
    entries: list[NotificationEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.entries = list(self.entries)

    def clone(self) -> "NotificationCategory":
        return NotificationCategory(
            title=self.title, entries=[entry.clone() for entry in self.entries]
        )


@dataclass(frozen=True)
class NotificationError:
    """Problem reported by a source that could not produce its notifications."""

    source: str
    error: str


class NotificationResponse:
    """Categories and errors gathered for one user.

    Responses may be shared across requests (for example when a source caches
    them), so filters must not modify one they did not create. A filter that
    needs to change the response calls :meth:`clone_if_not_cloned` and works on
    the result; inside a single pass the clone is flagged so further calls hand
    back the same object instead of copying again.
    """

    def __init__(
        self,
        categories: Iterable[NotificationCategory] = (),
        errors: Iterable[NotificationError] = (),
    ) -> None:
        self._categories = list(categories)
        self._errors = list(errors)
        self._cloned = False

    @classmethod
    def empty(cls) -> "NotificationResponse":
        return cls()

    @property
    def categories(self) -> tuple[NotificationCategory, ...]:
        return tuple(self._categories)

    @categories.setter
    def categories(self, categories: Iterable[NotificationCategory]) -> None:
        self._categories = list(categories)

    @property
    def errors(self) -> tuple[NotificationError, ...]:
        return tuple(self._errors)

    @errors.setter
    def errors(self, errors: Iterable[NotificationError]) -> None:
        self._errors = list(errors)

    @property
    def cloned(self) -> bool:
        return self._cloned

    @property
    def size(self) -> int:
        """Total number of entries across all categories."""

        return sum(len(category.entries) for category in self._categories)

    def entries(self) -> list[NotificationEntry]:
        return [entry for category in self._categories for entry in category.entries]

    def clone(self) -> "NotificationResponse":
        """Return a deep copy flagged as cloned."""

        rslt = NotificationResponse(
            categories=[category.clone() for category in self._categories],
            errors=self._errors,
        )
        rslt._cloned = True
        return rslt

    def clone_if_not_cloned(self) -> "NotificationResponse":
        """Return ``self`` when already a clone, otherwise a fresh deep copy."""

        if self._cloned:
            return self
        return self.clone()

    def combine(self, other: "NotificationResponse") -> "NotificationResponse":
        """Return a new response holding the entries and errors of both.

        Categories with the same title are merged, keeping first-seen order.
        Neither input is modified.
        """

        merged: dict[str, NotificationCategory] = {}
        for category in (*self._categories, *other._categories):
            target = merged.get(category.title)
            if target is None:
                merged[category.title] = category.clone()
            else:
                target.entries.extend(entry.clone() for entry in category.entries)
        return NotificationResponse(
            categories=merged.values(), errors=[*self._errors, *other._errors]
        )

    def find_entry(self, entry_id: str) -> NotificationEntry | None:
        for category in self._categories:
            for entry in category.entries:
                if entry.id == entry_id:
                    return entry
        return None

    def filter_entries(
        self, predicate: Callable[[NotificationEntry], bool]
    ) -> "NotificationResponse":
        """Return a new response keeping only entries matching ``predicate``.

        Categories left without entries are dropped.
        """

        categories: list[NotificationCategory] = []
        for category in self._categories:
            entries = [entry.clone() for entry in category.entries if predicate(entry)]
            if entries:
                categories.append(NotificationCategory(title=category.title, entries=entries))
        return NotificationResponse(categories=categories, errors=self._errors)

    def __repr__(self) -> str:
        return (
            f"NotificationResponse(categories={len(self._categories)}, entries={self.size}, "
            f"errors={len(self._errors)}, cloned={self._cloned})"
        )


__all__ = ["NotificationCategory", "NotificationError", "NotificationResponse"]
