"""Open-ended metadata attached to a notification entry."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class NotificationAttribute:
    """A named, ordered list of string values."""

    name: str
    values: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.values = list(self.values)

    def clone(self) -> "NotificationAttribute":
        return NotificationAttribute(name=self.name, values=list(self.values))


__all__ = ["NotificationAttribute"]
