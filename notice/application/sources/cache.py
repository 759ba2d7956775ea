"""Per-user cache in front of a notification source."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from notice.application.filters import FilterContext, NotificationSource
from notice.domain.entities import NotificationResponse

logger = logging.getLogger(__name__)


class CachingNotificationSource:
    """Return the same response object to every request of a user until it expires.

    The cached response is shared between concurrent requests, which is why
    filters never modify a response they did not clone. Expired responses are
    dropped when looked up and whenever a new one is stored; at most
    ``max_entries`` users are kept, the oldest being evicted first.
    """

    def __init__(
        self,
        delegate: NotificationSource,
        *,
        ttl_seconds: float,
        max_entries: int = 10_000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._delegate = delegate
        self._ttl_seconds = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        # Ordered oldest first
        self._entries: dict[str, tuple[float, NotificationResponse]] = {}
        self._lock = threading.Lock()

    def __call__(self, context: FilterContext) -> NotificationResponse:
        if self._ttl_seconds <= 0:
            return self._delegate(context)

        now = self._clock()
        with self._lock:
            cached = self._entries.get(context.username)
            if cached is not None:
                if now - cached[0] < self._ttl_seconds:
                    return cached[1]
                del self._entries[context.username]

        response = self._delegate(context)
        with self._lock:
            self._entries.pop(context.username, None)
            self._prune(now)
            self._entries[context.username] = (now, response)
        logger.debug("Cached %d notifications for %s", response.size, context.username)
        return response

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def evict(self, username: str) -> None:
        with self._lock:
            self._entries.pop(username, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _prune(self, now: float) -> None:
        expired = [
            username
            for username, (stored_at, _) in self._entries.items()
            if now - stored_at >= self._ttl_seconds
        ]
        for username in expired:
            del self._entries[username]
        while self._entries and len(self._entries) >= self._max_entries:
            del self._entries[next(iter(self._entries))]


__all__ = ["CachingNotificationSource"]
