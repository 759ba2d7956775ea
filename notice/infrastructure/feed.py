"""Notification source backed by a JSON feed on disk."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from notice.application.filters import FilterContext
from notice.domain.entities import NotificationResponse
from notice.interfaces.api.serialization import load_response

logger = logging.getLogger(__name__)


class StaticNotificationSource:
    """Serve the same notifications, read once from ``path``, to every user.

    The file uses the REST wire format. The parsed response is shared by all
    requests.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._response: NotificationResponse | None = None
        self._lock = threading.Lock()

    def __call__(self, context: FilterContext) -> NotificationResponse:
        with self._lock:
            if self._response is None:
                self._response = self._load()
            return self._response

    def _load(self) -> NotificationResponse:
        with self._path.open("r", encoding="utf-8") as fp:
            payload = json.load(fp)
        response = load_response(payload)
        logger.info("Loaded %d notifications from %s", response.size, self._path)
        return response


__all__ = ["StaticNotificationSource"]
