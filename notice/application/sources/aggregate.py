"""Combine several notification sources into one response."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from notice.application.filters import FilterContext, NotificationSource
from notice.domain.entities import NotificationError, NotificationResponse

logger = logging.getLogger(__name__)


class AggregatingNotificationSource:
    """Query every named source and merge the results.

    A source that raises does not fail the request: the problem is logged and
    reported as a :class:`NotificationError` carrying the source name.
    """

    def __init__(self, sources: Mapping[str, NotificationSource]) -> None:
        self._sources = dict(sources)

    def __call__(self, context: FilterContext) -> NotificationResponse:
        rslt = NotificationResponse.empty()
        for name, source in self._sources.items():
            try:
                response = source(context)
            except Exception as exc:
                logger.exception("Notification source '%s' failed for %s", name, context.username)
                response = NotificationResponse(errors=[NotificationError(source=name, error=str(exc))])
            rslt = rslt.combine(response)
        return rslt


__all__ = ["AggregatingNotificationSource"]
