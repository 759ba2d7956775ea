"""Use case running the filter chain for one request."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from notice.application.filters import FilterContext, FilterRegistry, NotificationSource
from notice.domain.entities import NotificationResponse

logger = logging.getLogger(__name__)


def fetch_notifications(
    *,
    registry: FilterRegistry,
    source: NotificationSource,
    context: FilterContext,
    explicit_order: Sequence[str] = (),
) -> NotificationResponse:
    """Return the filtered notifications for ``context.username``."""

    chain = registry.build_chain(source, context, explicit_order)
    response = chain.do_filter()
    logger.debug(
        "Filtered %d notifications for %s through %d filters",
        response.size,
        context.username,
        len(chain.filters),
    )
    return response
