"""Filter adding REST invocation URLs to actions."""

from __future__ import annotations

from urllib.parse import quote, urlsplit

from notice.domain.entities import NotificationResponse
from notice.utils import is_blank

from .base import ORDER_VERY_LATE, FilterContext, NotificationFilter, NotificationFilterChain

REST_API_URL_FORMAT = "{url_base}/api/v2/action/{action_id}/{entry_id}?_csrf={token}"
"""URL base (scheme, host, optional port and context path), action id, entry id, token."""


def compute_url_base(request_url: str, context_path: str) -> str:
    """Return scheme, host, port and context path of ``request_url``.

    The context path is located after the host part of the URL and everything
    following it is dropped.
    """

    parts = urlsplit(request_url)
    origin = f"{parts.scheme}://{parts.netloc}" if parts.scheme else ""
    if not context_path:
        return origin
    index = request_url.find(context_path, len(origin))
    if index < 0:
        return origin + context_path
    return request_url[:index] + context_path


class ApiUrlSupportFilter(NotificationFilter):
    """Give every remotely invocable action an ``api_url``.

    An action qualifies when it supports REST invocation, has an id and is
    attached to an entry that has an id; other actions can only be used from the portal and are left alone.
    Filters commonly add actions, so this one runs very late.
    """

    def __init__(self, order: int = ORDER_VERY_LATE) -> None:
        super().__init__(order)

    def do_filter(
        self, context: FilterContext, chain: NotificationFilterChain
    ) -> NotificationResponse:
        response = chain.do_filter()
        rslt = response.clone_if_not_cloned()

        url_base = compute_url_base(context.request_url, context.context_path)
        token = quote(context.csrf_token or "", safe="")
        for entry in rslt.entries():
            for action in entry.available_actions:
                target = action.target
                if not action.supports_api() or is_blank(action.id):
                    continue
                if target is None or is_blank(target.id):
                    continue
                action.api_url = REST_API_URL_FORMAT.format(
                    url_base=url_base,
                    action_id=quote(action.id, safe=""),
                    entry_id=quote(target.id, safe=""),
                    token=token,
                )
        return rslt


__all__ = ["ApiUrlSupportFilter", "REST_API_URL_FORMAT", "compute_url_base"]
