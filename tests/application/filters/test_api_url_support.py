"""Tests for the filter decorating actions with REST invocation URLs."""

from __future__ import annotations

import pytest

from notice.application.filters import (
    ApiUrlSupportFilter,
    FilterContext,
    compute_url_base,
    run_filters,
)
from notice.domain.entities import (
    NotificationCategory,
    NotificationEntry,
    NotificationResponse,
    ReadAction,
)


def _response(*entries: NotificationEntry) -> NotificationResponse:
    return NotificationResponse(categories=[NotificationCategory("Academic", list(entries))])


def _context(csrf_token: str | None = "tok123") -> FilterContext:
    return FilterContext(
        username="U1",
        request_url="https://host/app/render",
        context_path="/app",
        csrf_token=csrf_token,
    )


def test_decorates_action_with_api_url() -> None:
    shared = _response(
        NotificationEntry(id="N1", title="Hold", available_actions=[ReadAction(id="A1")])
    )

    result = run_filters([ApiUrlSupportFilter()], lambda context: shared, _context())

    action = result.categories[0].entries[0].available_actions[0]
    assert action.api_url == "https://host/app/api/v2/action/A1/N1?_csrf=tok123"
    assert shared.categories[0].entries[0].available_actions[0].api_url is None


def test_action_with_blank_id_gets_no_api_url() -> None:
    shared = _response(
        NotificationEntry(
            id="N1",
            title="Hold",
            available_actions=[ReadAction(id=""), ReadAction(id="A1")],
        )
    )

    result = run_filters([ApiUrlSupportFilter()], lambda context: shared, _context())

    blank, addressable = result.categories[0].entries[0].available_actions
    assert blank.api_url is None
    assert addressable.api_url is not None


def test_entry_without_id_gets_no_api_url() -> None:
    shared = _response(
        NotificationEntry(id=None, title="Hold", available_actions=[ReadAction(id="A1")])
    )

    result = run_filters([ApiUrlSupportFilter()], lambda context: shared, _context())

    assert result.categories[0].entries[0].available_actions[0].api_url is None


def test_missing_token_is_rendered_empty() -> None:
    shared = _response(
        NotificationEntry(id="N1", title="Hold", available_actions=[ReadAction(id="A1")])
    )

    result = run_filters(
        [ApiUrlSupportFilter()], lambda context: shared, _context(csrf_token=None)
    )

    action = result.categories[0].entries[0].available_actions[0]
    assert action.api_url == "https://host/app/api/v2/action/A1/N1?_csrf="


@pytest.mark.parametrize(
    ("request_url", "context_path", "expected"),
    [
        ("https://host/app/render", "/app", "https://host/app"),
        ("http://host:8080/portal/p/notice/render", "/portal", "http://host:8080/portal"),
        ("https://host/render", "", "https://host"),
        ("https://app.example.edu/app/render", "/app", "https://app.example.edu/app"),
    ],
)
def test_compute_url_base(request_url: str, context_path: str, expected: str) -> None:
    assert compute_url_base(request_url, context_path) == expected
