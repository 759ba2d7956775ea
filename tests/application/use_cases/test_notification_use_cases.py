"""Tests for the fetch and invoke use cases."""

from __future__ import annotations

import pytest

from notice.application.filters import FilterContext, build_default_registry
from notice.application.use_cases.notifications import (
    fetch_notifications,
    find_action,
    invoke_api_action,
    invoke_portal_action,
)
from notice.domain.entities import (
    ApiActionContext,
    NotificationCategory,
    NotificationEntry,
    NotificationResponse,
    NotificationState,
    PortalActionContext,
    get_read_notices,
)
from notice.domain.exceptions import NotificationNotFoundError
from notice.infrastructure.history import InMemoryHistoryService
from notice.infrastructure.preferences import InMemoryPreferenceStore


@pytest.fixture()
def shared() -> NotificationResponse:
    return NotificationResponse(
        categories=[NotificationCategory("Academic", [NotificationEntry(id="N1", title="Hold")])]
    )


@pytest.fixture()
def history() -> InMemoryHistoryService:
    return InMemoryHistoryService()


@pytest.fixture()
def preferences() -> InMemoryPreferenceStore:
    return InMemoryPreferenceStore()


def _fetch(shared, history, preferences, **context_values) -> NotificationResponse:
    registry = build_default_registry(history, lambda username, instance: preferences)
    return fetch_notifications(
        registry=registry,
        source=lambda context: shared,
        context=FilterContext(username="U1", **context_values),
    )


def test_find_action_reports_missing_entry_and_action(shared, history, preferences) -> None:
    response = _fetch(shared, history, preferences)

    assert find_action(response, action_id="read", notification_id="N1").id == "read"
    with pytest.raises(NotificationNotFoundError):
        find_action(response, action_id="read", notification_id="missing")
    with pytest.raises(NotificationNotFoundError):
        find_action(response, action_id="hide", notification_id="N1")


def test_api_invocation_marks_entry_read(shared, history, preferences) -> None:
    response = _fetch(shared, history, preferences)

    invoke_api_action(
        response,
        action_id="read",
        notification_id="N1",
        context=ApiActionContext(username="U1", history=history),
    )

    refreshed = _fetch(shared, history, preferences)
    assert NotificationState.READ in refreshed.find_entry("N1").states
    assert NotificationState.READ not in shared.find_entry("N1").states


def test_portal_invocation_toggles_preference(shared, history, preferences) -> None:
    response = _fetch(shared, history, preferences, portal_instance="portlet-1")

    invoke_portal_action(
        response,
        action_id="read",
        notification_id="N1",
        context=PortalActionContext(preferences=preferences),
    )
    assert get_read_notices(preferences) == {"N1"}

    refreshed = _fetch(shared, history, preferences, portal_instance="portlet-1")
    assert refreshed.find_entry("N1").available_actions[0].label == "MARK AS UNREAD"

    invoke_portal_action(
        refreshed,
        action_id="read",
        notification_id="N1",
        context=PortalActionContext(preferences=preferences),
    )
    assert get_read_notices(preferences) == set()
