from __future__ import annotations

import json
from pathlib import Path

import pytest

from notice.domain.entities import (
    NotificationAttribute,
    NotificationCategory,
    NotificationEntry,
    NotificationError,
    NotificationResponse,
    NotificationState,
    ReadAction,
)
from notice.interfaces.api.serialization import dump_response, load_response

DATA_FILE = Path(__file__).resolve().parents[3] / "data" / "notifications.json"


def _response() -> NotificationResponse:
    action = ReadAction(id="read")
    entry = NotificationEntry(
        source="Office of the Registrar",
        id="N1",
        title="Registration hold",
        link_text="Details",
        priority=1,
        attributes=[
            NotificationAttribute("category", ["Academic"]),
            NotificationAttribute("department", ["Physics", "Chemistry"]),
        ],
        available_actions=[action],
        states=[NotificationState.READ, NotificationState.ISSUED],
    )
    action.api_url = "https://host/api/v2/action/read/N1?_csrf=tok"
    return NotificationResponse(
        categories=[NotificationCategory("Academic", [entry])],
        errors=[NotificationError(source="bursar", error="timeout")],
    )


def test_dump_uses_camel_case_and_collapses_attributes() -> None:
    payload = dump_response(_response())

    entry = payload["categories"][0]["entries"][0]
    assert entry["linkText"] == "Details"
    assert entry["attributes"] == {
        "category": ["Academic"],
        "department": ["Physics", "Chemistry"],
    }
    assert entry["availableActions"] == [
        {
            "kind": "read",
            "id": "read",
            "label": "MARK AS READ",
            "apiUrl": "https://host/api/v2/action/read/N1?_csrf=tok",
        }
    ]
    assert entry["states"] == ["ISSUED", "READ"]
    assert "dueDate" not in entry
    assert payload["errors"] == [{"source": "bursar", "error": "timeout"}]


def test_load_restores_entities() -> None:
    restored = load_response(dump_response(_response()))

    entry = restored.find_entry("N1")
    assert entry.link_text == "Details"
    assert entry.get_attribute("department").values == ["Physics", "Chemistry"]
    assert entry.states == frozenset({NotificationState.READ, NotificationState.ISSUED})
    action = entry.available_actions[0]
    assert isinstance(action, ReadAction)
    assert action.target is entry
    assert action.api_url is None
    assert restored.errors == (NotificationError(source="bursar", error="timeout"),)


def test_unknown_action_kind_is_rejected() -> None:
    payload = {
        "categories": [
            {
                "title": "Academic",
                "entries": [
                    {"id": "N1", "title": "Hold", "availableActions": [{"kind": "teleport"}]}
                ],
            }
        ]
    }

    with pytest.raises(ValueError):
        load_response(payload)


def test_bundled_feed_parses() -> None:
    response = load_response(json.loads(DATA_FILE.read_text(encoding="utf-8")))

    assert [category.title for category in response.categories] == ["Library", "Academic"]
    hold = response.find_entry("registrar-hold-1")
    assert hold.get_attribute("department").values == [
        "Physics and Astronomy",
        "Earth Sciences",
    ]
    assert response.find_entry("library-overdue-1").due_date is not None
