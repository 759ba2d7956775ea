"""Tests for the notification entry entity."""

from __future__ import annotations

import pytest

from notice.domain.entities import (
    NotificationAttribute,
    NotificationEntry,
    NotificationState,
    ReadAction,
)


def _build_entry() -> NotificationEntry:
    return NotificationEntry(
        id="N1",
        source="Office of the Registrar",
        title="Registration hold",
        priority=1,
        attributes=[
            NotificationAttribute("category", ["Academic"]),
            NotificationAttribute("department", ["Physics", "Earth Sciences"]),
        ],
        available_actions=[ReadAction(id="read")],
        states=[NotificationState.ISSUED],
    )


def test_attribute_setter_copies_caller_list() -> None:
    attributes = [NotificationAttribute("category", ["Academic"])]
    entry = NotificationEntry(title="Hold")
    entry.attributes = attributes

    attributes.append(NotificationAttribute("department", ["Physics"]))
    attributes.clear()

    assert [attribute.name for attribute in entry.attributes] == ["category"]


def test_action_setter_copies_caller_list() -> None:
    actions = [ReadAction(id="read")]
    entry = NotificationEntry(title="Hold", id="N1")
    entry.available_actions = actions

    actions.append(ReadAction(id="other"))

    assert [action.id for action in entry.available_actions] == ["read"]


def test_state_setter_copies_caller_set() -> None:
    states = {NotificationState.READ}
    entry = NotificationEntry(title="Hold")
    entry.states = states

    states.add(NotificationState.DISMISSED)

    assert entry.states == frozenset({NotificationState.READ})


def test_collections_are_exposed_read_only() -> None:
    entry = _build_entry()

    assert isinstance(entry.attributes, tuple)
    assert isinstance(entry.available_actions, tuple)
    assert isinstance(entry.states, frozenset)


def test_duplicate_attribute_names_are_rejected() -> None:
    with pytest.raises(ValueError):
        NotificationEntry(
            title="Hold",
            attributes=[
                NotificationAttribute("category", ["A"]),
                NotificationAttribute("category", ["B"]),
            ],
        )


def test_setting_actions_attaches_them_to_the_entry() -> None:
    first = NotificationEntry(title="First", id="N1")
    second = NotificationEntry(title="Second", id="N2")
    action = ReadAction(id="read")

    first.available_actions = [action]
    assert action.target is first

    second.available_actions = [action]
    assert action.target is second
    assert all(attached.target is second for attached in second.available_actions)


def test_clone_is_independent_of_the_original() -> None:
    original = _build_entry()
    clone = original.clone()

    clone_attribute = clone.attributes[0]
    clone_attribute.values.append("Mutated")
    clone_action = clone.available_actions[0]
    clone_action.label = "Changed"
    clone_action.api_url = "https://example.edu/api"
    clone.states = clone.states | {NotificationState.READ}

    assert original.attributes[0].values == ["Academic"]
    assert original.available_actions[0].label == "MARK AS READ"
    assert original.available_actions[0].api_url is None
    assert original.states == frozenset({NotificationState.ISSUED})


def test_clone_creates_new_attribute_and_action_objects() -> None:
    original = _build_entry()
    clone = original.clone()

    assert clone is not original
    assert clone.attributes[0] is not original.attributes[0]
    assert clone.available_actions[0] is not original.available_actions[0]
    assert clone.available_actions[0] == original.available_actions[0]
    assert clone.available_actions[0].target is clone
    assert original.available_actions[0].target is original


def test_get_attribute_returns_a_copy() -> None:
    entry = _build_entry()

    values = entry.get_attribute("department")
    assert values == ["Physics", "Earth Sciences"]
    values.append("Other")

    assert entry.get_attribute("department") == ["Physics", "Earth Sciences"]
    assert entry.get_attribute("missing") is None


def test_find_action_by_id() -> None:
    entry = _build_entry()

    assert entry.find_action("read") is entry.available_actions[0]
    assert entry.find_action("hide") is None
