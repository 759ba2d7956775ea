from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from notice.domain.exceptions import PreferenceStoreError
from notice.infrastructure.preferences import InMemoryPreferenceStore, SqlAlchemyPreferenceStore


def _store(session_factory, username: str = "U1", instance_id: str = "portlet-1"):
    return SqlAlchemyPreferenceStore(session_factory, username=username, instance_id=instance_id)


def test_missing_preference_returns_default(session_factory) -> None:
    store = _store(session_factory)

    assert store.get_values("ids") == []
    assert store.get_values("ids", ["a"]) == ["a"]


def test_values_are_pending_until_stored(session_factory) -> None:
    writer = _store(session_factory)
    writer.set_values("ids", ["N1", "N2"])

    assert writer.get_values("ids") == ["N1", "N2"]
    assert _store(session_factory).get_values("ids") == []

    writer.store()

    assert _store(session_factory).get_values("ids") == ["N1", "N2"]


def test_storing_again_replaces_values(session_factory) -> None:
    store = _store(session_factory)
    store.set_values("ids", ["N1"])
    store.store()
    store.set_values("ids", [])
    store.store()

    assert _store(session_factory).get_values("ids", ["default"]) == []


def test_preferences_are_scoped_to_user_and_instance(session_factory) -> None:
    store = _store(session_factory)
    store.set_values("ids", ["N1"])
    store.store()

    assert _store(session_factory, username="U2").get_values("ids") == []
    assert _store(session_factory, instance_id="portlet-2").get_values("ids") == []


class BrokenSession:
    def query(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    def rollback(self) -> None:
        pass

    def close(self) -> None:
        pass


def test_storage_failures_raise_preference_store_error() -> None:
    store = SqlAlchemyPreferenceStore(BrokenSession, username="U1", instance_id="portlet-1")

    with pytest.raises(PreferenceStoreError):
        store.get_values("ids")

    store.set_values("ids", ["N1"])
    with pytest.raises(PreferenceStoreError):
        store.store()


def test_in_memory_store_counts_writes() -> None:
    store = InMemoryPreferenceStore({"ids": ["N1"]})

    store.set_values("ids", ["N1", "N2"])
    assert store.stored_values("ids") == ["N1"]

    store.store()
    assert store.stored_values("ids") == ["N1", "N2"]
    assert store.store_count == 1
