"""Tests for the SQLite event store."""

import pytest

from fleet_status.event_store.store import EventStore, StoreError
from fleet_status.models.events import Event


@pytest.fixture
def store():
    s = EventStore(db_path=":memory:")
    yield s
    s.close()


def _seed(store, vehicle_id, *pairs):
    store.append_many(
        vehicle_id, [Event(timestamp=t, state_label=label) for t, label in pairs]
    )


class TestAppend:
    def test_append_returns_event(self, store):
        event = Event(timestamp=1000, state_label="drive")
        assert store.append("v1", event) == event
        assert store.count() == 1

    def test_append_many_counts(self, store):
        _seed(store, "v1", (1000, "drive"), (2000, "idle"))
        _seed(store, "v2", (1500, "park"))
        assert store.count() == 3
        assert store.count("v1") == 2
        assert store.count("v3") == 0


class TestFindLastBefore:
    def test_returns_latest_strictly_before(self, store):
        _seed(store, "v1", (100, "park"), (500, "idle"), (1000, "drive"))
        event = store.find_last_before("v1", 1000)
        assert event == Event(timestamp=500, state_label="idle")

    def test_none_when_nothing_earlier(self, store):
        _seed(store, "v1", (1000, "drive"))
        assert store.find_last_before("v1", 1000) is None

    def test_scoped_to_vehicle(self, store):
        _seed(store, "v2", (500, "idle"))
        assert store.find_last_before("v1", 1000) is None

    def test_tie_prefers_latest_insert(self, store):
        _seed(store, "v1", (500, "idle"), (500, "drive"))
        assert store.find_last_before("v1", 1000).state_label == "drive"


class TestFindInRange:
    def test_inclusive_bounds_ascending(self, store):
        _seed(
            store, "v1",
            (3000, "idle"), (999, "park"), (1000, "drive"), (5000, "park"), (5001, "x"),
        )
        events = store.find_in_range("v1", 1000, 5000)
        assert [(e.timestamp, e.state_label) for e in events] == [
            (1000, "drive"), (3000, "idle"), (5000, "park"),
        ]

    def test_empty_window(self, store):
        _seed(store, "v1", (100, "park"))
        assert store.find_in_range("v1", 1000, 5000) == []

    def test_ties_keep_insertion_order(self, store):
        _seed(store, "v1", (2000, "idle"), (2000, "drive"))
        labels = [e.state_label for e in store.find_in_range("v1", 1000, 5000)]
        assert labels == ["idle", "drive"]


class TestFailures:
    def test_read_after_close_raises_store_error(self):
        s = EventStore()
        s.close()
        with pytest.raises(StoreError):
            s.find_in_range("v1", 0, 10)

    def test_unopenable_path_raises_store_error(self, tmp_path):
        missing = tmp_path / "no_such_dir" / "events.db"
        with pytest.raises(StoreError):
            EventStore(db_path=str(missing))

    def test_oversized_timestamp_raises_store_error(self):
        s = EventStore()
        with pytest.raises(StoreError):
            s.append("v1", Event(timestamp=10**20, state_label="drive"))
        s.close()

    def test_persists_to_file(self, tmp_path):
        path = str(tmp_path / "events.db")
        first = EventStore(db_path=path)
        _seed(first, "v1", (1000, "drive"))
        first.close()

        second = EventStore(db_path=path)
        assert second.count("v1") == 1
        second.close()
