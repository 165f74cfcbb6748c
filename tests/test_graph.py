import pytest

from metro.domain.errors import (
    DuplicateStationError,
    InvalidWeightError,
    NoSuchConnectionError,
    UnknownStationError,
)
from metro.graph import AdjacencyStore, StationRegistry


def _store_with(*ids):
    store = AdjacencyStore()
    for station_id in ids:
        store.add_station(station_id)
    return store


def test_registry_issues_distinct_ids():
    registry = StationRegistry()

    a = registry.add("A")
    b = registry.add("B")

    assert a != b
    assert registry.find("A") == a
    assert registry.name_of(b) == "B"
    assert len(registry) == 2


def test_registry_rejects_duplicate_name():
    registry = StationRegistry()
    registry.add("A")

    with pytest.raises(DuplicateStationError) as excinfo:
        registry.add("A")

    assert excinfo.value.station_name == "A"
    assert len(registry) == 1


def test_registry_find_missing_returns_none():
    assert StationRegistry().find("Nowhere") is None


def test_registry_remove_invalidates_identity():
    registry = StationRegistry()
    a = registry.add("A")

    assert registry.remove("A") == a
    assert "A" not in registry
    with pytest.raises(UnknownStationError):
        registry.get(a)
    with pytest.raises(UnknownStationError):
        registry.remove("A")


def test_registry_never_reuses_ids():
    registry = StationRegistry()
    first = registry.add("A")
    registry.remove("A")

    assert registry.add("A") != first


def test_registry_iterates_in_insertion_order():
    registry = StationRegistry()
    for name in ["D", "B", "A"]:
        registry.add(name)

    assert [station.name for station in registry] == ["D", "B", "A"]


def test_connect_is_symmetric():
    store = _store_with(0, 1)

    store.connect(0, 1, 5)

    assert store.weight(0, 1) == 5
    assert store.weight(1, 0) == 5
    assert store.edge_count() == 1


def test_connect_overwrites_weight():
    store = _store_with(0, 1)

    store.connect(0, 1, 5)
    store.connect(1, 0, 9)

    assert store.neighbors_of(0) == [(1, 9)]
    assert store.neighbors_of(1) == [(0, 9)]
    assert store.edge_count() == 1


def test_connect_unknown_endpoint_changes_nothing():
    store = _store_with(0)

    with pytest.raises(UnknownStationError):
        store.connect(0, 7, 3)

    assert store.neighbors_of(0) == []


@pytest.mark.parametrize("weight", [-1, 2.5, "3", True])
def test_connect_rejects_invalid_weight(weight):
    store = _store_with(0, 1)

    with pytest.raises(InvalidWeightError):
        store.connect(0, 1, weight)

    assert not store.has_edge(0, 1)


def test_zero_weight_is_valid():
    store = _store_with(0, 1)

    store.connect(0, 1, 0)

    assert store.has_edge(0, 1)
    assert store.weight(1, 0) == 0


def test_disconnect_removes_both_directions():
    store = _store_with(0, 1)
    store.connect(0, 1, 4)

    store.disconnect(1, 0)

    assert not store.has_edge(0, 1)
    assert not store.has_edge(1, 0)


def test_disconnect_missing_edge_raises():
    store = _store_with(0, 1)

    with pytest.raises(NoSuchConnectionError):
        store.disconnect(0, 1)


def test_self_loop_can_be_added_and_removed():
    store = _store_with(0)

    store.connect(0, 0, 2)
    assert store.edge_count() == 1

    store.disconnect(0, 0)
    assert store.neighbors_of(0) == []


def test_neighbors_keep_first_connection_order():
    store = _store_with(0, 1, 2, 3)
    store.connect(0, 3, 1)
    store.connect(0, 1, 1)
    store.connect(0, 2, 1)
    store.connect(0, 3, 8)

    assert [n for n, _ in store.neighbors_of(0)] == [3, 1, 2]


def test_remove_all_edges_touching():
    store = _store_with(0, 1, 2)
    store.connect(0, 1, 1)
    store.connect(0, 2, 2)
    store.connect(1, 2, 3)

    removed = store.remove_all_edges_touching(0)

    assert removed == 2
    assert store.neighbors_of(0) == []
    assert store.neighbors_of(1) == [(2, 3)]
    assert store.neighbors_of(2) == [(1, 3)]


def test_discard_station_forgets_it():
    store = _store_with(0, 1)
    store.connect(0, 1, 1)

    store.discard_station(1)

    assert 1 not in store
    assert store.stations() == [0]
    assert store.neighbors_of(0) == []
