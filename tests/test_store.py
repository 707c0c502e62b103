"""Tests for the in-memory coaster store and ID generation."""

import threading

import pytest

from coaster_api.app.core.store import SEED_COASTERS, CoasterStore, IdGenerator
from coaster_api.app.schemas.coaster import Coaster, CoasterCreate


def test_default_store_holds_seed_record():
    store = CoasterStore()

    assert len(store) == 1
    assert "id1" in store
    seed = store.get("id1")
    assert seed == SEED_COASTERS[0]
    assert seed.name == "Furry 325"
    assert seed.manufacturer == "B+M"
    assert seed.in_park == "CaroWinds"
    assert seed.height == 99


def test_empty_seed_gives_empty_store():
    store = CoasterStore(seed=[])

    assert len(store) == 0
    assert store.snapshot() == []
    assert store.ids() == []


def test_seed_without_id_rejected():
    with pytest.raises(ValueError):
        CoasterStore(seed=[Coaster(id="", name="Nameless")])


def test_add_assigns_fresh_id_and_keys_record_by_it():
    store = CoasterStore(id_generator=iter(["42"]).__next__)

    coaster = store.add(CoasterCreate(name="Goliath", manufacturer="Six Flags", in_park="SFMM", height=235))

    assert coaster.id == "42"
    assert store.get("42") == coaster
    assert coaster.name == "Goliath"
    assert coaster.in_park == "SFMM"
    assert len(store) == 2


def test_add_overrides_existing_id():
    store = CoasterStore(seed=[], id_generator=iter(["7"]).__next__)

    coaster = store.add(Coaster(id="id1", name="Copy"))

    assert coaster.id == "7"
    assert "id1" not in store


def test_get_unknown_returns_none():
    assert CoasterStore().get("nope") is None


def test_snapshot_is_a_copy():
    store = CoasterStore()

    snapshot = store.snapshot()
    snapshot.clear()

    assert len(store.snapshot()) == 1


def test_id_generator_increases_when_clock_stalls():
    generate = IdGenerator(clock=lambda: 1000)

    assert [generate() for _ in range(3)] == ["1000", "1001", "1002"]


def test_id_generator_follows_clock_when_it_moves_ahead():
    ticks = iter([10, 500, 20])
    generate = IdGenerator(clock=lambda: next(ticks))

    assert [generate() for _ in range(3)] == ["10", "500", "501"]


def test_concurrent_adds_get_unique_ids():
    store = CoasterStore(seed=[], id_generator=IdGenerator(clock=lambda: 1))
    per_thread = 50

    def worker():
        for _ in range(per_thread):
            store.add(CoasterCreate(name="Racer"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store) == 8 * per_thread
    assert len(set(store.ids())) == 8 * per_thread
