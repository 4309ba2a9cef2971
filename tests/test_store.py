"""
Tests for the in-memory fact store and snapshot persistence.
"""

from pathlib import Path

from blkidfacts.pipeline import load_snapshot, load_store, save_snapshot
from blkidfacts.schema import Fact, FactSnapshot
from blkidfacts.store import MemoryFactStore


def test_get_missing_is_none():
    store = MemoryFactStore()
    assert store.get("nope") is None
    assert not store.has("nope")


def test_higher_priority_wins():
    store = MemoryFactStore()
    store.set("x", "low", 10)
    store.set("x", "high", 100)
    store.set("x", "lower", 5)
    assert store.get("x") == "high"


def test_equal_priority_later_replaces():
    store = MemoryFactStore()
    store.set("x", "first", 10)
    store.set("x", "second", 10)
    assert store.get("x") == "second"


def test_facts_ordered_by_priority_then_name():
    store = MemoryFactStore([
        Fact(name="b", value="1", priority=1),
        Fact(name="a", value="1", priority=1),
        Fact(name="c", value="1", priority=9),
    ])
    assert [f.name for f in store.facts()] == ["c", "a", "b"]
    assert len(store) == 3


def test_false_value_is_present():
    store = MemoryFactStore()
    store.set("blkid_info_ok", False)
    assert store.has("blkid_info_ok")
    assert store.get("blkid_info_ok") is False


def test_snapshot_save_and_load(tmp_path: Path):
    snapshot = FactSnapshot(
        meta={"hostname": "h1", "prefix": "blkid_"},
        facts=[
            Fact(name="blkid_info_ok", value=True, priority=200),
            Fact(name="blkid_dev_count", value="0", priority=200),
        ],
    )
    path = tmp_path / "facts-snapshot.json"
    save_snapshot(snapshot, path)
    loaded = load_snapshot(path)
    assert loaded == snapshot
    store = load_store(loaded)
    assert store.get("blkid_info_ok") is True
    assert store.get("blkid_dev_count") == "0"
