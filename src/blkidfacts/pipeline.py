"""Snapshot persistence: save a collection cycle's facts, load them back into a store."""

from pathlib import Path

from .schema import FactSnapshot
from .store import MemoryFactStore


def save_snapshot(snapshot: FactSnapshot, path: Path) -> None:
    Path(path).write_text(snapshot.model_dump_json(indent=2))


def load_snapshot(path: Path) -> FactSnapshot:
    return FactSnapshot.model_validate_json(Path(path).read_text())


def load_store(snapshot: FactSnapshot) -> MemoryFactStore:
    """Rebuild the flat fact store a snapshot was taken from."""
    return MemoryFactStore(snapshot.facts)
