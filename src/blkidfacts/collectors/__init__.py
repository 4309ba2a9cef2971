"""
Collectors publish facts about the host. Each receives an executor and the
collector config and returns a list of Fact; run_all merges them into a
FactSnapshot. A collector that raises is recorded as a warning and does not
stop the others.
"""

import socket
from datetime import datetime, timezone
from typing import Callable, List, Optional

from ..executor import Executor, subprocess_executor
from ..schema import CollectorConfig, Fact, FactNamespace, FactSnapshot
from ..store import MemoryFactStore, commit

from .blkid_cmd import run as run_blkid_cmd
from .blkid_info import run as run_blkid_info


def _guarded(name: str, snapshot: FactSnapshot, fn: Callable[[], List[Fact]]) -> List[Fact]:
    try:
        return fn()
    except Exception as exc:
        snapshot.warnings.append({"source": name, "message": str(exc), "severity": "error"})
        return []


def run_all(
    executor: Optional[Executor] = None,
    config: Optional[CollectorConfig] = None,
) -> FactSnapshot:
    """Run all collectors and return the facts they published."""
    if executor is None:
        executor = subprocess_executor
    if config is None:
        config = CollectorConfig()
    ns = FactNamespace(prefix=config.prefix)

    meta = {
        "hostname": socket.gethostname(),
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "prefix": config.prefix,
    }
    snapshot = FactSnapshot(meta=meta)
    store = MemoryFactStore()

    commit(_guarded("blkid_cmd", snapshot, lambda: run_blkid_cmd(executor, config)), store)
    found = store.get(ns.cmd)
    blkid_cmd = str(found) if found else None
    commit(
        _guarded("blkid_info", snapshot, lambda: run_blkid_info(executor, blkid_cmd, config)),
        store,
    )

    snapshot.facts = store.facts()
    return snapshot
