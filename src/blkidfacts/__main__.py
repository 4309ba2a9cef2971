"""Entry point: collect (or load) facts, write outputs, optionally print the device list."""

import json
import sys
from pathlib import Path
from typing import List, Optional

from .cli import config_from_args, parse_args
from .errors import ReassembleError
from .executor import Executor
from .functions import get_blkid_info
from .pipeline import load_snapshot, load_store, save_snapshot
from .schema import FactNamespace, FactSnapshot

SNAPSHOT_FILENAME = "facts-snapshot.json"


def _run_collectors(args, executor: Optional[Executor] = None) -> FactSnapshot:
    from . import collectors
    return collectors.run_all(executor=executor, config=config_from_args(args))


def main(argv: Optional[List[str]] = None, executor: Optional[Executor] = None) -> int:
    args = parse_args(argv)

    if args.from_snapshot:
        snapshot = load_snapshot(args.from_snapshot)
    else:
        snapshot = _run_collectors(args, executor)

    output_dir = Path(args.output_dir)
    from .renderers import run_all as run_all_renderers
    run_all_renderers(snapshot, output_dir)
    if not args.from_snapshot:
        save_snapshot(snapshot, output_dir / SNAPSHOT_FILENAME)

    for w in snapshot.warnings:
        print(f"[blkidfacts] {w.get('source')}: {w.get('message')}", file=sys.stderr)

    if args.query:
        ns = FactNamespace(prefix=snapshot.meta.get("prefix", args.prefix))
        try:
            devices = get_blkid_info(load_store(snapshot), ns)
        except ReassembleError as exc:
            print(f"[blkidfacts] {exc}", file=sys.stderr)
            return 1
        print(json.dumps(devices, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
