"""devices.json renderer: the device list get_blkid_info() rebuilds from the facts."""

import json
from pathlib import Path

from jinja2 import Environment

from ..errors import ReassembleError
from ..functions import get_blkid_info
from ..pipeline import load_store
from ..schema import FactNamespace, FactSnapshot


def render(
    snapshot: FactSnapshot,
    env: Environment,
    output_dir: Path,
) -> None:
    output_dir = Path(output_dir)
    ns = FactNamespace(prefix=snapshot.meta.get("prefix", "blkid_"))
    try:
        devices = get_blkid_info(load_store(snapshot), ns)
    except ReassembleError as exc:
        snapshot.warnings.append({"source": "devices", "message": str(exc), "severity": "warning"})
        devices = []
    (output_dir / "devices.json").write_text(json.dumps(devices, indent=2) + "\n")
