"""
get_blkid_info: rebuild the blkid device list from published facts.

Produces a list like:

    [
      {"dev": "/dev/sdb1", "label": "disk1", "type": "ext3", "uuid": "f60e610f-..."},
      {"dev": "/dev/sdc1", "label": "disk2", "type": "ext3", "uuid": "951e142f-..."},
    ]

one dict per device blkid reported, in the order it reported them. An empty
list means blkid ran and reported no devices.

ReassembleError is raised if the collector reported a failure or any fact
it should have published is missing or malformed. No defaults are
substituted.
"""

import os
import sys
from typing import Callable, Optional

from .errors import ReassembleError
from .escape import split_tags
from .schema import DeviceRecord, DeviceSet, FactNamespace, FactValue
from .store import FactStore

_DEBUG = bool(os.environ.get("BLKIDFACTS_DEBUG", ""))


def _debug(msg: str) -> None:
    if _DEBUG:
        print(f"[blkidfacts] get_blkid_info: {msg}", file=sys.stderr)


def _get_fact(store: FactStore, name: str) -> FactValue:
    val = store.get(name)
    if val is None:
        raise ReassembleError(f"Can not get blkid info because the {name} fact is not defined")
    return val


def _parse_count(name: str, raw: FactValue) -> int:
    if isinstance(raw, bool):
        raise ReassembleError(f"Can not get blkid info because {name} is not a device count: {raw!r}")
    text = str(raw).strip()
    # plain ASCII digits only: int() would also take "+3", "0_0" or other scripts' digits
    if not (text.isascii() and text.isdecimal()):
        raise ReassembleError(f"Can not get blkid info because {name} is not a device count: {raw!r}")
    return int(text)


def get_blkid_info(store: FactStore, namespace: Optional[FactNamespace] = None) -> DeviceSet:
    ns = namespace or FactNamespace()
    _debug("starting")

    plugin_ok = _get_fact(store, ns.info_ok)
    if not plugin_ok or plugin_ok == "false":
        raise ReassembleError(
            f"Can not get blkid info because the blkid_info collector set {ns.info_ok} to false"
        )

    dev_count = _parse_count(ns.dev_count, _get_fact(store, ns.dev_count))

    devices: DeviceSet = []
    for i in range(1, dev_count + 1):
        tags_name = ns.dev_tags(i)
        tags_str = _get_fact(store, tags_name)
        try:
            tags = split_tags(str(tags_str))
        except ValueError as exc:
            raise ReassembleError(f"Can not get blkid info because {tags_name} is malformed: {exc}") from exc

        record: DeviceRecord = {}
        for tag in tags:
            record[tag] = str(_get_fact(store, ns.dev_tag(i, tag)))
        devices.append(record)

    _debug(f"finished, {len(devices)} device(s)")
    return devices


def make_get_blkid_info(store: FactStore, namespace: Optional[FactNamespace] = None) -> Callable[[], DeviceSet]:
    """Bind a store, giving the zero-argument get_blkid_info() callers use."""

    def _get_blkid_info() -> DeviceSet:
        return get_blkid_info(store, namespace)

    return _get_blkid_info
