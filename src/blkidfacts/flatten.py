"""
Flatten parsed blkid records into scalar facts.

The fact store only holds scalars, so each device i (1-based) becomes:

    <prefix>dev_<i>_tags        sorted, escaped, ':'-joined tag names
    <prefix>dev_<i>_tag_<name>  one fact per tag

plus a single <prefix>dev_count. Device facts get priority base - i so that
they sort in device order when printed.
"""

from typing import List, Optional

from .escape import join_tags
from .schema import DeviceSet, Fact, FactNamespace


def flatten(
    devices: DeviceSet,
    base_priority: int,
    namespace: Optional[FactNamespace] = None,
) -> List[Fact]:
    ns = namespace or FactNamespace()
    facts = [Fact(name=ns.dev_count, value=str(len(devices)), priority=base_priority)]
    for i, record in enumerate(devices, start=1):
        priority = base_priority - i
        for key, val in record.items():
            facts.append(Fact(name=ns.dev_tag(i, key), value=val, priority=priority))
        facts.append(Fact(name=ns.dev_tags(i), value=join_tags(sorted(record)), priority=priority))
    return facts
