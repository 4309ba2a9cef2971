"""
blkid output parser.

Parses the default blkid output format, one device per line:

    /dev/sdb1: LABEL="disk1" TYPE="ext3" UUID="f60e610f-..."

into a list of dicts keyed by lower-cased tag name, plus "dev" for the device
node. Any malformed line aborts the whole parse. A '"' inside a value is not
supported. A line with an empty device path (": TYPE=...") is rejected rather
than recorded with dev="", since every record must name its device node.
"""

import re
from typing import List, Optional, Sequence

from .errors import ParseError
from .schema import DeviceRecord, DeviceSet

DEVICE_SEPARATOR = ": "

_PAIR_RE = re.compile(r'([^"]+)="([^"]*)"(?: |$)')


def _parse_line(line: str) -> Optional[DeviceRecord]:
    """Parse one stripped line. Returns None when no KEY="value" pair was found."""
    dev, sep, rest = line.partition(DEVICE_SEPARATOR)
    if not sep or not dev:
        raise ParseError(f"problem parsing blkid output: could not get device from line {line!r}")

    pairs = _PAIR_RE.findall(rest)
    # Lines without any pair are dropped rather than rejected.
    if not pairs:
        return None

    record: DeviceRecord = {"dev": dev}
    for raw_key, val in pairs:
        key = raw_key.lower()
        if not key:
            raise ParseError(
                f"problem parsing blkid output: for device {dev}, could not get a key for value {val!r}"
            )
        if key in record:
            raise ParseError(
                f"blkid info key conflict: output for device {dev} has multiple instances "
                f"of key {key!r} with values {val!r} and {record[key]!r}"
            )
        record[key] = val
    return record


def parse_blkid_output(lines: Sequence[str]) -> DeviceSet:
    """Parse blkid output lines into one record per device, in output order."""
    devices: DeviceSet = []
    for line in lines:
        record = _parse_line(line.strip())
        if record is not None:
            devices.append(record)
    return devices
