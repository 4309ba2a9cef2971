"""blkid_info collector: run blkid, parse its output, publish one fact per tag.

Facts published (with the default "blkid_" prefix):

    blkid_cmd_failed        True if blkid produced no output at all. Nothing
                            else is published in that case.
    blkid_info_ok           True if the output was parsed, False otherwise.
    blkid_info_err          Why parsing failed. Only set when info_ok is False.
    blkid_dev_count         Number of devices blkid reported.
    blkid_dev_<x>_tags      Tag names for device x as a ':'-delimited string.
                            ':' and '\\' inside a name are escaped with '\\'.
    blkid_dev_<x>_tag_<y>   Value of tag y for device x.

If no blkid command was located nothing is published.
"""

import os
import sys
from typing import Callable, List, Optional, Sequence

from ..errors import CommandUnavailable, ExecutionFailed
from ..executor import Executor, output_lines
from ..flatten import flatten
from ..parser import parse_blkid_output
from ..schema import CollectorConfig, DeviceSet, Fact, FactNamespace

_DEBUG = bool(os.environ.get("BLKIDFACTS_DEBUG", ""))

# blkid exits 2 when it could not identify any device; stdout is then empty.
BLKID_OK_CODES = (0, 2)


def _debug(msg: str) -> None:
    if _DEBUG:
        print(f"[blkidfacts] blkid_info: {msg}", file=sys.stderr)


def _warn(msg: str) -> None:
    print(f"[blkidfacts] blkid_info: {msg}", file=sys.stderr)


def read_blkid_output(executor: Executor, blkid_cmd: Optional[str]) -> List[str]:
    """Run blkid and return its output lines.

    Raises CommandUnavailable if there is no command to run and ExecutionFailed
    if it produced no output.
    """
    if not blkid_cmd:
        raise CommandUnavailable("blkid command not available")
    r = executor([blkid_cmd])
    lines = output_lines(r, BLKID_OK_CODES)
    if lines is None:
        raise ExecutionFailed(f"{blkid_cmd} failed (exit {r.returncode}): {r.stderr.strip()}")
    if r.returncode not in BLKID_OK_CODES:
        _debug(f"{blkid_cmd} exited {r.returncode} but printed output; parsing it")
    return lines


def collect_status(
    stage: Callable[[], List[Fact]],
    namespace: FactNamespace,
    priority: int,
) -> List[Fact]:
    """
    Run a parse/flatten stage and convert its outcome into status facts.

    Success gives info_ok=True followed by the stage's facts. Any error gives
    info_ok=False and info_err, and none of the stage's facts.
    """
    try:
        facts = stage()
    except Exception as exc:
        _warn(f"Error processing output from blkid: {exc}")
        return [
            Fact(name=namespace.info_err, value=str(exc), priority=priority),
            Fact(name=namespace.info_ok, value=False, priority=priority),
        ]
    return facts + [Fact(name=namespace.info_ok, value=True, priority=priority)]


def facts_from_lines(lines: Sequence[str], config: Optional[CollectorConfig] = None) -> List[Fact]:
    """Parse blkid output lines and flatten them, wrapped in status facts."""
    config = config or CollectorConfig()
    ns = FactNamespace(prefix=config.prefix)

    def stage() -> List[Fact]:
        devices: DeviceSet = parse_blkid_output(lines)
        _debug(f"parsed {len(devices)} device(s)")
        return flatten(devices, config.base_priority, ns)

    return collect_status(stage, ns, config.base_priority)


def run(
    executor: Executor,
    blkid_cmd: Optional[str],
    config: Optional[CollectorConfig] = None,
) -> List[Fact]:
    config = config or CollectorConfig()
    ns = FactNamespace(prefix=config.prefix)
    try:
        lines = read_blkid_output(executor, blkid_cmd)
    except CommandUnavailable as exc:
        _debug(f"{exc}; publishing nothing")
        return []
    except ExecutionFailed as exc:
        _warn(str(exc))
        return [Fact(name=ns.cmd_failed, value=True, priority=config.base_priority)]
    return facts_from_lines(lines, config)
