"""
Command execution abstraction.

Collectors never call subprocess directly. They use the provided executor
so that tests can inject canned output instead of running real commands.
"""

import subprocess
from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol

COMMAND_TIMEOUT = 300

# Shell convention for "command not found"; subprocess_executor reports it too.
NOT_FOUND = 127


@dataclass
class RunResult:
    """Result of running a command (or reading a fixture)."""

    stdout: str
    stderr: str
    returncode: int


class Executor(Protocol):
    """Runs an argv list and returns what it printed. Tests pass a fixture instead."""

    def __call__(self, cmd: List[str]) -> RunResult:
        ...


def subprocess_executor(cmd: List[str]) -> RunResult:
    """Default implementation: run the command via subprocess."""
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, timeout=COMMAND_TIMEOUT)
    except subprocess.TimeoutExpired as e:
        partial = e.stdout.decode() if isinstance(e.stdout, bytes) else (e.stdout or "")
        return RunResult(stdout=partial, stderr=f"{cmd[0]} timed out after {e.timeout}s", returncode=-1)
    except FileNotFoundError:
        return RunResult(stdout="", stderr=f"{cmd[0]}: command not found", returncode=NOT_FOUND)
    return RunResult(stdout=proc.stdout or "", stderr=proc.stderr or "", returncode=proc.returncode)


def output_lines(result: RunResult, ok_codes: Iterable[int] = (0,)) -> Optional[List[str]]:
    """
    Normalize command output to a list of lines.

    None means the command produced no output: it was not found, or it exited
    with a status outside ok_codes and printed nothing. Output printed by a
    command that then exits nonzero is still returned. A command that exits
    with an ok status and prints nothing gives an empty list.
    """
    if result.returncode == NOT_FOUND:
        return None
    if result.returncode not in tuple(ok_codes) and not result.stdout.strip():
        return None
    return result.stdout.splitlines()
