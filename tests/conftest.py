from pathlib import Path
from typing import Dict, List, Optional

import pytest

from blkidfacts.executor import RunResult


FIXTURES = Path(__file__).parent / "fixtures"


class FixtureExecutor:
    """
    Executor that answers `which` lookups from a table of known paths and
    returns canned output for blkid and package-manager commands. Every call
    is recorded in .calls.
    """

    def __init__(
        self,
        paths: Optional[Dict[str, str]] = None,
        blkid: Optional[RunResult] = None,
        installs: Optional[Dict[str, str]] = None,
    ):
        self.paths = dict(paths or {})
        self.blkid = blkid
        # package manager name -> path of the command its install provides
        self.installs = dict(installs or {})
        self.calls: List[List[str]] = []

    def __call__(self, cmd):
        self.calls.append(list(cmd))
        if cmd[0] == "which":
            path = self.paths.get(cmd[1])
            if path:
                return RunResult(stdout=path + "\n", stderr="", returncode=0)
            return RunResult(stdout="", stderr=f"no {cmd[1]} in PATH", returncode=1)
        if cmd[0] in self.installs and "install" in cmd:
            self.paths["blkid"] = self.installs[cmd[0]]
            return RunResult(stdout="Complete!\n", stderr="", returncode=0)
        if self.blkid is not None and cmd[0] == self.paths.get("blkid"):
            return self.blkid
        return RunResult(stdout="", stderr="unknown command", returncode=1)


def blkid_result(stdout: str = "", returncode: int = 0, stderr: str = "") -> RunResult:
    return RunResult(stdout=stdout, stderr=stderr, returncode=returncode)


@pytest.fixture
def blkid_text() -> str:
    return (FIXTURES / "blkid_output.txt").read_text()


@pytest.fixture
def fixture_executor(blkid_text) -> FixtureExecutor:
    return FixtureExecutor(
        paths={"blkid": "/usr/sbin/blkid"},
        blkid=blkid_result(blkid_text),
    )
