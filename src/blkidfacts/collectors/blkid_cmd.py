"""blkid_cmd collector: locate the blkid command, installing its package if missing.

Publishes blkid_cmd with the command path, very early (priority 500). If blkid
still cannot be found, nothing is published and blkid_info stays silent.
Linux only.
"""

import os
import platform
import sys
from typing import List, Optional

from ..executor import Executor
from ..schema import CollectorConfig, Fact, FactNamespace

_DEBUG = bool(os.environ.get("BLKIDFACTS_DEBUG", ""))

# Tried in order; the first one found on PATH installs the package.
PACKAGE_MANAGERS = [
    ("dnf", ["dnf", "install", "-y"]),
    ("yum", ["yum", "install", "-y"]),
    ("apt-get", ["apt-get", "install", "-y"]),
    ("zypper", ["zypper", "--non-interactive", "install"]),
]


def _debug(msg: str) -> None:
    if _DEBUG:
        print(f"[blkidfacts] blkid_cmd: {msg}", file=sys.stderr)


def _info(msg: str) -> None:
    print(f"[blkidfacts] {msg}", file=sys.stderr)


def _which(executor: Executor, name: str) -> Optional[str]:
    r = executor(["which", name])
    if r.returncode != 0:
        return None
    path = r.stdout.strip()
    return path.splitlines()[0] if path else None


def _install_cmd(executor: Executor, package: str) -> Optional[List[str]]:
    for name, argv in PACKAGE_MANAGERS:
        if _which(executor, name):
            return argv + [package]
    return None


def install_package(executor: Executor, package: str) -> bool:
    """Install package with the first package manager available. True on success."""
    cmd = _install_cmd(executor, package)
    if cmd is None:
        _info(f"No supported package manager found to install {package}")
        return False
    _debug(f"running {' '.join(cmd)}")
    r = executor(cmd)
    if r.returncode != 0:
        _info(f"Package {package} is not installed: {r.stderr.strip()}")
        return False
    _info(f"Package {package} is installed")
    return True


def locate(executor: Executor, config: Optional[CollectorConfig] = None) -> Optional[str]:
    """Return the path to the blkid command, or None if it is not available."""
    config = config or CollectorConfig()
    kernel = config.kernel or platform.system()
    if kernel != "Linux":
        _debug(f"skipping on kernel {kernel}")
        return None

    cmd = _which(executor, config.command_name)
    if cmd or not config.install_missing:
        return cmd

    _info(
        f"Could not find {config.command_name} command. Attempting to "
        f"install pkg {config.package_name} to get it."
    )
    install_package(executor, config.package_name)
    return _which(executor, config.command_name)


def run(executor: Executor, config: Optional[CollectorConfig] = None) -> List[Fact]:
    config = config or CollectorConfig()
    ns = FactNamespace(prefix=config.prefix)
    cmd = locate(executor, config)
    if not cmd:
        return []
    return [Fact(name=ns.cmd, value=cmd, priority=config.locator_priority)]
