"""Command-line arguments."""

import argparse
from pathlib import Path
from typing import List, Optional

from .schema import CollectorConfig


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="blkidfacts",
        description="Publish blkid device metadata as flat facts and rebuild the device list from them.",
    )
    p.add_argument(
        "--output-dir",
        type=Path,
        default=Path("./blkidfacts-output"),
        help="Directory for facts.txt, devices.json and facts-snapshot.json (default: ./blkidfacts-output)",
    )
    p.add_argument(
        "--from-snapshot",
        type=Path,
        default=None,
        metavar="PATH",
        help="Skip collection; load facts from a saved facts-snapshot.json",
    )
    p.add_argument("--command", default="blkid", help="Name of the blkid command to look up (default: blkid)")
    p.add_argument(
        "--package",
        default="e2fsprogs",
        help="Package to install when the command is missing (default: e2fsprogs)",
    )
    p.add_argument(
        "--no-install",
        action="store_true",
        help="Do not try to install the package when the command is missing",
    )
    p.add_argument("--base-priority", type=int, default=200, help="Priority of the blkid_info facts (default: 200)")
    p.add_argument("--prefix", default="blkid_", help="Prefix for every fact name (default: blkid_)")
    p.add_argument(
        "--query",
        action="store_true",
        help="Print the rebuilt device list as JSON on stdout",
    )
    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def config_from_args(args: argparse.Namespace) -> CollectorConfig:
    return CollectorConfig(
        command_name=args.command,
        package_name=args.package,
        install_missing=not args.no_install,
        base_priority=args.base_priority,
        prefix=args.prefix,
    )
