"""
Tests verifying every CLI flag is parsed and wired through to behavior.
"""

from pathlib import Path

from blkidfacts.cli import config_from_args, parse_args


def test_defaults():
    args = parse_args([])
    assert args.output_dir == Path("./blkidfacts-output")
    assert args.from_snapshot is None
    assert args.command == "blkid"
    assert args.package == "e2fsprogs"
    assert args.no_install is False
    assert args.base_priority == 200
    assert args.prefix == "blkid_"
    assert args.query is False


def test_all_flags_set():
    args = parse_args([
        "--output-dir", "/tmp/out",
        "--from-snapshot", "/tmp/snap.json",
        "--command", "blkid2",
        "--package", "util-linux",
        "--no-install",
        "--base-priority", "150",
        "--prefix", "disk_",
        "--query",
    ])
    assert args.output_dir == Path("/tmp/out")
    assert args.from_snapshot == Path("/tmp/snap.json")
    assert args.command == "blkid2"
    assert args.package == "util-linux"
    assert args.no_install is True
    assert args.base_priority == 150
    assert args.prefix == "disk_"
    assert args.query is True


def test_flags_reach_collector_config():
    config = config_from_args(parse_args(["--no-install", "--base-priority", "10", "--prefix", "p_"]))
    assert config.install_missing is False
    assert config.base_priority == 10
    assert config.prefix == "p_"
    assert config.command_name == "blkid"
    assert config.package_name == "e2fsprogs"
