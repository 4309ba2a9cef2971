"""
Renderers turn a FactSnapshot into output files. Each takes the snapshot, a
shared jinja2 Environment and the output directory.
"""

from pathlib import Path

from jinja2 import Environment

from ..schema import FactSnapshot, FactValue

from .devices import render as render_devices
from .facter import render as render_facter


def facter_value(value: FactValue) -> str:
    """Format a fact value the way facter prints it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def make_env() -> Environment:
    env = Environment(keep_trailing_newline=True)
    env.filters["facter_value"] = facter_value
    return env


def run_all(snapshot: FactSnapshot, output_dir: Path) -> None:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    env = make_env()
    render_facter(snapshot, env, output_dir)
    render_devices(snapshot, env, output_dir)
