"""facts.txt renderer: one `name => value` line per fact, highest priority first."""

from pathlib import Path

from jinja2 import Environment

from ..schema import FactSnapshot

FACTS_TEMPLATE = """\
{% for fact in facts -%}
{{ fact.name }} => {{ fact.value | facter_value }}
{% endfor -%}
"""


def render(
    snapshot: FactSnapshot,
    env: Environment,
    output_dir: Path,
) -> None:
    output_dir = Path(output_dir)
    facts = sorted(snapshot.facts, key=lambda f: (-f.priority, f.name))
    text = env.from_string(FACTS_TEMPLATE).render(facts=facts)
    (output_dir / "facts.txt").write_text(text)
