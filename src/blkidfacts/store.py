"""
Flat fact store.

Collectors publish (name, value, priority) facts; consumers look them up by
name. When a name is set twice, the fact with the higher priority wins, and
on a tie the later one replaces the earlier.

Readers must see a consistent snapshot: a store that is being rewritten by a
collection cycle while get_blkid_info() reads it can give a torn view.
"""

from typing import Dict, Iterable, List, Optional, Protocol

from .schema import Fact, FactValue


class FactStore(Protocol):
    """What collectors write to and get_blkid_info reads from."""

    def set(self, name: str, value: FactValue, priority: int = 0) -> None:
        ...

    def get(self, name: str) -> Optional[FactValue]:
        ...

    def has(self, name: str) -> bool:
        ...


class MemoryFactStore:
    """Dict-backed FactStore."""

    def __init__(self, facts: Optional[Iterable[Fact]] = None):
        self._facts: Dict[str, Fact] = {}
        if facts:
            commit(facts, self)

    def set(self, name: str, value: FactValue, priority: int = 0) -> None:
        current = self._facts.get(name)
        if current is not None and current.priority > priority:
            return
        self._facts[name] = Fact(name=name, value=value, priority=priority)

    def get(self, name: str) -> Optional[FactValue]:
        fact = self._facts.get(name)
        return fact.value if fact is not None else None

    def has(self, name: str) -> bool:
        return name in self._facts

    def facts(self) -> List[Fact]:
        """All facts, highest priority first, then by name."""
        return sorted(self._facts.values(), key=lambda f: (-f.priority, f.name))

    def __len__(self) -> int:
        return len(self._facts)


def commit(facts: Iterable[Fact], store: FactStore) -> None:
    for fact in facts:
        store.set(fact.name, fact.value, fact.priority)
