from __future__ import annotations

from typing import Any, Callable

from relkit.elements import Collection, Pair
from relkit.mapping import Mapping
from relkit.relation import Relation
from relkit.set import Set


# Collections are mutable, so parametrized tests build a fresh one per test.
def lazy_set(*elements: Any) -> Callable[[], Set[Any]]:
    def to_set() -> Set[Any]:
        return Set([e() if callable(e) else e for e in elements])

    return to_set


def lazy_relation(*pairs: Any) -> Callable[[], Relation[Any, Any]]:
    def to_relation() -> Relation[Any, Any]:
        return Relation.from_sequence(pairs)

    return to_relation


def lazy_mapping(*pairs: Any) -> Callable[[], Mapping[Any, Any]]:
    def to_mapping() -> Mapping[Any, Any]:
        return Mapping.from_sequence(pairs)

    return to_mapping


def pairs(*values: Any) -> set[Pair[Any, Any]]:
    return {Pair(a, b) for a, b in values}


def collect(collection: Collection[Any]) -> set[Any]:
    """
    Iterate once, checking that nothing is produced twice, and return what was
    produced as a builtin set. Iteration order is never relied upon.
    """
    produced = list(collection.iterate())
    assert len(produced) == len(set(produced))
    assert len(produced) == collection.size()
    return set(produced)
