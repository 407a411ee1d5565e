from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from relkit.elements import Collection, InvalidMappingError, Pair, as_pair
from relkit.relation import PairLike, Relation
from relkit.set import Set
from relkit.visitors import render

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")

# key, first value seen for it, conflicting value
Conflict = Tuple[Any, Any, Any]


def _find_conflict(pairs: Iterable[Pair[Any, Any]]) -> Optional[Conflict]:
    # Equality is an equivalence, so comparing each value with the first one
    # seen for its key gives the same answer as comparing every two pairs.
    seen: dict[Any, Any] = {}
    for p in pairs:
        if p.first not in seen:
            seen[p.first] = p.second
        elif seen[p.first] != p.second:
            logger.debug(
                "key %r is bound to both %r and %r", p.first, seen[p.first], p.second
            )
            return (p.first, seen[p.first], p.second)

    return None


def is_functional_sequence(v: Iterable[PairLike[Any, Any]]) -> bool:
    return _find_conflict(as_pair(p) for p in v) is None


def is_functional_sequence_at(
    v: Iterable[PairLike[Any, Any]], pair: PairLike[Any, Any]
) -> bool:
    """
    True if every pair of `v` with the same key as `pair` also has its value.
    """
    pair = as_pair(pair)
    for q in v:
        q = as_pair(q)
        if q.first == pair.first and q.second != pair.second:
            return False

    return True


def is_functional_set(s: Set[PairLike[Any, Any]]) -> bool:
    return _find_conflict(as_pair(p) for p in s.iterate()) is None


def is_functional_set_at(
    s: Set[PairLike[Any, Any]], pair: PairLike[Any, Any]
) -> bool:
    return is_functional_sequence_at(s.iterate(), pair)


def is_functional_relation(r: Relation[Any, Any]) -> bool:
    return is_functional_set(r.pairs)


class Mapping(Collection[Pair[A, B]], Generic[A, B]):
    """
    A Relation in which every key is bound to at most one value.

    The unchecked constructors (`from_sequence`, `from_relation` and the
    plain constructor) trust the caller: handing them a key bound to two
    different values produces a malformed mapping, on which only
    `is_functional` is meaningful. Callers that can not vouch for their
    input should run `is_functional_check` first, or use the `checked_*`
    constructors, which raise instead.

    :param relation: The relation to wrap. It is not copied.
    :type relation: Relation[A, B]

    """

    relation: Relation[A, B]

    def __init__(self, relation: Relation[A, B]) -> None:
        if not isinstance(relation, Relation):
            raise TypeError(
                f"a Mapping wraps a Relation, not {type(relation).__name__}"
            )
        self.relation = relation

    @classmethod
    def empty(cls) -> Mapping[A, B]:
        return cls(Relation.empty())

    @classmethod
    def from_sequence(cls, v: Iterable[PairLike[A, B]]) -> Mapping[A, B]:
        """
        Requires that no key in `v` is bound to two different values. Pairs
        that are exactly equal are collapsed.
        """
        return cls(Relation.from_sequence(v))

    @classmethod
    def from_relation(cls, r: Relation[A, B]) -> Mapping[A, B]:
        """
        Requires `r` to be functional. The mapping gets its own copy.
        """
        return cls(r.clone())

    @classmethod
    def checked_from_sequence(cls, v: Iterable[PairLike[A, B]]) -> Mapping[A, B]:
        pairs = [as_pair(p) for p in v]
        cls._raise_on_conflict(_find_conflict(pairs))
        return cls(Relation.from_sequence(pairs))

    @classmethod
    def checked_from_relation(cls, r: Relation[A, B]) -> Mapping[A, B]:
        cls._raise_on_conflict(_find_conflict(r.iterate()))
        return cls(r.clone())

    @staticmethod
    def _raise_on_conflict(conflict: Optional[Conflict]) -> None:
        if conflict is None:
            return

        key, first, second = conflict
        logger.debug("rejecting non functional input at key %r", key)
        raise InvalidMappingError(
            f"key '{key}' is bound to both '{first}' and '{second}'", key=key
        )

    @staticmethod
    def is_functional_check(source: Any) -> bool:
        """
        Whether `source`, a Relation, Mapping, Set of pairs or a sequence of
        pairs, binds every key to at most one value.
        """
        if isinstance(source, Mapping):
            return is_functional_relation(source.relation)
        elif isinstance(source, Relation):
            return is_functional_relation(source)
        elif isinstance(source, Set):
            return is_functional_set(source)

        return is_functional_sequence(source)

    def is_functional(self) -> bool:
        return is_functional_relation(self.relation)

    def size(self) -> int:
        return self.relation.size()

    def domain(self) -> Set[A]:
        return self.relation.domain()

    def range(self) -> Set[B]:
        return self.relation.range()

    def member(self, pair: PairLike[A, B]) -> bool:
        """
        True if the key of `pair` is in the domain and is bound to the value
        of `pair`.
        """
        return self.relation.relates(pair)

    def iterate(self) -> Iterator[Pair[A, B]]:
        return self.relation.iterate()

    def clone(self) -> Mapping[A, B]:
        return Mapping(self.relation.clone())

    def __contains__(self, pair: Any) -> bool:
        return pair in self.relation

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.relation == other.relation

    def __hash__(self) -> int:
        return hash(self.relation)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"Mapping({render(self)})"
