from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Tuple, TypeVar, Union

from relkit.elements import Collection, InvalidPairError, Pair, as_pair
from relkit.set import Set
from relkit.visitors import render

A = TypeVar("A")
B = TypeVar("B")

PairLike = Union[Pair[A, B], Tuple[A, B]]


class Relation(Collection[Pair[A, B]], Generic[A, B]):
    """
    A set of pairs relating values of A to values of B. Nothing stops a key
    from being related to several values, `(1, "a")` and `(1, "b")` are two
    different pairs. Only exactly equal pairs collapse.

    :param pairs: The pairs of the relation. The relation takes ownership of
        this Set, it is not copied.
    :type pairs: Set[Pair[A, B]]

    :raises InvalidPairError: If a member of `pairs` is not a Pair.

    """

    pairs: Set[Pair[A, B]]

    def __init__(self, pairs: Set[Pair[A, B]]) -> None:
        if not isinstance(pairs, Set):
            raise InvalidPairError("a Relation must be built from a Set of Pairs")
        for p in pairs.elements:
            if not isinstance(p, Pair):
                raise InvalidPairError(f"'{p}' is not a Pair")
        self.pairs = pairs

    @classmethod
    def empty(cls) -> Relation[A, B]:
        return cls(Set())

    @classmethod
    def from_pair_set(cls, pairs: Set[Pair[A, B]]) -> Relation[A, B]:
        """
        The relation takes `pairs` over without copying it, so the caller must
        not use `pairs` after this call. Members are only checked here, a
        non Pair inserted into `pairs` later would break `domain` and `range`.
        Pass `pairs.clone()` to keep using the original.
        """
        return cls(pairs)

    @classmethod
    def from_sequence(cls, v: Iterable[PairLike[A, B]]) -> Relation[A, B]:
        """
        Pairs may be given as Pair or as 2-tuples. Duplicates are dropped by
        full pair equality, never by key alone.
        """
        return cls(Set(as_pair(p) for p in v))

    def size(self) -> int:
        return self.pairs.size()

    def relates(self, pair: PairLike[A, B]) -> bool:
        return self.pairs.contains(as_pair(pair))

    def member(self, a: A, b: B) -> bool:
        return self.pairs.contains(Pair(a, b))

    def domain(self) -> Set[A]:
        return Set(p.first for p in self.pairs.elements)

    def range(self) -> Set[B]:
        return Set(p.second for p in self.pairs.elements)

    def iterate(self) -> Iterator[Pair[A, B]]:
        return self.pairs.iterate()

    def clone(self) -> Relation[A, B]:
        return Relation(self.pairs.clone())

    def __contains__(self, pair: Any) -> bool:
        if isinstance(pair, tuple) and len(pair) == 2:
            try:
                pair = Pair.from_tuple(pair)
            except InvalidPairError:
                # An unhashable component can not be in any Pair.
                return False
        return isinstance(pair, Pair) and self.pairs.contains(pair)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.pairs == other.pairs

    def __hash__(self) -> int:
        return hash(self.pairs)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"Relation({render(self)})"
