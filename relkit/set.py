from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, TypeVar

from relkit.elements import Collection, Pair, clone_element, validate_element
from relkit.visitors import render

T = TypeVar("T")
U = TypeVar("U")


def _expect_set(value: Any, operation: str) -> None:
    if not isinstance(value, Set):
        raise TypeError(f"{operation} expects a Set, not {type(value).__name__}")


class Set(Collection[T]):
    """
    An unordered, duplicate free, mutable collection built on the builtin
    hash set. Membership is decided by the elements' own equality and hash,
    so elements must be hashable and their hash must agree with equality.

    A Set is hashable by content so that sets of sets can be built (see
    `partition`). Like any other hashed key, a Set that has been stored in
    another Set must not be mutated afterwards.

    :param elements: Optional elements to start with, duplicates are dropped.
    :type elements: Optional[Iterable[T]]

    :raises InvalidElementError: If one of the elements is not hashable.

    """

    elements: set[T]

    def __init__(self, elements: Optional[Iterable[T]] = None) -> None:
        self.elements = set()
        if elements is not None:
            for x in elements:
                self.insert(x)

    @classmethod
    def _from_elements(cls, elements: set[T]) -> Set[T]:
        # The elements were validated when they entered the Sets they came from.
        new = cls()
        new.elements = elements
        return new

    @classmethod
    def empty(cls) -> Set[T]:
        return cls()

    @classmethod
    def singleton(cls, x: T) -> Set[T]:
        new = cls()
        new.insert(x)
        return new

    @classmethod
    def from_sequence(cls, v: Iterable[T]) -> Set[T]:
        return cls(v)

    def size(self) -> int:
        return len(self.elements)

    def contains(self, x: Any) -> bool:
        return x in self.elements

    def insert(self, x: T) -> bool:
        """
        Add `x` unless an equal element is already present. Returns True if
        the set grew.
        """
        validate_element(x)
        if x in self.elements:
            return False

        self.elements.add(x)
        return True

    def union(self, other: Set[T]) -> Set[T]:
        _expect_set(other, "union")
        return Set._from_elements(self.elements | other.elements)

    def intersection(self, other: Set[T]) -> Set[T]:
        _expect_set(other, "intersection")
        return Set._from_elements(self.elements & other.elements)

    @staticmethod
    def element_cross_set(a: T, other: Set[U]) -> Set[Pair[T, U]]:
        """
        All the pairs `(a, b)` for `b` in `other`.
        """
        _expect_set(other, "element_cross_set")
        return Set._from_elements({Pair(a, b) for b in other.elements})

    def cartesian_product(self, other: Set[U]) -> Set[Pair[T, U]]:
        _expect_set(other, "cartesian_product")
        product: set[Pair[T, U]] = set()
        for a in self.elements:
            product |= Set.element_cross_set(a, other).elements

        return Set._from_elements(product)

    @staticmethod
    def all_nonempty(parts: Set[Set[T]]) -> bool:
        _expect_set(parts, "all_nonempty")
        return all(part.size() != 0 for part in parts.elements)

    @staticmethod
    def partition_on_element(x: T, parts: Set[Set[T]]) -> bool:
        """
        True if exactly one of `parts` contains `x`.
        """
        _expect_set(parts, "partition_on_element")
        count = 0
        for part in parts.elements:
            if part.contains(x):
                count += 1
                if count > 1:
                    return False

        return count == 1

    def partition(self, parts: Set[Set[T]]) -> bool:
        """
        True if `parts` is a partition of this set: no part is empty, every
        element of this set is in exactly one part, and the parts hold nothing
        that is not in this set.
        """
        _expect_set(parts, "partition")
        if not Set.all_nonempty(parts):
            return False

        for part in parts.elements:
            if not part.elements <= self.elements:
                return False

        return all(Set.partition_on_element(x, parts) for x in self.elements)

    def iterate(self) -> Iterator[T]:
        for x in self.elements:
            yield x

    def clone(self) -> Set[T]:
        return Set._from_elements({clone_element(x) for x in self.elements})

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.elements == other.elements

    def __hash__(self) -> int:
        return hash(frozenset(self.elements))

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"Set({render(self)})"
