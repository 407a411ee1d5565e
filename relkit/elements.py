from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Iterator, Tuple, TypeVar

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")


class InvalidElementError(Exception):
    pass


class InvalidPairError(InvalidElementError):
    pass


class InvalidMappingError(Exception):
    def __init__(self, message: str, key: Any = None) -> None:
        super().__init__(message)
        self.key = key


class DuplicateKeyError(InvalidMappingError):
    pass


class InvalidLiteralError(Exception):
    pass


def validate_element(value: Any) -> None:
    """
    Collections are hash based, so anything stored in one has to be hashable,
    with a hash that is consistent with its equality. Only the first half can
    be checked at runtime.
    """
    try:
        hash(value)
    except TypeError as e:
        raise InvalidElementError(f"'{value}' is not hashable") from e


def clone_element(value: T) -> T:
    return copy.deepcopy(value)


class Element(ABC):
    def __post_init__(self) -> None:
        self.validate()

    @abstractmethod
    def validate(self) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class Pair(Element, Generic[A, B]):
    """
    An ordered pair, the element type of a Relation. Two pairs are equal only
    if both components are equal, and a Pair never compares equal to a plain
    tuple, so a set of pairs can not end up holding two values that print the
    same way.

    :param first: The left component, the key when used in a Mapping.
    :param second: The right component, the value when used in a Mapping.

    :raises InvalidPairError: If either component is not hashable.

    """

    first: A
    second: B

    def validate(self) -> None:
        for component in (self.first, self.second):
            try:
                validate_element(component)
            except InvalidElementError as e:
                raise InvalidPairError(f"pair component {e}") from e

    @classmethod
    def from_tuple(cls, value: Tuple[A, B]) -> Pair[A, B]:
        if not isinstance(value, tuple) or len(value) != 2:
            raise InvalidPairError(f"'{value}' is not a 2-tuple")
        return cls(value[0], value[1])

    def to_tuple(self) -> Tuple[A, B]:
        return (self.first, self.second)

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second

    def __str__(self) -> str:
        return f"({self.first} -> {self.second})"


def as_pair(value: Any) -> Pair[Any, Any]:
    if isinstance(value, Pair):
        return value
    elif isinstance(value, tuple):
        return Pair.from_tuple(value)

    raise InvalidPairError(f"'{value}' must be a Pair or a 2-tuple")


class Collection(ABC, Generic[T]):
    """
    The protocol shared by Set, Relation and Mapping. Iteration order is
    whatever the underlying hash set produces: stable while the collection is
    not mutated, and otherwise unspecified.
    """

    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def iterate(self) -> Iterator[T]:
        raise NotImplementedError

    def __iter__(self) -> Iterator[T]:
        return self.iterate()

    def __len__(self) -> int:
        return self.size()
