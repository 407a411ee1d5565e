from __future__ import annotations

import re
from typing import Any, Optional

import pytest

from relkit.elements import (
    InvalidElementError,
    InvalidPairError,
    Pair,
    as_pair,
    clone_element,
    validate_element,
)

pair_tests = [
    pytest.param(1, "a", "(1 -> a)", None, id="int and string"),
    pytest.param(None, None, "(None -> None)", None, id="none components"),
    pytest.param(
        Pair(1, 2), (3, 4), "((1 -> 2) -> (3, 4))", None, id="nested pair and tuple"
    ),
    pytest.param(
        [1],
        "a",
        None,
        InvalidPairError("pair component '[1]' is not hashable"),
        id="unhashable first",
    ),
    pytest.param(
        "a",
        {"b": 1},
        None,
        InvalidPairError("pair component '{'b': 1}' is not hashable"),
        id="unhashable second",
    ),
]


@pytest.mark.parametrize("first, second, formatted, exception", pair_tests)
def test_pair(
    first: Any, second: Any, formatted: Optional[str], exception: Optional[Exception]
) -> None:
    if exception is not None:
        with pytest.raises(type(exception), match=re.escape(str(exception))):
            Pair(first, second)
    else:
        pair = Pair(first, second)
        assert pair.first == first
        assert pair.second == second
        assert str(pair) == formatted


def test_pair_equality() -> None:
    assert Pair(1, "a") == Pair(1, "a")
    assert hash(Pair(1, "a")) == hash(Pair(1, "a"))
    assert Pair(1, "a") != Pair(1, "b")
    assert Pair(1, "a") != Pair("a", 1)
    # A pair and a tuple with the same components are different values.
    assert Pair(1, "a") != (1, "a")
    assert len({Pair(1, "a"), Pair(1, "a"), Pair(2, "a")}) == 2


def test_pair_unpacking() -> None:
    a, b = Pair(1, "one")
    assert (a, b) == (1, "one")
    assert Pair(1, "one").to_tuple() == (1, "one")
    assert Pair.from_tuple((1, "one")) == Pair(1, "one")


as_pair_tests = [
    pytest.param(Pair(1, 2), Pair(1, 2), None, id="pair"),
    pytest.param((1, 2), Pair(1, 2), None, id="tuple"),
    pytest.param(
        (1, 2, 3), None, InvalidPairError("'(1, 2, 3)' is not a 2-tuple"), id="triple"
    ),
    pytest.param(
        [1, 2],
        None,
        InvalidPairError("'[1, 2]' must be a Pair or a 2-tuple"),
        id="list",
    ),
    pytest.param(5, None, InvalidPairError("'5' must be a Pair or a 2-tuple"), id="int"),
]


@pytest.mark.parametrize("value, expected, exception", as_pair_tests)
def test_as_pair(
    value: Any, expected: Optional[Pair[Any, Any]], exception: Optional[Exception]
) -> None:
    if exception is not None:
        with pytest.raises(type(exception), match=re.escape(str(exception))):
            as_pair(value)
    else:
        assert as_pair(value) == expected


def test_validate_element() -> None:
    validate_element(1)
    validate_element("a")
    validate_element((1, "a"))
    with pytest.raises(InvalidElementError, match=re.escape("'[1]' is not hashable")):
        validate_element([1])
    # InvalidPairError is an InvalidElementError
    with pytest.raises(InvalidElementError):
        Pair(1, [2])


def test_clone_element() -> None:
    value = Pair(1, (2, 3))
    cloned = clone_element(value)
    assert cloned == value
    assert hash(cloned) == hash(value)
