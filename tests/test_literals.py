from __future__ import annotations

import re
from typing import Any, Optional, Sequence

import pytest

from relkit.elements import (
    DuplicateKeyError,
    InvalidMappingError,
    InvalidPairError,
    Pair,
)
from relkit.literals import mapping_lit, pair_lit, relation_lit, set_lit
from relkit.mapping import Mapping
from relkit.relation import Relation
from relkit.set import Set
from tests import collect, pairs


def test_set_lit() -> None:
    assert set_lit() == Set.empty()
    assert set_lit(1, 2, 2, 3) == Set([1, 2, 3])
    assert set_lit(set_lit(1), set_lit(1)).size() == 1


def test_pair_lit() -> None:
    assert pair_lit(1, "a") == Pair(1, "a")
    with pytest.raises(InvalidPairError, match="is not hashable"):
        pair_lit(1, [2])


def test_relation_lit() -> None:
    r = relation_lit((1, "a"), (1, "b"), Pair(1, "a"))
    assert r == Relation.from_sequence([(1, "a"), (1, "b")])
    assert collect(r) == pairs((1, "a"), (1, "b"))


mapping_lit_tests = [
    pytest.param([], set(), None, id="empty"),
    pytest.param(
        [(1, "one"), (2, "two")], pairs((1, "one"), (2, "two")), None, id="distinct keys"
    ),
    pytest.param(
        [Pair(1, "one"), (2, "one")],
        pairs((1, "one"), (2, "one")),
        None,
        id="pairs and tuples mixed",
    ),
    pytest.param(
        [(1, "one"), (1, "two")],
        None,
        DuplicateKeyError("mapping literal: duplicate domain element 1"),
        id="key with two values",
    ),
    pytest.param(
        [(1, "one"), (1, "one")],
        None,
        DuplicateKeyError("mapping literal: duplicate domain element 1"),
        id="key listed twice with the same value",
    ),
    pytest.param(
        [(1, "one"), 2],
        None,
        InvalidPairError("'2' must be a Pair or a 2-tuple"),
        id="not a pair",
    ),
]


@pytest.mark.parametrize("literal, expected, exception", mapping_lit_tests)
def test_mapping_lit(
    literal: Sequence[Any], expected: Optional[set[Any]], exception: Optional[Exception]
) -> None:
    if exception is not None:
        with pytest.raises(type(exception), match=re.escape(str(exception))):
            mapping_lit(*literal)
    else:
        m = mapping_lit(*literal)
        assert isinstance(m, Mapping)
        assert m.is_functional()
        assert collect(m) == expected


def test_duplicate_key_error() -> None:
    with pytest.raises(InvalidMappingError) as excinfo:
        mapping_lit(("a", 1), ("b", 2), ("a", 3))
    assert isinstance(excinfo.value, DuplicateKeyError)
    assert excinfo.value.key == "a"
