"""
Helpers for writing collections out by hand, e.g. in tests:

    set_lit(1, 2, 3)
    relation_lit((1, "a"), (1, "b"))
    mapping_lit((1, "one"), (2, "two"))

Unlike `Mapping.from_sequence`, `mapping_lit` does not trust its input: a key
that is listed twice raises `DuplicateKeyError`, even when both values agree.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from relkit.elements import DuplicateKeyError, Pair, as_pair
from relkit.mapping import Mapping
from relkit.relation import PairLike, Relation
from relkit.set import Set

logger = logging.getLogger(__name__)


def set_lit(*elements: Any) -> Set[Any]:
    return Set(elements)


def pair_lit(a: Any, b: Any) -> Pair[Any, Any]:
    return Pair(a, b)


def relation_lit(*pairs: PairLike[Any, Any]) -> Relation[Any, Any]:
    return Relation.from_sequence(pairs)


def check_duplicate_keys(pairs: Sequence[Pair[Any, Any]]) -> None:
    seen = set()
    for p in pairs:
        if p.first in seen:
            logger.debug("mapping literal repeats key %r", p.first)
            raise DuplicateKeyError(
                f"mapping literal: duplicate domain element {p.first}", key=p.first
            )
        seen.add(p.first)


def mapping_lit(*pairs: PairLike[Any, Any]) -> Mapping[Any, Any]:
    checked = [as_pair(p) for p in pairs]
    check_duplicate_keys(checked)
    return Mapping.from_sequence(checked)
