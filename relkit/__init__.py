"""
.. include:: ../README.rst
"""

from relkit.elements import (
    DuplicateKeyError,
    InvalidElementError,
    InvalidLiteralError,
    InvalidMappingError,
    InvalidPairError,
    Pair,
)
from relkit.set import Set
from relkit.relation import Relation
from relkit.mapping import Mapping
from relkit.literals import mapping_lit, pair_lit, relation_lit, set_lit
from relkit.dsl.dsl import parse_literal, parse_mapping, parse_relation, parse_set

__all__ = [
    "DuplicateKeyError",
    "InvalidElementError",
    "InvalidLiteralError",
    "InvalidMappingError",
    "InvalidPairError",
    "Mapping",
    "Pair",
    "Relation",
    "Set",
    "mapping_lit",
    "pair_lit",
    "parse_literal",
    "parse_mapping",
    "parse_relation",
    "parse_set",
    "relation_lit",
    "set_lit",
]
