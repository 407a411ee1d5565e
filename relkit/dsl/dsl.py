"""
Contains the grammar of collection literals, the text produced by
`relkit.visitors.Printer`. Use `parse_set()`, `parse_relation()` or
`parse_mapping()` to build a collection from a string such as:

    {(1 -> "one"), (2 -> "two")}
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Sequence, Tuple

from parsimonious.exceptions import ParseError
from parsimonious.grammar import Grammar
from parsimonious.nodes import Node, NodeVisitor

from relkit.elements import InvalidLiteralError, Pair
from relkit.literals import check_duplicate_keys
from relkit.mapping import Mapping
from relkit.relation import Relation
from relkit.set import Set

logger = logging.getLogger(__name__)

GRAMMAR = Grammar(
    r"""
value = set / pair / scalar

set = open_brace _ members? _ close_brace
members = value (_ comma _ value)*

pair = open_paren _ value _ pair_sep _ value _ close_paren
pair_sep = "->" / ","

scalar = float / integer / quoted_string / single_quoted_string / boolean / none
# repr() of a float has a fraction or an exponent unless it is inf or nan,
# so plain digits fall through to integer
float = ~r"-?([0-9]+\.[0-9]+([eE][-+]?[0-9]+)?|[0-9]+[eE][-+]?[0-9]+|inf|nan)"
integer = ~r"-?[0-9]+"
quoted_string = ~r'"([^"\\]*(?:\\.[^"\\]*)*)"'
single_quoted_string = ~r"'([^'\\]*(?:\\.[^'\\]*)*)'"
boolean = "true" / "false" / "True" / "False"
none = "none" / "None"

open_brace = "{"
close_brace = "}"
open_paren = "("
close_paren = ")"
comma = ","
_ = ~r"\s*"
"""
)

ESCAPE_RE = re.compile(r"\\(.)")
ESCAPES = {"n": "\n", "t": "\t"}


def _unescape(text: str) -> str:
    return ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(1)), text)


class LiteralVisitor(NodeVisitor):  # type: ignore
    def __init__(self) -> None:
        # Children are visited before their parents, so once the whole tree
        # has been visited this holds the members of the outermost set,
        # duplicates included.
        self.outer_members: List[Any] = []

    def visit(self, node: Node) -> Any:
        """
        Walk a parse tree bottom up, dispatching to the method named after the
        rule that produced each node.
        """
        method = getattr(self, "visit_" + node.expr_name, self.generic_visit)
        return method(node, [self.visit(n) for n in node])

    def visit_value(self, node: Node, children: Sequence[Any]) -> Any:
        return children[0]

    def visit_set(self, node: Node, children: Sequence[Any]) -> Set[Any]:
        _, _, zero_or_one_members, _, _ = children
        members = zero_or_one_members[0] if zero_or_one_members else []
        self.outer_members = members
        return Set(members)

    def visit_members(self, node: Node, children: Sequence[Any]) -> List[Any]:
        first, zero_or_more_others = children
        return [first, *(v for _, _, _, v in zero_or_more_others)]

    def visit_pair(self, node: Node, children: Sequence[Any]) -> Pair[Any, Any]:
        _, _, first, _, _, _, second, _, _ = children
        return Pair(first, second)

    def visit_scalar(self, node: Node, children: Sequence[Any]) -> Any:
        return children[0]

    def visit_float(self, node: Node, children: Sequence[Any]) -> float:
        return float(node.text)

    def visit_integer(self, node: Node, children: Sequence[Any]) -> int:
        return int(node.text)

    def visit_quoted_string(self, node: Node, children: Sequence[Any]) -> str:
        return _unescape(node.text[1:-1])

    def visit_single_quoted_string(self, node: Node, children: Sequence[Any]) -> str:
        return _unescape(node.text[1:-1])

    def visit_boolean(self, node: Node, children: Sequence[Any]) -> bool:
        return node.text.lower() == "true"

    def visit_none(self, node: Node, children: Sequence[Any]) -> None:
        return None

    def generic_visit(self, node: Node, children: Sequence[Any]) -> Any:
        """The generic visit method."""
        return children


def _parse(text: str) -> Tuple[Any, List[Any]]:
    logger.debug("parsing literal %r", text)
    try:
        tree = GRAMMAR.parse(text.strip())
    except ParseError as e:
        logger.debug("literal %r does not parse: %s", text, e)
        raise InvalidLiteralError(f"invalid literal '{text}'") from e

    visitor = LiteralVisitor()
    value = visitor.visit(tree)
    return value, visitor.outer_members


def parse_literal(text: str) -> Any:
    """
    Parse a literal into a Set, a Pair or a scalar.
    """
    value, _ = _parse(text)
    return value


def _parse_pairs(text: str, kind: str) -> List[Pair[Any, Any]]:
    value, members = _parse(text)
    if not isinstance(value, Set):
        raise InvalidLiteralError(f"a {kind} literal must be a set of pairs")

    for member in members:
        if not isinstance(member, Pair):
            raise InvalidLiteralError(
                f"a {kind} literal can only hold pairs, found '{member}'"
            )
    return members


def parse_set(text: str) -> Set[Any]:
    value = parse_literal(text)
    if not isinstance(value, Set):
        raise InvalidLiteralError(f"'{text}' is not a set literal")
    return value


def parse_relation(text: str) -> Relation[Any, Any]:
    return Relation.from_sequence(_parse_pairs(text, "relation"))


def parse_mapping(text: str) -> Mapping[Any, Any]:
    pairs = _parse_pairs(text, "mapping")
    check_duplicate_keys(pairs)
    return Mapping.from_sequence(pairs)
