from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from relkit.elements import Collection, Pair

TVisited = TypeVar("TVisited")


class CollectionVisitor(ABC, Generic[TVisited]):
    def visit(self, node: Any) -> TVisited:
        if isinstance(node, Collection):
            return self._visit_collection(node)
        elif isinstance(node, Pair):
            return self._visit_pair(node)

        return self._visit_scalar(node)

    @abstractmethod
    def _visit_collection(self, collection: Collection[Any]) -> TVisited:
        raise NotImplementedError

    @abstractmethod
    def _visit_pair(self, pair: Pair[Any, Any]) -> TVisited:
        raise NotImplementedError

    @abstractmethod
    def _visit_scalar(self, value: Any) -> TVisited:
        raise NotImplementedError


class Printer(CollectionVisitor[str]):
    """
    Renders a collection as literal text, e.g. `{(1 -> "one"), (2 -> "two")}`.
    Sets, relations and mappings all print as braces around their members.
    Members come out in iteration order, so two equal collections may print
    differently. The output of this printer can be read back with
    `relkit.dsl.dsl.parse_literal` as long as the scalars are ints, floats
    (inf and nan included), strings, booleans or None.
    """

    def _visit_collection(self, collection: Collection[Any]) -> str:
        return f"{{{', '.join(self.visit(m) for m in collection)}}}"

    def _visit_pair(self, pair: Pair[Any, Any]) -> str:
        return f"({self.visit(pair.first)} -> {self.visit(pair.second)})"

    def _visit_scalar(self, value: Any) -> str:
        if value is None or isinstance(value, bool):
            return str(value)
        elif isinstance(value, str):
            # Backslashes first, otherwise the other escapes get doubled.
            escaped = (
                value.replace("\\", "\\\\")
                .replace('"', '\\"')
                .replace("\n", "\\n")
                .replace("\t", "\\t")
            )
            return f'"{escaped}"'

        return repr(value)


def render(node: Any) -> str:
    return Printer().visit(node)
