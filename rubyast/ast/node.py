"""Ruby AST node with parent back-links.

Slot accessors (`receiver`, `body`, `to_value()`, ...) are attached to
`Node` by `rubyast.ast.accessors` when the `rubyast.ast` package is
imported; unknown attribute names fall through to
`rubyast.ast.dynamic.dynamic_attribute`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeAlias

from rubyast.ast.literal import Literal
from rubyast.diagnostics import NoParent
from rubyast.syntax import NodeTag, NodeType, node_tag
from rubyast.text import SourceSpan

Child: TypeAlias = "Node | Literal"

_FIELDS = frozenset({"type", "children", "span", "_parent"})


class Node:
    __slots__ = (
        "type",
        "children",
        "span",
        "_parent",
    )

    def __init__(
        self,
        type: NodeTag,
        children: Iterable[Child] | None = (),
        span: SourceSpan | None = None,
    ) -> None:
        self.type: NodeTag = type if isinstance(type, NodeType) else node_tag(type)
        self.children: tuple[Child, ...] = () if children is None else tuple(children)
        self.span = span
        self._parent: Node | None = None

        for child in self.children:
            if isinstance(child, Node):
                child._parent = self

    @property
    def parent(self) -> Node | None:
        return self._parent

    def set_parent(self, node: Node | None) -> None:
        """Re-point the parent back-link, e.g. when grafting a fragment."""
        self._parent = node

    def siblings(self) -> list[Child]:
        """Children of the parent that come after this node."""
        if self._parent is None:
            raise NoParent(self)
        return list(self._parent.children[self._index_in(self._parent) + 1 :])

    def next_sibling(self) -> Child | None:
        if self._parent is None:
            return None
        index = self._index_in(self._parent) + 1
        if index >= len(self._parent.children):
            return None
        return self._parent.children[index]

    def prev_sibling(self) -> Child | None:
        if self._parent is None:
            return None
        index = self._index_in(self._parent)
        if index == 0:
            return None
        return self._parent.children[index - 1]

    def child_nodes(self) -> tuple[Node, ...]:
        return tuple(child for child in self.children if isinstance(child, Node))

    def ancestors(self) -> tuple[Node, ...]:
        """Parent chain, nearest first."""
        chain: list[Node] = []
        current = self._parent
        while current is not None:
            chain.append(current)
            current = current._parent
        return tuple(chain)

    def root(self) -> Node:
        current = self
        while current._parent is not None:
            current = current._parent
        return current

    def descendants(self) -> tuple[Node, ...]:
        """Every node below this one, pre-order."""
        nodes: list[Node] = []

        def walk(node: Node) -> None:
            for child in node.children:
                if isinstance(child, Node):
                    nodes.append(child)
                    walk(child)

        walk(self)
        return tuple(nodes)

    def _index_in(self, parent: Node) -> int:
        for index, child in enumerate(parent.children):
            if child is self:
                return index
        # Re-parented by hand onto a node that does not list it as a child.
        raise ValueError(f"{self!r} is not among its parent's children")

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name in _FIELDS:
            raise AttributeError(name)

        from rubyast.ast.dynamic import dynamic_attribute

        return dynamic_attribute(self, name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.type == other.type and self.children == other.children

    def __hash__(self) -> int:
        return hash((self.type, self.children))

    def __repr__(self) -> str:
        from rubyast.sexp.writer import inspect_node

        return inspect_node(self)

    def __str__(self) -> str:
        from rubyast.sexp.writer import to_sexp

        return to_sexp(self)


def s(type: NodeTag, *children: Child, span: SourceSpan | None = None) -> Node:
    """Build a node the way the parser gem's `s(:type, *children)` helper does."""
    return Node(type, children, span)


__all__ = ["Child", "Node", "s"]
