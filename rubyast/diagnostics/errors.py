"""Exceptions raised by node accessors and the s-expression reader."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rubyast.diagnostics.codes import (
    ACCESSOR_NOT_SUPPORTED,
    NODE_HAS_NO_PARENT,
    DiagnosticSpec,
)

if TYPE_CHECKING:
    from rubyast.ast.node import Node
    from rubyast.diagnostics.diagnostic import Diagnostic
    from rubyast.syntax import NodeTag


class RubyAstError(Exception):
    """Base error; `spec` names the diagnostic code behind it."""

    spec: DiagnosticSpec

    @property
    def code(self) -> str:
        return self.spec.code


class UnsupportedAccessor(RubyAstError):
    """An accessor was asked of a node whose type does not declare it.

    Not an `AttributeError`: a failing accessor property must surface as
    itself rather than fall through to dynamic attribute lookup.
    """

    spec = ACCESSOR_NOT_SUPPORTED

    def __init__(self, accessor: str, node: Node) -> None:
        self.accessor = accessor
        self.node = node
        super().__init__(f"{accessor} is not supported for {node!r}")

    @property
    def node_type(self) -> NodeTag:
        return self.node.type


class NoParent(RubyAstError):
    spec = NODE_HAS_NO_PARENT

    def __init__(self, node: Node) -> None:
        self.node = node
        super().__init__(f"{node!r} has no parent")


class SexpSyntaxError(RubyAstError):
    """Malformed s-expression text; carries every diagnostic the reader produced."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        if not diagnostics:
            raise ValueError("SexpSyntaxError requires at least one diagnostic")
        self.diagnostics = diagnostics
        first = diagnostics[0]
        start, end = first.range.as_tuple()
        super().__init__(f"{first.code} at {start}..{end}: {first.message}")

    @property
    def code(self) -> str:
        return self.diagnostics[0].code
