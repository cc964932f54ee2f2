"""Build node trees from the parser gem's s-expression dump.

    read_sexp('(send nil :puts (str "hi"))')

Nodes read this way carry no source span.
"""

from __future__ import annotations

import logging

from rubyast.ast.node import Child, Node
from rubyast.diagnostics import (
    SEXP_EXPECTED_NODE_TYPE,
    SEXP_EXPECTED_SINGLE_ROOT,
    SEXP_UNBALANCED_PAREN,
    SEXP_UNEXPECTED_TOKEN,
    Diagnostic,
    DiagnosticSpec,
    SexpSyntaxError,
    has_errors,
)
from rubyast.sexp.lexer import SexpLexer
from rubyast.sexp.tokens import SexpToken, SexpTokenKind
from rubyast.syntax import NodeTag, node_tag

logger = logging.getLogger(__name__)

_KEYWORD_LITERALS: dict[str, Child] = {"nil": None, "true": True, "false": False}

_LITERAL_TOKENS = (
    SexpTokenKind.SYMBOL,
    SexpTokenKind.STRING,
    SexpTokenKind.INT,
    SexpTokenKind.FLOAT,
)


class SexpReader:
    """Recursive reader over the token stream of one s-expression."""

    def __init__(self, tokens: list[SexpToken]) -> None:
        self._tokens = tokens
        self._position = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> SexpToken:
        return self._tokens[self._position]

    def read_root(self) -> Node | None:
        if self.current.kind != SexpTokenKind.LPAREN:
            self._error(SEXP_EXPECTED_NODE_TYPE, self.current)
            return None

        root = self.read_node()
        if self.current.kind != SexpTokenKind.EOF:
            self._error(SEXP_EXPECTED_SINGLE_ROOT, self.current)
        return root

    def read_node(self) -> Node | None:
        open_paren = self._bump()

        type_token = self.current
        node_type: NodeTag | None = None
        if type_token.kind == SexpTokenKind.IDENTIFIER:
            self._bump()
            node_type = node_tag(str(type_token.value).replace("-", "_"))
        else:
            self._error(SEXP_EXPECTED_NODE_TYPE, type_token)

        children: list[Child] = []
        while True:
            token = self.current
            match token.kind:
                case SexpTokenKind.RPAREN:
                    self._bump()
                    break
                case SexpTokenKind.EOF:
                    self._error(SEXP_UNBALANCED_PAREN, open_paren, detail="Missing `)`.")
                    break
                case SexpTokenKind.LPAREN:
                    children.append(self.read_node())
                case SexpTokenKind.IDENTIFIER if token.text in _KEYWORD_LITERALS:
                    self._bump()
                    children.append(_KEYWORD_LITERALS[token.text])
                case kind if kind in _LITERAL_TOKENS:
                    self._bump()
                    children.append(token.value)
                case SexpTokenKind.ERROR:
                    # Already reported by the lexer.
                    self._bump()
                case _:
                    self._error(SEXP_UNEXPECTED_TOKEN, token, detail=repr(token.text))
                    self._bump()

        if node_type is None:
            return None
        return Node(node_type, children)

    def _bump(self) -> SexpToken:
        token = self.current
        if token.kind != SexpTokenKind.EOF:
            self._position += 1
        return token

    def _error(self, spec: DiagnosticSpec, token: SexpToken, *, detail: str | None = None) -> None:
        self._diagnostics.append(Diagnostic.from_spec(spec, token.range, detail=detail))


def read_sexp(text: str) -> Node:
    """Read one node tree; raises SexpSyntaxError listing every problem found."""
    lexer = SexpLexer(text)
    tokens = lexer.lex()
    reader = SexpReader(tokens)
    root = reader.read_root()

    diagnostics = [*lexer.diagnostics, *reader.diagnostics]
    if has_errors(diagnostics) or root is None:
        for diagnostic in diagnostics:
            logger.debug("sexp %s at %s: %s", diagnostic.code, diagnostic.range.as_tuple(), diagnostic.message)
        raise SexpSyntaxError(diagnostics)
    return root
