"""Read and write the parser gem's s-expression notation."""

from rubyast.sexp.lexer import SexpLexer
from rubyast.sexp.options import SexpOptions, SexpStyle
from rubyast.sexp.reader import SexpReader, read_sexp
from rubyast.sexp.tokens import SexpToken, SexpTokenKind
from rubyast.sexp.writer import format_literal, format_node, inspect_node, to_sexp

__all__ = [
    "SexpLexer",
    "SexpOptions",
    "SexpReader",
    "SexpStyle",
    "SexpToken",
    "SexpTokenKind",
    "format_literal",
    "format_node",
    "inspect_node",
    "read_sexp",
    "to_sexp",
]
