"""Diagnostics."""

from rubyast.diagnostics.codes import (
    ACCESSOR_NOT_SUPPORTED,
    NODE_HAS_NO_PARENT,
    SEXP_EXPECTED_NODE_TYPE,
    SEXP_EXPECTED_SINGLE_ROOT,
    SEXP_UNBALANCED_PAREN,
    SEXP_UNEXPECTED_CHARACTER,
    SEXP_UNEXPECTED_TOKEN,
    SEXP_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from rubyast.diagnostics.diagnostic import Diagnostic, has_errors
from rubyast.diagnostics.errors import (
    NoParent,
    RubyAstError,
    SexpSyntaxError,
    UnsupportedAccessor,
)

__all__ = [
    "ACCESSOR_NOT_SUPPORTED",
    "NODE_HAS_NO_PARENT",
    "SEXP_EXPECTED_NODE_TYPE",
    "SEXP_EXPECTED_SINGLE_ROOT",
    "SEXP_UNBALANCED_PAREN",
    "SEXP_UNEXPECTED_CHARACTER",
    "SEXP_UNEXPECTED_TOKEN",
    "SEXP_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSpec",
    "NoParent",
    "RubyAstError",
    "SexpSyntaxError",
    "UnsupportedAccessor",
    "has_errors",
]
