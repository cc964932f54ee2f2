"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


ACCESSOR_NOT_SUPPORTED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ACCESSOR_NOT_SUPPORTED",
    message="Accessor is not supported for this node type.",
    hint="Check the node type before asking for a slot it does not declare.",
    severity="error",
    category="accessor",
)

NODE_HAS_NO_PARENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="NODE_HAS_NO_PARENT",
    message="Node has no parent.",
    hint="Siblings are only defined for nodes attached to a parent.",
    severity="error",
    category="node",
)

SEXP_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEXP_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a double quote.",
    severity="error",
    category="sexp",
)

SEXP_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEXP_UNEXPECTED_CHARACTER",
    message="Unexpected character.",
    severity="error",
    category="sexp",
)

SEXP_EXPECTED_NODE_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEXP_EXPECTED_NODE_TYPE",
    message="Expected a node type after `(`.",
    hint="Write nodes as `(type child ...)`, e.g. `(int 1)`.",
    severity="error",
    category="sexp",
)

SEXP_UNBALANCED_PAREN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEXP_UNBALANCED_PAREN",
    message="Unbalanced parenthesis.",
    severity="error",
    category="sexp",
)

SEXP_EXPECTED_SINGLE_ROOT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEXP_EXPECTED_SINGLE_ROOT",
    message="Expected exactly one root node.",
    severity="error",
    category="sexp",
)

SEXP_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEXP_UNEXPECTED_TOKEN",
    message="Unexpected token.",
    hint="Children are nodes or literals: nil, true, false, :sym, \"str\", 1, 1.5.",
    severity="error",
    category="sexp",
)
