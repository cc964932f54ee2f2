"""Semantic accessors for the parser gem's Ruby AST."""

import logging

from rubyast.ast import (
    Child,
    HashSuffix,
    Node,
    Symbol,
    can_resolve_dynamic,
    get_slot,
    resolve_dynamic,
    s,
)
from rubyast.diagnostics import NoParent, RubyAstError, SexpSyntaxError, UnsupportedAccessor
from rubyast.sexp import SexpOptions, SexpStyle, inspect_node, read_sexp, to_sexp
from rubyast.syntax import NODE_SLOTS, SLOT_NAMES, NodeTag, NodeType
from rubyast.text import SourceSpan, TextRange

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NODE_SLOTS",
    "SLOT_NAMES",
    "Child",
    "HashSuffix",
    "NoParent",
    "Node",
    "NodeTag",
    "NodeType",
    "RubyAstError",
    "SexpOptions",
    "SexpStyle",
    "SexpSyntaxError",
    "SourceSpan",
    "Symbol",
    "TextRange",
    "UnsupportedAccessor",
    "can_resolve_dynamic",
    "get_slot",
    "inspect_node",
    "read_sexp",
    "resolve_dynamic",
    "s",
    "to_sexp",
]
