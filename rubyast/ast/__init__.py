"""Ruby AST nodes with named slot accessors."""

from rubyast.ast.literal import Literal, Symbol
from rubyast.ast.node import Child, Node, s
from rubyast.ast.accessors import (
    DERIVED_PROPERTIES,
    arguments,
    body,
    else_statement,
    elements,
    ensure_body,
    exceptions,
    get_slot,
    has_key,
    hash_pair,
    hash_value,
    in_statements,
    keys,
    kwsplats,
    options,
    pairs,
    rescue_bodies,
    to_source,
    to_value,
    values,
    when_statements,
)
from rubyast.ast.dynamic import HashSuffix, can_resolve_dynamic, dynamic_attribute, resolve_dynamic

__all__ = [
    "DERIVED_PROPERTIES",
    "Child",
    "HashSuffix",
    "Literal",
    "Node",
    "Symbol",
    "arguments",
    "body",
    "can_resolve_dynamic",
    "dynamic_attribute",
    "else_statement",
    "elements",
    "ensure_body",
    "exceptions",
    "get_slot",
    "has_key",
    "hash_pair",
    "hash_value",
    "in_statements",
    "keys",
    "kwsplats",
    "options",
    "pairs",
    "rescue_bodies",
    "resolve_dynamic",
    "s",
    "to_source",
    "to_value",
    "values",
    "when_statements",
]
