"""Named accessors over positional node children.

Plain slots resolve through the schema in `rubyast.syntax.schema`. Slots
whose meaning depends on the node type family (`arguments`, `body`, ...)
are computed here instead of looked up by index.

Every accessor raises `UnsupportedAccessor` for a node type that does not
support it, except for the find-style hash lookups (`has_key`,
`hash_pair`, `hash_value`), which report a missing key as False/None, and
`to_value`, which returns the node itself for anything that is not a
literal.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final

from rubyast.ast.node import Child, Node
from rubyast.diagnostics import UnsupportedAccessor
from rubyast.syntax import SLOT_NAMES, NodeType, slot_index

_T = NodeType

_GROUPING_TYPES: Final = frozenset({_T.BEGIN, _T.KWBEGIN})
_HASH_TYPES: Final = frozenset({_T.HASH, _T.HASH_PATTERN})

_ELEMENT_TYPES: Final = frozenset(
    {
        _T.ARRAY,
        _T.ARRAY_PATTERN,
        _T.ARRAY_PATTERN_WITH_TAIL,
        _T.FIND_PATTERN,
        _T.DSTR,
        _T.DSYM,
        _T.XSTR,
        _T.REGOPT,
        _T.MLHS,
        _T.UNDEF,
    }
)

# Index of the first body child, per node type.
_BODY_START: Final[dict[NodeType, int]] = {
    _T.RESCUE: 0,
    _T.ENSURE: 0,
    _T.PREEXE: 0,
    _T.POSTEXE: 0,
    _T.WHEN: 1,
    _T.MODULE: 1,
    _T.SCLASS: 1,
    _T.UNTIL: 1,
    _T.UNTIL_POST: 1,
    _T.WHILE: 1,
    _T.WHILE_POST: 1,
    _T.DEF: 2,
    _T.BLOCK: 2,
    _T.CLASS: 2,
    _T.FOR: 2,
    _T.IN_PATTERN: 2,
    _T.NUMBLOCK: 2,
    _T.RESBODY: 2,
    _T.DEFS: 3,
}

# Index of the parameter list child for definition-like nodes.
_PARAMETERS_AT: Final[dict[NodeType, int]] = {
    _T.DEF: 1,
    _T.BLOCK: 1,
    _T.NUMBLOCK: 1,
    _T.DEFS: 2,
}


def get_slot(node: Node, slot: str) -> Child:
    """Child in the position the node's type assigns to `slot`.

    Missing optional trailing children read as None.
    """
    index = slot_index(node.type, slot)
    if index is None:
        raise UnsupportedAccessor(slot, node)
    if index >= len(node.children):
        return None
    return node.children[index]


def _child(node: Node, index: int) -> Child:
    if index >= len(node.children):
        return None
    return node.children[index]


def _is(child: Child, *types: NodeType) -> bool:
    return isinstance(child, Node) and child.type in types


def arguments(node: Node) -> list[Child]:
    """Arguments of a call, parameters of a definition or block.

    `(send (const nil :FactoryBot) :create (sym :post) (hash ...))` gives
    `[(sym :post), (hash ...)]`; `(def :foo (args (arg :a) (arg :b)) nil)`
    gives `[(arg :a), (arg :b)]`.
    """
    match node.type:
        case _T.DEF | _T.DEFS | _T.BLOCK | _T.NUMBLOCK:
            parameters = _child(node, _PARAMETERS_AT[node.type])
            if isinstance(parameters, Node) and parameters.type == _T.ARGS:
                return list(parameters.children)
            return [parameters]
        case _T.SEND | _T.CSEND:
            return list(node.children[2:])
        case _T.DEFINED | _T.YIELD:
            return list(node.children)
        case _:
            raise UnsupportedAccessor("arguments", node)


def body(node: Node) -> list[Child]:
    """Statements of a body, with a `begin` grouping unwrapped.

    `(block (send nil :it) (args) (begin (send nil :a) (send nil :b)))`
    gives `[(send nil :a), (send nil :b)]`.
    """
    if node.type in _GROUPING_TYPES:
        return list(node.children)

    start = _BODY_START.get(node.type)
    if start is None:
        raise UnsupportedAccessor("body", node)

    first = _child(node, start)
    if first is None:
        return []
    if isinstance(first, Node) and first.type in _GROUPING_TYPES:
        return body(first)
    if start == 0:
        # Later children of rescue/ensure are handlers, not statements.
        return [first]
    return list(node.children[start:])


def _between_expression_and_else(node: Node, accessor: str, node_type: NodeType) -> list[Child]:
    if node.type != node_type:
        raise UnsupportedAccessor(accessor, node)
    return list(node.children[1:-1])


def when_statements(node: Node) -> list[Child]:
    return _between_expression_and_else(node, "when_statements", _T.CASE)


def in_statements(node: Node) -> list[Child]:
    return _between_expression_and_else(node, "in_statements", _T.CASE_MATCH)


def rescue_bodies(node: Node) -> list[Child]:
    return _between_expression_and_else(node, "rescue_bodies", _T.RESCUE)


def ensure_body(node: Node) -> list[Child]:
    if node.type != _T.ENSURE:
        raise UnsupportedAccessor("ensure_body", node)
    return list(node.children[1:])


def else_statement(node: Node) -> Child:
    """Last child, whatever the node type."""
    if not node.children:
        return None
    return node.children[-1]


def elements(node: Node) -> list[Child]:
    if node.type in _ELEMENT_TYPES:
        return list(node.children)
    if node.type == _T.REGEXP:
        return list(node.children[:-1])
    raise UnsupportedAccessor("elements", node)


def options(node: Node) -> Child:
    """The `regopt` node of a regexp."""
    if node.type != _T.REGEXP:
        raise UnsupportedAccessor("options", node)
    return else_statement(node)


def exceptions(node: Node) -> Child:
    """Exception class list of a rescue clause."""
    if node.type != _T.RESBODY:
        raise UnsupportedAccessor("exceptions", node)
    return _child(node, 0)


def _require_hash(node: Node, accessor: str) -> None:
    if node.type not in _HASH_TYPES:
        raise UnsupportedAccessor(accessor, node)


def _children_of_type(node: Node, node_type: NodeType) -> list[Node]:
    return [child for child in node.children if isinstance(child, Node) and child.type == node_type]


def pairs(node: Node) -> list[Node]:
    _require_hash(node, "pairs")
    return _children_of_type(node, _T.PAIR)


def kwsplats(node: Node) -> list[Node]:
    _require_hash(node, "kwsplats")
    return _children_of_type(node, _T.KWSPLAT)


def keys(node: Node) -> list[Child]:
    _require_hash(node, "keys")
    return [get_slot(pair, "key") for pair in pairs(node)]


def values(node: Node) -> list[Child]:
    _require_hash(node, "values")
    return [get_slot(pair, "value") for pair in pairs(node)]


def _pair_key_value(pair: Node) -> Any:
    key = get_slot(pair, "key")
    if isinstance(key, Node):
        return to_value(key)
    return key


def _same_key(found: Any, key: Any) -> bool:
    # `true == 1` is false in Ruby; `1 == 1.0` is not.
    if isinstance(found, bool) != isinstance(key, bool):
        return False
    if isinstance(found, list) and isinstance(key, list):
        return len(found) == len(key) and all(map(_same_key, found, key))
    return found == key


def _find_pair(node: Node, key: Any) -> Node | None:
    for pair in pairs(node):
        if _same_key(_pair_key_value(pair), key):
            return pair
    return None


def has_key(node: Node, key: Any) -> bool:
    """Whether a hash has a pair whose key literal equals `key`.

    Symbol and string keys are distinct: `{foo: 1}` has `Symbol("foo")`,
    `{"foo" => 1}` has `"foo"`.
    """
    _require_hash(node, "has_key")
    return _find_pair(node, key) is not None


def hash_pair(node: Node, key: Any) -> Node | None:
    _require_hash(node, "hash_pair")
    return _find_pair(node, key)


def hash_value(node: Node, key: Any) -> Child:
    _require_hash(node, "hash_value")
    pair = _find_pair(node, key)
    if pair is None:
        return None
    return get_slot(pair, "value")


def to_value(node: Node) -> Any:
    """Python value of a literal node; any other node is returned unchanged.

    `(array (str "str") (sym :str))` gives `["str", Symbol("str")]`.
    """
    match node.type:
        case _T.INT | _T.FLOAT | _T.STR | _T.SYM:
            return node.children[-1]
        case _T.TRUE:
            return True
        case _T.FALSE:
            return False
        case _T.NIL:
            return None
        case _T.ARRAY:
            return [to_value(child) if isinstance(child, Node) else child for child in node.children]
        case _T.BEGIN | _T.KWBEGIN:
            if not node.children:
                return None
            first = node.children[0]
            return to_value(first) if isinstance(first, Node) else first
        case _:
            return node


def to_source(node: Node) -> str | None:
    """Exact source text the node was parsed from, if it has a span."""
    if node.span is None:
        return None
    return node.span.text


DERIVED_PROPERTIES: Final[dict[str, Callable[[Node], Any]]] = {
    "arguments": arguments,
    "body": body,
    "when_statements": when_statements,
    "in_statements": in_statements,
    "rescue_bodies": rescue_bodies,
    "ensure_body": ensure_body,
    "else_statement": else_statement,
    "elements": elements,
    "options": options,
    "exceptions": exceptions,
    "pairs": pairs,
    "kwsplats": kwsplats,
    "keys": keys,
    "values": values,
}

NODE_METHODS: Final[tuple[Callable[..., Any], ...]] = (
    has_key,
    hash_pair,
    hash_value,
    to_value,
    to_source,
)


def _slot_property(slot: str) -> property:
    def getter(node: Node) -> Child:
        return get_slot(node, slot)

    getter.__name__ = slot
    return property(getter, doc=f"The `{slot}` child of this node.")


def install_accessors(cls: type[Node]) -> None:
    """Attach one property per slot name, derived or positional, to `cls`."""
    for slot in SLOT_NAMES:
        if slot not in DERIVED_PROPERTIES:
            setattr(cls, slot, _slot_property(slot))
    for name, accessor in DERIVED_PROPERTIES.items():
        setattr(cls, name, property(accessor, doc=accessor.__doc__))
    for method in NODE_METHODS:
        setattr(cls, method.__name__, method)


install_accessors(Node)


__all__ = [
    "DERIVED_PROPERTIES",
    "arguments",
    "body",
    "else_statement",
    "elements",
    "ensure_body",
    "exceptions",
    "get_slot",
    "has_key",
    "hash_pair",
    "hash_value",
    "in_statements",
    "install_accessors",
    "keys",
    "kwsplats",
    "options",
    "pairs",
    "rescue_bodies",
    "to_source",
    "to_value",
    "values",
    "when_statements",
]
