"""Positional slot names for every node type.

Each entry lists, in child order, the semantic name of every child slot a
node of that type carries. Trailing optional slots may hold `None`.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from rubyast.syntax.kind import NodeTag, NodeType

_T = NodeType

NODE_SLOTS: Final[Mapping[NodeType, tuple[str, ...]]] = MappingProxyType(
    {
        _T.ALIAS: ("new_name", "old_name"),
        _T.AND: ("left_value", "right_value"),
        _T.AND_ASGN: ("variable", "value"),
        _T.ARG: ("name",),
        _T.ARGS: (),
        _T.ARRAY: ("elements",),
        _T.ARRAY_PATTERN: ("elements",),
        _T.ARRAY_PATTERN_WITH_TAIL: ("elements",),
        _T.BACK_REF: ("name",),
        _T.BEGIN: ("body",),
        _T.BLOCK: ("caller", "arguments", "body"),
        _T.BLOCKARG: ("name",),
        _T.BLOCK_PASS: ("name",),
        _T.BREAK: ("expression",),
        _T.CASE: ("expression", "when_statements", "else_statement"),
        _T.CASE_MATCH: ("expression", "in_statements", "else_statement"),
        _T.CASGN: ("parent_const", "name", "value"),
        _T.CBASE: (),
        _T.COMPLEX: ("value",),
        _T.CONST: ("parent_const", "name"),
        _T.CLASS: ("name", "parent_class", "body"),
        _T.CSEND: ("receiver", "message", "arguments"),
        _T.CVASGN: ("variable", "value"),
        _T.CVAR: ("name",),
        _T.DEF: ("name", "arguments", "body"),
        _T.DEFINED: ("arguments",),
        _T.DEFS: ("self", "name", "arguments", "body"),
        _T.DSTR: ("elements",),
        _T.DSYM: ("elements",),
        _T.EFLIPFLOP: ("begin", "end"),
        _T.ENSURE: ("body", "ensure_body"),
        _T.ERANGE: ("begin", "end"),
        _T.FALSE: (),
        _T.FIND_PATTERN: ("elements",),
        _T.FLOAT: ("value",),
        _T.FOR: ("variable", "expression", "body"),
        _T.FORWARD_ARGS: (),
        _T.GVAR: ("name",),
        _T.GVASGN: ("variable", "value"),
        _T.HASH: ("pairs", "kwsplats"),
        _T.HASH_PATTERN: ("pairs", "kwsplats"),
        _T.IF: ("expression", "if_statement", "else_statement"),
        _T.IFLIPFLOP: ("begin", "end"),
        _T.IF_GUARD: ("expression",),
        _T.INT: ("value",),
        _T.IN_PATTERN: ("expression", "guard", "body"),
        _T.IRANGE: ("begin", "end"),
        _T.IVASGN: ("variable", "value"),
        _T.IVAR: ("name",),
        _T.KWARG: ("name",),
        _T.KWBEGIN: ("body",),
        _T.KWBODY: ("body",),
        _T.KWNILARG: (),
        _T.KWOPTARG: ("name", "value"),
        _T.KWRESTARG: ("name",),
        _T.KWSPLAT: ("name",),
        _T.LVAR: ("name",),
        _T.LVASGN: ("variable", "value"),
        _T.MASGN: ("variable", "value"),
        _T.MATCH_AS: ("key", "value"),
        _T.MATCH_NIL_PATTERN: (),
        _T.MATCH_PATTERN: ("left_value", "right_value"),
        _T.MATCH_PATTERN_P: ("left_value", "right_value"),
        _T.MATCH_REST: ("variable",),
        _T.MATCH_VAR: ("name",),
        _T.MATCH_WITH_LVASGN: ("left_value", "right_value"),
        _T.MLHS: ("elements",),
        _T.MODULE: ("name", "body"),
        _T.NEXT: ("expression",),
        _T.NIL: (),
        _T.NTH_REF: ("name",),
        _T.NUMBLOCK: ("caller", "arguments_count", "body"),
        _T.OPTARG: ("name", "value"),
        _T.OP_ASGN: ("variable", "operator", "value"),
        _T.OR: ("left_value", "right_value"),
        _T.OR_ASGN: ("variable", "value"),
        _T.PAIR: ("key", "value"),
        _T.PIN: ("expression",),
        _T.POSTEXE: ("body",),
        _T.PREEXE: ("body",),
        _T.RATIONAL: ("value",),
        _T.REDO: (),
        _T.REGEXP: ("elements", "options"),
        _T.REGOPT: ("elements",),
        _T.RESBODY: ("exceptions", "variable", "body"),
        _T.RESCUE: ("body", "rescue_bodies", "else_statement"),
        _T.RESTARG: ("name",),
        _T.RETRY: (),
        _T.RETURN: ("expression",),
        _T.SCLASS: ("name", "body"),
        _T.SELF: (),
        _T.SHADOWARG: ("name",),
        _T.SEND: ("receiver", "message", "arguments"),
        _T.SPLAT: ("name",),
        _T.STR: ("value",),
        _T.SUPER: ("arguments",),
        _T.SYM: ("value",),
        _T.TRUE: (),
        _T.UNDEF: ("elements",),
        _T.UNLESS_GUARD: ("expression",),
        _T.UNTIL: ("expression", "body"),
        _T.UNTIL_POST: ("expression", "body"),
        _T.WHEN: ("expression", "body"),
        _T.WHILE: ("expression", "body"),
        _T.WHILE_POST: ("expression", "body"),
        _T.XSTR: ("elements",),
        _T.YIELD: ("arguments",),
        _T.ZSUPER: (),
    }
)

_missing = [node_type for node_type in NodeType if node_type not in NODE_SLOTS]
if _missing:
    raise RuntimeError(f"Node types without slot schema: {_missing!r}")
del _missing


def _slot_union() -> tuple[str, ...]:
    names: dict[str, None] = {}
    for slots in NODE_SLOTS.values():
        for slot in slots:
            names.setdefault(slot)
    return tuple(names)


SLOT_NAMES: Final[tuple[str, ...]] = _slot_union()
"""Every slot name declared by any node type, in first-seen order."""


def slots_for(node_type: NodeTag) -> tuple[str, ...]:
    return NODE_SLOTS.get(node_type, ())


def slot_index(node_type: NodeTag, slot: str) -> int | None:
    """Position of `slot` among the children of `node_type`, or None if undeclared."""
    slots = NODE_SLOTS.get(node_type)
    if slots is None or slot not in slots:
        return None
    return slots.index(slot)


__all__ = [
    "NODE_SLOTS",
    "SLOT_NAMES",
    "slot_index",
    "slots_for",
]
