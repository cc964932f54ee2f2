"""Node types of the parser gem's Ruby AST."""

from enum import StrEnum
from typing import TypeAlias


class NodeType(StrEnum):
    """Grammar production tags, valued by their parser gem names."""

    ALIAS = "alias"
    AND = "and"
    AND_ASGN = "and_asgn"
    ARG = "arg"
    ARGS = "args"
    ARRAY = "array"
    ARRAY_PATTERN = "array_pattern"
    ARRAY_PATTERN_WITH_TAIL = "array_pattern_with_tail"
    BACK_REF = "back_ref"
    BEGIN = "begin"
    BLOCK = "block"
    BLOCKARG = "blockarg"
    BLOCK_PASS = "block_pass"
    BREAK = "break"
    CASE = "case"
    CASE_MATCH = "case_match"
    CASGN = "casgn"
    CBASE = "cbase"
    COMPLEX = "complex"
    CONST = "const"
    CLASS = "class"
    CSEND = "csend"
    CVASGN = "cvasgn"
    CVAR = "cvar"
    DEF = "def"
    DEFINED = "defined?"
    DEFS = "defs"
    DSTR = "dstr"
    DSYM = "dsym"
    EFLIPFLOP = "eflipflop"
    ENSURE = "ensure"
    ERANGE = "erange"
    FALSE = "false"
    FIND_PATTERN = "find_pattern"
    FLOAT = "float"
    FOR = "for"
    FORWARD_ARGS = "forward_args"
    GVAR = "gvar"
    GVASGN = "gvasgn"
    HASH = "hash"
    HASH_PATTERN = "hash_pattern"
    IF = "if"
    IFLIPFLOP = "iflipflop"
    IF_GUARD = "if_guard"
    INT = "int"
    IN_PATTERN = "in_pattern"
    IRANGE = "irange"
    IVASGN = "ivasgn"
    IVAR = "ivar"
    KWARG = "kwarg"
    KWBEGIN = "kwbegin"
    KWBODY = "kwbody"
    KWNILARG = "kwnilarg"
    KWOPTARG = "kwoptarg"
    KWRESTARG = "kwrestarg"
    KWSPLAT = "kwsplat"
    LVAR = "lvar"
    LVASGN = "lvasgn"
    MASGN = "masgn"
    MATCH_AS = "match_as"
    MATCH_NIL_PATTERN = "match_nil_pattern"
    MATCH_PATTERN = "match_pattern"
    MATCH_PATTERN_P = "match_pattern_p"
    MATCH_REST = "match_rest"
    MATCH_VAR = "match_var"
    MATCH_WITH_LVASGN = "match_with_lvasgn"
    MLHS = "mlhs"
    MODULE = "module"
    NEXT = "next"
    NIL = "nil"
    NTH_REF = "nth_ref"
    NUMBLOCK = "numblock"
    OPTARG = "optarg"
    OP_ASGN = "op_asgn"
    OR = "or"
    OR_ASGN = "or_asgn"
    PAIR = "pair"
    PIN = "pin"
    POSTEXE = "postexe"
    PREEXE = "preexe"
    RATIONAL = "rational"
    REDO = "redo"
    REGEXP = "regexp"
    REGOPT = "regopt"
    RESBODY = "resbody"
    RESCUE = "rescue"
    RESTARG = "restarg"
    RETRY = "retry"
    RETURN = "return"
    SCLASS = "sclass"
    SELF = "self"
    SHADOWARG = "shadowarg"
    SEND = "send"
    SPLAT = "splat"
    STR = "str"
    SUPER = "super"
    SYM = "sym"
    TRUE = "true"
    UNDEF = "undef"
    UNLESS_GUARD = "unless_guard"
    UNTIL = "until"
    UNTIL_POST = "until_post"
    WHEN = "when"
    WHILE = "while"
    WHILE_POST = "while_post"
    XSTR = "xstr"
    YIELD = "yield"
    ZSUPER = "zsuper"


# Node types outside the schema keep their raw parser gem name.
NodeTag: TypeAlias = NodeType | str


def node_tag(name: str) -> NodeTag:
    """Known parser gem names become `NodeType`; others, e.g. `"kwargs"`, stay strings."""
    try:
        return NodeType(name)
    except ValueError:
        return name


__all__ = ["NodeTag", "NodeType", "node_tag"]
