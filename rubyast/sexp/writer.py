"""Render nodes in the parser gem's printed forms."""

from __future__ import annotations

import re

from rubyast.ast.literal import Symbol
from rubyast.ast.node import Child, Node
from rubyast.sexp.options import SexpOptions, SexpStyle

_PLAIN_SYMBOL_RE = re.compile(r"(?:@@?|\$)?[A-Za-z_][A-Za-z_0-9]*[?!=]?|\[\]=?|[-+*/%<>=!~^&|]+|<=>|===?|=~")

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\x1b": "\\e",
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
}


def format_node(node: Node, options: SexpOptions | None = None) -> str:
    options = options or SexpOptions()
    lines: list[str] = []
    if options.style == SexpStyle.INSPECT:
        _inspect(node, 0, options, lines)
    else:
        _sexp(node, 0, options, lines)
    return "".join(lines)


def to_sexp(node: Node, options: SexpOptions | None = None) -> str:
    """`(send nil :foo\\n  (int 1))` form, as printed by `ruby-parse`."""
    return format_node(node, options or SexpOptions.for_style(SexpStyle.SEXP))


def inspect_node(node: Node) -> str:
    """`s(:send, nil, :foo,\\n  s(:int, 1))` form."""
    return format_node(node, SexpOptions.for_style(SexpStyle.INSPECT))


def format_literal(value: Child) -> str:
    """Ruby `inspect` spelling of a literal child."""
    match value:
        case None:
            return "nil"
        case bool():
            return "true" if value else "false"
        case Symbol():
            if _PLAIN_SYMBOL_RE.fullmatch(value.name):
                return f":{value.name}"
            return f":{_quote(value.name)}"
        case str():
            return _quote(value)
        case int() | float():
            return repr(value)
        case _:
            return repr(value)


def _quote(text: str) -> str:
    body = "".join(_STRING_ESCAPES.get(char, char) for char in text)
    return '"' + body.replace("#{", "\\#{") + '"'


def _type_name(node: Node, options: SexpOptions) -> str:
    if options.dasherize_types:
        return str(node.type).replace("_", "-")
    return str(node.type)


def _sexp(node: Node, depth: int, options: SexpOptions, out: list[str]) -> None:
    out.append(" " * (options.indent * depth) + f"({_type_name(node, options)}")
    for child in node.children:
        if isinstance(child, Node):
            out.append("\n")
            _sexp(child, depth + 1, options, out)
        else:
            out.append(" " + format_literal(child))
    out.append(")")


def _inspect(node: Node, depth: int, options: SexpOptions, out: list[str]) -> None:
    out.append(" " * (options.indent * depth) + f"s(:{_type_name(node, options)}")
    for child in node.children:
        if isinstance(child, Node):
            out.append(",\n")
            _inspect(child, depth + 1, options, out)
        else:
            out.append(", " + format_literal(child))
    out.append(")")
