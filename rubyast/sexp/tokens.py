"""S-expression tokens."""

from dataclasses import dataclass
from enum import IntEnum

from rubyast.ast.literal import Symbol
from rubyast.text import TextRange


class SexpTokenKind(IntEnum):
    EOF = 1

    LPAREN = 10  # (
    RPAREN = 11  # )

    IDENTIFIER = 20  # node types and nil/true/false
    SYMBOL = 21  # :foo, :"foo bar"
    STRING = 22  # "foo"
    INT = 23
    FLOAT = 24

    ERROR = 99


@dataclass(frozen=True, slots=True)
class SexpToken:
    kind: SexpTokenKind
    range: TextRange
    text: str
    value: str | int | float | Symbol | None = None
