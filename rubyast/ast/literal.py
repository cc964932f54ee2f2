"""Literal child values that have no native Python counterpart."""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True, order=True)
class Symbol:
    """A Ruby symbol such as `:foo`.

    Kept distinct from `str` so that `{foo: 1}` and `{"foo" => 1}` keys do
    not compare equal.
    """

    name: str

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f":{self.name}"


Literal: TypeAlias = int | float | str | Symbol | bool | None

__all__ = ["Literal", "Symbol"]
