"""S-expression output styles and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class SexpStyle(StrEnum):
    """Output layout, after the parser gem's two node printers."""

    SEXP = "sexp"  # (send nil :foo)
    INSPECT = "inspect"  # s(:send, nil, :foo)


@dataclass(frozen=True, slots=True)
class SexpOptions:
    style: SexpStyle = SexpStyle.SEXP
    indent: int = 2
    dasherize_types: bool = True

    @staticmethod
    def for_style(style: SexpStyle) -> "SexpOptions":
        if style == SexpStyle.INSPECT:
            return SexpOptions(style=style, indent=2, dasherize_types=False)

        return SexpOptions(style=style, indent=2, dasherize_types=True)
