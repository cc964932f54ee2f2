"""Source text positions."""

from rubyast.text.text import SourceSpan, TextRange, TextSize, slice_text_range

__all__ = [
    "SourceSpan",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
