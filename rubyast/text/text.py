from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / index into text."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def of(text: str) -> "TextSize":
        """Create a TextSize from a string's length."""
        return TextSize(len(text))

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text, represented by TextSize offsets.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def at(offset: TextSize, length: TextSize) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset.value, offset.value + length.value)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def as_tuple(self) -> tuple[int, int]:
        return (self._start, self._end)

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both this range and another range."""
        return TextRange(min(self._start, other._start), max(self._end, other._end))

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start.value : range.end.value]


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a node in the Ruby source it was parsed from.

    Lines are 1-based and columns 0-based, the way the parser gem reports
    `loc.expression`.
    """

    source: str
    range: TextRange

    @staticmethod
    def of(source: str, start: int, end: int) -> "SourceSpan":
        return SourceSpan(source, TextRange(start, end))

    @staticmethod
    def find(source: str, snippet: str, *, start: int = 0) -> "SourceSpan":
        """Span of the first occurrence of `snippet` in `source` at or after `start`."""
        offset = source.find(snippet, start)
        if offset < 0:
            raise ValueError(f"{snippet!r} does not occur in source")
        return SourceSpan(source, TextRange.at(TextSize(offset), TextSize.of(snippet)))

    @property
    def text(self) -> str:
        return slice_text_range(self.source, self.range)

    @property
    def line(self) -> int:
        return self.source.count("\n", 0, self.range.start.value) + 1

    @property
    def column(self) -> int:
        return self.range.start.value - (self.source.rfind("\n", 0, self.range.start.value) + 1)

    @property
    def last_line(self) -> int:
        return self.source.count("\n", 0, self.range.end.value) + 1

    @property
    def last_column(self) -> int:
        return self.range.end.value - (self.source.rfind("\n", 0, self.range.end.value) + 1)

    def join(self, other: "SourceSpan") -> "SourceSpan":
        """Span covering both spans; both must come from the same source."""
        if other.source is not self.source and other.source != self.source:
            raise ValueError("Cannot join spans over different sources")
        return SourceSpan(self.source, self.range.cover(other.range))
