"""Lexer for the parser gem's s-expression dump format."""

from __future__ import annotations

import re

from rubyast.ast.literal import Symbol
from rubyast.diagnostics import (
    SEXP_UNEXPECTED_CHARACTER,
    SEXP_UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticSpec,
)
from rubyast.sexp.tokens import SexpToken, SexpTokenKind
from rubyast.text import TextRange

_NUMBER_RE = re.compile(r"[+-]?\d+(?:_\d+)*(?:\.\d+(?:_\d+)*)?(?:[eE][+-]?\d+)?")
_WORD_RE = re.compile(r"[^\s()\"]+")

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "s": " ",
    "e": "\x1b",
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}


class SexpLexer:
    """Splits s-expression text into tokens; whitespace is dropped."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def lex(self) -> list[SexpToken]:
        tokens: list[SexpToken] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == SexpTokenKind.EOF:
                return tokens

    def next_token(self) -> SexpToken:
        self._skip_whitespace()
        start = self._position
        if self.is_eof:
            return SexpToken(SexpTokenKind.EOF, TextRange(start, start), "")

        char = self._source[start]
        if char == "(":
            self._position += 1
            return self._token(SexpTokenKind.LPAREN, start)
        if char == ")":
            self._position += 1
            return self._token(SexpTokenKind.RPAREN, start)
        if char == '"':
            return self._lex_string(start)
        if char == ":":
            return self._lex_symbol(start)

        number = _NUMBER_RE.match(self._source, start)
        if number is not None and self._ends_word(number.end()):
            self._position = number.end()
            text = number.group().replace("_", "")
            if any(c in text for c in ".eE"):
                return self._token(SexpTokenKind.FLOAT, start, float(text))
            return self._token(SexpTokenKind.INT, start, int(text))

        word = _WORD_RE.match(self._source, start)
        if word is not None and (char.isalpha() or char == "_"):
            self._position = word.end()
            return self._token(SexpTokenKind.IDENTIFIER, start, word.group())

        self._position = word.end() if word is not None else start + 1
        self._error(SEXP_UNEXPECTED_CHARACTER, start, detail=repr(char))
        return self._token(SexpTokenKind.ERROR, start)

    def _lex_symbol(self, start: int) -> SexpToken:
        self._position += 1
        if not self.is_eof and self._source[self._position] == '"':
            quoted = self._lex_string(self._position)
            if quoted.kind == SexpTokenKind.ERROR:
                return quoted
            return self._token(SexpTokenKind.SYMBOL, start, Symbol(str(quoted.value)))

        word = _WORD_RE.match(self._source, self._position)
        if word is None:
            self._error(SEXP_UNEXPECTED_CHARACTER, start, detail="':' must start a symbol")
            return self._token(SexpTokenKind.ERROR, start)
        self._position = word.end()
        return self._token(SexpTokenKind.SYMBOL, start, Symbol(word.group()))

    def _lex_string(self, start: int) -> SexpToken:
        self._position = start + 1
        chars: list[str] = []
        while not self.is_eof:
            char = self._source[self._position]
            if char == '"':
                self._position += 1
                return self._token(SexpTokenKind.STRING, start, "".join(chars))
            if char == "\\" and self._position + 1 < len(self._source):
                chars.append(self._read_escape())
                continue
            chars.append(char)
            self._position += 1

        self._error(SEXP_UNTERMINATED_STRING, start)
        return self._token(SexpTokenKind.ERROR, start)

    def _read_escape(self) -> str:
        escaped = self._source[self._position + 1]
        self._position += 2
        if escaped == "u":
            return self._read_unicode_escape()
        return _ESCAPES.get(escaped, escaped)

    def _read_unicode_escape(self) -> str:
        if self._source.startswith("{", self._position):
            end = self._source.find("}", self._position)
            if end < 0:
                return "u"
            digits = self._source[self._position + 1 : end].split()
            self._position = end + 1
            return "".join(chr(int(d, 16)) for d in digits)

        digits = self._source[self._position : self._position + 4]
        if len(digits) == 4 and all(c in "0123456789abcdefABCDEF" for c in digits):
            self._position += 4
            return chr(int(digits, 16))
        return "u"

    def _skip_whitespace(self) -> None:
        while not self.is_eof and self._source[self._position].isspace():
            self._position += 1

    def _ends_word(self, offset: int) -> bool:
        return offset >= len(self._source) or self._source[offset].isspace() or self._source[offset] in "()"

    def _token(
        self,
        kind: SexpTokenKind,
        start: int,
        value: str | int | float | Symbol | None = None,
    ) -> SexpToken:
        return SexpToken(
            kind=kind,
            range=TextRange(start, self._position),
            text=self._source[start : self._position],
            value=value,
        )

    def _error(self, spec: DiagnosticSpec, start: int, *, detail: str | None = None) -> None:
        end = max(self._position, start + 1)
        self._diagnostics.append(
            Diagnostic.from_spec(spec, TextRange(start, min(end, len(self._source))), detail=detail)
        )
