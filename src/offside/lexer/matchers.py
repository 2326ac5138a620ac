"""Scan state and the prioritized matchers the driver dispatches over.

Each matcher looks at the source at ``state.offset``, emits zero or more
tokens and returns how many characters it matched, or returns 0 without
emitting anything. Patterns are matched in place with
``Pattern.match(source, pos)`` so the unconsumed remainder is never copied.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable

from offside.lexer.tokens import OPERATORS, Token, TokenType, TokenValue

# Horizontal whitespace: ECMAScript's whitespace set minus the newline
_HSPACE = r"\t\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

IDENTIFIER_RE = re.compile(r"[A-Za-z$_][A-Za-z0-9$_]*")
NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")
COMMENT_RE = re.compile(r"//[^\n\r\u2028\u2029]*")
WHITESPACE_RE = re.compile(f"[{_HSPACE}]+")
LINE_RE = re.compile(rf"(?:\n[{_HSPACE}]*)+")

QUOTES = frozenset("\"'")


@dataclass
class ScanState:
    """Mutable state owned by a single scan."""

    source: str
    file: str = "<unknown>"
    offset: int = 0
    indent: int = 0
    line: int = 1
    line_start: int = 0
    tokens: list[Token] = field(default_factory=list)

    @property
    def column(self) -> int:
        return self.offset - self.line_start + 1

    def emit(self, token_type: TokenType, value: TokenValue, length: int) -> Token:
        """Append a token positioned at the current offset."""
        raw = self.source[self.offset:self.offset + length]
        tok = Token(token_type, value, self.offset, raw, self.line, self.column, self.file)
        self.tokens.append(tok)
        return tok

    def advance(self, length: int) -> None:
        """Move past ``length`` characters, keeping line tracking current."""
        end = self.offset + length
        newlines = self.source.count("\n", self.offset, end)
        if newlines:
            self.line += newlines
            self.line_start = self.source.rfind("\n", self.offset, end) + 1
        self.offset = end


Matcher = Callable[[ScanState], int]


def match_identifier(state: ScanState) -> int:
    m = IDENTIFIER_RE.match(state.source, state.offset)
    if m is None:
        return 0
    text = m.group()
    state.emit(TokenType.IDENTIFIER, text, len(text))
    return len(text)


def match_number(state: ScanState) -> int:
    """Match an optionally negative decimal; the value is parsed to float."""
    m = NUMBER_RE.match(state.source, state.offset)
    if m is None:
        return 0
    text = m.group()
    state.emit(TokenType.NUMBER, float(text), len(text))
    return len(text)


def match_string(state: ScanState) -> int:
    """Match a single- or double-quoted literal.

    A backslash makes the next character literal, whatever it is. The
    token value is the whole literal with quotes and escapes left as
    written. An unterminated literal matches nothing.
    """
    source, start = state.source, state.offset
    if start >= len(source) or source[start] not in QUOTES:
        return 0

    quote = source[start]
    escaped = False
    for i in range(start + 1, len(source)):
        ch = source[i]
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == quote:
            length = i + 1 - start
            state.emit(TokenType.STRING, source[start:i + 1], length)
            return length
    return 0


def match_comment(state: ScanState) -> int:
    m = COMMENT_RE.match(state.source, state.offset)
    if m is None:
        return 0
    text = m.group()
    state.emit(TokenType.COMMENT, text, len(text))
    return len(text)


def match_whitespace(state: ScanState) -> int:
    """Skip horizontal whitespace without emitting a token."""
    m = WHITESPACE_RE.match(state.source, state.offset)
    if m is None:
        return 0
    return len(m.group())


def match_line(state: ScanState) -> int:
    """Match a run of newlines and emit the indentation change.

    Blank lines inside the run are absorbed. Only the whitespace after the
    last newline counts as the new indentation level, and the change is
    measured against the single previous level.
    """
    m = LINE_RE.match(state.source, state.offset)
    if m is None:
        return 0

    text = m.group()
    last_newline = text.rfind("\n") + 1
    size = len(text) - last_newline

    if size > state.indent:
        state.emit(TokenType.INDENT, size - state.indent, len(text))
    else:
        if size < state.indent:
            state.emit(TokenType.OUTDENT, state.indent - size, len(text))
        state.emit(TokenType.TERMINATOR, text[:last_newline], len(text))

    state.indent = size
    return len(text)


def match_literal(state: ScanState) -> int:
    ch = state.source[state.offset:state.offset + 1]
    token_type = OPERATORS.get(ch)
    if token_type is None:
        return 0
    state.emit(token_type, ch, 1)
    return 1


# Priority order: the first matcher to consume anything wins.
MATCHERS: tuple[Matcher, ...] = (
    match_identifier,
    match_number,
    match_string,
    match_comment,
    match_whitespace,
    match_line,
    match_literal,
)
