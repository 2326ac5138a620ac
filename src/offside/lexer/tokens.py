"""Token types, the operator table, and the Token dataclass."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenType(Enum):
    """Every distinct token the scanner can produce."""

    # Structure
    TERMINATOR = auto()
    OUTDENT = auto()
    INDENT = auto()

    # Content
    IDENTIFIER = auto()
    NUMBER = auto()
    STRING = auto()
    COMMENT = auto()

    # Arithmetic
    PLUS = auto()           # +
    MINUS = auto()          # -
    MULTIPLY = auto()       # *
    PERCENT = auto()        # %

    # Punctuation
    DOT = auto()            # .
    BACKSLASH = auto()      # \
    COLON = auto()          # :
    PIPE = auto()           # |
    EXCLAMATION = auto()    # !
    QUESTION = auto()       # ?
    POUND = auto()          # #
    AMPERSAND = auto()      # &
    SEMI = auto()           # ;
    COMMA = auto()          # ,

    # Grouping
    L_PARENTHESIS = auto()  # (
    R_PARENTHESIS = auto()  # )
    L_BRACE = auto()        # {
    R_BRACE = auto()        # }
    L_BRACKET = auto()      # [
    R_BRACKET = auto()      # ]

    # Comparison
    L_ANG = auto()          # <
    R_ANG = auto()          # >
    EQUALS = auto()         # =


# Map single operator characters to token types
OPERATORS: Mapping[str, TokenType] = MappingProxyType({
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    ".": TokenType.DOT,
    "\\": TokenType.BACKSLASH,
    ":": TokenType.COLON,
    "%": TokenType.PERCENT,
    "|": TokenType.PIPE,
    "!": TokenType.EXCLAMATION,
    "?": TokenType.QUESTION,
    "#": TokenType.POUND,
    "&": TokenType.AMPERSAND,
    ";": TokenType.SEMI,
    ",": TokenType.COMMA,
    "(": TokenType.L_PARENTHESIS,
    ")": TokenType.R_PARENTHESIS,
    "<": TokenType.L_ANG,
    ">": TokenType.R_ANG,
    "{": TokenType.L_BRACE,
    "}": TokenType.R_BRACE,
    "[": TokenType.L_BRACKET,
    "]": TokenType.R_BRACKET,
    "=": TokenType.EQUALS,
})

TokenValue = str | float | int


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the scanner.

    ``value`` is the matched text for most kinds, the parsed float for
    NUMBER and the indentation delta for INDENT/OUTDENT. ``raw`` always
    holds the source text the producing matcher consumed, so a NUMBER's
    original lexeme survives the float conversion.
    """

    type: TokenType
    value: TokenValue
    position: int
    raw: str = ""
    line: int = 1
    column: int = 1
    file: str = "<unknown>"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
