"""Offside lexer: prioritized-matcher scanner with indentation tracking."""

from offside.lexer.tokens import OPERATORS, Token, TokenType
from offside.lexer.matchers import MATCHERS, ScanState
from offside.lexer.lexer import Lexer, LexerError, ScanResult

__all__ = [
    "OPERATORS",
    "Token",
    "TokenType",
    "MATCHERS",
    "ScanState",
    "Lexer",
    "LexerError",
    "ScanResult",
]
