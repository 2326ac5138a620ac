"""Offside scanner driver: fixed-priority dispatch over the matchers.

Design decisions:
- Matchers are tried in the order given by ``MATCHERS``; after every
  successful match dispatch restarts from the first one.
- Indentation is a single scalar. INDENT/OUTDENT carry the net change
  against the previous line, and nesting is left to the parser.
- Comments are tokens, not discarded.
- Input no matcher accepts halts the scan. Tokens produced so far are
  kept and a diagnostic is recorded (best-effort partial result).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from offside.lexer.matchers import MATCHERS, ScanState
from offside.lexer.tokens import Token

logger = logging.getLogger(__name__)


class LexerError(Exception):
    """Raised in strict mode when the scan halts, with source location."""

    def __init__(
        self,
        message: str,
        line: int,
        column: int,
        file: str = "<unknown>",
        offset: int = 0,
        tokens: list[Token] | None = None,
    ):
        self.line = line
        self.column = column
        self.file = file
        self.offset = offset
        self.tokens = tokens if tokens is not None else []
        super().__init__(f"{file}:{line}:{column}: {message}")


@dataclass(frozen=True)
class ScanResult:
    """Tokens from one scan plus the halt diagnostic, if any."""

    tokens: tuple[Token, ...]
    diagnostic: str | None = None
    halted_at: int | None = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None


class Lexer:
    """Scans source text into a flat stream of `Token` objects.

    Usage::

        lexer = Lexer(source_text, filename="example.off")
        tokens = lexer.tokenize()
        if lexer.diagnostic:
            ...
    """

    # Characters of context shown on each side of a halt position
    CONTEXT_WIDTH = 15

    def __init__(self, source: str, filename: str = "<unknown>") -> None:
        self.source = source
        self.filename = filename
        self.diagnostic: str | None = None
        self.halted_at: int | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tokenize(self, strict: bool = False) -> list[Token]:
        """Scan the entire source and return the token list.

        When the scan halts the tokens produced so far are returned and
        ``diagnostic`` describes the failure. With ``strict`` a
        `LexerError` is raised instead.
        """
        self.diagnostic = None
        self.halted_at = None
        state = ScanState(self.source, self.filename)
        logger.debug("scanning %s (%d chars)", self.filename, len(self.source))

        while state.offset < len(self.source):
            consumed = self._dispatch(state)
            if not consumed:
                self._halt(state, strict)
                break
            state.advance(consumed)

        logger.debug("scanned %d token(s) from %s", len(state.tokens), self.filename)
        return state.tokens

    def scan(self) -> ScanResult:
        """Scan the source and bundle the tokens with any diagnostic."""
        tokens = self.tokenize()
        return ScanResult(tuple(tokens), self.diagnostic, self.halted_at)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _dispatch(state: ScanState) -> int:
        """Return the length consumed by the first matcher that advances."""
        for matcher in MATCHERS:
            consumed = matcher(state)
            if consumed:
                return consumed
        return 0

    def _context(self, offset: int) -> str:
        width = self.CONTEXT_WIDTH
        return self.source[max(0, offset - width):offset + width]

    def _halt(self, state: ScanState, strict: bool) -> None:
        remainder = self.source[state.offset:]
        message = f"unable to scan {remainder!r} near {self._context(state.offset)!r}"
        self.diagnostic = f"{self.filename}:{state.line}:{state.column}: {message}"
        self.halted_at = state.offset
        logger.warning("%s", self.diagnostic)
        if strict:
            raise LexerError(
                message, state.line, state.column, self.filename,
                offset=state.offset, tokens=state.tokens,
            )
