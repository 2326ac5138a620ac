"""Offside: lexical scanner for indentation-sensitive source text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from offside.lexer.lexer import ScanResult

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def scan(source: str, filename: str = "<unknown>") -> ScanResult:
    """Scan source text into tokens, keeping any halt diagnostic."""
    from offside.lexer.lexer import Lexer

    return Lexer(source, filename).scan()
