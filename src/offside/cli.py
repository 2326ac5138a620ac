"""Offside scanner CLI entry point.

Usage:
    offside tokenize <file> [--strict] [--verbose]   Display the token stream
    offside --version                                Show the version
    offside --help                                   Show this message
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from offside.lexer.lexer import Lexer, LexerError


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]

    flags = {a for a in args if a.startswith("--") and a not in ("--help", "--version")}
    args = [a for a in args if a not in flags]

    if len(args) < 1:
        print(__doc__.strip())
        return 1

    command = args[0]

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from offside import __version__
        print(f"offside {__version__}")
        return 0

    unknown = flags - {"--strict", "--verbose"}
    if unknown:
        print(f"Error: unknown option '{sorted(unknown)[0]}'")
        return 1

    if command != "tokenize":
        print(f"Error: unknown command '{command}'")
        print(__doc__.strip())
        return 1

    if len(args) < 2:
        print(f"Error: command '{command}' requires a file argument")
        return 1

    filepath = Path(args[1])
    if not filepath.exists():
        print(f"Error: file not found: {filepath}")
        return 1

    if "--verbose" in flags:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s:%(name)s:%(message)s")

    source = filepath.read_text(encoding="utf-8")
    return _cmd_tokenize(source, str(filepath), strict="--strict" in flags)


def _cmd_tokenize(source: str, filename: str, strict: bool = False) -> int:
    """Display the token stream, then the halt diagnostic if scanning stopped."""
    lexer = Lexer(source, filename)
    try:
        tokens = lexer.tokenize(strict=strict)
    except LexerError as e:
        print(f"Lexer error: {e}")
        return 1

    for tok in tokens:
        print(tok)

    if lexer.diagnostic:
        print(lexer.diagnostic, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
