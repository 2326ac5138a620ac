"""Tests for the individual matchers and their priority order."""

from types import MappingProxyType

import pytest

from offside.lexer.matchers import (
    MATCHERS,
    ScanState,
    match_comment,
    match_identifier,
    match_line,
    match_literal,
    match_number,
    match_string,
    match_whitespace,
)
from offside.lexer.tokens import OPERATORS, TokenType


def run(matcher, source: str, offset: int = 0, indent: int = 0):
    """Apply one matcher and return (consumed, [(type, value), ...])."""
    state = ScanState(source, offset=offset, indent=indent)
    consumed = matcher(state)
    return consumed, [(t.type, t.value) for t in state.tokens]


# ---------------------------------------------------------------------------
# Priority order
# ---------------------------------------------------------------------------

class TestMatcherOrder:
    def test_priority(self):
        assert MATCHERS == (
            match_identifier,
            match_number,
            match_string,
            match_comment,
            match_whitespace,
            match_line,
            match_literal,
        )

    def test_operator_table_is_read_only(self):
        assert isinstance(OPERATORS, MappingProxyType)
        with pytest.raises(TypeError):
            OPERATORS["@"] = TokenType.PLUS

    def test_consumed_lengths_sum_to_source_length(self):
        source = "f(x):\n  return x * -2.0 // double\n\ng 'a\\'b'\n"
        state = ScanState(source)
        total = 0
        while state.offset < len(source):
            consumed = next(n for n in (m(state) for m in MATCHERS) if n)
            total += consumed
            state.advance(consumed)
        assert total == len(source)


# ---------------------------------------------------------------------------
# Individual matchers
# ---------------------------------------------------------------------------

class TestIdentifier:
    def test_longest_prefix(self):
        assert run(match_identifier, "foo_1$+x") == (6, [(TokenType.IDENTIFIER, "foo_1$")])

    def test_digit_start_does_not_match(self):
        assert run(match_identifier, "1abc") == (0, [])

    def test_matches_at_offset(self):
        assert run(match_identifier, "12 ab", offset=3) == (2, [(TokenType.IDENTIFIER, "ab")])


class TestNumber:
    def test_negative_decimal(self):
        assert run(match_number, "-3.5") == (4, [(TokenType.NUMBER, -3.5)])

    def test_bare_minus(self):
        assert run(match_number, "-x") == (0, [])

    def test_fraction_requires_digits(self):
        assert run(match_number, "3.x") == (1, [(TokenType.NUMBER, 3.0)])

    def test_leading_dot_does_not_match(self):
        assert run(match_number, ".5") == (0, [])


class TestString:
    def test_not_a_quote(self):
        assert run(match_string, "abc") == (0, [])

    def test_escaped_quote_is_content(self):
        source = '"hi\\"there" rest'
        assert run(match_string, source) == (11, [(TokenType.STRING, '"hi\\"there"')])

    def test_escaped_backslash_before_quote(self):
        assert run(match_string, '"a\\\\"b') == (5, [(TokenType.STRING, '"a\\\\"')])

    def test_other_quote_kind_is_content(self):
        assert run(match_string, "'say \"x\"'") == (9, [(TokenType.STRING, "'say \"x\"'")])

    def test_unterminated(self):
        assert run(match_string, '"abc') == (0, [])

    def test_trailing_escape_is_unterminated(self):
        assert run(match_string, '"abc\\"') == (0, [])

    def test_at_end_of_source(self):
        assert run(match_string, "ab", offset=2) == (0, [])


class TestComment:
    def test_stops_before_newline(self):
        assert run(match_comment, "// hi\nnext") == (5, [(TokenType.COMMENT, "// hi")])

    def test_single_slash(self):
        assert run(match_comment, "/ x") == (0, [])

    def test_stops_before_carriage_return(self):
        assert run(match_comment, "// hi\r\n") == (5, [(TokenType.COMMENT, "// hi")])


class TestWhitespace:
    def test_emits_nothing(self):
        assert run(match_whitespace, "\u00a0\u3000\ufeffx") == (3, [])

    def test_newline_is_not_whitespace(self):
        assert run(match_whitespace, "\n  ") == (0, [])

    def test_unicode_spaces(self):
        assert run(match_whitespace, "\u00a0\u3000\ufeffx") == (3, [])

    def test_information_separator_is_not_whitespace(self):
        assert run(match_whitespace, "\x1c") == (0, [])


class TestLine:
    def test_no_newline(self):
        assert run(match_line, "  a") == (0, [])

    def test_indent(self):
        assert run(match_line, "\n  b") == (3, [(TokenType.INDENT, 2)])

    def test_outdent_from_previous_level(self):
        assert run(match_line, "\nb", indent=2) == (
            1,
            [(TokenType.OUTDENT, 2), (TokenType.TERMINATOR, "\n")],
        )

    def test_same_level(self):
        assert run(match_line, "\n  b", indent=2) == (3, [(TokenType.TERMINATOR, "\n")])

    def test_records_new_level(self):
        state = ScanState("\n\t\t\n   x", indent=1)
        assert match_line(state) == 7
        assert state.indent == 3
        assert [(t.type, t.value) for t in state.tokens] == [(TokenType.INDENT, 2)]


class TestLiteral:
    @pytest.mark.parametrize("ch", sorted(OPERATORS))
    def test_table_hit(self, ch):
        assert run(match_literal, ch + "x") == (1, [(OPERATORS[ch], ch)])

    @pytest.mark.parametrize("ch", ["`", "@", "/", "^", "~", "\""])
    def test_table_miss(self, ch):
        assert run(match_literal, ch) == (0, [])


class TestScanState:
    def test_advance_tracks_lines(self):
        state = ScanState("ab\ncd\nef")
        state.advance(4)
        assert (state.offset, state.line, state.column) == (4, 2, 2)
        state.advance(3)
        assert (state.offset, state.line, state.column) == (7, 3, 2)

    def test_emit_uses_current_offset(self):
        state = ScanState("xx yy", file="f.off", offset=3, line_start=0)
        tok = state.emit(TokenType.IDENTIFIER, "yy", 2)
        assert (tok.position, tok.raw, tok.column, tok.file) == (3, "yy", 4, "f.off")
