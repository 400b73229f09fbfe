"""Test position-to-token resolution and hover results."""

from __future__ import annotations

import pytest

from foamls.definitions import UNKNOWN_KEYWORD, describe
from foamls.errors import LexError
from foamls.hover import hover, token_at
from foamls.lexer import scan
from foamls.tokens import Token, TokenType

BLOCK_MESH = """\
convertToMeters 0.1;

blocks
(
    hex (0 1 2 3 4 5 6 7) (20 20 1) simpleGrading (1 1 1)
);

boundary
(
);
"""


class TestTokenAt:
    def test_inside(self) -> None:
        stream = scan("hex blocks")
        assert token_at(stream, 5) == 1

    def test_first_character(self) -> None:
        stream = scan("hex blocks")
        assert token_at(stream, 4) == 1
        assert token_at(stream, 0) == 0

    def test_end_is_exclusive(self) -> None:
        stream = scan("hex blocks")
        assert token_at(stream, 3) is None

    def test_before_first_and_past_last(self) -> None:
        stream = scan("  hex")
        assert token_at(stream, 1) is None
        assert token_at(stream, 5) is None

    def test_empty_stream(self) -> None:
        assert token_at(scan(""), 0) is None


class TestHover:
    def test_inside_boundary(self) -> None:
        result = hover(BLOCK_MESH, 7, 3)
        assert result is not None
        assert result.documentation == describe(TokenType.BOUNDARY)
        assert result.token == Token(TokenType.BOUNDARY)
        assert result.line == 7
        assert result.start_character == 0
        assert result.end_character - result.start_character == len("boundary")

    def test_indented_keyword(self) -> None:
        result = hover(BLOCK_MESH, 4, 5)
        assert result is not None
        assert result.token.type == TokenType.HEX
        assert (result.start_character, result.end_character) == (4, 7)

    def test_mid_line_keyword(self) -> None:
        line = BLOCK_MESH.splitlines()[4]
        col = line.index("simpleGrading") + 6
        result = hover(BLOCK_MESH, 4, col)
        assert result is not None
        assert result.token.type == TokenType.SIMPLE_GRADING
        assert result.start_character == line.index("simpleGrading")

    def test_whitespace_between_tokens(self) -> None:
        assert hover(BLOCK_MESH, 0, 15) is None

    def test_blank_line(self) -> None:
        assert hover(BLOCK_MESH, 1, 0) is None

    def test_past_end_of_line_does_not_wrap(self) -> None:
        # Line 1 is empty; column 2 would otherwise land on "bl" of "blocks"
        assert hover(BLOCK_MESH, 1, 2) is None

    def test_past_end_of_text(self) -> None:
        assert hover(BLOCK_MESH, 40, 0) is None

    def test_literal_gets_fallback_text(self) -> None:
        result = hover(BLOCK_MESH, 0, 17)
        assert result is not None
        assert result.token == Token(TokenType.FLOAT, 0.1)
        assert result.documentation == UNKNOWN_KEYWORD
        assert (result.start_character, result.end_character) == (16, 19)

    def test_lex_error_propagates(self) -> None:
        with pytest.raises(LexError):
            hover("hex Hex", 0, 1)

    def test_identifier_mode(self) -> None:
        result = hover("inlet { type patch; }", 0, 9, identifiers=True)
        assert result is not None
        assert result.token.type == TokenType.TYPE

    def test_width_in_utf16_units(self) -> None:
        source = "// \U0001f600\n"
        result = hover(source, 0, 3)
        assert result is not None
        assert result.token.type == TokenType.LINE_COMMENT
        assert (result.start_character, result.end_character) == (0, 5)
