"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from foamls.lexer import scan
from foamls.tokens import Span, Token, TokenStream, TokenType

CAVITY_U = """\
/*--------------------------------*- C++ -*----------------------------------*\\
  =========                 |
  \\\\      /  F ield         | OpenFOAM
\\*---------------------------------------------------------------------------*/
FoamFile
{
    format      ascii;
    class       volVectorField;
    object      U;
}
// * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * //

dimensions      [0 1 -1 0 0 0 0];

internalField   uniform {0 0 0};

boundaryField
{
    movingWall
    {
        type            fixedValue;
        value           uniform {1 0 0};
    }

    fixedWalls
    {
        type            noSlip;
    }

    frontAndBack
    {
        type            empty;
    }
}
"""


@pytest.fixture
def lex():
    """Return a helper that scans source and returns the tokens."""

    def _lex(source: str, identifiers: bool = False) -> list[Token]:
        return list(scan(source, identifiers=identifiers).tokens)

    return _lex


@pytest.fixture
def cavity_u() -> str:
    """The velocity field file of the lid-driven cavity tutorial."""
    return CAVITY_U


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_spans_well_formed(stream: TokenStream, source: str) -> None:
    """Assert the span invariants: aligned, increasing, disjoint, in bounds, no whitespace."""
    assert len(stream.tokens) == len(stream.spans)
    prev_end = 0
    for span in stream.spans:
        assert prev_end <= span.start < span.end <= len(source), f"bad span {span}"
        assert not source[span.start].isspace()
        assert not source[span.end - 1].isspace()
        prev_end = span.end


def span_of(source: str, text: str, occurrence: int = 0) -> Span:
    """Return the span of the nth occurrence of text in source."""
    start = -1
    for _ in range(occurrence + 1):
        start = source.index(text, start + 1)
    return Span(start, start + len(text))
