"""Resolve a cursor position to a token, its documentation, and a highlight range."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from foamls.definitions import describe
from foamls.lexer import scan
from foamls.positions import PositionIndex, utf16_len
from foamls.tokens import Span, Token, TokenStream


@dataclass(frozen=True, slots=True)
class HoverResult:
    """Documentation for the token under the cursor.

    The highlight range lies on the requested line, from start_character
    for the token's width in UTF-16 code units.
    """

    documentation: str
    token: Token
    span: Span
    line: int
    start_character: int
    end_character: int


def token_at(stream: TokenStream, offset: int) -> int | None:
    """Return the index of the token whose span contains offset, if any."""
    idx = bisect_right(stream.spans, offset, key=lambda s: s.start) - 1
    if idx >= 0 and offset in stream.spans[idx]:
        return idx
    return None


def hover(
    source: str, line: int, character: int, *, identifiers: bool = False
) -> HoverResult | None:
    """Return hover information at (line, character), or None over whitespace.

    Raises LexError if the source does not scan.
    """
    stream = scan(source, identifiers=identifiers)
    index = PositionIndex(source)

    if line >= index.line_count:
        return None
    offset = index.offset(line, character)
    # Characters past the end of the line must not reach into the next one
    if index.position(offset)[0] != line:
        return None

    idx = token_at(stream, offset)
    if idx is None:
        return None

    token = stream.tokens[idx]
    span = stream.spans[idx]
    start = index.column(span.start)
    width = utf16_len(source[span.start : span.end])
    return HoverResult(
        documentation=describe(token.type),
        token=token,
        span=span,
        line=line,
        start_character=start,
        end_character=start + width,
    )
