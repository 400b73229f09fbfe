"""Fixed-shape checks after anchor keywords, and SI unit hints."""

from __future__ import annotations

from foamls.tokens import Span, Token, TokenStream, TokenType

# uniform { INT INT INT } ;
UNIFORM_SHAPE = (
    TokenType.LBRACE,
    TokenType.INT,
    TokenType.INT,
    TokenType.INT,
    TokenType.RBRACE,
    TokenType.SEMICOLON,
)

# dimensions [ kg m s K mol A cd ]
DIMENSIONS_SHAPE = (TokenType.LBRACKET, *([TokenType.INT] * 7), TokenType.RBRACKET)

UNIT_LABELS = ("kg", "m", "s", "K", "mol", "A", "cd")


def kind_name(token: Token) -> str:
    """Return the display name used for a token kind in messages."""
    if token.type is TokenType.EOF:
        return "end of input"
    return token.type.name


def _first_mismatch(
    stream: TokenStream, index: int, shape: tuple[TokenType, ...]
) -> tuple[TokenType, Token] | None:
    """Compare the tokens after index with shape; return (expected, found) or None."""
    for offset, expected in enumerate(shape, start=1):
        found = stream.peek(index + offset)
        if found.type is not expected:
            return expected, found
    return None


def find_errors(stream: TokenStream) -> dict[Span, str]:
    """Return structural errors keyed by the span of the offending anchor.

    Each ``uniform`` must be followed by ``{ INT INT INT } ;``. The first
    position that differs is reported, not the last one, so a construct
    with several mismatches yields its earliest; running out of tokens
    reports ``end of input`` as the found kind.
    """
    errors: dict[Span, str] = {}
    for i, (token, span) in enumerate(stream):
        match token.type:
            case TokenType.UNIFORM:
                mismatch = _first_mismatch(stream, i, UNIFORM_SHAPE)
                if mismatch is not None:
                    expected, found = mismatch
                    errors[span] = f"Expected {expected.name}, found {kind_name(found)}"
            case _:
                pass
    return errors


def unit_hints(stream: TokenStream) -> dict[Span, str]:
    """Label the seven exponents of every well-formed ``dimensions`` entry."""
    hints: dict[Span, str] = {}
    for i, (token, _) in enumerate(stream):
        if token.type is not TokenType.DIMENSIONS:
            continue
        if _first_mismatch(stream, i, DIMENSIONS_SHAPE) is not None:
            continue
        for j, label in enumerate(UNIT_LABELS):
            hints[stream.spans[i + 2 + j]] = label
    return hints
