"""--tokens / --debug token stream dump."""

from __future__ import annotations

import sys
from typing import TextIO

from foamls.definitions import token_color
from foamls.positions import PositionIndex
from foamls.tokens import Token, TokenStream, TokenType


def dump_tokens(stream: TokenStream, source: str, *, file: TextIO = sys.stderr) -> None:
    """Print one line per token: position, kind, value, and highlight color."""
    index = PositionIndex(source)
    for token, span in stream:
        line, col = index.position(span.start)
        file.write(
            f"{line + 1}:{col + 1}\t{token.type.name}{_value(token)}\t{token_color(token.type)}\n"
        )


def _value(token: Token) -> str:
    if token.type in (TokenType.BLOCK_COMMENT, TokenType.LINE_COMMENT):
        return ""
    if token.value is None:
        return ""
    return f"({token.value!r})"
