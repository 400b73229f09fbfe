"""OpenFOAM dictionary lexer — converts source text into a token stream with spans."""

from __future__ import annotations

from foamls.errors import LexError
from foamls.tokens import (
    KEYWORDS,
    PUNCTUATION,
    WHITESPACE,
    Span,
    Token,
    TokenStream,
    TokenType,
    is_ident_char,
    is_keyword_char,
)


class Lexer:
    """Scan dictionary text into index-aligned tokens and spans.

    Matchers are tried in a fixed order at each non-whitespace character:
    block comment, line comment, keyword, number, punctuation. The first
    unrecognized character aborts the scan with a LexError.

    With ``identifiers=True`` words outside the keyword catalog become
    IDENTIFIER tokens and double-quoted text becomes STRING tokens instead
    of failing the scan.
    """

    def __init__(self, source: str, *, identifiers: bool = False) -> None:
        self._source = source
        self._identifiers = identifiers
        self._pos = 0
        self._tokens: list[Token] = []
        self._spans: list[Span] = []

    def scan(self) -> TokenStream:
        """Scan the full source and return the token stream."""
        while True:
            self._skip_ws()
            if self._pos >= len(self._source):
                break
            self._lex_token()
        return TokenStream(tuple(self._tokens), tuple(self._spans))

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _skip_ws(self) -> None:
        while self._pos < len(self._source) and self._source[self._pos] in WHITESPACE:
            self._pos += 1

    def _emit(self, tt: TokenType, start: int, value: int | float | str | None = None) -> None:
        self._tokens.append(Token(tt, value))
        self._spans.append(Span(start, self._pos))

    def _error(self, message: str, pos: int | None = None) -> LexError:
        if pos is None:
            pos = self._pos
        return LexError(message, pos, self._source)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _lex_token(self) -> None:
        ch = self._peek()

        if ch == "/" and self._peek(1) == "*":
            self._lex_block_comment()
            return

        if ch == "/" and self._peek(1) == "/":
            self._lex_line_comment()
            return

        if ch.isascii() and ch.isalpha():
            self._lex_word()
            return

        if ch == "_" and self._identifiers:
            self._lex_word()
            return

        if self._lex_number():
            return

        if ch in PUNCTUATION:
            start = self._pos
            self._pos += 1
            self._emit(PUNCTUATION[ch], start)
            return

        if ch == '"' and self._identifiers:
            self._lex_string()
            return

        raise self._error(f"unexpected character {ch!r}")

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _lex_block_comment(self) -> None:
        start = self._pos
        close = self._source.find("*/", start + 2)
        if close == -1:
            raise self._error("unterminated block comment", start)
        self._pos = close + 2
        self._emit(TokenType.BLOCK_COMMENT, start, self._source[start + 2 : close])

    def _lex_line_comment(self) -> None:
        start = self._pos
        self._pos += 2
        while self._pos < len(self._source) and self._peek() not in "\r\n":
            self._pos += 1
        self._emit(TokenType.LINE_COMMENT, start, self._source[start + 2 : self._pos])

    # ------------------------------------------------------------------
    # Keywords and identifiers
    # ------------------------------------------------------------------

    def _lex_word(self) -> None:
        start = self._pos
        accept = is_ident_char if self._identifiers else is_keyword_char
        while self._pos < len(self._source) and accept(self._peek()):
            self._pos += 1
        word = self._source[start : self._pos]

        tt = KEYWORDS.get(word)
        if tt is not None:
            self._emit(tt, start)
        elif self._identifiers:
            self._emit(TokenType.IDENTIFIER, start, word)
        else:
            raise self._error(f"unknown keyword '{word}'", start)

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def _lex_number(self) -> bool:
        """Consume an INT or FLOAT literal; return False if none starts here."""
        start = self._pos
        pos = start
        src = self._source

        if pos < len(src) and src[pos] in "+-":
            pos += 1

        int_start = pos
        while pos < len(src) and src[pos].isascii() and src[pos].isdigit():
            pos += 1
        has_int = pos > int_start
        is_float = False

        if pos < len(src) and src[pos] == ".":
            frac_start = pos + 1
            end = frac_start
            while end < len(src) and src[end].isascii() and src[end].isdigit():
                end += 1
            # "1." is a float, a lone "." or "-." is not a number
            if has_int or end > frac_start:
                pos = end
                is_float = True

        if not has_int and not is_float:
            return False

        if pos < len(src) and src[pos] in "eE":
            exp = pos + 1
            if exp < len(src) and src[exp] in "+-":
                exp += 1
            digits = exp
            while digits < len(src) and src[digits].isascii() and src[digits].isdigit():
                digits += 1
            if digits > exp:
                pos = digits
                is_float = True

        text = src[start:pos]
        self._pos = pos
        if is_float:
            self._emit(TokenType.FLOAT, start, float(text))
        else:
            try:
                value = int(text)
            except ValueError:
                raise self._error("integer literal too large", start) from None
            self._emit(TokenType.INT, start, value)
        return True

    # ------------------------------------------------------------------
    # Strings (identifier mode only)
    # ------------------------------------------------------------------

    def _lex_string(self) -> None:
        start = self._pos
        self._pos += 1  # consume opening quote
        while self._pos < len(self._source):
            ch = self._peek()
            if ch == "\\":
                self._pos += 2
                continue
            if ch == '"':
                self._pos += 1
                self._emit(TokenType.STRING, start, self._source[start + 1 : self._pos - 1])
                return
            if ch == "\n":
                break
            self._pos += 1
        raise self._error("unterminated string", start)


def scan(source: str, *, identifiers: bool = False) -> TokenStream:
    """Convenience function: scan source text and return the token stream."""
    return Lexer(source, identifiers=identifiers).scan()
