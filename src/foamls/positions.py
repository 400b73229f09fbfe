"""Conversion between (line, character) coordinates and source offsets.

Offsets index Python strings (code points); characters are UTF-16 code
units, which is the default position encoding of the Language Server
Protocol. Lines and characters are 0-based.
"""

from __future__ import annotations


def utf16_len(text: str) -> int:
    """Return the length of text in UTF-16 code units."""
    return len(text) + sum(1 for ch in text if ord(ch) > 0xFFFF)


class PositionIndex:
    """Per-line length table for one source text."""

    def __init__(self, source: str) -> None:
        self._source = source
        # Each line keeps its "\n" so lengths sum to len(source)
        self._lines = source.split("\n")
        self._lengths = [len(line) + 1 for line in self._lines]
        self._lengths[-1] -= 1

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_start(self, line: int) -> int:
        """Return the offset of the first character on line."""
        return sum(self._lengths[:line])

    def offset(self, line: int, character: int) -> int:
        """Convert a (line, UTF-16 character) position to a source offset.

        Positions past the end of a line or of the text are not clamped;
        the result then lies in the line terminator or beyond the text.
        """
        start = self.line_start(line)
        if line >= len(self._lines):
            return start + character
        text = self._lines[line]
        units = 0
        for idx, ch in enumerate(text):
            if units >= character:
                return start + idx
            units += 2 if ord(ch) > 0xFFFF else 1
        return start + len(text) + (character - units)

    def position(self, offset: int) -> tuple[int, int]:
        """Convert a source offset to a (line, UTF-16 character) position."""
        cumulative = 0
        for line, length in enumerate(self._lengths):
            if cumulative <= offset < cumulative + length:
                return line, utf16_len(self._lines[line][: offset - cumulative])
            cumulative += length
        last = len(self._lines) - 1
        start = cumulative - self._lengths[last]
        return last, utf16_len(self._lines[last]) + (offset - start - len(self._lines[last]))

    def column(self, offset: int) -> int:
        """Return the UTF-16 character of offset within its line."""
        return self.position(offset)[1]
