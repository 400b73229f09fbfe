"""Error types with formatted source context."""

from __future__ import annotations


class LexError(Exception):
    """Raised on the first unrecognized input; the scan yields no tokens."""

    def __init__(self, message: str, offset: int, source: str) -> None:
        self.message = message
        self.offset = offset
        self.source = source
        line_start = source.rfind("\n", 0, offset) + 1
        self.line = source.count("\n", 0, offset) + 1
        self.column = offset - line_start + 1
        super().__init__(self.format())

    def format(self, filename: str = "input") -> str:
        lines = self.source.split("\n")
        line_idx = self.line - 1
        col = self.column

        # Build the source line (strip trailing CR for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )
