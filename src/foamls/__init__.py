"""Language analysis for OpenFOAM dictionary files."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from foamls.tokens import Span

__version__ = "0.1.0"


def check(source: str, *, identifiers: bool = False) -> dict[Span, str]:
    """Scan source and return structural errors keyed by anchor span."""
    from foamls.lexer import scan
    from foamls.validate import find_errors

    return find_errors(scan(source, identifiers=identifiers))
