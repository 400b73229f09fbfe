"""Token types, spans, and the OpenFOAM keyword catalog."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Punctuation (single-character)
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *
    EQUALS = auto()  # =

    # Literals — value is the parsed number
    INT = auto()
    FLOAT = auto()

    # Mesh (blockMeshDict)
    FOAM_FILE = auto()
    CONVERT_TO_METERS = auto()
    BLOCKS = auto()
    VERTICES = auto()
    HEX = auto()
    SIMPLE_GRADING = auto()
    BOUNDARY = auto()

    # Time control (controlDict)
    APPLICATION = auto()
    START_FROM = auto()
    START_TIME = auto()
    STOP_AT = auto()
    END_TIME = auto()
    DELTA_T = auto()
    WRITE_CONTROL = auto()
    WRITE_INTERVAL = auto()
    PURGE_WRITE = auto()
    WRITE_FORMAT = auto()
    WRITE_PRECISION = auto()
    WRITE_COMPRESSION = auto()
    TIME_FORMAT = auto()
    TIME_PRECISION = auto()
    RUN_TIME_MODIFIABLE = auto()

    # Numerical schemes and solvers (fvSchemes, fvSolution)
    DDT_SCHEMES = auto()
    GRAD_SCHEMES = auto()
    DIV_SCHEMES = auto()
    LAPLACIAN_SCHEMES = auto()
    INTERPOLATION_SCHEMES = auto()
    SN_GRAD_SCHEMES = auto()
    SOLVERS = auto()

    # Field files (0/U, 0/p, ...)
    DIMENSIONS = auto()
    INTERNAL_FIELD = auto()
    BOUNDARY_FIELD = auto()
    TYPE = auto()
    VALUE = auto()
    FORMAT = auto()
    ASCII = auto()
    CLASS = auto()
    VOL_VECTOR_FIELD = auto()
    OBJECT = auto()
    U = auto()
    UNIFORM = auto()
    MOVING_WALL = auto()
    FIXED_WALLS = auto()
    FRONT_AND_BACK = auto()
    FIXED_VALUE = auto()
    NO_SLIP = auto()
    EMPTY = auto()

    # Only produced in identifier mode — value is the source text
    IDENTIFIER = auto()
    STRING = auto()

    # Comments — value is the comment body
    BLOCK_COMMENT = auto()
    LINE_COMMENT = auto()

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range [start, end) of character offsets into the source."""

    start: int
    end: int

    def __contains__(self, offset: int) -> bool:
        return self.start <= offset < self.end


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token; literal kinds carry their parsed value."""

    type: TokenType
    value: int | float | str | None = None


@dataclass(frozen=True, slots=True)
class TokenStream:
    """Index-aligned tokens and spans from one scan of a document."""

    tokens: tuple[Token, ...]
    spans: tuple[Span, ...]

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self):
        return iter(zip(self.tokens, self.spans))

    def peek(self, index: int) -> Token:
        """Return the token at index, or an EOF token past the end."""
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return EOF_TOKEN


EOF_TOKEN = Token(TokenType.EOF)


KEYWORDS: dict[str, TokenType] = {
    "FoamFile": TokenType.FOAM_FILE,
    "convertToMeters": TokenType.CONVERT_TO_METERS,
    "blocks": TokenType.BLOCKS,
    "vertices": TokenType.VERTICES,
    "hex": TokenType.HEX,
    "simpleGrading": TokenType.SIMPLE_GRADING,
    "boundary": TokenType.BOUNDARY,
    "application": TokenType.APPLICATION,
    "startFrom": TokenType.START_FROM,
    "startTime": TokenType.START_TIME,
    "stopAt": TokenType.STOP_AT,
    "endTime": TokenType.END_TIME,
    "deltaT": TokenType.DELTA_T,
    "writeControl": TokenType.WRITE_CONTROL,
    "writeInterval": TokenType.WRITE_INTERVAL,
    "purgeWrite": TokenType.PURGE_WRITE,
    "writeFormat": TokenType.WRITE_FORMAT,
    "writePrecision": TokenType.WRITE_PRECISION,
    "writeCompression": TokenType.WRITE_COMPRESSION,
    "timeFormat": TokenType.TIME_FORMAT,
    "timePrecision": TokenType.TIME_PRECISION,
    "runTimeModifiable": TokenType.RUN_TIME_MODIFIABLE,
    "ddtSchemes": TokenType.DDT_SCHEMES,
    "gradSchemes": TokenType.GRAD_SCHEMES,
    "divSchemes": TokenType.DIV_SCHEMES,
    "laplacianSchemes": TokenType.LAPLACIAN_SCHEMES,
    "interpolationSchemes": TokenType.INTERPOLATION_SCHEMES,
    "snGradSchemes": TokenType.SN_GRAD_SCHEMES,
    "solvers": TokenType.SOLVERS,
    "dimensions": TokenType.DIMENSIONS,
    "internalField": TokenType.INTERNAL_FIELD,
    "boundaryField": TokenType.BOUNDARY_FIELD,
    "type": TokenType.TYPE,
    "value": TokenType.VALUE,
    "format": TokenType.FORMAT,
    "ascii": TokenType.ASCII,
    "class": TokenType.CLASS,
    "volVectorField": TokenType.VOL_VECTOR_FIELD,
    "object": TokenType.OBJECT,
    "U": TokenType.U,
    "uniform": TokenType.UNIFORM,
    "movingWall": TokenType.MOVING_WALL,
    "fixedWalls": TokenType.FIXED_WALLS,
    "frontAndBack": TokenType.FRONT_AND_BACK,
    "fixedValue": TokenType.FIXED_VALUE,
    "noSlip": TokenType.NO_SLIP,
    "empty": TokenType.EMPTY,
}

PUNCTUATION: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "/": TokenType.SLASH,
    "*": TokenType.STAR,
    "=": TokenType.EQUALS,
}

WHITESPACE = frozenset(" \t\r\n")


def is_keyword_char(ch: str) -> bool:
    """Return True if ch can appear in a catalog keyword (ASCII alphanumeric)."""
    return ch.isascii() and ch.isalnum()


def is_ident_char(ch: str) -> bool:
    """Return True if ch can appear in a free-form identifier."""
    return is_keyword_char(ch) or ch == "_"
