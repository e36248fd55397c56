"""
Token definitions for the Buttercup lexer.

This module defines the closed set of token categories Buttercup recognizes,
the immutable token/location values handed to the parser, and the two lookup
tables the lexer consults after a rule has fired:

- KEYWORDS maps identifier spellings to their category
- CATEGORIES maps fixed-category rule names to their category

Both tables are reproduced exactly from the reference scanner, including the
odd-looking keyword assignments (``if`` is THEN, ``return`` is IF, ...).
Consumers of the reference scanner rely on those categories, so don't
"fix" them here.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


class TokenCategory(Enum):
    """
    Enumeration of all token categories in Buttercup.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =

    # Comparison operators
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=
    SHIFT_LEFT = auto()             # <<
    SHIFT_RIGHT = auto()            # >>
    UNSIGNED_SHIFT_RIGHT = auto()   # >>>

    # Bitwise operators
    BIT_OR = auto()                 # |
    BIT_XOR = auto()                # ^
    BIT_AND = auto()                # &

    # Arithmetic operators
    POWER = auto()                  # **
    MUL = auto()                    # *
    NEG = auto()                    # -
    PLUS = auto()                   # +
    DIVISION = auto()               # /
    MODULUS = auto()                # %  (also ! and ~)

    # ========================================================================
    # Literals
    # ========================================================================
    FALSE = auto()                  # #f
    INT_LITERAL = auto()            # 42
    BINARY_LITERAL = auto()         # 0b1010
    OCTAL_LITERAL = auto()          # 0o52
    HEX_LITERAL = auto()            # 0x2A
    STRING = auto()                 # "hello", 'hello'

    # ========================================================================
    # Punctuation
    # ========================================================================
    PARENTHESIS_OPEN = auto()       # (
    PARENTHESIS_CLOSE = auto()      # )  (also })
    BRACKET_OPEN = auto()           # {
    BRACKET_CLOSE = auto()          # no rule produces this one
    COLON = auto()                  # :
    SEMI_COLON = auto()             # ;
    COMMA = auto()                  # ,

    # ========================================================================
    # Identifiers and keyword categories
    # ========================================================================
    IDENTIFIER = auto()             # x, total, fooBar
    BOOL = auto()
    END = auto()
    IF = auto()
    INT = auto()
    PRINT = auto()
    THEN = auto()
    TRUE = auto()

    # ========================================================================
    # Special
    # ========================================================================
    ILLEGAL_CHAR = auto()           # any character no other rule accepts
    EOF = auto()                    # end of input sentinel


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Line and column are 1-based; offset is the 0-based index into the source.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Buttercup language.

    The lexeme is the exact slice of source text the rule matched. The EOF
    sentinel is the only token without one.
    """
    category: TokenCategory
    lexeme: Optional[str]
    location: SourceLocation

    def __str__(self) -> str:
        lexeme = self.lexeme if self.lexeme is not None else ""
        return f'{{{self.category.name}, "{lexeme}", @({self.line}, {self.column})}}'

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    @property
    def offset(self) -> int:
        return self.location.offset

    @property
    def is_keyword(self) -> bool:
        """Check if this token was produced by a keyword spelling."""
        return self.lexeme in KEYWORDS and self.category == KEYWORDS[self.lexeme]

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.category in LITERALS

    @property
    def is_illegal(self) -> bool:
        return self.category == TokenCategory.ILLEGAL_CHAR

    @property
    def is_eof(self) -> bool:
        return self.category == TokenCategory.EOF


LITERALS = frozenset({
    TokenCategory.FALSE,
    TokenCategory.INT_LITERAL,
    TokenCategory.BINARY_LITERAL,
    TokenCategory.OCTAL_LITERAL,
    TokenCategory.HEX_LITERAL,
    TokenCategory.STRING,
})


# Reserved words, consulted only after the Identifier rule fired.
KEYWORDS: Mapping[str, TokenCategory] = MappingProxyType({
    "break": TokenCategory.BOOL,
    "else": TokenCategory.END,
    "return": TokenCategory.IF,
    "case": TokenCategory.INT,
    "false": TokenCategory.PRINT,
    "switch": TokenCategory.THEN,
    "continue": TokenCategory.THEN,
    "for": TokenCategory.THEN,
    "true": TokenCategory.THEN,
    "default": TokenCategory.THEN,
    "if": TokenCategory.THEN,
    "do": TokenCategory.THEN,
    "in": TokenCategory.THEN,
    "var": TokenCategory.THEN,
})

# Rule name -> category for every rule whose token needs no further lookup.
CATEGORIES: Mapping[str, TokenCategory] = MappingProxyType({
    "Assign": TokenCategory.ASSIGN,
    "Equal": TokenCategory.EQUAL,
    "NotEqual": TokenCategory.NOT_EQUAL,
    "Great": TokenCategory.GREATER,
    "GreatEq": TokenCategory.GREATER_EQUAL,
    "Less": TokenCategory.LESS,
    "LessEq": TokenCategory.LESS_EQUAL,
    "BitOr": TokenCategory.BIT_OR,
    "BitXor": TokenCategory.BIT_XOR,
    "BitAnd": TokenCategory.BIT_AND,
    "ShiftLeft": TokenCategory.SHIFT_LEFT,
    "ShiftRight": TokenCategory.SHIFT_RIGHT,
    "UnsignedShiftRight": TokenCategory.UNSIGNED_SHIFT_RIGHT,
    "Power": TokenCategory.POWER,
    "Mul": TokenCategory.MUL,
    "Neg": TokenCategory.NEG,
    "Plus": TokenCategory.PLUS,
    "Division": TokenCategory.DIVISION,
    "Modulus": TokenCategory.MODULUS,
    "Base2": TokenCategory.BINARY_LITERAL,
    "Base8": TokenCategory.OCTAL_LITERAL,
    "Base16": TokenCategory.HEX_LITERAL,
    "False": TokenCategory.FALSE,
    "IntLiteral": TokenCategory.INT_LITERAL,
    "ParLeft": TokenCategory.PARENTHESIS_OPEN,
    "ParRight": TokenCategory.PARENTHESIS_CLOSE,
    "BracketLeft": TokenCategory.BRACKET_OPEN,
    "Colon": TokenCategory.COLON,
    "SemiColon": TokenCategory.SEMI_COLON,
    "Comma": TokenCategory.COMMA,
})
