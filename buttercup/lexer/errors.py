"""
Error handling for the Buttercup lexer.

The lexer itself never raises for bad input: an unexpected character comes
out as an ILLEGAL_CHAR token and scanning continues. This module is for the
consumers that want to report those tokens, or to stop on them.

Author: xwest
"""

from typing import Iterable, List, Optional
from dataclasses import dataclass

from .tokens import SourceLocation, Token, TokenCategory


@dataclass
class Diagnostic:
    """A printable lexer diagnostic (error, warning, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Raised by strict consumers of the token stream for an illegal character.

    Carries the diagnostic and the offending token.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "L001": "Illegal character",
}

QUOTES = {'"', "'"}


def create_illegal_character_error(token: Token) -> LexerError:
    """Create the error for an ILLEGAL_CHAR token."""
    if token.category != TokenCategory.ILLEGAL_CHAR:
        raise ValueError(f"not an illegal character token: {token}")

    char = token.lexeme
    suggestions = None

    if char in QUOTES:
        # A lone quote is what an unterminated string literal scans as
        help_text = "This looks like the start of an unterminated string literal."
        suggestions = [f"Add a closing {char} quote", "Check for a stray quote character"]
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in Buttercup source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Illegal character: {char!r}",
        location=token.location,
        token=token,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def collect_errors(tokens: Iterable[Token]) -> List[LexerError]:
    """Build one error per ILLEGAL_CHAR token, in stream order."""
    return [create_illegal_character_error(t) for t in tokens if t.is_illegal]
