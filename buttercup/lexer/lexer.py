"""
Buttercup Lexer - turns source text into a stream of tokens

Single pass over the input. Each step asks the rule table for the first rule
that matches at the cursor (see rules.py for why first and not longest),
then classifies what it got: newlines move the row counter, whitespace and
comments vanish, identifiers go through the keyword table, everything else
through the category table. The stream always ends with one EOF token.

Bad characters don't stop anything, they just come out as ILLEGAL_CHAR.

xwest
"""

import logging
from typing import Iterator, List, Optional

from .tokens import Token, TokenCategory, SourceLocation, KEYWORDS, CATEGORIES
from .rules import RuleMatch, scan_rules, NEWLINE, SKIPPED, IDENTIFIER, STRING, OTHER
from .errors import collect_errors


logger = logging.getLogger(__name__)


class Lexer:
    """
    Buttercup lexical analyzer.

    A lexer scans its source exactly once. ``tokens()`` (or iterating the
    lexer) hands out a lazy generator; ``next_token()`` pulls from the same
    stream. Asking for a second stream raises RuntimeError - build a new
    Lexer to scan the same text again.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename

        # Cursor state
        self.pos = 0
        self.line = 1
        self.column_start = 0

        self._stream: Optional[Iterator[Token]] = None
        self.illegal_count = 0

    def tokens(self) -> Iterator[Token]:
        """
        Start scanning.

        Returns:
            Generator of tokens, ending with the EOF token

        Raises:
            RuntimeError: If this lexer already produced its stream
        """
        if self._stream is not None:
            raise RuntimeError(
                "Lexer has already been consumed; create a new Lexer to rescan"
            )
        self._stream = self._scan()
        return self._stream

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    def next_token(self) -> Token:
        """
        Pull the next token.

        Raises:
            StopIteration: After the EOF token has been handed out
        """
        if self._stream is None:
            self._stream = self._scan()
        return next(self._stream)

    def tokenize(self) -> List[Token]:
        """
        Scan the rest of the source and return the tokens as a list.

        Tokens already pulled with ``next_token()`` are not repeated.
        """
        if self._stream is None:
            self._stream = self._scan()
        return list(self._stream)

    def _scan(self) -> Iterator[Token]:
        logger.debug("Scanning %s (%d chars)", self.filename, len(self.source))
        count = 0

        for match in scan_rules(self.source):
            token = self._classify(match)
            self.pos = match.end
            if token is not None:
                count += 1
                yield token

        eof = Token(TokenCategory.EOF, None, self._location(len(self.source)))
        logger.debug(
            "Finished %s: %d tokens, %d illegal, %d lines",
            self.filename, count, self.illegal_count, self.line
        )
        yield eof

    def _classify(self, match: RuleMatch) -> Optional[Token]:
        """Turn one rule match into a token, or None for skipped input."""
        rule = match.rule

        if rule == NEWLINE:
            self.line += 1
            self.column_start = match.end
            return None

        if rule in SKIPPED:
            return None

        if rule == IDENTIFIER:
            # Keywords win over plain identifiers
            category = KEYWORDS.get(match.lexeme, TokenCategory.IDENTIFIER)
        elif rule == STRING:
            category = TokenCategory.STRING
        elif rule == OTHER:
            category = TokenCategory.ILLEGAL_CHAR
            self.illegal_count += 1
            logger.debug(
                "Illegal character %r at %s:%d:%d", match.lexeme,
                self.filename, self.line, match.offset - self.column_start + 1
            )
        else:
            category = CATEGORIES[rule]

        return Token(category, match.lexeme, self._location(match.offset))

    def _location(self, offset: int) -> SourceLocation:
        return SourceLocation(self.filename, self.line, offset - self.column_start + 1, offset)


def tokenize_string(source: str, filename: str = "<string>", strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        strict: Raise on the first illegal character instead of returning it

    Returns:
        List of tokens, EOF included

    Raises:
        LexerError: In strict mode, if the source has an illegal character
    """
    tokens = Lexer(source, filename).tokenize()

    if strict:
        errors = collect_errors(tokens)
        if errors:
            raise errors[0]

    return tokens


def tokenize_file(filepath: str, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to a UTF-8 source file
        strict: Raise on the first illegal character instead of returning it

    Returns:
        List of tokens

    Raises:
        LexerError: In strict mode, if the file has an illegal character
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        source = f.read()

    return tokenize_string(source, filepath, strict=strict)
