"""
Buttercup Lexer Package

Implements the lexical analyzer (scanner) for the Buttercup language.

Key Features:
- First-match, priority-ordered rule table (not maximal munch)
- Keyword disambiguation after identifier matching
- Line/column tracking for every token
- Lazy, single-pass token stream ending in an EOF sentinel
- Illegal characters reported in-stream, never raised by the scanner

Author: xwest
"""

from .tokens import Token, TokenCategory, SourceLocation, KEYWORDS, CATEGORIES
from .rules import Rule, RuleMatch, RULES, match_rule, scan_rules
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError, collect_errors, create_illegal_character_error

__all__ = [
    "Lexer",
    "Token",
    "TokenCategory",
    "SourceLocation",
    "KEYWORDS",
    "CATEGORIES",
    "Rule",
    "RuleMatch",
    "RULES",
    "match_rule",
    "scan_rules",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
    "collect_errors",
    "create_illegal_character_error",
]
