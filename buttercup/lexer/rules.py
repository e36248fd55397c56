"""
Lexical rules for Buttercup.

The rule table is ordered: at any position the FIRST rule whose pattern
matches wins, even if a later rule would match more text. That is not the
usual maximal-munch behaviour and it has visible consequences, e.g. ``==``
scans as two ASSIGN tokens because ``=`` is listed first, and ``>=`` scans as
GREATER followed by ASSIGN. This reproduces the reference scanner's table
exactly; tokens downstream depend on it.

Rule names are allowed to repeat (``Less``, ``Modulus``, ``ParRight``,
``Comment`` and ``String`` all appear more than once).

Author: xwest
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class Rule:
    """A named pattern. Its priority is its index in RULES."""
    name: str
    pattern: re.Pattern

    def match(self, source: str, pos: int) -> Optional[int]:
        """Return the end offset of a match at ``pos``, or None."""
        m = self.pattern.match(source, pos)
        if m is None or m.end() == pos:
            return None
        return m.end()


@dataclass(frozen=True)
class RuleMatch:
    """One consumed span of input and the rule that consumed it."""
    rule: str
    lexeme: str
    offset: int

    @property
    def end(self) -> int:
        return self.offset + len(self.lexeme)


# Rules the lexer consumes without producing a token
NEWLINE = "Newline"
SKIPPED = frozenset({"WhiteSpace", "Comment"})

# Rules with their own classification step
IDENTIFIER = "Identifier"
STRING = "String"
OTHER = "Other"


def _rule(name: str, pattern: str) -> Rule:
    return Rule(name, re.compile(pattern))


# Order matters, see module docstring. Other must stay last.
RULES: Tuple[Rule, ...] = (
    _rule("Assign", r"="),
    _rule("Comment", r"/\*[^*]*\*+(?:[^/*][^*]*\*+)*/"),
    _rule("Comment", r"//.*"),
    _rule("Equal", r"=="),
    _rule("NotEqual", r"!="),
    _rule("Great", r">"),
    _rule("GreatEq", r">="),
    _rule("Less", r"<"),
    _rule("LessEq", r"<="),
    _rule("BitOr", r"\|"),
    _rule("BitXor", r"\^"),
    _rule("BitAnd", r"&"),
    _rule("ShiftLeft", r"<<"),
    _rule("ShiftRight", r">>"),
    _rule("UnsignedShiftRight", r">>>"),
    _rule("Power", r"\*\*"),
    _rule("Mul", r"\*"),
    _rule("Neg", r"-"),
    _rule("Plus", r"\+"),
    _rule("Division", r"/"),
    _rule("Modulus", r"%"),
    _rule("Modulus", r"!"),
    _rule("Modulus", r"~"),
    _rule("Base2", r"0[bB](?:0|1)+"),
    _rule("Base8", r"0[oO][0-7]+"),
    _rule("Base16", r"0[xX][0-9a-fA-F]+"),
    _rule("False", r"#f"),
    _rule("IntLiteral", r"\d+"),
    _rule("Less", r"<"),
    _rule(NEWLINE, r"\n"),
    _rule("ParLeft", r"\("),
    _rule("ParRight", r"\)"),
    _rule("BracketLeft", r"\{"),
    _rule("ParRight", r"\}"),
    _rule("Colon", r":"),
    _rule("SemiColon", r";"),
    _rule("Comma", r","),
    # Same matches as "(\\.|[^"])*": backslashes pair up from the start of a
    # run and only the odd one out can escape a quote. Each run is taken
    # whole, so unterminated strings fail in linear time.
    _rule(STRING, r'"(?:[^"\\]|(?:\\\\)+(?!\\)|\\(?:\\\\)*(?!\\)"?)*"'),
    _rule(STRING, r"'(?:[^'\\]|(?:\\\\)+(?!\\)|\\(?:\\\\)*(?!\\)'?)*'"),
    _rule(IDENTIFIER, r"[a-zA-Z]+"),
    # \s without the \x1c-\x1f separators, which are not whitespace here
    _rule("WhiteSpace", r"[^\S\x1c-\x1f]"),
    _rule(OTHER, r"(?s:.)"),
)


def match_rule(source: str, pos: int) -> Tuple[Rule, int]:
    """
    Find the first rule that matches ``source`` at ``pos``.

    Returns the rule and the end offset of its match. The catch-all rule
    guarantees a result for any ``pos < len(source)``.
    """
    for rule in RULES:
        end = rule.match(source, pos)
        if end is not None:
            return rule, end
    raise ValueError(f"no rule matches at offset {pos}")


def scan_rules(source: str) -> Iterator[RuleMatch]:
    """
    Split ``source`` into consecutive rule matches, skipped rules included.

    The lexemes of the yielded matches concatenate back to ``source``.
    """
    pos = 0
    while pos < len(source):
        rule, end = match_rule(source, pos)
        yield RuleMatch(rule.name, source[pos:end], pos)
        pos = end
