"""
Buttercup Compiler Package

Front end of the compiler for Buttercup, a small imperative language.

Architecture:
    buttercup/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # Command line driver

The parser and later phases consume the token stream produced by
``buttercup.lexer``.

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@buttercup-lang.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenCategory, tokenize_string, tokenize_file

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenCategory",
    "tokenize_string",
    "tokenize_file",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
