"""
Command line driver for the Buttercup lexer.

Prints the token stream of a source file, one numbered token per line, the
same way the compiler driver dumps tokens during lexical analysis.

Author: xwest
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .lexer import Lexer, Token, collect_errors


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def read_source(path: str) -> str:
    """Read a UTF-8 source file, or stdin for '-'."""
    if path == "-":
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def token_to_dict(token: Token) -> dict:
    return {
        "category": token.category.name,
        "lexeme": token.lexeme,
        "line": token.line,
        "column": token.column,
    }


def print_tokens(tokens: List[Token], as_json: bool = False) -> None:
    if as_json:
        print(json.dumps([token_to_dict(t) for t in tokens], indent=2))
        return

    for index, token in enumerate(tokens):
        print(f"[{index}] {token}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lexer driver"""

    parser = argparse.ArgumentParser(
        prog="buttercup-lex",
        description="Buttercup lexical analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    buttercup-lex program.bc              # Print the token stream
    buttercup-lex --json program.bc       # Tokens as a JSON array
    buttercup-lex --strict program.bc     # Fail on illegal characters
    cat program.bc | buttercup-lex -      # Read from stdin
        """
    )

    parser.add_argument('file', help='Source file to scan, or - for stdin')
    parser.add_argument('--json', action='store_true',
                        help='Output tokens in JSON format')
    parser.add_argument('--strict', action='store_true',
                        help='Exit with status 1 if the source has illegal characters')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        source = read_source(args.file)
    except (OSError, UnicodeDecodeError) as e:
        parser.error(f"cannot read {args.file}: {e}")

    filename = "<stdin>" if args.file == "-" else args.file
    tokens = Lexer(source, filename).tokenize()
    print_tokens(tokens, as_json=args.json)

    if args.strict:
        errors = collect_errors(tokens)
        for error in errors:
            print(error, file=sys.stderr, end="")
        if errors:
            logger.warning("%d illegal character(s) in %s", len(errors), filename)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
