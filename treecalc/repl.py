import argparse
import logging
import sys
from typing import Any, Optional, TextIO

from treecalc.parser import Parser
from treecalc.printer import DISPLAY_INDENTATION, display
from treecalc.runtime import evaluate
from treecalc.tokenizer import tokenize
from treecalc.utils import SourceError

logger = logging.getLogger("Repl")


def run_expression(
    parser: Parser,
    code: str,
    show_tree: bool = True,
    show_tokens: bool = False,
    indent: int = DISPLAY_INDENTATION,
    out: Optional[TextIO] = None,
) -> bool:
    """Parse, print and evaluate one expression, returning False if it did not parse"""
    if out is None:
        out = sys.stdout
    try:
        if show_tokens:
            print(f"tokens: {' '.join(str(t) for t in tokenize(code))}", file=out)
        tree = parser.parse(code)
    except SourceError as e:
        logger.debug("Failed to parse %r", code, exc_info=True)
        print(f"Failed to parse: {e}", file=out)
        return False

    if show_tree:
        print(f"\n{display(tree, indent=indent)}\n", file=out)
    print(f"answer = {evaluate(tree)}\n", file=out)
    return True


def build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(prog="treecalc", description="Parse and evaluate arithmetic expressions")
    arg_parser.add_argument("expressions", nargs="*", help="evaluate these and exit instead of prompting")
    arg_parser.add_argument("--no-tree", action="store_true", help="print only the answer")
    arg_parser.add_argument("--tokens", action="store_true", help="also print the token stream")
    arg_parser.add_argument("--indent", type=int, default=DISPLAY_INDENTATION, help="spaces per tree level")
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return arg_parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    parser = Parser()
    options: dict[str, Any] = dict(show_tree=not args.no_tree, show_tokens=args.tokens, indent=args.indent)

    if args.expressions:
        results = [run_expression(parser, code, **options) for code in args.expressions]
        return 0 if all(results) else 1

    while True:
        try:
            code = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        if not code.strip():
            continue
        run_expression(parser, code, **options)


if __name__ == "__main__":
    sys.exit(main())
