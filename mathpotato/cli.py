"""Command line entry point: lex and parse a program and list its variables."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from mathpotato.lexer import lex
from mathpotato.nodes import IntegerStatementNode
from mathpotato.parser import ParserError, parse


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mathpotato", description="Parse a MathPotato program."
    )
    parser.add_argument("file", nargs="?", help="program file; standard input if omitted")
    parser.add_argument("-c", "--code", help="program text given directly")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the program and print each declared variable with its value."""
    args = _build_parser().parse_args(argv)
    if args.code is not None:
        source = args.code
    elif args.file is not None:
        with open(args.file, encoding="utf-8") as handle:
            source = handle.read()
    else:
        source = sys.stdin.read()

    source = source.replace("\r\n", " ").replace("\n", " ").replace("\t", " ")
    try:
        tree = parse(lex(source))
    except ParserError as exc:
        print(f"Parser error: {exc.details}", file=sys.stderr)
        return 1

    for node in tree.nodes().values():
        if isinstance(node, IntegerStatementNode):
            print(f"{node.variable_name} = {node.variable_value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())