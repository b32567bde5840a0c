"""Command that reads a query line from standard input and prints its ISR tree."""

from __future__ import annotations

import argparse
import sys

from .parser import QuerySyntaxError, parse


def main(argv: list[str] | None = None) -> int:
    """Parse one line of standard input and print the evaluated expression."""
    argparse.ArgumentParser(
        prog="querytree",
        description="Read a search query from standard input and print its ISR structure.",
    ).parse_args(argv)
    line = sys.stdin.readline().rstrip("\n")
    try:
        expr = parse(line)
    except QuerySyntaxError:
        print("Syntax error")
    else:
        print(expr.eval())
    return 0