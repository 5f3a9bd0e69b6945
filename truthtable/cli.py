#! /bin/env python3
"""
Interactive truth table generator.

Operators: ! ~ (not), ^ * (and), v + (or), -> (implies), <-> (iff).
Constants: 0 F (false), 1 T (true). Any other character is a variable.
Type "quit" to exit.
"""
import argparse
import sys

from truthtable.config import TABLE_CONFIG
from truthtable.core import ExpressionError, TruthTable, describe_tokens
from truthtable.export import RENDERERS
from truthtable.utils import get_logger, use_sink

logger = get_logger("cli")

PROMPT = "Enter proposition: "
QUIT = "quit"


def render(expression: str, strict=True, coarse=False, show_tokens=False, fmt="text"):
    """Run the whole pipeline for one line of input. Returns (text to print, accepted)."""
    try:
        table = TruthTable.from_expression(expression, strict)
    except ExpressionError as e:
        logger.debug(f"Rejected {expression!r}: {e.kind}: {e}")
        return e.render(coarse) + "\n", False

    out = ""
    if show_tokens:
        out += describe_tokens(table.tokens) + "\n"
    rendered = RENDERERS[fmt](table)
    if not rendered.endswith("\n"):
        rendered += "\n"
    return out + rendered, True


def run_loop(stdin=None, stdout=None, **options) -> None:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        expression = line.rstrip("\r\n")
        if expression == QUIT:
            break
        if not expression.strip():
            continue
        stdout.write(render(expression, **options)[0])


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="truthtable", description="Truth table generator for propositional logic")
    ap.add_argument("-e", "--expr", help="Print the table for one expression and exit (e.g. 'p ^ ~q')", metavar='"EXPR"')
    ap.add_argument("--legacy", action="store_true", default=TABLE_CONFIG["legacy"],
                    help="Silently drop incomplete '->'/'<->' and report every error as 'Invalid expression!'")
    ap.add_argument("--coarse", action="store_true", default=TABLE_CONFIG["coarse_errors"],
                    help="Report every error as 'Invalid expression!'")
    ap.add_argument("--tokens", action="store_true", help="Print the scanned tokens before the table")
    ap.add_argument("--format", choices=sorted(RENDERERS), default="text", dest="fmt")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    use_sink(sys.stderr)
    options = {
        "strict": not args.legacy,
        "coarse": args.coarse or args.legacy,
        "show_tokens": args.tokens,
        "fmt": args.fmt,
    }
    if args.expr is not None:
        text, accepted = render(args.expr, **options)
        sys.stdout.write(text)
        return 0 if accepted else 1
    run_loop(**options)
    return 0


if __name__ == "__main__":
    sys.exit(main())
