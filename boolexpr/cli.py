"""
boolexpr/cli.py

Parse boolean expressions and print their trees.

Usage examples:
    python -m boolexpr.cli "true||true&&false"
    python -m boolexpr.cli --json "!(false&&true)"
    python -m boolexpr.cli --engine lark "(true||false)&&true"
"""

import argparse
import json
import logging
import sys

from boolexpr.ast_utils import ast_to_dict, ast_to_pretty
from boolexpr.errors import ParseError
from boolexpr.grammar import parse_lark
from boolexpr.parser import parse_expression

log = logging.getLogger(__name__)

ENGINES = {
    "combinator": parse_expression,
    "lark": parse_lark,
}


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Parse boolean expressions")
    ap.add_argument("expressions", nargs="+", help="expressions to parse (no whitespace)")
    ap.add_argument("--engine", choices=sorted(ENGINES), default="combinator")
    ap.add_argument("--json", action="store_true", help="print the tree as JSON")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    parse = ENGINES[args.engine]

    status = 0
    for src in args.expressions:
        log.debug("parsing %r with %s", src, args.engine)
        try:
            ast = parse(src)
        except ParseError as e:
            print(f"error: {e.message} (at {e.position})", file=sys.stderr)
            status = 1
            continue
        if args.json:
            try:
                print(json.dumps(ast_to_dict(ast)))
            except RecursionError:
                print("error: tree too deep for JSON output, drop --json for the text tree", file=sys.stderr)
                status = 1
        else:
            print(ast_to_pretty(ast))
    return status


if __name__ == "__main__":
    sys.exit(main())
