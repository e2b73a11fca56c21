# boolexpr/parser.py
"""
Recursive-descent parser for boolean expressions.

    expr   := term ("||" term)*
    term   := factor ("&&" factor)*
    factor := "!" factor | "(" expr ")" | boolean
    boolean:= "true" | "false"

Precedence comes from the nesting of the rules; each binary level collects a
flat operand/operator list and folds it to the left.
"""
import sys
import threading
from contextlib import contextmanager

from .combinators import (
    ParseOutcome, ParseState, Parsed, choice, commit, failed, label, literal,
    map_value, rule, separated,
)
from .errors import ParseFailure
from .nodes import Expression, Literal, Not, Operator
from .reduce import fold_left

TRUE = literal("true", True)
FALSE = literal("false", False)
BANG = literal("!", "!")
AND = literal("&&", Operator.AND)
OR = literal("||", Operator.OR)
LPAREN = literal("(", "(")
RPAREN = literal(")", ")")

const = map_value(label("boolean", choice(TRUE, FALSE)), Literal)


def negation(state: ParseState) -> ParseOutcome:
    bang = BANG(state)
    if failed(bang):
        return bang
    inner = factor(bang.state)
    if failed(inner):
        return commit(inner)
    return Parsed(Not(inner.value), inner.state)


def group(state: ParseState) -> ParseOutcome:
    opened = LPAREN(state)
    if failed(opened):
        return opened
    inner = expr(opened.state)
    if failed(inner):
        return inner
    closed = RPAREN(inner.state)
    if failed(closed):
        return closed
    return Parsed(inner.value, closed.state)


@rule("factor")
def factor(state: ParseState) -> ParseOutcome:
    return _factor(state)


_factor = choice(negation, group, const)
_and_chain = separated(factor, AND)


@rule("term")
def term(state: ParseState) -> ParseOutcome:
    out = _and_chain(state)
    if failed(out):
        return out
    return Parsed(fold_left(out.value), out.state)


_or_chain = separated(term, OR)


@rule("expr")
def expr(state: ParseState) -> ParseOutcome:
    out = _or_chain(state)
    if failed(out):
        return out
    return Parsed(fold_left(out.value), out.state)


# Upper bound on interpreter frames per input character: a "(" level runs
# through expr, term and factor with their wrappers, "!" through factor and
# negation.
FRAMES_PER_CHAR = 6

_limit_lock = threading.Lock()
_active = 0
_saved_limit = 0


@contextmanager
def recursion_budget(n_chars: int):
    """Raise the interpreter recursion limit for a parse of `n_chars` characters.

    The limit is process-wide, so concurrent parses share one raised limit and
    the original is restored when the last of them finishes.
    """
    global _active, _saved_limit
    with _limit_lock:
        if _active == 0:
            _saved_limit = sys.getrecursionlimit()
        _active += 1
        needed = _saved_limit + n_chars * FRAMES_PER_CHAR
        if needed > sys.getrecursionlimit():
            sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        with _limit_lock:
            _active -= 1
            if _active == 0:
                sys.setrecursionlimit(_saved_limit)


def parse(text: str) -> ParseOutcome:
    """Parse the whole of `text`.

    Returns Parsed(expression, end_state) or a ParseFailure; never raises for
    malformed input.
    """
    with recursion_budget(len(text)):
        try:
            out = expr(ParseState(text))
        except RecursionError:
            return ParseFailure(("a less deeply nested expression",), 0)
    if failed(out):
        return out
    if not out.state.at_end:
        return ParseFailure.trailing(out.state.rest, out.state.pos)
    return out


def parse_expression(text: str) -> Expression:
    out = parse(text)
    if failed(out):
        raise out.to_error()
    return out.value
