# boolexpr/combinators.py
"""
Small parser combinators over an immutable ParseState.

A parser is any callable taking a ParseState and returning either
Parsed(value, state) or a ParseFailure. Nothing here mutates its input, so
backtracking is just calling the next alternative with the same state.
"""
from dataclasses import dataclass, replace
from functools import wraps
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union

from .errors import ParseFailure

T = TypeVar("T")


@dataclass(frozen=True)
class ParseState:
    text: str
    pos: int = 0

    @property
    def rest(self) -> str:
        return self.text[self.pos:]

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def advance(self, n: int) -> "ParseState":
        return ParseState(self.text, self.pos + n)


@dataclass(frozen=True)
class Parsed(Generic[T]):
    value: T
    state: ParseState


ParseOutcome = Union[Parsed, ParseFailure]
Parser = Callable[[ParseState], ParseOutcome]


def failed(outcome) -> bool:
    return isinstance(outcome, ParseFailure)


def literal(text: str, value: Any, label: Optional[str] = None) -> Parser:
    label = label or f'"{text}"'

    def parse(state: ParseState) -> ParseOutcome:
        if state.startswith(text):
            return Parsed(value, state.advance(len(text)))
        return ParseFailure((label,), state.pos)

    parse.__name__ = f"literal({text!r})"
    return parse


def map_value(parser: Parser, fn: Callable[[Any], Any]) -> Parser:
    def parse(state: ParseState) -> ParseOutcome:
        out = parser(state)
        if failed(out):
            return out
        return Parsed(fn(out.value), out.state)
    return parse


def commit(failure: ParseFailure) -> ParseFailure:
    """Mark a failure so the enclosing choice returns it instead of trying later alternatives."""
    return replace(failure, committed=True)


def choice(*alternatives: Parser) -> Parser:
    def parse(state: ParseState) -> ParseOutcome:
        failures: List[ParseFailure] = []
        for alt in alternatives:
            out = alt(state)
            if not failed(out):
                return out
            if out.committed:
                return replace(out, committed=False)
            failures.append(out)
        return ParseFailure.merge(failures)
    return parse


def label(name: str, parser: Parser) -> Parser:
    def parse(state: ParseState) -> ParseOutcome:
        out = parser(state)
        if failed(out):
            return ParseFailure((name,), state.pos)
        return out
    return parse


def rule(name: str):
    """Decorator: attach a context frame `name` to every failure leaving the rule."""
    def deco(fn: Parser) -> Parser:
        @wraps(fn)
        def wrapper(state: ParseState) -> ParseOutcome:
            out = fn(state)
            if failed(out):
                return out.within(name, state.pos)
            return out
        return wrapper
    return deco


def separated(operand: Parser, operator: Parser) -> Parser:
    """operand (operator operand)* collected as a flat [x0, op1, x1, ...] list."""
    def parse(state: ParseState) -> ParseOutcome:
        first = operand(state)
        if failed(first):
            return first
        items = [first.value]
        state = first.state
        while True:
            op = operator(state)
            if failed(op):
                break
            nxt = operand(op.state)
            if failed(nxt):
                break
            items += [op.value, nxt.value]
            state = nxt.state
        return Parsed(items, state)
    return parse
