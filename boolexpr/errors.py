# boolexpr/errors.py
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class ContextFrame:
    label: str
    position: int


@dataclass(frozen=True)
class ParseFailure:
    """Why a parser could not match at `position`.

    `expected` lists the alternatives that would have been accepted there and
    `frames` is the chain of grammar rules that were active, innermost first.
    Failures are values: rules return them, callers either discard them and
    try something else or wrap them with their own frame and return them.
    """
    expected: Tuple[str, ...]
    position: int
    frames: Tuple[ContextFrame, ...] = ()
    remainder: Optional[str] = field(default=None, compare=False)
    committed: bool = field(default=False, compare=False)

    def within(self, label: str, position: int) -> "ParseFailure":
        return replace(self, frames=self.frames + (ContextFrame(label, position),))

    def describe(self) -> str:
        text = " or ".join(self.expected)
        if not self.frames:
            return text
        labels = [f.label for f in self.frames]
        text += f" while processing {labels[0]}"
        for lbl in labels[1:]:
            text += f", followed by {lbl}"
        return text

    @property
    def message(self) -> str:
        if self.remainder is not None:
            return f"could not parse {self.remainder}"
        return f"expected {self.describe()}"

    @classmethod
    def merge(cls, failures: Iterable["ParseFailure"]) -> "ParseFailure":
        failures = list(failures)
        if not failures:
            raise ValueError("merge needs at least one failure")
        expected = []
        for f in failures:
            d = f.describe()
            if d not in expected:
                expected.append(d)
        return cls(tuple(expected), max(f.position for f in failures))

    @classmethod
    def trailing(cls, remainder: str, position: int) -> "ParseFailure":
        return cls(("end of input",), position, remainder=remainder)

    def to_error(self) -> "ParseError":
        if self.remainder is not None:
            return TrailingInputError(self.message, self.position, self.remainder)
        return ExpressionSyntaxError(self.message, self.position, self)


class ParseError(ValueError):
    kind = "parse"

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.message = message
        self.position = position

    def to_dict(self):
        return {"error": self.kind, "message": self.message, "position": self.position}


class ExpressionSyntaxError(ParseError):
    kind = "syntax"

    def __init__(self, message: str, position: int, failure: Optional[ParseFailure] = None):
        super().__init__(message, position)
        self.failure = failure


class TrailingInputError(ParseError):
    kind = "trailing_input"

    def __init__(self, message: str, position: int, remainder: str):
        super().__init__(message, position)
        self.remainder = remainder
