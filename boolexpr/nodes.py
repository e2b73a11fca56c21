# boolexpr/nodes.py
from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class Literal:
    value: bool


@dataclass(frozen=True)
class Not:
    operand: "Expression"


@dataclass(frozen=True)
class And:
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Or:
    left: "Expression"
    right: "Expression"


Expression = Union[Literal, Not, And, Or]


class Operator(Enum):
    AND = "&&"
    OR = "||"

    @property
    def node(self):
        return And if self is Operator.AND else Or

    def build(self, left: Expression, right: Expression) -> Expression:
        return self.node(left, right)
