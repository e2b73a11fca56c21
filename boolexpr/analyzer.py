from collections import Counter
from dataclasses import dataclass, field
from typing import Set
from .nodes import Literal, Not, And, Or

@dataclass
class Analysis:
    literals: Set[bool] = field(default_factory=set)
    operators: Counter = field(default_factory=Counter)
    nodes: int = 0
    depth: int = 0

def analyze(node) -> Analysis:
    an = Analysis()
    stack = [(node, 1)]

    while stack:
        n, depth = stack.pop()
        an.nodes += 1
        an.depth = max(an.depth, depth)

        if isinstance(n, Literal):
            an.literals.add(n.value)

        elif isinstance(n, Not):
            an.operators["!"] += 1
            stack.append((n.operand, depth + 1))

        elif isinstance(n, (And, Or)):
            an.operators["&&" if isinstance(n, And) else "||"] += 1
            stack.append((n.left, depth + 1))
            stack.append((n.right, depth + 1))

        else:
            raise TypeError(f"Unknown node {type(n).__name__}")

    return an
