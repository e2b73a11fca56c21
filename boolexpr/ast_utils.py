# boolexpr/ast_utils.py
# Walkers keep an explicit stack: a long "&&" chain folds into a tree as deep
# as the chain is long.
from typing import Any, Dict
from .nodes import Literal, Not, And, Or

def ast_to_dict(node) -> Dict[str, Any]:
    root: Dict[str, Any] = {}
    stack = [(node, root)]
    while stack:
        n, out = stack.pop()
        if isinstance(n, Literal):
            out.update(type="Literal", value=n.value)
        elif isinstance(n, Not):
            out.update(type="Not", operand={})
            stack.append((n.operand, out["operand"]))
        elif isinstance(n, (And, Or)):
            out.update(type=type(n).__name__, left={}, right={})
            stack.append((n.right, out["right"]))
            stack.append((n.left, out["left"]))
        else:
            raise TypeError(f"Unknown node {type(n).__name__}")
    return root

def ast_to_pretty(node, indent: str = "  ") -> str:
    lines = []
    stack = [(node, 0, None)]
    while stack:
        n, depth, label = stack.pop()
        pad = indent * depth
        pre = f"{label}: " if label else ""
        if isinstance(n, Literal):
            lines.append(f"{pad}{pre}Literal({'true' if n.value else 'false'})")
        elif isinstance(n, Not):
            lines.append(f"{pad}{pre}Not")
            stack.append((n.operand, depth+1, "operand"))
        elif isinstance(n, (And, Or)):
            lines.append(f"{pad}{pre}{type(n).__name__}")
            stack.append((n.right, depth+1, "right"))
            stack.append((n.left, depth+1, "left"))
        else:
            raise TypeError(f"Unknown node {type(n).__name__}")
    return "\n".join(lines)

def ast_to_source(node) -> str:
    # Fully parenthesised, so the text re-parses to the same tree.
    parts = []
    stack = [node]
    while stack:
        n = stack.pop()
        if isinstance(n, str):
            parts.append(n)
        elif isinstance(n, Literal):
            parts.append("true" if n.value else "false")
        elif isinstance(n, Not):
            parts.append("!")
            stack.append(n.operand)
        elif isinstance(n, (And, Or)):
            op = "&&" if isinstance(n, And) else "||"
            stack.extend([")", n.right, op, n.left, "("])
        else:
            raise TypeError(f"Unknown node {type(n).__name__}")
    return "".join(parts)
