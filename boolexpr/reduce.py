# boolexpr/reduce.py
from typing import Sequence, Union

from .nodes import Expression, Operator


def fold_left(sequence: Sequence[Union[Expression, Operator]]) -> Expression:
    """Fold [x0, op1, x1, ..., opN, xN] into (((x0 op1 x1) op2 x2) ... opN xN)."""
    if not sequence or len(sequence) % 2 == 0:
        raise ValueError(f"expected an odd-length operand/operator sequence, got {len(sequence)} items")
    n = sequence[0]
    it = iter(sequence[1:])
    for op, b in zip(it, it):
        n = op.build(n, b)
    return n
