# boolexpr/grammar.py
# Reference LALR grammar for the same language, used to cross-check the
# hand-written parser. The transformer walks the tree with its own stack, so
# deeply nested input does not hit the recursion limit.
from lark import Lark, Transformer_NonRecursive, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from .errors import ExpressionSyntaxError
from .nodes import And, Expression, Literal, Not, Or

GRAMMAR = r"""
?start: or_expr
?or_expr: and_expr ("||" and_expr)*
?and_expr: unary_expr ("&&" unary_expr)*
?unary_expr: "!" unary_expr -> negate
           | atom
?atom: "true"         -> true
     | "false"        -> false
     | "(" or_expr ")"
"""

parser = Lark(GRAMMAR, start="start", parser="lalr")


@v_args(inline=True)
class ASTBuilder(Transformer_NonRecursive):
    def true(self): return Literal(True)
    def false(self): return Literal(False)
    def negate(self, operand): return Not(operand)

    def or_expr(self, a, *rest):
        n = a
        for b in rest: n = Or(n, b)
        return n

    def and_expr(self, a, *rest):
        n = a
        for b in rest: n = And(n, b)
        return n


def _position(err: UnexpectedInput, src: str) -> int:
    if isinstance(err, UnexpectedEOF):
        return len(src)
    if isinstance(err, UnexpectedToken) and err.token.type == "$END":
        return len(src)
    pos = getattr(err, "pos_in_stream", None)
    return pos if pos is not None else len(src)


def parse_lark(src: str) -> Expression:
    try:
        tree = parser.parse(src)
    except (UnexpectedCharacters, UnexpectedToken, UnexpectedEOF) as e:
        raise ExpressionSyntaxError(str(e), _position(e, src)) from e
    return ASTBuilder().transform(tree)
