import pytest
from boolexpr.parser import parse_expression
from boolexpr.ast_utils import ast_to_dict, ast_to_pretty, ast_to_source
from boolexpr.analyzer import analyze
from boolexpr.nodes import Literal

def test_ast_to_dict():
    assert ast_to_dict(parse_expression("!true||false")) == {
        "type": "Or",
        "left": {"type": "Not", "operand": {"type": "Literal", "value": True}},
        "right": {"type": "Literal", "value": False},
    }

def test_ast_to_pretty():
    assert ast_to_pretty(parse_expression("true&&!false")) == "\n".join([
        "And",
        "  left: Literal(true)",
        "  right: Not",
        "    operand: Literal(false)",
    ])

@pytest.mark.parametrize("src", [
    "true",
    "!(false&&true)",
    "true||true&&false",
    "(true||true)&&false",
    "true&&false&&true",
    "!!(true||false)||false",
])
def test_source_reparses_to_same_tree(src):
    tree = parse_expression(src)
    assert parse_expression(ast_to_source(tree)) == tree

def test_unknown_node_rejected():
    with pytest.raises(TypeError):
        ast_to_dict("true")

def test_analyze():
    an = analyze(parse_expression("!(true&&false)||true&&true"))
    assert an.literals == {True, False}
    assert an.operators == {"!": 1, "&&": 2, "||": 1}
    assert an.nodes == 8
    assert an.depth == 4

def test_analyze_literal():
    an = analyze(Literal(False))
    assert (an.nodes, an.depth, an.literals) == (1, 1, {False})
