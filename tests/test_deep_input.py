import sys
import pytest
from fastapi.testclient import TestClient
from app import main as service
from boolexpr.analyzer import analyze
from boolexpr.ast_utils import ast_to_dict, ast_to_pretty, ast_to_source
from boolexpr.cli import main
from boolexpr.combinators import Parsed
from boolexpr.errors import ParseFailure
from boolexpr.grammar import parse_lark
from boolexpr.nodes import Literal
from boolexpr.parser import parse, parse_expression

# 1500 operands, 8998 characters: folds into a tree 1500 levels deep
CHAIN = "&&".join(["true"] * 1500)

def nested(n):
    return "(" * n + "true" + ")" * n

@pytest.mark.parametrize("n", [70, 300, 1000])
def test_deeply_parenthesised_input_parses(n):
    out = parse(nested(n))
    assert isinstance(out, Parsed)
    assert out.value == Literal(True)

def test_stacked_negation_parses():
    tree = parse_expression("!" * 3000 + "false")
    an = analyze(tree)
    assert an.operators == {"!": 3000}
    assert an.depth == 3001

def test_deep_mixed_nesting():
    src = "(true&&" * 400 + "false" + ")" * 400
    an = analyze(parse_expression(src))
    assert an.operators == {"&&": 400}
    assert an.depth == 401

def test_recursion_limit_is_restored():
    before = sys.getrecursionlimit()
    parse(nested(2000))
    parse("(" * 500 + "1")
    assert sys.getrecursionlimit() == before

def test_deep_failure_reports_innermost_position():
    out = parse("(" * 500 + "1" + ")" * 500)
    assert isinstance(out, ParseFailure)
    assert out.position == 500

def test_long_chain_walkers():
    tree = parse_expression(CHAIN)
    an = analyze(tree)
    assert (an.nodes, an.depth, an.operators) == (2999, 1500, {"&&": 1499})

    d = ast_to_dict(tree)
    for _ in range(1499):
        assert d["type"] == "And"
        assert d["right"] == {"type": "Literal", "value": True}
        d = d["left"]
    assert d == {"type": "Literal", "value": True}

    lines = ast_to_pretty(tree).splitlines()
    assert len(lines) == 2999
    assert lines[-1].strip() == "right: Literal(true)"

def test_long_chain_source_reparses():
    src = ast_to_source(parse_expression(CHAIN))
    assert src.startswith("(" * 1499 + "true&&true)")
    assert ast_to_source(parse_expression(src)) == src

def test_lark_handles_deep_input():
    src = "!" * 2000 + "true"
    assert ast_to_source(parse_lark(src)) == src
    assert ast_to_source(parse_lark(CHAIN)) == ast_to_source(parse_expression(CHAIN))

def test_service_long_chain():
    client = TestClient(service.app)
    r = client.post("/parse", json={"expression": CHAIN})
    assert r.status_code == 200
    assert r.json()["depth"] == 1500
    assert r.json()["operators"] == {"&&": 1499}
    r = client.post("/ast", json={"expression": CHAIN})
    assert r.status_code == 413

def test_service_deep_parentheses_ast():
    client = TestClient(service.app)
    r = client.post("/ast", json={"expression": nested(1000)})
    assert r.status_code == 200
    assert r.json()["tree"] == {"type": "Literal", "value": True}

def test_cli_long_chain(capsys):
    assert main([CHAIN]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 2999

def test_cli_lark_deep_negation(capsys):
    assert main(["--engine", "lark", "!" * 2000 + "true"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Not"
    assert len(lines) == 2001
