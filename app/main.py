import logging
import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from boolexpr.analyzer import analyze
from boolexpr.ast_utils import ast_to_dict, ast_to_pretty, ast_to_source
from boolexpr.errors import ParseError
from boolexpr.parser import parse_expression

# ---------------- CONFIG ---------------- #
MAX_INPUT = int(os.environ.get("BOOLEXPR_MAX_INPUT", "10000"))
# deeper trees are summarised by /parse but not returned whole by /ast
MAX_TREE_DEPTH = int(os.environ.get("BOOLEXPR_MAX_TREE_DEPTH", "200"))
LOG_LEVEL = os.environ.get("BOOLEXPR_LOG_LEVEL", "INFO").upper()
# ---------------------------------------- #

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Boolean expression parser")


class ParseBody(BaseModel):
    expression: str


def _parse_or_400(src: str):
    if len(src) > MAX_INPUT:
        log.info("rejected expression of %d chars (limit %d)", len(src), MAX_INPUT)
        raise HTTPException(status_code=413, detail=f"expression longer than {MAX_INPUT} characters")
    try:
        ast = parse_expression(src)
    except ParseError as e:
        log.info("parse failed at %d: %s", e.position, e.message)
        raise HTTPException(status_code=400, detail=e.to_dict())
    log.debug("parsed %r", src)
    return ast


@app.post("/parse")
def parse_endpoint(body: ParseBody):
    ast = _parse_or_400(body.expression)
    meta = analyze(ast)
    return {
        "ok": True,
        "literals": sorted(meta.literals),
        "operators": dict(sorted(meta.operators.items())),
        "nodes": meta.nodes,
        "depth": meta.depth,
    }


@app.post("/ast")
def ast_view(body: ParseBody):
    ast = _parse_or_400(body.expression)
    depth = analyze(ast).depth
    if depth > MAX_TREE_DEPTH:
        log.info("refused tree of depth %d (limit %d)", depth, MAX_TREE_DEPTH)
        raise HTTPException(status_code=413, detail=f"tree deeper than {MAX_TREE_DEPTH} levels")
    return {
        "ok": True,
        "pretty": ast_to_pretty(ast),
        "tree": ast_to_dict(ast),
        "source": ast_to_source(ast),
    }
