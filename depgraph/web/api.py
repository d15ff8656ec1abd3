"""FastAPI routes serving the dependency graph."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from depgraph.analysis.graph_filter import exclude_kinds
from depgraph.analysis.graph_models import NodeKind
from depgraph.models import ScanResult
from depgraph.web.state import state

router = APIRouter(prefix="/api")


# --- Response models ---

class NodeModel(BaseModel):
    id: str
    label: str
    type: str
    extension: str

class LinkModel(BaseModel):
    source: str
    target: str

class GraphResponse(BaseModel):
    nodes: list[NodeModel]
    links: list[LinkModel]

class StatsResponse(BaseModel):
    source: str
    elapsed_ms: int
    loaded_at: str | None
    total_nodes: int
    total_edges: int
    local_modules: int
    packages: int
    builtins: int


def _require_result() -> ScanResult:
    if state.result is None:
        raise HTTPException(404, "No graph loaded")
    return state.result


def _parse_kinds(values: list[str]) -> set[NodeKind]:
    kinds: set[NodeKind] = set()
    for value in values:
        try:
            kinds.add(NodeKind(value))
        except ValueError:
            allowed = ", ".join(k.value for k in NodeKind)
            raise HTTPException(400, f"Unknown node type {value!r} (expected one of: {allowed})")
    return kinds


# --- Endpoints ---

@router.get("/graph", response_model=GraphResponse)
async def get_graph(exclude: list[str] = Query([])):
    result = _require_result()
    graph = result.graph
    kinds = _parse_kinds(exclude)
    if kinds:
        graph = exclude_kinds(graph, kinds)
    return graph.to_dict()


@router.get("/stats", response_model=StatsResponse)
async def get_stats():
    result = _require_result()
    return {
        "source": result.source,
        "elapsed_ms": result.elapsed_ms,
        "loaded_at": state.loaded_at,
        **result.stats.to_dict(),
    }
