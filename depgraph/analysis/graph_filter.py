"""Post-hoc graph filtering and summary counts."""

from __future__ import annotations

from typing import Iterable

from depgraph.analysis.graph_models import DependencyGraph, GraphStats, NodeKind


def exclude_kinds(graph: DependencyGraph, kinds: Iterable[NodeKind]) -> DependencyGraph:
    """Return a copy of ``graph`` without nodes of ``kinds``.

    Every edge touching a removed node goes too; everything else keeps its order.
    """
    kinds = frozenset(kinds)
    if not kinds:
        return DependencyGraph(nodes=dict(graph.nodes), edges=list(graph.edges))

    removed = {key for key, node in graph.nodes.items() if node.kind in kinds}
    return DependencyGraph(
        nodes={key: node for key, node in graph.nodes.items() if key not in removed},
        edges=[
            edge for edge in graph.edges
            if edge.source not in removed and edge.target not in removed
        ],
    )


def graph_stats(graph: DependencyGraph) -> GraphStats:
    by_kind = {kind: 0 for kind in NodeKind}
    for node in graph.nodes.values():
        by_kind[node.kind] += 1

    return GraphStats(
        total_nodes=len(graph.nodes),
        total_edges=len(graph.edges),
        local_modules=by_kind[NodeKind.LOCAL],
        packages=by_kind[NodeKind.PACKAGE],
        builtins=by_kind[NodeKind.BUILTIN],
    )
