"""Data models for the dependency graph."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class NodeKind(enum.Enum):
    LOCAL = "local"
    PACKAGE = "package"
    BUILTIN = "builtin"


@dataclass
class GraphNode:
    key: str
    label: str
    kind: NodeKind
    extension: str = ""  # empty for packages, builtins and unresolved locals

    def to_dict(self) -> dict:
        return {
            "id": self.key,
            "label": self.label,
            "type": self.kind.value,
            "extension": self.extension,
        }


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target}


@dataclass
class DependencyGraph:
    nodes: dict[str, GraphNode] = field(default_factory=dict)  # key -> node, insertion ordered
    edges: list[GraphEdge] = field(default_factory=list)

    def get_or_create_node(self, key: str, kind: NodeKind, extension: str = "") -> GraphNode:
        node = self.nodes.get(key)
        if node is None:
            node = GraphNode(key=key, label=key, kind=kind, extension=extension)
            self.nodes[key] = node
        return node

    def add_edge(self, source: str, target: str) -> GraphEdge:
        edge = GraphEdge(source=source, target=target)
        self.edges.append(edge)
        return edge

    def to_dict(self) -> dict:
        return {
            "nodes": [node.to_dict() for node in self.nodes.values()],
            "links": [edge.to_dict() for edge in self.edges],
        }


@dataclass
class GraphStats:
    total_nodes: int = 0
    total_edges: int = 0
    local_modules: int = 0
    packages: int = 0
    builtins: int = 0

    def to_dict(self) -> dict:
        return {
            "total_nodes": self.total_nodes,
            "total_edges": self.total_edges,
            "local_modules": self.local_modules,
            "packages": self.packages,
            "builtins": self.builtins,
        }
