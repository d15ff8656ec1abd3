"""Data models for the scan pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from depgraph.analysis.graph_models import DependencyGraph, GraphStats, NodeKind
from depgraph.scanner.language_map import IGNORED_DIRS, NODE_BUILTINS, SOURCE_EXTENSIONS


@dataclass(frozen=True)
class SourceFile:
    """A file found by discovery."""
    path: Path

    @property
    def extension(self) -> str:
        return self.path.suffix


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for one scan."""
    source_dir: Path = Path(".")
    repo_url: str | None = None
    repo_ref: str | None = None
    exclude_kinds: frozenset[NodeKind] = frozenset()
    extensions: tuple[str, ...] = SOURCE_EXTENSIONS
    ignored_dirs: frozenset[str] = IGNORED_DIRS
    builtins: frozenset[str] = NODE_BUILTINS


@dataclass
class ScanResult:
    """Result of the scan pipeline."""
    graph: DependencyGraph
    stats: GraphStats
    source: str
    elapsed_ms: int = 0
