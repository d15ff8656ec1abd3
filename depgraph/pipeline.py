"""Scan orchestrator: validate root -> (fetch) -> build -> filter -> stats."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from depgraph.analysis.dependency_graph import DependencyGraphBuilder
from depgraph.analysis.graph_filter import exclude_kinds, graph_stats
from depgraph.errors import ScanRootError
from depgraph.models import ScanConfig, ScanResult
from depgraph.remote import fetch_repository
from depgraph.scanner.filesystem import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)


def validate_root(path: Path, fs: FileSystem | None = None) -> Path:
    """Return the absolute scan root, or raise ScanRootError."""
    fs = fs or LocalFileSystem()
    root = Path(path).expanduser().absolute()
    if not fs.is_dir(root):
        if fs.is_file(root):
            raise ScanRootError(f"Not a directory: {root}")
        raise ScanRootError(f"Directory not found: {root}")
    return root


def run_scan(config: ScanConfig, fs: FileSystem | None = None) -> ScanResult:
    """Build the dependency graph described by ``config``."""
    if config.repo_url:
        with fetch_repository(config.repo_url, ref=config.repo_ref) as checkout:
            return _scan(checkout, config, LocalFileSystem(), source=config.repo_url)

    fs = fs or LocalFileSystem()
    root = validate_root(config.source_dir, fs)
    return _scan(root, config, fs, source=str(root))


def _scan(root: Path, config: ScanConfig, fs: FileSystem, source: str) -> ScanResult:
    builder = DependencyGraphBuilder(
        fs=fs,
        extensions=config.extensions,
        ignored_dirs=config.ignored_dirs,
        builtins=config.builtins,
    )

    start = time.perf_counter()
    graph = builder.build(root)
    elapsed_ms = int((time.perf_counter() - start) * 1000)

    if config.exclude_kinds:
        graph = exclude_kinds(graph, config.exclude_kinds)

    stats = graph_stats(graph)
    logger.info(
        "scanned %s in %dms: %d nodes, %d edges",
        source, elapsed_ms, stats.total_nodes, stats.total_edges,
    )
    return ScanResult(graph=graph, stats=stats, source=source, elapsed_ms=elapsed_ms)
