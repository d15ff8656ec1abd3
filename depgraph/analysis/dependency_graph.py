"""Dependency graph builder: discovers files, extracts references, resolves and links them."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import AbstractSet, Sequence

from depgraph.analysis.classifier import builtin_key, classify, package_key
from depgraph.analysis.graph_models import DependencyGraph, NodeKind
from depgraph.analysis.resolver import resolve_local
from depgraph.errors import ScanRootError
from depgraph.extractor import extract_references
from depgraph.scanner.discovery import discover_files
from depgraph.scanner.filesystem import FileSystem, LocalFileSystem
from depgraph.scanner.language_map import IGNORED_DIRS, NODE_BUILTINS, SOURCE_EXTENSIONS

logger = logging.getLogger(__name__)


class DependencyGraphBuilder:
    """Build a file-level dependency graph for a project directory."""

    def __init__(
        self,
        fs: FileSystem | None = None,
        extensions: Sequence[str] = SOURCE_EXTENSIONS,
        ignored_dirs: AbstractSet[str] = IGNORED_DIRS,
        builtins: AbstractSet[str] = NODE_BUILTINS,
    ):
        self.fs = fs or LocalFileSystem()
        self.extensions = tuple(extensions)
        self.ignored_dirs = frozenset(ignored_dirs)
        self.builtins = frozenset(builtins)

    def build(self, root_dir: Path | str) -> DependencyGraph:
        root = Path(os.path.abspath(root_dir))
        if not self.fs.is_dir(root):
            raise ScanRootError(f"Not a directory: {root}")

        graph = DependencyGraph()
        files = discover_files(root, self.fs, self.extensions, self.ignored_dirs)
        logger.debug("discovered %d source files under %s", len(files), root)

        # Step 1: one node per discovered file
        for source_file in files:
            graph.get_or_create_node(
                self._local_key(source_file.path, root),
                NodeKind.LOCAL,
                source_file.extension,
            )

        # Step 2: link every reference
        for source_file in files:
            try:
                text = self.fs.read_text(source_file.path)
            except OSError as e:
                logger.debug("skipping unreadable file %s: %s", source_file.path, e)
                continue

            source_key = self._local_key(source_file.path, root)
            for specifier in extract_references(text):
                target_key = self._link_target(graph, specifier, source_file.path, root)
                graph.add_edge(source_key, target_key)

        logger.debug("built graph: %d nodes, %d edges", len(graph.nodes), len(graph.edges))
        return graph

    def _link_target(
        self,
        graph: DependencyGraph,
        specifier: str,
        from_file: Path,
        root: Path,
    ) -> str:
        """Create or reuse the node ``specifier`` points at and return its key."""
        kind = classify(specifier, self.builtins)

        if kind is NodeKind.LOCAL:
            resolved = resolve_local(specifier, from_file, self.fs, self.extensions)
            if resolved is None:
                logger.debug("unresolved local reference %r in %s", specifier, from_file)
                graph.get_or_create_node(specifier, NodeKind.LOCAL)
                return specifier
            key = self._local_key(resolved, root)
            graph.get_or_create_node(key, NodeKind.LOCAL, resolved.suffix)
            return key

        if kind is NodeKind.BUILTIN:
            key = builtin_key(specifier)
        else:
            key = package_key(specifier)
        graph.get_or_create_node(key, kind)
        return key

    @staticmethod
    def _local_key(path: Path, root: Path) -> str:
        return Path(os.path.relpath(path, root)).as_posix()


def build_graph(root_dir: Path | str, fs: FileSystem | None = None) -> DependencyGraph:
    """Build a graph with the default tables."""
    return DependencyGraphBuilder(fs=fs).build(root_dir)
