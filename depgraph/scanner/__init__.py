"""Filesystem access and the lookup tables used by source discovery."""

from __future__ import annotations

from depgraph.scanner.filesystem import DirEntry, FileSystem, LocalFileSystem, MemoryFileSystem
from depgraph.scanner.language_map import (
    BUILTIN_SCHEME,
    IGNORED_DIRS,
    NODE_BUILTINS,
    SOURCE_EXTENSIONS,
)

__all__ = [
    "BUILTIN_SCHEME",
    "DirEntry",
    "FileSystem",
    "IGNORED_DIRS",
    "LocalFileSystem",
    "MemoryFileSystem",
    "NODE_BUILTINS",
    "SOURCE_EXTENSIONS",
]
