"""Filesystem access used by discovery, resolution and the graph builder.

Everything that touches the disk goes through a ``FileSystem`` so the graph
builder can run against ``MemoryFileSystem`` in tests.
"""

from __future__ import annotations

import abc
import os
from pathlib import Path, PurePosixPath
from typing import NamedTuple


class DirEntry(NamedTuple):
    name: str
    path: Path
    is_dir: bool
    is_file: bool


class FileSystem(abc.ABC):
    """Minimal read-only filesystem interface."""

    @abc.abstractmethod
    def list_dir(self, path: Path) -> list[DirEntry]:
        """Return the entries of ``path`` sorted by name.

        Raises ``OSError`` when the directory cannot be listed.
        """

    @abc.abstractmethod
    def is_file(self, path: Path) -> bool:
        """True if ``path`` exists and is a regular file."""

    @abc.abstractmethod
    def is_dir(self, path: Path) -> bool:
        """True if ``path`` exists and is a directory."""

    @abc.abstractmethod
    def read_text(self, path: Path) -> str:
        """Read a file as UTF-8. Raises ``OSError`` on failure."""


class LocalFileSystem(FileSystem):
    """The real disk."""

    def list_dir(self, path: Path) -> list[DirEntry]:
        entries: list[DirEntry] = []
        with os.scandir(path) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                    is_file = entry.is_file(follow_symlinks=False)
                except OSError:
                    continue
                entries.append(DirEntry(entry.name, Path(entry.path), is_dir, is_file))
        entries.sort(key=lambda e: e.name)
        return entries

    def is_file(self, path: Path) -> bool:
        try:
            return path.is_file()
        except OSError:
            return False

    def is_dir(self, path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError:
            return False

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8", errors="replace")


class MemoryFileSystem(FileSystem):
    """In-memory tree built from ``{"/abs/path/file.ts": "contents"}``.

    Directories are implied by file paths. Paths listed in ``unreadable`` raise
    ``PermissionError`` when listed (directories) or read (files).
    """

    def __init__(self, files: dict[str, str], unreadable: set[str] | None = None):
        self._files: dict[str, str] = {}
        self._dirs: set[str] = {"/"}
        for raw_path, content in files.items():
            path = PurePosixPath(raw_path)
            self._files[str(path)] = content
            for parent in path.parents:
                self._dirs.add(str(parent))
        self._unreadable = {str(PurePosixPath(p)) for p in (unreadable or set())}

    def list_dir(self, path: Path) -> list[DirEntry]:
        key = self._key(path)
        if key not in self._dirs:
            raise FileNotFoundError(key)
        if key in self._unreadable:
            raise PermissionError(key)
        names: set[str] = set()
        for candidate in list(self._files) + list(self._dirs):
            parent = PurePosixPath(candidate).parent
            if str(parent) == key and candidate != key:
                names.add(PurePosixPath(candidate).name)
        entries = []
        for name in sorted(names):
            child = str(PurePosixPath(key) / name)
            entries.append(DirEntry(name, Path(child), child in self._dirs, child in self._files))
        return entries

    def is_file(self, path: Path) -> bool:
        return self._key(path) in self._files

    def is_dir(self, path: Path) -> bool:
        return self._key(path) in self._dirs

    def read_text(self, path: Path) -> str:
        key = self._key(path)
        if key in self._unreadable:
            raise PermissionError(key)
        try:
            return self._files[key]
        except KeyError:
            raise FileNotFoundError(key) from None

    @staticmethod
    def _key(path: Path) -> str:
        return str(PurePosixPath(os.path.normpath(str(path))))
