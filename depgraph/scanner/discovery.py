"""Source file discovery."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from depgraph.models import SourceFile
from depgraph.scanner.filesystem import FileSystem, LocalFileSystem
from depgraph.scanner.language_map import IGNORED_DIRS, SOURCE_EXTENSIONS

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."


def discover_files(
    root_dir: Path,
    fs: FileSystem | None = None,
    extensions: Iterable[str] = SOURCE_EXTENSIONS,
    ignored_dirs: Iterable[str] = IGNORED_DIRS,
) -> list[SourceFile]:
    """Recursively collect source files under ``root_dir``.

    Hidden entries and ignored directory names are skipped; directories that
    cannot be listed are skipped silently.
    """
    fs = fs or LocalFileSystem()
    allowed = {ext.lower() for ext in extensions}
    ignored = frozenset(ignored_dirs)
    files: list[SourceFile] = []

    def walk(current: Path) -> None:
        try:
            entries = fs.list_dir(current)
        except OSError as e:
            logger.debug("skipping unreadable directory %s: %s", current, e)
            return

        for entry in entries:
            if entry.name.startswith(HIDDEN_PREFIX):
                continue
            if entry.is_dir:
                if entry.name not in ignored:
                    walk(entry.path)
            elif entry.is_file and entry.path.suffix.lower() in allowed:
                files.append(SourceFile(path=entry.path))

    walk(Path(root_dir))
    return files
