"""Resolve local specifiers to files on disk."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

from depgraph.scanner.filesystem import FileSystem, LocalFileSystem
from depgraph.scanner.language_map import SOURCE_EXTENSIONS

INDEX_STEM = "index"


def resolve_local(
    specifier: str,
    from_file: Path,
    fs: FileSystem | None = None,
    extensions: Sequence[str] = SOURCE_EXTENSIONS,
) -> Path | None:
    """Map ``specifier`` as written in ``from_file`` to an existing file.

    Tries, in order: the exact path, the path with each extension appended,
    then ``index<ext>`` inside the path when it is a directory. Returns None
    when nothing matches.
    """
    fs = fs or LocalFileSystem()
    resolved = Path(os.path.normpath(os.path.join(Path(from_file).parent, specifier)))

    if fs.is_file(resolved):
        return resolved

    for ext in extensions:
        candidate = Path(f"{resolved}{ext}")
        if fs.is_file(candidate):
            return candidate

    if fs.is_dir(resolved):
        for ext in extensions:
            candidate = resolved / f"{INDEX_STEM}{ext}"
            if fs.is_file(candidate):
                return candidate

    return None
