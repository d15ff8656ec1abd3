"""Fetch a remote git repository into a temporary directory for scanning."""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from depgraph.errors import RemoteFetchError

logger = logging.getLogger(__name__)

CLONE_TIMEOUT = 300  # seconds

_REMOTE_RE = re.compile(r"^(?:https?://|ssh://|git://|git@[\w.-]+:)")


def is_remote_url(value: str) -> bool:
    """True for anything ``git clone`` should fetch rather than a local path."""
    return bool(_REMOTE_RE.match(value)) or value.endswith(".git")


@contextmanager
def fetch_repository(
    url: str,
    ref: str | None = None,
    timeout: int = CLONE_TIMEOUT,
) -> Iterator[Path]:
    """Shallow-clone ``url`` and yield the checkout directory.

    The temporary directory is removed when the context exits, whether or
    not the clone or the caller's work succeeded.
    """
    if shutil.which("git") is None:
        raise RemoteFetchError("git is required to scan a remote repository")

    tmpdir = Path(tempfile.mkdtemp(prefix="depgraph_"))
    checkout = tmpdir / "repo"
    cmd = ["git", "clone", "--depth", "1", "--quiet"]
    if ref:
        cmd += ["--branch", ref]
    cmd += [url, str(checkout)]

    try:
        logger.info("cloning %s into %s", url, checkout)
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
        except subprocess.TimeoutExpired:
            raise RemoteFetchError(f"Timed out after {timeout}s cloning {url}") from None
        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit code {result.returncode}"
            raise RemoteFetchError(f"Failed to clone {url}: {detail}")
        yield checkout
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)
        logger.debug("removed %s", tmpdir)
