"""Exception types raised by depgraph."""

from __future__ import annotations


class DepgraphError(Exception):
    """Base class for all depgraph errors."""


class ScanRootError(DepgraphError, ValueError):
    """The scan root does not exist or is not a directory."""


class RemoteFetchError(DepgraphError):
    """A remote repository could not be fetched."""
