"""Web server for the graph visualization."""

from __future__ import annotations

from depgraph.web.app import create_app

__all__ = ["create_app"]
