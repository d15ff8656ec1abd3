"""In-memory state for the web UI: the graph being served."""

from __future__ import annotations

from datetime import datetime

from depgraph.models import ScanResult


class AppState:
    """Singleton shared by the API routes."""

    def __init__(self):
        self.result: ScanResult | None = None
        self.loaded_at: str | None = None

    def load(self, result: ScanResult) -> None:
        self.result = result
        self.loaded_at = datetime.now().isoformat()

    def clear(self) -> None:
        self.result = None
        self.loaded_at = None


# Module-level singleton shared by all routers
state = AppState()
