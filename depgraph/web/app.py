"""FastAPI application factory."""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Request, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from depgraph import __version__
from depgraph.models import ScanResult
from depgraph.web.api import router
from depgraph.web.state import state

STATIC_DIR = Path(__file__).parent / "static"
INDEX_FILE = "index.html"


class SpaStaticFiles(StaticFiles):
    """Static files that fall back to index.html for unknown paths."""

    async def get_response(self, path: str, scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404:
                raise
            return await super().get_response(INDEX_FILE, scope)


def create_app(result: ScanResult | None = None) -> FastAPI:
    if result is not None:
        state.load(result)

    app = FastAPI(title="depgraph", version=__version__)

    @app.middleware("http")
    async def no_cache_static(request: Request, call_next):
        response: Response = await call_next(request)
        if request.url.path.endswith((".js", ".css", ".html")) or request.url.path == "/":
            response.headers["Cache-Control"] = "no-cache"
        return response

    app.include_router(router)

    # Static files last: the mount catches every unmatched route
    app.mount("/", SpaStaticFiles(directory=str(STATIC_DIR), html=True), name="static")
    return app
