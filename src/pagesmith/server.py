"""HTTP front end - serves rendered pages and static assets."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from pagesmith.config import SiteConfig
from pagesmith.errors import PageNotFoundError, PagesmithError
from pagesmith.page.composer import render_page
from pagesmith.paths import INDEX_PAGE, page_file_for
from pagesmith.template.context import RandomSource

log = logging.getLogger(__name__)

NOT_FOUND = "Not found (404)"
INTERNAL_ERROR = "Internal server error (500)"


def create_app(config: SiteConfig, rng: RandomSource | None = None) -> FastAPI:
    """Build the site application for `config`."""
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    @app.exception_handler(StarletteHTTPException)
    async def not_found(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code == 404:
            return PlainTextResponse(NOT_FOUND, status_code=404)
        return await http_exception_handler(request, exc)

    def serve_page(page_file: Path | None) -> Response:
        if page_file is None:
            return PlainTextResponse(NOT_FOUND, status_code=404)

        log.info("Trying to serve template %s", page_file)
        try:
            html = render_page(page_file, config, rng)
        except PageNotFoundError:
            return PlainTextResponse(NOT_FOUND, status_code=404)
        except PagesmithError as e:
            log.error("%s", e)
            return PlainTextResponse(INTERNAL_ERROR, status_code=500)

        return HTMLResponse(
            html + "\n",
            headers={"X-Content-Type-Options": "nosniff"},
        )

    @app.get("/")
    def index() -> Response:
        return serve_page(Path(config.pages_dir) / INDEX_PAGE)

    @app.get("/pages/{page_path:path}")
    def page(page_path: str) -> Response:
        return serve_page(page_file_for(config.pages_dir, f"/pages/{page_path}"))

    app.mount(
        "/static",
        StaticFiles(directory=config.static_dir, check_dir=False),
        name="static",
    )

    return app
