"""
Main entrypoint for the Whisky API.

This module assembles the FastAPI application: it sets up logging,
builds the whisky store, includes the API router and mounts the static
assets.  ``create_app`` accepts an existing store and settings so tests
and embedding code control both; ``app`` is instantiated at import
time for ASGI servers, e.g.::

    uvicorn whisky_api.app.main:app --port 8080
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, load_settings
from .core.logging_config import setup_logging
from .services.whisky_store import WhiskyStore, create_store


logger = logging.getLogger(__name__)

WELCOME_HTML = "<h1>Welcome Application</h1>"


def create_app(store: Optional[WhiskyStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[WhiskyStore]
        Store the handlers operate on.  A freshly seeded store is
        built when omitted.
    settings : Optional[Settings]
        Application settings.  Read from the environment when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store if store is not None else create_store(seed=True)
    app.state.settings = settings

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
        # Clients only get the status code, never the error detail.
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
        return Response(status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
        logger.info("%s %s -> 400: %s", request.method, request.url.path, exc.errors())
        return Response(status_code=400)

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def root() -> str:
        return WELCOME_HTML

    app.include_router(v1_router, prefix="/api")

    assets_dir = Path(settings.assets_dir)
    if assets_dir.is_dir():
        app.mount("/assets", StaticFiles(directory=str(assets_dir)), name="assets")
    else:
        logger.warning("Assets directory %s not found; /assets is disabled", assets_dir)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
