"""
FastAPI application factory for the heatwall API.

Creates the app with all routes and a global exception handler.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from heatwall import __version__
from heatwall.config.loader import load_config

logger = logging.getLogger("heatwall.server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup; config is attached by create_app."""
    logger.info("heatwall API ready (%d metrics configured)", len(app.state.config.get("metrics", {})))
    yield


def create_app(config: dict = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="heatwall API",
        description="Calendar activity heatmap layout service",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.config = config if config else load_config()

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "detail": str(exc)},
        )

    from heatwall.server.routes.health import router as health_router
    from heatwall.server.routes.grid import router as grid_router

    app.include_router(health_router)
    app.include_router(grid_router)

    return app
