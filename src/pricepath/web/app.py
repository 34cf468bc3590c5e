"""FastAPI application factory for the pricepath API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pricepath import __version__
from pricepath.config import Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: log startup configuration."""
    settings = app.state.settings
    logger.info(
        "Starting pricepath API (workers=%d, seeded=%s)",
        settings.simulation_max_workers,
        settings.simulation_seed is not None,
    )
    yield
    logger.info("pricepath API shutdown complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="pricepath API",
        description="Monte Carlo GBM price path simulation with percentile bands and 95% VaR",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Accept"],
    )

    _register_routers(app)

    return app


def _register_routers(app: FastAPI):
    """Register all API routers."""
    from pricepath.web.routers.simulation import router as simulation_router
    from pricepath.web.routers.system import router as system_router

    app.include_router(simulation_router, prefix="/api")
    app.include_router(system_router, prefix="/api")
