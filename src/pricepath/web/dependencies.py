"""FastAPI dependency injection providers."""

from fastapi import Request

from pricepath.analysis.sim_models.normal import RandomNormalSource
from pricepath.config import Settings


def get_settings(request: Request) -> Settings:
    """Get application settings from app state."""
    return request.app.state.settings


def get_normal_source(request: Request) -> RandomNormalSource:
    """Provide a fresh normal source for the request lifetime."""
    return RandomNormalSource(request.app.state.settings.simulation_seed)
