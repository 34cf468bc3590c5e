"""Pytest configuration and shared fixtures."""

import pytest

from pricepath.analysis.sim_models import SimulationParameters
from pricepath.analysis.sim_models.normal import RandomNormalSource


@pytest.fixture
def small_params():
    """Short horizon, minimum path count."""
    return SimulationParameters(
        current_price=100.0,
        annual_volatility_pct=20.0,
        horizon_days=10,
        path_count=100,
    )


@pytest.fixture
def source():
    return RandomNormalSource(12345)


@pytest.fixture
def valid_body():
    """Sample request body as decoded from JSON."""
    return {
        "precio_actual": 100,
        "volatilidad": 20,
        "dias": 30,
        "simulaciones": 1000,
    }
