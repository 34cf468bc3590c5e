"""Monte Carlo price path models.

Provides the zero-drift Geometric Brownian Motion simulator and the
Box-Muller normal source that drives it:
- normal: RandomNormalSource (seedable, spawnable N(0,1) stream)
- gbm: path simulation, serial or across worker processes
"""

from dataclasses import dataclass

import numpy as np

TRADING_DAYS_PER_YEAR = 252
RISK_FREE_RATE = 0.0


@dataclass(frozen=True)
class SimulationParameters:
    """Validated inputs for one simulation run."""

    current_price: float
    annual_volatility_pct: float
    horizon_days: int
    path_count: int


# (path_count, horizon_days + 1) float64, column 0 = current price
TrajectoryMatrix = np.ndarray


__all__ = [
    "RISK_FREE_RATE",
    "SimulationParameters",
    "TRADING_DAYS_PER_YEAR",
    "TrajectoryMatrix",
]
