"""Geometric Brownian Motion (zero drift, constant volatility) path simulation."""

import dataclasses
import logging
from concurrent.futures import ProcessPoolExecutor

import numpy as np

from . import RISK_FREE_RATE, TRADING_DAYS_PER_YEAR, SimulationParameters, TrajectoryMatrix
from .normal import RandomNormalSource

logger = logging.getLogger(__name__)


def simulate_paths(
    params: SimulationParameters,
    source: RandomNormalSource,
) -> TrajectoryMatrix:
    """Simulate ``path_count`` GBM trajectories of ``horizon_days`` steps.

    Each step applies the discretised GBM update

        S[t] = S[t-1] * exp((r - 0.5 * vol_d**2) * dt + vol_d * sqrt(dt) * z)

    with ``vol_d = annual_vol / sqrt(252)``, ``dt = 1/252`` and ``r = 0``.
    The normal stream is consumed step by step, one draw per trajectory
    in trajectory order.

    Args:
        params: Validated simulation parameters.
        source: Normal source driving the shocks.

    Returns:
        Read-only array of shape (path_count, horizon_days + 1).
    """
    n_paths = params.path_count
    n_steps = params.horizon_days

    vol_base = params.annual_volatility_pct / 100
    daily_vol = vol_base / np.sqrt(TRADING_DAYS_PER_YEAR)
    delta_t = 1 / TRADING_DAYS_PER_YEAR
    shock_scale = daily_vol * np.sqrt(delta_t)

    paths = np.empty((n_paths, n_steps + 1), dtype=np.float64)
    paths[:, 0] = params.current_price

    for t in range(1, n_steps + 1):
        z = source.sample(n_paths)
        drift_term = (RISK_FREE_RATE - 0.5 * daily_vol * daily_vol) * delta_t
        shock_term = shock_scale * z
        paths[:, t] = paths[:, t - 1] * np.exp(drift_term + shock_term)

    paths.setflags(write=False)
    return paths


def _simulate_block(
    params: SimulationParameters,
    source: RandomNormalSource,
) -> np.ndarray:
    """Picklable worker for ProcessPoolExecutor."""
    return simulate_paths(params, source)


def _split_paths(path_count: int, blocks: int) -> list[int]:
    base, extra = divmod(path_count, blocks)
    return [base + (1 if i < extra else 0) for i in range(blocks)]


def simulate_paths_parallel(
    params: SimulationParameters,
    source: RandomNormalSource,
    max_workers: int,
) -> TrajectoryMatrix:
    """Simulate trajectories across worker processes.

    Trajectories are split into ``max_workers`` contiguous blocks; each block
    gets its own child stream from ``source.spawn`` so no generator is shared
    between processes. Blocks are stacked in submission order, which keeps
    the output reproducible for a fixed seed and worker count.
    """
    blocks = max(1, min(max_workers, params.path_count))
    sizes = _split_paths(params.path_count, blocks)
    children = source.spawn(blocks)
    block_params = [dataclasses.replace(params, path_count=size) for size in sizes]

    logger.debug(
        "GBM: simulating %d paths in %d blocks %s", params.path_count, blocks, sizes
    )

    with ProcessPoolExecutor(max_workers=blocks) as executor:
        parts = list(executor.map(_simulate_block, block_params, children))

    paths = np.vstack(parts)
    paths.setflags(write=False)
    return paths
