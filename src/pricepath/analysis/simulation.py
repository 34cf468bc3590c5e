"""Monte Carlo simulation orchestrator.

Runs the GBM path simulator, then derives per-step bands and the terminal
risk summary, and bundles everything into one immutable result.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any

import numpy as np

from pricepath.analysis.risk import RiskSummary, summarize_risk
from pricepath.analysis.sim_models import SimulationParameters
from pricepath.analysis.sim_models.gbm import simulate_paths, simulate_paths_parallel
from pricepath.analysis.sim_models.normal import RandomNormalSource
from pricepath.analysis.step_stats import StepStatistics, aggregate_steps

logger = logging.getLogger(__name__)


class SimulationError(RuntimeError):
    """The engine produced an unusable result (arithmetic fault, non-finite values)."""


@dataclass(frozen=True)
class SimulationResult:
    params: SimulationParameters
    trajectories: np.ndarray
    steps: StepStatistics
    risk: RiskSummary

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire layout used by the HTTP endpoint."""
        return {"simulaciones": self.trajectories.tolist(), **self.summary()}

    def summary(self) -> dict[str, Any]:
        """Everything except the trajectory matrix."""
        return {
            "promedio": self.steps.mean.tolist(),
            "percentil_5": self.steps.p5.tolist(),
            "percentil_95": self.steps.p95.tolist(),
            "precio_final_promedio": self.risk.terminal_mean,
            "precio_final_minimo": self.risk.terminal_min,
            "precio_final_maximo": self.risk.terminal_max,
            "var_95": self.risk.var_95,
            "var_percentaje": self.risk.var_percent,
        }


def run_simulation(
    params: SimulationParameters,
    source: RandomNormalSource | None = None,
    max_workers: int = 1,
) -> SimulationResult:
    """Run one full simulation for already-validated parameters.

    Args:
        params: Validated simulation parameters.
        source: Normal source for the shocks (default: fresh unseeded source).
        max_workers: Worker processes for path generation; 1 runs serially.

    Returns:
        SimulationResult with trajectories, step bands and risk summary.

    Raises:
        SimulationError: Floating-point fault or non-finite output.
    """
    if source is None:
        source = RandomNormalSource()

    started = time.perf_counter()

    try:
        with np.errstate(over="raise", invalid="raise", divide="raise"):
            if max_workers > 1:
                trajectories = simulate_paths_parallel(params, source, max_workers)
            else:
                trajectories = simulate_paths(params, source)
            steps = aggregate_steps(trajectories)
            risk = summarize_risk(trajectories, params.current_price)
    except FloatingPointError as e:
        raise SimulationError(f"Arithmetic fault during simulation: {e}") from e

    if not np.all(np.isfinite(trajectories)) or not np.all(trajectories > 0):
        raise SimulationError("Simulation produced non-finite or non-positive prices")

    logger.debug(
        "Simulation done: price=%.4f vol=%.2f%% days=%d paths=%d workers=%d in %.3fs",
        params.current_price,
        params.annual_volatility_pct,
        params.horizon_days,
        params.path_count,
        max_workers,
        time.perf_counter() - started,
    )

    return SimulationResult(
        params=params,
        trajectories=trajectories,
        steps=steps,
        risk=risk,
    )
