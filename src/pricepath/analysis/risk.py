"""Terminal-price risk analysis module.

Pure computation functions for terminal price statistics and Value-at-Risk.
No I/O - operates on the trajectory matrix passed as argument.
"""

import logging
from dataclasses import dataclass

import numpy as np

from pricepath.analysis.step_stats import mean, percentile

logger = logging.getLogger(__name__)

VAR_PERCENTILE = 5  # 95% confidence


@dataclass(frozen=True)
class RiskSummary:
    terminal_mean: float
    terminal_min: float
    terminal_max: float
    var_95: float
    var_percent: float


def summarize_risk(matrix: np.ndarray, current_price: float) -> RiskSummary:
    """Compute terminal price statistics and 95% Value-at-Risk.

    VaR is taken from the empirical 5th percentile of terminal relative
    returns ``(S_T - S_0) / S_0``:

        var_95      = S_0 * |p5|     (currency units, never negative)
        var_percent = p5 * 100       (signed, negative means loss)

    Args:
        matrix: Trajectories of shape (path_count, horizon_days + 1).
        current_price: Starting price S_0.

    Returns:
        RiskSummary for the terminal column.
    """
    terminal = matrix[:, -1]

    rel_returns = (terminal - current_price) / current_price
    p_risk = percentile(rel_returns, VAR_PERCENTILE)
    logger.debug("VaR: p%d terminal return %.6f over %d paths", VAR_PERCENTILE, p_risk, len(terminal))

    return RiskSummary(
        terminal_mean=mean(terminal),
        terminal_min=float(np.min(terminal)),
        terminal_max=float(np.max(terminal)),
        var_95=float(current_price * abs(p_risk)),
        var_percent=float(p_risk * 100),
    )
