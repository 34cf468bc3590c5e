"""Per-timestep statistics across simulated trajectories.

Pure computation functions - operate on arrays passed as arguments.
The percentile is the linear-interpolation estimator (Hyndman & Fan type 7):
rank ``pos = p/100 * (n - 1)`` in the sorted sample, interpolated between
the two neighbouring order statistics.
"""

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepStatistics:
    """Mean and 5th/95th percentile bands, one entry per timestep."""

    mean: np.ndarray
    p5: np.ndarray
    p95: np.ndarray


def mean(values: Sequence[float] | np.ndarray) -> float:
    """Arithmetic mean; NaN for an empty sample."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return math.nan
    # scale before summing so large prices cannot overflow the running total
    return float(np.sum(arr / arr.size))


def percentile(values: Sequence[float] | np.ndarray, p: float) -> float:
    """Linear-interpolation percentile of ``values`` at ``p`` in [0, 100].

    Returns NaN for an empty sample instead of raising.
    """
    arr = np.sort(np.asarray(values, dtype=np.float64))
    if arr.size == 0:
        return math.nan

    pos = (p / 100) * (arr.size - 1)
    lower = math.floor(pos)
    upper = math.ceil(pos)

    if lower == upper:
        return float(arr[lower])

    weight = pos - lower
    return float(arr[lower] * (1 - weight) + arr[upper] * weight)


def _column_percentile(sorted_matrix: np.ndarray, p: float) -> np.ndarray:
    """Same estimator as ``percentile`` applied to every column of a sorted matrix."""
    n = sorted_matrix.shape[0]
    if n == 0:
        return np.full(sorted_matrix.shape[1], np.nan)

    pos = (p / 100) * (n - 1)
    lower = math.floor(pos)
    upper = math.ceil(pos)

    if lower == upper:
        return sorted_matrix[lower].copy()

    weight = pos - lower
    return sorted_matrix[lower] * (1 - weight) + sorted_matrix[upper] * weight


def aggregate_steps(matrix: np.ndarray) -> StepStatistics:
    """Compute mean, p5 and p95 for each timestep column.

    Args:
        matrix: Trajectories of shape (path_count, horizon_days + 1).

    Returns:
        StepStatistics with three read-only arrays of length horizon_days + 1.
    """
    n_paths = matrix.shape[0]
    if n_paths == 0:
        means = np.full(matrix.shape[1], np.nan)
    else:
        means = np.sum(matrix / n_paths, axis=0)

    columns_sorted = np.sort(matrix, axis=0)
    p5 = _column_percentile(columns_sorted, 5)
    p95 = _column_percentile(columns_sorted, 95)

    for arr in (means, p5, p95):
        arr.setflags(write=False)

    logger.debug("Step stats: %d paths x %d steps", n_paths, matrix.shape[1])

    return StepStatistics(mean=means, p5=p5, p95=p95)
