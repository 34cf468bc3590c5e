"""Standard normal draws via the Box-Muller transform."""

import math

import numpy as np


class RandomNormalSource:
    """Independent N(0,1) samples backed by a numpy Generator.

    The uniform stream comes from ``numpy.random.Generator.random`` which
    draws from [0, 1); a zero would make ``log(u)`` infinite, so zeros are
    re-drawn until a positive value comes out.

    Args:
        seed: Optional integer seed (or SeedSequence) for reproducible runs.
    """

    def __init__(self, seed: int | np.random.SeedSequence | None = None):
        if isinstance(seed, np.random.SeedSequence):
            self._seed_seq = seed
        else:
            self._seed_seq = np.random.SeedSequence(seed)
        self._rng = np.random.default_rng(self._seed_seq)

    def _uniform(self) -> float:
        u = 0.0
        while u == 0.0:
            u = float(self._rng.random())
        return u

    def next(self) -> float:
        """Return one standard normal sample."""
        u = self._uniform()
        v = self._uniform()
        return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)

    def sample(self, n: int) -> np.ndarray:
        """Return ``n`` standard normal samples in one vectorized draw.

        Uniform pairs are laid out as (u, v) per sample, the same order
        ``next`` consumes them.
        """
        uv = self._rng.random((n, 2))
        zeros = uv == 0.0
        while zeros.any():
            uv[zeros] = self._rng.random(int(zeros.sum()))
            zeros = uv == 0.0
        u = uv[:, 0]
        v = uv[:, 1]
        return np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)

    def spawn(self, n: int) -> list["RandomNormalSource"]:
        """Create ``n`` independent child sources for per-worker streams."""
        return [RandomNormalSource(child) for child in self._seed_seq.spawn(n)]

    def __repr__(self) -> str:
        return f"RandomNormalSource(entropy={self._seed_seq.entropy})"
