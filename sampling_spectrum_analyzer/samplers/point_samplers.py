"""Reference point samplers.

``jitter`` and ``regular`` stratify the unit square into ``k x k`` cells and
therefore only accept perfect-square counts. ``random`` and ``nrooks`` accept
any count.
"""

from __future__ import annotations

import math

import numpy as np

from .base import PointSampler, register_sampler


def _square_side(n: int, sample_type: str) -> int:
    k = math.isqrt(n)
    if k * k != n:
        raise ValueError(f"'{sample_type}' sampler needs a perfect-square count, got {n}")
    return k


def _cell_origins(k: int) -> np.ndarray:
    """Lower-left corners of a ``k x k`` grid on the unit square, row-major."""
    iy, ix = np.divmod(np.arange(k * k), k)
    return np.column_stack([ix, iy]).astype(np.float64) / k


class _SquareGridSampler(PointSampler):
    """Samplers built on a ``k x k`` stratification; ``count`` must equal ``k**2``."""

    def check_count(self, count: int) -> None:
        super().check_count(count)
        if int(count) > 0:
            _square_side(int(count), self.sample_type)


@register_sampler
class RandomSampler(PointSampler):
    """Independent uniform points (white noise)."""

    sample_type = "random"

    def _generate(self, n: int) -> np.ndarray:
        return self.rng.random((n, 2))


@register_sampler
class JitterSampler(_SquareGridSampler):
    """One uniform point in each cell of a ``k x k`` grid."""

    sample_type = "jitter"

    def _generate(self, n: int) -> np.ndarray:
        k = _square_side(n, self.sample_type)
        return _cell_origins(k) + self.rng.random((n, 2)) / k


@register_sampler
class NRooksSampler(PointSampler):
    """Latin hypercube: one point per row stratum and per column stratum."""

    sample_type = "nrooks"

    def _generate(self, n: int) -> np.ndarray:
        x = (self.rng.permutation(n) + self.rng.random(n)) / n
        y = (np.arange(n) + self.rng.random(n)) / n
        return np.column_stack([x, y])


@register_sampler
class RegularSampler(_SquareGridSampler):
    """Cell centres of a ``k x k`` grid. Deterministic."""

    sample_type = "regular"

    def _generate(self, n: int) -> np.ndarray:
        k = _square_side(n, self.sample_type)
        return _cell_origins(k) + 0.5 / k
