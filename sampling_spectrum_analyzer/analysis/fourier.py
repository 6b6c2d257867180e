"""Continuous Fourier transform of 2D point sets.

The point set is treated as a sum of Dirac impulses and its transform is
evaluated by direct summation on a square frequency lattice. No fast transform
is used: sample points are not on a regular grid.

Functions
---------
continuous_fourier_spectrum
    Complex spectrum of a point set on a :class:`FrequencyGrid`.
power_spectrum
    Periodogram ``|F|^2 / N`` of a complex spectrum.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * np.pi


@dataclass(frozen=True)
class FrequencyGrid:
    """Square frequency lattice centred on the zero frequency.

    Attributes
    ----------
    resolution:
        Number of cells per axis ``R``. Must be a positive even integer so that
        the zero frequency sits on cell ``(R/2, R/2)``.
    step:
        Frequency increment ``delta`` between neighbouring cells. Controls the
        Nyquist range of the resulting spectrum.
    """

    resolution: int = 512
    step: float = 1.0

    def __post_init__(self) -> None:
        R = int(self.resolution)
        if R <= 0 or R % 2 != 0:
            raise ValueError(f"resolution must be a positive even integer, got {self.resolution}")
        if not (np.isfinite(self.step) and self.step > 0):
            raise ValueError(f"step must be > 0, got {self.step}")

    @property
    def half(self) -> int:
        return int(self.resolution) // 2

    @property
    def shape(self) -> Tuple[int, int]:
        R = int(self.resolution)
        return (R, R)

    @property
    def wx(self) -> np.ndarray:
        """Frequencies along columns, ``(col - R/2) * step``."""
        return (np.arange(self.resolution, dtype=np.float64) - self.half) * float(self.step)

    @property
    def wy(self) -> np.ndarray:
        """Frequencies along rows, ``(row - R/2) * step``."""
        return (np.arange(self.resolution, dtype=np.float64) - self.half) * float(self.step)


def _as_points(points) -> np.ndarray:
    pts = np.asarray(points, dtype=np.float64)
    if pts.size == 0:
        return np.zeros((0, 2), dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"points must have shape (N, 2), got {pts.shape}")
    if not np.all(np.isfinite(pts)):
        raise ValueError("points contain non-finite coordinates")
    return pts


def _tiles(n_rows: int, n_cols: int, tile_size: int) -> List[Tuple[slice, slice]]:
    return [
        (slice(r0, min(r0 + tile_size, n_rows)), slice(c0, min(c0 + tile_size, n_cols)))
        for r0 in range(0, n_rows, tile_size)
        for c0 in range(0, n_cols, tile_size)
    ]


def _fill_tile(
    out: np.ndarray,
    rows: slice,
    cols: slice,
    wx: np.ndarray,
    wy: np.ndarray,
    pts: np.ndarray,
    point_chunk: int,
) -> None:
    # Writes only out[rows, cols]; tiles never overlap.
    wy_t = wy[rows][:, None, None]
    wx_t = wx[cols][None, :, None]
    re = np.zeros((wy_t.shape[0], wx_t.shape[1]), dtype=np.float64)
    im = np.zeros_like(re)
    for p0 in range(0, pts.shape[0], point_chunk):
        x = pts[p0:p0 + point_chunk, 0][None, None, :]
        y = pts[p0:p0 + point_chunk, 1][None, None, :]
        arg = -TWO_PI * (wx_t * x + wy_t * y)
        re += np.cos(arg).sum(axis=2)
        im += np.sin(arg).sum(axis=2)
    out[rows, cols] = re + 1j * im


def continuous_fourier_spectrum(
    points,
    grid: FrequencyGrid,
    *,
    tile_size: int = 16,
    max_workers: Optional[int] = None,
    point_chunk: int = 4096,
) -> np.ndarray:
    r"""Direct continuous Fourier transform of a point set.

    Parameters
    ----------
    points:
        Array-like of shape ``(N, 2)`` holding ``(x, y)`` coordinates. An empty
        input is accepted and yields an all-zero spectrum.
    grid:
        Frequency lattice on which the transform is evaluated.
    tile_size:
        Edge length of the square tiles handed to the worker pool.
    max_workers:
        Upper bound on worker threads. ``None`` uses the executor default.
    point_chunk:
        Number of points summed per vectorised block, bounds temporary memory
        to ``tile_size**2 * point_chunk`` doubles per worker.

    Returns
    -------
    np.ndarray
        Complex array of shape ``(R, R)``. Cell ``(row, col)`` holds

        .. math::

            \sum_i \exp\left(-2\pi j (w_x x_i + w_y y_i)\right)

        with ``w_x = (col - R/2) * step`` and ``w_y = (row - R/2) * step``.
    """
    tile_size = int(tile_size)
    if tile_size < 1:
        raise ValueError(f"tile_size must be >= 1, got {tile_size}")
    if max_workers is not None and int(max_workers) < 1:
        raise ValueError(f"max_workers must be >= 1 or None, got {max_workers}")
    point_chunk = int(point_chunk)
    if point_chunk < 1:
        raise ValueError(f"point_chunk must be >= 1, got {point_chunk}")

    pts = _as_points(points).view()
    pts.setflags(write=False)

    R = int(grid.resolution)
    out = np.zeros((R, R), dtype=np.complex128)
    if pts.shape[0] == 0:
        return out

    wx = grid.wx
    wy = grid.wy
    tiles = _tiles(R, R, tile_size)
    logger.debug(
        "Transforming %d points on a %dx%d grid (%d tiles, step=%g)",
        pts.shape[0], R, R, len(tiles), grid.step,
    )

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(_fill_tile, out, rows, cols, wx, wy, pts, point_chunk)
            for rows, cols in tiles
        ]
        for future in futures:
            future.result()

    return out


def power_spectrum(spectrum: np.ndarray, n_points: int) -> np.ndarray:
    """Normalised periodogram ``(real**2 + imag**2) / n_points``.

    ``n_points == 0`` is the empty point set: the result is all zeros instead of
    a division by zero.
    """
    F = np.asarray(spectrum)
    n = int(n_points)
    if n < 0:
        raise ValueError(f"n_points must be >= 0, got {n_points}")
    if n == 0:
        return np.zeros(F.shape, dtype=np.float64)
    return (F.real.astype(np.float64) ** 2 + F.imag.astype(np.float64) ** 2) / float(n)
