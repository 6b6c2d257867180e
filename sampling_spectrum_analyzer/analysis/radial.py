"""Radial reduction of a square 2D power spectrum.

Cells are binned by the integer-truncated Euclidean distance from the grid
centre ``(R/2, R/2)``. Only distances ``0..R/2-1`` are kept, so the corners of
the spectrum never contribute.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd


class NonSquareSpectrumError(ValueError):
    """Raised when a radial reduction is requested on a non-square grid."""


@dataclass(frozen=True)
class RadialProfile:
    """Per-bin radial mean of a power spectrum.

    Attributes
    ----------
    bins:
        Bin index vector ``[0, 1, ..., R/2 - 1]``.
    mean_power:
        Mean power of the cells in each bin. Bins without cells hold ``0.0``.
    counts:
        Number of cells that contributed to each bin.
    """

    bins: np.ndarray
    mean_power: np.ndarray
    counts: np.ndarray

    @property
    def valid(self) -> np.ndarray:
        """Boolean mask of bins that received at least one cell."""
        return self.counts > 0

    def to_frame(self, edge_trim: int = 0) -> pd.DataFrame:
        """Tabulate the profile, dropping the ``edge_trim`` outermost bins."""
        edge_trim = int(edge_trim)
        if edge_trim < 0:
            raise ValueError(f"edge_trim must be >= 0, got {edge_trim}")
        n = max(len(self.bins) - edge_trim, 0)
        return pd.DataFrame(
            {
                "bin": self.bins[:n],
                "mean_power": self.mean_power[:n],
                "count": self.counts[:n],
            }
        )


def bin_means(sums: np.ndarray, counts: np.ndarray) -> np.ndarray:
    """Per-bin mean ``sums / counts``; bins with ``counts == 0`` are ``0.0``."""
    sums = np.asarray(sums, dtype=np.float64)
    counts = np.asarray(counts)
    mean = np.zeros(sums.shape, dtype=np.float64)
    np.divide(sums, counts, out=mean, where=counts > 0)
    return mean


def radial_mean_power(power: np.ndarray) -> RadialProfile:
    """Average a square power spectrum over concentric integer-distance bins.

    Parameters
    ----------
    power:
        Real array of shape ``(R, R)``.

    Returns
    -------
    RadialProfile
        ``R // 2`` bins.

    Raises
    ------
    NonSquareSpectrumError
        If ``power`` is not a square 2D array.
    """
    P = np.asarray(power, dtype=np.float64)
    if P.ndim != 2 or P.shape[0] != P.shape[1]:
        raise NonSquareSpectrumError(f"radial mean power requires a square 2D spectrum, got shape {P.shape}")

    R = P.shape[0]
    half = R // 2

    r = np.arange(R, dtype=np.float64)
    dy = (half - r)[:, None]
    dx = (half - r)[None, :]
    index = np.floor(np.sqrt(dx * dx + dy * dy)).astype(np.int64)

    keep = index <= half - 1
    idx = index[keep]
    hist = np.bincount(idx, weights=P[keep], minlength=half).astype(np.float64)
    counts = np.bincount(idx, minlength=half).astype(np.int64)

    return RadialProfile(bins=np.arange(half, dtype=int), mean_power=bin_means(hist, counts), counts=counts)
