"""PNG previews of snapshots.

Figures are built with :class:`matplotlib.figure.Figure` directly so that no
GUI backend is needed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np
from matplotlib.figure import Figure

from sampling_spectrum_analyzer.analysis.radial import RadialProfile


def save_power_png(path: str | Path, power: np.ndarray, *, log_scale: bool = True, dpi: int = 100) -> Path:
    """Grayscale image of a power spectrum (log10 by default, zeros clipped)."""
    P = np.asarray(power, dtype=np.float64)
    if log_scale:
        positive = P[P > 0]
        floor = float(positive.min()) if positive.size else 1.0
        P = np.log10(np.maximum(P, floor))

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig = Figure(figsize=(5, 5))
    ax = fig.add_subplot(1, 1, 1)
    ax.imshow(P, cmap="gray", origin="upper", interpolation="nearest")
    ax.set_axis_off()
    fig.savefig(out, dpi=dpi, bbox_inches="tight")
    return out


def save_radial_png(
    path: str | Path,
    radial: RadialProfile,
    *,
    edge_trim: int = 0,
    title: Optional[str] = None,
    dpi: int = 100,
) -> Path:
    """Line plot of the radial mean power against bin index."""
    table = radial.to_frame(edge_trim=edge_trim)
    table = table[table["count"] > 0]

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig = Figure(figsize=(6, 4))
    ax = fig.add_subplot(1, 1, 1)
    ax.plot(table["bin"].to_numpy(), table["mean_power"].to_numpy(), lw=1.0)
    ax.axhline(1.0, color="0.6", lw=0.8, ls="--")
    ax.set_xlabel("radial frequency bin")
    ax.set_ylabel("mean power")
    if title:
        ax.set_title(title)
    ax.grid(True, alpha=0.3)
    fig.savefig(out, dpi=dpi, bbox_inches="tight")
    return out
