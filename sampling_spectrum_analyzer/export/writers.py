"""Snapshot writers: grayscale power image and radial profile table.

File naming follows::

    power-<sampler>-n<count>-<trial>.tiff
    power-radial-mean-<sampler>-n<count>-<trial>.txt

with the trial index zero-padded to the number of digits of ``n_trials`` so
that snapshots sort lexically.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image

from sampling_spectrum_analyzer.analysis.radial import RadialProfile
from sampling_spectrum_analyzer.models.results import SpectrumSnapshot

logger = logging.getLogger(__name__)

# Outer radial bins dropped from the written table (boundary artifacts).
DEFAULT_EDGE_TRIM = 5

RADIAL_FLOAT_FORMAT = "%.15f"


@dataclass(frozen=True)
class SnapshotPaths:
    image: Path
    radial: Path
    image_png: Optional[Path] = None
    radial_png: Optional[Path] = None


def pad_trial_index(trial: int, n_trials: int) -> str:
    """Zero-pad ``trial`` to the digit count of ``n_trials``.

    Examples
    --------
    >>> pad_trial_index(7, 1000)
    '0007'
    >>> pad_trial_index(12, 9)
    '12'
    """
    width = len(str(int(n_trials)))
    return str(int(trial)).zfill(width)


def snapshot_stem(sampler_type: str, n_points: int, trial: int, n_trials: int) -> str:
    return f"{sampler_type}-n{int(n_points)}-{pad_trial_index(trial, n_trials)}"


def write_power_image(path: str | Path, power: np.ndarray) -> Path:
    """Write a 2D power spectrum as a 32-bit float grayscale TIFF (row 0 on top)."""
    P = np.asarray(power)
    if P.ndim != 2:
        raise ValueError(f"power must be 2D, got shape {P.shape}")
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(np.ascontiguousarray(P, dtype=np.float32)).save(out, format="TIFF")
    return out


def read_power_image(path: str | Path) -> np.ndarray:
    with Image.open(path) as im:
        return np.asarray(im, dtype=np.float32).copy()


def write_radial_profile(path: str | Path, radial: RadialProfile, *, edge_trim: int = DEFAULT_EDGE_TRIM) -> Path:
    """Write ``<bin> <mean_power>`` lines, omitting the ``edge_trim`` outer bins."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    table = radial.to_frame(edge_trim=edge_trim)[["bin", "mean_power"]]
    table.to_csv(out, sep=" ", header=False, index=False, float_format=RADIAL_FLOAT_FORMAT)
    return out


def write_snapshot(
    snapshot: SpectrumSnapshot,
    out_dir: str | Path,
    *,
    edge_trim: int = DEFAULT_EDGE_TRIM,
    png: bool = False,
) -> SnapshotPaths:
    """Persist one snapshot (image + radial table, optionally PNG previews)."""
    out = Path(out_dir)
    stem = snapshot_stem(snapshot.sampler_type, snapshot.n_points, snapshot.trial, snapshot.n_trials)

    image = write_power_image(out / f"power-{stem}.tiff", snapshot.mean_power)
    radial = write_radial_profile(out / f"power-radial-mean-{stem}.txt", snapshot.radial, edge_trim=edge_trim)

    image_png = radial_png = None
    if png:
        # matplotlib is only needed for previews
        from .plots import save_power_png, save_radial_png

        image_png = save_power_png(out / f"power-{stem}.png", snapshot.mean_power)
        radial_png = save_radial_png(
            out / f"power-radial-mean-{stem}.png",
            snapshot.radial,
            edge_trim=edge_trim,
            title=f"{snapshot.sampler_type}, n={snapshot.n_points}, trial {snapshot.trial}/{snapshot.n_trials}",
        )

    logger.info("Wrote %s and %s", image.name, radial.name)
    return SnapshotPaths(image=image, radial=radial, image_png=image_png, radial_png=radial_png)
