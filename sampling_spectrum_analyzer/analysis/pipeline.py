"""Trial loop: sample, transform, accumulate, reduce.

For each sample count a fresh :class:`TrialAccumulator` is created. Trials run
strictly one after another; only the transform inside a trial is parallel.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List

from sampling_spectrum_analyzer.analysis.accumulate import TrialAccumulator
from sampling_spectrum_analyzer.analysis.fourier import continuous_fourier_spectrum, power_spectrum
from sampling_spectrum_analyzer.analysis.radial import radial_mean_power
from sampling_spectrum_analyzer.export.writers import SnapshotPaths, write_snapshot
from sampling_spectrum_analyzer.models.profile import SpectrumProfile
from sampling_spectrum_analyzer.models.results import SpectrumSnapshot
from sampling_spectrum_analyzer.samplers.base import PointSampler

logger = logging.getLogger(__name__)


def check_run(sampler: PointSampler, profile: SpectrumProfile) -> None:
    """Raise ValueError if ``profile`` or any of its counts cannot be run with ``sampler``."""
    profile.validate()
    for n in profile.sample_counts:
        sampler.check_count(n)


def iter_snapshots(sampler: PointSampler, profile: SpectrumProfile) -> Iterator[SpectrumSnapshot]:
    """Yield a snapshot at every emission trial of every sample count.

    Parameters
    ----------
    sampler:
        Source of point sets. ``sampler.sample(n)`` is called once per trial.
    profile:
        Run configuration. Checked with :func:`check_run` before the first trial.
    """
    check_run(sampler, profile)
    grid = profile.grid
    sampler_type = sampler.sample_type or type(sampler).__name__

    for n in profile.sample_counts:
        n = int(n)
        acc = TrialAccumulator(grid.shape, profile.n_trials, profile.trial_step_out)
        logger.info("Sample count n=%d: %d trials on a %dx%d grid", n, profile.n_trials, *grid.shape)

        while not acc.finished:
            pts = sampler.sample(n)
            logger.debug("trial %d / %d : %d", acc.trial + 1, profile.n_trials, n)

            F = continuous_fourier_spectrum(
                pts,
                grid,
                tile_size=profile.tile_size,
                max_workers=profile.max_workers,
            )
            due = acc.add(power_spectrum(F, len(pts)))
            if not due:
                continue

            mean = acc.mean()
            yield SpectrumSnapshot(
                sampler_type=sampler_type,
                n_points=n,
                trial=acc.trial,
                n_trials=profile.n_trials,
                mean_power=mean,
                radial=radial_mean_power(mean),
            )


def run_analysis(
    sampler: PointSampler,
    profile: SpectrumProfile,
    out_dir: str | Path,
    *,
    png: bool = False,
) -> List[SnapshotPaths]:
    """Run the full trial matrix and write every snapshot to ``out_dir``.

    Returns the written paths in emission order.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    written: List[SnapshotPaths] = []
    for snap in iter_snapshots(sampler, profile):
        written.append(write_snapshot(snap, out, edge_trim=profile.edge_trim, png=png))
    logger.info("Done: %d snapshots written to %s", len(written), out)
    return written
