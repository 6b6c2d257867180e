"""Command-line interface.

Example::

    python -m sampling_spectrum_analyzer --sampler jitter -n 256 1024 \\
        --trials 100 --tstep 10 --wstep 1.0 --out-dir results
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import textwrap
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from sampling_spectrum_analyzer.analysis.pipeline import check_run, run_analysis
from sampling_spectrum_analyzer.logging_config import setup_logging
from sampling_spectrum_analyzer.models.profile import SpectrumProfile
from sampling_spectrum_analyzer.samplers import create_sampler, list_samplers

logger = logging.getLogger(__name__)

PROFILE_FILENAME = "analysis_profile.json"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="python -m sampling_spectrum_analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Estimate the power spectrum of a 2D point sampler by direct Fourier
            summation, averaged over many trials, and write the mean spectrum
            image and its radial profile at regular trial intervals.
            """
        ),
    )
    p.add_argument("--sampler", default=None, choices=list_samplers(), help="Point sampler (default: random)")
    p.add_argument("-n", "--nsamples", type=int, nargs="+", default=None, help="Sample counts to analyse")
    p.add_argument("--trials", type=int, default=None, help="Trials per sample count")
    p.add_argument("--tstep", type=int, default=None, help="Write a snapshot every TSTEP trials (and at trial 1)")
    p.add_argument("--wstep", type=float, default=None, help="Frequency step between grid cells")
    p.add_argument("--resolution", type=int, default=None, help="Grid cells per axis (even, default 512)")
    p.add_argument("--seed", type=int, default=None, help="Sampler seed")
    p.add_argument("--workers", type=int, default=None, help="Worker threads for the transform")
    p.add_argument("--tile-size", type=int, default=None, help="Tile edge length for the transform (default 16)")
    p.add_argument("--edge-trim", type=int, default=None, help="Outer radial bins left out of the table (default 5)")
    p.add_argument("--profile", default=None, help="JSON profile to start from; other flags override it")
    p.add_argument("--out-dir", default=".", help="Output directory (default: current directory)")
    p.add_argument("--png", action="store_true", help="Also write PNG previews")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every trial")
    p.add_argument("--log-file", default=None, help="Also write the log to this file")
    return p


def profile_from_args(ns: argparse.Namespace) -> SpectrumProfile:
    overrides: Dict[str, Any] = {
        "sample_counts": ns.nsamples,
        "n_trials": ns.trials,
        "trial_step_out": ns.tstep,
        "frequency_step": ns.wstep,
        "resolution": ns.resolution,
        "sampler": ns.sampler,
        "seed": ns.seed,
        "max_workers": ns.workers,
        "tile_size": ns.tile_size,
        "edge_trim": ns.edge_trim,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}

    if ns.profile:
        base = SpectrumProfile.load_json(ns.profile)
        return dataclasses.replace(base, **overrides)

    missing = [flag for flag, key in (("--nsamples", "sample_counts"), ("--trials", "n_trials")) if key not in overrides]
    if missing:
        raise ValueError(f"Missing required option(s): {', '.join(missing)} (or pass --profile)")
    return SpectrumProfile(**overrides)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ns = build_parser().parse_args(list(argv) if argv is not None else None)
    setup_logging(logging.DEBUG if ns.verbose else logging.INFO, ns.log_file)

    try:
        profile = profile_from_args(ns)
        profile.validate()
        sampler = create_sampler(profile.sampler, seed=profile.seed)
        check_run(sampler, profile)
    except (ValueError, KeyError, TypeError, OSError) as e:
        logger.error("%s", e)
        return 2

    out_dir = Path(ns.out_dir)
    profile.save_json(out_dir / PROFILE_FILENAME)
    logger.info("Sampler %r, counts %s, %d trials", sampler, list(profile.sample_counts), profile.n_trials)

    run_analysis(sampler, profile, out_dir, png=bool(ns.png))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
