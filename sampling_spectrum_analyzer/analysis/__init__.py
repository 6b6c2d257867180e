"""Spectral analysis package.

Design principle:
  - Samplers produce fresh ``(N, 2)`` point arrays, one per trial.
  - Analysis consumes point arrays and produces spectra and radial profiles.

All per-trial arrays are allocated by the function that fills them; nothing
carries over between trials except the running sum held by
:class:`~sampling_spectrum_analyzer.analysis.accumulate.TrialAccumulator`.

The trial driver lives in :mod:`sampling_spectrum_analyzer.analysis.pipeline`.
"""

from .fourier import FrequencyGrid, continuous_fourier_spectrum, power_spectrum
from .accumulate import TrialAccumulator, is_snapshot_trial, snapshot_trials
from .radial import NonSquareSpectrumError, RadialProfile, bin_means, radial_mean_power

__all__ = [
    "FrequencyGrid",
    "continuous_fourier_spectrum",
    "power_spectrum",
    "TrialAccumulator",
    "is_snapshot_trial",
    "snapshot_trials",
    "NonSquareSpectrumError",
    "RadialProfile",
    "bin_means",
    "radial_mean_power",
]
