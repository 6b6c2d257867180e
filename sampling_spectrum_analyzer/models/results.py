from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from sampling_spectrum_analyzer.analysis.radial import RadialProfile


@dataclass(frozen=True)
class SpectrumSnapshot:
    """Mean power spectrum of one sample count after ``trial`` realizations.

    Attributes
    ----------
    sampler_type:
        Name of the sampler that produced the point sets.
    n_points:
        Points per realization.
    trial, n_trials:
        Trials averaged so far and trials planned for this sample count.
    mean_power:
        Running mean power spectrum, shape ``(R, R)``. Owned by the snapshot.
    radial:
        Radial profile of ``mean_power``.
    """

    sampler_type: str
    n_points: int
    trial: int
    n_trials: int

    mean_power: np.ndarray
    radial: RadialProfile

    @property
    def is_final(self) -> bool:
        return self.trial == self.n_trials
