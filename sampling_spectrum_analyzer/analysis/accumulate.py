"""Running mean of power spectra over repeated trials."""

from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

logger = logging.getLogger(__name__)


def is_snapshot_trial(trial: int, trial_step_out: int) -> bool:
    """True on the first trial and on every multiple of ``trial_step_out``."""
    trial = int(trial)
    return trial == 1 or trial % int(trial_step_out) == 0


def snapshot_trials(n_trials: int, trial_step_out: int) -> List[int]:
    """All trial indices in ``1..n_trials`` at which a snapshot is emitted."""
    return [t for t in range(1, int(n_trials) + 1) if is_snapshot_trial(t, trial_step_out)]


class TrialAccumulator:
    """Unweighted running mean of per-trial power spectra for one sample count.

    The accumulator keeps the cell-wise sum of every spectrum added so far, so
    :meth:`mean` at trial ``T`` is exactly ``(P_1 + ... + P_T) / T``. A new
    accumulator is created for every sample count.
    """

    def __init__(self, shape: Tuple[int, ...], n_trials: int, trial_step_out: int = 1):
        n_trials = int(n_trials)
        trial_step_out = int(trial_step_out)
        if n_trials < 1:
            raise ValueError(f"n_trials must be >= 1, got {n_trials}")
        if trial_step_out < 1:
            raise ValueError(f"trial_step_out must be >= 1, got {trial_step_out}")

        self.shape = tuple(int(s) for s in shape)
        self.n_trials = n_trials
        self.trial_step_out = trial_step_out
        self.trial = 0
        self._sum = np.zeros(self.shape, dtype=np.float64)

    @property
    def finished(self) -> bool:
        return self.trial >= self.n_trials

    def add(self, power: np.ndarray) -> bool:
        """Fold one trial into the running sum.

        Returns
        -------
        bool
            True if a snapshot is due after this trial.
        """
        P = np.asarray(power, dtype=np.float64)
        if P.shape != self.shape:
            raise ValueError(f"power shape {P.shape} does not match accumulator shape {self.shape}")
        if self.finished:
            raise RuntimeError(f"accumulator already holds all {self.n_trials} trials")

        self._sum += P
        self.trial += 1
        return is_snapshot_trial(self.trial, self.trial_step_out)

    def mean(self) -> np.ndarray:
        """Mean power over the trials seen so far (new array)."""
        if self.trial == 0:
            raise RuntimeError("no trial has been accumulated yet")
        return self._sum / float(self.trial)
