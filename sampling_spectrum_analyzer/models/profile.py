"""Spectrum profile -- bundles all run-relevant configuration.

A SpectrumProfile groups every parameter that affects the analysis output
into one frozen dataclass.  It can be:

- Built from command-line arguments or a JSON file
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance
"""

from __future__ import annotations

import json
import math
import numbers
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from sampling_spectrum_analyzer.analysis.fourier import FrequencyGrid


def _is_int(v: Any) -> bool:
    return isinstance(v, numbers.Integral) and not isinstance(v, bool)


def _is_real(v: Any) -> bool:
    return isinstance(v, numbers.Real) and not isinstance(v, bool)


@dataclass(frozen=True)
class SpectrumProfile:
    """Frozen configuration for the full analysis run.

    Required fields
    ---------------
    sample_counts : tuple of int
        Point counts to analyse, one accumulator each.
    n_trials : int
        Independent realizations averaged per sample count.

    Optional fields (sensible defaults)
    ------------------------------------
    trial_step_out : int
        Snapshot interval. Snapshots are written at trial 1 and at every
        multiple of this value.
    frequency_step : float
        Frequency increment between neighbouring grid cells.
    resolution : int
        Grid cells per axis (even).
    sampler : str
        Registered sampler name.
    seed : int or None
        Seed for the sampler's random generator.
    tile_size : int
        Tile edge length for the parallel transform.
    max_workers : int or None
        Worker thread bound for the transform (None = executor default).
    edge_trim : int
        Outer radial bins omitted from the written profile table.
    """

    sample_counts: Tuple[int, ...]
    n_trials: int

    trial_step_out: int = 1
    frequency_step: float = 1.0
    resolution: int = 512
    sampler: str = "random"
    seed: Optional[int] = None

    tile_size: int = 16
    max_workers: Optional[int] = None
    edge_trim: int = 5

    def __post_init__(self) -> None:
        # Callers may pass a list
        if not isinstance(self.sample_counts, tuple):
            object.__setattr__(self, "sample_counts", tuple(self.sample_counts))

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def problems(self) -> List[str]:
        errors: List[str] = []
        if not self.sample_counts:
            errors.append("sample_counts is empty")
        bad = [n for n in self.sample_counts if not _is_int(n) or n < 0]
        if bad:
            errors.append(f"sample_counts must be integers >= 0, got {bad}")
        for name, low in (("n_trials", 1), ("trial_step_out", 1), ("tile_size", 1), ("edge_trim", 0)):
            v = getattr(self, name)
            if not _is_int(v) or v < low:
                errors.append(f"{name} must be an integer >= {low}, got {v!r}")
        if not _is_int(self.resolution) or self.resolution <= 0 or self.resolution % 2 != 0:
            errors.append(f"resolution must be a positive even integer, got {self.resolution!r}")
        if self.max_workers is not None and (not _is_int(self.max_workers) or self.max_workers < 1):
            errors.append(f"max_workers must be an integer >= 1, got {self.max_workers!r}")
        if self.seed is not None and not _is_int(self.seed):
            errors.append(f"seed must be an integer, got {self.seed!r}")
        if not _is_real(self.frequency_step) or not (math.isfinite(self.frequency_step) and self.frequency_step > 0):
            errors.append(f"frequency_step must be finite and > 0, got {self.frequency_step!r}")
        return errors

    def validate(self) -> None:
        """Raise ValueError listing every invalid field."""
        errors = self.problems()
        if errors:
            msg = "Invalid spectrum profile:\n" + "\n".join(f"- {e}" for e in errors)
            raise ValueError(msg)

    @property
    def grid(self) -> FrequencyGrid:
        return FrequencyGrid(resolution=int(self.resolution), step=float(self.frequency_step))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict (tuples become lists)."""
        d = asdict(self)
        d["sample_counts"] = list(d["sample_counts"])
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> SpectrumProfile:
        """Reconstruct from a dict (e.g. loaded from JSON)."""
        d = dict(d)  # shallow copy
        if "sample_counts" in d:
            d["sample_counts"] = tuple(d["sample_counts"])
        return cls(**d)

    def save_json(self, path: str | Path) -> Path:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        return out

    @classmethod
    def load_json(cls, path: str | Path) -> SpectrumProfile:
        return cls.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))
