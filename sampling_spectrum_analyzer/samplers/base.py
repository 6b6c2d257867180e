from __future__ import annotations

from typing import Dict, List, Optional, Type

import numpy as np


class PointSampler:
    """Base class for 2D point samplers on the unit square.

    Subclasses set ``sample_type`` and implement :meth:`_generate`. Every call
    to :meth:`sample` returns a new ``(count, 2)`` float64 array; the only state
    shared between calls is the sampler's random generator.
    """

    sample_type: str = ""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def check_count(self, count: int) -> None:
        """Raise ValueError if this sampler cannot produce ``count`` points.

        Subclasses with an arity contract extend this; it is called for every
        configured count before a run writes any output.
        """
        if int(count) < 0:
            raise ValueError(f"count must be >= 0, got {count}")

    def sample(self, count: int) -> np.ndarray:
        self.check_count(count)
        n = int(count)
        if n == 0:
            return np.zeros((0, 2), dtype=np.float64)
        pts = np.asarray(self._generate(n), dtype=np.float64)
        if pts.shape != (n, 2):
            raise RuntimeError(f"{type(self).__name__} produced shape {pts.shape}, expected {(n, 2)}")
        return pts

    def _generate(self, n: int) -> np.ndarray:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed!r})"


_REGISTRY: Dict[str, Type[PointSampler]] = {}


def register_sampler(cls: Type[PointSampler]) -> Type[PointSampler]:
    """Class decorator to register a sampler by its ``sample_type``."""
    key = getattr(cls, "sample_type", None)
    if not key:
        raise ValueError(f"{cls.__name__} must define sample_type")
    _REGISTRY[key] = cls
    return cls


def create_sampler(name: str, seed: Optional[int] = None) -> PointSampler:
    cls = _REGISTRY.get(name)
    if cls is None:
        raise KeyError(f"No sampler registered for '{name}' (known: {', '.join(list_samplers())})")
    return cls(seed=seed)


def list_samplers() -> List[str]:
    return sorted(_REGISTRY.keys())
