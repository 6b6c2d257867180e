from .profile import SpectrumProfile
from .results import SpectrumSnapshot

__all__ = [
    "SpectrumProfile",
    "SpectrumSnapshot",
]
