from .base import PointSampler, create_sampler, list_samplers, register_sampler
from .point_samplers import JitterSampler, NRooksSampler, RandomSampler, RegularSampler

__all__ = [
    "PointSampler",
    "create_sampler",
    "list_samplers",
    "register_sampler",
    "JitterSampler",
    "NRooksSampler",
    "RandomSampler",
    "RegularSampler",
]
