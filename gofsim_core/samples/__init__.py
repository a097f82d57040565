"""
Samples for the goodness-of-fit simulator
"""

from .base import BaseSample, SampleProtocol, ks_statistic
from .ks_sample import KSSample
from .lilliefors_sample import LillieforsSample

__all__ = [
    "BaseSample",
    "SampleProtocol",
    "ks_statistic",
    "KSSample",
    "LillieforsSample",
]
