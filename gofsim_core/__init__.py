"""
Goodness-of-fit Simulator Core Package

Kolmogorov-Smirnov検定・Lilliefors検定の統計量をモンテカルロ法で
シミュレーションするコアモジュール
"""

from .distribution import NormalDistribution
from .samples import BaseSample, KSSample, LillieforsSample, ks_statistic
from .simulation import MonteCarloEngine, DEFAULT_ITERATIONS
from .results import PValueResult, DistributionResult
from .exceptions import (
    GofSimulatorError,
    ConfigurationError,
    SampleConstructionError,
    DistributionError,
    SampleSizeError,
    SimulationError,
)

__version__ = "0.1.0"

__all__ = [
    # Distribution
    "NormalDistribution",
    # Samples
    "BaseSample",
    "KSSample",
    "LillieforsSample",
    "ks_statistic",
    # Engine
    "MonteCarloEngine",
    "DEFAULT_ITERATIONS",
    # Results
    "PValueResult",
    "DistributionResult",
    # Exceptions
    "GofSimulatorError",
    "ConfigurationError",
    "SampleConstructionError",
    "DistributionError",
    "SampleSizeError",
    "SimulationError",
]
