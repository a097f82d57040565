"""
Base class for Samples in the goodness-of-fit simulator

標本生成器（Sample）の抽象基底クラスと検定統計量の計算
"""

from abc import ABC, abstractmethod
from typing import Callable, Protocol

import numpy as np
from numpy.typing import NDArray

from ..distribution import NormalDistribution
from ..exceptions import SampleSizeError


class SampleProtocol(Protocol):
    """Sampleが満たすべきインターフェース（静的型チェック用）"""

    sample_size: int

    def simulate_statistic(self, rng: np.random.Generator) -> float:
        """1回分の標本を生成し検定統計量を返す"""
        ...


def ks_statistic(
    data: NDArray[np.float64],
    cdf: Callable[[NDArray[np.float64]], NDArray[np.float64]]
) -> float:
    """
    両側Kolmogorov-Smirnov統計量 D を計算

    D = max_i max(i/n - F(x_(i)), F(x_(i)) - (i-1)/n)

    Args:
        data: 標本（ソート不要）
        cdf: 参照分布の累積分布関数

    Returns:
        統計量 D（0 <= D <= 1）
    """
    x = np.sort(np.asarray(data, dtype=float))
    n = len(x)
    if n == 0:
        raise ValueError("空の標本に対して統計量は計算できません")

    f = cdf(x)
    i = np.arange(1, n + 1)
    d_plus = np.max(i / n - f)
    d_minus = np.max(f - (i - 1) / n)
    return float(max(d_plus, d_minus))


class BaseSample(ABC):
    """
    Sample抽象基底クラス

    参照分布と標本サイズを保持し、1回の試行分の標本生成と統計量計算を行う。
    """

    # サブクラスで定義必須
    name: str = ""
    min_sample_size: int = 1

    def __init__(self, distribution: NormalDistribution, sample_size: int) -> None:
        """
        Args:
            distribution: 標本を生成する参照分布
            sample_size: 1データセットあたりの標本サイズ

        Raises:
            SampleSizeError: 標本サイズが min_sample_size 未満の場合
        """
        if sample_size < self.min_sample_size:
            raise SampleSizeError(sample_size, self.min_sample_size, self.name)

        self.distribution = distribution
        self.sample_size = sample_size

    def generate(self, rng: np.random.Generator) -> NDArray[np.float64]:
        """参照分布から1データセットを生成"""
        return self.distribution.sample(rng, self.sample_size)

    @abstractmethod
    def statistic(self, data: NDArray[np.float64]) -> float:
        """
        データセットの検定統計量を計算

        Args:
            data: generate() で生成した標本

        Returns:
            検定統計量
        """
        pass

    def simulate_statistic(self, rng: np.random.Generator) -> float:
        """1回の試行: 標本を生成して統計量を返す"""
        return self.statistic(self.generate(rng))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(distribution={self.distribution!r}, "
            f"sample_size={self.sample_size})"
        )
