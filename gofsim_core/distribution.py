"""
Reference distribution for goodness-of-fit simulations

検定の参照分布（正規分布）とパラメータ推定
"""

import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy import stats

from .exceptions import DistributionError


@dataclass(frozen=True)
class NormalDistribution:
    """正規分布（イミュータブル）"""

    mean: float = 0.0
    std_dev: float = 1.0

    # scipyのfrozen分布（post_initで初期化）
    _frozen: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """バリデーション"""
        if not (math.isfinite(self.mean) and math.isfinite(self.std_dev)):
            raise DistributionError(self.mean, self.std_dev)
        if self.std_dev <= 0.0:
            raise DistributionError(self.mean, self.std_dev)

        object.__setattr__(
            self, "_frozen", stats.norm(loc=self.mean, scale=self.std_dev)
        )

    @classmethod
    def standard(cls) -> "NormalDistribution":
        """標準正規分布 N(0, 1)"""
        return cls(0.0, 1.0)

    def cdf(self, x: NDArray[np.float64]) -> NDArray[np.float64]:
        """累積分布関数"""
        return self._frozen.cdf(x)

    def sample(self, rng: np.random.Generator, size: int) -> NDArray[np.float64]:
        """
        乱数標本を生成

        Args:
            rng: 乱数生成器
            size: 標本サイズ

        Returns:
            長さ size の標本
        """
        return rng.normal(loc=self.mean, scale=self.std_dev, size=size)

    @classmethod
    def fit(cls, data: NDArray[np.float64]) -> "NormalDistribution":
        """
        標本から平均・標準偏差を推定した正規分布を返す

        Args:
            data: 標本（長さ2以上）

        Returns:
            推定パラメータを持つ正規分布

        Raises:
            DistributionError: 推定した標準偏差が0（全要素が同値）の場合

        Note:
            標準偏差は不偏分散（ddof=1）の平方根を用いる
        """
        mean = float(np.mean(data))
        std_dev = float(np.std(data, ddof=1))
        return cls(mean, std_dev)
