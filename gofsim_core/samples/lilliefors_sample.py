"""
Lilliefors sample

各標本から正規分布のパラメータを推定し直してからKS統計量を計算する
"""

import numpy as np
from numpy.typing import NDArray

from ..distribution import NormalDistribution
from .base import BaseSample, ks_statistic


class LillieforsSample(BaseSample):
    """
    Lilliefors検定用の標本生成器

    標本は参照分布から生成するが、統計量は同じ標本から推定した
    正規分布（平均・標準偏差）に対して計算する。
    """

    name = "Lilliefors"
    # 標準偏差の推定に2点以上必要
    min_sample_size = 2

    def statistic(self, data: NDArray[np.float64]) -> float:
        fitted = NormalDistribution.fit(data)
        return ks_statistic(data, fitted.cdf)
