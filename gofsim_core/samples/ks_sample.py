"""
Kolmogorov-Smirnov sample

参照分布を固定したままKS統計量を計算する
"""

import numpy as np
from numpy.typing import NDArray

from .base import BaseSample, ks_statistic


class KSSample(BaseSample):
    """Kolmogorov-Smirnov検定用の標本生成器"""

    name = "Kolmogorov-Smirnov"
    min_sample_size = 1

    def statistic(self, data: NDArray[np.float64]) -> float:
        return ks_statistic(data, self.distribution.cdf)
