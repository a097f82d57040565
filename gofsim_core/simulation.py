"""
Monte-Carlo engine for the goodness-of-fit simulator

検定統計量のモンテカルロシミュレーション実行エンジン
"""

from typing import Callable, List

import numpy as np

from .exceptions import SimulationError
from .samples.base import SampleProtocol


DEFAULT_ITERATIONS = 10_000


class MonteCarloEngine:
    """モンテカルロシミュレーション実行エンジン"""

    def __init__(
        self,
        sample: SampleProtocol,
        iterations: int = DEFAULT_ITERATIONS,
        random_seed: int | None = None,
        progress_callback: Callable[[int, int], None] | None = None
    ) -> None:
        """
        Args:
            sample: 1試行分の統計量を生成する標本生成器
            iterations: 試行数（実行前であれば変更可能）
            random_seed: 再現性用シード（オプション）
            progress_callback: 進捗コールバック (current, total) -> None
        """
        self.sample = sample
        self.iterations = iterations
        self.random_seed = random_seed
        self.progress_callback = progress_callback

    def simulate_distribution(self) -> List[float]:
        """
        全試行の統計量を生成

        Returns:
            試行順に並んだ統計量のリスト（長さ iterations）
        """
        n_iterations = self._checked_iterations()
        rng = np.random.default_rng(self.random_seed)

        statistics: List[float] = []
        for iteration in range(n_iterations):
            if self.progress_callback:
                self.progress_callback(iteration, n_iterations)

            statistics.append(self.sample.simulate_statistic(rng))

        if self.progress_callback:
            self.progress_callback(n_iterations, n_iterations)

        return statistics

    def simulate_pvalue(self, threshold: float) -> float:
        """
        統計量が threshold 未満となる確率を推定

        Args:
            threshold: 統計量のしきい値

        Returns:
            経験的な確率（0〜1）
        """
        statistics = np.asarray(self.simulate_distribution())
        return float(np.mean(statistics < threshold))

    def _checked_iterations(self) -> int:
        """試行数のバリデーション"""
        if isinstance(self.iterations, bool) or not isinstance(
            self.iterations, (int, np.integer)
        ):
            raise SimulationError(
                f"試行数は整数である必要があります: {self.iterations!r}"
            )
        if self.iterations < 1:
            raise SimulationError(
                f"試行数は1以上である必要があります: {self.iterations}"
            )
        return int(self.iterations)
