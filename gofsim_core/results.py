"""
Result data structures for the goodness-of-fit simulator

p値推定・統計量分布の結果
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

import pandas as pd


@dataclass(frozen=True)
class PValueResult:
    """統計量がしきい値未満となる確率の推定結果"""

    test_name: str                 # 検定名
    sample_size: int               # 1データセットの標本サイズ
    iterations: int                # 試行数
    threshold: float               # 統計量のしきい値
    pvalue: float                  # 推定確率（0〜1）

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        return {
            "test": self.test_name,
            "sample_size": self.sample_size,
            "iterations": self.iterations,
            "threshold": self.threshold,
            "pvalue": self.pvalue,
        }

    def to_dataframe(self) -> pd.DataFrame:
        """1行のDataFrameに変換"""
        return pd.DataFrame([self.to_dict()])

    def to_csv(self, path: str, index: bool = False) -> None:
        """結果をCSVに出力"""
        self.to_dataframe().to_csv(path, index=index)


@dataclass(frozen=True)
class DistributionResult:
    """全試行の統計量（経験分布）"""

    test_name: str
    sample_size: int
    statistics: List[float] = field(default_factory=list)

    @property
    def iterations(self) -> int:
        """試行数"""
        return len(self.statistics)

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        return {
            "test": self.test_name,
            "sample_size": self.sample_size,
            "iterations": self.iterations,
            "statistics": list(self.statistics),
        }

    def to_dataframe(self) -> pd.DataFrame:
        """
        結果をDataFrameに変換

        Returns:
            iteration, statistic 列を持つDataFrame
        """
        return pd.DataFrame({
            "iteration": range(self.iterations),
            "statistic": self.statistics,
        })

    def to_csv(self, path: str, index: bool = False) -> None:
        """
        結果をCSVに出力

        Args:
            path: 出力ファイルパス
            index: インデックスを出力するか
        """
        self.to_dataframe().to_csv(path, index=index)

    def compute_statistics(self) -> Dict[str, float]:
        """
        統計量の要約を計算

        Returns:
            median, mean, std, max, min を含む辞書
        """
        series = pd.Series(self.statistics, dtype=float)
        return {
            "median": float(series.median()),
            "mean": float(series.mean()),
            "std": float(series.std()),
            "max": float(series.max()),
            "min": float(series.min()),
        }

    def get_summary_text(self) -> str:
        """
        結果のサマリテキストを生成

        Returns:
            人間可読なサマリ文字列
        """
        stats = self.compute_statistics()
        lines = [
            "=== Statistic Distribution ===",
            f"Test: {self.test_name}",
            f"Sample size: {self.sample_size}",
            f"Iterations: {self.iterations:,}",
            f"  Median: {stats['median']:.4f}",
            f"  Mean:   {stats['mean']:.4f} +/- {stats['std']:.4f}",
            f"  Range:  [{stats['min']:.4f}, {stats['max']:.4f}]",
        ]
        return "\n".join(lines)
