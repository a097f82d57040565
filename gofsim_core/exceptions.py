"""
Exception classes for the goodness-of-fit simulator
"""


class GofSimulatorError(Exception):
    """シミュレータの基底例外クラス"""
    pass


class ConfigurationError(GofSimulatorError):
    """入力パラメータ・設定に関するエラー"""
    pass


class SampleConstructionError(GofSimulatorError):
    """標本生成器（Sample）の構築に関するエラー"""
    pass


class DistributionError(SampleConstructionError):
    """参照分布のパラメータが不正"""
    def __init__(self, mean: float, std_dev: float) -> None:
        self.mean = mean
        self.std_dev = std_dev
        super().__init__(
            f"正規分布のパラメータが不正です: mean={mean}, std_dev={std_dev}"
        )


class SampleSizeError(SampleConstructionError):
    """標本サイズが検定に対して小さすぎる"""
    def __init__(self, sample_size: int, minimum: int, test_name: str) -> None:
        self.sample_size = sample_size
        self.minimum = minimum
        self.test_name = test_name
        super().__init__(
            f"{test_name}の標本サイズは{minimum}以上である必要があります: {sample_size}"
        )


class SimulationError(GofSimulatorError):
    """シミュレーション実行時のエラー"""
    pass
