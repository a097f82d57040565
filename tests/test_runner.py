"""
Tests for the runner (generator selection, engine configuration, dispatch)
"""

import io
import ast

import pytest

from gofsim_core.distribution import NormalDistribution
from gofsim_core.samples import KSSample, LillieforsSample
from gofsim_core.simulation import DEFAULT_ITERATIONS
from gofsim_core.results import PValueResult, DistributionResult
from gofsim_core.exceptions import SampleSizeError
from gofsim_cli.request_builder import (
    SimulationRequest,
    TestKind as Kind,
    TestStatistic as ThresholdMode,
    MakeDistribution,
)
from gofsim_cli.runner import (
    select_sample,
    configure_engine,
    run_request,
    dispatch,
    make_progress_printer,
)


def make_request(**overrides) -> SimulationRequest:
    """テスト用リクエストを作成"""
    values = {
        "sample_size": 20,
        "test_kind": Kind.KOLMOGOROV_SMIRNOV,
        "result_mode": ThresholdMode(0.2),
        "iterations": 100,
        "random_seed": 42,
    }
    values.update(overrides)
    return SimulationRequest(**values)


class TestSelectSample:
    """標本生成器の選択テスト"""

    def test_kolmogorov_smirnov(self) -> None:
        sample = select_sample(Kind.KOLMOGOROV_SMIRNOV, 30)
        assert isinstance(sample, KSSample)
        assert sample.sample_size == 30
        assert sample.distribution == NormalDistribution.standard()

    def test_lilliefors(self) -> None:
        sample = select_sample(Kind.LILLIEFORS, 30)
        assert isinstance(sample, LillieforsSample)
        assert sample.sample_size == 30

    def test_custom_reference(self) -> None:
        reference = NormalDistribution(5.0, 2.0)
        sample = select_sample(Kind.KOLMOGOROV_SMIRNOV, 10, reference)
        assert sample.distribution is reference

    def test_construction_error_propagates(self) -> None:
        """構築エラーはそのまま伝播"""
        with pytest.raises(SampleSizeError):
            select_sample(Kind.LILLIEFORS, 1)


class TestConfigureEngine:
    """試行数の上書きテスト"""

    def test_default_kept(self) -> None:
        engine = configure_engine(select_sample(Kind.KOLMOGOROV_SMIRNOV, 10))
        assert engine.iterations == DEFAULT_ITERATIONS

    def test_override(self) -> None:
        engine = configure_engine(
            select_sample(Kind.KOLMOGOROV_SMIRNOV, 10), iterations=37
        )
        assert engine.iterations == 37


class TestRunRequest:
    """run_requestのテスト"""

    def test_pvalue_mode(self) -> None:
        result = run_request(make_request())

        assert isinstance(result, PValueResult)
        assert result.iterations == 100
        assert result.threshold == 0.2
        assert 0.0 <= result.pvalue <= 1.0
        assert result.test_name == "Kolmogorov-Smirnov"

    @pytest.mark.parametrize("test_kind", list(Kind))
    def test_distribution_size_equals_override(self, test_kind: Kind) -> None:
        """分布の要素数は上書きした試行数と一致"""
        result = run_request(make_request(
            test_kind=test_kind,
            result_mode=MakeDistribution(),
            iterations=64,
        ))

        assert isinstance(result, DistributionResult)
        assert result.iterations == 64
        assert len(result.statistics) == 64

    def test_pvalue_override_precedence(self) -> None:
        """p値モードでも上書きした試行数を使用"""
        result = run_request(make_request(iterations=7))
        assert result.iterations == 7
        # 7試行の割合は k/7 の形
        assert abs(result.pvalue * 7 - round(result.pvalue * 7)) < 1e-9

    def test_reproducible(self) -> None:
        request = make_request(result_mode=MakeDistribution(), iterations=20)
        assert run_request(request) == run_request(request)

    def test_construction_error_before_iteration(self) -> None:
        """構築エラーは試行開始前に発生"""
        calls = []
        with pytest.raises(SampleSizeError):
            run_request(
                make_request(test_kind=Kind.LILLIEFORS, sample_size=1),
                progress_callback=lambda current, total: calls.append(current),
            )
        assert calls == []


class TestDispatch:
    """dispatchの出力テスト"""

    def test_pvalue_single_line(self) -> None:
        """p値モードは1行のみ出力"""
        stream = io.StringIO()
        result = dispatch(make_request(), stream)

        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert lines[0] == f"pvalue = {result.pvalue!r}"

    def test_distribution_output(self) -> None:
        """分布モードは統計量のリストを出力"""
        stream = io.StringIO()
        result = dispatch(
            make_request(result_mode=MakeDistribution(), iterations=25), stream
        )

        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        values = ast.literal_eval(lines[0])
        assert len(values) == 25
        assert values == result.statistics
        assert not lines[0].startswith("pvalue")


class TestProgressPrinter:
    """進捗表示のテスト"""

    def test_progress_bar(self) -> None:
        stream = io.StringIO()
        printer = make_progress_printer(stream)
        printer(0, 4)
        printer(4, 4)

        output = stream.getvalue()
        assert "(0/4)" in output
        assert "100.0%" in output
        assert output.endswith("\n")
