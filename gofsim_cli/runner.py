"""
Runner for executing a SimulationRequest against the Monte-Carlo engine.
"""

import sys
from typing import Callable, Optional, TextIO, Union

from gofsim_core.distribution import NormalDistribution
from gofsim_core.samples import BaseSample, KSSample, LillieforsSample
from gofsim_core.simulation import MonteCarloEngine
from gofsim_core.results import PValueResult, DistributionResult

from .request_builder import (
    SimulationRequest,
    TestKind,
    TestStatistic,
    MakeDistribution,
)
from .reporter import render_result


RunResult = Union[PValueResult, DistributionResult]


def select_sample(
    test_kind: TestKind,
    sample_size: int,
    reference: Optional[NormalDistribution] = None
) -> BaseSample:
    """
    Select the sample generator for a test kind.

    Args:
        test_kind: Which statistical test to simulate
        sample_size: Size of each simulated dataset
        reference: Reference distribution (default: standard normal)

    Returns:
        KSSample or LillieforsSample bound to the reference distribution

    Raises:
        SampleConstructionError: If the generator cannot be built
    """
    if reference is None:
        reference = NormalDistribution.standard()

    if test_kind is TestKind.KOLMOGOROV_SMIRNOV:
        return KSSample(reference, sample_size)
    if test_kind is TestKind.LILLIEFORS:
        return LillieforsSample(reference, sample_size)
    raise ValueError(f"Unknown test kind: {test_kind}")


def configure_engine(
    sample: BaseSample,
    iterations: Optional[int] = None,
    random_seed: Optional[int] = None,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> MonteCarloEngine:
    """
    Create the engine with its default iteration count, then apply the override.
    """
    engine = MonteCarloEngine(
        sample,
        random_seed=random_seed,
        progress_callback=progress_callback,
    )
    if iterations is not None:
        engine.iterations = iterations
    return engine


def run_request(
    request: SimulationRequest,
    reference: Optional[NormalDistribution] = None,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> RunResult:
    """
    Run one simulation request.

    Args:
        request: Validated simulation request
        reference: Reference distribution (default: standard normal)
        progress_callback: Optional callback for progress updates

    Returns:
        PValueResult for TestStatistic mode, DistributionResult for
        MakeDistribution mode
    """
    sample = select_sample(request.test_kind, request.sample_size, reference)
    engine = configure_engine(
        sample,
        iterations=request.iterations,
        random_seed=request.random_seed,
        progress_callback=progress_callback,
    )

    mode = request.result_mode
    if isinstance(mode, TestStatistic):
        pvalue = engine.simulate_pvalue(mode.threshold)
        return PValueResult(
            test_name=sample.name,
            sample_size=request.sample_size,
            iterations=engine.iterations,
            threshold=mode.threshold,
            pvalue=pvalue,
        )
    if isinstance(mode, MakeDistribution):
        statistics = engine.simulate_distribution()
        return DistributionResult(
            test_name=sample.name,
            sample_size=request.sample_size,
            statistics=statistics,
        )
    raise ValueError(f"Unknown result mode: {mode!r}")


def dispatch(
    request: SimulationRequest,
    stream: TextIO = sys.stdout,
    reference: Optional[NormalDistribution] = None,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> RunResult:
    """
    Run one simulation request and write its result to ``stream``.

    Returns:
        The result that was rendered
    """
    result = run_request(
        request,
        reference=reference,
        progress_callback=progress_callback,
    )
    render_result(result, stream)
    return result


def make_progress_printer(stream: TextIO = sys.stderr) -> Callable[[int, int], None]:
    """Progress bar callback writing to ``stream``."""
    def trial_progress(current: int, total: int) -> None:
        pct = current / total * 100
        bar_len = 30
        filled = int(bar_len * current / total)
        bar = "=" * filled + "-" * (bar_len - filled)
        print(f"\r  Progress: [{bar}] {pct:5.1f}% ({current}/{total})",
              end="", file=stream, flush=True)
        if current == total:
            print(file=stream)

    return trial_progress
