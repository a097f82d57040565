"""
Request builder for the CLI.

Converts parsed command-line arguments to a validated SimulationRequest.
"""

import math
from argparse import Namespace
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from gofsim_core.exceptions import ConfigurationError


class TestKind(Enum):
    """Statistical test that drives sample generation."""

    KOLMOGOROV_SMIRNOV = "kolmogorov-smirnov"
    LILLIEFORS = "lilliefors"


@dataclass(frozen=True)
class TestStatistic:
    """Probability that the statistic is less than ``threshold``."""

    threshold: float


@dataclass(frozen=True)
class MakeDistribution:
    """The distribution of statistics in the simulation."""


ResultMode = Union[TestStatistic, MakeDistribution]


@dataclass(frozen=True)
class SimulationRequest:
    """Validated, immutable configuration for one run."""

    sample_size: int
    test_kind: TestKind
    result_mode: ResultMode
    iterations: Optional[int] = None
    random_seed: Optional[int] = None


def make_result_mode(
    test_statistic: Optional[float],
    make_distribution: bool
) -> ResultMode:
    """
    Collapse the two mutually exclusive selectors into a ResultMode.

    Args:
        test_statistic: Threshold for the "probability below threshold" mode
        make_distribution: Flag for the "produce distribution" mode

    Returns:
        TestStatistic(threshold) or MakeDistribution()

    Raises:
        ConfigurationError: If both selectors or neither are given
    """
    has_threshold = test_statistic is not None
    if has_threshold and make_distribution:
        raise ConfigurationError(
            "--test-statistic and --make-distribution are mutually exclusive"
        )
    if not has_threshold and not make_distribution:
        raise ConfigurationError(
            "one of --test-statistic or --make-distribution is required"
        )

    if has_threshold:
        return TestStatistic(_parse_threshold(test_statistic))
    return MakeDistribution()


def parse_test_kind(value: Union[str, TestKind]) -> TestKind:
    """
    Parse a test kind from its CLI spelling.

    Args:
        value: "kolmogorov-smirnov", "lilliefors", or a TestKind

    Returns:
        TestKind enum value
    """
    if isinstance(value, TestKind):
        return value
    try:
        return TestKind(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(kind.value for kind in TestKind)
        raise ConfigurationError(
            f"Unknown test '{value}' (choose from {choices})"
        ) from None


def build_request(args: Namespace) -> SimulationRequest:
    """
    Build a SimulationRequest from command-line arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        SimulationRequest with every field validated

    Raises:
        ConfigurationError: If any argument violates its constraint
    """
    sample_size = _positive_int(args.samples, "samples")

    iterations = None
    if args.iterations is not None:
        iterations = _positive_int(args.iterations, "--iterations")

    result_mode = make_result_mode(args.test_statistic, args.make_distribution)
    test_kind = parse_test_kind(args.test)

    random_seed = getattr(args, "seed", None)
    if random_seed is not None:
        random_seed = _non_negative_int(random_seed, "--seed")

    return SimulationRequest(
        sample_size=sample_size,
        test_kind=test_kind,
        result_mode=result_mode,
        iterations=iterations,
        random_seed=random_seed,
    )


def format_request_summary(request: SimulationRequest) -> str:
    """
    Format request summary for display.

    Args:
        request: SimulationRequest to summarize

    Returns:
        Formatted string summary
    """
    if isinstance(request.result_mode, TestStatistic):
        mode_desc = f"P(statistic < {request.result_mode.threshold})"
    else:
        mode_desc = "distribution of statistics"

    iterations_desc = (
        f"{request.iterations:,}" if request.iterations is not None else "default"
    )

    lines = [
        f"  Test: {request.test_kind.value}",
        f"  Sample size: {request.sample_size}",
        f"  Iterations: {iterations_desc}",
        f"  Result: {mode_desc}",
    ]

    if request.random_seed is not None:
        lines.append(f"  Random Seed: {request.random_seed}")

    return "\n".join(lines)


def _positive_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise ConfigurationError(f"{name} must be a positive integer, got {value}")
    return value


def _non_negative_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ConfigurationError(f"{name} must be non-negative, got {value}")
    return value


def _parse_threshold(value: object) -> float:
    try:
        threshold = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"--test-statistic must be a real number, got {value!r}"
        ) from None
    if not math.isfinite(threshold):
        raise ConfigurationError(
            f"--test-statistic must be finite, got {threshold}"
        )
    return threshold
