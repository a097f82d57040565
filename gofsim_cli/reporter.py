"""
Reporter for displaying and exporting simulation results.
"""

import sys
from pathlib import Path
from typing import Iterable, TextIO, Union

from gofsim_core.results import PValueResult, DistributionResult


SEPARATOR = "=" * 80


def format_pvalue(pvalue: float) -> str:
    """Format the probability line."""
    return f"pvalue = {pvalue!r}"


def format_distribution(values: Iterable[float]) -> str:
    """Format the full collection of statistics."""
    return repr([float(v) for v in values])


def render_result(
    result: Union[PValueResult, DistributionResult],
    stream: TextIO = sys.stdout
) -> None:
    """Write exactly one rendered result to ``stream``."""
    if isinstance(result, PValueResult):
        print(format_pvalue(result.pvalue), file=stream)
    elif isinstance(result, DistributionResult):
        print(format_distribution(result.statistics), file=stream)
    else:
        raise TypeError(f"Unsupported result type: {type(result).__name__}")


def print_summary(
    result: Union[PValueResult, DistributionResult],
    stream: TextIO = sys.stderr
) -> None:
    """Print a human-readable summary of the run."""
    print(SEPARATOR, file=stream)
    if isinstance(result, DistributionResult):
        print(result.get_summary_text(), file=stream)
    else:
        print("=== P-value Estimate ===", file=stream)
        print(f"Test: {result.test_name}", file=stream)
        print(f"Sample size: {result.sample_size}", file=stream)
        print(f"Iterations: {result.iterations:,}", file=stream)
        print(f"  P(statistic < {result.threshold}) = {result.pvalue:.4f}",
              file=stream)
    print(SEPARATOR, file=stream)


def export_to_csv(
    result: Union[PValueResult, DistributionResult],
    output_path: str,
    stream: TextIO = sys.stderr
) -> Path:
    """
    Export results to CSV file.

    Distribution results are written one row per iteration; p-value results
    as a single summary row.

    Args:
        result: Result to export
        output_path: Path to output CSV file
        stream: Where the export notice is printed

    Returns:
        Path of the written file
    """
    path = Path(output_path)
    result.to_csv(str(path))
    print(f"Results exported to: {path.absolute()}", file=stream)
    return path
