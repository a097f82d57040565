"""
Main entry point for the goodness-of-fit simulator CLI.

Usage:
    python -m gofsim_cli SAMPLES (--test-statistic T | --make-distribution) TEST

Example:
    python -m gofsim_cli 30 --test-statistic 0.5 kolmogorov-smirnov
    python -m gofsim_cli 50 --iterations 1000 --make-distribution lilliefors
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from gofsim_core.exceptions import (
    ConfigurationError,
    SampleConstructionError,
    GofSimulatorError,
)

from .request_builder import TestKind, build_request, format_request_summary
from .runner import run_request, make_progress_printer
from .reporter import export_to_csv, print_summary, render_result


def positive_int(value: str) -> int:
    """argparse type for positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {number}")
    return number


def non_negative_int(value: str) -> int:
    """argparse type for seeds."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {number}")
    return number


def check_output_path(output_path: str) -> None:
    """Reject an output path whose directory does not exist."""
    parent = Path(output_path).parent
    if not parent.is_dir():
        raise ConfigurationError(
            f"Output directory does not exist: {parent}"
        )


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="gofsim",
        description="Runs Monte-Carlo simulations of goodness-of-fit statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gofsim 30 --test-statistic 0.5 kolmogorov-smirnov
  gofsim 50 --iterations 1000 --make-distribution lilliefors
  gofsim 50 --make-distribution lilliefors --seed 42 --output stats.csv
        """
    )

    parser.add_argument(
        "samples",
        type=positive_int,
        help="The size of simulated datasets of Kolmogorov-Smirnov or Lilliefors test"
    )
    parser.add_argument(
        "--iterations",
        type=positive_int,
        default=None,
        help="Number of iterations of the simulation"
    )

    # Which result should be produced
    simulation_type = parser.add_mutually_exclusive_group(required=True)
    simulation_type.add_argument(
        "--test-statistic",
        type=float,
        default=None,
        metavar="THRESHOLD",
        help="Calculate the probability that the statistic is less than the given value"
    )
    simulation_type.add_argument(
        "--make-distribution",
        action="store_true",
        help="Output the distribution of statistics in the simulation"
    )

    parser.add_argument(
        "test",
        choices=[kind.value for kind in TestKind],
        help="The statistical test to be simulated"
    )

    parser.add_argument(
        "--seed",
        type=non_negative_int,
        default=None,
        help="Random seed for reproducibility"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output CSV file path"
    )

    # Output control
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed output on stderr"
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr"
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        request = build_request(args)
        if args.output:
            check_output_path(args.output)

        if args.verbose:
            print("Configuration:", file=sys.stderr)
            print(format_request_summary(request), file=sys.stderr)

        progress = make_progress_printer(sys.stderr) if args.progress else None
        result = run_request(request, progress_callback=progress)

        # stdout stays empty if the export fails
        if args.output:
            export_to_csv(result, args.output, sys.stderr)

        render_result(result, sys.stdout)

        if args.verbose:
            print_summary(result, sys.stderr)

        return 0

    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except SampleConstructionError as e:
        print(f"Construction error: {e}", file=sys.stderr)
        return 1
    except GofSimulatorError as e:
        print(f"Simulation error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
