"""
CLI for the goodness-of-fit simulator

This module provides a command-line interface for estimating p-values and
statistic distributions of the Kolmogorov-Smirnov and Lilliefors tests
by Monte-Carlo simulation.
"""

__version__ = "0.1.0"
