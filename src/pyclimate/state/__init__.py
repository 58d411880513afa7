"""State/store layer.

This package is the single source of truth for how parsed observation
records are folded into per-state running statistics.
"""

from pyclimate.state.accumulator import RunningSum, StateAccumulator
from pyclimate.state.table import AggregationTable

__all__ = [
    "AggregationTable",
    "RunningSum",
    "StateAccumulator",
]
