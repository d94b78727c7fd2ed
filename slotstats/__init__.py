"""Descriptive statistics (count, mean, spread, nearest-rank percentiles)."""

from .stats import (
    PERCENTILES,
    EmptyInput,
    Summary,
    compute_summary,
    percentile_index,
    render_summary,
)

__all__ = [
    "PERCENTILES",
    "EmptyInput",
    "Summary",
    "compute_summary",
    "percentile_index",
    "render_summary",
]
