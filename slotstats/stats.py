"""
Descriptive-stats summary for a batch of numeric samples.

Summary fields
--------------
count          – number of samples
mean           – arithmetic mean
std_dev        – sample standard deviation (ddof=1, 0 for < 2 samples)
variance       – sample variance (ddof=1, 0 for < 2 samples)
minimum        – smallest sample
maximum        – largest sample
percentile_NN  – nearest-rank percentile, NN ∈ 25 / 50 / 75 / 95 / 99

Percentiles are read straight out of the sorted copy at index
``(count * p) // 100`` – no interpolation, so don't swap in
``np.percentile`` here.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List

import numpy as np

PERCENTILES = (25, 50, 75, 95, 99)


class EmptyInput(ValueError):
    """Raised when a summary is requested for zero samples."""

    def __init__(self, message: str = "empty sample set"):
        super().__init__(message)


@dataclass(frozen=True)
class Summary:
    count: int
    mean: float
    std_dev: float
    variance: float
    minimum: float
    maximum: float
    percentile_25: float
    percentile_50: float
    percentile_75: float
    percentile_95: float
    percentile_99: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    def __str__(self) -> str:
        return render_summary(self)


def percentile_index(count: int, p: int) -> int:
    """Index of the *p*-th percentile in an ascending list of *count* items."""
    return (count * p) // 100


def _materialise(samples: Iterable[float]) -> List[float]:
    # np arrays / pandas Series → python floats, generators consumed once
    if isinstance(samples, (str, bytes)):
        raise TypeError(f"samples must be numbers, not {type(samples).__name__}")
    if isinstance(samples, np.ndarray):
        if samples.ndim > 1:
            raise ValueError(f"samples must be 1-D, got shape {samples.shape}")
        return samples.astype(float).ravel().tolist()
    return [float(v) for v in samples]


def compute_summary(samples: Iterable[float]) -> Summary:
    """
    Summarise *samples* in one accumulation pass plus one sort.

    The caller's sequence is never reordered: sorting happens on a private
    float64 copy.  Raises ``EmptyInput`` when there is nothing to summarise.

    Variance uses the one-pass identity
    ``(sum_sq - sum**2 / n) / (n - 1)``; results for huge magnitudes inherit
    its rounding behaviour.
    """
    values = _materialise(samples)
    n = len(values)
    if n == 0:
        raise EmptyInput()

    total = 0.0
    total_sq = 0.0
    for v in values:
        total += v
        total_sq += v * v

    variance = 0.0
    std_dev = 0.0
    if n > 1:
        entries = float(n)
        variance = (1 / (entries - 1)) * (total_sq - (1 / entries) * total * total)
        # rounding can push a zero-spread set slightly below 0
        if variance < 0:
            variance = 0.0
        std_dev = math.sqrt(variance)

    ordered = np.sort(np.array(values, dtype=float))

    return Summary(
        count=n,
        mean=total / n,
        std_dev=std_dev,
        variance=variance,
        minimum=float(ordered[0]),
        maximum=float(ordered[n - 1]),
        percentile_25=float(ordered[percentile_index(n, 25)]),
        percentile_50=float(ordered[percentile_index(n, 50)]),
        percentile_75=float(ordered[percentile_index(n, 75)]),
        percentile_95=float(ordered[percentile_index(n, 95)]),
        percentile_99=float(ordered[percentile_index(n, 99)]),
    )


def render_summary(summary: Summary, precision: int = 4) -> str:
    """Multi-line, human-readable dump of *summary* (for logs / CLI)."""
    f = f"{{:{precision + 2}.{precision}f}}"
    lines = [
        f"Entries  : {summary.count}",
        f"Mean     : {f.format(summary.mean)}",
        f"StdDev   : {f.format(summary.std_dev)}",
        f"Variance : {f.format(summary.variance)}",
        f"Minimum  : {f.format(summary.minimum)}",
        f"Maximum  : {f.format(summary.maximum)}",
        "Percentiles",
    ]
    for p in PERCENTILES:
        value = getattr(summary, f"percentile_{p}")
        lines.append(f"    {p}th : {f.format(value)}")
    return "\n".join(lines)
