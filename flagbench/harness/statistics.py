"""Descriptive statistics over timing samples.

Samples are per-operation times in nanoseconds, one per measured
iteration. The Error column is the half-width of the two-sided Student-t
confidence interval of the mean.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Sequence, Tuple

import numpy as np
from scipy import stats as sp_stats

from flagbench.config.enums import OutlierMode

# Tukey fence multiplier on the interquartile range
TUKEY_K = 1.5


def tukey_fences(values: np.ndarray, k: float = TUKEY_K) -> Tuple[float, float]:
    """Return the (lower, upper) Tukey fences of ``values``."""
    q1, q3 = np.percentile(values, [25, 75])
    iqr = q3 - q1
    return float(q1 - k * iqr), float(q3 + k * iqr)


def remove_outliers(values: np.ndarray, mode: OutlierMode) -> np.ndarray:
    """Drop samples outside the Tukey fences according to ``mode``.

    The median always lies within the fences, so the result is never empty
    for non-empty input.
    """
    if mode is OutlierMode.DONT_REMOVE or values.size < 4:
        return values

    lower, upper = tukey_fences(values)
    if mode is OutlierMode.REMOVE_UPPER:
        return values[values <= upper]
    return values[(values >= lower) & (values <= upper)]


@dataclass
class Statistics:
    """Summary statistics of one case's timing samples [ns].

    Attributes:
        n: Samples used after outlier removal
        mean: Mean time per operation
        std_dev: Sample standard deviation (ddof=1)
        std_err: Standard error of the mean
        error: Half-width of the confidence interval of the mean
        confidence_level: Level of the interval, e.g. 0.999
        median, min, max, q1, q3, p95: Order statistics
        outliers_removed: Samples dropped as outliers
    """
    n: int
    mean: float
    std_dev: float
    std_err: float
    error: float
    confidence_level: float
    median: float
    min: float
    max: float
    q1: float
    q3: float
    p95: float
    outliers_removed: int

    @classmethod
    def from_samples(
        cls,
        samples_ns: Sequence[float],
        confidence_level: float = 0.999,
        outlier_mode: OutlierMode = OutlierMode.REMOVE_UPPER,
    ) -> "Statistics":
        """Compute statistics from per-operation samples.

        A single sample has zero spread and zero error.

        Raises:
            ValueError: If ``samples_ns`` is empty
        """
        values = np.asarray(samples_ns, dtype=np.float64)
        if values.size == 0:
            raise ValueError("Cannot compute statistics of an empty sample")

        kept = remove_outliers(values, outlier_mode)
        n = int(kept.size)
        mean = float(np.mean(kept))

        if n > 1:
            std_dev = float(np.std(kept, ddof=1))
            std_err = std_dev / math.sqrt(n)
            t_crit = float(sp_stats.t.ppf((1.0 + confidence_level) / 2.0, df=n - 1))
            error = t_crit * std_err
        else:
            std_dev = std_err = error = 0.0

        q1, median, q3, p95 = np.percentile(kept, [25, 50, 75, 95])

        return cls(
            n=n,
            mean=mean,
            std_dev=std_dev,
            std_err=std_err,
            error=error,
            confidence_level=confidence_level,
            median=float(median),
            min=float(np.min(kept)),
            max=float(np.max(kept)),
            q1=float(q1),
            q3=float(q3),
            p95=float(p95),
            outliers_removed=int(values.size - n),
        )

    @property
    def confidence_interval(self) -> Tuple[float, float]:
        return self.mean - self.error, self.mean + self.error

    def to_dict(self) -> dict:
        return asdict(self)
