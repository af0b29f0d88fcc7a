"""
Configuration Enums for flagbench

This module defines the enumeration types used in benchmark configuration.

Import Policy:
    from flagbench.config.enums import OutlierMode, TimeUnit

DO NOT use: from flagbench.config.enums import *
"""

from enum import Enum


class OutlierMode(Enum):
    """Which timing samples are dropped before computing statistics.

    Options:
        DONT_REMOVE: Keep every sample
        REMOVE_UPPER: Drop samples above the upper Tukey fence (default)
        REMOVE_ALL: Drop samples outside either Tukey fence

    Note:
        Upper outliers are usually scheduler or GC noise; lower outliers
        are rare for micro-benchmarks, so only the upper side is trimmed
        by default.
    """
    DONT_REMOVE = "dont_remove"
    REMOVE_UPPER = "remove_upper"
    REMOVE_ALL = "remove_all"


class TimeUnit(Enum):
    """Time unit of the summary table.

    AUTO picks the largest unit in which the fastest case mean is >= 1.
    """
    AUTO = "auto"
    NANOSECONDS = "ns"
    MICROSECONDS = "us"
    MILLISECONDS = "ms"
    SECONDS = "s"

    @property
    def scale_ns(self) -> float:
        """Nanoseconds per unit (AUTO has no fixed scale)."""
        return _SCALE_NS[self]


_SCALE_NS = {
    TimeUnit.AUTO: float("nan"),
    TimeUnit.NANOSECONDS: 1.0,
    TimeUnit.MICROSECONDS: 1e3,
    TimeUnit.MILLISECONDS: 1e6,
    TimeUnit.SECONDS: 1e9,
}
