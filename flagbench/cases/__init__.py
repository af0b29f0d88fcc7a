"""Benchmark cases and the registry that collects them.

Submodules:
    registry: @benchmark decorator, BenchmarkCase, collect_cases, filter_cases
    enum_has_flags: Native vs custom flag containment cases
"""

from flagbench.cases.enum_has_flags import SUBJECT, EnumHasFlags
from flagbench.cases.registry import (
    BenchmarkCase,
    BenchmarkError,
    benchmark,
    collect_cases,
    filter_cases,
)

# Case classes run when no explicit source is given
ALL_CASE_CLASSES = [EnumHasFlags]

__all__ = [
    "ALL_CASE_CLASSES",
    "SUBJECT",
    "EnumHasFlags",
    "BenchmarkCase",
    "BenchmarkError",
    "benchmark",
    "collect_cases",
    "filter_cases",
]
