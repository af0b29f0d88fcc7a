"""Measurement harness: runner, statistics, diagnostics, summary, export."""

from flagbench.cases.registry import BenchmarkError
from flagbench.harness.diagnostics import MemoryDiagnoser, MemoryStats, collect_environment
from flagbench.harness.exporters import export_json
from flagbench.harness.runner import BenchmarkRunner, time_iteration
from flagbench.harness.statistics import Statistics, remove_outliers, tukey_fences
from flagbench.harness.summary import CaseResult, Summary, assign_ratios

__all__ = [
    "BenchmarkError",
    "BenchmarkRunner",
    "time_iteration",
    "Statistics",
    "remove_outliers",
    "tukey_fences",
    "MemoryDiagnoser",
    "MemoryStats",
    "collect_environment",
    "CaseResult",
    "Summary",
    "assign_ratios",
    "export_json",
]
