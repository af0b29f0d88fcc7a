"""Benchmark results and the console summary table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from flagbench.config.benchmark_config import BenchmarkConfig
from flagbench.config.enums import TimeUnit
from flagbench.harness.diagnostics import MemoryStats
from flagbench.harness.statistics import Statistics

# Units tried by TimeUnit.AUTO, largest first
_AUTO_UNITS = [
    TimeUnit.SECONDS,
    TimeUnit.MILLISECONDS,
    TimeUnit.MICROSECONDS,
    TimeUnit.NANOSECONDS,
]

_LEGEND = {
    "Mean": "Arithmetic mean of all measurements",
    "Error": "Half of {level} confidence interval",
    "StdDev": "Standard deviation of all measurements",
    "Median": "Value separating the higher half of all measurements (50th percentile)",
    "Ratio": "Mean of this case / mean of the baseline case of its category",
    "Gen0": "GC generation 0 collections per 1000 operations",
    "Allocated": "Traced memory allocated per single operation",
    "Result": "Return value of the case",
}


@dataclass
class CaseResult:
    """Measurements of one benchmark case.

    Attributes:
        name, owner, category, baseline, description: Copied from the case
        statistics: Timing statistics [ns per operation]
        samples_ns: Raw per-operation samples, one per iteration
        overhead_ns: Per-call overhead subtracted from the samples
        result: Return value of one direct call
        memory: Memory diagnostics (None when disabled)
        ratio: Mean relative to the category baseline (None without one)
    """
    name: str
    owner: str
    category: Optional[str]
    baseline: bool
    description: Optional[str]
    statistics: Statistics
    samples_ns: List[float]
    overhead_ns: float
    result: Any
    memory: Optional[MemoryStats] = None
    ratio: Optional[float] = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}.{self.name}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "owner": self.owner,
            "full_name": self.full_name,
            "category": self.category,
            "baseline": self.baseline,
            "description": self.description,
            "statistics": self.statistics.to_dict(),
            "samples_ns": list(self.samples_ns),
            "overhead_ns": self.overhead_ns,
            "result": repr(self.result),
            "memory": self.memory.to_dict() if self.memory else None,
            "ratio": self.ratio,
        }


def assign_ratios(results: List[CaseResult]) -> None:
    """Set ``ratio`` of every result against its category baseline.

    Baselines are looked up per (owner, category). Results without a
    baseline, or whose baseline mean is zero, keep ``ratio = None``.
    """
    baselines = {
        (r.owner, r.category): r for r in results if r.baseline
    }
    for r in results:
        base = baselines.get((r.owner, r.category))
        if base is None or base.statistics.mean <= 0:
            r.ratio = None
        else:
            r.ratio = r.statistics.mean / base.statistics.mean


def format_time(value_ns: float, unit: TimeUnit) -> str:
    return f"{value_ns / unit.scale_ns:,.4f} {unit.value}"


def format_bytes(n_bytes: float) -> str:
    """Format a byte count the way the Allocated column shows it."""
    if n_bytes < 1:
        return "-"
    for suffix, scale in (("GB", 1024**3), ("MB", 1024**2), ("KB", 1024)):
        if n_bytes >= scale:
            return f"{n_bytes / scale:.2f} {suffix}"
    return f"{n_bytes:.0f} B"


@dataclass
class Summary:
    """Results of one harness run."""
    title: str
    environment: Dict[str, Any]
    config: BenchmarkConfig
    results: List[CaseResult] = field(default_factory=list)
    started_at: str = ""
    duration_sec: float = 0.0

    def get(self, name: str) -> CaseResult:
        """Find a result by full or short case name.

        Raises:
            KeyError: If no result matches
        """
        for r in self.results:
            if name in (r.full_name, r.name):
                return r
        raise KeyError(name)

    def resolve_time_unit(self) -> TimeUnit:
        unit = self.config.output.time_unit
        if unit is not TimeUnit.AUTO:
            return unit
        if not self.results:
            return TimeUnit.NANOSECONDS

        fastest = min(r.statistics.mean for r in self.results)
        for candidate in _AUTO_UNITS:
            if fastest >= candidate.scale_ns:
                return candidate
        return TimeUnit.NANOSECONDS

    def _columns(self) -> List[str]:
        columns = ["Method", "Category", "Mean", "Error", "StdDev", "Median", "Ratio"]
        if self.config.diagnostics.memory:
            columns += ["Gen0", "Allocated"]
        columns.append("Result")
        return columns

    def _row(self, r: CaseResult, unit: TimeUnit) -> Dict[str, str]:
        s = r.statistics
        row = {
            "Method": r.name,
            "Category": r.category or "",
            "Mean": format_time(s.mean, unit),
            "Error": format_time(s.error, unit),
            "StdDev": format_time(s.std_dev, unit),
            "Median": format_time(s.median, unit),
            "Ratio": f"{r.ratio:.2f}" if r.ratio is not None else "?",
            "Result": str(r.result),
        }
        if r.memory is not None:
            row["Gen0"] = f"{r.memory.gen0_per_1000:.4f}" if r.memory.gen0_per_1000 > 0 else "-"
            row["Allocated"] = format_bytes(r.memory.allocated_bytes_per_op)
        else:
            row["Gen0"] = row["Allocated"] = "?"
        return row

    def format_environment(self) -> str:
        env = self.environment
        job = self.config.job
        lines = [
            f"{env.get('python', '?')}, {env.get('os', '?')}",
            f"{env.get('processor', '?')} ({env.get('machine', '?')}), "
            f"{env.get('cpu_count_physical', '?')} physical / "
            f"{env.get('cpu_count_logical', '?')} logical cores, "
            f"{env.get('total_memory_mb', '?')} MB RAM",
            f"Timer: {env.get('timer', '?')} "
            f"(resolution {env.get('timer_resolution_ns', float('nan')):.1f} ns)",
            f"Job: WarmupCount={job.warmup_iterations}, IterationCount={job.target_iterations}, "
            f"InvocationCount={job.invocations_per_iteration}, "
            f"SubtractOverhead={job.subtract_overhead}",
        ]
        return "\n".join(lines)

    def format_table(self) -> str:
        """Render the results as a markdown-style table with a legend."""
        unit = self.resolve_time_unit()
        columns = self._columns()
        rows = [self._row(r, unit) for r in self.results]

        right_aligned = set(columns) - {"Method", "Category", "Result"}
        widths = {
            c: max([len(c)] + [len(row[c]) for row in rows]) for c in columns
        }

        def render(cells: Dict[str, str]) -> str:
            parts = [
                cells[c].rjust(widths[c]) if c in right_aligned else cells[c].ljust(widths[c])
                for c in columns
            ]
            return "| " + " | ".join(parts) + " |"

        separator = "|" + "|".join(
            "-" * (widths[c] + 1) + (":" if c in right_aligned else "-") for c in columns
        ) + "|"

        lines = [render({c: c for c in columns}), separator]
        lines += [render(row) for row in rows]

        lines.append("")
        level = f"{self.config.statistics.confidence_level * 100:g}%"
        label_width = max(len(c) for c in columns)
        for c in columns:
            if c in _LEGEND:
                lines.append(f"  {c.ljust(label_width)} : {_LEGEND[c].format(level=level)}")
        lines.append(f"  {'1 ' + unit.value:<{label_width}} : 1 {_unit_name(unit)}")

        return "\n".join(lines)

    def format_report(self) -> str:
        """Environment header, table and legend as printed by the CLI."""
        bar = "=" * 70
        return "\n".join([
            bar,
            f"BENCHMARK SUMMARY: {self.title}",
            bar,
            self.format_environment(),
            "",
            self.format_table(),
            bar,
        ])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "started_at": self.started_at,
            "duration_sec": self.duration_sec,
            "environment": self.environment,
            "config": self.config.to_dict(),
            "time_unit": self.resolve_time_unit().value,
            "results": [r.to_dict() for r in self.results],
        }


def _unit_name(unit: TimeUnit) -> str:
    return {
        TimeUnit.NANOSECONDS: "Nanosecond (0.000000001 sec)",
        TimeUnit.MICROSECONDS: "Microsecond (0.000001 sec)",
        TimeUnit.MILLISECONDS: "Millisecond (0.001 sec)",
        TimeUnit.SECONDS: "Second",
    }[unit]
