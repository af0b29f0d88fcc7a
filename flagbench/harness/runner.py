"""Benchmark execution engine.

Each case is run in isolation, sequentially:

    1. gc.collect()
    2. warmup iterations (discarded)
    3. target iterations, each timing ``invocations_per_iteration`` calls
       with time.perf_counter_ns; one per-operation sample per iteration
    4. statistics over the samples, one direct call for the result value
    5. memory diagnostics (when enabled)

The per-call cost of an empty callable, timed with the same loop, is
subtracted from every sample when ``subtract_overhead`` is set.

Example:
    >>> from flagbench.cases import EnumHasFlags
    >>> runner = BenchmarkRunner()
    >>> summary = runner.run(EnumHasFlags)
    >>> print(summary.format_report())
"""

from __future__ import annotations

import gc
import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Sequence

import numpy as np

from flagbench.cases.registry import (
    BenchmarkCase,
    BenchmarkError,
    collect_cases,
    filter_cases,
)
from flagbench.config.benchmark_config import BenchmarkConfig, create_default_config
from flagbench.config.validation import ConfigurationError, validate_config
from flagbench.harness.diagnostics import MemoryDiagnoser, collect_environment
from flagbench.harness.exporters import export_json
from flagbench.harness.statistics import Statistics
from flagbench.harness.summary import CaseResult, Summary, assign_ratios

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "flagbench"


def _idle() -> None:
    return None


def time_iteration(func: Callable[[], Any], invocations: int) -> int:
    """Call ``func`` ``invocations`` times and return the elapsed nanoseconds."""
    loop = range(invocations)
    start = time.perf_counter_ns()
    for _ in loop:
        func()
    return time.perf_counter_ns() - start


class BenchmarkRunner:
    """Runs benchmark cases and collects a Summary.

    Args:
        config: Benchmark configuration (default: defaults.yaml)
    Raises:
        ConfigurationError: If the configuration is invalid or the
            artifacts directory cannot be created
    """

    def __init__(self, config: Optional[BenchmarkConfig] = None):
        self.config = config if config is not None else create_default_config()
        validate_config(self.config)

        if self.config.output.export_json:
            self._prepare_artifacts_dir(self.config.output.artifacts_dir)

        self.memory_diagnoser = MemoryDiagnoser() if self.config.diagnostics.memory else None

    @staticmethod
    def _prepare_artifacts_dir(artifacts_dir: Path) -> None:
        """Create the export directory before any case runs."""
        try:
            Path(artifacts_dir).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot use artifacts directory {artifacts_dir}: {e}"
            ) from e

    def _sample(self, func: Callable[[], Any], iterations: int) -> List[float]:
        """Per-operation times [ns] of ``iterations`` timed iterations."""
        invocations = self.config.job.invocations_per_iteration
        return [
            time_iteration(func, invocations) / invocations
            for _ in range(iterations)
        ]

    def measure_overhead(self) -> float:
        """Median per-call cost [ns] of an empty callable."""
        job = self.config.job
        self._sample(_idle, job.warmup_iterations)
        overhead = float(np.median(self._sample(_idle, job.target_iterations)))
        logger.debug(f"Call overhead: {overhead:.3f} ns/op")
        return overhead

    def run_case(self, case: BenchmarkCase, overhead_ns: float = 0.0) -> CaseResult:
        """Measure a single case.

        Args:
            case: Case to run
            overhead_ns: Per-call overhead subtracted from each sample

        Returns:
            CaseResult without a ratio (see ``assign_ratios``)
        """
        job = self.config.job
        stats_config = self.config.statistics

        logger.info(f"Running {case.full_name}")
        gc.collect()

        logger.debug(f"  Warmup: {job.warmup_iterations} iterations")
        self._sample(case.func, job.warmup_iterations)

        raw = self._sample(case.func, job.target_iterations)
        samples = [max(sample - overhead_ns, 0.0) for sample in raw]

        statistics = Statistics.from_samples(
            samples,
            confidence_level=stats_config.confidence_level,
            outlier_mode=stats_config.outlier_mode,
        )
        result = case.func()

        memory = None
        if self.memory_diagnoser is not None:
            memory = self.memory_diagnoser.measure(
                case.func, self.config.diagnostics.memory_invocations
            )

        logger.info(
            f"  {case.name}: {statistics.mean:.3f} ns/op "
            f"± {statistics.error:.3f} ns, result={result!r}"
        )

        return CaseResult(
            name=case.name,
            owner=case.owner,
            category=case.category,
            baseline=case.baseline,
            description=case.description,
            statistics=statistics,
            samples_ns=samples,
            overhead_ns=overhead_ns,
            result=result,
            memory=memory,
        )

    def run(
        self,
        source: Any,
        filters: Optional[Sequence[str]] = None,
        title: Optional[str] = None,
    ) -> Summary:
        """Run the cases of one case class (or iterable of cases)."""
        if title is None and isinstance(source, type):
            title = source.__name__
        return self.run_all([source], filters=filters, title=title)

    def run_all(
        self,
        sources: Iterable[Any],
        filters: Optional[Sequence[str]] = None,
        title: Optional[str] = None,
    ) -> Summary:
        """Run every selected case of several sources into one Summary.

        Args:
            sources: Case classes or iterables of BenchmarkCase
            filters: Glob patterns on case names (None runs everything)
            title: Summary title and export file prefix

        Raises:
            BenchmarkError: If a source has no cases or nothing matches
        """
        cases: List[BenchmarkCase] = []
        for source in sources:
            cases.extend(collect_cases(source))

        selected = filter_cases(cases, filters)
        if not selected:
            raise BenchmarkError(
                f"No benchmark cases selected (filters: {list(filters or [])}, "
                f"available: {[c.full_name for c in cases]})"
            )

        started_at = datetime.now().isoformat()
        total_start = time.perf_counter()
        logger.info(f"Running {len(selected)} benchmark case(s)")

        overhead = self.measure_overhead() if self.config.job.subtract_overhead else 0.0

        results = [self.run_case(case, overhead) for case in selected]
        assign_ratios(results)

        summary = Summary(
            title=title or DEFAULT_TITLE,
            environment=collect_environment(),
            config=self.config,
            results=results,
            started_at=started_at,
            duration_sec=time.perf_counter() - total_start,
        )

        output = self.config.output
        if output.export_json:
            export_json(summary, output.artifacts_dir)

        return summary
