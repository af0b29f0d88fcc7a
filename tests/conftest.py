"""Pytest configuration and shared fixtures for flagbench tests."""

import pytest

from flagbench.cases.registry import benchmark
from flagbench.config import (
    BenchmarkConfig,
    DiagnosticsConfig,
    JobConfig,
    OutputConfig,
    StatisticsConfig,
    OutlierMode,
    TimeUnit,
    reload_defaults,
)
from flagbench.harness import BenchmarkRunner


# Fixtures for configuration


@pytest.fixture
def fast_job():
    """Few short iterations, no overhead subtraction."""
    return JobConfig(
        warmup_iterations=1,
        target_iterations=5,
        invocations_per_iteration=200,
        subtract_overhead=False,
    )


@pytest.fixture
def fast_config(fast_job):
    """Fast configuration with memory diagnostics enabled."""
    return BenchmarkConfig(
        job=fast_job,
        statistics=StatisticsConfig(
            confidence_level=0.999,
            outlier_mode=OutlierMode.REMOVE_UPPER,
        ),
        diagnostics=DiagnosticsConfig(memory=True, memory_invocations=20),
        output=OutputConfig(time_unit=TimeUnit.AUTO, artifacts_dir=None, export_json=False),
    )


@pytest.fixture
def timing_only_config(fast_config):
    """Fast configuration without memory diagnostics."""
    return fast_config.with_overrides(memory=False)


@pytest.fixture
def runner(fast_config):
    """Runner with the fast configuration."""
    return BenchmarkRunner(fast_config)


@pytest.fixture
def clean_defaults():
    """Reload defaults.yaml before and after a test that changes it."""
    reload_defaults()
    yield
    reload_defaults()


# Fixtures for cases


class TinyCases:
    """Two cheap cases in one category plus an uncategorized one."""

    @benchmark(category="sum", baseline=True)
    def builtin_sum(self):
        return sum((1, 2, 3))

    @benchmark(category="sum")
    def manual_sum(self):
        return 1 + 2 + 3

    @benchmark
    def allocate_list(self):
        """Build a small list."""
        return len([0] * 64)


@pytest.fixture
def tiny_cases():
    """Small case class for harness tests."""
    return TinyCases
