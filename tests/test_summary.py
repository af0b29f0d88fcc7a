"""Tests for results, ratios and the summary table."""

import json

import pytest

from flagbench.config import TimeUnit
from flagbench.harness.diagnostics import MemoryStats
from flagbench.harness.statistics import Statistics
from flagbench.harness.summary import (
    CaseResult,
    Summary,
    assign_ratios,
    format_bytes,
    format_time,
)


def make_result(name, mean_ns, category="true", baseline=False, memory=None):
    """CaseResult with constant samples at ``mean_ns``."""
    samples = [mean_ns] * 5
    return CaseResult(
        name=name,
        owner="EnumHasFlags",
        category=category,
        baseline=baseline,
        description=None,
        statistics=Statistics.from_samples(samples),
        samples_ns=samples,
        overhead_ns=0.0,
        result=False,
        memory=memory,
    )


@pytest.fixture
def results():
    return [
        make_result("native_has_flags_true", 200.0, "true", baseline=True),
        make_result("native_has_flags_false", 180.0, "false", baseline=True),
        make_result("custom_has_flags_true", 50.0, "true"),
        make_result("custom_has_flags_false", 45.0, "false"),
    ]


@pytest.fixture
def summary(results, fast_config):
    assign_ratios(results)
    return Summary(
        title="EnumHasFlags",
        environment={"python": "CPython 3.12.0", "os": "Linux"},
        config=fast_config.with_overrides(memory=False),
        results=results,
    )


class TestAssignRatios:
    """Tests for baseline ratios."""

    def test_ratios(self, results):
        """Test ratios are relative to the category baseline."""
        assign_ratios(results)
        by_name = {r.name: r for r in results}

        assert by_name["native_has_flags_true"].ratio == pytest.approx(1.0)
        assert by_name["native_has_flags_false"].ratio == pytest.approx(1.0)
        assert by_name["custom_has_flags_true"].ratio == pytest.approx(0.25)
        assert by_name["custom_has_flags_false"].ratio == pytest.approx(0.25)

    def test_no_baseline(self):
        """Test results without a baseline have no ratio."""
        results = [make_result("a", 10.0, category="x"), make_result("b", 20.0, category="x")]
        assign_ratios(results)
        assert all(r.ratio is None for r in results)

    def test_zero_baseline_mean(self):
        """Test a zero baseline mean gives no ratio."""
        results = [
            make_result("base", 0.0, category="x", baseline=True),
            make_result("other", 5.0, category="x"),
        ]
        assign_ratios(results)
        assert all(r.ratio is None for r in results)


class TestFormatting:
    """Tests for value formatting."""

    def test_format_time(self):
        """Test times are scaled to the unit."""
        assert format_time(1500.0, TimeUnit.MICROSECONDS) == "1.5000 us"
        assert format_time(12.5, TimeUnit.NANOSECONDS) == "12.5000 ns"

    @pytest.mark.parametrize("n_bytes, expected", [
        (0, "-"),
        (24, "24 B"),
        (2048, "2.00 KB"),
        (3 * 1024**2, "3.00 MB"),
    ])
    def test_format_bytes(self, n_bytes, expected):
        """Test allocation sizes pick a readable unit."""
        assert format_bytes(n_bytes) == expected


class TestSummary:
    """Tests for Summary."""

    def test_get(self, summary):
        """Test lookup by short and full name."""
        assert summary.get("custom_has_flags_true").statistics.mean == pytest.approx(50.0)
        assert summary.get("EnumHasFlags.native_has_flags_false").baseline

    def test_get_missing(self, summary):
        """Test unknown names raise KeyError."""
        with pytest.raises(KeyError):
            summary.get("missing")

    def test_auto_time_unit(self, summary):
        """Test AUTO picks nanoseconds for sub-microsecond cases."""
        assert summary.resolve_time_unit() is TimeUnit.NANOSECONDS

    def test_auto_time_unit_microseconds(self, fast_config):
        """Test AUTO picks microseconds when every case takes over 1 us."""
        summary = Summary(
            title="slow",
            environment={},
            config=fast_config,
            results=[make_result("slow", 5000.0)],
        )
        assert summary.resolve_time_unit() is TimeUnit.MICROSECONDS

    def test_fixed_time_unit(self, summary):
        """Test a configured unit is used as-is."""
        summary.config = summary.config.with_overrides(time_unit=TimeUnit.MILLISECONDS)
        assert summary.resolve_time_unit() is TimeUnit.MILLISECONDS

    def test_table_without_memory(self, summary):
        """Test the table lists every case and omits memory columns."""
        table = summary.format_table()

        for column in ("Method", "Mean", "Error", "StdDev", "Median", "Ratio", "Result"):
            assert column in table.splitlines()[0]
        assert "Allocated" not in table
        for r in summary.results:
            assert r.name in table
        assert "0.25" in table
        assert "1 ns" in table

    def test_table_with_memory(self, results, fast_config):
        """Test memory columns appear when diagnostics are enabled."""
        memory = MemoryStats(
            allocated_bytes_per_op=48.0,
            gen0_per_1000=0.0,
            gen1_per_1000=0.0,
            gen2_per_1000=0.0,
            invocations=10,
        )
        results[0].memory = memory
        summary = Summary(title="t", environment={}, config=fast_config, results=results)

        table = summary.format_table()

        assert "Gen0" in table
        assert "Allocated" in table
        assert "48 B" in table

    def test_table_rows_aligned(self, summary):
        """Test every table row has the same width."""
        rows = [line for line in summary.format_table().splitlines() if line.startswith("|")]
        assert len(rows) == 2 + len(summary.results)
        assert len({len(row) for row in rows}) == 1

    def test_report(self, summary):
        """Test the report has a title and environment header."""
        report = summary.format_report()
        assert "BENCHMARK SUMMARY: EnumHasFlags" in report
        assert "CPython 3.12.0" in report
        assert "IterationCount=5" in report

    def test_to_dict_is_json_serializable(self, summary):
        """Test the export dictionary survives json.dumps."""
        data = json.loads(json.dumps(summary.to_dict()))

        assert data["title"] == "EnumHasFlags"
        assert data["time_unit"] == "ns"
        assert len(data["results"]) == 4
        assert data["results"][2]["ratio"] == pytest.approx(0.25)
        assert data["config"]["job"]["target_iterations"] == 5
