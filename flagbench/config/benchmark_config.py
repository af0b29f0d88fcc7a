"""Benchmark Configuration

This module provides the configuration dataclasses for a benchmark run.
All harness parameters flow through ``BenchmarkConfig``; default values
come from defaults.yaml.

Import Policy:
    from flagbench.config.benchmark_config import BenchmarkConfig, JobConfig

DO NOT use: from flagbench.config.benchmark_config import *
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional

from flagbench.config.enums import OutlierMode, TimeUnit
from flagbench.config.yaml_loader import get_default, get_defaults, load_yaml_file


def _default(key_path: str):
    """Dataclass field whose default is read from defaults.yaml at construction."""
    return field(default_factory=lambda: get_default(key_path))


@dataclass
class JobConfig:
    """How each case is executed.

    Attributes:
        warmup_iterations: Iterations run and discarded before measuring
        target_iterations: Measured iterations (one sample each)
        invocations_per_iteration: Case calls per iteration
        subtract_overhead: Subtract the per-call cost of an empty callable
    """
    warmup_iterations: int = _default("job.warmup_iterations")
    target_iterations: int = _default("job.target_iterations")
    invocations_per_iteration: int = _default("job.invocations_per_iteration")
    subtract_overhead: bool = _default("job.subtract_overhead")

    def validate(self) -> list[str]:
        errors = []
        if self.warmup_iterations < 0:
            errors.append(f"warmup_iterations must be >= 0, got {self.warmup_iterations}")
        if self.target_iterations <= 0:
            errors.append(f"target_iterations must be > 0, got {self.target_iterations}")
        if self.invocations_per_iteration <= 0:
            errors.append(
                f"invocations_per_iteration must be > 0, got {self.invocations_per_iteration}"
            )
        return errors


@dataclass
class StatisticsConfig:
    """How timing samples are summarized."""
    confidence_level: float = _default("statistics.confidence_level")
    outlier_mode: OutlierMode = field(
        default_factory=lambda: OutlierMode(get_default("statistics.outlier_mode"))
    )

    def validate(self) -> list[str]:
        errors = []
        if not 0.0 < self.confidence_level < 1.0:
            errors.append(
                f"confidence_level must be in (0, 1), got {self.confidence_level}"
            )
        return errors


@dataclass
class DiagnosticsConfig:
    """Optional diagnostics run after timing.

    Attributes:
        memory: Enable the memory diagnoser (allocation and GC counts)
        memory_invocations: Calls traced by the memory diagnoser
    """
    memory: bool = _default("diagnostics.memory")
    memory_invocations: int = _default("diagnostics.memory_invocations")

    def validate(self) -> list[str]:
        errors = []
        if self.memory_invocations <= 0:
            errors.append(f"memory_invocations must be > 0, got {self.memory_invocations}")
        return errors


@dataclass
class OutputConfig:
    """Summary display and result export."""
    time_unit: TimeUnit = field(
        default_factory=lambda: TimeUnit(get_default("output.time_unit"))
    )
    artifacts_dir: Optional[Path] = None
    export_json: bool = _default("output.export_json")

    def validate(self) -> list[str]:
        errors = []
        if self.export_json and self.artifacts_dir is None:
            errors.append("export_json requires artifacts_dir to be set")
        return errors


@dataclass
class BenchmarkConfig:
    """Complete configuration of a benchmark run."""
    job: JobConfig = field(default_factory=JobConfig)
    statistics: StatisticsConfig = field(default_factory=StatisticsConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def validate(self) -> list[str]:
        """Validate every section.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        errors.extend(self.job.validate())
        errors.extend(self.statistics.validate())
        errors.extend(self.diagnostics.validate())
        errors.extend(self.output.validate())
        return errors

    def with_overrides(self, **overrides: Any) -> "BenchmarkConfig":
        """Return a copy with individual fields replaced.

        Keys are field names of any section (e.g. ``target_iterations=5``,
        ``memory=False``). ``None`` values are ignored so that unset
        command-line options can be passed straight through.

        Raises:
            KeyError: If a key is not a field of any section
        """
        sections = {
            "job": self.job,
            "statistics": self.statistics,
            "diagnostics": self.diagnostics,
            "output": self.output,
        }
        changes: dict[str, dict[str, Any]] = {name: {} for name in sections}

        for key, value in overrides.items():
            if value is None:
                continue
            for section_name, section in sections.items():
                if key in section.__dataclass_fields__:
                    changes[section_name][key] = value
                    break
            else:
                raise KeyError(f"Unknown configuration field: {key}")

        return BenchmarkConfig(**{
            name: replace(section, **changes[name]) if changes[name] else copy.copy(section)
            for name, section in sections.items()
        })

    def to_dict(self) -> dict:
        """Convert configuration to a YAML/JSON friendly dictionary."""
        return {
            "job": {
                "warmup_iterations": self.job.warmup_iterations,
                "target_iterations": self.job.target_iterations,
                "invocations_per_iteration": self.job.invocations_per_iteration,
                "subtract_overhead": self.job.subtract_overhead,
            },
            "statistics": {
                "confidence_level": self.statistics.confidence_level,
                "outlier_mode": self.statistics.outlier_mode.value,
            },
            "diagnostics": {
                "memory": self.diagnostics.memory,
                "memory_invocations": self.diagnostics.memory_invocations,
            },
            "output": {
                "time_unit": self.output.time_unit.value,
                "artifacts_dir": str(self.output.artifacts_dir) if self.output.artifacts_dir else None,
                "export_json": self.output.export_json,
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BenchmarkConfig":
        """Create configuration from a dictionary.

        Missing sections and keys fall back to defaults.yaml.

        Args:
            data: Dictionary with optional job/statistics/diagnostics/output sections

        Returns:
            BenchmarkConfig instance

        Raises:
            KeyError: If a section or key is not a configuration field
        """
        merged = _merge_sections(get_defaults(), data)

        job_data = merged.get("job", {})
        statistics_data = merged.get("statistics", {})
        diagnostics_data = merged.get("diagnostics", {})
        output_data = merged.get("output", {})

        artifacts_dir = output_data.get("artifacts_dir")

        return cls(
            job=JobConfig(
                warmup_iterations=int(job_data["warmup_iterations"]),
                target_iterations=int(job_data["target_iterations"]),
                invocations_per_iteration=int(job_data["invocations_per_iteration"]),
                subtract_overhead=bool(job_data["subtract_overhead"]),
            ),
            statistics=StatisticsConfig(
                confidence_level=float(statistics_data["confidence_level"]),
                outlier_mode=OutlierMode(statistics_data["outlier_mode"]),
            ),
            diagnostics=DiagnosticsConfig(
                memory=bool(diagnostics_data["memory"]),
                memory_invocations=int(diagnostics_data["memory_invocations"]),
            ),
            output=OutputConfig(
                time_unit=TimeUnit(output_data["time_unit"]),
                artifacts_dir=Path(artifacts_dir) if artifacts_dir else None,
                export_json=bool(output_data["export_json"]),
            ),
        )


_SECTION_TYPES = {
    "job": JobConfig,
    "statistics": StatisticsConfig,
    "diagnostics": DiagnosticsConfig,
    "output": OutputConfig,
}


def _merge_sections(base: dict, overlay: dict) -> dict:
    """Overlay section dictionaries key by key onto a copy of ``base``.

    Raises:
        KeyError: If ``overlay`` names a section or key no config section has
    """
    merged = copy.deepcopy(base)
    for section, values in overlay.items():
        if section not in _SECTION_TYPES:
            raise KeyError(f"Unknown configuration section: {section}")
        if isinstance(values, dict):
            fields = _SECTION_TYPES[section].__dataclass_fields__
            for key in values:
                if key not in fields:
                    raise KeyError(f"Unknown configuration key: {section}.{key}")
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        else:
            merged[section] = values
    return merged


def create_default_config() -> BenchmarkConfig:
    """Create a default benchmark configuration.

    Raises:
        ValueError: If defaults.yaml holds an invalid configuration
    """
    config = BenchmarkConfig()
    errors = config.validate()

    if errors:
        raise ValueError("Default configuration is invalid:\n" + "\n".join(errors))

    return config


def load_config(path: Path) -> BenchmarkConfig:
    """Load a user configuration file overlaying defaults.yaml.

    Args:
        path: YAML file with any subset of the default sections

    Returns:
        BenchmarkConfig (not yet validated)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file content is malformed
    """
    data = load_yaml_file(Path(path))
    try:
        return BenchmarkConfig.from_dict(data)
    except (KeyError, TypeError) as e:
        raise ValueError(f"{path}: malformed configuration: {e}") from e
