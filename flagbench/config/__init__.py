"""Configuration Module

Default values live in defaults.yaml; everything else reads them through
this package.

Usage:
    from flagbench.config import create_default_config, load_config

    config = create_default_config()
    config = config.with_overrides(target_iterations=30, memory=False)

    # Or overlay a user file on the defaults
    config = load_config("my_benchmark.yaml")

Import Policy:
    DO NOT use: from flagbench.config import *

Submodules:
    enums: OutlierMode, TimeUnit
    yaml_loader: YAML defaults access (get_default, get_defaults)
    benchmark_config: Configuration dataclasses
    validation: validate_config, warn_if_unreliable
"""

from flagbench.config.enums import OutlierMode, TimeUnit
# Import YAML loader functions first (no circular dependencies)
from flagbench.config.yaml_loader import get_default, get_defaults, reload_defaults
from flagbench.config.benchmark_config import (
    BenchmarkConfig,
    DiagnosticsConfig,
    JobConfig,
    OutputConfig,
    StatisticsConfig,
    create_default_config,
    load_config,
)
from flagbench.config.validation import (
    ConfigurationError,
    ConfigurationWarning,
    validate_config,
    warn_if_unreliable,
)


__all__ = [
    # Enums
    "OutlierMode",
    "TimeUnit",
    # Config classes
    "BenchmarkConfig",
    "JobConfig",
    "StatisticsConfig",
    "DiagnosticsConfig",
    "OutputConfig",
    # Factory functions
    "create_default_config",
    "load_config",
    # Validation
    "ConfigurationError",
    "ConfigurationWarning",
    "validate_config",
    "warn_if_unreliable",
    # YAML defaults access
    "get_default",
    "get_defaults",
    "reload_defaults",
]
