"""flagbench - Enum Flag Containment Micro-Benchmark

Compares two ways of asking whether a bit-set value contains a flag:

- native:  ``flag in value`` on an ``enum.IntFlag`` member, which
           type-checks its operand before testing bits
- custom:  ``(value & flag) == flag``, a direct bitwise comparison

The harness times both across true/false outcome groups and reports mean,
confidence error, spread, ratio against the native baseline and memory
allocation per operation.

Version: 1.0
"""

__version__ = "1.0"

# Core flag types
from flagbench.core.flags import FLAG_WIDTH, SampleFlags, has_bit_flags, has_flag

# Cases
from flagbench.cases import (
    ALL_CASE_CLASSES,
    SUBJECT,
    BenchmarkCase,
    BenchmarkError,
    EnumHasFlags,
    benchmark,
    collect_cases,
)

# Configuration
from flagbench.config import BenchmarkConfig, create_default_config, load_config

# Harness
from flagbench.harness import BenchmarkRunner, CaseResult, Statistics, Summary

__all__ = [
    # Version
    "__version__",
    # Core
    "FLAG_WIDTH",
    "SampleFlags",
    "has_bit_flags",
    "has_flag",
    # Cases
    "ALL_CASE_CLASSES",
    "SUBJECT",
    "BenchmarkCase",
    "BenchmarkError",
    "EnumHasFlags",
    "benchmark",
    "collect_cases",
    # Configuration
    "BenchmarkConfig",
    "create_default_config",
    "load_config",
    # Harness
    "BenchmarkRunner",
    "CaseResult",
    "Statistics",
    "Summary",
]
