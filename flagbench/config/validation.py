"""
Configuration Validation Utilities

Import Policy:
    from flagbench.config.validation import validate_config, ConfigurationError

DO NOT use: from flagbench.config.validation import *
"""

import warnings
from typing import List, Tuple

from flagbench.config.benchmark_config import BenchmarkConfig


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    pass


class ConfigurationWarning(Warning):
    """Warning for configuration choices that give unreliable numbers."""

    pass


# Below these counts the confidence interval is too wide to compare cases
MIN_RELIABLE_ITERATIONS = 5
MIN_RELIABLE_INVOCATIONS = 1000


def validate_config(config: BenchmarkConfig, raise_on_error: bool = True) -> Tuple[bool, List[str]]:
    """Validate a benchmark configuration.

    Args:
        config: BenchmarkConfig to validate
        raise_on_error: If True, raise ConfigurationError on validation failure

    Returns:
        Tuple of (is_valid, error_messages)

    Raises:
        ConfigurationError: If validation fails and raise_on_error=True
    """
    errors = config.validate()

    if errors:
        if raise_on_error:
            raise ConfigurationError(
                f"Configuration validation failed with {len(errors)} error(s):\n"
                + "\n".join(f"  - {err}" for err in errors)
            )
        return False, errors

    return True, []


def warn_if_unreliable(config: BenchmarkConfig) -> List[str]:
    """Warn about settings that run but give noisy measurements.

    Warnings are issued via Python's warnings module.

    Returns:
        List of warning messages (empty if no warnings)
    """
    messages = []

    if config.job.target_iterations < MIN_RELIABLE_ITERATIONS:
        messages.append(
            f"target_iterations={config.job.target_iterations} is below "
            f"{MIN_RELIABLE_ITERATIONS}; error estimates will be wide"
        )
    if config.job.invocations_per_iteration < MIN_RELIABLE_INVOCATIONS:
        messages.append(
            f"invocations_per_iteration={config.job.invocations_per_iteration} is below "
            f"{MIN_RELIABLE_INVOCATIONS}; timer resolution dominates the samples"
        )
    if config.job.warmup_iterations == 0:
        messages.append("warmup_iterations=0; first samples include cold-start cost")

    for message in messages:
        warnings.warn(message, ConfigurationWarning, stacklevel=2)

    return messages
