"""Access to the packaged benchmark defaults.

defaults.yaml is parsed once and cached; callers read single values by
dotted path (``get_default("job.warmup_iterations")``) or take a copy of
the whole tree. Only PyYAML is imported here, so every other config
module can depend on this one.
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml

DEFAULTS_ENV_VAR = "FLAGBENCH_DEFAULTS_PATH"


def _defaults_path() -> Path:
    """Defaults file to read: $FLAGBENCH_DEFAULTS_PATH if it exists, else the packaged one."""
    override = os.getenv(DEFAULTS_ENV_VAR)
    if override and Path(override).exists():
        return Path(override)

    packaged = Path(__file__).parent / "defaults.yaml"
    if not packaged.exists():
        raise FileNotFoundError(
            f"Benchmark defaults missing: {packaged} "
            f"(point {DEFAULTS_ENV_VAR} at a replacement)"
        )
    return packaged


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Read a YAML mapping; an empty file reads as ``{}``.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the top level is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(data).__name__}")
    return data


_defaults: dict[str, Any] | None = None


def _loaded() -> dict[str, Any]:
    global _defaults
    if _defaults is None:
        _defaults = load_yaml_file(_defaults_path())
    return _defaults


def get_defaults() -> dict[str, Any]:
    """Deep copy of every default, safe for callers to mutate."""
    return copy.deepcopy(_loaded())


def get_default(key_path: str, default: Any = None) -> Any:
    """Look up one default, e.g. ``get_default("diagnostics.memory")``.

    Returns ``default`` when any segment of ``key_path`` is missing or the
    stored value is null.
    """
    node: Any = _loaded()
    for key in key_path.split("."):
        if not isinstance(node, dict) or node.get(key) is None:
            return default
        node = node[key]
    return node


def reload_defaults() -> None:
    """Drop the cache and re-read the defaults file (honours a changed env var)."""
    global _defaults
    _defaults = load_yaml_file(_defaults_path())
