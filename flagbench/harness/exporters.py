"""Result export.

Writes a summary as JSON into an artifacts directory, one timestamped
file per run.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from flagbench.harness.summary import Summary

logger = logging.getLogger(__name__)


def export_json(summary: Summary, artifacts_dir: Path) -> Path:
    """Write ``summary`` to ``<artifacts_dir>/<title>-<timestamp>-report.json``.

    The directory is created if needed.

    Returns:
        Path of the written file
    """
    artifacts_dir = Path(artifacts_dir)
    artifacts_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    result_file = artifacts_dir / f"{summary.title}-{timestamp}-report.json"
    with open(result_file, "w", encoding="utf-8") as f:
        json.dump(summary.to_dict(), f, indent=2)

    logger.info(f"Results saved to: {result_file}")
    return result_file
