#!/usr/bin/env python3
"""
flagbench Benchmark Runner

Runs every flag containment case and prints the summary table.
Accepts the same options as the ``flagbench`` command.

Usage:
    python benchmarks/run_benchmark.py [--filter PATTERN ...] [--no-memory] [--output-dir DIR]
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from flagbench.cli import main


if __name__ == '__main__':
    sys.exit(main())
