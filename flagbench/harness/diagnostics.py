"""Memory diagnostics and environment information.

Classes:
    MemoryStats: Allocation and GC counts of one case
    MemoryDiagnoser: Traces a case with tracemalloc and gc statistics

Functions:
    collect_environment: Interpreter, OS and hardware description
"""

from __future__ import annotations

import gc
import logging
import platform
import time
import tracemalloc
from dataclasses import asdict, dataclass
from typing import Any, Callable

import psutil

logger = logging.getLogger(__name__)

# gc.get_stats() reports three generations
N_GENERATIONS = 3


@dataclass
class MemoryStats:
    """Memory behaviour of one case.

    Attributes:
        allocated_bytes_per_op: Mean traced allocation per call [bytes]
        gen0_per_1000: Generation-0 collections per 1000 calls
        gen1_per_1000: Generation-1 collections per 1000 calls
        gen2_per_1000: Generation-2 collections per 1000 calls
        invocations: Calls traced
    """
    allocated_bytes_per_op: float
    gen0_per_1000: float
    gen1_per_1000: float
    gen2_per_1000: float
    invocations: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _gc_collections() -> list[int]:
    counts = [entry.get("collections", 0) for entry in gc.get_stats()]
    counts += [0] * (N_GENERATIONS - len(counts))
    return counts[:N_GENERATIONS]


class MemoryDiagnoser:
    """Measure allocation and garbage collection per operation.

    Allocation is the tracemalloc peak above the pre-call baseline, taken
    for each call and averaged. Collections are gc.get_stats() deltas over
    the whole run. tracemalloc is left in the state it was found in.

    Example:
        >>> stats = MemoryDiagnoser().measure(lambda: [0] * 100, invocations=10)
        >>> stats.allocated_bytes_per_op > 0
        True
    """

    def measure(self, func: Callable[[], Any], invocations: int) -> MemoryStats:
        """Run ``func`` ``invocations`` times under tracing.

        Raises:
            ValueError: If invocations is not positive
        """
        if invocations <= 0:
            raise ValueError(f"invocations must be > 0, got {invocations}")

        gc.collect()
        was_tracing = tracemalloc.is_tracing()
        if not was_tracing:
            tracemalloc.start()

        try:
            collections_before = _gc_collections()
            total_allocated = 0
            for _ in range(invocations):
                baseline = tracemalloc.get_traced_memory()[0]
                tracemalloc.reset_peak()
                func()
                peak = tracemalloc.get_traced_memory()[1]
                total_allocated += max(peak - baseline, 0)
            collections_after = _gc_collections()
        finally:
            if not was_tracing:
                tracemalloc.stop()

        per_1000 = [
            (after - before) * 1000.0 / invocations
            for before, after in zip(collections_before, collections_after)
        ]

        stats = MemoryStats(
            allocated_bytes_per_op=total_allocated / invocations,
            gen0_per_1000=per_1000[0],
            gen1_per_1000=per_1000[1],
            gen2_per_1000=per_1000[2],
            invocations=invocations,
        )
        logger.debug(f"Memory: {stats.allocated_bytes_per_op:.1f} B/op over {invocations} calls")
        return stats


def collect_environment() -> dict[str, Any]:
    """Describe the interpreter, OS and hardware the benchmark ran on."""
    clock = time.get_clock_info("perf_counter")
    return {
        "python": f"{platform.python_implementation()} {platform.python_version()}",
        "os": platform.platform(),
        "machine": platform.machine(),
        "processor": platform.processor() or "unknown",
        "cpu_count_logical": psutil.cpu_count(logical=True),
        "cpu_count_physical": psutil.cpu_count(logical=False),
        "total_memory_mb": round(psutil.virtual_memory().total / 1024**2),
        "timer": "perf_counter_ns",
        "timer_resolution_ns": clock.resolution * 1e9,
    }
