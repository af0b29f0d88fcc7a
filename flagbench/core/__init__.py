"""Core flag types and containment checks."""

from flagbench.core.flags import (
    ALL_BITS,
    FLAG_WIDTH,
    SampleFlags,
    has_bit_flags,
    has_flag,
)

__all__ = [
    "ALL_BITS",
    "FLAG_WIDTH",
    "SampleFlags",
    "has_bit_flags",
    "has_flag",
]
