"""Bit-flag values and containment checks.

A flag set is an integer whose bits each represent an independent boolean
property. ``SampleFlags`` is the flag space the benchmark cases run against.

Two containment checks are provided:

    has_flag:       the native ``flag in value`` check of ``enum.Flag``,
                    which type-checks its operand before testing bits
    has_bit_flags:  a direct bitwise comparison with no type inspection

Import Policy:
    from flagbench.core.flags import SampleFlags, has_bit_flags
"""

from enum import IntFlag

# Number of bits in the sample flag space
FLAG_WIDTH = 8

# Every representable value of the sample flag space
ALL_BITS = (1 << FLAG_WIDTH) - 1


class SampleFlags(IntFlag):
    """Sample flag space used by the benchmark cases.

    Members are single-bit flags; combinations are built with ``|`` and
    intersections with ``&``.
    """
    NONE = 0
    FIRST = 1
    SECOND = 2
    THIRD = 4
    FOURTH = 8
    FIFTH = 16


def has_bit_flags(value: int, flag: int) -> bool:
    """Return True if every bit set in ``flag`` is also set in ``value``.

    Works on plain ints as well as ``SampleFlags`` members. A zero flag is
    contained in every value.

    Example:
        >>> has_bit_flags(0b1111, 0b0101)
        True
        >>> has_bit_flags(0b1010, 0b0101)
        False
    """
    return (value & flag) == flag


def has_flag(value: SampleFlags, flag: SampleFlags) -> bool:
    """Native containment check, ``flag in value``.

    Raises:
        TypeError: If ``flag`` is not a member of the same flag class
    """
    return flag in value
