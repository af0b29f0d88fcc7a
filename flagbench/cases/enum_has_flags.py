"""Native vs custom flag containment cases.

Each case checks a fixed flag against ``SUBJECT`` and returns the result.
The native cases go through ``enum.Flag.__contains__`` on the enum
members; the custom cases call ``has_bit_flags`` on the same bits held as
plain ints, so ``&`` and ``==`` are the int operations.
"""

from flagbench.cases.registry import benchmark
from flagbench.core.flags import SampleFlags, has_bit_flags

# Intersection of two disjoint flags, so SUBJECT is SampleFlags(0).
# Kept as-is: the cases measure dispatch cost, not flag algebra.
SUBJECT = SampleFlags.FOURTH & SampleFlags.FIFTH

# Plain-int operands of the custom cases
SUBJECT_BITS = int(SUBJECT)
FIRST_BITS = int(SampleFlags.FIRST)
FOURTH_BITS = int(SampleFlags.FOURTH)


class EnumHasFlags:
    """Flag containment benchmark cases.

    Categories "true" and "false" name the outcome each pair was written
    for; the native case of each category is the baseline.
    """

    @benchmark(category="true", baseline=True)
    def native_has_flags_true(self) -> bool:
        """Native ``in`` check for FOURTH."""
        return SampleFlags.FOURTH in SUBJECT

    @benchmark(category="false", baseline=True)
    def native_has_flags_false(self) -> bool:
        """Native ``in`` check for FIRST."""
        return SampleFlags.FIRST in SUBJECT

    @benchmark(category="true")
    def custom_has_flags_true(self) -> bool:
        """Bitwise-AND check for FOURTH."""
        return has_bit_flags(SUBJECT_BITS, FOURTH_BITS)

    @benchmark(category="false")
    def custom_has_flags_false(self) -> bool:
        """Bitwise-AND check for FIRST."""
        return has_bit_flags(SUBJECT_BITS, FIRST_BITS)
