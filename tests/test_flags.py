"""Tests for flag containment checks."""

import itertools

import pytest

from flagbench.core.flags import (
    ALL_BITS,
    FLAG_WIDTH,
    SampleFlags,
    has_bit_flags,
    has_flag,
)


# Every value of the 8-bit flag space
ALL_VALUES = range(ALL_BITS + 1)


class TestSampleFlags:
    """Tests for the sample flag space."""

    def test_member_values(self):
        """Test members are the single bits 1..16."""
        assert SampleFlags.NONE == 0
        assert SampleFlags.FIRST == 1
        assert SampleFlags.SECOND == 2
        assert SampleFlags.THIRD == 4
        assert SampleFlags.FOURTH == 8
        assert SampleFlags.FIFTH == 16

    def test_width(self):
        """Test the flag space is 8 bits wide."""
        assert FLAG_WIDTH == 8
        assert ALL_BITS == 0xFF

    def test_disjoint_intersection_is_empty(self):
        """Test intersecting two distinct flags gives the empty set."""
        assert SampleFlags.FOURTH & SampleFlags.FIFTH == 0

    def test_union(self):
        """Test union of flags sets both bits."""
        combined = SampleFlags.FOURTH | SampleFlags.FIFTH
        assert combined == 24


class TestHasBitFlags:
    """Tests for the direct bitwise containment check."""

    def test_matches_definition_exhaustively(self):
        """Test containment equals (v & q) == q for every 8-bit pair."""
        for v, q in itertools.product(ALL_VALUES, repeat=2):
            assert has_bit_flags(v, q) == ((v & q) == q)

    def test_zero_flag_always_contained(self):
        """Test the empty flag is contained in every value."""
        assert all(has_bit_flags(v, 0) for v in ALL_VALUES)

    def test_zero_value_contains_only_zero(self):
        """Test the empty value contains only the empty flag."""
        for q in ALL_VALUES:
            assert has_bit_flags(0, q) == (q == 0)

    def test_not_symmetric(self):
        """Test containment is not symmetric in general."""
        a, b = 0b1111, 0b0101
        assert has_bit_flags(a, b) != has_bit_flags(b, a)

    def test_symmetric_for_equal_values(self):
        """Test containment holds both ways when the values are equal."""
        for v in ALL_VALUES:
            assert has_bit_flags(v, v)

    def test_pure(self):
        """Test repeated calls give identical results."""
        for v, q in [(0b1111, 0b0101), (0b1010, 0b0101), (0, 0)]:
            assert has_bit_flags(v, q) == has_bit_flags(v, q)

    @pytest.mark.parametrize("value, flag, expected", [
        (SampleFlags.FOURTH & SampleFlags.FIFTH, SampleFlags.FOURTH, False),
        (0, SampleFlags.FIRST, False),
        (0b1111, 0b0101, True),
        (0b1010, 0b0101, False),
        (0b0000, 0b0000, True),
    ])
    def test_concrete_scenarios(self, value, flag, expected):
        """Test the documented concrete scenarios."""
        assert has_bit_flags(value, flag) is expected

    def test_multi_bit_flag_requires_all_bits(self):
        """Test a multi-bit query needs every bit present."""
        query = SampleFlags.FIRST | SampleFlags.THIRD
        assert has_bit_flags(SampleFlags.FIRST | SampleFlags.SECOND | SampleFlags.THIRD, query)
        assert not has_bit_flags(SampleFlags.FIRST | SampleFlags.SECOND, query)

    def test_all_bits_set(self):
        """Test the all-bits value contains every flag."""
        assert all(has_bit_flags(ALL_BITS, q) for q in ALL_VALUES)

    def test_negative_ints(self):
        """Test two's-complement semantics for negative values."""
        assert has_bit_flags(-1, 0b1010)
        assert not has_bit_flags(0b1010, -1)

    def test_returns_bool(self):
        """Test the result is a plain bool."""
        assert type(has_bit_flags(SampleFlags.FIRST, SampleFlags.FIRST)) is bool


class TestHasFlag:
    """Tests for the native ``in`` containment check."""

    def test_agrees_with_bitwise_check(self):
        """Test native and bitwise checks agree on every 5-bit pair."""
        values = [SampleFlags(v) for v in range(32)]
        for v, q in itertools.product(values, repeat=2):
            assert has_flag(v, q) == has_bit_flags(v, q)

    def test_member_in_combination(self):
        """Test a member is found in a combination containing it."""
        combined = SampleFlags.SECOND | SampleFlags.FIFTH
        assert has_flag(combined, SampleFlags.FIFTH)
        assert not has_flag(combined, SampleFlags.FIRST)

    def test_rejects_foreign_operand(self):
        """Test the native check type-checks its operand."""
        with pytest.raises(TypeError):
            has_flag(SampleFlags.FIRST, "FIRST")
