"""Tests for level quantization."""

from __future__ import annotations

import math

import pytest

from sparkplot.core.models import ResolvedRange
from sparkplot.core.quantize import cell_index, fraction, quantize, row_value

UNIT = ResolvedRange(0.0, 10.0)


class TestFraction:

    def test_inside_range(self):
        assert fraction(2.5, UNIT) == pytest.approx(0.25)

    @pytest.mark.parametrize("value,expected", [(-100.0, 0.0), (1e9, 1.0)])
    def test_clamped(self, value, expected):
        assert fraction(value, UNIT) == expected

    def test_degenerate_range(self):
        assert fraction(42.0, ResolvedRange(3.0, 3.0)) == 0.0

    def test_span_overflowing_float(self):
        rng = ResolvedRange(-1e308, 1e308)
        assert fraction(-1e308, rng) == 0.0
        assert fraction(0.0, rng) == pytest.approx(0.5)
        assert fraction(1e308, rng) == 1.0
        assert quantize(1e308, rng, 2, 8) == 15


class TestQuantize:

    def test_extremes(self):
        assert quantize(0.0, UNIT, 3, 8) == 0
        assert quantize(10.0, UNIT, 3, 8) == 23

    def test_out_of_range_values_map_to_end_levels(self):
        assert quantize(-5.0, UNIT, 2, 8) == 0
        assert quantize(50.0, UNIT, 2, 8) == 15

    def test_floor(self):
        # 0.5 * 7 = 3.5
        assert quantize(5.0, UNIT, 1, 8) == 3

    def test_degenerate_range_is_level_zero(self):
        rng = ResolvedRange(1.0, 1.0)
        assert {quantize(v, rng, 4, 8) for v in (-3.0, 1.0, 99.0)} == {0}

    def test_ascii_ramp(self):
        assert quantize(10.0, UNIT, 2, 3) == 5

    def test_more_rows_never_lose_levels(self):
        values = [i / 100 for i in range(101)]
        rng = ResolvedRange(0.0, 1.0)
        distinct = [len({quantize(v, rng, rows, 8) for v in values})
                    for rows in range(1, 8)]
        assert distinct == sorted(distinct)
        assert distinct[0] == 8


class TestCellIndex:

    def test_below_region_is_blank(self):
        assert cell_index(5, 1, 8) is None

    def test_above_region_is_full(self):
        assert cell_index(20, 1, 8) == 7

    def test_inside_region(self):
        assert cell_index(5, 0, 8) == 5
        assert cell_index(20, 2, 8) == 4
        assert cell_index(16, 2, 8) == 0


def test_row_value_is_middle_of_region():
    rng = ResolvedRange(0.0, 0.15)
    assert row_value(1, rng, 3, 8) == pytest.approx(0.075)
    assert row_value(0, ResolvedRange(10.0, 20.0), 2, 8) == pytest.approx(12.5)


def test_row_value_with_overflowing_span():
    rng = ResolvedRange(-1e308, 1e308)
    assert row_value(1, rng, 3, 8) == pytest.approx(0.0, abs=1e300)
    assert math.isfinite(row_value(2, rng, 3, 8))
