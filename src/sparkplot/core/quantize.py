"""Map column values onto stacked glyph levels."""

from __future__ import annotations

import math

from sparkplot.core.models import ResolvedRange


def fraction(value: float, rng: ResolvedRange) -> float:
    """Position of value inside the range, clamped to [0, 1]."""
    if rng.is_degenerate:
        return 0.0
    clamped = min(rng.maxv, max(rng.minv, value))
    span = float(rng.span)
    if math.isinf(span):
        # Both ends finite but their distance overflows: halve before subtracting
        return (clamped / 2 - rng.minv / 2) / (rng.maxv / 2 - rng.minv / 2)
    return float(clamped - rng.minv) / span


def quantize(value: float, rng: ResolvedRange, rows: int, ramp_size: int) -> int:
    top = rows * ramp_size - 1
    level = math.floor(fraction(value, rng) * top)
    return min(top, max(0, level))


def cell_index(level: int, row: int, ramp_size: int) -> int | None:
    """Ramp index for one cell of row `row` (0 = bottom), or None if blank.

    Row r owns levels [r*G, r*G + G - 1]. Levels above that fill the cell.
    """
    region_min = row * ramp_size
    region_max = region_min + ramp_size - 1
    if level < region_min:
        return None
    if level > region_max:
        return ramp_size - 1
    return level - region_min


def row_value(row: int, rng: ResolvedRange, rows: int, ramp_size: int) -> float:
    """Value at the middle of a row's level region."""
    span = rng.span
    if math.isinf(span):
        pos = (row * ramp_size + ramp_size / 2) / (rows * ramp_size)
        return (1 - pos) * rng.minv + pos * rng.maxv
    return (row * ramp_size + ramp_size / 2) * span / (rows * ramp_size) + rng.minv

