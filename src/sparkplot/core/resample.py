"""Range and width resolution, box-filter downsampling, render planning."""

from __future__ import annotations

import math
from collections.abc import Sequence
from numbers import Real

from sparkplot.core.errors import ConfigurationError, InvalidInput, UnsupportedWidth
from sparkplot.core.models import Column, PlotConfig, RenderPlan, ResolvedRange
from sparkplot.core.quantize import quantize
from sparkplot.core.terminal import TerminalWidthProvider, WidthSource

#  │ .... ├ max: 1024.256
#                ^^^^^^^^^^^^
LABEL_WIDTH = 12
#  │ .... ├ max: 1024.256
#  ^      ^^^^^^^
FRAME_OVERHEAD = LABEL_WIDTH + 8


def resolve_range(samples: Sequence[Real],
                  override: tuple[Real, Real] | None = None) -> ResolvedRange:
    """Scaling range: the override if both bounds are set, else the data extent."""
    if len(samples) == 0:
        raise InvalidInput("no samples to plot")
    if not all(math.isfinite(v) for v in samples):
        raise InvalidInput("samples must be finite numbers (no nan or inf)")

    if override is not None and None not in override:
        minv, maxv = override
    else:
        minv = maxv = samples[0]
        for v in samples:
            if v < minv:
                minv = v
            elif v > maxv:
                maxv = v

    if not (math.isfinite(minv) and math.isfinite(maxv)):
        raise InvalidInput(f"range [{minv}, {maxv}] is not finite")
    if minv > maxv:
        raise InvalidInput(f"min ({minv}) is larger than max ({maxv})")
    return ResolvedRange(minv, maxv)


def resolve_width(requested: int, n: int, framed: bool,
                  terminal_width: int) -> tuple[int, float]:
    """Number of display columns and the column/sample ratio.

    A requested width of 0 means one column per sample. The result never
    exceeds the terminal width minus the frame decoration.
    """
    if requested < 0:
        raise ConfigurationError(f"width must not be negative (got {requested})")
    if n < 1:
        raise InvalidInput("no samples to plot")

    max_width = terminal_width - (FRAME_OVERHEAD if framed else 0)
    max_width = max(max_width, 1)

    width = requested or n
    if width > max_width:
        width = max_width

    if width > n:
        raise UnsupportedWidth(
            f"width {width} is larger than the number of samples ({n}); "
            "upsampling is not supported"
        )
    return width, width / n


def downsample(samples: Sequence[Real], width: int) -> list[Column]:
    """Area-weighted average of the samples over each column's source interval.

    Column i owns the fractional source interval [i*n/width, (i+1)*n/width).
    Partially covered samples at either end contribute in proportion to their
    overlap, so the total mass sum(value * interval) equals sum(samples).
    """
    n = len(samples)
    if width < 1 or width > n:
        raise UnsupportedWidth(f"cannot resample {n} samples into {width} columns")

    mass_per_column = n / width
    columns: list[Column] = []
    for i in range(width):
        lower = i * n / width
        upper = (i + 1) * n / width
        lo = int(lower)
        hi = int(upper)

        total = (1.0 - (lower - lo)) * float(samples[lo])
        for j in range(lo + 1, hi):
            total += float(samples[j])
        if hi < n:
            total += (upper - hi) * float(samples[hi])

        columns.append(Column(index=i, lower=lower, upper=upper,
                              value=total / mass_per_column))
    return columns


def build_plan(samples: Sequence[Real], config: PlotConfig, ramp_size: int,
               terminal: WidthSource | None = None) -> RenderPlan:
    """Validate the configuration and compute everything the layout needs."""
    if config.rows < 1:
        raise ConfigurationError(f"height must be at least 1 line (got {config.rows})")
    if config.columns < 0:
        raise ConfigurationError(f"width must not be negative (got {config.columns})")

    rng = resolve_range(samples, config.range_override)
    terminal = terminal or TerminalWidthProvider()
    term_width = terminal.width()
    width, scale = resolve_width(config.columns, len(samples), config.framed, term_width)

    columns = downsample(samples, width)
    levels = [quantize(c.value, rng, config.rows, ramp_size) for c in columns]
    return RenderPlan(
        samples=len(samples),
        width=width,
        scale=scale,
        range=rng,
        rows=config.rows,
        ramp_size=ramp_size,
        terminal_width=term_width,
        columns=columns,
        levels=levels,
    )
