"""Sparkline charts: glyph rows, box outline, value labels and x-axis ticks.

Example (21 samples, 3 lines high, range [0, 0.15]):

    ╭──────Gaussian───────╮
    │        ▁▄▅▄▁        ├ max: 0.15
    │      ▁▅█████▅▁      ├      0.075
    │▁▁▁▂▃▆█████████▆▃▂▁▁▁├ min: 0
    ╰┬─────┬─────┬───────┬╯
     0     5     10      21
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from numbers import Real

from rich.cells import cell_len

from sparkplot.core.models import PlotConfig, RenderPlan, XTick
from sparkplot.core.quantize import cell_index, row_value
from sparkplot.core.resample import LABEL_WIDTH, build_plan
from sparkplot.core.terminal import FixedWidth, WidthSource
from sparkplot.display.glyphs import BoxChars, Charset, GlyphRamp, charset_for
from sparkplot.display.style import DATA, FRAME, StyleDecorator

TICK_MARGIN = 2


def digit_width(n: int) -> int:
    """Number of decimal digits needed to print n (0 for n == 0)."""
    return math.ceil(math.log10(n + 1))


def x_ticks(width: int, samples: int) -> list[XTick]:
    """Tick marks along the bottom rule.

    Ticks are spaced 2*margin + digit_width(samples) apart; the last one is
    moved to the final column and always shows the sample count.
    """
    spacing = 2 * TICK_MARGIN + digit_width(samples)
    count = width // spacing + 1
    ticks = [XTick(column=i * spacing, value=i * samples // count)
             for i in range(count - 1)]
    ticks.append(XTick(column=width - 1, value=samples))
    return ticks


def top_border(width: int, title: str, box: BoxChars,
               deco: StyleDecorator) -> list[str]:
    if not title:
        return [deco.apply(box.nw + box.h_rule * width + box.ne, FRAME)]

    title_len = cell_len(title)
    if title_len > width:
        # Too wide to embed: title goes on its own line
        return [deco.apply(title, FRAME),
                deco.apply(box.nw + box.h_rule * width + box.ne, FRAME)]

    filler = width - title_len
    left = filler // 2
    return [
        deco.apply(box.nw + box.h_rule * left, FRAME)
        + deco.apply(title, FRAME)
        + deco.apply(box.h_rule * (filler - left) + box.ne, FRAME)
    ]


def row_label(row: int, plan: RenderPlan, config: PlotConfig) -> str:
    """Text right of the box for one glyph row (0 = bottom)."""
    fmt = config.label_format
    rng = plan.range
    if plan.rows == 1:
        return (f" min: {fmt(rng.minv).ljust(LABEL_WIDTH)}"
                f", max: {fmt(rng.maxv).ljust(LABEL_WIDTH)}")
    if row == plan.rows - 1:
        return f" max: {fmt(rng.maxv).ljust(LABEL_WIDTH)}"
    if row == 0:
        return f" min: {fmt(rng.minv).ljust(LABEL_WIDTH)}"
    middle = row_value(row, rng, plan.rows, plan.ramp_size)
    return f"      {fmt(middle).ljust(LABEL_WIDTH)}"


def glyph_row(row: int, plan: RenderPlan, ramp: GlyphRamp) -> str:
    cells = []
    for level in plan.levels:
        idx = cell_index(level, row, plan.ramp_size)
        cells.append(" " if idx is None else ramp.glyph(idx))
    return "".join(cells)


def body_rows(plan: RenderPlan, config: PlotConfig, charset: Charset,
              deco: StyleDecorator) -> list[str]:
    lines = []
    box = charset.box
    for row in range(plan.rows - 1, -1, -1):
        cells = deco.apply(glyph_row(row, plan, charset.ramp), DATA)
        if config.framed:
            lines.append(
                deco.apply(box.v_rule, FRAME) + cells
                + deco.apply(box.v_tick, FRAME)
                + deco.apply(row_label(row, plan, config), FRAME)
            )
        else:
            lines.append(cells)
    return lines


def tick_labels(ticks: list[XTick], deco: StyleDecorator) -> str:
    """Tick values, each centred under its tick mark.

    Between two labels, the distance between their ticks is used up by the
    right half of the left label and the left half of the right label; the
    rest is blank (at least one blank).
    """
    parts = []
    # column 0 holds the box corner
    start = 1 + ticks[0].column - (len(ticks[0].label) - 1) // 2
    parts.append(" " * max(start, 0) + deco.apply(ticks[0].label, FRAME))
    prev = ticks[0]
    for tick in ticks[1:]:
        lw = len(prev.label) - 1 - (len(prev.label) - 1) // 2
        rw = (len(tick.label) - 1) // 2
        gap = tick.column - prev.column - 1 - lw - rw
        parts.append(" " * max(gap, 1) + deco.apply(tick.label, FRAME))
        prev = tick
    return "".join(parts)


def bottom_border(plan: RenderPlan, box: BoxChars,
                  deco: StyleDecorator) -> list[str]:
    ticks = x_ticks(plan.width, plan.samples)
    marks = {t.column for t in ticks}
    rule = "".join(box.h_tick if i in marks else box.h_rule
                   for i in range(plan.width))
    return [deco.apply(box.sw + rule + box.se, FRAME), tick_labels(ticks, deco)]


def render_plan(plan: RenderPlan, config: PlotConfig,
                charset: Charset | None = None) -> str:
    """Lay out an already computed plan as a block of text."""
    charset = charset or charset_for(config.ascii)
    deco = StyleDecorator(config.styled)

    lines: list[str] = []
    if config.framed:
        lines.extend(top_border(plan.width, config.title, charset.box, deco))
    lines.extend(body_rows(plan, config, charset, deco))
    if config.framed:
        lines.extend(bottom_border(plan, charset.box, deco))
    return "\n".join(lines)


def render(samples: Sequence[Real], config: PlotConfig | None = None,
           terminal: WidthSource | None = None) -> str:
    """Render samples as a sparkline block.

    Raises InvalidInput, UnsupportedWidth or ConfigurationError before any
    output is produced.
    """
    config = config or PlotConfig()
    charset = charset_for(config.ascii)
    plan = build_plan(samples, config, charset.ramp.ramp_size(), terminal)
    return render_plan(plan, config, charset)


def sparkline(values: Sequence[Real], width: int | None = None) -> str:
    """Render a one-line, unframed sparkline string from a list of numbers."""
    if len(values) == 0:
        return ""
    config = PlotConfig(rows=1, columns=width or 0, styled=False)
    return render(values, config, terminal=FixedWidth(max(len(values), 1)))
