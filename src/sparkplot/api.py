"""Public Python API.

Usage:
    import sparkplot.api as sp

    print(sp.render(values, height=3, box=True, title="Latency"))

    # Render plan and resampled columns
    plan = sp.plan(values, width=40)
    tables = sp.columns(values, width=40)
    tables["columns"].to_polars()
"""

from __future__ import annotations

from collections.abc import Sequence
from numbers import Real

import ibis

from sparkplot.core.models import PlotConfig, RenderPlan
from sparkplot.core.terminal import WidthSource


def _config(*, height: int = 1, width: int = 0, box: bool = False,
            color: bool = False, title: str = "", minv: float | None = None,
            maxv: float | None = None, ascii: bool = False) -> PlotConfig:
    return PlotConfig(rows=height, columns=width, framed=box, styled=color,
                      title=title, ascii=ascii).with_bounds(minv, maxv)


def render(samples: Sequence[Real], terminal: WidthSource | None = None,
           **kwargs) -> str:
    """Sparkline text block for samples."""
    from sparkplot.display.charts import render as render_chart
    return render_chart(samples, _config(**kwargs), terminal=terminal)


def plan(samples: Sequence[Real], terminal: WidthSource | None = None,
         **kwargs) -> RenderPlan:
    """Resolved range, width, downsampled columns and levels."""
    from sparkplot.core.resample import build_plan
    from sparkplot.display.glyphs import charset_for
    config = _config(**kwargs)
    ramp = charset_for(config.ascii).ramp
    return build_plan(samples, config, ramp.ramp_size(), terminal)


def columns(samples: Sequence[Real], terminal: WidthSource | None = None,
            **kwargs) -> dict[str, ibis.Table]:
    """Plan as ibis tables: "summary" and "columns"."""
    from sparkplot.frames import plot_frames
    return plot_frames(plan(samples, terminal=terminal, **kwargs))
