"""Showcase plots: a Gaussian bell curve and a sine wave in several sizes."""

from __future__ import annotations

import math

from sparkplot.core.models import PlotConfig
from sparkplot.core.terminal import FixedWidth, WidthSource
from sparkplot.display.charts import render

GAUSSIAN = [
    0.000514092998764,
    0.00147728280398,
    0.00379866200793,
    0.0087406296979,
    0.0179969888377,
    0.0331590462642,
    0.054670024892,
    0.080656908173,
    0.106482668507,
    0.125794409231,
    0.132980760134,
    0.125794409231,
    0.106482668507,
    0.080656908173,
    0.054670024892,
    0.0331590462642,
    0.0179969888377,
    0.0087406296979,
    0.00379866200793,
    0.00147728280398,
    0.000514092998764,
]

BANNER = (
    "############################################################\n"
    "#                Sparklines: Showcase examples             #\n"
    "############################################################\n"
)


def gaussian_example() -> str:
    config = PlotConfig(rows=3, framed=True, styled=False, title="Gaussian")
    config.with_bounds(0.0, 0.15)
    return render(GAUSSIAN, config, terminal=FixedWidth(80))


def sine_wave(points: int = 101) -> list[float]:
    """Two periods of a sine wave."""
    return [math.sin((i * 7.2) * math.pi / 180) for i in range(points)]


def showcase(styled: bool = True, terminal: WidthSource | None = None) -> str:
    data = sine_wave()
    parts = ["", BANNER]

    def plot(label: str | None, rows: int, width: int, framed: bool,
             bounds: tuple[float, float] | None = None,
             colored: bool = True) -> None:
        config = PlotConfig(rows=rows, columns=width, framed=framed,
                            styled=styled and colored, title=label if framed else "")
        if bounds:
            config.with_bounds(*bounds)
        text = render(data, config, terminal=terminal)
        if not framed and label:
            text = f"{label}\n{text}"
        parts.append(text + "\n")

    plot("Showcase: With box, size 40x10", 10, 40, True)
    plot("Showcase: With box, size 40x3", 3, 40, True)
    plot("Showcase: Without box, size 40x1 (classic 'sparkline')", 1, 40, False)
    plot("Showcase: Without box, size 80x10", 10, 80, False)
    plot("Showcase: With box, size 80x10", 10, 80, True)
    plot("Showcase: With box, size 80x10, y-range [-2,4]", 10, 80, True, (-2.0, 4.0))
    plot("Showcase: With box, size 80x10, y-range [-0.25,1.25]", 10, 80, True,
         (-0.25, 1.25))
    plot("Showcase: With box, size 80x10, no colors", 10, 80, True, colored=False)
    return "\n".join(parts)
