"""Data models as dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable


def format_number(value: float) -> str:
    """Six significant digits, trailing zeros dropped (iostream default)."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return f"{float(value):g}"


@dataclass
class PlotConfig:
    rows: int = 1
    columns: int = 0  # 0 = as many as samples, clamped to the terminal
    framed: bool = False
    styled: bool = True
    title: str = ""
    range_override: tuple[float, float] | None = None
    ascii: bool = False
    label_format: Callable[[float], str] = field(default=format_number, repr=False)

    def with_bounds(self, minv: float | None, maxv: float | None) -> PlotConfig:
        """Set the range override; partial bounds leave the range data-driven."""
        if minv is not None and maxv is not None:
            self.range_override = (minv, maxv)
        else:
            self.range_override = None
        return self


@dataclass(frozen=True)
class ResolvedRange:
    minv: float
    maxv: float

    @property
    def span(self) -> float:
        return self.maxv - self.minv

    @property
    def is_degenerate(self) -> bool:
        return self.maxv == self.minv


@dataclass
class Column:
    index: int
    lower: float  # fractional source index, inclusive
    upper: float  # fractional source index, exclusive
    value: float

    @property
    def mass(self) -> float:
        return self.value * (self.upper - self.lower)


@dataclass
class XTick:
    column: int  # position along the rule, 0-based inside the box
    value: int   # sample index shown under the tick

    @property
    def label(self) -> str:
        return str(self.value)


@dataclass
class RenderPlan:
    samples: int
    width: int
    scale: float
    range: ResolvedRange
    rows: int
    ramp_size: int
    terminal_width: int
    columns: list[Column] = field(default_factory=list)
    levels: list[int] = field(default_factory=list)

    @property
    def max_level(self) -> int:
        return self.rows * self.ramp_size - 1

    @property
    def kernel_width(self) -> float:
        return self.samples / self.width
