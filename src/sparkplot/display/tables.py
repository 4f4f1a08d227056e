"""Rich summary table for --stats."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from sparkplot.core.models import PlotConfig, RenderPlan

console = Console()


def format_value(value: float) -> str:
    return f"{value:.6g}"


def stats_table(plan: RenderPlan, config: PlotConfig) -> Table:
    table = Table(title="Plot Statistics", show_header=False, border_style="dim")
    table.add_column("Metric", style="bold")
    table.add_column("Value")
    table.add_row("Samples", str(plan.samples))
    table.add_row("Columns", str(plan.width))
    table.add_row("Samples/Column", format_value(plan.kernel_width))
    table.add_row("Terminal Width", str(plan.terminal_width))
    table.add_row("Lines", str(plan.rows))
    table.add_row("Levels", str(plan.max_level + 1))
    source = "fixed" if config.range_override is not None else "data"
    table.add_row("Range", f"{format_value(plan.range.minv)} … "
                           f"{format_value(plan.range.maxv)} ({source})")
    if plan.columns:
        values = [c.value for c in plan.columns]
        table.add_row("Column Mean", format_value(sum(values) / len(values)))
    return table


def display_stats(plan: RenderPlan, config: PlotConfig,
                  out: Console | None = None) -> None:
    (out or console).print(stats_table(plan, config))
