"""Plot numbers read from stdin (default command)."""

from __future__ import annotations

from typing import IO

import click
from rich.console import Console
from rich.markup import escape

from sparkplot.cli import SparkplotContext
from sparkplot.core.errors import InvalidInput
from sparkplot.core.resample import build_plan
from sparkplot.core.samples import read_samples
from sparkplot.display.charts import render_plan
from sparkplot.display.glyphs import charset_for
from sparkplot.display.json_out import print_json
from sparkplot.display.tables import display_stats

err_console = Console(stderr=True)


def run_plot(ctx: SparkplotContext, stream: IO[str]) -> None:
    samples, stopped_at = read_samples(stream)
    if ctx.verbose:
        err_console.print(f"[dim]Read {len(samples)} samples[/]")
        if stopped_at is not None:
            err_console.print(f"[dim]Stopped at non-numeric token {escape(repr(stopped_at))}[/]")
    if not samples:
        raise InvalidInput("no numbers on standard input")

    config = ctx.config
    charset = charset_for(config.ascii)
    plan = build_plan(samples, config, charset.ramp.ramp_size(), ctx.terminal)

    if ctx.verbose:
        err_console.print(
            f"[dim]Terminal {plan.terminal_width} cols · width {plan.width} · "
            f"scale {plan.scale:.4g} · range [{plan.range.minv:g}, {plan.range.maxv:g}][/]",
            highlight=False,
        )

    if ctx.fmt:
        from sparkplot.frames import export_tables, plot_frames
        export_tables(plot_frames(plan), ctx.fmt)
    elif ctx.json_output:
        print_json(plan)
    else:
        click.echo(render_plan(plan, config, charset))
        if ctx.stats:
            display_stats(plan, config)
