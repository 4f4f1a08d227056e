"""CLI entry point: click group with default-command routing."""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.markup import escape

from sparkplot.core.errors import SparkplotError
from sparkplot.core.models import PlotConfig
from sparkplot.core.terminal import TerminalWidthProvider, WidthSource

err_console = Console(stderr=True)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

SUBCOMMANDS = {"plot", "demo"}


class SparkplotContext:
    """Shared context passed to all commands."""

    def __init__(self, config: PlotConfig, json_output: bool = False,
                 fmt: str | None = None, stats: bool = False,
                 verbose: bool = False, terminal: WidthSource | None = None):
        self.config = config
        self.json_output = json_output
        self.fmt = fmt
        self.stats = stats
        self.verbose = verbose
        self.terminal = terminal or TerminalWidthProvider()


class SparkplotGroup(click.Group):
    """Custom group so that `sparkplot [options]` means `sparkplot plot [options]`."""

    def parse_args(self, ctx, args):
        if not args or args[0] not in SUBCOMMANDS:
            args = ["plot"] + args
        return super().parse_args(ctx, args)


def _help_with_example(ctx, param, value):
    # Asking for help is not a successful plot: exit 1
    if not value or ctx.resilient_parsing:
        return
    from sparkplot.commands.demo import gaussian_example
    click.echo(ctx.get_help())
    click.echo("\nPlot stuff like this:\n")
    click.echo(gaussian_example())
    click.echo("\nValues to be plotted are read from STDIN.")
    ctx.exit(1)


def _plot_options(f):
    """Plot option decorator."""
    f = click.option("-h", "--help", is_flag=True, expose_value=False, is_eager=True,
                     callback=_help_with_example, help="Show this message and exit")(f)
    f = click.option("--verbose", "-v", is_flag=True, help="Diagnostics on stderr")(f)
    f = click.option("--format", "fmt", type=click.Choice(["csv", "parquet"]),
                     default=None, help="Export column tables instead of plotting")(f)
    f = click.option("--stats", is_flag=True, help="Print a summary table after the plot")(f)
    f = click.option("--json", "json_output", is_flag=True, help="Output the render plan as JSON")(f)
    f = click.option("--ascii", "ascii_glyphs", is_flag=True, help="Plain ASCII glyphs and box")(f)
    f = click.option("--no-color", is_flag=True, help="Disable color output")(f)
    f = click.option("--no-box", is_flag=True, help="Disable enclosing box")(f)
    f = click.option("--title", default="SimplePlot", show_default=True, help="Plot title")(f)
    f = click.option("--width", type=click.IntRange(min=0), default=0, show_default=True,
                     help="Plot width in characters (0 = one per sample)")(f)
    f = click.option("--height", type=click.IntRange(min=1), default=10, show_default=True,
                     help="Plot height in lines")(f)
    f = click.option("--max", "maxv", type=float, default=None, help="Upper plot y-limit")(f)
    f = click.option("--min", "minv", type=float, default=None, help="Lower plot y-limit")(f)
    return f


def _make_context(minv, maxv, height, width, title, no_box, no_color, ascii_glyphs,
                  json_output, stats, fmt, verbose) -> SparkplotContext:
    config = PlotConfig(
        rows=height,
        columns=width,
        framed=not no_box,
        styled=not no_color,
        title=title,
        ascii=ascii_glyphs,
    ).with_bounds(minv, maxv)
    if (minv is None) != (maxv is None):
        err_console.print("[yellow]Warning:[/] --min and --max must be given together; "
                          "using the data range")
    return SparkplotContext(config, json_output=json_output, fmt=fmt,
                            stats=stats, verbose=verbose)


def _fail(exc: SparkplotError) -> None:
    err_console.print(f"[red]Error:[/] {escape(str(exc))}")
    sys.exit(1)


@click.group(cls=SparkplotGroup, context_settings=CONTEXT_SETTINGS)
def main():
    """Plot pretty 1d data graphs in the terminal.

    \b
    Usage:
      seq 1 100 | sparkplot [options]     Plot numbers from stdin (default)
      sparkplot demo                      Showcase plots
    """
    pass


@main.command("plot", context_settings={"help_option_names": []})
@_plot_options
def plot_cmd(minv, maxv, height, width, title, no_box, no_color, ascii_glyphs,
             json_output, stats, fmt, verbose):
    """Plot whitespace-separated numbers read from STDIN."""
    ctx = _make_context(minv, maxv, height, width, title, no_box, no_color,
                        ascii_glyphs, json_output, stats, fmt, verbose)
    from sparkplot.commands.plot import run_plot
    try:
        run_plot(ctx, sys.stdin)
    except SparkplotError as exc:
        _fail(exc)


@main.command("demo")
@click.option("--no-color", is_flag=True, help="Disable color output")
def demo_cmd(no_color):
    """Showcase plots of a sine wave in several configurations."""
    from sparkplot.commands.demo import showcase
    try:
        click.echo(showcase(styled=not no_color))
    except SparkplotError as exc:
        _fail(exc)
