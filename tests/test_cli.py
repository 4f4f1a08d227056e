"""CLI tests through click's CliRunner."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from sparkplot.cli import main
from sparkplot.commands.demo import GAUSSIAN, showcase
from sparkplot.core.samples import parse_samples
from sparkplot.core.terminal import FixedWidth

GAUSSIAN_INPUT = "\n".join(str(v) for v in GAUSSIAN)


@pytest.fixture
def runner():
    return CliRunner()


def _invoke(runner, args, input=GAUSSIAN_INPUT):
    return runner.invoke(main, args, input=input, env={"COLUMNS": "80"})


class TestPlot:

    def test_gaussian_plot(self, runner):
        result = _invoke(runner, ["--no-color", "--height", "3", "--min", "0",
                                  "--max", "0.15", "--title", "Gaussian"])
        assert result.exit_code == 0, result.output
        lines = result.output.rstrip("\n").split("\n")
        assert len(lines) == 6
        assert lines[0] == "╭──────Gaussian───────╮"
        assert lines[1].rstrip().endswith("max: 0.15")
        assert lines[3].rstrip().endswith("min: 0")
        assert lines[-1].split()[-1] == "21"

    def test_default_is_boxed_and_titled(self, runner):
        result = _invoke(runner, ["--no-color"])
        assert result.exit_code == 0
        assert "SimplePlot" in result.output
        # 10 lines high by default, plus top, bottom and tick lines
        assert len(result.output.rstrip("\n").split("\n")) == 13

    def test_no_box(self, runner):
        result = _invoke(runner, ["--no-color", "--no-box", "--height", "1"])
        assert result.exit_code == 0
        line = result.output.rstrip("\n")
        assert len(line) == len(GAUSSIAN)
        assert "│" not in line
        assert line[10] == "█"

    def test_explicit_plot_subcommand(self, runner):
        result = _invoke(runner, ["plot", "--no-color", "--no-box", "--ascii", "--height", "1"],
                         input="0 1 2")
        assert result.exit_code == 0
        assert result.output == ".oO\n"

    def test_stops_at_non_numeric_token(self, runner):
        result = _invoke(runner, ["--no-color", "--no-box", "--height", "1"],
                         input="1 2 3 stop 4 5")
        assert result.exit_code == 0
        assert result.output == "▁▄█\n"

    @pytest.mark.parametrize("token", ["nan", "inf", "-Infinity"])
    def test_stops_at_non_finite_token(self, runner, token):
        result = _invoke(runner, ["--no-color", "--no-box", "--height", "1"],
                         input=f"1 2 3 {token} 4 5")
        assert result.exit_code == 0, result.output
        assert result.output == "▁▄█\n"

    def test_partial_bounds_warn(self, runner):
        result = _invoke(runner, ["--no-color", "--no-box", "--height", "1", "--min", "0"],
                         input="1 2 3")
        assert result.exit_code == 0
        assert "Warning: --min and --max must be given together" in result.output
        assert result.output.rstrip("\n").endswith("▁▄█")

    def test_verbose_diagnostics(self, runner):
        result = _invoke(runner, ["--no-color", "--no-box", "--height", "1", "--verbose"],
                         input="1 2 3 stop")
        assert result.exit_code == 0
        assert "Read 3 samples" in result.output
        assert "Stopped at non-numeric token 'stop'" in result.output
        assert "width 3" in result.output

    def test_json_output(self, runner):
        result = _invoke(runner, ["--json", "--width", "7"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["width"] == 7
        assert data["samples"] == len(GAUSSIAN)
        assert len(data["columns"]) == 7
        assert data["kernel_width"] == pytest.approx(3.0)

    def test_stats_table(self, runner):
        result = _invoke(runner, ["--no-color", "--stats"])
        assert result.exit_code == 0
        assert "Plot Statistics" in result.output

    def test_csv_export(self, runner):
        result = _invoke(runner, ["--format", "csv", "--width", "7"])
        assert result.exit_code == 0
        assert "# summary" in result.output
        assert "# columns" in result.output


class TestErrors:

    def test_help_exits_non_zero(self, runner):
        result = _invoke(runner, ["--help"])
        assert result.exit_code == 1
        assert "Plot stuff like this" in result.output
        assert "Gaussian" in result.output
        assert "--no-box" in result.output

    def test_empty_input(self, runner):
        result = _invoke(runner, ["--no-color"], input="")
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_width_wider_than_samples(self, runner):
        result = _invoke(runner, ["--no-color", "--width", "200"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_inverted_range(self, runner):
        result = _invoke(runner, ["--no-color", "--min", "1", "--max", "0"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_nan_only_input(self, runner):
        result = _invoke(runner, ["--no-color"], input="nan 1 2")
        assert result.exit_code == 1
        assert "Error" in result.output
        assert "Traceback" not in result.output

    def test_infinite_bound(self, runner):
        result = _invoke(runner, ["--no-color", "--min", "0", "--max", "inf"])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert "not finite" in result.output

    def test_zero_height_rejected(self, runner):
        result = _invoke(runner, ["--height", "0"])
        assert result.exit_code == 2


class TestDemo:

    def test_showcase(self, runner):
        result = _invoke(runner, ["demo", "--no-color"], input=None)
        assert result.exit_code == 0
        assert "Showcase: With box, size 40x10" in result.output
        assert "\x1b[" not in result.output

    def test_last_showcase_is_uncolored(self):
        text = showcase(styled=True, terminal=FixedWidth(120))
        assert "\x1b[" in text
        tail = text[text.index("Showcase: With box, size 80x10, no colors"):]
        assert "\x1b[" not in tail


def test_parse_samples():
    assert parse_samples("1 2.5\n-3e2\tfoo 4") == ([1.0, 2.5, -300.0], "foo")
    assert parse_samples("  ") == ([], None)


def test_parse_samples_stops_at_non_finite():
    assert parse_samples("1 2 nan 3") == ([1.0, 2.0], "nan")
    assert parse_samples("inf") == ([], "inf")
