"""Convert render plans to ibis memtables and export them.

plot_frames() returns dict[str, ibis.Table]. Tables can be materialized
to any backend:

    tables["columns"].to_polars()
    tables["summary"].to_pandas()
"""

from __future__ import annotations

import sys

import ibis

from sparkplot.core.models import RenderPlan


def summary_frame(plan: RenderPlan) -> ibis.Table:
    return ibis.memtable([{
        "samples": plan.samples,
        "width": plan.width,
        "scale": plan.scale,
        "kernel_width": plan.kernel_width,
        "rows": plan.rows,
        "ramp_size": plan.ramp_size,
        "levels": plan.max_level + 1,
        "min": float(plan.range.minv),
        "max": float(plan.range.maxv),
        "terminal_width": plan.terminal_width,
    }])


def columns_frame(plan: RenderPlan) -> ibis.Table:
    """One row per display column: source interval, averaged value, level."""
    rows = [
        {
            "column": c.index,
            "lower": c.lower,
            "upper": c.upper,
            "value": c.value,
            "level": level,
        }
        for c, level in zip(plan.columns, plan.levels)
    ]
    return ibis.memtable(rows)


def plot_frames(plan: RenderPlan) -> dict[str, ibis.Table]:
    return {
        "summary": summary_frame(plan),
        "columns": columns_frame(plan),
    }


def export_tables(tables: dict[str, ibis.Table], fmt: str) -> None:
    """Export ibis tables to stdout (csv) or files (parquet)."""
    if fmt == "csv":
        for name, table in tables.items():
            sys.stdout.write(f"# {name}\n")
            table.to_pandas().to_csv(sys.stdout, index=False)
            sys.stdout.write("\n")
    elif fmt == "parquet":
        for name, table in tables.items():
            path = f"{name}.parquet"
            table.to_pandas().to_parquet(path)
            sys.stderr.write(f"Wrote {path}\n")
    else:
        raise ValueError(f"unknown export format: {fmt}")
