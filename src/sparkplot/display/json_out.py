"""JSON serialization for --json flag."""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from rich.console import Console

from sparkplot.core.models import RenderPlan

console = Console()


class _Encoder(json.JSONEncoder):
    def default(self, obj: Any) -> Any:
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)
        return super().default(obj)


def plan_to_dict(plan: RenderPlan) -> dict[str, Any]:
    data = dataclasses.asdict(plan)
    data["max_level"] = plan.max_level
    data["kernel_width"] = plan.kernel_width
    return data


def dumps(data: Any) -> str:
    if isinstance(data, RenderPlan):
        data = plan_to_dict(data)
    return json.dumps(data, cls=_Encoder, indent=2)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    console.print_json(dumps(data))
