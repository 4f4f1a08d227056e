"""Terminal width lookup via rich."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console

DEFAULT_WIDTH = 80


class WidthSource(Protocol):
    def width(self) -> int: ...


class TerminalWidthProvider:
    """Current terminal width in columns, falling back to 80."""

    def __init__(self, console: Console | None = None,
                 fallback: int = DEFAULT_WIDTH):
        self._console = console
        self.fallback = fallback

    def width(self) -> int:
        console = self._console or Console()
        try:
            cols = console.size.width
        except OSError:
            return self.fallback
        if not cols or cols <= 0:
            return self.fallback
        return cols


class FixedWidth:
    """Constant width, for tests and non-interactive callers."""

    def __init__(self, columns: int = DEFAULT_WIDTH):
        self.columns = columns

    def width(self) -> int:
        return self.columns if self.columns > 0 else DEFAULT_WIDTH
