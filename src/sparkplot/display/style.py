"""ANSI (SGR) decoration of rendered fragments, via rich styles."""

from __future__ import annotations

from collections.abc import Iterable

from rich.color import ColorSystem
from rich.style import Style

COLORS = ("red", "green", "blue", "black")
FACES = {"bold": "bold", "underline": "underline", "inverse": "reverse"}
STYLE_NAMES = frozenset(COLORS) | frozenset(FACES) | {"reset"}

# Fragment roles used by the frame renderer
FRAME = frozenset({"green"})
DATA = frozenset({"blue"})


class StyleDecorator:
    """Wrap text in SGR start/reset sequences; a passthrough when disabled.

    Styles are names from STYLE_NAMES. A style set that is empty or only
    "reset" leaves the text alone. Only one foreground color applies; the
    first of red, green, blue, black present wins.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._cache: dict[frozenset[str], Style] = {}

    def apply(self, text: str, styles: Iterable[str]) -> str:
        if not self.enabled or not text:
            return text
        key = frozenset(styles)
        unknown = key - STYLE_NAMES
        if unknown:
            raise ValueError(f"unknown style(s): {', '.join(sorted(unknown))}")
        key = key - {"reset"}
        if not key:
            return text
        style = self._cache.get(key)
        if style is None:
            style = self._cache[key] = _make_style(key)
        return style.render(text, color_system=ColorSystem.STANDARD)

    def red(self, text: str) -> str:
        return self.apply(text, {"red"})

    def green(self, text: str) -> str:
        return self.apply(text, {"green"})

    def blue(self, text: str) -> str:
        return self.apply(text, {"blue"})

    def bold(self, text: str) -> str:
        return self.apply(text, {"bold"})

    def warning(self, text: str = "WARNING: ") -> str:
        return self.apply(text, {"red", "bold"})

    def error(self, text: str = "!!!ERROR!!!: ") -> str:
        return self.apply(text, {"red", "bold", "inverse"})


def _make_style(styles: frozenset[str]) -> Style:
    color = next((c for c in COLORS if c in styles), None)
    faces = {FACES[f]: True for f in FACES if f in styles}
    return Style(color=color, **faces)
