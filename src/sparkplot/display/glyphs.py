"""Glyph ramps and box outline characters."""

from __future__ import annotations

from dataclasses import dataclass


class GlyphRamp:
    """Characters of increasing fill, lowest first."""

    def __init__(self, glyphs: str | list[str]):
        self._glyphs = list(glyphs)
        if not self._glyphs:
            raise ValueError("a glyph ramp needs at least one glyph")

    def ramp_size(self) -> int:
        return len(self._glyphs)

    def glyph(self, index: int) -> str:
        return self._glyphs[index]


@dataclass(frozen=True)
class BoxChars:
    nw: str
    ne: str
    sw: str
    se: str
    h_rule: str
    h_tick: str
    v_rule: str
    v_tick: str


@dataclass(frozen=True)
class Charset:
    ramp: GlyphRamp
    box: BoxChars


# ▁▂▃▄▅▆▇█ (U+2581..U+2588) and rounded box drawing
#   ╭────╮
#   │test├
#   ╰┬──┬╯
UNICODE = Charset(
    ramp=GlyphRamp("▁▂▃▄▅▆▇█"),
    box=BoxChars(nw="╭", ne="╮", sw="╰", se="╯",
                 h_rule="─", h_tick="┬", v_rule="│", v_tick="├"),
)

#   +----+
#   |test|
#   +,--,+
ASCII = Charset(
    ramp=GlyphRamp(".oO"),
    box=BoxChars(nw="+", ne="+", sw="+", se="+",
                 h_rule="-", h_tick=",", v_rule="|", v_tick="|"),
)


def charset_for(ascii: bool) -> Charset:
    return ASCII if ascii else UNICODE
