"""Read whitespace-separated numbers from a text stream."""

from __future__ import annotations

import math
from typing import IO


def parse_samples(text: str) -> tuple[list[float], str | None]:
    """Parse numbers up to the first token that is not one.

    Returns the samples and the offending token (None if all of the input
    was numeric). ``nan`` and ``inf`` are not numbers here.
    """
    samples: list[float] = []
    for token in text.split():
        try:
            value = float(token)
        except ValueError:
            return samples, token
        if not math.isfinite(value):
            return samples, token
        samples.append(value)
    return samples, None


def read_samples(stream: IO[str]) -> tuple[list[float], str | None]:
    return parse_samples(stream.read())
