"""Errors raised by the rendering engine."""

from __future__ import annotations


class SparkplotError(Exception):
    pass


class InvalidInput(SparkplotError):
    """Empty sample sequence or an inverted value range."""


class UnsupportedWidth(SparkplotError):
    """Resolved width is larger than the number of samples."""


class ConfigurationError(SparkplotError):
    """Plot height below one or a negative width."""
