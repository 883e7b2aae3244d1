"""Exceptions raised while building a scrubber."""

from __future__ import annotations


class ScrubberError(Exception):
    """Base class for clinical-scrubber failures."""


class ConfigError(ScrubberError, ValueError):
    """Configuration is malformed or out of range."""


class PatternError(ScrubberError):
    """A built-in or dictionary-derived pattern failed to compile."""
