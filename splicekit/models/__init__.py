"""Data models for SPLICE pattern representation."""

from splicekit.models.pattern import Pattern, render
from splicekit.models.track import Track, STEPS_PER_TRACK

__all__ = [
    "Pattern",
    "Track",
    "STEPS_PER_TRACK",
    "render",
]
