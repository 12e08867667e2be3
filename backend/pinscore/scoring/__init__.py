"""Scoring engines."""

from . import bowling
from .bowling import Frame, TenPinBowling, replay, summary

__all__ = [
    "bowling",
    "Frame",
    "TenPinBowling",
    "replay",
    "summary",
]
