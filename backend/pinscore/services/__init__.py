"""Internal application services (pure helpers, no I/O)."""

from .validation import parse_pins, validate_roll_sequence

__all__ = [
    "parse_pins",
    "validate_roll_sequence",
]
