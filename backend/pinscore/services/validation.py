from typing import Any, List, Optional, Sequence

from ..exceptions import InvalidRoll
from ..scoring.bowling import MAX_ROLLS


def parse_pins(raw: Any) -> int:
    """Convert a raw pin token into an ``int``.

    Only the type is checked here; the 0-10 range is enforced by the game
    itself so that every caller gets the same error for an out-of-range roll.
    """

    # Reject booleans explicitly (bool is a subclass of int in Python)
    if isinstance(raw, bool):
        raise InvalidRoll(raw, detail="Pins must be an integer (not a boolean).")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            raise InvalidRoll(raw, detail="Error parsing pins. Should be a number")
    raise InvalidRoll(raw, detail=f"Pins must be an integer, got {type(raw).__name__}.")


def validate_roll_sequence(
    rolls: Sequence[Any],
    *,
    max_rolls: Optional[int] = MAX_ROLLS,
) -> List[int]:
    """Normalise a sequence of raw pin tokens.

    Rules:
    - ``rolls`` must be a list-like sequence (strings are rejected)
    - At most ``max_rolls`` entries (if provided)
    - Each entry must parse with :func:`parse_pins`
    """

    if not isinstance(rolls, Sequence) or isinstance(rolls, (str, bytes)):
        raise InvalidRoll(
            rolls, detail="Rolls must be provided as a sequence of integers."
        )
    if max_rolls is not None and len(rolls) > max_rolls:
        raise InvalidRoll(
            rolls, detail=f"Too many rolls. Max allowed is {max_rolls}."
        )

    normalized: List[int] = []
    for index, raw in enumerate(rolls, start=1):
        try:
            normalized.append(parse_pins(raw))
        except InvalidRoll as exc:
            raise InvalidRoll(raw, detail=f"Roll #{index}: {exc.detail}")
    return normalized
