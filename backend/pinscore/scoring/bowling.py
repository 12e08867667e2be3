"""Ten-pin bowling scoring engine.

Rolls are applied one at a time. Each accepted roll is routed into the open
frame (or opens a new one), credited as a bonus roll to every earlier frame
that still owes one, and the running total is recomputed from scratch.
"""
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Tuple

from ..exceptions import GameFinished, InvalidFrame, InvalidPins, InvalidRoll

PINS = 10
FRAMES = 10
MAX_FINAL_FRAME_PINS = 30
MAX_ROLLS = 21


def _check_pins(pins: int) -> None:
    if not 0 <= pins <= PINS:
        raise InvalidPins(pins)


@dataclass
class Frame:
    """Rolls of a single frame plus the bonus rolls credited to it."""

    rolls: List[int] = field(default_factory=list)
    bonus: List[int] = field(default_factory=list)

    @classmethod
    def create(cls, first_roll: int) -> "Frame":
        _check_pins(first_roll)
        return cls(rolls=[first_roll])

    def standing(self, is_final_frame: bool = False) -> int:
        """Pins left standing for the next roll of this frame."""
        if not is_final_frame:
            return PINS - self.roll_total()
        knocked = 0
        for pins in self.rolls:
            knocked += pins
            # the final frame re-racks after a strike or a spare
            if knocked == PINS:
                knocked = 0
        return PINS - knocked

    def roll(self, pins: int, is_final_frame: bool = False) -> None:
        _check_pins(pins)
        if self.is_complete(is_final_frame):
            raise InvalidFrame("Frame is already complete")
        limit = MAX_FINAL_FRAME_PINS if is_final_frame else PINS
        if self.roll_total() + pins > limit:
            raise InvalidFrame(f"Frame cannot be more than {limit} pins")
        standing = self.standing(is_final_frame)
        if pins > standing:
            raise InvalidFrame(
                f"Only {standing} pins left standing; cannot knock down {pins}"
            )
        self.rolls.append(pins)

    def is_complete(self, is_final_frame: bool = False) -> bool:
        if not is_final_frame:
            return self.is_strike() or len(self.rolls) >= 2
        if len(self.rolls) < 2:
            return False
        if self.is_strike() or sum(self.rolls[:2]) == PINS:
            return len(self.rolls) == 3
        return True

    def is_strike(self) -> bool:
        return bool(self.rolls) and self.rolls[0] == PINS

    def is_spare(self) -> bool:
        return len(self.rolls) == 2 and self.roll_total() == PINS

    def roll_total(self) -> int:
        return sum(self.rolls)

    def bonus_total(self) -> int:
        return sum(self.bonus)

    def bonus_owed(self) -> int:
        """Number of bonus rolls this frame is still waiting for."""
        if self.is_strike():
            quota = 2
        elif self.is_spare():
            quota = 1
        else:
            quota = 0
        return max(quota - len(self.bonus), 0)

    def add_bonus(self, pins: int) -> None:
        _check_pins(pins)
        self.bonus.append(pins)


class TenPinBowling:
    """Running score of a single ten-pin game.

    Frames are kept in play order and looked up by position; a frame never
    references its neighbours.
    """

    def __init__(self) -> None:
        self._frames: List[Frame] = []
        self._score = 0

    @property
    def frames(self) -> Tuple[Frame, ...]:
        """Snapshot of the frames played so far."""
        return tuple(
            replace(f, rolls=list(f.rolls), bonus=list(f.bonus)) for f in self._frames
        )

    @property
    def rolls(self) -> List[int]:
        return [pins for frame in self._frames for pins in frame.rolls]

    def roll(self, pins: int) -> None:
        if self.finished():
            raise GameFinished()
        if isinstance(pins, bool) or not isinstance(pins, int):
            raise InvalidRoll(pins)
        if not 0 <= pins <= PINS:
            raise InvalidRoll(pins)

        current = self._frames[-1] if self._frames else None
        opens_frame = current is None or current.is_complete(
            self._is_final(len(self._frames) - 1)
        )
        earlier = list(self._frames) if opens_frame else self._frames[:-1]
        owing = [frame for frame in earlier if frame.bonus_owed()]
        if owing:
            _check_pins(pins)

        if opens_frame:
            self._frames.append(Frame.create(pins))
        else:
            current.roll(pins, is_final_frame=self._is_final(len(self._frames) - 1))

        for frame in owing:
            frame.add_bonus(pins)

        self._score = sum(f.roll_total() + f.bonus_total() for f in self._frames)

    def score(self) -> int:
        return self._score

    def finished(self) -> bool:
        return len(self._frames) == FRAMES and self._frames[-1].is_complete(True)

    def frame_scores(self) -> List[int]:
        """Each frame's pins plus the bonus credited to it so far."""
        return [f.roll_total() + f.bonus_total() for f in self._frames]

    @staticmethod
    def _is_final(index: int) -> bool:
        return index == FRAMES - 1


def replay(rolls: Iterable[int]) -> TenPinBowling:
    """Apply ``rolls`` to a fresh game, raising on the first rejected roll."""
    game = TenPinBowling()
    for pins in rolls:
        game.roll(pins)
    return game


def summary(game: TenPinBowling) -> Dict:
    frames = []
    cumulative = 0
    for index, frame in enumerate(game.frames):
        score = frame.roll_total() + frame.bonus_total()
        cumulative += score
        is_final = index == FRAMES - 1
        frames.append(
            {
                "rolls": frame.rolls,
                "bonus": frame.bonus,
                "score": score,
                "cumulative": cumulative,
                "strike": frame.is_strike(),
                "spare": frame.is_spare() or (
                    is_final
                    and not frame.is_strike()
                    and len(frame.rolls) >= 2
                    and sum(frame.rolls[:2]) == PINS
                ),
                "complete": frame.is_complete(is_final),
            }
        )
    return {
        "frames": frames,
        "total": game.score(),
        "finished": game.finished(),
        "rolls": game.rolls,
    }
