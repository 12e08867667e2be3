import os, sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from pinscore.exceptions import (
    BowlingError,
    DomainException,
    GameFinished,
    InvalidFrame,
    InvalidPins,
    InvalidRoll,
)


def test_bowling_errors_carry_problem_codes():
    cases = [
        (InvalidRoll(11), 422, "invalid_roll"),
        (InvalidFrame("too many pins"), 422, "invalid_frame"),
        (GameFinished(), 409, "game_finished"),
        (InvalidPins(12), 422, "invalid_pins"),
    ]
    for exc, status, code in cases:
        assert isinstance(exc, BowlingError)
        assert isinstance(exc, DomainException)
        assert exc.status_code == status
        assert exc.code == code


def test_error_text_is_the_detail():
    assert str(InvalidRoll(11)) == "Invalid roll with pins: 11"
    assert str(InvalidPins(12)) == "Invalid pins for frame: 12"
    assert str(InvalidRoll("x", detail="bad token")) == "bad token"
