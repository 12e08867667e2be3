from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code


class BowlingError(DomainException):
    """Raised when a roll cannot be applied to a bowling game.

    A failed roll never mutates the game it was applied to.
    """


class InvalidRoll(BowlingError):
    def __init__(self, pins: object = None, *, detail: str | None = None) -> None:
        self.pins = pins
        super().__init__(
            status_code=422,
            title="Invalid roll",
            detail=detail or f"Invalid roll with pins: {pins}",
            code="invalid_roll",
        )


class InvalidFrame(BowlingError):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=422,
            title="Invalid frame",
            detail=detail,
            code="invalid_frame",
        )


class GameFinished(BowlingError):
    def __init__(self) -> None:
        super().__init__(
            status_code=409,
            title="Game finished",
            detail="Game is finished; no more rolls are allowed",
            code="game_finished",
        )


class InvalidPins(BowlingError):
    def __init__(self, pins: object) -> None:
        self.pins = pins
        super().__init__(
            status_code=422,
            title="Invalid pins",
            detail=f"Invalid pins for frame: {pins}",
            code="invalid_pins",
        )
