import logging

from fastapi import APIRouter

from ..exceptions import BowlingError
from ..schemas import GameSummaryOut, RollsIn
from ..scoring import bowling
from ..services.validation import validate_roll_sequence

logger = logging.getLogger(__name__)

# Resource-only prefix
router = APIRouter(prefix="/bowling", tags=["bowling"])


# POST /api/v0/bowling/score
@router.post("/score", response_model=GameSummaryOut)
def score_game(body: RollsIn) -> GameSummaryOut:
    """Replay ``body.rolls`` on a fresh game and return its summary.

    Nothing is stored between calls; each request scores its own game.
    """
    try:
        rolls = validate_roll_sequence(body.rolls)
        game = bowling.replay(rolls)
    except BowlingError as exc:
        logger.info("Rejected rolls %s: %s", body.rolls, exc)
        raise
    result = bowling.summary(game)
    logger.debug("Scored %d rolls: total=%d", len(rolls), result["total"])
    return GameSummaryOut(**result)
