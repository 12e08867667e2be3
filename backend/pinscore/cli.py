#!/usr/bin/env python3
"""Score a bowling game typed one roll per line.

Reading stops at a blank line or end of input. The running score is printed
after every accepted roll; the first rejected roll is printed and ends the
session with exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional, Sequence, TextIO

from .config import LOG_LEVEL
from .exceptions import BowlingError
from .scoring.bowling import TenPinBowling
from .services.validation import parse_pins

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def play(game: TenPinBowling, lines: Iterable[str], out: TextIO) -> Optional[BowlingError]:
    """Feed ``lines`` to ``game`` and return the error that stopped it, if any."""
    for line in lines:
        token = line.strip()
        if not token:
            break
        try:
            game.roll(parse_pins(token))
        except BowlingError as exc:
            logger.info("Roll %r rejected: %s", token, exc)
            print(exc, file=out)
            return exc
        print(f"Score: {game.score()}", file=out)
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read pin counts from stdin, one per line, and print the running score.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=LOG_LEVEL if LOG_LEVEL in LOG_LEVELS else "WARNING",
        help="Logging level (defaults to PINSCORE_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = TenPinBowling()
    error = play(game, sys.stdin, sys.stdout)
    if error is not None:
        return 1
    logger.debug("Input ended with score %d (finished=%s)", game.score(), game.finished())
    return 0


if __name__ == "__main__":
    sys.exit(main())
