import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pinscore.scoring import bowling  # noqa: E402


@pytest.fixture()
def game():
    """A fresh game; each test owns its own instance."""
    return bowling.TenPinBowling()
