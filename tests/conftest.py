import os
import random

import pytest

# Headless pygame for the client and canvas tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy.constants import VARIANT_CLASSIC, VARIANT_ENHANCED  # noqa: E402
from flappy.physics_engine import GameEngine  # noqa: E402


@pytest.fixture
def engine():
    """Classic 600x600 session: speed 1.0, a spawn every 200 frames."""
    return GameEngine(width=600, height=600, variant=VARIANT_CLASSIC, rng=random.Random(7))


@pytest.fixture
def enhanced_engine():
    return GameEngine(width=800, height=600, variant=VARIANT_ENHANCED, rng=random.Random(7))
