"""
data_models.py: Data structures for the game state.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List

from .constants import (
    BIRD_START_X, BIRD_START_Y, BIRD_WIDTH, BIRD_HEIGHT, JUMP_IMPULSE,
    INITIAL_ANGLE, PIPE_WIDTH, GAP_FRACTION, SPAWN_WIDTH_DIVISOR,
    MIN_SPAWN_INTERVAL, MAX_SPAWN_INTERVAL, BASE_GAME_SPEED,
    SPEED_REFERENCE_SIZE, MAX_GAME_SPEED, VARIANTS, VARIANT_CLASSIC,
    DEFAULT_VARIANT
)

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Session states."""
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class Avatar:
    """The player-controlled bird. Velocity is positive downward."""
    x: float = BIRD_START_X
    y: float = BIRD_START_Y
    width: float = BIRD_WIDTH
    height: float = BIRD_HEIGHT
    velocity: float = 0.0
    jump: float = JUMP_IMPULSE
    angle: float = INITIAL_ANGLE
    flap_timer: int = 0

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class Obstacle:
    """One top/bottom pipe pair scrolling to the left."""
    x: float
    top: float
    bottom: float
    gap: float
    speed: float
    width: float = PIPE_WIDTH
    passed: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass(frozen=True)
class ViewportSettings:
    """Constants derived from the viewport size, fixed until the next resize."""
    width: int
    height: int
    gap: float
    spawn_interval: int
    game_speed: float
    variant: str = DEFAULT_VARIANT

    @classmethod
    def from_viewport(cls, width: int, height: int,
                      variant: str = DEFAULT_VARIANT) -> "ViewportSettings":
        if variant not in VARIANTS:
            raise ValueError(f"Unknown variant {variant!r}, expected one of {VARIANTS}")

        if width < 1 or height < 1:
            logger.warning("Viewport %sx%s clamped to at least 1x1", width, height)
            width, height = max(int(width), 1), max(int(height), 1)

        interval = max(round(width / SPAWN_WIDTH_DIVISOR), 1)
        if variant == VARIANT_CLASSIC:
            speed = BASE_GAME_SPEED
        else:
            interval = min(max(interval, MIN_SPAWN_INTERVAL), MAX_SPAWN_INTERVAL)
            scaled = BASE_GAME_SPEED * max(width, height) / SPEED_REFERENCE_SIZE
            speed = min(max(scaled, BASE_GAME_SPEED), MAX_GAME_SPEED)

        return cls(
            width=width,
            height=height,
            gap=height * GAP_FRACTION,
            spawn_interval=interval,
            game_speed=speed,
            variant=variant,
        )


@dataclass
class SessionState:
    """All mutable state owned by the frame loop."""
    settings: ViewportSettings
    avatar: Avatar = field(default_factory=Avatar)
    obstacles: List[Obstacle] = field(default_factory=list)
    frames: int = 0
    score: int = 0
    phase: GamePhase = GamePhase.PLAYING

    @property
    def game_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER
