"""
physics_engine.py: The session state machine driving one game.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_VARIANT
from .data_models import Avatar, GamePhase, SessionState, ViewportSettings
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class GameEngine(PhysicsCore):
    """
    Owns the whole session and mutates it only through step, trigger,
    flap, reset and resize. Inherits avatar/obstacle physics from PhysicsCore.
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    variant: str = DEFAULT_VARIANT
    rng: random.Random = field(default_factory=random.Random)
    state: SessionState = field(init=False)

    def __post_init__(self):
        settings = ViewportSettings.from_viewport(self.width, self.height, self.variant)
        self.state = SessionState(settings=settings)
        self.width, self.height = settings.width, settings.height

    @property
    def settings(self) -> ViewportSettings:
        return self.state.settings

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def is_playing(self) -> bool:
        return self.state.phase is GamePhase.PLAYING

    def reset(self):
        """Back to the initial PLAYING state; calling it twice changes nothing more."""
        state = self.state
        self.respawn(state.avatar)
        state.obstacles = []
        state.frames = 0
        state.score = 0
        state.phase = GamePhase.PLAYING
        logger.info("Session reset")

    def resize(self, width: int, height: int):
        """Recomputes viewport-derived constants and discards all progress."""
        self.reset()
        self.state.settings = ViewportSettings.from_viewport(width, height, self.variant)
        self.width, self.height = self.settings.width, self.settings.height
        logger.info(
            "Viewport resized to %sx%s (speed %.2f, spawn every %s frames)",
            self.width, self.height, self.settings.game_speed, self.settings.spawn_interval)

    def flap(self, avatar: Optional[Avatar] = None):
        """Flap impulse; ignored once the session is over."""
        if not self.is_playing:
            return
        super().flap(avatar or self.state.avatar)

    def trigger(self) -> bool:
        """
        Handles the single player input (key, click or touch).
        Flaps while playing, restarts when the game is over.
        Returns True when the input restarted the session.
        """
        if self.is_playing:
            self.flap()
            return False

        logger.info("Restarting after game over")
        self.reset()
        return True

    def _game_over(self, reason: str):
        if self.state.phase is GamePhase.GAME_OVER:
            return
        self.state.phase = GamePhase.GAME_OVER
        logger.info("Game over (%s) at frame %s, score %s",
                    reason, self.state.frames, self.state.score)

    def step(self):
        """
        The main simulation step for one frame.
        A no-op while the game is over.
        """
        state = self.state
        if state.phase is not GamePhase.PLAYING:
            return

        settings = state.settings
        avatar = state.avatar

        # 1. Periodic spawn
        if state.frames % settings.spawn_interval == 0:
            obstacle = self.spawn_obstacle(settings, self.rng)
            state.obstacles.append(obstacle)
            logger.debug("Spawned obstacle top=%.1f bottom=%.1f at frame %s",
                         obstacle.top, obstacle.bottom, state.frames)

        # 2. Advance, collide and score in insertion order
        for obstacle in state.obstacles:
            self.step_obstacle(obstacle)

            if self.check_collision(avatar, obstacle, settings.height):
                self._game_over("collision")

            if not obstacle.passed and self.has_passed(avatar, obstacle):
                obstacle.passed = True
                state.score += 1
                logger.debug("Score %s", state.score)

        # 3. Prune obstacles whose trailing edge left the screen
        state.obstacles = [o for o in state.obstacles if not self.is_off_screen(o)]

        # 4. Avatar physics
        if self.step_avatar(avatar, settings.height):
            self._game_over("ground")

        if state.phase is GamePhase.PLAYING:
            state.frames += 1
