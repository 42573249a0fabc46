"""
physics_core.py: The deterministic per-frame kinematics and collision logic.
"""

import random
from typing import Optional

from .constants import (
    GRAVITY, MAX_DOWN_ANGLE, ANGLE_STEP, FLAP_ANGLE_KICK, FLAP_TIMER_FRAMES,
    TOP_MAX_FRACTION, BIRD_START_X, BIRD_START_Y, INITIAL_ANGLE
)
from .data_models import Avatar, Obstacle, ViewportSettings


class PhysicsCore:
    """
    Frame-step physics shared by every variant.
    One call == one displayed frame; there is no sub-stepping.
    """

    GRAVITY = GRAVITY

    def apply_gravity_and_movement(self, avatar: Avatar):
        """Euler step: velocity gains gravity, then y advances by velocity."""
        avatar.velocity += self.GRAVITY
        avatar.y += avatar.velocity

    def apply_tilt(self, avatar: Avatar):
        # Only downward tilt is clamped; flap kicks may push below -MAX_DOWN_ANGLE
        if avatar.velocity > 0 and avatar.angle < MAX_DOWN_ANGLE:
            avatar.angle = min(avatar.angle + ANGLE_STEP, MAX_DOWN_ANGLE)

        if avatar.flap_timer > 0:
            avatar.flap_timer -= 1

    def step_avatar(self, avatar: Avatar, height: float) -> bool:
        """
        Advances the avatar one frame.
        Returns True when its lower edge reaches the ground.
        """
        self.apply_gravity_and_movement(avatar)
        self.apply_tilt(avatar)
        return self.hit_ground(avatar, height)

    def flap(self, avatar: Avatar):
        """Overrides velocity with the upward impulse and kicks the angle."""
        avatar.velocity = -avatar.jump
        avatar.angle += FLAP_ANGLE_KICK
        avatar.flap_timer = FLAP_TIMER_FRAMES

    def hit_ground(self, avatar: Avatar, height: float) -> bool:
        return avatar.bottom >= height

    def spawn_obstacle(self, settings: ViewportSettings,
                       rng: Optional[random.Random] = None) -> Obstacle:
        """New pipe pair at the right edge; gap is always fully on screen."""
        rng = rng or random
        height = settings.height
        top = rng.random() * (height * TOP_MAX_FRACTION)
        gap = settings.gap
        return Obstacle(
            x=float(settings.width),
            top=top,
            bottom=height - (top + gap),
            gap=gap,
            speed=settings.game_speed,
        )

    def step_obstacle(self, obstacle: Obstacle):
        obstacle.x -= obstacle.speed

    def check_collision(self, avatar: Avatar, obstacle: Obstacle, height: float) -> bool:
        """True when the avatar overlaps pipe material rather than the gap."""
        overlaps_x = avatar.x < obstacle.right and avatar.right > obstacle.x
        if not overlaps_x:
            return False
        return avatar.y < obstacle.top or avatar.bottom > height - obstacle.bottom

    def has_passed(self, avatar: Avatar, obstacle: Obstacle) -> bool:
        return obstacle.right < avatar.x

    def is_off_screen(self, obstacle: Obstacle) -> bool:
        return obstacle.right <= 0

    def respawn(self, avatar: Avatar):
        avatar.x = BIRD_START_X
        avatar.y = BIRD_START_Y
        avatar.velocity = 0.0
        avatar.angle = INITIAL_ANGLE
        avatar.flap_timer = 0
