import random

import pytest

from flappy.constants import (
    GRAVITY, JUMP_IMPULSE, MAX_DOWN_ANGLE, ANGLE_STEP, FLAP_ANGLE_KICK,
    FLAP_TIMER_FRAMES, VARIANT_CLASSIC
)
from flappy.data_models import Avatar, Obstacle, ViewportSettings
from flappy.physics_core import PhysicsCore


@pytest.fixture
def core():
    return PhysicsCore()


def pipe(x, top, bottom, height=600):
    return Obstacle(x=x, top=top, bottom=bottom, gap=height - top - bottom, speed=1.0)


@pytest.mark.parametrize("velocity", [-4.6, 0.0, 2.5, 10.0])
def test_gravity_adds_constant_then_moves(core, velocity):
    avatar = Avatar(y=100.0, velocity=velocity)
    core.apply_gravity_and_movement(avatar)
    assert avatar.velocity == pytest.approx(velocity + GRAVITY)
    assert avatar.y == pytest.approx(100.0 + velocity + GRAVITY)


@pytest.mark.parametrize("velocity", [-3.0, 0.0, 7.5])
def test_flap_overrides_velocity(core, velocity):
    avatar = Avatar(velocity=velocity)
    core.flap(avatar)
    assert avatar.velocity == -JUMP_IMPULSE
    assert avatar.angle == pytest.approx(FLAP_ANGLE_KICK)
    assert avatar.flap_timer == FLAP_TIMER_FRAMES


def test_tilt_only_while_falling(core):
    avatar = Avatar(velocity=-1.0)
    core.apply_tilt(avatar)
    assert avatar.angle == 0.0

    avatar.velocity = 1.0
    core.apply_tilt(avatar)
    assert avatar.angle == pytest.approx(ANGLE_STEP)


def test_tilt_clamped_at_max_down_angle(core):
    avatar = Avatar(velocity=1.0, angle=MAX_DOWN_ANGLE - ANGLE_STEP / 2)
    core.apply_tilt(avatar)
    assert avatar.angle == MAX_DOWN_ANGLE
    core.apply_tilt(avatar)
    assert avatar.angle == MAX_DOWN_ANGLE


def test_repeated_flaps_are_not_clamped_upward(core):
    avatar = Avatar()
    for _ in range(5):
        core.flap(avatar)
    assert avatar.angle == pytest.approx(5 * FLAP_ANGLE_KICK)
    assert avatar.angle < -MAX_DOWN_ANGLE


def test_flap_timer_counts_down_to_zero(core):
    avatar = Avatar(flap_timer=2, velocity=-1.0)
    core.apply_tilt(avatar)
    core.apply_tilt(avatar)
    core.apply_tilt(avatar)
    assert avatar.flap_timer == 0


def test_ground_contact_at_lower_edge(core):
    avatar = Avatar(y=530.0)
    assert not core.hit_ground(avatar, 600)
    avatar.y = 531.0
    assert core.hit_ground(avatar, 600)


def test_step_avatar_reports_ground(core):
    avatar = Avatar(y=531.0, velocity=0.0)
    assert core.step_avatar(avatar, 600)


def test_spawn_geometry():
    core = PhysicsCore()
    rng = random.Random(3)
    settings = ViewportSettings.from_viewport(900, 600, VARIANT_CLASSIC)
    for _ in range(200):
        obstacle = core.spawn_obstacle(settings, rng)
        assert obstacle.gap == pytest.approx(200.0)
        assert 0 <= obstacle.top < 300
        assert obstacle.top + obstacle.gap + obstacle.bottom == pytest.approx(600)
        assert obstacle.x == 900
        assert obstacle.speed == settings.game_speed
        assert not obstacle.passed


def test_collision_below_gap(core):
    # Gap spans rows [100, 300)
    avatar = Avatar(x=50, y=250)
    assert core.check_collision(avatar, pipe(60, 100, 300), 600)


def test_no_collision_inside_gap(core):
    avatar = Avatar(x=50, y=150)
    assert not core.check_collision(avatar, pipe(60, 100, 300), 600)


def test_collision_above_gap(core):
    avatar = Avatar(x=50, y=90)
    assert core.check_collision(avatar, pipe(60, 100, 300), 600)


@pytest.mark.parametrize("x", [117.0, 200.0, -50.0, -10.0])
def test_no_collision_without_horizontal_overlap(core, x):
    avatar = Avatar(x=50, y=0)
    assert not core.check_collision(avatar, pipe(x, 100, 300), 600)


def test_pass_and_off_screen(core):
    avatar = Avatar(x=50)
    obstacle = pipe(0.5, 100, 300)
    assert not core.has_passed(avatar, obstacle)
    obstacle.x = -0.5
    assert core.has_passed(avatar, obstacle)
    assert not core.is_off_screen(obstacle)
    obstacle.x = -50
    assert core.is_off_screen(obstacle)


def test_respawn(core):
    avatar = Avatar(y=400, velocity=3.0, angle=-2.0, flap_timer=4)
    core.respawn(avatar)
    assert avatar == Avatar()
