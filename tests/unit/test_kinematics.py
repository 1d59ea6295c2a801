import math

import pytest

from catlauncher.config import PhysicsConfig
from catlauncher.sim.kinematics import integrate

PHYS = PhysicsConfig()
GROUND = 500.0


def test_gravity_then_drag_then_position(make_projectile):
    p = make_projectile(100.0, 100.0, vx=2.0, vy=-3.0)
    step = integrate(p, PHYS, GROUND)

    assert p.vx == pytest.approx(2.0 * 0.995)
    assert p.vy == pytest.approx((-3.0 + 0.35) * 0.995)
    assert p.x == pytest.approx(100.0 + 2.0 * 0.995)
    assert p.y == pytest.approx(100.0 + (-3.0 + 0.35) * 0.995)
    assert not p.on_ground
    assert not step.touched_ground
    assert not step.rested


def test_rotation_follows_velocity(make_projectile):
    p = make_projectile(100.0, 100.0, vx=4.0, vy=-4.0)
    integrate(p, PHYS, GROUND)
    assert p.rotation == pytest.approx(math.atan2(p.vy, p.vx))


def test_rotation_kept_when_nearly_still(make_projectile):
    p = make_projectile(100.0, 100.0, vx=0.05, vy=-0.4)
    p.rotation = 1.23
    integrate(p, PHYS, GROUND)
    assert abs(p.vx) < 0.1 and abs(p.vy) < 0.1
    assert p.rotation == 1.23


def test_bounce_branch(make_projectile):
    p = make_projectile(50.0, 485.0, vx=5.0, vy=10.0)
    step = integrate(p, PHYS, GROUND)

    vy_impact = (10.0 + 0.35) * 0.995
    assert p.y == GROUND - 10.0
    assert p.vy == pytest.approx(-0.6 * vy_impact)
    assert p.vx == pytest.approx(5.0 * 0.995 * 0.9)
    assert step.touched_ground and step.bounced and not step.rested
    assert not p.on_ground


def test_slide_branch(make_projectile):
    p = make_projectile(50.0, 489.5, vx=3.0, vy=0.5)
    step = integrate(p, PHYS, GROUND)

    assert p.y == GROUND - 10.0
    assert p.vy == 0.0
    assert p.vx == pytest.approx(3.0 * 0.995 * 0.9 * 0.9)
    assert p.on_ground
    assert step.touched_ground and not step.bounced and not step.rested


def test_rest_detection_zeroes_velocity(make_projectile):
    p = make_projectile(50.0, GROUND - 10.0, vx=0.1, vy=0.0, on_ground=True)
    step = integrate(p, PHYS, GROUND)

    assert step.rested
    assert p.vx == 0.0 and p.vy == 0.0
    assert p.on_ground
    assert p.y == GROUND - 10.0


def test_rest_is_a_fixed_point(make_projectile):
    p = make_projectile(50.0, GROUND - 10.0, vx=0.1, vy=0.0, on_ground=True)
    integrate(p, PHYS, GROUND)
    before = (p.x, p.y, p.vx, p.vy, p.rotation, p.on_ground)

    for _ in range(20):
        step = integrate(p, PHYS, GROUND)
        assert step.rested
        assert (p.x, p.y, p.vx, p.vy, p.rotation, p.on_ground) == before


def test_leaving_ground_clears_on_ground(make_projectile):
    p = make_projectile(50.0, 100.0, vx=1.0, vy=-5.0, on_ground=True)
    integrate(p, PHYS, GROUND)
    assert not p.on_ground


def test_slow_airborne_projectile_does_not_rest(make_projectile):
    # Rest detection only happens on ground contact.
    p = make_projectile(50.0, 100.0, vx=0.0, vy=-0.35)
    step = integrate(p, PHYS, GROUND)
    assert not step.rested
    assert not p.on_ground
