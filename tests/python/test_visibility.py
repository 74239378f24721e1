from __future__ import annotations

import math

from flocksim.sim.systems.visibility import is_in_range
from flocksim.sim.types.vectors import Position, Velocity

EAST = Velocity(10.0, 0.0)


def test_distance_boundary_is_inclusive():
    origin = Position(0.0, 0.0)

    assert is_in_range(origin, Position(30.0, 0.0), 30.0, EAST, math.pi)
    assert not is_in_range(origin, Position(30.0 + 1e-9, 0.0), 30.0, EAST, math.pi)


def test_angle_boundary_is_inclusive():
    origin = Position(0.0, 0.0)

    # Straight up is exactly pi/2 from an eastward heading, i.e. half of a pi-wide cone.
    assert is_in_range(origin, Position(0.0, 10.0), 20.0, EAST, math.pi)
    assert is_in_range(origin, Position(0.0, -10.0), 20.0, EAST, math.pi)
    assert not is_in_range(origin, Position(-0.001, 10.0), 20.0, EAST, math.pi)


def test_range_is_not_symmetric():
    leader = Position(10.0, 0.0)
    follower = Position(0.0, 0.0)
    both_heading_east = EAST

    assert is_in_range(follower, leader, 50.0, both_heading_east, math.radians(120))
    assert not is_in_range(leader, follower, 50.0, both_heading_east, math.radians(120))


def test_angle_wraps_across_pi():
    viewer = Position(0.0, 0.0)
    heading_west_slightly_up = Velocity(-10.0, 0.1)
    target_west_slightly_down = Position(-10.0, -0.1)

    assert is_in_range(viewer, target_west_slightly_down, 20.0, heading_west_slightly_up, math.radians(10))


def test_full_circle_sees_behind():
    assert is_in_range(Position(0.0, 0.0), Position(-5.0, 0.0), 10.0, EAST, 2 * math.pi)


def test_zero_velocity_looks_along_positive_x():
    still = Velocity(0.0, 0.0)

    assert is_in_range(Position(0.0, 0.0), Position(5.0, 0.0), 10.0, still, math.radians(90))
    assert not is_in_range(Position(0.0, 0.0), Position(-5.0, 0.0), 10.0, still, math.radians(90))


def test_target_on_viewer_has_bearing_zero():
    here = Position(1.0, 1.0)

    assert is_in_range(here, here, 0.0, Velocity(1.0, 0.0), 0.0)
    assert not is_in_range(here, here, 0.0, Velocity(-1.0, 0.0), math.radians(90))
