from __future__ import annotations

import math

import pytest
from pygame.math import Vector2

from flocksim.sim.types.vectors import Force, Position, Vec2, Velocity


def test_arithmetic_keeps_the_receiver_type():
    velocity = Velocity(3.0, 4.0)

    assert type(velocity.add(Force(1.0, 1.0))) is Velocity
    assert type(velocity.diff(Velocity(1.0, 0.0))) is Velocity
    assert type(velocity.multiply(2.0)) is Velocity
    assert type(velocity.div(2.0)) is Velocity
    assert type(Force.origin()) is Force
    assert Force.of(velocity) == Force(3.0, 4.0)


def test_distinct_roles_never_compare_equal():
    assert Position(1.0, 2.0) != Velocity(1.0, 2.0)
    assert Position(1.0, 2.0) == Position(1.0, 2.0)


def test_basic_operations():
    a = Position(1.0, 2.0)
    b = Position(4.0, 6.0)

    assert a.add(b) == Position(5.0, 8.0)
    assert b.diff(a) == Position(3.0, 4.0)
    assert b.div(2.0) == Position(2.0, 3.0)
    assert a.multiply(-1.0) == Position(-1.0, -2.0)
    assert a.distance(b) == pytest.approx(5.0)
    assert b.diff(a).length() == pytest.approx(5.0)
    assert Position.origin() == Position(0.0, 0.0)


def test_values_are_immutable():
    position = Position(1.0, 1.0)
    with pytest.raises(AttributeError):
        position.x = 5.0  # type: ignore[misc]


def test_angle_of_zero_vector_is_zero():
    assert Vec2().angle() == 0.0
    assert Velocity(0.0, 2.0).angle() == pytest.approx(math.pi / 2)


def test_conversion_to_pygame_vector():
    assert Position(1.5, -2.0).to_vector2() == Vector2(1.5, -2.0)
