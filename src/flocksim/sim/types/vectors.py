from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar

from pygame.math import Vector2

from ..utils.math2d import _heading_xy

V = TypeVar("V", bound="Vec2")


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable 2D value shared by positions, velocities and forces.

    Arithmetic returns an instance of the receiver's class, so a ``Velocity``
    plus anything is still a ``Velocity``.
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def origin(cls: type[V]) -> V:
        return cls(0.0, 0.0)

    @classmethod
    def of(cls: type[V], other: Vec2) -> V:
        return cls(other.x, other.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        return _heading_xy(self.x, self.y)

    def distance(self, target: Vec2) -> float:
        return math.hypot(self.x - target.x, self.y - target.y)

    def add(self: V, target: Vec2) -> V:
        return type(self)(self.x + target.x, self.y + target.y)

    def diff(self: V, target: Vec2) -> V:
        return type(self)(self.x - target.x, self.y - target.y)

    def div(self: V, num: float) -> V:
        return type(self)(self.x / num, self.y / num)

    def multiply(self: V, num: float) -> V:
        return type(self)(self.x * num, self.y * num)

    def to_vector2(self) -> Vector2:
        return Vector2(self.x, self.y)


class Position(Vec2):
    __slots__ = ()


class Velocity(Vec2):
    __slots__ = ()


class Force(Vec2):
    __slots__ = ()
