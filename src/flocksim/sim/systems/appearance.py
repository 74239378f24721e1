from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.agent import Agent
from ..types.vectors import Vec2
from ..utils.math2d import _clamp_value


@dataclass(frozen=True, slots=True)
class AgentAppearance:
    heading: float
    hue: float
    saturation: float
    lightness: float


def heading(velocity: Vec2) -> float:
    """Direction of travel in radians, in ``[-pi, pi]``; a zero velocity faces +x."""
    return velocity.angle()


def hue(velocity: Vec2) -> float:
    return math.degrees(heading(velocity)) + 180.0


def saturation(velocity: Vec2, max_speed: float) -> float:
    if max_speed <= 0.0:
        return 0.0
    return _clamp_value(velocity.length() / max_speed, 0.0, 1.0)


def describe(agent: Agent, max_speed: float, lightness: float) -> AgentAppearance:
    velocity = agent.velocity
    return AgentAppearance(
        heading=heading(velocity),
        hue=hue(velocity),
        saturation=saturation(velocity, max_speed),
        lightness=lightness,
    )
