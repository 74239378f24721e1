from __future__ import annotations

from ..core.agent import Agent
from ..core.config import ArenaConfig
from ..types.vectors import Position, Velocity
from ..utils.math2d import _clamp_length_xy_f, _reflect_axis


def reflect(position: Position, velocity: Velocity, arena: ArenaConfig) -> tuple[Position, Velocity]:
    """Mirror a position that left the inner arena back inside, flipping the matching velocity component.

    Each axis is handled independently, so a corner crossing reflects both.
    """
    x, vx = _reflect_axis(position.x, velocity.x, arena.left, arena.right)
    y, vy = _reflect_axis(position.y, velocity.y, arena.bottom, arena.top)
    return Position(x, y), Velocity(vx, vy)


def clamp_speed(velocity: Velocity, max_speed: float) -> Velocity:
    vx, vy = _clamp_length_xy_f(velocity.x, velocity.y, max_speed)
    return Velocity(vx, vy)


def integrate(agent: Agent, dt: float, arena: ArenaConfig, max_speed: float) -> tuple[Position, Velocity]:
    # Position advances with the velocity held before this tick's force.
    velocity_next = agent.velocity.add(agent.force.multiply(dt))
    position_next = agent.position.add(agent.velocity.multiply(dt))
    position_next, velocity_next = reflect(position_next, velocity_next, arena)
    return position_next, clamp_speed(velocity_next, max_speed)


def integrate_all(population: list[Agent], dt: float, arena: ArenaConfig, max_speed: float) -> None:
    for agent in population:
        agent.position, agent.velocity = integrate(agent, dt, arena, max_speed)
