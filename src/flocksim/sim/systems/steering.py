from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from ..core.agent import Agent
from ..core.config import ArenaConfig, SimulationConfig
from ..types.input import MouseState
from ..types.vectors import Force, Position, Velocity
from .visibility import is_in_range


class _Sample(NamedTuple):
    id: int
    position: Position
    velocity: Velocity


@dataclass(frozen=True, slots=True)
class SteeringBreakdown:
    separation: Force
    alignment: Force
    cohesion: Force
    mouse: Force
    mouse_engaged: bool = False

    def total(self) -> Force:
        return self.separation.add(self.alignment).add(self.cohesion).add(self.mouse)


def separation(self_pos: Position, target_pos: Position) -> Force:
    dist = self_pos.distance(target_pos)
    # Squaring a subnormal gap underflows to zero.
    dist_sq = dist * dist
    if dist_sq > 0.0:
        return Force.of(self_pos.diff(target_pos).div(dist_sq))
    return Force.origin()


def alignment(self_velocity: Velocity, average_velocity: Velocity) -> Force:
    return Force.of(average_velocity.diff(self_velocity))


def cohesion(self_pos: Position, centroid: Position) -> Force:
    return Force.of(centroid.diff(self_pos))


def mouse_to_world(cursor: Tuple[float, float], arena: ArenaConfig) -> Position:
    """Map window pixels (origin top left, y down) into the centred, y-up arena frame."""
    return Position(cursor[0] - arena.width / 2.0, -(cursor[1] - arena.height / 2.0))


def _snapshot(population: Iterable[Agent]) -> List[_Sample]:
    return sorted(
        (_Sample(agent.id, agent.position, agent.velocity) for agent in population),
        key=lambda sample: sample.id,
    )


def _steer(
    base: _Sample,
    samples: Sequence[_Sample],
    mouse: MouseState,
    mouse_pos: Optional[Position],
    config: SimulationConfig,
) -> SteeringBreakdown:
    sep = config.separation
    ali = config.alignment
    coh = config.cohesion
    sep_angle = sep.sight_angle
    ali_angle = ali.sight_angle
    coh_angle = coh.sight_angle
    pos_base = base.position
    vel_base = base.velocity

    sum_separation = Force.origin()
    sum_alignment_vel = Velocity.origin()
    sum_cohesion_pos = Position.origin()
    alignment_count = 0
    cohesion_count = 0

    for target in samples:
        if target.id == base.id:
            continue
        pos_target = target.position
        if is_in_range(pos_base, pos_target, sep.radius, vel_base, sep_angle) and not is_in_range(
            pos_base, pos_target, sep.min_range, vel_base, sep_angle
        ):
            sum_separation = sum_separation.add(separation(pos_base, pos_target))
        if is_in_range(pos_base, pos_target, ali.radius, vel_base, ali_angle):
            sum_alignment_vel = sum_alignment_vel.add(target.velocity)
            alignment_count += 1
        if is_in_range(pos_base, pos_target, coh.radius, vel_base, coh_angle):
            sum_cohesion_pos = sum_cohesion_pos.add(pos_target)
            cohesion_count += 1

    separation_force = sum_separation.multiply(sep.coefficient)
    alignment_force = Force.origin()
    if alignment_count > 0:
        average_velocity = sum_alignment_vel.div(alignment_count)
        alignment_force = alignment(vel_base, average_velocity).multiply(ali.coefficient)
    cohesion_force = Force.origin()
    if cohesion_count > 0:
        centroid = sum_cohesion_pos.div(cohesion_count)
        cohesion_force = cohesion(pos_base, centroid).multiply(coh.coefficient)

    mouse_force = Force.origin()
    engaged = False
    if mouse.engaged and mouse_pos is not None and is_in_range(
        pos_base, mouse_pos, config.mouse.radius, vel_base, config.mouse.sight_angle
    ):
        if mouse.right:
            mouse_force = mouse_force.add(separation(pos_base, mouse_pos))
            engaged = True
        if mouse.left:
            mouse_force = mouse_force.diff(separation(pos_base, mouse_pos))
            engaged = True

    return SteeringBreakdown(
        separation=separation_force,
        alignment=alignment_force,
        cohesion=cohesion_force,
        mouse=mouse_force.multiply(config.mouse.coefficient),
        mouse_engaged=engaged,
    )


def _mouse_position(mouse: MouseState, config: SimulationConfig) -> Optional[Position]:
    if mouse.cursor is None:
        return None
    return mouse_to_world(mouse.cursor, config.arena)


def compute_steering(
    agent: Agent,
    population: Iterable[Agent],
    mouse: MouseState,
    config: SimulationConfig,
) -> SteeringBreakdown:
    base = _Sample(agent.id, agent.position, agent.velocity)
    return _steer(base, _snapshot(population), mouse, _mouse_position(mouse, config), config)


def compute_breakdowns(
    population: Iterable[Agent],
    mouse: MouseState,
    config: SimulationConfig,
) -> Dict[int, SteeringBreakdown]:
    samples = _snapshot(population)
    mouse_pos = _mouse_position(mouse, config)
    return {base.id: _steer(base, samples, mouse, mouse_pos, config) for base in samples}


def compute_forces(
    population: Iterable[Agent],
    mouse: MouseState,
    config: SimulationConfig,
) -> Dict[int, Force]:
    """Net steering force per agent id, computed from one consistent read of the population.

    Agents are scanned in ascending id order whatever order they arrive in,
    so the result is bit-for-bit independent of iteration order.
    """
    return {agent_id: parts.total() for agent_id, parts in compute_breakdowns(population, mouse, config).items()}


def apply_forces(population: Iterable[Agent], forces: Dict[int, Force]) -> None:
    for agent in population:
        agent.force = forces[agent.id]
