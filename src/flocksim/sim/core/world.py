from __future__ import annotations

from time import perf_counter
from typing import Any, Dict, List

from loguru import logger

from .agent import Agent
from .config import SimulationConfig
from .rng import DeterministicRng
from ..systems import appearance, integrator, metrics as metrics_system, steering
from ..types.input import MouseState
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotMetadata
from ..types.vectors import Force, Position, Velocity


class World:
    """Owns the flock and advances it one tick at a time."""

    def __init__(self, config: SimulationConfig):
        self._config = config
        self._rng = DeterministicRng(config.seed)
        self._agents: List[Agent] = []
        self._metrics: TickMetrics | None = None
        self._bootstrap_population()

    @property
    def agents(self) -> List[Agent]:
        return self._agents

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    def reset(self) -> None:
        self._agents.clear()
        self._rng.reset()
        self._metrics = None
        self._bootstrap_population()

    def step(self, tick: int, dt: float | None = None, mouse: MouseState | None = None) -> TickMetrics:
        start = perf_counter()
        config = self._config
        dt = config.time_step if dt is None else dt
        mouse = MouseState.idle() if mouse is None else mouse

        breakdowns = steering.compute_breakdowns(self._agents, mouse, config)
        steering.apply_forces(self._agents, {agent_id: parts.total() for agent_id, parts in breakdowns.items()})
        integrator.integrate_all(self._agents, dt, config.arena, config.max_speed)

        elapsed_ms = (perf_counter() - start) * 1000.0
        metrics = metrics_system.create_metrics(tick, self._agents, breakdowns, elapsed_ms)
        self._metrics = metrics
        return metrics

    def snapshot(self, tick: int) -> Snapshot:
        config = self._config
        metadata = SnapshotMetadata(
            arena_width=config.arena.width,
            arena_height=config.arena.height,
            arena_margin=config.arena.margin,
            max_speed=config.max_speed,
            sim_dt=config.time_step,
            seed=config.seed,
            config_version=config.config_version,
        )
        return Snapshot(
            tick=tick,
            metrics=self._metrics,
            agents=[self._agent_snapshot(agent) for agent in self._agents],
            metadata=metadata,
        )

    def _bootstrap_population(self) -> None:
        config = self._config
        spawn = config.spawn
        for agent_id in range(config.agent_count):
            position = Position(
                self._rng.next_centered(spawn.width),
                self._rng.next_centered(spawn.height),
            )
            velocity = Velocity(
                self._rng.next_centered(config.max_speed),
                self._rng.next_centered(config.max_speed),
            )
            self._agents.append(Agent(id=agent_id, position=position, velocity=velocity, force=Force.origin()))
        logger.debug(
            "Spawned {} agents in a {}x{} region (seed={})",
            len(self._agents),
            spawn.width,
            spawn.height,
            self._rng.seed,
        )

    def _agent_snapshot(self, agent: Agent) -> Dict[str, Any]:
        look = appearance.describe(agent, self._config.max_speed, self._config.display.lightness)
        return {
            "id": agent.id,
            "x": agent.position.x,
            "y": agent.position.y,
            "vx": agent.velocity.x,
            "vy": agent.velocity.y,
            "speed": agent.velocity.length(),
            "heading": look.heading,
            "hue": look.hue,
            "saturation": look.saturation,
            "lightness": look.lightness,
        }
