from __future__ import annotations

from typing import Dict, List

from ..core.agent import Agent
from ..types.metrics import TickMetrics
from .steering import SteeringBreakdown


def create_metrics(
    tick: int,
    agents: List[Agent],
    breakdowns: Dict[int, SteeringBreakdown],
    duration_ms: float,
) -> TickMetrics:
    population = len(agents)
    speeds = [agent.velocity.length() for agent in agents]
    return TickMetrics(
        tick=tick,
        population=population,
        average_speed=0.0 if population == 0 else sum(speeds) / population,
        max_speed=max(speeds, default=0.0),
        neighbor_checks=population * population,
        mouse_influenced=sum(1 for parts in breakdowns.values() if parts.mouse_engaged),
        tick_duration_ms=duration_ms,
    )
