from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from .metrics import TickMetrics


@dataclass(slots=True)
class Snapshot:
    tick: int
    metrics: TickMetrics | None
    agents: List[Dict[str, Any]]
    metadata: "SnapshotMetadata"


@dataclass(slots=True)
class SnapshotMetadata:
    arena_width: float
    arena_height: float
    arena_margin: float
    max_speed: float
    sim_dt: float
    seed: int
    config_version: str
