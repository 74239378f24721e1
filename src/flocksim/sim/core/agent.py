from __future__ import annotations

from dataclasses import dataclass, field

from ..types.vectors import Force, Position, Velocity


@dataclass(slots=True)
class Agent:
    id: int
    position: Position = field(default_factory=Position.origin)
    velocity: Velocity = field(default_factory=Velocity.origin)
    force: Force = field(default_factory=Force.origin)
