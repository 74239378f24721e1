from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from loguru import logger


class ConfigError(ValueError):
    pass


@dataclass
class BehaviorConfig:
    coefficient: float = 1.0
    radius: float = 0.0
    sight_degrees: float = 360.0
    # Only separation uses this; neighbours closer than it are ignored.
    min_range: float = 0.0

    @property
    def sight_angle(self) -> float:
        return math.radians(self.sight_degrees)


@dataclass
class ArenaConfig:
    width: float = 700.0
    height: float = 500.0
    margin: float = 20.0

    @property
    def left(self) -> float:
        return -self.width / 2.0 + self.margin

    @property
    def right(self) -> float:
        return self.width / 2.0 - self.margin

    @property
    def bottom(self) -> float:
        return -self.height / 2.0 + self.margin

    @property
    def top(self) -> float:
        return self.height / 2.0 - self.margin


@dataclass
class SpawnConfig:
    width: float = 500.0
    height: float = 500.0


@dataclass
class DisplayConfig:
    title: str = "boid system"
    fish_length: float = 3.0
    fish_width: float = 1.0
    lightness: float = 0.7
    fps: int = 60
    # Longer frames are shortened so a stalled window does not launch the flock.
    max_frame_time: float = 0.1
    background: Tuple[int, int, int] = (0, 0, 0)


def _separation_defaults() -> BehaviorConfig:
    return BehaviorConfig(coefficient=500.0, radius=120.0, sight_degrees=360.0, min_range=1e-5)


def _alignment_defaults() -> BehaviorConfig:
    return BehaviorConfig(coefficient=1.0, radius=30.0, sight_degrees=120.0)


def _cohesion_defaults() -> BehaviorConfig:
    return BehaviorConfig(coefficient=10.0, radius=80.0, sight_degrees=300.0)


def _mouse_defaults() -> BehaviorConfig:
    return BehaviorConfig(coefficient=30000.0, radius=240.0, sight_degrees=120.0)


_BEHAVIOR_DEFAULTS = {
    "separation": _separation_defaults,
    "alignment": _alignment_defaults,
    "cohesion": _cohesion_defaults,
    "mouse": _mouse_defaults,
}


@dataclass
class SimulationConfig:
    agent_count: int = 200
    max_speed: float = 100.0
    seed: int = 42
    time_step: float = 1.0 / 60.0
    config_version: str = "v1"
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    spawn: SpawnConfig = field(default_factory=SpawnConfig)
    separation: BehaviorConfig = field(default_factory=_separation_defaults)
    alignment: BehaviorConfig = field(default_factory=_alignment_defaults)
    cohesion: BehaviorConfig = field(default_factory=_cohesion_defaults)
    mouse: BehaviorConfig = field(default_factory=_mouse_defaults)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.agent_count < 0:
            raise ConfigError(f"agent_count must be non-negative, got {self.agent_count}")
        if self.max_speed <= 0:
            raise ConfigError(f"max_speed must be positive, got {self.max_speed}")
        if self.time_step <= 0:
            raise ConfigError(f"time_step must be positive, got {self.time_step}")
        arena = self.arena
        if arena.margin < 0:
            raise ConfigError(f"arena margin must be non-negative, got {arena.margin}")
        if arena.width <= 2 * arena.margin or arena.height <= 2 * arena.margin:
            raise ConfigError(
                f"arena {arena.width}x{arena.height} leaves no room inside a {arena.margin} margin"
            )
        if self.spawn.width < 0 or self.spawn.height < 0:
            raise ConfigError("spawn region dimensions must be non-negative")
        for name in _BEHAVIOR_DEFAULTS:
            behavior: BehaviorConfig = getattr(self, name)
            if behavior.radius < 0 or behavior.min_range < 0:
                raise ConfigError(f"{name}: radius and min_range must be non-negative")
            if not 0 <= behavior.sight_degrees <= 360:
                raise ConfigError(f"{name}: sight_degrees must lie in [0, 360], got {behavior.sight_degrees}")
        display = self.display
        if not 0.0 <= display.lightness <= 1.0:
            raise ConfigError(f"display lightness must lie in [0, 1], got {display.lightness}")
        if display.fps <= 0:
            raise ConfigError(f"display fps must be positive, got {display.fps}")
        if display.max_frame_time <= 0:
            raise ConfigError(f"display max_frame_time must be positive, got {display.max_frame_time}")

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        logger.debug("Loading configuration from {}", path)
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


def _behavior(raw: Dict[str, Any], name: str) -> BehaviorConfig:
    values = raw.get(name)
    default = _BEHAVIOR_DEFAULTS[name]()
    if not values:
        return default
    merged = {
        "coefficient": default.coefficient,
        "radius": default.radius,
        "sight_degrees": default.sight_degrees,
        "min_range": default.min_range,
    }
    merged.update(values)
    return BehaviorConfig(**merged)


def load_config(raw: dict) -> SimulationConfig:
    if not isinstance(raw, dict):
        raise ConfigError(f"configuration root must be a mapping, got {type(raw).__name__}")
    arena = ArenaConfig(**raw.get("arena", {}))
    spawn = SpawnConfig(**raw.get("spawn", {}))
    display_raw = dict(raw.get("display", {}))
    if "background" in display_raw:
        display_raw["background"] = tuple(int(c) for c in display_raw["background"])
    display = DisplayConfig(**display_raw)
    behaviors = {name: _behavior(raw, name) for name in _BEHAVIOR_DEFAULTS}
    sim_values = {
        k: v for k, v in raw.items() if k not in {"arena", "spawn", "display", *_BEHAVIOR_DEFAULTS}
    }
    return SimulationConfig(arena=arena, spawn=spawn, display=display, **behaviors, **sim_values)
