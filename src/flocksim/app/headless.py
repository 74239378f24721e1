from __future__ import annotations

import argparse
import json
import math
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from .logger import configure_logging
from ..sim.core.config import SimulationConfig
from ..sim.core.world import World


def _percentile(sorted_values: list[float], percentile: float) -> float:
    if not sorted_values:
        return 0.0
    if len(sorted_values) == 1:
        return float(sorted_values[0])
    pos = (len(sorted_values) - 1) * percentile
    low = int(math.floor(pos))
    high = int(math.ceil(pos))
    if low == high:
        return float(sorted_values[low])
    weight = pos - low
    return float(sorted_values[low] + (sorted_values[high] - sorted_values[low]) * weight)


def _summary_stats(values: list[float]) -> dict[str, float]:
    if not values:
        return {"min": 0.0, "max": 0.0, "avg": 0.0, "p50": 0.0, "p90": 0.0, "p95": 0.0, "p99": 0.0}
    sorted_values = sorted(values)
    total = sum(values)
    count = len(values)
    return {
        "min": float(sorted_values[0]),
        "max": float(sorted_values[-1]),
        "avg": float(total / count),
        "p50": _percentile(sorted_values, 0.50),
        "p90": _percentile(sorted_values, 0.90),
        "p95": _percentile(sorted_values, 0.95),
        "p99": _percentile(sorted_values, 0.99),
    }


def run_headless(
    steps: int,
    seed: Optional[int] = None,
    config_path: Optional[Path] = None,
    dt: Optional[float] = None,
    deterministic: bool = False,
    report_every: int = 0,
) -> Dict[str, Any]:
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")
    config = SimulationConfig.from_yaml(config_path) if config_path else SimulationConfig()
    if seed is not None:
        config.seed = seed
    if dt is not None:
        config.time_step = dt
    config.validate()
    world = World(config)

    tick_ms_series: list[float] = []
    speed_series: list[float] = []
    peak_speed = 0.0
    for tick in range(steps):
        metrics = world.step(tick)
        tick_ms = 0.0 if deterministic else metrics.tick_duration_ms
        tick_ms_series.append(tick_ms)
        speed_series.append(metrics.average_speed)
        peak_speed = max(peak_speed, metrics.max_speed)
        if report_every > 0 and (tick + 1) % report_every == 0:
            logger.info(
                "tick {} population={} avg_speed={:.2f} tick_ms={:.3f}",
                tick,
                metrics.population,
                metrics.average_speed,
                tick_ms,
            )

    return {
        "steps": steps,
        "seed": config.seed,
        "dt": config.time_step,
        "population": len(world.agents),
        "deterministic": deterministic,
        "tick_ms": _summary_stats(tick_ms_series),
        "average_speed": _summary_stats(speed_series),
        "peak_speed": peak_speed,
        "max_speed": config.max_speed,
    }


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Headless flocking simulation")
    parser.add_argument("--steps", type=int, default=600)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the default configuration")
    parser.add_argument("--dt", type=float, default=None, help="Seconds per tick (defaults to the configured time_step)")
    parser.add_argument(
        "--report-every",
        type=int,
        default=0,
        help="Log progress every N ticks (0 disables progress lines).",
    )
    parser.add_argument(
        "--deterministic",
        action="store_true",
        help="Force tick_ms to 0 so identical seeds print identical summaries.",
    )
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    summary = run_headless(
        args.steps,
        args.seed,
        config_path=args.config,
        dt=args.dt,
        deterministic=args.deterministic,
        report_every=args.report_every,
    )
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
