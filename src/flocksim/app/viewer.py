"""Interactive pygame front end.

Controls:
    - Left mouse button: attract nearby fish to the cursor
    - Right mouse button: scare nearby fish away from the cursor
    - ESC or closing the window: quit
"""

from __future__ import annotations

import argparse
import math
from pathlib import Path
from typing import List, Optional, Tuple

import pygame
from loguru import logger
from pygame.math import Vector2

from .logger import configure_logging
from ..sim.core.config import ArenaConfig, SimulationConfig
from ..sim.core.world import World
from ..sim.systems import appearance
from ..sim.types.input import MouseState


def world_to_screen(x: float, y: float, arena: ArenaConfig) -> Tuple[float, float]:
    return x + arena.width / 2.0, arena.height / 2.0 - y


def fish_outline(
    centre: Vector2,
    heading: float,
    length: float,
    width: float,
    arena: ArenaConfig,
    segments: int = 12,
) -> List[Tuple[float, float]]:
    """Screen-space polygon of an ellipse around ``centre`` with its long axis along ``heading``."""
    points = []
    for i in range(segments):
        t = 2.0 * math.pi * i / segments
        point = centre + Vector2(length * math.cos(t), width * math.sin(t)).rotate_rad(heading)
        points.append(world_to_screen(point.x, point.y, arena))
    return points


def fish_color(hue: float, saturation: float, lightness: float) -> pygame.Color:
    color = pygame.Color(0, 0, 0)
    color.hsla = (hue % 360.0, saturation * 100.0, lightness * 100.0, 100.0)
    return color


def read_mouse() -> MouseState:
    left, _middle, right = pygame.mouse.get_pressed()[:3]
    if not pygame.mouse.get_focused():
        return MouseState(cursor=None, left=left, right=right)
    cursor_x, cursor_y = pygame.mouse.get_pos()
    return MouseState(cursor=(float(cursor_x), float(cursor_y)), left=left, right=right)


class Viewer:
    """Window, clock and draw loop around a :class:`World`."""

    def __init__(self, config: SimulationConfig):
        self.config = config
        pygame.init()
        size = (int(config.arena.width), int(config.arena.height))
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption(config.display.title)

        self.world = World(config)
        self.clock = pygame.time.Clock()
        self.running = True
        self.tick = 0
        logger.info("Opened {}x{} window with {} fish", size[0], size[1], len(self.world.agents))

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def _update(self, dt: float) -> None:
        dt = min(dt, self.config.display.max_frame_time)
        self.world.step(self.tick, dt, read_mouse())
        self.tick += 1

    def _render(self) -> None:
        config = self.config
        display = config.display
        self.screen.fill(display.background)
        for agent in self.world.agents:
            look = appearance.describe(agent, config.max_speed, display.lightness)
            outline = fish_outline(
                agent.position.to_vector2(),
                look.heading,
                display.fish_length,
                display.fish_width,
                config.arena,
            )
            pygame.draw.polygon(self.screen, fish_color(look.hue, look.saturation, look.lightness), outline)
        pygame.display.flip()

    def run(self, max_frames: Optional[int] = None) -> None:
        frames = 0
        try:
            while self.running and (max_frames is None or frames < max_frames):
                dt = self.clock.tick(self.config.display.fps) / 1000.0
                self._handle_events()
                self._update(dt)
                self._render()
                frames += 1
        finally:
            pygame.quit()
        logger.info("Viewer closed after {} frames", frames)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Interactive flocking simulation")
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the default configuration")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    config = SimulationConfig.from_yaml(args.config) if args.config else SimulationConfig()
    if args.seed is not None:
        config.seed = args.seed
    try:
        viewer = Viewer(config)
    except pygame.error as exc:
        logger.critical("Could not open the display: {}", exc)
        raise SystemExit(1) from exc
    viewer.run()


if __name__ == "__main__":
    main()
