from __future__ import annotations

import math

import pygame
import pytest
from pygame.math import Vector2
from pytest import approx

from flocksim.app import viewer
from flocksim.app.viewer import Viewer, fish_color, fish_outline, read_mouse, world_to_screen
from flocksim.sim.core.config import ArenaConfig, SimulationConfig

ARENA = ArenaConfig()


def test_world_to_screen_puts_origin_in_the_middle():
    assert world_to_screen(0.0, 0.0, ARENA) == (350.0, 250.0)
    assert world_to_screen(-350.0, 250.0, ARENA) == (0.0, 0.0)
    assert world_to_screen(100.0, -50.0, ARENA) == (450.0, 300.0)


def test_fish_outline_points_along_heading():
    points = fish_outline(Vector2(0.0, 0.0), math.pi / 2, 3.0, 1.0, ARENA, segments=4)

    # t=0 is the nose: three units up in the world, three pixels up on screen.
    assert points[0] == approx((350.0, 247.0))
    assert points[1] == approx((349.0, 250.0))
    assert points[2] == approx((350.0, 253.0))
    assert len(points) == 4


def test_fish_color_uses_hsl():
    color = fish_color(360.0, 1.0, 0.5)

    assert (color.r, color.g, color.b) == (255, 0, 0)
    assert fish_color(120.0, 0.0, 0.7).r == fish_color(120.0, 0.0, 0.7).g


def test_read_mouse_hides_cursor_outside_window(monkeypatch):
    monkeypatch.setattr(pygame.mouse, "get_pressed", lambda *args, **kwargs: (True, False, False))
    monkeypatch.setattr(pygame.mouse, "get_pos", lambda: (12, 34))

    monkeypatch.setattr(pygame.mouse, "get_focused", lambda: False)
    outside = read_mouse()
    monkeypatch.setattr(pygame.mouse, "get_focused", lambda: True)
    inside = read_mouse()

    assert outside.cursor is None
    assert outside.left and not outside.right
    assert inside.cursor == (12.0, 34.0)
    assert inside.left and not inside.right


def test_viewer_runs_a_few_frames_headless():
    config = SimulationConfig(agent_count=5, seed=2)
    app = Viewer(config)

    app.run(max_frames=3)

    assert app.tick == 3
    assert app.world.metrics is not None
    assert app.world.metrics.population == 5


def test_main_exits_when_display_cannot_open(monkeypatch):
    def _fail(*args, **kwargs):
        raise pygame.error("no display")

    monkeypatch.setattr(pygame.display, "set_mode", _fail)

    with pytest.raises(SystemExit) as excinfo:
        viewer.main(["--log-level", "CRITICAL"])

    assert excinfo.value.code == 1
