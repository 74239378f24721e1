from __future__ import annotations

from ..types.vectors import Vec2
from ..utils.math2d import _angular_gap, _heading_xy


def is_in_range(
    self_pos: Vec2,
    target_pos: Vec2,
    radius: float,
    self_velocity: Vec2,
    sight_angle: float,
) -> bool:
    """Return True when ``target_pos`` lies inside the viewer's cone of awareness.

    The cone is centred on the heading of ``self_velocity`` and opens
    ``sight_angle`` radians in total. Both the radius and the half-angle are
    inclusive. The bearing of a zero vector is 0, so a zero velocity looks
    along +x and a target sitting on the viewer lies along +x.
    """
    if self_pos.distance(target_pos) > radius:
        return False
    bearing = _heading_xy(target_pos.x - self_pos.x, target_pos.y - self_pos.y)
    heading = _heading_xy(self_velocity.x, self_velocity.y)
    return _angular_gap(bearing, heading) <= sight_angle / 2.0
