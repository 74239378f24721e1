from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi


def _heading_xy(x: float, y: float) -> float:
    if x == 0.0 and y == 0.0:
        return 0.0
    return math.atan2(y, x)


def _angular_gap(a: float, b: float) -> float:
    delta = abs(a - b)
    return min(delta, TWO_PI - delta)


def _clamp_length_xy_f(x: float, y: float, max_length: float) -> tuple[float, float]:
    if max_length <= 0.0:
        return 0.0, 0.0
    magnitude = math.hypot(x, y)
    if magnitude < max_length:
        return x, y
    if magnitude <= 0.0:
        return 0.0, 0.0
    scale = max_length / magnitude
    return x * scale, y * scale


def _reflect_axis(value: float, velocity: float, low: float, high: float) -> tuple[float, float]:
    if not math.isfinite(value):
        return _clamp_value(value, low, high), velocity
    span = high - low
    if span <= 0.0:
        return low, velocity
    period = 2.0 * span
    if value < low - period or value > high + period:
        # Fold in one step; the loop below is exact but linear in the overshoot.
        offset = (value - low) % period
        if offset > span:
            return low + period - offset, -velocity
        return low + offset, velocity
    while True:
        if value < low:
            value = 2.0 * low - value
            velocity = -velocity
        elif value > high:
            value = 2.0 * high - value
            velocity = -velocity
        else:
            return value, velocity


def _clamp_value(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))
