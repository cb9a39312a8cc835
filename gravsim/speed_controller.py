"""
This module couples the interactive speed slider to the simulation time step.

scale is the general linear remap used both here and by the panel renderer.
SpeedController maps a slider position in [slide_start, slide_end] to a factor in
[0, 2] and multiplies the base time step by it; it is pure and keeps no state. Slider
models the on-screen control that produces those positions: a drag is only accepted
when the pointer lands near the knob, and the accepted position is clamped to the
slider's extent before it is reported.
"""

from __future__ import annotations
from typing import Callable, Optional

from . import constants


def scale(old_value: float, old_min: float, old_max: float,
          new_min: float, new_max: float) -> float:
    return (old_value - old_min) / (old_max - old_min) * (new_max - new_min) + new_min


def clamp(value: float, lo: float, hi: float) -> float:
    return max(min(value, hi), lo)


class SpeedController:
    def __init__(self, slide_start: int = constants.SLIDE_START,
                 slide_end: int = constants.SLIDE_END,
                 max_factor: float = constants.MAX_SPEED_FACTOR) -> None:
        if slide_end <= slide_start:
            raise ValueError(f"slide_end ({slide_end}) must exceed slide_start ({slide_start})")
        self.slide_start = int(slide_start)
        self.slide_end = int(slide_end)
        self.max_factor = float(max_factor)

    def factor(self, slider_position: float) -> float:
        return scale(slider_position, self.slide_start, self.slide_end, 0.0, self.max_factor)

    def time_step(self, base_time_step: float, slider_position: float) -> float:
        return float(base_time_step) * self.factor(slider_position)


class Slider:
    """Headless model of the drag slider; reports accepted positions to on_change."""

    def __init__(self, slide_start: int = constants.SLIDE_START,
                 slide_end: int = constants.SLIDE_END,
                 position: int = constants.SLIDE_INITIAL,
                 y: int = constants.SLIDE_Y,
                 knob_radius: int = constants.KNOB_RADIUS,
                 drag_tolerance: int = constants.DRAG_TOLERANCE,
                 on_change: Optional[Callable[[int], None]] = None) -> None:
        self.slide_start = int(slide_start)
        self.slide_end = int(slide_end)
        self.position = int(clamp(position, slide_start, slide_end))
        self.y = int(y)
        self.knob_radius = int(knob_radius)
        self.drag_tolerance = int(drag_tolerance)
        self.on_change = on_change

    def hit(self, x: int, y: int) -> bool:
        reach = self.drag_tolerance * self.knob_radius
        return abs(self.position - x) < reach and abs(self.y - y) < reach

    def drag(self, x: int, y: int) -> bool:
        if not self.hit(x, y):
            return False
        self.position = int(clamp(x, self.slide_start, self.slide_end))
        if self.on_change is not None:
            self.on_change(self.position)
        return True

    def ticks(self, divisions: int = 12):
        step = max((self.slide_end - self.slide_start) // max(int(divisions), 1), 1)
        return list(range(self.slide_start, self.slide_end + 1, step))
