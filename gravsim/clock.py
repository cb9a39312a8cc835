from __future__ import annotations
from dataclasses import dataclass, field

"""
This module defines SimulationClock, the simulated-time bookkeeping of a run. It fixes the duration and the base time step at construction and keeps the current time and the current time step, which is always the base step times a factor in [0, 2] set by the speed controller. A fresh clock starts at time zero with a factor of one. Advancing adds the current step to the current time without clamping, so the last step may carry the clock past the duration.

"""


@dataclass
class SimulationClock:
    duration: float
    base_time_step: float
    current_time: float = 0.0
    factor: float = 1.0
    current_time_step: float = field(init=False)

    def __post_init__(self) -> None:
        self.duration = float(self.duration)
        self.base_time_step = float(self.base_time_step)
        self.current_time = float(self.current_time)
        self.set_factor(self.factor)

    def set_factor(self, factor: float) -> None:
        self.factor = float(factor)
        self.current_time_step = self.base_time_step * self.factor

    @property
    def done(self) -> bool:
        return not (self.current_time < self.duration)

    def advance(self) -> float:
        self.current_time += self.current_time_step
        return self.current_time
