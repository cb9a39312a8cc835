from __future__ import annotations
from dataclasses import dataclass

from . import constants

"""
This configuration module gathers the run-time parameters of the simulation in the SimConfig dataclass. It carries the gravitational constant, the slider bounds and initial position used by the speed controller, the real-time frame delay used to pace animation, optional strict validation of the initial bodies and of their display assets, and the progress reporting interval. Defaults are sourced from the constants module so that every component reads the same values. The copy method lets a caller derive a modified configuration without touching the shared default.

"""


@dataclass
class SimConfig:
    G: float = constants.G
    slide_start: int = constants.SLIDE_START
    slide_end: int = constants.SLIDE_END
    slide_initial: int = constants.SLIDE_INITIAL
    frame_delay: float = constants.FRAME_DELAY_MS / 1000.0
    validate_bodies: bool = False
    require_assets: bool = False
    report_every: int = 0

    def copy(self) -> "SimConfig":
        new = object.__new__(SimConfig)
        new.__dict__ = dict(getattr(self, "__dict__", {}))
        return new

    def is_valid(self) -> bool:
        if self.slide_end <= self.slide_start:
            print(f"[error] slide_end ({self.slide_end}) must exceed slide_start ({self.slide_start})")
            return False
        if not (self.slide_start <= self.slide_initial <= self.slide_end):
            print(f"[error] slide_initial ({self.slide_initial}) outside "
                  f"[{self.slide_start}, {self.slide_end}]")
            return False
        if self.frame_delay < 0.0:
            print(f"[error] frame_delay must be non-negative, got {self.frame_delay}")
            return False
        if self.report_every < 0:
            print(f"[error] report_every must be non-negative, got {self.report_every}")
            return False
        return True
