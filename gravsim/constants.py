from __future__ import annotations

import os
import sys
from typing import Final

"""
This module holds the physical and interactive constants shared by the simulation core and its collaborators. It defines the gravitational constant in SI units, the slider geometry that bounds the speed control signal, the panel size used when scaling universe coordinates for display, and the real-time pacing delay between frames. The frame delay may be overridden with the GRAVSIM_FRAME_DELAY_MS environment variable; malformed or negative values fall back to the default.

"""


def _parse_delay_ms(default: float = 100.0) -> float:
	env_val = os.getenv("GRAVSIM_FRAME_DELAY_MS", "")
	if env_val.strip() != "":
		if env_val.strip().replace(".", "", 1).isdigit():
			val = float(env_val)
			if val >= 0.0:
				return val
		print(f"[warning] ignoring GRAVSIM_FRAME_DELAY_MS={env_val!r}", file=sys.stderr)
	return default


# N m^2 / kg^2
G: Final[float] = 6.674e-11

SLIDE_START: Final[int] = 100
SLIDE_END: Final[int] = 400
SLIDE_INITIAL: Final[int] = 250
SLIDE_Y: Final[int] = 450
KNOB_RADIUS: Final[int] = 10
DRAG_TOLERANCE: Final[int] = 2

MAX_SPEED_FACTOR: Final[float] = 2.0

PANEL_SIZE: Final[int] = 500

FRAME_DELAY_MS: float = _parse_delay_ms()
