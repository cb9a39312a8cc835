"""
This module defines the rendering side of the frame hand-off.

The simulation loop calls render(snapshot) on a FrameSink once per iteration with a
read-only UniverseSnapshot. NullRenderer discards frames for batch runs,
TrajectoryRecorder keeps every frame's positions for later analysis, and PanelRenderer
maps universe coordinates onto a square pixel panel with scale_to_panel, printing them
to stderr when tracing is enabled. Renderers never hold on to a mutable alias of the
Body Store.
"""

from __future__ import annotations
import sys

import numpy as np
from typing import List, Protocol, Tuple, TYPE_CHECKING

from . import constants
from .speed_controller import scale

if TYPE_CHECKING:
    from .universe import UniverseSnapshot


class FrameSink(Protocol):
    def render(self, snapshot: "UniverseSnapshot") -> None:
        ...


def scale_to_panel(value: float, universe_radius: float,
                   size: int = constants.PANEL_SIZE) -> int:
    return int(scale(value, -universe_radius, universe_radius, 0, size))


class NullRenderer:
    def __init__(self) -> None:
        self.frames = 0

    def render(self, snapshot: "UniverseSnapshot") -> None:
        self.frames += 1


class TrajectoryRecorder:
    def __init__(self) -> None:
        self.times: List[float] = []
        self._positions: List[np.ndarray] = []

    def render(self, snapshot: "UniverseSnapshot") -> None:
        self.times.append(snapshot.time)
        self._positions.append(snapshot.pos)

    @property
    def frames(self) -> int:
        return len(self._positions)

    def trajectories(self) -> np.ndarray:
        """Recorded positions as an array of shape (frames, N, 2)."""
        if not self._positions:
            return np.empty((0, 0, 2), dtype=float)
        return np.stack(self._positions, axis=0)


class PanelRenderer:
    def __init__(self, size: int = constants.PANEL_SIZE, trace: bool = False) -> None:
        self.size = int(size)
        self.trace = bool(trace)
        self.frames = 0
        self.last_frame: List[Tuple[str, int, int]] = []

    def project(self, snapshot: "UniverseSnapshot") -> List[Tuple[str, int, int]]:
        radius = snapshot.universe_radius
        out = []
        for i in range(snapshot.n_bodies):
            # off-panel sentinel for degenerate state
            if not np.all(np.isfinite(snapshot.pos[i])):
                out.append((snapshot.display_ids[i], -1, -1))
                continue
            px = scale_to_panel(float(snapshot.pos[i, 0]), radius, self.size)
            py = scale_to_panel(float(snapshot.pos[i, 1]), radius, self.size)
            out.append((snapshot.display_ids[i], px, py))
        return out

    def render(self, snapshot: "UniverseSnapshot") -> None:
        self.last_frame = self.project(snapshot)
        self.frames += 1
        if self.trace:
            cells = " ".join(f"{name}@({px},{py})" for name, px, py in self.last_frame)
            print(f"[frame {self.frames}] t={snapshot.time:.4e} {cells}", file=sys.stderr)
