"""
This module implements the simulation loop that drives a Universe from time zero to the
requested duration.

NBodySimulation owns the Universe, a SimulationClock, the Integrator and the
SpeedController. Each iteration drains the speed-control channel and applies the most
recent slider position to the clock, evaluates the Force Model, advances the Body Store
with one semi-implicit Euler step, hands a read-only snapshot to the renderer, advances
simulated time and finally sleeps for the frame delay. The loop leaves RUNNING for DONE
as soon as the current time reaches the duration; the last step is not clamped, so the
clock may overshoot by up to one step. An empty universe goes straight to DONE, while a
run cut short by max_steps stays RUNNING. Progress and warning lines go to stderr so
that stdout carries only the final report. A run with the same inputs and
no speed changes is bit-for-bit reproducible.
"""

from __future__ import annotations
import enum
import sys
import time
from typing import Callable, Optional, TYPE_CHECKING

import numpy as np

from .clock import SimulationClock
from .forces import gravitational_force
from .integrator import Integrator
from .renderer import NullRenderer
from .report import format_report
from .sim_config import SimConfig
from .speed_controller import SpeedController, clamp

if TYPE_CHECKING:
	from .control_channel import SpeedControlChannel
	from .renderer import FrameSink
	from .universe import Universe




class LoopState(enum.Enum):
	RUNNING = "running"
	DONE = "done"


class NBodySimulation:

	def __init__(
		self,
		universe: "Universe",
		duration: float,
		base_time_step: float,
		cfg: SimConfig | None = None,
		*,
		renderer: Optional["FrameSink"] = None,
		channel: Optional["SpeedControlChannel"] = None,
		sleep: Callable[[float], None] = time.sleep,
	) -> None:
		self.universe = universe
		self.cfg = cfg if cfg is not None else SimConfig()
		self.clock = SimulationClock(duration=duration, base_time_step=base_time_step)
		self.speed = SpeedController(self.cfg.slide_start, self.cfg.slide_end)
		self.integrator = Integrator(universe)
		self.renderer = renderer if renderer is not None else NullRenderer()
		self.channel = channel
		self._sleep = sleep

		self.state = LoopState.RUNNING
		self.steps = 0
		self._warned_non_finite = False
		self.set_slider(self.cfg.slide_initial)

	@property
	def G(self) -> float:
		return float(self.cfg.G)

	def set_slider(self, slider_position: float) -> float:
		pos = clamp(slider_position, self.speed.slide_start, self.speed.slide_end)
		self.clock.set_factor(self.speed.factor(pos))
		return self.clock.current_time_step

	def _poll_speed(self) -> None:
		if self.channel is None:
			return
		latest = self.channel.drain()
		if latest is not None:
			self.set_slider(latest)

	def compute_forces(self) -> np.ndarray:
		uni = self.universe
		return gravitational_force(uni.pos, uni.mass, self.G)

	def step(self) -> None:
		"""One force evaluation and integrator update at the current time step."""
		forces = self.compute_forces()
		self.integrator.step(forces, self.clock.current_time_step)
		self.steps += 1

		if not self._warned_non_finite and not self.universe.is_finite():
			print(f"[warning] non-finite body state after step {self.steps} "
				  f"(t={self.clock.current_time:.6e}); coincident bodies or zero mass?", file=sys.stderr)
			self._warned_non_finite = True

	def run(self, max_steps: int | None = None) -> "Universe":
		clock = self.clock

		if self.universe.n_bodies == 0:
			clock.current_time = max(clock.current_time, clock.duration)
			self.state = LoopState.DONE
			return self.universe

		delay = float(self.cfg.frame_delay)
		every = int(self.cfg.report_every)

		while clock.current_time < clock.duration:
			if max_steps is not None and self.steps >= max_steps:
				print(f"[warning] stopping after {self.steps} steps at "
					  f"t={clock.current_time:.6e} of {clock.duration:.6e}", file=sys.stderr)
				return self.universe

			self._poll_speed()
			self.step()
			self.renderer.render(
				self.universe.snapshot(clock.current_time + clock.current_time_step)
			)
			clock.advance()

			if every > 0 and self.steps % every == 0:
				print(f"[info] step={self.steps} t={clock.current_time:.6e} "
					  f"dt={clock.current_time_step:.6e}", file=sys.stderr)

			if delay > 0.0:
				self._sleep(delay)

		self.state = LoopState.DONE
		return self.universe

	def final_report(self) -> str:
		return format_report(self.universe)
