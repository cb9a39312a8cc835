from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from .universe import Universe

"""
This module implements the semi-implicit (symplectic) Euler integrator that advances the Body Store by one time step. A step is a kick followed by a drift: every velocity is first updated from the force evaluated at the old positions, v += dt * F / m, and every position is then moved with the freshly updated velocity, x += dt * v. The ordering is what makes the scheme semi-implicit and must not be swapped. The integrator mutates the Universe arrays in place and performs no checks on mass; a zero mass yields non-finite velocities that propagate silently.

"""


class Integrator:

	def __init__(self, universe: "Universe") -> None:
		self.universe = universe
		self.steps_taken = 0

	def kick(self, forces: np.ndarray, dt: float) -> None:
		uni = self.universe
		if uni.n_bodies == 0:
			return
		with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
			uni._vel += float(dt) * np.asarray(forces, dtype=float) / uni._mass[:, None]

	def drift(self, dt: float) -> None:
		uni = self.universe
		if uni.n_bodies == 0:
			return
		with np.errstate(invalid="ignore", over="ignore"):
			uni._pos += float(dt) * uni._vel

	def step(self, forces: np.ndarray, dt: float) -> None:
		self.kick(forces, dt)
		self.drift(dt)
		self.steps_taken += 1
