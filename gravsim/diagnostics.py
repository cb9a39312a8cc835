from __future__ import annotations
import numpy as np
from typing import Tuple, TYPE_CHECKING
from .constants import G as G_SI
from .forces import pair_geometry
if TYPE_CHECKING:
	from .universe import Universe

"""
This module computes conserved quantities of a Universe for monitoring and testing. The Diagnostics class reports kinetic and potential energy, their sum, total linear momentum, total angular momentum about the origin, and the centre of mass position and velocity. For an isolated system integrated with pairwise forces the linear momentum stays fixed up to rounding, and the energy and angular momentum stay bounded for small steps. Drift checks compare against values captured at construction.

"""


class Diagnostics:

	def __init__(self, universe: "Universe", G: float = G_SI):
		self.uni = universe
		self.G = float(G)
		self._p0 = self.linear_momentum()
		self._E0 = self.energy()

	def kinetic_energy(self) -> float:
		m = self.uni.mass
		v = self.uni.vel
		return 0.5 * float(np.sum(m * np.sum(v * v, axis=1)))

	def potential_energy(self) -> float:
		n = self.uni.n_bodies
		if n < 2 or self.G == 0.0:
			return 0.0
		m = self.uni.mass
		_, r2 = pair_geometry(self.uni.pos)
		inv_r = 1.0 / np.sqrt(r2)
		iu = np.triu_indices(n, 1)
		return -self.G * float(np.sum((m[:, None] * m[None, :] * inv_r)[iu]))

	def energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()

	def linear_momentum(self) -> np.ndarray:
		m = self.uni.mass
		if m.size == 0:
			return np.zeros(2, dtype=float)
		return np.sum(m[:, None] * self.uni.vel, axis=0)

	def angular_momentum(self) -> float:
		m = self.uni.mass
		r = self.uni.pos
		v = self.uni.vel
		return float(np.sum(m * (r[:, 0] * v[:, 1] - r[:, 1] * v[:, 0])))

	def center_of_mass(self) -> Tuple[np.ndarray, np.ndarray]:
		m = self.uni.mass
		total = float(np.sum(m))
		if total == 0.0:
			return np.zeros(2), np.zeros(2)
		r_cm = np.sum(m[:, None] * self.uni.pos, axis=0) / total
		v_cm = self.linear_momentum() / total
		return r_cm, v_cm

	def momentum_drift(self) -> float:
		scale = float(np.sum(self.uni.mass * np.linalg.norm(self.uni.vel, axis=1)))
		if scale == 0.0:
			return float(np.linalg.norm(self.linear_momentum() - self._p0))
		return float(np.linalg.norm(self.linear_momentum() - self._p0)) / scale

	def energy_drift(self) -> float:
		if self._E0 == 0.0:
			return abs(self.energy())
		return abs(self.energy() - self._E0) / abs(self._E0)

	def summary(self) -> dict:
		r_cm, v_cm = self.center_of_mass()
		return {
			"kinetic": self.kinetic_energy(),
			"potential": self.potential_energy(),
			"energy": self.energy(),
			"momentum": self.linear_momentum().tolist(),
			"angular_momentum": self.angular_momentum(),
			"com": r_cm.tolist(),
			"com_velocity": v_cm.tolist(),
		}
