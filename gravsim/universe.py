"""
This module holds the Body Store of the simulation.

The Universe class keeps per-body positions, velocities and masses as numpy parallel
arrays indexed 0..N-1, together with the display identifiers and the universe radius
that renderers use to scale coordinates onto the screen. It can be built from a list of
Body records or directly from arrays, exposes Body-like views through BodyView, and
produces read-only UniverseSnapshot copies that are handed to rendering collaborators
once per frame. Only the simulation loop mutates a Universe; everything downstream sees
snapshots.
"""

from __future__ import annotations
from dataclasses import dataclass
import numpy as np
from typing import List, Sequence, TYPE_CHECKING

from .body_view import BodyView

if TYPE_CHECKING:
	from .body import Body




@dataclass(frozen=True)
class UniverseSnapshot:
	time: float
	universe_radius: float
	pos: np.ndarray
	vel: np.ndarray
	mass: np.ndarray
	display_ids: tuple

	@property
	def n_bodies(self) -> int:
		return int(self.mass.shape[0])


def _pair_array(values, n: int, name: str) -> np.ndarray:
	arr = np.array(values, dtype=np.float64)
	if n == 0 and arr.size == 0:
		return arr.reshape(0, 2)
	if arr.shape != (n, 2):
		raise ValueError(f"{name} must have shape ({n}, 2), got {arr.shape}")
	return arr


class Universe:

	def __init__(self, universe_radius: float = 1.0):
		self.universe_radius: float = float(universe_radius)
		self._mass: np.ndarray = np.empty(0, dtype=np.float64)
		self._pos: np.ndarray = np.empty((0, 2), dtype=np.float64)
		self._vel: np.ndarray = np.empty((0, 2), dtype=np.float64)
		self._display_ids: List[str] = []

	@classmethod
	def from_bodies(cls, bodies: Sequence["Body"], universe_radius: float) -> "Universe":
		uni = cls(universe_radius)
		n = len(bodies)

		mass_list = []
		for b in bodies:
			mass_list.append(b.mass)
		pos_list = []
		for b in bodies:
			pos_list.append((b.x, b.y))
		vel_list = []
		for b in bodies:
			vel_list.append((b.vx, b.vy))

		uni._mass = np.array(mass_list, dtype=np.float64).reshape(n)
		uni._pos = np.array(pos_list, dtype=np.float64).reshape(n, 2)
		uni._vel = np.array(vel_list, dtype=np.float64).reshape(n, 2)
		uni._display_ids = [b.display_id for b in bodies]
		return uni

	@classmethod
	def from_arrays(cls, masses, positions, velocities=None, display_ids=None,
					universe_radius: float = 1.0) -> "Universe":
		m = np.array(masses, dtype=np.float64).ravel()
		n = m.shape[0]
		r = _pair_array(positions, n, "positions")
		if velocities is None:
			v = np.zeros((n, 2), dtype=np.float64)
		else:
			v = _pair_array(velocities, n, "velocities")
		if display_ids is None:
			ids = [f"body{i}" for i in range(n)]
		else:
			ids = [str(s) for s in display_ids]

		if len(ids) != n:
			raise ValueError(f"expected {n} display ids, got {len(ids)}")

		uni = cls(universe_radius)
		uni._mass = m
		uni._pos = r
		uni._vel = v
		uni._display_ids = ids
		return uni

	@property
	def n_bodies(self) -> int:
		return int(self._mass.shape[0])

	@property
	def pos(self) -> np.ndarray:
		return self._pos

	@property
	def vel(self) -> np.ndarray:
		return self._vel

	@property
	def mass(self) -> np.ndarray:
		return self._mass

	@property
	def display_ids(self) -> List[str]:
		return list(self._display_ids)

	@property
	def bodies(self) -> List[BodyView]:
		return [BodyView(self, i) for i in range(self.n_bodies)]

	def __len__(self) -> int:
		return self.n_bodies

	def __getitem__(self, idx: int) -> BodyView:
		if idx < 0:
			idx += self.n_bodies
		if not 0 <= idx < self.n_bodies:
			raise IndexError(f"body index {idx} out of range for {self.n_bodies} bodies")
		return BodyView(self, idx)

	def is_finite(self) -> bool:
		return bool(np.all(np.isfinite(self._pos)) and np.all(np.isfinite(self._vel)))

	def snapshot(self, time: float = 0.0) -> UniverseSnapshot:
		pos = self._pos.copy()
		vel = self._vel.copy()
		mass = self._mass.copy()
		for arr in (pos, vel, mass):
			arr.setflags(write=False)
		return UniverseSnapshot(
			time=float(time),
			universe_radius=self.universe_radius,
			pos=pos,
			vel=vel,
			mass=mass,
			display_ids=tuple(self._display_ids),
		)

	def copy(self) -> "Universe":
		return Universe.from_arrays(
			self._mass.copy(),
			self._pos.copy(),
			self._vel.copy(),
			list(self._display_ids),
			universe_radius=self.universe_radius,
		)
