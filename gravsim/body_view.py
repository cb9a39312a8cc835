"""
This module implements BodyView, a proxy giving Body-like access to one element of the
Universe's parallel arrays.

Position and velocity are readable and writable through properties that map straight
onto the underlying numpy storage, so no data is copied. Mass and the display
identifier are read-only because both are fixed once the universe is loaded.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .universe import Universe




class BodyView:
	__slots__ = ("_uni", "_i")

	def __init__(self, universe: "Universe", idx: int) -> None:
		self._uni = universe
		self._i = int(idx)

	@property
	def mass(self) -> float:
		return float(self._uni._mass[self._i])

	@property
	def display_id(self) -> str:
		return self._uni._display_ids[self._i]

	@property
	def x(self) -> float:
		return float(self._uni._pos[self._i, 0])
	@x.setter
	def x(self, v: float) -> None:
		self._uni._pos[self._i, 0] = float(v)

	@property
	def y(self) -> float:
		return float(self._uni._pos[self._i, 1])
	@y.setter
	def y(self, v: float) -> None:
		self._uni._pos[self._i, 1] = float(v)

	@property
	def vx(self) -> float:
		return float(self._uni._vel[self._i, 0])
	@vx.setter
	def vx(self, v: float) -> None:
		self._uni._vel[self._i, 0] = float(v)

	@property
	def vy(self) -> float:
		return float(self._uni._vel[self._i, 1])
	@vy.setter
	def vy(self, v: float) -> None:
		self._uni._vel[self._i, 1] = float(v)

	def __repr__(self) -> str:
		return (f"Body(x={self.x}, y={self.y}, vx={self.vx}, vy={self.vy}, "
				f"mass={self.mass}, display_id={self.display_id!r})")
