"""
This module provides opt-in validation of a universe before a run.

The SimulationValidator class checks that per-body arrays share one length, that every
mass is positive and finite, that positions and velocities are finite and that no two
bodies start at the same position. The simulation core itself never performs these
checks; a degenerate universe simply propagates non-finite values. Callers that want to
reject such input at startup enable SimConfig.validate_bodies.
"""

from __future__ import annotations
import math
from typing import List, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
	from .universe import Universe




class SimulationValidator:
	@staticmethod
	def problems(universe: "Universe") -> List[str]:
		out = []
		m = universe.mass
		r = universe.pos
		v = universe.vel
		n = m.shape[0]

		if r.shape != (n, 2) or v.shape != (n, 2) or len(universe.display_ids) != n:
			out.append(f"array shapes disagree: mass={m.shape}, pos={r.shape}, vel={v.shape}")
			return out

		if not (universe.universe_radius > 0.0 and math.isfinite(universe.universe_radius)):
			out.append(f"universe radius must be positive and finite, got {universe.universe_radius}")

		for i, m_i in enumerate(m):
			if not (m_i > 0.0 and math.isfinite(m_i)):
				out.append(f"body {i} has non-positive or non-finite mass {m_i}")

		if not np.all(np.isfinite(r)):
			out.append("positions contain non-finite values")
		if not np.all(np.isfinite(v)):
			out.append("velocities contain non-finite values")

		if n >= 2:
			diff = r[:, None, :] - r[None, :, :]
			same = np.all(diff == 0.0, axis=-1)
			np.fill_diagonal(same, False)
			iu = np.triu_indices(n, 1)
			for i, j in zip(*iu):
				if same[i, j]:
					out.append(f"bodies {i} and {j} share position ({r[i, 0]}, {r[i, 1]})")

		return out

	@staticmethod
	def universe_is_valid(universe: "Universe") -> bool:
		return len(SimulationValidator.problems(universe)) == 0

	@staticmethod
	def report_invalid_state(label: str, universe: "Universe") -> None:
		print(f"[invalid] {label}")
		for msg in SimulationValidator.problems(universe):
			print(f"  {msg}")
