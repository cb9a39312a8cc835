import numpy as np
from typing import Sequence
from .constants import G as G_SI
from .physics_utils import remove_center_of_mass_velocity, circular_speed
from .universe import Universe

"""
This module provides reproducible initial conditions for tests and demonstrations. The SpecializedGenerators class builds a circular two-body system placed in its centre-of-mass frame, such as an Earth and Moon pair, and an equal-mass ring of bodies with tangential velocities. Both return a ready Universe whose radius frames the whole configuration, and both zero the total momentum so that the system stays centred while it runs.

"""


class SpecializedGenerators:

	@staticmethod
	def two_body_circular(
			primary_mass: float,
			secondary_mass: float,
			separation: float,
			G: float = G_SI,
			*,
			display_ids: Sequence[str] = ("earth.gif", "moon.gif"),
			universe_radius: float | None = None,
		) -> Universe:

		m1 = float(primary_mass)
		m2 = float(secondary_mass)
		total = m1 + m2
		masses = np.array([m1, m2])

		x1 = -m2 * separation / total
		x2 = m1 * separation / total
		positions = np.array([
			[x1, 0.0],
			[x2, 0.0],
		])

		v_rel = circular_speed(G, total, separation)
		velocities = np.array([
			[0.0, -m2 * v_rel / total],
			[0.0,  m1 * v_rel / total],
		])
		velocities = remove_center_of_mass_velocity(masses, velocities)

		if universe_radius is None:
			universe_radius = 1.25 * separation
		return Universe.from_arrays(masses, positions, velocities, list(display_ids),
									universe_radius=universe_radius)

	@staticmethod
	def equal_mass_ring(
		n_bodies: int,
		mass: float,
		radius: float,
		rotation_fraction: float = 0.5,
		G: float = G_SI,
	) -> Universe:

		masses = np.full(n_bodies, float(mass))

		angles = np.linspace(0.0, 2.0 * np.pi, n_bodies, endpoint=False)
		positions = np.column_stack([
			radius * np.cos(angles),
			radius * np.sin(angles)
		])

		total_mass = float(np.sum(masses))
		v_scale = np.sqrt(G * total_mass / radius) * rotation_fraction

		velocities = np.column_stack([
			-v_scale * np.sin(angles),
			 v_scale * np.cos(angles)
		])

		velocities = remove_center_of_mass_velocity(masses, velocities)
		ids = [f"body{i}.gif" for i in range(n_bodies)]
		return Universe.from_arrays(masses, positions, velocities, ids,
									universe_radius=2.0 * radius)
