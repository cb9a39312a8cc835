import math
import numpy as np

"""
This module provides small physics helpers used to set up initial conditions. remove_center_of_mass_velocity subtracts the centre-of-mass velocity so that the total momentum is zero, circular_speed gives the relative speed of a circular two-body orbit and orbital_period the matching Kepler period.


"""

def remove_center_of_mass_velocity(
	masses: np.ndarray, velocities: np.ndarray
) -> np.ndarray:
	if len(masses) == 1:
		return velocities.copy()
	total_mass = float(np.sum(masses))
	if total_mass == 0 or velocities.size == 0:
		return velocities.copy()
	v_cm = np.sum(masses[:, None] * velocities, axis=0) / total_mass
	return velocities - v_cm


def circular_speed(G: float, total_mass: float, separation: float) -> float:
	return math.sqrt(G * total_mass / separation)


def orbital_period(G: float, total_mass: float, separation: float) -> float:
	return 2.0 * math.pi * math.sqrt(separation ** 3 / (G * total_mass))
