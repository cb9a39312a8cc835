"""
This module implements the Force Model: direct-summation Newtonian gravity over every
ordered pair of bodies.

pair_geometry builds the pairwise separation vectors r_j - r_i and squared distances,
with the diagonal set to infinity so that a body never acts on itself. pairwise_forces
returns the full (N, N, 2) table of contributions of body j on body i, and
gravitational_force reduces it to the net force on each body. The magnitude is
G * (m_i * m_j) / rad**2 with the mass product formed first, so the contribution of j on
i is the exact negation of the contribution of i on j. The cost is O(N^2) per call.
Coincident bodies are not guarded against: a zero separation yields non-finite forces
that propagate into the state, and the corresponding numpy warnings are suppressed.
"""

from __future__ import annotations
import numpy as np
from typing import Tuple
from numpy.typing import NDArray

from .constants import G as G_SI




__all__ = ["pair_geometry", "pairwise_forces", "gravitational_force"]


def pair_geometry(pos: NDArray[np.floating]) -> Tuple[np.ndarray, np.ndarray]:
    pos = np.asarray(pos, dtype=float)

    # diff[i, j] points from body i towards body j
    diff = pos[None, :, :] - pos[:, None, :]
    r2 = np.einsum("ijk,ijk->ij", diff, diff, optimize=True)
    np.fill_diagonal(r2, np.inf)
    return diff, r2


def pairwise_forces(
    pos: NDArray[np.floating],
    mass: NDArray[np.floating],
    G: float = G_SI,
) -> np.ndarray:

    pos = np.asarray(pos, dtype=float)
    mass = np.asarray(mass, dtype=float)
    n = pos.shape[0]

    if n < 2:
        return np.zeros((n, n, 2), dtype=float)

    diff, r2 = pair_geometry(pos)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        rad = np.sqrt(r2)
        f_mag = float(G) * (mass[:, None] * mass[None, :]) / (rad * rad)
        f_pair = f_mag[..., None] * diff / rad[..., None]
    return f_pair


def gravitational_force(
    pos: NDArray[np.floating],
    mass: NDArray[np.floating],
    G: float = G_SI,
) -> np.ndarray:
    pos = np.asarray(pos, dtype=float)

    if pos.shape[0] < 2 or G == 0.0:
        return np.zeros_like(pos, dtype=float).reshape(-1, 2)

    return pairwise_forces(pos, mass, G).sum(axis=1)
