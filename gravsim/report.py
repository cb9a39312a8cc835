"""
This module produces the final report of a run.

format_report renders the authoritative fixed-width text dump: the body count, the
universe radius, then one line per body with position, velocity, mass and display
identifier. The layout is the same as a universe description, so a report can be fed
back to the loader to continue a run. report_frame exposes the same data as a pandas
DataFrame and write_report_csv saves it to disk for analysis.
"""

import pandas as pd
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from .universe import Universe


REPORT_COLUMNS = ["rx", "ry", "vx", "vy", "mass", "display_id"]


def format_report(universe: "Universe") -> str:
	lines = [f"{universe.n_bodies:d}", f"{universe.universe_radius:.2e}"]
	pos, vel, mass = universe.pos, universe.vel, universe.mass
	ids = universe.display_ids
	for i in range(universe.n_bodies):
		lines.append(
			f"{pos[i, 0]:11.4e} {pos[i, 1]:11.4e} {vel[i, 0]:11.4e} "
			f"{vel[i, 1]:11.4e} {mass[i]:11.4e} {ids[i]:>12s}"
		)
	return "\n".join(lines) + "\n"


def report_frame(universe: "Universe") -> pd.DataFrame:
	df = pd.DataFrame({
		"rx": universe.pos[:, 0].copy(),
		"ry": universe.pos[:, 1].copy(),
		"vx": universe.vel[:, 0].copy(),
		"vy": universe.vel[:, 1].copy(),
		"mass": universe.mass.copy(),
		"display_id": universe.display_ids,
	}, columns=REPORT_COLUMNS)
	df.attrs["universe_radius"] = universe.universe_radius
	return df


def write_report_csv(universe: "Universe", path: str) -> None:
	df = report_frame(universe)
	with open(path, "w") as f:
		f.write(f"# universe_radius: {universe.universe_radius!r}\n")
		df.to_csv(f, index=False)
