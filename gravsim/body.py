"""
This module defines the Body class, a plain record describing one body as it appears in
a universe description.

The class stores position (x, y) in meters, velocity (vx, vy) in meters per second, mass
in kilograms and an opaque display identifier naming the image a renderer may draw for
it. Bodies are only used while building a Universe; during the run the state lives in
the Universe's numpy arrays.
"""
class Body:
	def __init__(self, x: float, y: float, vx: float, vy: float, mass: float,
				 display_id: str = "") -> None:
		self.x = float(x)
		self.y = float(y)
		self.vx = float(vx)
		self.vy = float(vy)
		self.mass = float(mass)
		self.display_id = str(display_id)

	def __repr__(self) -> str:
		return (f"Body(x={self.x}, y={self.y}, vx={self.vx}, vy={self.vy}, "
				f"mass={self.mass}, display_id={self.display_id!r})")
