"""
This module reads universe descriptions from whitespace-separated text.

The format starts with the number of bodies N and the universe radius; anything after
the radius on the same line is ignored. N records follow, each giving rx, ry, vx, vy,
mass and a display identifier, and any trailing text after the last record is ignored
as well. parse_universe and load_universe print an [error] message and return None for
a missing file, a truncated description or a token that does not parse, so that the
caller can stop before any simulation step runs. When require_assets is set, every
display identifier must name an existing file relative to the universe file.
"""

from __future__ import annotations
import os
from typing import Iterator, List, Optional, Tuple

from .body import Body
from .universe import Universe


_FIELDS = ("rx", "ry", "vx", "vy", "mass")


def _tokens(text: str) -> Iterator[Tuple[int, str]]:
	for lineno, line in enumerate(text.splitlines(), start=1):
		for tok in line.split():
			yield lineno, tok


def parse_universe(text: str, source: str = "<string>") -> Optional[Universe]:
	toks = _tokens(text)

	header = []
	for _ in range(2):
		item = next(toks, None)
		if item is None:
			print(f"[error] {source}: missing body count or universe radius")
			return None
		header.append(item)

	(_, n_tok), (radius_line, r_tok) = header
	try:
		n = int(n_tok)
		radius = float(r_tok)
	except ValueError:
		print(f"[error] {source}: malformed header {n_tok!r} {r_tok!r}")
		return None
	if n < 0:
		print(f"[error] {source}: body count must be non-negative, got {n}")
		return None
	if not radius > 0.0:
		print(f"[error] {source}: universe radius must be positive, got {radius}")
		return None

	bodies: List[Body] = []
	for i in range(n):
		values = []
		for field in _FIELDS + ("display_id",):
			item = next(toks, None)
			# rest of the radius line is skipped
			while item is not None and item[0] == radius_line:
				item = next(toks, None)
			if item is None:
				print(f"[error] {source}: body {i} is missing field {field!r}")
				return None
			lineno, tok = item
			if field == "display_id":
				values.append(tok)
				continue
			try:
				values.append(float(tok))
			except ValueError:
				print(f"[error] {source}:{lineno}: body {i} field {field!r} is not a number: {tok!r}")
				return None
		rx, ry, vx, vy, mass, display_id = values
		bodies.append(Body(rx, ry, vx, vy, mass, display_id))

	return Universe.from_bodies(bodies, radius)


def load_universe(path: str, require_assets: bool = False) -> Optional[Universe]:
	try:
		with open(path, "r") as f:
			text = f.read()
	except OSError:
		print(f"[error] Could not open {path}")
		return None

	uni = parse_universe(text, source=path)
	if uni is None:
		return None

	if require_assets:
		base = os.path.dirname(os.path.abspath(path))
		for name in uni.display_ids:
			if not os.path.isfile(os.path.join(base, name)):
				print(f"[error] Could not open {name}")
				return None

	return uni
