"""
This module builds the starting Step of a run: time 0, tick 0, and three bodies at the
given positions with zero velocity. Masses default to unity, matching the reference
scenario, but may be supplied to exercise unequal-mass configurations.
"""

from __future__ import annotations
from typing import Sequence, Tuple

from .body import Body, Step
from .constants import DEFAULT_MASS, DEFAULT_POSITIONS, N_BODIES


def initial_step(
	positions: Sequence[Tuple[float, float]] = DEFAULT_POSITIONS,
	masses: Sequence[float] | None = None,
) -> Step:
	if masses is None:
		masses = [DEFAULT_MASS] * N_BODIES

	bodies = []
	for m, (x, y) in zip(masses, positions):
		bodies.append(Body(mass=float(m), x=float(x), y=float(y)))

	if len(bodies) != N_BODIES or len(masses) != len(positions):
		raise ValueError(
			f"need {N_BODIES} positions and masses, got {len(positions)} and {len(masses)}"
		)
	return Step(time=0.0, step=0, bodies=tuple(bodies))
