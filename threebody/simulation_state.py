"""
This module converts between Step values and the numpy array layout used for analysis.

to_arrays unpacks a Step into mass (3,), position (3, 2) and velocity (3, 2) float64
arrays; from_arrays builds a Step back from such arrays; trajectory stacks the
positions of a whole run into a (T, 3, 2) array. The arrays are fresh copies, so
writing into them never reaches the Steps they came from.
"""

from __future__ import annotations
from typing import Iterable, Tuple

import numpy as np

from .body import Body, Step
from .constants import N_BODIES


def to_arrays(step: Step) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
	mass = np.array([b.mass for b in step.bodies], dtype=np.float64)
	pos = np.array([b.position for b in step.bodies], dtype=np.float64)
	vel = np.array([b.velocity for b in step.bodies], dtype=np.float64)
	return mass, pos, vel


def from_arrays(
	mass: np.ndarray,
	pos: np.ndarray,
	vel: np.ndarray | None = None,
	*,
	time: float = 0.0,
	step: int = 0,
) -> Step:
	m = np.asarray(mass, dtype=np.float64).ravel()
	q = np.asarray(pos, dtype=np.float64).reshape(-1, 2)
	if vel is None:
		v = np.zeros_like(q)
	else:
		v = np.asarray(vel, dtype=np.float64).reshape(-1, 2)

	if not (m.size == q.shape[0] == v.shape[0] == N_BODIES):
		raise ValueError(
			f"shape mismatch: mass {m.shape}, pos {q.shape}, vel {v.shape}; "
			f"expected {N_BODIES} bodies"
		)

	bodies = []
	for i in range(N_BODIES):
		bodies.append(Body(
			mass=float(m[i]),
			x=float(q[i, 0]),
			y=float(q[i, 1]),
			vx=float(v[i, 0]),
			vy=float(v[i, 1]),
		))
	return Step(time=float(time), step=int(step), bodies=tuple(bodies))


def trajectory(steps: Iterable[Step]) -> np.ndarray:
	frames = []
	for s in steps:
		frames.append([b.position for b in s.bodies])
	if not frames:
		return np.empty((0, N_BODIES, 2), dtype=np.float64)
	return np.asarray(frames, dtype=np.float64)
