"""
This module implements the Newtonian pair force used by the integrator and a vectorised
acceleration kernel used by the analysis tools.

pair_force evaluates the pull of one body on another exactly as the tick kernel needs
it: displacement from the body being updated toward the other body, magnitude
G*m_j*m_i divided by r twice, direction from atan2. The division runs through numpy
float64 under errstate so that coincident bodies give inf/NaN instead of raising
ZeroDivisionError; the non-finite values then propagate through later ticks untouched.
accelerations computes all pairwise accelerations at once from position and mass
arrays with the same sign convention, for diagnostics and cross-checks only.
"""

from __future__ import annotations
import math
from typing import Tuple

import numpy as np

from .body import Body
from .constants import GRAVITATIONAL_CONSTANT


__all__ = ["pair_force", "accelerations", "geometry_buffers"]


def pair_force(body: Body, other: Body, G: float = GRAVITATIONAL_CONSTANT) -> Tuple[float, float]:
	dx = other.x - body.x
	dy = other.y - body.y

	r = math.sqrt(dx * dx + dy * dy)
	with np.errstate(divide="ignore", invalid="ignore"):
		force = np.float64(G * other.mass * body.mass) / r / r
		angle = math.atan2(dy, dx)
		fx = force * math.cos(angle)
		fy = force * math.sin(angle)
	return float(fx), float(fy)


def geometry_buffers(pos: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
	pos = np.asarray(pos, dtype=float)

	# diff[i, j] points from body i toward body j
	diff = pos[None, :, :] - pos[:, None, :]
	r2 = np.einsum("ijk,ijk->ij", diff, diff, optimize=True)

	inv_r3 = np.zeros_like(r2, dtype=float)
	with np.errstate(divide="ignore", invalid="ignore"):
		off_diag = ~np.eye(r2.shape[0], dtype=bool)
		inv_r3[off_diag] = np.power(r2[off_diag], -1.5)
	return diff, r2, inv_r3


def accelerations(
	positions: np.ndarray,
	masses: np.ndarray,
	G: float = GRAVITATIONAL_CONSTANT,
) -> np.ndarray:
	q = np.asarray(positions, dtype=float)
	m = np.asarray(masses, dtype=float)

	if q.shape[0] < 2 or G == 0.0:
		return np.zeros_like(q)

	diff, _, inv_r3 = geometry_buffers(q)
	with np.errstate(invalid="ignore"):
		acc = G * np.sum((m[None, :] * inv_r3)[..., None] * diff, axis=1)
	return acc
