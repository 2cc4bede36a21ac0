from __future__ import annotations
import itertools, math
from typing import Sequence

import numpy as np

from .body import Step
from .constants import GRAVITATIONAL_CONSTANT
from .simulation_state import to_arrays

"""
This module measures conserved quantities of a Step for analysis of a finished or running simulation. The Diagnostics class computes kinetic and potential energy, total energy, linear and angular momentum, centre of mass position and velocity, and the smallest pairwise separation. energy_drift compares the total energy of the first and last Steps of a sequence. The integrator is first order and does not conserve these quantities exactly; they are reported, never enforced.

"""


class Diagnostics:
	def __init__(self, step: Step, G: float = GRAVITATIONAL_CONSTANT):
		self.step = step
		self.G = float(G)
		self._mass, self._pos, self._vel = to_arrays(step)

	def kinetic_energy(self) -> float:
		m = self._mass
		v = self._vel
		return 0.5 * float(np.sum(m * np.sum(v * v, axis=1)))

	def potential_energy(self) -> float:
		s = 0.0
		for a, b in itertools.combinations(self.step.bodies, 2):
			dx = b.x - a.x
			dy = b.y - a.y
			r = math.sqrt(dx * dx + dy * dy)
			if r == 0.0:
				return -math.inf
			s -= self.G * a.mass * b.mass / r
		return s

	def energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()

	def linear_momentum(self) -> np.ndarray:
		return np.sum(self._mass[:, None] * self._vel, axis=0)

	def angular_momentum(self) -> float:
		m = self._mass
		q = self._pos
		v = self._vel
		return float(np.sum(m * (q[:, 0] * v[:, 1] - q[:, 1] * v[:, 0])))

	def center_of_mass(self) -> np.ndarray:
		return np.sum(self._mass[:, None] * self._pos, axis=0) / float(np.sum(self._mass))

	def center_of_mass_velocity(self) -> np.ndarray:
		return self.linear_momentum() / float(np.sum(self._mass))

	def min_separation(self) -> float:
		diff = self._pos[:, None, :] - self._pos[None, :, :]
		r2 = np.einsum("ijk,ijk->ij", diff, diff, optimize=True)
		np.fill_diagonal(r2, np.inf)
		return float(np.sqrt(np.min(r2)))

	@staticmethod
	def energy_drift(steps: Sequence[Step], G: float = GRAVITATIONAL_CONSTANT) -> float:
		if len(steps) < 2:
			return 0.0
		E0 = Diagnostics(steps[0], G).energy()
		E1 = Diagnostics(steps[-1], G).energy()
		if E0 == 0.0:
			return abs(E1 - E0)
		return abs(E1 - E0) / abs(E0)
