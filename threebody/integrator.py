from __future__ import annotations
from typing import Sequence, Tuple

from .body import Body, Step
from .constants import GRAVITATIONAL_CONSTANT
from .forces import pair_force

"""
This module implements the explicit tick kernel. A tick is a kick followed by a drift:
kick accumulates, for every body i and every other body j in index order, the velocity
change produced by j's pull on i; drift then moves every body by its new velocity. All
kicks finish before any position moves, so no body ever sees another's half-updated
position. Within the kick, body i's running velocity is written back before body i+1
is visited, and contributions are summed in ascending j, which fixes the floating-point
summation order and makes runs bit-reproducible. The Integrator class bundles G and the
tick size for callers that drive the kernel repeatedly.

"""


def kick(bodies: Sequence[Body], time_step: float, G: float = GRAVITATIONAL_CONSTANT) -> Tuple[Body, ...]:
	out = list(bodies)
	n = len(out)
	for i in range(n):
		for j in range(n):
			if i == j:
				continue
			b = out[i]
			fx, fy = pair_force(b, out[j], G)
			out[i] = b.with_velocity(
				b.vx + fx / b.mass * time_step,
				b.vy + fy / b.mass * time_step,
			)
	return tuple(out)


def drift(bodies: Sequence[Body], time_step: float) -> Tuple[Body, ...]:
	out = []
	for b in bodies:
		out.append(b.with_position(b.x + b.vx * time_step, b.y + b.vy * time_step))
	return tuple(out)


def advance(state: Step, time_step: float, G: float = GRAVITATIONAL_CONSTANT) -> Step:
	"""Run one tick on ``state``; the result keeps the tick's own time and step counters."""
	bodies = kick(state.bodies, time_step, G)
	bodies = drift(bodies, time_step)
	return state.with_bodies(bodies)


class Integrator:
	def __init__(self, time_step: float, G: float = GRAVITATIONAL_CONSTANT) -> None:
		self.time_step = float(time_step)
		self.G = float(G)
		self._ticks = 0

	@property
	def ticks(self) -> int:
		return self._ticks

	def kick(self, bodies: Sequence[Body]) -> Tuple[Body, ...]:
		return kick(bodies, self.time_step, self.G)

	def drift(self, bodies: Sequence[Body]) -> Tuple[Body, ...]:
		return drift(bodies, self.time_step)

	def step(self, state: Step) -> Step:
		self._ticks += 1
		return advance(state, self.time_step, self.G)
