"""
This module defines the value types of the simulation: Body, a single point mass, and
Step, the state of all three bodies at one tick.

Both are frozen dataclasses. A tick never edits a Body or Step in place; it derives new
values (with_velocity, with_position, advance) so that every Step handed out by the
driver stays valid no matter what happens to later ticks. Step enforces that exactly
three bodies are present and that their order, which is their identity, is preserved.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
import math
from typing import Iterable, Tuple

from .constants import N_BODIES


Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class Body:
	mass: float
	x: float
	y: float
	vx: float = 0.0
	vy: float = 0.0

	def __post_init__(self) -> None:
		if not (self.mass > 0.0 and math.isfinite(self.mass)):
			raise ValueError(f"mass must be positive and finite, got {self.mass}")

	@property
	def position(self) -> Vec2:
		return (self.x, self.y)

	@property
	def velocity(self) -> Vec2:
		return (self.vx, self.vy)

	def with_velocity(self, vx: float, vy: float) -> "Body":
		return replace(self, vx=float(vx), vy=float(vy))

	def with_position(self, x: float, y: float) -> "Body":
		return replace(self, x=float(x), y=float(y))

	def __repr__(self) -> str:
		return f"Body(mass={self.mass}, x={self.x}, y={self.y}, vx={self.vx}, vy={self.vy})"


@dataclass(frozen=True)
class Step:
	time: float
	step: int
	bodies: Tuple[Body, Body, Body]

	def __post_init__(self) -> None:
		bodies = tuple(self.bodies)
		if len(bodies) != N_BODIES:
			raise ValueError(f"a Step holds exactly {N_BODIES} bodies, got {len(bodies)}")
		for b in bodies:
			if not isinstance(b, Body):
				raise ValueError(f"expected Body, got {type(b).__name__}")
		object.__setattr__(self, "bodies", bodies)

	def advance(self, time_step: float, bodies: Iterable[Body] | None = None) -> "Step":
		"""Next tick's starting state: clock moved on by ``time_step``."""
		if bodies is None:
			bodies = self.bodies
		return Step(
			time=self.time + time_step,
			step=self.step + 1,
			bodies=tuple(bodies),
		)

	def with_bodies(self, bodies: Iterable[Body]) -> "Step":
		return replace(self, bodies=tuple(bodies))
