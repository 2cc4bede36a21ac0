"""
This module provides validation utilities for three-body states.

The SimulationValidator class offers static methods to check that a Step is a sound
starting point (three bodies, positive finite masses, finite positions and velocities)
and to print what is wrong with one that is not. It is applied to initial states only;
states produced by the integrator are never checked, so numerical degeneracy during a
run propagates as inf/NaN rather than being trapped.
"""

from __future__ import annotations
import math

from .body import Step
from .constants import N_BODIES


class SimulationValidator:
	@staticmethod
	def state_is_valid(step: Step | None) -> bool:
		if step is None:
			return False
		if len(step.bodies) != N_BODIES:
			return False

		for b in step.bodies:
			if not (b.mass > 0.0 and math.isfinite(b.mass)):
				return False
			for v in (b.x, b.y, b.vx, b.vy):
				if not math.isfinite(v):
					return False

		if not math.isfinite(step.time) or step.step < 0:
			return False
		return True

	@staticmethod
	def report_invalid_state(label: str, step: Step | None = None) -> None:
		print(f"[invalid] {label}")
		if step is None:
			print("  no state given")
			return
		print(f"  time={step.time} step={step.step}")
		for i, b in enumerate(step.bodies):
			problems = []
			if not (b.mass > 0.0 and math.isfinite(b.mass)):
				problems.append(f"mass={b.mass}")
			if not (math.isfinite(b.x) and math.isfinite(b.y)):
				problems.append(f"position=({b.x}, {b.y})")
			if not (math.isfinite(b.vx) and math.isfinite(b.vy)):
				problems.append(f"velocity=({b.vx}, {b.vy})")
			if problems:
				print(f"  body[{i}]: " + ", ".join(problems))
