"""
This module drives the integrator over a fixed number of ticks and hands out the
resulting Steps in order.

iter_steps is the lazy form: a finite generator that yields one Step per tick and keeps
only the current state, which suits very long runs. simulate materialises the same
sequence as a list. Each yielded Step carries the counters of the tick that produced
it (tick i has step == i) together with the bodies after that tick's kick and drift;
the next tick starts from those bodies with the clock advanced by time_step. Inputs
are checked once before the first tick; nothing is checked afterwards, so a collision
shows up as inf/NaN values in every later Step rather than as an exception.

ThreeBodySimulation wraps the same loop around a SimConfig and an optional per-tick
callback such as StepReporter.
"""

from __future__ import annotations
import math
import numbers
from typing import Callable, Iterator, List, Optional

from .body import Step
from .constants import GRAVITATIONAL_CONSTANT
from .initial_conditions import initial_step
from .integrator import advance
from .sim_config import SimConfig
from .simulation_validator import SimulationValidator


StepCallback = Callable[[Step], None]


def _check_inputs(initial_state: Step, tick_count: int, time_step: float) -> None:
	if not SimulationValidator.state_is_valid(initial_state):
		SimulationValidator.report_invalid_state("initial state", initial_state)
		raise ValueError("initial state is not a valid three-body state")
	count_ok = isinstance(tick_count, numbers.Integral) and not isinstance(tick_count, bool)
	if isinstance(tick_count, float) and tick_count.is_integer():
		count_ok = True
	if not count_ok or tick_count < 0:
		print(f"[error] tick_count must be a non-negative integer, got {tick_count}")
		raise ValueError(f"tick_count must be a non-negative integer, got {tick_count}")
	if not (math.isfinite(time_step) and time_step > 0.0):
		print(f"[error] time_step must be a positive finite number, got {time_step}")
		raise ValueError(f"time_step must be a positive finite number, got {time_step}")


def _run(initial_state: Step, tick_count: int, time_step: float, G: float) -> Iterator[Step]:
	state = initial_state
	for _ in range(int(tick_count)):
		done = advance(state, time_step, G)
		yield done
		state = done.advance(time_step)


def iter_steps(
	initial_state: Step,
	tick_count: int,
	time_step: float,
	G: float = GRAVITATIONAL_CONSTANT,
) -> Iterator[Step]:
	_check_inputs(initial_state, tick_count, time_step)
	return _run(initial_state, tick_count, float(time_step), float(G))


def simulate(
	initial_state: Step,
	tick_count: int,
	time_step: float,
	G: float = GRAVITATIONAL_CONSTANT,
) -> List[Step]:
	steps: List[Step] = []
	for s in iter_steps(initial_state, tick_count, time_step, G):
		steps.append(s)
	return steps


class ThreeBodySimulation:
	def __init__(self, cfg: SimConfig | None = None, callback: Optional[StepCallback] = None) -> None:
		self.cfg: SimConfig = cfg or SimConfig()
		if not self.cfg.is_valid():
			raise ValueError("invalid simulation config")
		self.callback = callback
		self.initial_state = initial_step(self.cfg.positions, self.cfg.masses)
		self.last_step: Step | None = None

	def stream(self) -> Iterator[Step]:
		cfg = self.cfg
		for s in iter_steps(self.initial_state, cfg.steps, cfg.time_step, cfg.G):
			self.last_step = s
			if self.callback is not None:
				self.callback(s)
			yield s

	def run(self) -> List[Step]:
		return list(self.stream())
