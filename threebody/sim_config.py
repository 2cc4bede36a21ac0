from __future__ import annotations
from dataclasses import dataclass, field
import math
import os
from typing import Tuple

from .constants import (
	DEFAULT_MASS,
	DEFAULT_POSITIONS,
	GRAVITATIONAL_CONSTANT,
	N_BODIES,
	REPORT_INTERVAL,
	STEPS,
	TIME_STEP,
)

"""
This configuration module defines the run parameters through the SimConfig dataclass: the tick size, the number of ticks, the gravitational constant, the console reporting cadence, and the initial positions and masses of the three bodies. from_env layers environment overrides (THREEBODY_TIME_STEP, THREEBODY_STEPS, THREEBODY_REPORT_INTERVAL) on top of the defaults, ignoring values that are not positive numbers. is_valid checks the parameters before a run and reports what is wrong.

"""

_ENV_PREFIX = "THREEBODY_"


def _parse_positive(name: str, default, cast=float, allow_zero: bool = False):
	env_val = os.getenv(_ENV_PREFIX + name, "")
	if env_val.strip() == "":
		return default
	try:
		val = cast(env_val.strip())
	except ValueError:
		print(f"[warning] ignoring {_ENV_PREFIX + name}={env_val!r}: not a number")
		return default
	if val < 0 or (val == 0 and not allow_zero):
		print(f"[warning] ignoring {_ENV_PREFIX + name}={env_val!r}: must be " + ("non-negative" if allow_zero else "positive"))
		return default
	return val


@dataclass
class SimConfig:
	time_step: float = TIME_STEP
	steps: int = STEPS
	G: float = GRAVITATIONAL_CONSTANT
	report_interval: int = REPORT_INTERVAL
	positions: Tuple[Tuple[float, float], ...] = DEFAULT_POSITIONS
	masses: Tuple[float, ...] = field(default_factory=lambda: (DEFAULT_MASS,) * N_BODIES)

	def copy(self) -> "SimConfig":
		new = object.__new__(SimConfig)
		new.__dict__ = dict(getattr(self, "__dict__", {}))
		return new

	@classmethod
	def from_env(cls) -> "SimConfig":
		cfg = cls()
		cfg.time_step = _parse_positive("TIME_STEP", cfg.time_step, float)
		cfg.steps = _parse_positive("STEPS", cfg.steps, int, allow_zero=True)
		cfg.report_interval = _parse_positive("REPORT_INTERVAL", cfg.report_interval, int)
		return cfg

	def is_valid(self) -> bool:
		if not (math.isfinite(self.time_step) and self.time_step > 0.0):
			print(f"[error] time_step must be a positive finite number, got {self.time_step}")
			return False
		if self.steps < 0:
			print(f"[error] steps must be non-negative, got {self.steps}")
			return False
		if self.report_interval <= 0:
			print(f"[error] report_interval must be positive, got {self.report_interval}")
			return False
		if not math.isfinite(self.G):
			print(f"[error] G must be finite, got {self.G}")
			return False
		if len(self.positions) != N_BODIES or len(self.masses) != N_BODIES:
			print(f"[error] need {N_BODIES} positions and masses")
			return False
		return True
