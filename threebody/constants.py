from __future__ import annotations

from typing import Final, Tuple

"""
This module defines the physical and numerical constants of the three-body scenario. It holds the Newtonian gravitational constant, the default tick size and run length, the console reporting cadence, and the reference initial configuration (three unit masses, one above the axis and two on it). The values are defaults only: the simulation entry points take them as explicit parameters, so test scenarios can change step counts and time steps freely.

"""

GRAVITATIONAL_CONSTANT: Final[float] = 6.67430e-11
TIME_STEP: Final[float] = 0.5
STEPS: Final[int] = 100000
REPORT_INTERVAL: Final[int] = 1000

N_BODIES: Final[int] = 3
DEFAULT_MASS: Final[float] = 1.0

DEFAULT_POSITIONS: Final[Tuple[Tuple[float, float], ...]] = (
	(0.3089693008, 0.4236727692),
	(-0.5, 0.0),
	(0.5, 0.0),
)
