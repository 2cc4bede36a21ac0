"""
This initialization file serves as the main entry point for the three-body simulation
package, exposing its public API through a single namespace.

It re-exports the value types (Body, Step), the tick kernel (kick, drift, advance,
Integrator), the driver (simulate, iter_steps, ThreeBodySimulation), configuration
(SimConfig and the default constants), validation, console reporting, diagnostics, and
the numpy/pandas conversion helpers used for analysis and export.
"""

from .constants import (
	GRAVITATIONAL_CONSTANT,
	TIME_STEP,
	STEPS,
	REPORT_INTERVAL,
	N_BODIES,
	DEFAULT_MASS,
	DEFAULT_POSITIONS,
)
from .sim_config import SimConfig
from .body import Body, Step
from .initial_conditions import initial_step
from .simulation_validator import SimulationValidator

from .forces import pair_force, accelerations, geometry_buffers
from .integrator import Integrator, kick, drift, advance
from .simulation import ThreeBodySimulation, simulate, iter_steps

from .reporters import format_step, sample_steps, StepReporter
from .diagnostics import Diagnostics
from .simulation_state import to_arrays, from_arrays, trajectory
from .trajectory_dataset import TrajectoryDataset


__all__ = [
	"GRAVITATIONAL_CONSTANT",
	"TIME_STEP",
	"STEPS",
	"REPORT_INTERVAL",
	"N_BODIES",
	"DEFAULT_MASS",
	"DEFAULT_POSITIONS",
	"SimConfig",
	"Body",
	"Step",
	"initial_step",
	"SimulationValidator",
	"pair_force",
	"accelerations",
	"geometry_buffers",
	"Integrator",
	"kick",
	"drift",
	"advance",
	"ThreeBodySimulation",
	"simulate",
	"iter_steps",
	"format_step",
	"sample_steps",
	"StepReporter",
	"Diagnostics",
	"to_arrays",
	"from_arrays",
	"trajectory",
	"TrajectoryDataset",
]
