from .diagnostics import Diagnostics
from .reporters import StepReporter
from .sim_config import SimConfig
from .simulation import ThreeBodySimulation

"""
This module runs the reference scenario from the command line. main reads SimConfig.from_env, streams the run through a StepReporter that prints the three positions every report_interval ticks, and finishes with a summary of the tick count, elapsed simulated time and relative energy drift. Steps are not kept in memory, so the default 100000-tick run needs only the first and last states.

"""


def main():
	cfg = SimConfig.from_env()
	if not cfg.is_valid():
		print("[error] Invalid configuration")
		return 1

	reporter = StepReporter(cfg.report_interval)
	sim = ThreeBodySimulation(cfg, callback=reporter)

	first = None
	for s in sim.stream():
		if first is None:
			first = s

	last = sim.last_step
	if first is None or last is None:
		print("No steps simulated")
		return 0

	drift = Diagnostics.energy_drift([first, last], cfg.G)
	print(f"\nSimulated {last.step + 1} steps, t = {last.time:.4f}")
	print(f"Relative energy drift: {drift:.4e}")
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
