from __future__ import annotations
import sys
from typing import Iterable, Iterator, TextIO

from .body import Step

"""
This module formats Steps for the console. format_step renders the three positions as "(x0, y0) (x1, y1) (x2, y2)" with four decimals per coordinate. sample_steps thins a sequence to every Nth tick, and StepReporter prints one formatted line per sampled tick, so it can be handed to the driver as its per-tick callback. Nothing here modifies the Steps it reads.

"""


def format_step(step: Step) -> str:
	parts = []
	for b in step.bodies:
		parts.append(f"({b.x:.4f}, {b.y:.4f})")
	return " ".join(parts)


def sample_steps(steps: Iterable[Step], stride: int) -> Iterator[Step]:
	if stride <= 0:
		raise ValueError(f"stride must be positive, got {stride}")
	for s in steps:
		if s.step % stride == 0:
			yield s


class StepReporter:
	def __init__(self, interval: int, stream: TextIO | None = None) -> None:
		if interval <= 0:
			raise ValueError(f"interval must be positive, got {interval}")
		self.interval = int(interval)
		self.stream = stream
		self.lines_written = 0

	def __call__(self, step: Step) -> None:
		if step.step % self.interval != 0:
			return
		out = self.stream if self.stream is not None else sys.stdout
		print(format_step(step), file=out)
		self.lines_written += 1
