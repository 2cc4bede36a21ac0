"""
This module handles trajectory I/O for offline analysis.

The TrajectoryDataset class flattens a sequence of Steps into a pandas DataFrame with
one row per tick (step, time, then m/x/y/vx/vy for each body), writes it to CSV behind
a single "# time_step: ..., G: ..." metadata line, and reads such files back into Steps.
Floats are written with full round-trip precision so that a reloaded run compares
equal to the one that was saved.
"""

from __future__ import annotations
from typing import Dict, Iterable, List

import numpy as np
import pandas as pd

from .body import Body, Step
from .constants import N_BODIES


_FIELDS = ("m", "x", "y", "vx", "vy")
_META_PREFIX = "# "


def _columns() -> List[str]:
	cols = ["step", "time"]
	for i in range(N_BODIES):
		for f in _FIELDS:
			cols.append(f"{f}{i}")
	return cols


class TrajectoryDataset:

	@staticmethod
	def to_frame(steps: Iterable[Step]) -> pd.DataFrame:
		rows = []
		for s in steps:
			row = [s.step, s.time]
			for b in s.bodies:
				row.extend([b.mass, b.x, b.y, b.vx, b.vy])
			rows.append(row)
		df = pd.DataFrame(rows, columns=_columns())
		df["step"] = df["step"].astype(np.int64)
		return df

	@staticmethod
	def from_frame(df: pd.DataFrame) -> List[Step]:
		missing = []
		for col in _columns():
			if col not in df.columns:
				missing.append(col)
		if missing:
			print(f"[error] trajectory frame is missing columns: {', '.join(missing)}")
			raise ValueError(f"missing columns: {missing}")

		steps = []
		for rec in df.itertuples(index=False):
			r = rec._asdict()
			bodies = []
			for i in range(N_BODIES):
				bodies.append(Body(
					mass=float(r[f"m{i}"]),
					x=float(r[f"x{i}"]),
					y=float(r[f"y{i}"]),
					vx=float(r[f"vx{i}"]),
					vy=float(r[f"vy{i}"]),
				))
			steps.append(Step(time=float(r["time"]), step=int(r["step"]), bodies=tuple(bodies)))
		return steps

	@staticmethod
	def save(steps: Iterable[Step], path: str, time_step: float, G: float) -> pd.DataFrame:
		df = TrajectoryDataset.to_frame(steps)
		with open(path, "w") as f:
			f.write(f"{_META_PREFIX}time_step: {time_step!r}, G: {G!r}\n")
			df.to_csv(f, index=False, float_format="%.17g")
		print(f"Saved {len(df)} steps to {path}")
		return df

	@staticmethod
	def load(path: str) -> List[Step]:
		df = pd.read_csv(path, comment="#", float_precision="round_trip")
		return TrajectoryDataset.from_frame(df)

	@staticmethod
	def get_metadata(path: str) -> Dict[str, float | None]:
		metadata: Dict[str, float | None] = {"time_step": None, "G": None}

		with open(path, "r") as f:
			first_line = f.readline()
		if not first_line.startswith(_META_PREFIX):
			return metadata

		for item in first_line[len(_META_PREFIX):].strip().split(","):
			key, _, value = item.partition(":")
			key = key.strip()
			if key in metadata and value.strip():
				metadata[key] = float(value)
		return metadata
