"""
Multi-Stage Ascent Simulation - Telemetry

Immutable per-tick snapshot handed to renderers, and the log that
accumulates snapshots for CSV export and plotting.
"""

import csv
import os
from dataclasses import asdict, dataclass, field, fields
from typing import List


@dataclass(frozen=True)
class TelemetrySnapshot:
    """Everything a renderer needs about one tick. Never read back by the core."""
    t: float                   # s
    altitude: float            # m
    velocity: float            # m/s
    acceleration: float        # m/s^2
    thrust: float              # N
    throttle: float            # 0-1
    net_force: float           # N
    mass_flow: float           # kg/s
    total_mass: float          # kg
    density: float             # kg/m^3
    pressure: float            # Pa
    temperature: float         # K
    drag: float                # N
    dynamic_pressure: float    # Pa
    gravity: float             # m/s^2
    isp: float                 # s
    cabin_pressure: float      # Pa
    oxygen_mass: float         # kg
    co2_mass: float            # kg
    mach: float
    drag_coefficient: float
    pitch_angle: float         # deg
    current_stage_index: int
    stage_count: int

    def as_dict(self) -> dict:
        return asdict(self)


SNAPSHOT_FIELDS = tuple(f.name for f in fields(TelemetrySnapshot))


@dataclass
class TelemetryLog:
    """Column-oriented record of every snapshot in a run."""
    t: List[float] = field(default_factory=list)
    altitude: List[float] = field(default_factory=list)
    velocity: List[float] = field(default_factory=list)
    acceleration: List[float] = field(default_factory=list)
    thrust: List[float] = field(default_factory=list)
    throttle: List[float] = field(default_factory=list)
    net_force: List[float] = field(default_factory=list)
    mass_flow: List[float] = field(default_factory=list)
    total_mass: List[float] = field(default_factory=list)
    density: List[float] = field(default_factory=list)
    pressure: List[float] = field(default_factory=list)
    temperature: List[float] = field(default_factory=list)
    drag: List[float] = field(default_factory=list)
    dynamic_pressure: List[float] = field(default_factory=list)
    gravity: List[float] = field(default_factory=list)
    isp: List[float] = field(default_factory=list)
    cabin_pressure: List[float] = field(default_factory=list)
    oxygen_mass: List[float] = field(default_factory=list)
    co2_mass: List[float] = field(default_factory=list)
    mach: List[float] = field(default_factory=list)
    drag_coefficient: List[float] = field(default_factory=list)
    pitch_angle: List[float] = field(default_factory=list)
    current_stage_index: List[int] = field(default_factory=list)
    stage_count: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.t)

    def append(self, snapshot: TelemetrySnapshot):
        """Log data from one tick."""
        for name in SNAPSHOT_FIELDS:
            getattr(self, name).append(getattr(snapshot, name))

    def to_csv(self, filename: str):
        """Write the log to CSV, one header row then one row per tick."""
        os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)
        columns = [getattr(self, name) for name in SNAPSHOT_FIELDS]
        with open(filename, 'w', newline='') as fh:
            writer = csv.writer(fh)
            writer.writerow(SNAPSHOT_FIELDS)
            for row in zip(*columns):
                writer.writerow(row)
