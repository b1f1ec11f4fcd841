"""
Multi-Stage Ascent Simulation - Stage Set

Ordered collection of propulsion stages (bottom to top). Stages burn in index
order; a depleted stage is jettisoned and never contributes mass or thrust
again.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

import numpy as np

from .config import StageSpec
from .state import VehicleState

logger = logging.getLogger(__name__)


@dataclass
class Stage:
    """Mutable propulsion stage. Fuel may go transiently negative after a burn."""
    dry_mass: float
    fuel_mass: float
    thrust_max: float
    diameter: float
    jettisoned: bool = False

    @classmethod
    def from_spec(cls, spec: StageSpec) -> 'Stage':
        return cls(
            dry_mass=spec.dry_mass,
            fuel_mass=spec.fuel_mass,
            thrust_max=spec.thrust_max,
            diameter=spec.diameter,
        )

    @property
    def area(self) -> float:
        """Cross-sectional reference area (m^2)."""
        return float(np.pi * self.diameter ** 2 / 4.0)

    @property
    def depleted(self) -> bool:
        return self.fuel_mass <= 0.0


class StageSet:
    """
    Owns the vehicle's stages and tracks which one is burning.

    The index only moves forward. Once it reaches the number of stages the
    set is exhausted and current_stage() returns None.
    """

    def __init__(self, specs: Iterable[StageSpec]):
        self._stages: List[Stage] = [Stage.from_spec(s) for s in specs]
        self._index = 0

    def __len__(self) -> int:
        return len(self._stages)

    def __getitem__(self, idx: int) -> Stage:
        return self._stages[idx]

    def __iter__(self) -> Iterator[Stage]:
        return iter(self._stages)

    @property
    def index(self) -> int:
        return self._index

    @property
    def exhausted(self) -> bool:
        """True when no stage is left to burn."""
        return self._index >= len(self._stages)

    def current_stage(self) -> Optional[Stage]:
        if self.exhausted:
            return None
        return self._stages[self._index]

    def burn(self, fuel_used: float):
        """Remove fuel_used from the active stage. No clamping."""
        stage = self.current_stage()
        if stage is None:
            return
        stage.fuel_mass -= fuel_used

    def advance_if_depleted(self, state: VehicleState) -> bool:
        """
        Jettison the active stage if its fuel is used up.

        Subtracts the stage's dry mass from state.total_mass and moves the
        index (mirrored into state.current_stage_index) to the next stage.
        Fuel overdrawn on the last burn (fuel_mass < 0) was already taken
        off total_mass, so it is handed back here; afterwards total_mass
        equals the attached stages plus payload.

        Returns:
            True if a jettison happened.
        """
        stage = self.current_stage()
        if stage is None or not stage.depleted:
            return False

        stage.jettisoned = True
        state.total_mass -= stage.dry_mass + stage.fuel_mass
        self._index += 1
        state.current_stage_index = self._index

        logger.info(f"Stage {self._index} jettisoned at t={state.t:.2f}s, "
                    f"alt={state.altitude:.0f}m: dropped {stage.dry_mass:.0f}kg dry "
                    f"(residual fuel {stage.fuel_mass:.2f}kg)")
        return True

    def remaining_mass(self) -> float:
        """Dry plus fuel mass of every stage still attached (kg)."""
        return sum(s.dry_mass + s.fuel_mass for s in self._stages if not s.jettisoned)
