"""
Multi-Stage Ascent Simulation - Crew Life Support

Linear oxygen depletion and CO2 accumulation. Oxygen is not clamped: a
negative mass is the mission-failure signal for consumers.
"""

import logging
from dataclasses import dataclass

from . import constants as C
from .config import MissionConfig

logger = logging.getLogger(__name__)


@dataclass
class LifeSupportState:
    """Cabin consumables. Rates are kg per crew member per hour."""
    oxygen_mass: float = C.OXYGEN_MASS
    co2_mass: float = C.CO2_MASS
    crew_count: int = C.CREW_COUNT
    oxygen_rate: float = C.OXYGEN_RATE
    co2_rate: float = C.CO2_RATE


class LifeSupportTracker:
    """Updates a LifeSupportState once per tick."""

    def __init__(self, state: LifeSupportState = None):
        self.state = state if state is not None else LifeSupportState()
        self._depletion_reported = self.oxygen_depleted

    @classmethod
    def from_config(cls, config: MissionConfig) -> 'LifeSupportTracker':
        return cls(LifeSupportState(
            oxygen_mass=config.oxygen_mass,
            co2_mass=config.co2_mass,
            crew_count=config.crew_count,
            oxygen_rate=config.oxygen_rate,
            co2_rate=config.co2_rate,
        ))

    @property
    def oxygen_mass(self) -> float:
        return self.state.oxygen_mass

    @property
    def co2_mass(self) -> float:
        return self.state.co2_mass

    @property
    def oxygen_depleted(self) -> bool:
        return self.state.oxygen_mass < 0.0

    def update(self, dt: float):
        """Consume oxygen and produce CO2 for dt seconds."""
        s = self.state
        s.oxygen_mass -= s.oxygen_rate * s.crew_count * dt / C.SECONDS_PER_HOUR
        s.co2_mass += s.co2_rate * s.crew_count * dt / C.SECONDS_PER_HOUR

        if self.oxygen_depleted and not self._depletion_reported:
            logger.warning(f"Cabin oxygen exhausted: {s.oxygen_mass:.3f} kg remaining "
                           f"for crew of {s.crew_count}")
            self._depletion_reported = True
