"""
Multi-Stage Ascent Simulation - Configuration

This module provides the MissionConfig dataclass. A config is built once
before the loop starts and is read-only afterwards; create variants with
dataclasses.replace() or create_test_config().

Construction validates every input so the integrator never has to.
"""

from dataclasses import dataclass, field
from typing import Tuple

from . import constants as C


class ConfigurationError(ValueError):
    """Raised when a MissionConfig is built with physically invalid values."""
    pass


@dataclass(frozen=True)
class StageSpec:
    """
    Immutable definition of one propulsion stage.

    Attributes:
        dry_mass: Structural mass without propellant (kg)
        fuel_mass: Loaded propellant mass (kg)
        thrust_max: Full-throttle thrust (N)
        diameter: Stage diameter used for the drag reference area (m)
    """
    dry_mass: float
    fuel_mass: float
    thrust_max: float
    diameter: float

    def __post_init__(self):
        if self.dry_mass < 0.0:
            raise ConfigurationError(f"Stage dry mass must be >= 0, got {self.dry_mass}")
        if self.fuel_mass < 0.0:
            raise ConfigurationError(f"Stage fuel mass must be >= 0, got {self.fuel_mass}")
        if self.thrust_max < 0.0:
            raise ConfigurationError(f"Stage thrust must be >= 0, got {self.thrust_max}")
        if self.diameter <= 0.0:
            raise ConfigurationError(f"Stage diameter must be positive, got {self.diameter}")

    @property
    def wet_mass(self) -> float:
        return self.dry_mass + self.fuel_mass


def _default_stages() -> Tuple[StageSpec, ...]:
    return tuple(StageSpec(*row) for row in C.DEFAULT_STAGES)


@dataclass(frozen=True)
class MissionConfig:
    """
    Immutable mission configuration.

    Section grouping:
      1. Vehicle
      2. Simulation timing
      3. Environment
      4. Propulsion & guidance
      5. Crew & life support
      6. Presentation hints
    """

    # ── 1. Vehicle ───────────────────────────────────────────────────────
    stages: Tuple[StageSpec, ...] = field(default_factory=_default_stages)
    payload_mass: float = C.PAYLOAD_MASS

    # ── 2. Simulation timing ─────────────────────────────────────────────
    time_step: float = C.DT
    max_time: float = C.MAX_TIME

    # ── 3. Environment ───────────────────────────────────────────────────
    orbit_altitude: float = C.ORBIT_ALTITUDE
    earth_radius: float = C.R_EARTH
    sea_level_pressure: float = C.SEA_LEVEL_PRESSURE
    g0: float = C.G0
    gas_constant: float = C.R_GAS
    gamma: float = C.GAMMA

    # ── 4. Propulsion & guidance ─────────────────────────────────────────
    isp_sea: float = C.ISP_SEA_LEVEL
    isp_vac: float = C.ISP_VACUUM
    max_dynamic_pressure: float = C.MAX_DYNAMIC_PRESSURE
    throttle_altitude: float = C.THROTTLE_ALTITUDE
    pitch_ramp_start: float = C.PITCH_RAMP_START
    pitch_ramp_end: float = C.PITCH_RAMP_END

    # ── 5. Crew & life support ───────────────────────────────────────────
    crew_count: int = C.CREW_COUNT
    oxygen_mass: float = C.OXYGEN_MASS
    co2_mass: float = C.CO2_MASS
    oxygen_rate: float = C.OXYGEN_RATE
    co2_rate: float = C.CO2_RATE
    cabin_pressure: float = C.CABIN_PRESSURE

    # ── 6. Presentation hints ────────────────────────────────────────────
    stage_transition_delay: float = C.STAGE_TRANSITION_DELAY

    def __post_init__(self):
        # Accept any iterable of StageSpec (or 4-tuples) but store a tuple
        stages = tuple(
            s if isinstance(s, StageSpec) else StageSpec(*s) for s in self.stages
        )
        object.__setattr__(self, 'stages', stages)

        for name in ('time_step', 'max_time', 'orbit_altitude', 'earth_radius',
                     'sea_level_pressure', 'g0', 'gas_constant', 'gamma', 'isp_sea',
                     'max_dynamic_pressure'):
            value = getattr(self, name)
            if value <= 0.0:
                raise ConfigurationError(f"{name} must be positive, got {value}")

        if self.isp_vac < self.isp_sea:
            raise ConfigurationError(
                f"isp_vac ({self.isp_vac}) must be >= isp_sea ({self.isp_sea})"
            )
        if self.pitch_ramp_end <= self.pitch_ramp_start:
            raise ConfigurationError(
                f"pitch_ramp_end ({self.pitch_ramp_end}) must exceed "
                f"pitch_ramp_start ({self.pitch_ramp_start})"
            )
        for name in ('payload_mass', 'crew_count', 'oxygen_mass', 'co2_mass',
                     'oxygen_rate', 'co2_rate', 'stage_transition_delay'):
            value = getattr(self, name)
            if value < 0:
                raise ConfigurationError(f"{name} must be >= 0, got {value}")

        # A stage's final tick may overdraw its tank by up to one tick of
        # full-throttle flow; the mass left beneath that must stay positive.
        below = self.payload_mass
        for number in range(len(stages), 0, -1):
            stage = stages[number - 1]
            max_tick_burn = stage.thrust_max / (self.isp_sea * self.g0) * self.time_step
            if below + stage.dry_mass <= max_tick_burn:
                raise ConfigurationError(
                    f"Stage {number}: payload, dry mass and upper stages "
                    f"({below + stage.dry_mass:.3f} kg) must exceed one tick of "
                    f"full-thrust burn ({max_tick_burn:.3f} kg)"
                )
            below += stage.wet_mass

    @property
    def stage_count(self) -> int:
        return len(self.stages)

    @property
    def initial_mass(self) -> float:
        """Liftoff mass: every stage wet plus payload (kg)."""
        return sum(s.wet_mass for s in self.stages) + self.payload_mass


def create_default_config() -> MissionConfig:
    """Create a MissionConfig with the default three-stage crewed profile."""
    return MissionConfig()


def create_test_config(stages=None, time_step: float = 0.1,
                       **overrides) -> MissionConfig:
    """Create a config suitable for testing.

    Defaults to the single-stage vehicle {dry=1000 kg, fuel=10000 kg,
    thrust=2 MN, diameter=2 m} with no payload and no pacing delay. Any
    keyword arg accepted by MissionConfig can be passed as an override.
    """
    if stages is None:
        stages = (StageSpec(dry_mass=1000.0, fuel_mass=10000.0,
                            thrust_max=2.0e6, diameter=2.0),)
    defaults = dict(stages=stages, time_step=time_step, payload_mass=0.0,
                    stage_transition_delay=0.0)
    defaults.update(overrides)
    return MissionConfig(**defaults)
