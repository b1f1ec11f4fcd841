"""
Multi-Stage Ascent Simulation Package

A deterministic, explainable fixed-step simulation of a multi-stage rocket's
powered vertical ascent: layered ISA atmosphere, transonic drag, Max-Q
throttling, pressure-dependent Isp, staged propulsion and crew consumables.

Modules:
    - constants: Physical constants, ISA definition, mission profile
    - config: Immutable MissionConfig
    - atmosphere: Layered barometric atmosphere model
    - state: Vehicle state dataclass
    - stages: Stage set with burn / jettison
    - integrator: Per-tick force computation and semi-implicit Euler step
    - life_support: Crew oxygen / CO2 tracking
    - simulation: Simulation loop state machine
    - telemetry: Per-tick snapshots and log
    - validation: Numerical fault checks
    - render, pacing, plotting, cli: Presentation layer
"""

from .config import (
    ConfigurationError,
    MissionConfig,
    StageSpec,
    create_default_config,
    create_test_config,
)
from .atmosphere import AtmosphereLayer, AtmosphereModel, AtmosphereSample, ISA_LAYERS
from .state import VehicleState, create_initial_state
from .stages import Stage, StageSet
from .life_support import LifeSupportState, LifeSupportTracker
from .telemetry import TelemetryLog, TelemetrySnapshot
from .simulation import (
    AscentSimulation,
    SimulationEvent,
    SimulationPhase,
    SimulationResult,
    run_simulation,
)

__version__ = "0.1.0"

__all__ = [
    'ConfigurationError',
    'MissionConfig',
    'StageSpec',
    'create_default_config',
    'create_test_config',
    'AtmosphereLayer',
    'AtmosphereModel',
    'AtmosphereSample',
    'ISA_LAYERS',
    'VehicleState',
    'create_initial_state',
    'Stage',
    'StageSet',
    'LifeSupportState',
    'LifeSupportTracker',
    'TelemetryLog',
    'TelemetrySnapshot',
    'AscentSimulation',
    'SimulationEvent',
    'SimulationPhase',
    'SimulationResult',
    'run_simulation',
]
