"""
Multi-Stage Ascent Simulation - Simulation Loop

This module drives the ascent state machine:

    RUNNING -> STAGE_TRANSITION -> RUNNING -> ... -> ORBIT_ACHIEVED
                                                   | ALL_STAGES_EXHAUSTED
                                                   | TIME_LIMIT

Each loop iteration checks termination, then stage depletion, then runs one
physics tick. The loop owns every piece of mutable state; renderers and
pacers only receive snapshots and delay hints.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple, Optional, Tuple

from . import integrator
from .atmosphere import AtmosphereModel, AtmosphereSample, build_isa_layers
from .config import MissionConfig, create_default_config
from .integrator import StepResult
from .life_support import LifeSupportState, LifeSupportTracker
from .pacing import Pacer
from .render import Renderer
from .stages import StageSet
from .state import VehicleState, create_initial_state
from .telemetry import TelemetryLog, TelemetrySnapshot
from .validation import ValidationError, validate_snapshot, validate_state

logger = logging.getLogger(__name__)


class SimulationPhase(Enum):
    RUNNING = auto()
    STAGE_TRANSITION = auto()       # Stage jettisoned, pause before next tick
    ORBIT_ACHIEVED = auto()         # Altitude reached orbit threshold
    ALL_STAGES_EXHAUSTED = auto()   # No stage left to burn
    TIME_LIMIT = auto()             # Safety bound on simulated time


TERMINAL_PHASES = frozenset({
    SimulationPhase.ORBIT_ACHIEVED,
    SimulationPhase.ALL_STAGES_EXHAUSTED,
    SimulationPhase.TIME_LIMIT,
})

TERMINATION_REASONS = {
    SimulationPhase.ORBIT_ACHIEVED: "Orbit achieved",
    SimulationPhase.ALL_STAGES_EXHAUSTED: "All stages exhausted",
    SimulationPhase.TIME_LIMIT: "Maximum simulation time reached",
}


class SimulationEvent(NamedTuple):
    """Outcome of one loop iteration."""
    phase: SimulationPhase
    delay: float                                  # s, pacing hint
    snapshot: Optional[TelemetrySnapshot] = None  # RUNNING only
    stage_number: Optional[int] = None            # STAGE_TRANSITION only (1-based)


@dataclass
class SimulationResult:
    """Final outcome of a run."""
    final_state: VehicleState
    phase: SimulationPhase
    reason: str
    ticks: int
    log: TelemetryLog
    life_support: LifeSupportState


class AscentSimulation:
    """
    Owns the vehicle, stages, consumables and atmosphere for one run.

    Args:
        config: Mission configuration (default profile if None)
    """

    def __init__(self, config: MissionConfig = None):
        self.config = config if config is not None else create_default_config()
        self.atmosphere = AtmosphereModel(
            layers=build_isa_layers(sea_level_pressure=self.config.sea_level_pressure,
                                    g0=self.config.g0,
                                    gas_constant=self.config.gas_constant),
            g0=self.config.g0,
            gas_constant=self.config.gas_constant,
        )
        self.stages = StageSet(self.config.stages)
        self.state = create_initial_state(self.config)
        self.life_support = LifeSupportTracker.from_config(self.config)
        self.log = TelemetryLog()
        self.phase = SimulationPhase.RUNNING
        self.ticks = 0

    @property
    def finished(self) -> bool:
        return self.phase in TERMINAL_PHASES

    @property
    def reason(self) -> str:
        return TERMINATION_REASONS.get(self.phase, "Simulation in progress")

    def check_termination(self) -> Tuple[bool, Optional[SimulationPhase]]:
        """
        Check if the run should stop.

        Returns:
            (should_terminate, terminal_phase) tuple
        """
        if self.stages.exhausted:
            return True, SimulationPhase.ALL_STAGES_EXHAUSTED
        if self.state.altitude >= self.config.orbit_altitude:
            return True, SimulationPhase.ORBIT_ACHIEVED
        if self.state.t >= self.config.max_time:
            return True, SimulationPhase.TIME_LIMIT
        return False, None

    def tick(self) -> TelemetrySnapshot:
        """
        Execute one physics tick with the burning stage.

        Order: atmosphere sample, integrator step, stage burn, life support,
        validation, logging.
        """
        stage = self.stages.current_stage()
        if stage is None:
            raise RuntimeError("No stage left to burn")

        sample = self.atmosphere.sample(self.state.altitude)
        result = integrator.step(self.state, stage, sample, self.config)
        self.stages.burn(result.fuel_used)
        self.life_support.update(self.config.time_step)
        self.state = result.state

        snapshot = self._snapshot(result, sample)
        try:
            validate_state(self.state)
            validate_snapshot(snapshot)
        except ValidationError as e:
            logger.error(f"Validation failed at t={self.state.t:.2f}s: {e}")
            raise

        self.log.append(snapshot)
        self.ticks += 1
        return snapshot

    def advance(self) -> SimulationEvent:
        """Run one loop iteration: termination, jettison, or a physics tick."""
        if self.finished:
            return SimulationEvent(self.phase, 0.0)

        should_terminate, phase = self.check_termination()
        if should_terminate:
            self.phase = phase
            logger.info(f"Simulation terminated: {self.reason} "
                        f"({self.state})")
            return SimulationEvent(phase, 0.0)

        if self.stages.advance_if_depleted(self.state):
            self.phase = SimulationPhase.STAGE_TRANSITION
            return SimulationEvent(self.phase, self.config.stage_transition_delay,
                                   stage_number=self.stages.index)

        snapshot = self.tick()
        self.phase = SimulationPhase.RUNNING
        return SimulationEvent(self.phase, self.config.time_step, snapshot=snapshot)

    def run(self, renderer: Renderer = None, pacer: Pacer = None,
            max_ticks: Optional[int] = None) -> SimulationResult:
        """
        Drive the loop until a terminal phase (or max_ticks physics ticks).

        Args:
            renderer: Receives snapshots and jettison events (no-op if None)
            pacer: Receives delay hints (no-op if None)
            max_ticks: Optional cap on physics ticks for this call

        Returns:
            SimulationResult
        """
        renderer = renderer if renderer is not None else Renderer()
        pacer = pacer if pacer is not None else Pacer()

        logger.info(f"Starting simulation: {len(self.stages)} stages, "
                    f"dt={self.config.time_step}s, "
                    f"orbit={self.config.orbit_altitude/1000:.0f}km")
        logger.debug(f"Initial state: {self.state}")

        start_time = time.time()
        start_ticks = self.ticks
        while True:
            event = self.advance()
            if event.phase in TERMINAL_PHASES:
                break
            if event.phase == SimulationPhase.STAGE_TRANSITION:
                renderer.stage_jettisoned(event.stage_number, len(self.stages))
            else:
                renderer.render(event.snapshot)
            pacer.pause(event.delay)

            if max_ticks is not None and self.ticks - start_ticks >= max_ticks:
                break

        result = SimulationResult(
            final_state=self.state.copy(),
            phase=self.phase,
            reason=self.reason,
            ticks=self.ticks,
            log=self.log,
            life_support=LifeSupportState(**vars(self.life_support.state)),
        )
        renderer.finished(result)

        elapsed = time.time() - start_time
        logger.info(f"Simulation complete: {self.ticks - start_ticks} ticks in {elapsed:.2f}s")
        return result

    def _snapshot(self, result: StepResult, sample: AtmosphereSample) -> TelemetrySnapshot:
        s = result.state
        return TelemetrySnapshot(
            t=s.t,
            altitude=s.altitude,
            velocity=s.velocity,
            acceleration=result.acceleration,
            thrust=result.thrust,
            throttle=result.throttle,
            net_force=result.net_force,
            mass_flow=result.mass_flow,
            total_mass=s.total_mass,
            density=sample.density,
            pressure=sample.pressure,
            temperature=sample.temperature,
            drag=result.drag,
            dynamic_pressure=result.dynamic_pressure,
            gravity=result.gravity,
            isp=result.isp,
            cabin_pressure=self.config.cabin_pressure,
            oxygen_mass=self.life_support.oxygen_mass,
            co2_mass=self.life_support.co2_mass,
            mach=result.mach,
            drag_coefficient=result.drag_coefficient,
            pitch_angle=s.pitch_angle,
            current_stage_index=s.current_stage_index,
            stage_count=len(self.stages),
        )


def run_simulation(config: MissionConfig = None, renderer: Renderer = None,
                   pacer: Pacer = None, max_ticks: Optional[int] = None) -> SimulationResult:
    """Build an AscentSimulation and run it to completion."""
    return AscentSimulation(config).run(renderer=renderer, pacer=pacer, max_ticks=max_ticks)
