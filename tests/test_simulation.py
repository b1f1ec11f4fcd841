import pytest
import numpy as np
from ascent_sim import constants as C
from ascent_sim.config import StageSpec, create_test_config
from ascent_sim.pacing import Pacer
from ascent_sim.render import Renderer
from ascent_sim.simulation import (
    TERMINAL_PHASES,
    AscentSimulation,
    SimulationPhase,
    run_simulation,
)
from ascent_sim.validation import ValidationError


class RecordingRenderer(Renderer):
    def __init__(self):
        self.snapshots = []
        self.jettisons = []
        self.result = None

    def render(self, snapshot):
        self.snapshots.append(snapshot)

    def stage_jettisoned(self, stage_number, stage_count):
        self.jettisons.append((stage_number, stage_count))

    def finished(self, result):
        self.result = result


class RecordingPacer(Pacer):
    def __init__(self):
        self.delays = []

    def pause(self, seconds):
        self.delays.append(seconds)


def test_zero_stages_terminates_immediately():
    cfg = create_test_config(stages=())
    result = AscentSimulation(cfg).run()
    assert result.phase == SimulationPhase.ALL_STAGES_EXHAUSTED
    assert result.ticks == 0
    assert len(result.log) == 0


def test_first_tick_scenario():
    sim = AscentSimulation(create_test_config())
    snapshot = sim.tick()
    fuel_used = 2.0e6 / (300.0 * C.G0) * 0.1
    assert snapshot.altitude > 0.0
    assert snapshot.velocity > 0.0
    assert snapshot.total_mass == pytest.approx(11000.0 - fuel_used)
    assert snapshot.temperature == pytest.approx(288.15)
    assert sim.stages[0].fuel_mass == pytest.approx(10000.0 - fuel_used)
    assert snapshot.stage_count == 1
    assert snapshot.cabin_pressure == C.CABIN_PRESSURE


def test_single_stage_runs_to_exhaustion():
    renderer = RecordingRenderer()
    pacer = RecordingPacer()
    cfg = create_test_config()
    result = AscentSimulation(cfg).run(renderer=renderer, pacer=pacer)

    assert result.phase == SimulationPhase.ALL_STAGES_EXHAUSTED
    assert result.reason == "All stages exhausted"
    assert renderer.jettisons == [(1, 1)]
    assert len(renderer.snapshots) == result.ticks == len(result.log)
    assert renderer.result is result
    # One delay hint per tick plus one for the jettison
    assert len(pacer.delays) == result.ticks + 1
    assert pacer.delays.count(cfg.time_step) == result.ticks
    assert result.final_state.total_mass == pytest.approx(0.0, abs=1e-6)


def test_one_tick_depletion_lag():
    sim = AscentSimulation(create_test_config())
    events = []
    while True:
        event = sim.advance()
        events.append(event)
        if event.phase == SimulationPhase.STAGE_TRANSITION:
            break
    # The tick that emptied the tank ran with the stage still attached
    last_tick = events[-2]
    assert last_tick.phase == SimulationPhase.RUNNING
    assert last_tick.snapshot.current_stage_index == 0
    assert last_tick.snapshot.thrust > 0.0
    assert sim.stages[0].fuel_mass <= 0.0
    assert sim.stages[0].jettisoned
    assert events[-1].stage_number == 1

    assert sim.advance().phase == SimulationPhase.ALL_STAGES_EXHAUSTED


def test_depleted_stage_jettisoned_before_first_tick():
    cfg = create_test_config(stages=(
        StageSpec(500.0, 0.0, 1.0e5, 1.0),
        StageSpec(1000.0, 10000.0, 2.0e6, 2.0),
    ))
    sim = AscentSimulation(cfg)
    event = sim.advance()
    assert event.phase == SimulationPhase.STAGE_TRANSITION
    assert event.delay == cfg.stage_transition_delay
    assert sim.state.total_mass == pytest.approx(11000.0)
    assert sim.ticks == 0

    event = sim.advance()
    assert event.phase == SimulationPhase.RUNNING
    assert event.snapshot.current_stage_index == 1


def test_orbit_achieved():
    cfg = create_test_config(orbit_altitude=1000.0)
    result = run_simulation(cfg)
    assert result.phase == SimulationPhase.ORBIT_ACHIEVED
    assert result.final_state.altitude >= 1000.0
    assert result.log.altitude[-2] < 1000.0


def test_time_limit():
    cfg = create_test_config(max_time=0.5)
    result = run_simulation(cfg)
    assert result.phase == SimulationPhase.TIME_LIMIT
    assert result.ticks in (5, 6)


def test_max_ticks_stops_early():
    sim = AscentSimulation(create_test_config())
    result = sim.run(max_ticks=3)
    assert result.ticks == 3
    assert result.phase == SimulationPhase.RUNNING
    assert not sim.finished


def test_run_simulation_forwards_max_ticks():
    result = run_simulation(create_test_config(), max_ticks=5)
    assert result.ticks == 5
    assert len(result.log) == 5
    assert result.phase == SimulationPhase.RUNNING


def test_terminal_phase_is_sticky():
    sim = AscentSimulation(create_test_config(stages=()))
    assert sim.advance().phase == SimulationPhase.ALL_STAGES_EXHAUSTED
    assert sim.advance().phase == SimulationPhase.ALL_STAGES_EXHAUSTED


def test_tick_without_stage_raises():
    sim = AscentSimulation(create_test_config(stages=()))
    with pytest.raises(RuntimeError):
        sim.tick()


def test_non_finite_state_raises_validation_error():
    sim = AscentSimulation(create_test_config())
    sim.state.velocity = float('nan')
    with pytest.raises(ValidationError):
        sim.tick()


def test_default_mission_completes():
    result = run_simulation()
    assert result.phase in TERMINAL_PHASES
    assert result.phase != SimulationPhase.TIME_LIMIT
    log = result.log
    assert len(log) == result.ticks > 0

    # Stage index never decreases and at least one staging happened
    assert all(b >= a for a, b in zip(log.current_stage_index, log.current_stage_index[1:]))
    assert max(log.current_stage_index) >= 1

    for name in ('altitude', 'velocity', 'total_mass', 'dynamic_pressure', 'isp', 'mach'):
        assert np.all(np.isfinite(getattr(log, name)))

    assert all(m > 0.0 for m in log.total_mass)
    assert result.life_support.oxygen_mass < C.OXYGEN_MASS
    assert result.life_support.co2_mass > 0.0
    assert min(log.isp) >= C.ISP_SEA_LEVEL
    assert max(log.isp) <= C.ISP_VACUUM
