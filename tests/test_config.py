"""Tests for config module."""
import pytest
from dataclasses import replace
from ascent_sim import config
from ascent_sim import constants as C


def test_mission_config_defaults():
    """Test that default config uses constants values."""
    cfg = config.MissionConfig()
    assert cfg.time_step == C.DT
    assert cfg.orbit_altitude == C.ORBIT_ALTITUDE
    assert cfg.earth_radius == C.R_EARTH
    assert cfg.g0 == C.G0
    assert cfg.stage_count == 3
    assert cfg.stages[0] == config.StageSpec(30000.0, 400000.0, 8e6, 5.0)


def test_initial_mass():
    cfg = config.create_default_config()
    assert cfg.initial_mass == pytest.approx(430000.0 + 158000.0 + 53000.0 + 1000.0)


def test_mission_config_frozen():
    """Test that config is immutable (frozen)."""
    cfg = config.MissionConfig()
    with pytest.raises(Exception):  # FrozenInstanceError
        cfg.time_step = 0.5


def test_stages_coerced_to_tuple():
    cfg = config.MissionConfig(stages=[(100.0, 50.0, 1e4, 1.0)])
    assert isinstance(cfg.stages, tuple)
    assert isinstance(cfg.stages[0], config.StageSpec)


def test_replace_creates_variant():
    cfg = config.create_default_config()
    cfg2 = replace(cfg, orbit_altitude=200000.0)
    assert cfg2.orbit_altitude == 200000.0
    assert cfg.orbit_altitude == C.ORBIT_ALTITUDE


def test_create_test_config():
    """Test create_test_config factory function."""
    cfg = config.create_test_config()
    assert cfg.time_step == 0.1
    assert cfg.payload_mass == 0.0
    assert cfg.stage_count == 1
    assert cfg.initial_mass == pytest.approx(11000.0)


def test_create_test_config_custom():
    cfg = config.create_test_config(time_step=0.05, orbit_altitude=5000.0)
    assert cfg.time_step == 0.05
    assert cfg.orbit_altitude == 5000.0


def test_zero_stages_allowed():
    cfg = config.create_test_config(stages=())
    assert cfg.stage_count == 0


@pytest.mark.parametrize("overrides", [
    dict(time_step=0.0),
    dict(time_step=-0.1),
    dict(orbit_altitude=0.0),
    dict(earth_radius=-1.0),
    dict(g0=0.0),
    dict(sea_level_pressure=0.0),
    dict(max_time=0.0),
    dict(isp_sea=0.0),
    dict(isp_vac=200.0),
    dict(payload_mass=-1.0),
    dict(crew_count=-1),
    dict(oxygen_rate=-0.5),
    dict(pitch_ramp_start=100000.0, pitch_ramp_end=10000.0),
])
def test_invalid_config_rejected(overrides):
    with pytest.raises(config.ConfigurationError):
        config.create_test_config(**overrides)


@pytest.mark.parametrize("spec", [
    (-1.0, 10.0, 1e3, 1.0),
    (1.0, -10.0, 1e3, 1.0),
    (1.0, 10.0, -1e3, 1.0),
    (1.0, 10.0, 1e3, 0.0),
])
def test_invalid_stage_rejected(spec):
    with pytest.raises(config.ConfigurationError):
        config.StageSpec(*spec)


def test_configuration_error_is_value_error():
    assert issubclass(config.ConfigurationError, ValueError)


@pytest.mark.parametrize("stages, payload", [
    ((config.StageSpec(0.0, 100.0, 1.0e5, 1.0),), 0.0),
    ((config.StageSpec(1.0, 100.0, 1.0e5, 1.0),), 0.0),
    ((config.StageSpec(500.0, 100.0, 1.0e5, 1.0),
      config.StageSpec(0.0, 100.0, 1.0e5, 1.0)), 0.0),
])
def test_mass_that_can_burn_negative_rejected(stages, payload):
    """Final tick of any stage must not be able to drive vehicle mass <= 0."""
    with pytest.raises(config.ConfigurationError):
        config.create_test_config(stages=stages, payload_mass=payload)


def test_payload_keeps_massless_stage_valid():
    cfg = config.create_test_config(stages=(config.StageSpec(0.0, 100.0, 1.0e5, 1.0),),
                                    payload_mass=50.0)
    assert cfg.initial_mass == pytest.approx(150.0)


def test_tight_mass_margin_runs_without_validation_error():
    from ascent_sim.simulation import SimulationPhase, run_simulation

    cfg = config.create_test_config(stages=(config.StageSpec(5.0, 100.0, 1.0e5, 1.0),))
    result = run_simulation(cfg)
    assert result.phase == SimulationPhase.ALL_STAGES_EXHAUSTED
    assert len(result.log) > 0
    assert min(result.log.total_mass) > 0.0
