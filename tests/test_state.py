import pytest
from ascent_sim import state, constants as C
from ascent_sim.config import create_default_config, create_test_config


@pytest.fixture
def custom_state():
    return state.VehicleState(
        altitude=12000.0,
        velocity=678.9,
        total_mass=250000.0,
        pitch_angle=80.0,
        current_stage_index=1,
        t=42.0
    )


def test_default_state():
    s = state.VehicleState()
    assert s.altitude == 0.0
    assert s.velocity == 0.0
    assert s.pitch_angle == C.PITCH_VERTICAL
    assert s.current_stage_index == 0


def test_state_copy(custom_state):
    s2 = custom_state.copy()
    assert s2 == custom_state
    s2.altitude += 1.0
    assert s2.altitude != custom_state.altitude


def test_str(custom_state):
    s = str(custom_state)
    assert "VehicleState(" in s
    assert "alt=12.00km" in s
    assert "stage=2" in s


def test_create_initial_state():
    cfg = create_default_config()
    s = state.create_initial_state(cfg)
    assert s.altitude == 0.0
    assert s.velocity == 0.0
    assert s.total_mass == pytest.approx(cfg.initial_mass)
    assert s.t == 0.0


def test_initial_state_without_payload():
    s = state.create_initial_state(create_test_config())
    assert s.total_mass == pytest.approx(11000.0)
