import pytest
from ascent_sim import validation
from ascent_sim.simulation import AscentSimulation
from ascent_sim.config import create_test_config
from ascent_sim.state import VehicleState
from dataclasses import replace


def test_valid_state_passes():
    ok, msg = validation.validate_state(VehicleState(total_mass=100.0))
    assert ok is True
    assert msg is None


@pytest.mark.parametrize("field_name", ['altitude', 'velocity', 'total_mass', 'pitch_angle', 't'])
def test_non_finite_state_rejected(field_name):
    s = VehicleState(total_mass=100.0)
    setattr(s, field_name, float('inf'))
    with pytest.raises(validation.ValidationError):
        validation.validate_state(s)


def test_non_positive_mass_rejected():
    with pytest.raises(validation.ValidationError):
        validation.validate_state(VehicleState(total_mass=0.0))


def test_validate_state_without_abort():
    ok, msg = validation.validate_state(VehicleState(velocity=float('nan'), total_mass=1.0),
                                        abort_on_error=False)
    assert ok is False
    assert "velocity" in msg


def test_snapshot_validation():
    snapshot = AscentSimulation(create_test_config()).tick()
    assert validation.validate_snapshot(snapshot)
    bad = replace(snapshot, mach=float('nan'))
    with pytest.raises(validation.ValidationError):
        validation.validate_snapshot(bad)
