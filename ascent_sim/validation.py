"""
Multi-Stage Ascent Simulation - Validation Checks

Guards against numerical faults. A non-finite value or a non-positive mass
is an implementation bug, not a modelled condition, so these checks raise.
"""

from typing import Optional, Tuple

import numpy as np

from .state import VehicleState
from .telemetry import SNAPSHOT_FIELDS, TelemetrySnapshot


class ValidationError(Exception):
    """Raised when a physics validation check fails."""
    pass


def check_finite(name: str, value: float) -> bool:
    if not np.isfinite(value):
        raise ValidationError(f"Non-finite {name}: {value}")
    return True


def check_mass_valid(total_mass: float) -> bool:
    """
    Check that vehicle mass is positive.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if total_mass <= 0.0:
        raise ValidationError(f"Vehicle mass must stay positive: m = {total_mass:.3f} kg")
    return True


def validate_state(state: VehicleState,
                   abort_on_error: bool = True) -> Tuple[bool, Optional[str]]:
    """
    Perform all validation checks on a vehicle state.

    Args:
        state: State to validate
        abort_on_error: If True, raise on the first failure
    """
    try:
        for name in ('altitude', 'velocity', 'total_mass', 'pitch_angle', 't'):
            check_finite(name, getattr(state, name))
        check_mass_valid(state.total_mass)
        return True, None
    except ValidationError as e:
        if abort_on_error:
            raise
        return False, str(e)


def validate_snapshot(snapshot: TelemetrySnapshot) -> bool:
    """Every telemetry channel must be finite."""
    for name in SNAPSHOT_FIELDS:
        check_finite(name, getattr(snapshot, name))
    return True
