"""
Multi-Stage Ascent Simulation - Vehicle State

The single mutable vehicle state owned by the simulation loop. Velocity is a
scalar along the vertical axis; pitch is recorded for display only.
"""

from dataclasses import dataclass

from . import constants as C
from .config import MissionConfig


@dataclass
class VehicleState:
    """
    Vehicle state at one instant.

    Attributes:
        altitude: Height above sea level (m)
        velocity: Vertical velocity (m/s)
        total_mass: Vehicle mass including payload (kg)
        pitch_angle: Guidance pitch from horizontal (deg)
        current_stage_index: Index of the burning stage
        t: Simulated time since liftoff (s)
    """
    altitude: float = 0.0
    velocity: float = 0.0
    total_mass: float = 0.0
    pitch_angle: float = C.PITCH_VERTICAL
    current_stage_index: int = 0
    t: float = 0.0

    def copy(self) -> 'VehicleState':
        return VehicleState(
            altitude=self.altitude,
            velocity=self.velocity,
            total_mass=self.total_mass,
            pitch_angle=self.pitch_angle,
            current_stage_index=self.current_stage_index,
            t=self.t,
        )

    def __str__(self) -> str:
        return (
            f"VehicleState(t={self.t:.2f}s, "
            f"alt={self.altitude/1000:.2f}km, "
            f"v={self.velocity:.1f}m/s, "
            f"m={self.total_mass:.1f}kg, "
            f"stage={self.current_stage_index + 1})"
        )


def create_initial_state(config: MissionConfig) -> VehicleState:
    """
    Create the liftoff state for a mission.

    Returns:
        VehicleState at rest on the pad carrying every stage plus payload.
    """
    return VehicleState(
        altitude=0.0,
        velocity=0.0,
        total_mass=config.initial_mass,
        pitch_angle=C.PITCH_VERTICAL,
        current_stage_index=0,
        t=0.0,
    )
