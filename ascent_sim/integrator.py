"""
Multi-Stage Ascent Simulation - Ascent Integrator

One fixed-step state transition. Every quantity is computed from the
pre-update altitude and velocity, in this order:

1. Gravity (inverse-square falloff)
2. Speed of sound and Mach number
3. Drag coefficient (transonic drag rise)
4. Reference area
5. Dynamic pressure
6. Max-Q throttle
7. Pressure-dependent Isp
8. Thrust and mass flow
9. Drag
10. Net force and acceleration
11. Pitch guidance (display only, thrust stays vertical)
12. Semi-implicit Euler: velocity first, then altitude with the new velocity
13. Mass update
"""

from typing import NamedTuple

import numpy as np

from . import constants as C
from .atmosphere import AtmosphereSample, speed_of_sound
from .config import MissionConfig
from .stages import Stage
from .state import VehicleState


class StepResult(NamedTuple):
    """Container for the new state and every quantity derived during the step."""
    state: VehicleState
    acceleration: float      # m/s^2
    thrust: float            # N
    throttle: float          # 0-1
    net_force: float         # N
    mass_flow: float         # kg/s
    fuel_used: float         # kg
    drag: float              # N
    drag_coefficient: float
    dynamic_pressure: float  # Pa
    gravity: float           # m/s^2
    isp: float               # s
    mach: float
    speed_of_sound: float    # m/s


# =============================================================================
# COMPONENT MODELS
# =============================================================================

def compute_gravity(altitude: float, g0: float = C.G0,
                    earth_radius: float = C.R_EARTH) -> float:
    """g = g0 * (Re / (Re + h))^2"""
    return g0 * (earth_radius / (earth_radius + altitude)) ** 2


def compute_drag_coefficient(mach: float) -> float:
    """
    Mach-dependent drag coefficient.

    Constant subsonic value below M0.8, linear rise to the supersonic value
    across M0.8-1.2, constant above.
    """
    if mach < C.MACH_DRAG_RISE_START:
        return C.CD_SUBSONIC
    if mach < C.MACH_DRAG_RISE_END:
        frac = (mach - C.MACH_DRAG_RISE_START) / (C.MACH_DRAG_RISE_END - C.MACH_DRAG_RISE_START)
        return C.CD_SUBSONIC + frac * (C.CD_SUPERSONIC - C.CD_SUBSONIC)
    return C.CD_SUPERSONIC


def compute_cross_sectional_area(diameter: float) -> float:
    return float(np.pi * diameter * diameter / 4.0)


def compute_dynamic_pressure(density: float, velocity: float) -> float:
    """q = 0.5 * rho * v^2"""
    return 0.5 * density * velocity * velocity


def compute_throttle(altitude: float, dynamic_pressure: float,
                     max_dynamic_pressure: float = C.MAX_DYNAMIC_PRESSURE,
                     throttle_altitude: float = C.THROTTLE_ALTITUDE) -> float:
    """
    Max-Q throttle command.

    Full throttle at or below throttle_altitude. Above it the engine is
    throttled down so that q never exceeds the limit; it is never throttled up.
    """
    if altitude <= throttle_altitude:
        return 1.0
    if dynamic_pressure > max_dynamic_pressure:
        return float(np.clip(max_dynamic_pressure / dynamic_pressure, 0.0, 1.0))
    return 1.0


def compute_isp(pressure: float, sea_level_pressure: float = C.SEA_LEVEL_PRESSURE,
                isp_sea: float = C.ISP_SEA_LEVEL, isp_vac: float = C.ISP_VACUUM) -> float:
    """Specific impulse interpolated on ambient/sea-level pressure ratio (s)."""
    isp = isp_sea + (isp_vac - isp_sea) * (1.0 - pressure / sea_level_pressure)
    return float(np.clip(isp, isp_sea, isp_vac))


def compute_pitch_angle(altitude: float, ramp_start: float = C.PITCH_RAMP_START,
                        ramp_end: float = C.PITCH_RAMP_END) -> float:
    """Pitch program: vertical until ramp_start, linear to horizontal at ramp_end (deg)."""
    if altitude <= ramp_start:
        return C.PITCH_VERTICAL
    if altitude >= ramp_end:
        return C.PITCH_HORIZONTAL
    frac = (altitude - ramp_start) / (ramp_end - ramp_start)
    return C.PITCH_VERTICAL - frac * (C.PITCH_VERTICAL - C.PITCH_HORIZONTAL)


# =============================================================================
# STEP
# =============================================================================

def step(state: VehicleState, stage: Stage, atmosphere: AtmosphereSample,
         config: MissionConfig) -> StepResult:
    """
    Advance the vehicle by one time step.

    Neither state nor stage is mutated; the caller applies fuel_used to the
    stage. Fuel is not clamped here, so a stage may end the step with
    negative fuel until the loop detects depletion.

    Args:
        state: Current vehicle state
        stage: Burning stage
        atmosphere: Atmosphere sample at state.altitude
        config: Mission configuration

    Returns:
        StepResult with the new state and the step's forces
    """
    dt = config.time_step
    h = state.altitude
    v = state.velocity
    m = state.total_mass
    rho, pressure, temperature = atmosphere

    gravity = compute_gravity(h, config.g0, config.earth_radius)

    a_sound = speed_of_sound(temperature, config.gamma, config.gas_constant)
    mach = v / a_sound if a_sound > 0.0 else 0.0

    cd = compute_drag_coefficient(mach)
    area = compute_cross_sectional_area(stage.diameter)
    q = compute_dynamic_pressure(rho, v)

    throttle = compute_throttle(h, q, config.max_dynamic_pressure, config.throttle_altitude)

    isp = compute_isp(pressure, config.sea_level_pressure, config.isp_sea, config.isp_vac)
    exhaust_velocity = isp * config.g0

    thrust = stage.thrust_max * throttle
    mass_flow = thrust / exhaust_velocity
    fuel_used = mass_flow * dt

    drag = 0.5 * rho * v * v * cd * area

    net_force = thrust - drag - m * gravity
    acceleration = net_force / m

    pitch = compute_pitch_angle(h, config.pitch_ramp_start, config.pitch_ramp_end)

    v_new = v + acceleration * dt
    h_new = h + v_new * dt

    new_state = VehicleState(
        altitude=h_new,
        velocity=v_new,
        total_mass=m - fuel_used,
        pitch_angle=pitch,
        current_stage_index=state.current_stage_index,
        t=state.t + dt,
    )

    return StepResult(
        state=new_state,
        acceleration=acceleration,
        thrust=thrust,
        throttle=throttle,
        net_force=net_force,
        mass_flow=mass_flow,
        fuel_used=fuel_used,
        drag=drag,
        drag_coefficient=cd,
        dynamic_pressure=q,
        gravity=gravity,
        isp=isp,
        mach=mach,
        speed_of_sound=a_sound,
    )
