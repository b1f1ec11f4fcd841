"""
Multi-Stage Ascent Simulation - Physical Constants and Mission Profile

This module defines the physical constants, the ISA layer definition and the
default mission profile used to seed MissionConfig.
"""

# =============================================================================
# EARTH & ATMOSPHERE PARAMETERS
# =============================================================================

# Standard gravitational acceleration at sea level (m/s^2)
G0 = 9.80665

# Earth mean radius (m)
R_EARTH = 6.371e6

# Specific gas constant for dry air (J/(kg·K))
R_GAS = 287.05

# Ratio of specific heats for air
GAMMA = 1.4

# Sea-level reference state
SEA_LEVEL_TEMPERATURE = 288.15  # K
SEA_LEVEL_PRESSURE = 101325.0   # Pa

# ISA layer definition: (base altitude (m), lapse rate (K/m))
# Base temperatures and pressures are derived by chaining from sea level.
ISA_LAYER_DEFINITION = (
    (0.0, -0.0065),      # Troposphere
    (11000.0, 0.0),      # Tropopause
    (20000.0, 0.0010),   # Stratosphere (lower)
    (32000.0, 0.0028),   # Stratosphere (upper)
    (47000.0, 0.0),      # Stratopause
    (51000.0, -0.0028),  # Mesosphere (lower)
    (71000.0, -0.0020),  # Mesosphere (upper)
)

# Lowest temperature the top layer's lapse may reach (K). Above the altitude
# where it is reached the profile is continued isothermally.
ATMOSPHERE_MIN_TEMPERATURE = 1.0

# Display bands (upper bound (m), label) for the telemetry renderer
ATMOSPHERE_BANDS = (
    (11000.0, "Troposphere"),
    (20000.0, "Stratosphere"),
    (32000.0, "Stratopause"),
    (47000.0, "Mesosphere"),
)
ATMOSPHERE_TOP_BAND = "Thermosphere"

# =============================================================================
# PROPULSION & AERODYNAMICS
# =============================================================================

ISP_SEA_LEVEL = 300.0  # s
ISP_VACUUM = 450.0     # s

# Transonic drag rise: Cd(M)
CD_SUBSONIC = 0.5
CD_SUPERSONIC = 0.8
MACH_DRAG_RISE_START = 0.8
MACH_DRAG_RISE_END = 1.2

# Max-Q throttling
MAX_DYNAMIC_PRESSURE = 35000.0  # Pa
THROTTLE_ALTITUDE = 5000.0      # m (no throttling at or below)

# =============================================================================
# GUIDANCE
# =============================================================================

PITCH_VERTICAL = 90.0          # deg
PITCH_HORIZONTAL = 0.0         # deg
PITCH_RAMP_START = 10000.0     # m
PITCH_RAMP_END = 100000.0      # m

# =============================================================================
# MISSION PROFILE
# =============================================================================

# Stages, bottom to top: (dry mass (kg), fuel mass (kg), max thrust (N), diameter (m))
DEFAULT_STAGES = (
    (30000.0, 400000.0, 8.0e6, 5.0),
    (8000.0, 150000.0, 2.0e6, 4.0),
    (3000.0, 50000.0, 0.5e6, 3.0),
)

PAYLOAD_MASS = 1000.0        # kg
DT = 0.1                     # s
ORBIT_ALTITUDE = 400000.0    # m
MAX_TIME = 3600.0            # s (safety bound on simulated time)

# =============================================================================
# CREW & LIFE SUPPORT
# =============================================================================

CREW_COUNT = 4
OXYGEN_MASS = 2000.0    # kg
CO2_MASS = 0.0          # kg
OXYGEN_RATE = 0.5       # kg per crew member per hour
CO2_RATE = 0.4          # kg per crew member per hour
CABIN_PRESSURE = 101325.0  # Pa (informational)

SECONDS_PER_HOUR = 3600.0

# =============================================================================
# PRESENTATION HINTS
# =============================================================================

STAGE_TRANSITION_DELAY = 2.0   # s wall-clock pause after a jettison
PROGRESS_BAR_WIDTH = 60
PROGRESS_BAR_STEP = 5000.0     # m per progress mark
