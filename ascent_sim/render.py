"""
Multi-Stage Ascent Simulation - Telemetry Rendering

Presentation layer only. Renderers consume snapshots pushed by the
simulation loop and never feed anything back into the physics.
"""

import sys

from . import constants as C
from .atmosphere import describe_layer
from .telemetry import TelemetrySnapshot

CLEAR_SCREEN = "\033[2J\033[H"


class Renderer:
    """No-op renderer; used for headless runs and as the base class."""

    def render(self, snapshot: TelemetrySnapshot):
        pass

    def stage_jettisoned(self, stage_number: int, stage_count: int):
        pass

    def finished(self, result):
        pass


def format_stage_indicator(current: int, total: int) -> str:
    """'Stage: [ ][#][ ]' with the burning stage marked (1-based)."""
    marks = "".join("[#]" if i == current else "[ ]" for i in range(1, total + 1))
    return f"Stage: {marks}"


def format_progress_bar(altitude: float) -> str:
    bars = max(0, int(altitude / C.PROGRESS_BAR_STEP))
    rocket = ("#" * bars).ljust(C.PROGRESS_BAR_WIDTH)
    return f"Ascent Progress: [{rocket}] {altitude:.0f} m"


def format_telemetry(s: TelemetrySnapshot) -> str:
    """Boxed telemetry panel for one snapshot."""
    lines = [
        "╔═ Telemetry ═════════════════════════════════╗",
        f"│ Altitude       : {s.altitude:.0f} m    Mach: {s.mach:.2f}",
        f"│ Velocity       : {s.velocity:.1f} m/s      Cd: {s.drag_coefficient:.2f}",
        f"│ Acceleration   : {s.acceleration:.2f} m/s²",
        f"│ Total Thrust   : {s.thrust:.0f} N",
        f"│ Net Thrust     : {s.net_force:.0f} N",
        f"│ Mass Flow      : {s.mass_flow:.1f} kg/s",
        f"│ Total Mass     : {s.total_mass:.0f} kg",
        f"│ Air Density    : {s.density:.4f} kg/m³",
        f"│ Drag Force     : {s.drag:.0f} N",
        f"│ Dynamic Pressure: {s.dynamic_pressure:.0f} Pa",
        f"│ Gravity        : {s.gravity:.3f} m/s²",
        f"│ Isp            : {s.isp:.1f} s",
        f"│ Cabin Pressure : {s.cabin_pressure:.0f} Pa",
        f"│ O₂ Remaining   : {s.oxygen_mass:.1f} kg",
        f"│ CO₂ Produced   : {s.co2_mass:.1f} kg",
        f"│ Pitch Angle    : {s.pitch_angle:.2f}°",
        "╚══════════════════════════════════════════════╝",
    ]
    return "\n".join(lines)


class ConsoleRenderer(Renderer):
    """Redraws a text telemetry screen on every tick."""

    def __init__(self, stream=None, clear: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear

    def _write(self, text: str):
        if self.clear:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(text + "\n")
        self.stream.flush()

    def render(self, snapshot: TelemetrySnapshot):
        self._write("\n".join([
            format_stage_indicator(snapshot.current_stage_index + 1, snapshot.stage_count),
            format_telemetry(snapshot),
            format_progress_bar(snapshot.altitude),
            f"Speed          : {snapshot.velocity:.0f} m/s",
            describe_layer(snapshot.altitude),
        ]))

    def stage_jettisoned(self, stage_number: int, stage_count: int):
        self._write(f"=> Stage {stage_number} of {stage_count} jettisoned!")

    def finished(self, result):
        self.stream.write(f"=> {result.reason}\n")
        self.stream.write("Simulation finished.\n")
        self.stream.flush()
