"""
Multi-Stage Ascent Simulation - Post-Flight Plots

Static matplotlib figures built from a TelemetryLog. Uses the Agg backend so
plots can be generated headless.
"""

import logging
import os
from typing import List

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
import numpy as np

from . import constants as C
from .telemetry import TelemetryLog

logger = logging.getLogger(__name__)


def _stage_boundaries(log: TelemetryLog) -> np.ndarray:
    """Times at which the burning stage index changes."""
    t = np.asarray(log.t)
    idx = np.asarray(log.current_stage_index)
    if len(idx) < 2:
        return np.array([])
    return t[1:][np.diff(idx) != 0]


def _mark_stages(ax, boundaries: np.ndarray):
    for tb in boundaries:
        ax.axvline(tb, color='gray', linestyle=':', linewidth=1.0)


def _save(fig, output_dir: str, name: str) -> str:
    path = os.path.join(output_dir, name)
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    logger.info(f"Saved plot: {path}")
    return path


def plot_trajectory(log: TelemetryLog, output_dir: str) -> str:
    """Altitude, velocity and pitch program against time."""
    t = np.asarray(log.t)
    boundaries = _stage_boundaries(log)
    fig, axes = plt.subplots(3, 1, figsize=(10, 10), sharex=True)

    axes[0].plot(t, np.asarray(log.altitude) / 1000.0, color='tab:blue')
    axes[0].set_ylabel('Altitude (km)')
    axes[0].set_title('Ascent Trajectory')

    axes[1].plot(t, log.velocity, color='tab:green')
    axes[1].set_ylabel('Velocity (m/s)')

    axes[2].plot(t, log.pitch_angle, color='tab:purple')
    axes[2].set_ylabel('Pitch (deg)')
    axes[2].set_xlabel('Time (s)')

    for ax in axes:
        _mark_stages(ax, boundaries)
        ax.grid(True, alpha=0.3)
    return _save(fig, output_dir, 'trajectory.png')


def plot_propulsion(log: TelemetryLog, output_dir: str) -> str:
    """Mass, thrust/throttle and Isp against time."""
    t = np.asarray(log.t)
    boundaries = _stage_boundaries(log)
    fig, axes = plt.subplots(3, 1, figsize=(10, 10), sharex=True)

    axes[0].plot(t, np.asarray(log.total_mass) / 1000.0, color='tab:brown')
    axes[0].set_ylabel('Mass (t)')
    axes[0].set_title('Mass & Propulsion')

    axes[1].plot(t, np.asarray(log.thrust) / 1e6, color='tab:red', label='Thrust')
    axes[1].set_ylabel('Thrust (MN)')
    ax_thr = axes[1].twinx()
    ax_thr.plot(t, log.throttle, color='tab:orange', linestyle='--', label='Throttle')
    ax_thr.set_ylabel('Throttle')
    ax_thr.set_ylim(0.0, 1.05)

    axes[2].plot(t, log.isp, color='tab:cyan')
    axes[2].set_ylabel('Isp (s)')
    axes[2].set_xlabel('Time (s)')

    for ax in axes:
        _mark_stages(ax, boundaries)
        ax.grid(True, alpha=0.3)
    return _save(fig, output_dir, 'propulsion.png')


def plot_aerodynamics(log: TelemetryLog, output_dir: str) -> str:
    """Dynamic pressure with the Max-Q limit, Mach and drag coefficient."""
    t = np.asarray(log.t)
    boundaries = _stage_boundaries(log)
    fig, axes = plt.subplots(3, 1, figsize=(10, 10), sharex=True)

    axes[0].plot(t, np.asarray(log.dynamic_pressure) / 1000.0, color='tab:red')
    axes[0].axhline(C.MAX_DYNAMIC_PRESSURE / 1000.0, color='k', linestyle='--',
                    linewidth=1.0, label='Max-Q limit')
    axes[0].set_ylabel('q (kPa)')
    axes[0].set_title('Aerodynamics')
    axes[0].legend(loc='upper right')

    axes[1].plot(t, log.mach, color='tab:blue')
    axes[1].set_ylabel('Mach')

    axes[2].plot(t, log.drag_coefficient, color='tab:gray')
    axes[2].set_ylabel('Cd')
    axes[2].set_xlabel('Time (s)')

    for ax in axes:
        _mark_stages(ax, boundaries)
        ax.grid(True, alpha=0.3)
    return _save(fig, output_dir, 'aerodynamics.png')


def plot_consumables(log: TelemetryLog, output_dir: str) -> str:
    t = np.asarray(log.t)
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(t, log.oxygen_mass, color='tab:blue', label='O₂ remaining')
    ax.set_ylabel('O₂ (kg)')
    ax.set_xlabel('Time (s)')
    ax.set_title('Crew Life Support')
    ax_co2 = ax.twinx()
    ax_co2.plot(t, log.co2_mass, color='tab:red', label='CO₂ produced')
    ax_co2.set_ylabel('CO₂ (kg)')
    ax.grid(True, alpha=0.3)
    return _save(fig, output_dir, 'consumables.png')


def generate_all_plots(log: TelemetryLog, output_dir: str) -> List[str]:
    """
    Generate every post-flight plot.

    Returns:
        Paths of the written PNG files (empty if the log has no ticks).
    """
    if len(log) == 0:
        logger.warning("Telemetry log is empty; no plots generated")
        return []
    os.makedirs(output_dir, exist_ok=True)
    return [
        plot_trajectory(log, output_dir),
        plot_propulsion(log, output_dir),
        plot_aerodynamics(log, output_dir),
        plot_consumables(log, output_dir),
    ]
