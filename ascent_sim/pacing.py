"""
Multi-Stage Ascent Simulation - Wall-Clock Pacing

The core reports a desired delay after each event; a pacer decides whether
and how long to wait. Pacing never changes the simulated time step.
"""

import time


class Pacer:
    """No-op pacer for batch and headless runs."""

    def pause(self, seconds: float):
        pass


class RealTimePacer(Pacer):
    """
    Sleeps for the hinted delay divided by time_scale.

    time_scale=1.0 plays back in real time, 10.0 ten times faster.
    """

    def __init__(self, time_scale: float = 1.0, sleep=time.sleep):
        if time_scale <= 0.0:
            raise ValueError(f"time_scale must be positive, got {time_scale}")
        self.time_scale = time_scale
        self._sleep = sleep

    def pause(self, seconds: float):
        if seconds > 0.0:
            self._sleep(seconds / self.time_scale)
