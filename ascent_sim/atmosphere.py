"""
Multi-Stage Ascent Simulation - Atmosphere Model

Layered International Standard Atmosphere (barometric formula). The layer
table is immutable and injected into AtmosphereModel; no module-level
mutable state.
"""

from dataclasses import dataclass
from typing import NamedTuple, Sequence, Tuple

import numpy as np

from . import constants as C


@dataclass(frozen=True)
class AtmosphereLayer:
    """One ISA layer. Temperature varies linearly with altitude inside it."""
    base_altitude: float     # m
    lapse_rate: float        # K/m
    base_temperature: float  # K
    base_pressure: float     # Pa


class AtmosphereSample(NamedTuple):
    """Atmospheric state at one altitude."""
    density: float      # kg/m^3
    pressure: float     # Pa
    temperature: float  # K

    @property
    def available(self) -> bool:
        """False for the zero-valued "no atmosphere data" sentinel."""
        return self.temperature > 0.0


NO_ATMOSPHERE = AtmosphereSample(0.0, 0.0, 0.0)


def _layer_state(layer: AtmosphereLayer, altitude: float,
                 g0: float, gas_constant: float) -> Tuple[float, float]:
    """Temperature and pressure at altitude using the layer's barometric formula."""
    dh = altitude - layer.base_altitude
    T = layer.base_temperature + layer.lapse_rate * dh
    if layer.lapse_rate == 0.0:
        P = layer.base_pressure * np.exp(-g0 * dh / (gas_constant * layer.base_temperature))
    else:
        exponent = g0 / (layer.lapse_rate * gas_constant)
        P = layer.base_pressure * (layer.base_temperature / T) ** exponent
    return float(T), float(P)


def build_isa_layers(definition: Sequence[Tuple[float, float]] = C.ISA_LAYER_DEFINITION,
                     sea_level_temperature: float = C.SEA_LEVEL_TEMPERATURE,
                     sea_level_pressure: float = C.SEA_LEVEL_PRESSURE,
                     g0: float = C.G0,
                     gas_constant: float = C.R_GAS) -> Tuple[AtmosphereLayer, ...]:
    """
    Build the ISA layer table from (base altitude, lapse rate) pairs.

    Each layer's base temperature and pressure is the previous layer's
    state evaluated at this layer's base, so the profile is continuous at
    every boundary.
    """
    layers = []
    T0, P0 = sea_level_temperature, sea_level_pressure
    for base_altitude, lapse_rate in definition:
        if layers:
            T0, P0 = _layer_state(layers[-1], base_altitude, g0, gas_constant)
        layers.append(AtmosphereLayer(float(base_altitude), float(lapse_rate), T0, P0))
    return tuple(layers)


ISA_LAYERS = build_isa_layers()


class AtmosphereModel:
    """
    Maps altitude to (density, pressure, temperature).

    Args:
        layers: Layer table ordered by strictly increasing base altitude
        g0: Standard gravity (m/s^2)
        gas_constant: Specific gas constant (J/(kg·K))
        min_temperature: Temperature floor for the top layer's lapse (K);
            above the altitude where it is reached the profile continues
            isothermally
    """

    def __init__(self, layers: Sequence[AtmosphereLayer] = ISA_LAYERS,
                 g0: float = C.G0, gas_constant: float = C.R_GAS,
                 min_temperature: float = C.ATMOSPHERE_MIN_TEMPERATURE):
        layers = tuple(layers)
        if not layers:
            raise ValueError("Atmosphere layer table is empty")
        for lower, upper in zip(layers, layers[1:]):
            if upper.base_altitude <= lower.base_altitude:
                raise ValueError(
                    f"Layer base altitudes must be strictly increasing: "
                    f"{lower.base_altitude} followed by {upper.base_altitude}"
                )
        top = layers[-1]
        if not 0.0 < min_temperature < top.base_temperature:
            raise ValueError(
                f"min_temperature ({min_temperature}) must lie in "
                f"(0, {top.base_temperature})"
            )

        self.layers = layers
        self.g0 = g0
        self.gas_constant = gas_constant
        self.min_temperature = min_temperature
        if top.lapse_rate < 0.0:
            self.floor_altitude = (top.base_altitude
                                   + (min_temperature - top.base_temperature) / top.lapse_rate)
            _, self._floor_pressure = _layer_state(top, self.floor_altitude, g0, gas_constant)
        else:
            self.floor_altitude = float('inf')
            self._floor_pressure = 0.0

    def find_layer(self, altitude: float) -> int:
        """Index of the highest layer whose base is at or below altitude, or -1."""
        for idx in range(len(self.layers) - 1, -1, -1):
            if altitude >= self.layers[idx].base_altitude:
                return idx
        return -1

    def sample(self, altitude: float) -> AtmosphereSample:
        """
        Sample the atmosphere at a geometric altitude.

        Returns:
            AtmosphereSample; the (0, 0, 0) sentinel if altitude lies below
            the lowest layer.
        """
        idx = self.find_layer(altitude)
        if idx < 0:
            return NO_ATMOSPHERE

        if altitude > self.floor_altitude:
            T = self.min_temperature
            P = self._floor_pressure * np.exp(
                -self.g0 * (altitude - self.floor_altitude) / (self.gas_constant * T)
            )
        else:
            T, P = _layer_state(self.layers[idx], altitude, self.g0, self.gas_constant)

        rho = P / (self.gas_constant * T)
        return AtmosphereSample(float(rho), float(P), float(T))


def speed_of_sound(temperature: float, gamma: float = C.GAMMA,
                   gas_constant: float = C.R_GAS) -> float:
    """a = sqrt(gamma * R * T); 0.0 when there is no atmosphere data."""
    if temperature <= 0.0:
        return 0.0
    return float(np.sqrt(gamma * gas_constant * temperature))


def describe_layer(altitude: float) -> str:
    """Display name of the atmospheric band containing altitude."""
    for upper, name in C.ATMOSPHERE_BANDS:
        if altitude < upper:
            return name
    return C.ATMOSPHERE_TOP_BAND
