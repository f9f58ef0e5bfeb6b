"""
atmosphere.py – Forward model: temperature and pressure at an altitude.

Implements the NASA 1960s three-layer fit of the lower atmosphere.
Temperatures are in °C, pressures in kPa, altitudes in geometric metres.

Layers
------
troposphere        : T = 15.04 − 0.00649·h
                     p = 101.29 · [(T + 273.1) / 288.14]^5.256
lower stratosphere : T = −56.46
                     p = 22.65 · exp(−0.000157 · (h − 11 000))
upper stratosphere : T = −56.46 + 0.00299 · (h − 25 000)
                     p = 2.488 · [(T + 273.1) / 216.64]^−11.388
"""

from __future__ import annotations
import math
from typing import NamedTuple

from baroalt.zones import (
    ZoneConstants, KELVIN_OFFSET,
    determine_zone, zone_constants,
)

HPA_PER_KPA = 10.0


class AtmosphericState(NamedTuple):
    """Expected temperature [°C] and pressure [kPa] at an altitude."""
    temperature_c: float
    pressure_kpa: float


# ── Unit helpers ─────────────────────────────────────────────────────

def hpa_to_kpa(pressure_hpa: float) -> float:
    return pressure_hpa / HPA_PER_KPA


def kpa_to_hpa(pressure_kpa: float) -> float:
    return pressure_kpa * HPA_PER_KPA


def celsius_to_kelvin(temperature_c: float) -> float:
    return temperature_c + KELVIN_OFFSET


# ── Per-layer formulas ───────────────────────────────────────────────

def layer_temperature(c: ZoneConstants, altitude_m: float) -> float:
    """T [°C] from the layer's linear temperature law."""
    return c.base_temperature + c.lapse_rate * (altitude_m - c.base_altitude)


def layer_pressure(c: ZoneConstants, altitude_m: float) -> float:
    """
    p [kPa] from the layer's pressure law.

    Isothermal layers decay exponentially from the base pressure; layers
    with a lapse rate follow p = p_b · (T / T_b)^k in absolute temperature.
    """
    if c.isothermal:
        return c.base_pressure * math.exp(-c.decay * (altitude_m - c.base_altitude))
    T_abs = celsius_to_kelvin(layer_temperature(c, altitude_m))
    return c.base_pressure * (T_abs / c.base_temperature_abs) ** c.exponent


# ── Public API ───────────────────────────────────────────────────────

def state_at_altitude(altitude_m: float) -> AtmosphericState:
    """
    Return (T [°C], p [kPa]) at geometric altitude ``altitude_m`` [m].

    Total over the real line: the zone is always resolvable, altitudes
    below sea level extrapolate the troposphere law.
    """
    c = zone_constants(determine_zone(altitude_m))
    return AtmosphericState(layer_temperature(c, altitude_m),
                            layer_pressure(c, altitude_m))


def temperature(altitude_m: float) -> float:
    """Air temperature [°C] at altitude h [m]."""
    return state_at_altitude(altitude_m).temperature_c


def pressure(altitude_m: float) -> float:
    """Atmospheric pressure [kPa] at altitude h [m]."""
    return state_at_altitude(altitude_m).pressure_kpa
