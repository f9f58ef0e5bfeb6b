"""
inverse.py – Inverse model: altitude from a pressure/temperature reading.

Each layer's pressure law is inverted algebraically; there is no iteration.
A reading whose pressure lies outside the zone's pressure band has no valid
altitude in that zone and yields ``None``.

Power-law layers (troposphere, upper stratosphere) use the measured
temperature T to recover the layer base temperature T_b implied by the
reading, then step back along the lapse rate a:

    p / p_b = (T_b' / T_b)^k   with   T_b' = T · (p_b / p)^(1/k)
    h = h_b + (T / a) · [1 − (p_b / p)^(1/k)]

The isothermal lower stratosphere inverts the exponential law:

    h = h_b + ln(p / p_b) / (−decay)
"""

from __future__ import annotations
import logging
import math

from baroalt.atmosphere import celsius_to_kelvin, hpa_to_kpa
from baroalt.zones import (
    AtmosphereZone, ZoneConstants,
    pressure_band, zone_constants, zone_for_pressure,
)

logger = logging.getLogger(__name__)


def _invert_power_law(c: ZoneConstants, temperature_c: float,
                      pressure_kpa: float) -> float | None:
    T_abs = celsius_to_kelvin(temperature_c)
    if T_abs <= 0.0:
        logger.debug("%s: non-physical temperature %.2f °C",
                     c.zone.value, temperature_c)
        return None
    ratio = (c.base_pressure / pressure_kpa) ** (1.0 / c.exponent)
    return c.base_altitude + (T_abs / c.lapse_rate) * (1.0 - ratio)


def _invert_exponential(c: ZoneConstants, pressure_kpa: float) -> float:
    return c.base_altitude + math.log(pressure_kpa / c.base_pressure) / -c.decay


def altitude_from_state(zone: AtmosphereZone, temperature_c: float,
                        pressure_kpa: float) -> float | None:
    """
    Altitude [m] for a reading taken in ``zone``.

    Parameters
    ----------
    zone          : atmospheric zone the reading belongs to
    temperature_c : measured temperature  [°C]
    pressure_kpa  : measured pressure  [kPa]

    Returns
    -------
    Altitude in metres, or None when the pressure is outside the zone's
    (low, high] band (or the temperature is below absolute zero for a
    power-law zone).
    """
    low, high = pressure_band(zone)
    if not (low < pressure_kpa <= high):
        logger.debug("%s: pressure %.4f kPa outside (%.4f, %.4f]",
                     zone.value, pressure_kpa, low, high)
        return None

    c = zone_constants(zone)
    if c.isothermal:
        return _invert_exponential(c, pressure_kpa)
    return _invert_power_law(c, temperature_c, pressure_kpa)


def altitude_from_pressure(temperature_c: float,
                           pressure_kpa: float) -> float | None:
    """Classify the reading by its pressure band, then invert."""
    zone = zone_for_pressure(pressure_kpa)
    if zone is None:
        logger.debug("no zone accepts pressure %.4f kPa", pressure_kpa)
        return None
    return altitude_from_state(zone, temperature_c, pressure_kpa)


def altitude_from_reading(temperature_c: float, pressure_hpa: float,
                          zone: AtmosphereZone | None = None) -> float | None:
    """hPa entry point for instrument readings; zone optional."""
    pressure_kpa = hpa_to_kpa(pressure_hpa)
    if zone is None:
        return altitude_from_pressure(temperature_c, pressure_kpa)
    return altitude_from_state(zone, temperature_c, pressure_kpa)
