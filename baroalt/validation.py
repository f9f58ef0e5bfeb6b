"""
validation.py – Consistency check of a full (T, p, h) reading.

Given a temperature, a pressure in hPa and the altitude the reading claims
to come from, evaluate the forward model at that altitude and compare the
pressures.  A disagreement is reported in the returned ``ReadingCheck``;
it is never raised.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from baroalt.atmosphere import hpa_to_kpa, state_at_altitude
from baroalt.zones import AtmosphereZone, determine_zone

logger = logging.getLogger(__name__)

PRESSURE_TOLERANCE_KPA = 0.01


@dataclass(frozen=True)
class ReadingCheck:
    """Outcome of ``check_reading``."""
    zone: AtmosphereZone
    altitude_m: float
    temperature_c: float            # as supplied
    expected_temperature_c: float   # forward model at altitude_m
    measured_pressure_kpa: float    # supplied, converted from hPa
    expected_pressure_kpa: float    # forward model at altitude_m
    tolerance_kpa: float
    matches: bool

    @property
    def difference_kpa(self) -> float:
        """measured − expected  [kPa]"""
        return self.measured_pressure_kpa - self.expected_pressure_kpa


def check_reading(temperature_c: float, pressure_hpa: float,
                  altitude_m: float,
                  tolerance_kpa: float = PRESSURE_TOLERANCE_KPA) -> ReadingCheck:
    """
    Check a reading against the model.

    Parameters
    ----------
    temperature_c : measured temperature  [°C]
    pressure_hpa  : measured pressure  [hPa]
    altitude_m    : altitude the reading was taken at  [m]
    tolerance_kpa : absolute pressure tolerance  [kPa]

    Returns
    -------
    ReadingCheck with ``matches`` True when |p_measured − p_model| < tolerance.
    """
    pressure_kpa = hpa_to_kpa(pressure_hpa)
    zone = determine_zone(altitude_m)
    expected = state_at_altitude(altitude_m)
    matches = abs(pressure_kpa - expected.pressure_kpa) < tolerance_kpa

    if not matches:
        logger.info("pressure mismatch in %s at %.1f m: measured %.4f kPa, "
                    "expected %.4f kPa", zone.value, altitude_m,
                    pressure_kpa, expected.pressure_kpa)

    return ReadingCheck(
        zone=zone,
        altitude_m=altitude_m,
        temperature_c=temperature_c,
        expected_temperature_c=expected.temperature_c,
        measured_pressure_kpa=pressure_kpa,
        expected_pressure_kpa=expected.pressure_kpa,
        tolerance_kpa=tolerance_kpa,
        matches=matches,
    )


def reading_summary(check: ReadingCheck) -> str:
    """Format a human-readable consistency check summary."""
    lines = []
    lines.append(f"  Reading check ({check.zone.value}, h = {check.altitude_m:.1f} m):")
    lines.append(f"    Temperature  measured = {check.temperature_c:.2f} °C, "
                 f"model = {check.expected_temperature_c:.2f} °C")
    lines.append(f"    Pressure     measured = {check.measured_pressure_kpa:.4f} kPa, "
                 f"model = {check.expected_pressure_kpa:.4f} kPa")
    lines.append(f"    Difference = {check.difference_kpa:+.4f} kPa "
                 f"(tolerance {check.tolerance_kpa} kPa)")
    if check.matches:
        lines.append("    ✓  Reading consistent with the model")
    else:
        lines.append(f"    ⚠  PRESSURE MISMATCH for {check.zone.value}")
    return "\n".join(lines)
