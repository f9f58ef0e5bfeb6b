"""
zones.py – Atmospheric zones of the NASA 1960s three-layer model.

Each zone carries one row of reference constants (base altitude, base
temperature, base pressure, lapse rate and pressure-law coefficient).  The
same row feeds both the forward model (altitude → T, p) and the inverse
model (T, p → altitude).

Zones
-----
0–11 000 m        : troposphere          (lapse −6.49 °C/km, power law)
11 000–25 000 m   : lower stratosphere   (isothermal, exponential decay)
>25 000 m         : upper stratosphere   (lapse +2.99 °C/km, power law)
"""

from __future__ import annotations
import enum
import math
from dataclasses import dataclass

TROPOPAUSE_ALT = 11_000.0      # m
STRATOSPHERE_ALT = 25_000.0    # m
KELVIN_OFFSET = 273.1          # °C → K as used by the model


class AtmosphereZone(enum.Enum):
    TROPOSPHERE = "troposphere"
    LOWER_STRATOSPHERE = "lower stratosphere"
    UPPER_STRATOSPHERE = "upper stratosphere"

    @classmethod
    def from_name(cls, name: str) -> AtmosphereZone:
        """Lookup by case-insensitive name.  Raises KeyError if not found."""
        key = " ".join(name.lower().replace("-", " ").replace("_", " ").split())
        for zone in cls:
            if zone.value == key:
                return zone
        raise KeyError(
            f"Unknown zone '{name}'.  Available: {[z.value for z in cls]}"
        )


@dataclass(frozen=True)
class ZoneConstants:
    zone: AtmosphereZone
    base_altitude: float     # m
    top_altitude: float      # m   (inf for the top zone)
    base_temperature: float  # °C
    base_pressure: float     # kPa
    lapse_rate: float        # °C/m, dT/dh (0 for the isothermal layer)
    exponent: float = 0.0    # power-law exponent   p ∝ T^k
    decay: float = 0.0       # exponential decay    p ∝ exp(−decay·Δh)  [1/m]

    @property
    def isothermal(self) -> bool:
        return self.lapse_rate == 0.0

    @property
    def base_temperature_abs(self) -> float:
        """Base temperature [K]."""
        return self.base_temperature + KELVIN_OFFSET


# ── Reference constant table ────────────────────────────────────────
# Upper-stratosphere base temperature is the NASA line T = −131.21 + 0.00299·h
# evaluated at 25 000 m.

ZONE_TABLE: dict[AtmosphereZone, ZoneConstants] = {}


def _register(c: ZoneConstants):
    ZONE_TABLE[c.zone] = c


_register(ZoneConstants(
    zone=AtmosphereZone.TROPOSPHERE,
    base_altitude=0.0,
    top_altitude=TROPOPAUSE_ALT,
    base_temperature=15.04,
    base_pressure=101.29,
    lapse_rate=-0.00649,
    exponent=5.256,
))

_register(ZoneConstants(
    zone=AtmosphereZone.LOWER_STRATOSPHERE,
    base_altitude=TROPOPAUSE_ALT,
    top_altitude=STRATOSPHERE_ALT,
    base_temperature=-56.46,
    base_pressure=22.65,
    lapse_rate=0.0,
    decay=0.000157,
))

_register(ZoneConstants(
    zone=AtmosphereZone.UPPER_STRATOSPHERE,
    base_altitude=STRATOSPHERE_ALT,
    top_altitude=math.inf,
    base_temperature=-131.21 + 0.00299 * STRATOSPHERE_ALT,
    base_pressure=2.488,
    lapse_rate=0.00299,
    exponent=-11.388,
))


def zone_constants(zone: AtmosphereZone) -> ZoneConstants:
    return ZONE_TABLE[zone]


def determine_zone(altitude_m: float) -> AtmosphereZone:
    """
    Classify a geometric altitude [m].

    Boundaries belong to the lower zone: 11 000 m is troposphere and
    25 000 m is lower stratosphere.
    """
    if altitude_m <= TROPOPAUSE_ALT:
        return AtmosphereZone.TROPOSPHERE
    elif altitude_m <= STRATOSPHERE_ALT:
        return AtmosphereZone.LOWER_STRATOSPHERE
    return AtmosphereZone.UPPER_STRATOSPHERE


def pressure_band(zone: AtmosphereZone) -> tuple[float, float]:
    """
    Return the (low, high] pressure band [kPa] accepted for ``zone``.

    The lower limit is the base pressure of the zone above (0 for the top
    zone); the upper limit is the zone's own base pressure.
    """
    zones = list(AtmosphereZone)
    idx = zones.index(zone)
    high = ZONE_TABLE[zone].base_pressure
    low = ZONE_TABLE[zones[idx + 1]].base_pressure if idx + 1 < len(zones) else 0.0
    return low, high


def zone_for_pressure(pressure_kpa: float) -> AtmosphereZone | None:
    """Zone whose pressure band contains ``pressure_kpa``, or None."""
    for zone in AtmosphereZone:
        low, high = pressure_band(zone)
        if low < pressure_kpa <= high:
            return zone
    return None
