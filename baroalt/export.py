"""
export.py – CSV export for atmosphere profiles.
"""

from __future__ import annotations
from pathlib import Path


def export_profile_csv(profile: dict, path: str | Path) -> Path:
    """
    Write a profile from ``atmosphere_profile`` to CSV.

    Parameters
    ----------
    profile : dict with 'h', 'T', 'p', 'zone'
    path    : output file path

    Returns
    -------
    Resolved Path of the written file.
    """
    path = Path(path).expanduser().resolve()

    with open(path, "w") as f:
        f.write("altitude_m,temperature_c,pressure_kpa,zone\n")
        for h, T, p, zone in zip(profile['h'], profile['T'],
                                 profile['p'], profile['zone']):
            f.write(f"{h:.3f},{T:.4f},{p:.8e},{zone}\n")

    return path
