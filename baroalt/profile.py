"""
profile.py – Temperature and pressure profiles vs altitude.

Sweeps altitude through the three zones and plots T(h) and p(h) with the
tropopause and stratosphere boundaries marked.
"""

from __future__ import annotations
import numpy as np
import matplotlib.pyplot as plt

from baroalt.atmosphere import state_at_altitude
from baroalt.zones import TROPOPAUSE_ALT, STRATOSPHERE_ALT, determine_zone


def atmosphere_profile(
    h_min: float = 0.0,
    h_max: float = 40_000.0,
    n_points: int = 201,
) -> dict:
    """
    Evaluate the forward model over evenly spaced altitudes.

    Parameters
    ----------
    h_min, h_max : altitude range  [m]
    n_points     : number of altitude samples (>= 2)

    Returns
    -------
    dict with:
        'h'    : altitudes  [m]
        'T'    : temperatures  [°C]
        'p'    : pressures  [kPa]
        'zone' : list of zone names, one per altitude
    """
    if n_points < 2:
        raise ValueError("n_points must be >= 2")
    if h_max <= h_min:
        raise ValueError("h_max must be greater than h_min")

    altitudes = np.linspace(h_min, h_max, n_points)
    T_arr = np.zeros(n_points)
    p_arr = np.zeros(n_points)
    zones = []

    for i, h in enumerate(altitudes):
        T_arr[i], p_arr[i] = state_at_altitude(float(h))
        zones.append(determine_zone(float(h)).value)

    return {
        'h': altitudes,
        'T': T_arr,
        'p': p_arr,
        'zone': zones,
    }


def plot_profile(profile: dict, *, show: bool = True,
                 save_path: str | None = None) -> plt.Figure:
    """Two-panel T(h) / p(h) plot, altitude on the vertical axis."""
    h_km = profile['h'] / 1000.0

    fig, axes = plt.subplots(1, 2, figsize=(11, 6), sharey=True)

    # Panel 1: Temperature
    ax = axes[0]
    ax.plot(profile['T'], h_km, color='#d93025', lw=2)
    ax.set_xlabel('Temperature [°C]')
    ax.set_ylabel('Altitude [km]')

    # Panel 2: Pressure
    ax = axes[1]
    ax.plot(profile['p'], h_km, color='#1a73e8', lw=2)
    ax.set_xscale('log')
    ax.set_xlabel('Pressure [kPa]')

    for ax in axes:
        for h_b, label in ((TROPOPAUSE_ALT, 'Tropopause'),
                           (STRATOSPHERE_ALT, 'Upper stratosphere')):
            if h_km[0] <= h_b / 1000.0 <= h_km[-1]:
                ax.axhline(h_b / 1000.0, color='grey', ls='--', lw=1,
                           label=f'{label} ({h_b/1000:.0f} km)')
        ax.grid(True, ls=':', alpha=0.4)
    axes[0].legend(fontsize=8)

    fig.suptitle('NASA Three-Layer Atmosphere', fontsize=13,
                 fontweight='bold')
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=200, bbox_inches='tight')
    if show:
        plt.show()
    return fig
