#!/usr/bin/env python3
"""
main.py – CLI for the baroalt three-layer atmosphere model.

Usage:
    python main.py                                  # demonstration readings
    python main.py --help                           # show all flags
    python main.py --altitude 15000                 # T, p at an altitude
    python main.py --pressure 90 --temperature 10   # altitude from a reading
    python main.py --pressure 900 --temperature 10 --hpa --zone troposphere
    python main.py --check -17.41 540.48 5000       # consistency check
    python main.py --profile --h-max 40000 --csv profile.csv
"""

from __future__ import annotations
import argparse
import logging
import sys

from baroalt.zones import AtmosphereZone, determine_zone
from baroalt.atmosphere import state_at_altitude, hpa_to_kpa, kpa_to_hpa
from baroalt.inverse import altitude_from_state, altitude_from_pressure
from baroalt.validation import check_reading, reading_summary
from baroalt.profile import atmosphere_profile, plot_profile
from baroalt.export import export_profile_csv
from baroalt.logging_config import setup_logging


# ── Pretty-printing helpers ──────────────────────────────────────────

def _header():
    print()
    print("╔══════════════════════════════════════════════════════════╗")
    print("║        baroalt – NASA three-layer atmosphere model       ║")
    print("╚══════════════════════════════════════════════════════════╝")
    print()


def _print_state(altitude_m: float):
    zone = determine_zone(altitude_m)
    T, p = state_at_altitude(altitude_m)
    print(f"  h = {altitude_m:.1f} m  ({zone.value})")
    print(f"    Temperature = {T:.2f} °C")
    print(f"    Pressure    = {p:.4f} kPa  ({kpa_to_hpa(p):.2f} hPa)")


def _print_altitude(zone: AtmosphereZone | None, temperature_c: float,
                    pressure_kpa: float):
    if zone is None:
        h = altitude_from_pressure(temperature_c, pressure_kpa)
        label = "auto"
    else:
        h = altitude_from_state(zone, temperature_c, pressure_kpa)
        label = zone.value
    print(f"  T = {temperature_c:.2f} °C, p = {pressure_kpa:.4f} kPa  ({label})")
    if h is None:
        print("    ⚠  No valid altitude for this reading in the given zone.")
    else:
        print(f"    Altitude = {h:.2f} m")


# ── Argparse ─────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="NASA 1960s three-layer atmosphere: altitude ⇄ (T, p)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  Forward:   python main.py --altitude 15000
  Inverse:   python main.py --pressure 20 --temperature -56.5 --zone lower-stratosphere
  Check:     python main.py --check -56.46 120.9 15000
  Profile:   python main.py --profile --no-plot --csv profile.csv
""",
    )
    # ── Forward / inverse ───────────────────────────────────────
    p.add_argument('--altitude', type=float, default=None,
                   help='Altitude [m] for the forward model')
    p.add_argument('--pressure', type=float, default=None,
                   help='Measured pressure [kPa, or hPa with --hpa]')
    p.add_argument('--temperature', type=float, default=None,
                   help='Measured temperature [°C]')
    p.add_argument('--zone', type=str, default=None,
                   help='Zone of the reading (troposphere, lower-stratosphere, '
                        'upper-stratosphere); classified from pressure if omitted')
    p.add_argument('--hpa', action='store_true',
                   help='Interpret --pressure in hPa')

    # ── Consistency check ───────────────────────────────────────
    p.add_argument('--check', nargs=3, type=float,
                   metavar=('T_C', 'P_HPA', 'H_M'),
                   help='Check a reading against the model')
    p.add_argument('--tolerance', type=float, default=0.01,
                   help='Pressure tolerance for --check [kPa] (default 0.01)')

    # ── Profile ─────────────────────────────────────────────────
    p.add_argument('--profile', action='store_true',
                   help='Sweep the model over altitude')
    p.add_argument('--h-max', type=float, default=40_000.0,
                   help='Profile top altitude [m] (default 40000)')
    p.add_argument('--n', type=int, default=201,
                   help='Number of profile points (default 201)')
    p.add_argument('--csv', type=str, default=None,
                   help='CSV output path for the profile')
    p.add_argument('--save', type=str, default=None,
                   help='Save the profile plot to this path')
    p.add_argument('--no-plot', action='store_true',
                   help='Suppress plots')

    # ── Logging ─────────────────────────────────────────────────
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Enable debug logging')
    p.add_argument('--log-file', type=str, default=None,
                   help='Also write the log to this file')

    return p


# ── Modes ────────────────────────────────────────────────────────────

def run_inverse(args):
    if args.temperature is None:
        print("  --pressure requires --temperature")
        sys.exit(1)
    zone = None
    if args.zone is not None:
        try:
            zone = AtmosphereZone.from_name(args.zone)
        except KeyError as exc:
            print(f"  {exc.args[0]}")
            sys.exit(1)
    pressure_kpa = hpa_to_kpa(args.pressure) if args.hpa else args.pressure
    _print_altitude(zone, args.temperature, pressure_kpa)


def run_profile(args):
    try:
        prof = atmosphere_profile(0.0, args.h_max, args.n)
    except ValueError as exc:
        print(f"  {exc}")
        sys.exit(1)

    print(f"  {'h [m]':>10s}  {'T [°C]':>10s}  {'p [kPa]':>12s}  zone")
    step = max(1, len(prof['h']) // 20)
    for i in range(0, len(prof['h']), step):
        print(f"  {prof['h'][i]:10.1f}  {prof['T'][i]:10.2f}  "
              f"{prof['p'][i]:12.5f}  {prof['zone'][i]}")

    if args.csv:
        csv_path = export_profile_csv(prof, args.csv)
        print(f"  → CSV: {csv_path}")
    if not args.no_plot or args.save:
        plot_profile(prof, show=not args.no_plot, save_path=args.save)


def run_demo():
    """Demonstration readings, one per zone."""
    print("  ── Forward model ───────────────────────────────────────")
    for h in (0.0, 5000.0, 15000.0, 30000.0):
        _print_state(h)
    print()
    print("  ── Inverse model ───────────────────────────────────────")
    _print_altitude(AtmosphereZone.TROPOSPHERE, 10.0, 90.0)
    _print_altitude(AtmosphereZone.LOWER_STRATOSPHERE, -56.5, 20.0)
    _print_altitude(AtmosphereZone.UPPER_STRATOSPHERE, -55.0, 1.0)
    _print_altitude(AtmosphereZone.TROPOSPHERE, 10.0, 200.0)
    print()
    print("  ── Consistency check ───────────────────────────────────")
    print(reading_summary(check_reading(-17.41, 540.48, 5000.0)))
    print(reading_summary(check_reading(-56.46, 120.9, 15000.0)))
    print(reading_summary(check_reading(-41.51, 24.9, 30000.0)))


# ── Entry point ──────────────────────────────────────────────────────

def main():
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING,
                  args.log_file)
    _header()

    if args.altitude is not None:
        _print_state(args.altitude)
    if args.pressure is not None:
        run_inverse(args)
    if args.check:
        T_c, p_hpa, h_m = args.check
        print(reading_summary(check_reading(T_c, p_hpa, h_m, args.tolerance)))
    if args.profile:
        run_profile(args)
    if (args.altitude is None and args.pressure is None
            and not args.check and not args.profile):
        run_demo()

    print("\n  Done.\n")


if __name__ == "__main__":
    main()
