"""
Tests for baroalt.atmosphere – forward model.
"""

import math
import numpy as np
import pytest

from baroalt.atmosphere import (
    AtmosphericState,
    state_at_altitude,
    temperature,
    pressure,
    hpa_to_kpa,
    kpa_to_hpa,
    celsius_to_kelvin,
)


class TestSeaLevel:

    def test_state_at_sea_level(self):
        T, p = state_at_altitude(0.0)
        assert T == pytest.approx(15.04)
        assert p == pytest.approx(101.29, abs=0.5)

    def test_sea_level_pressure_is_reference(self):
        assert pressure(0.0) == pytest.approx(101.29, rel=1e-12)

    def test_named_fields(self):
        state = state_at_altitude(0.0)
        assert isinstance(state, AtmosphericState)
        assert state.temperature_c == state[0]
        assert state.pressure_kpa == state[1]


class TestTemperature:

    def test_troposphere_lapse(self):
        """15.04 − 0.00649 · 5000 = −17.41 °C."""
        assert temperature(5000.0) == pytest.approx(-17.41, abs=1e-9)

    def test_lower_stratosphere_isothermal(self):
        for h in [11500.0, 15000.0, 20000.0, 25000.0]:
            assert temperature(h) == pytest.approx(-56.46)

    def test_upper_stratosphere_warms(self):
        """−56.46 + 0.00299 · 5000 = −41.51 °C at 30 km."""
        assert temperature(30000.0) == pytest.approx(-41.51, abs=1e-9)
        assert temperature(35000.0) > temperature(30000.0)


class TestPressure:

    def test_known_values(self):
        """Values from the layer formulas."""
        assert pressure(5000.0) == pytest.approx(54.055, abs=0.01)
        assert pressure(15000.0) == pytest.approx(12.087, abs=0.01)
        assert pressure(30000.0) == pytest.approx(1.1636, abs=0.005)

    def test_layer_bases(self):
        assert pressure(11000.0) == pytest.approx(22.68, abs=0.01)
        assert pressure(11000.0 + 1e-9) == pytest.approx(22.65, rel=1e-9)
        assert pressure(25000.0) == pytest.approx(
            22.65 * math.exp(-0.000157 * 14000.0))
        assert pressure(25000.0 + 1e-6) == pytest.approx(2.488, rel=1e-6)

    def test_decreases_monotonically(self):
        altitudes = np.linspace(0.0, 40000.0, 401)
        pressures = np.array([pressure(float(h)) for h in altitudes])
        assert np.all(np.diff(pressures) < 0)

    def test_decreases_across_boundaries(self):
        for h_b in [11000.0, 25000.0]:
            p_below = pressure(h_b - 1.0)
            p_at = pressure(h_b)
            p_above = pressure(h_b + 1e-3)
            assert p_below > p_at > p_above

    def test_below_sea_level_extrapolates(self):
        assert pressure(-200.0) > pressure(0.0)

    def test_positive_at_high_altitude(self):
        assert pressure(50000.0) > 0


class TestUnits:

    def test_hpa_kpa(self):
        assert hpa_to_kpa(1013.25) == pytest.approx(101.325)
        assert kpa_to_hpa(101.325) == pytest.approx(1013.25)

    def test_celsius_to_kelvin(self):
        """The model uses 273.1 as its Kelvin offset."""
        assert celsius_to_kelvin(15.04) == pytest.approx(288.14)
