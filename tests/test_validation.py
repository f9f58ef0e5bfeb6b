"""
Tests for baroalt.validation – reading consistency check.
"""

import pytest

from baroalt.atmosphere import state_at_altitude, kpa_to_hpa
from baroalt.validation import (
    ReadingCheck,
    PRESSURE_TOLERANCE_KPA,
    check_reading,
    reading_summary,
)
from baroalt.zones import AtmosphereZone


@pytest.fixture
def reading_5km():
    """Model (T, p_hPa) at 5000 m."""
    T, p = state_at_altitude(5000.0)
    return T, kpa_to_hpa(p)


class TestCheckReading:

    def test_model_reading_matches(self, reading_5km):
        T, p_hpa = reading_5km
        check = check_reading(T, p_hpa, 5000.0)
        assert isinstance(check, ReadingCheck)
        assert check.matches
        assert check.zone == AtmosphereZone.TROPOSPHERE
        assert check.difference_kpa == pytest.approx(0.0, abs=1e-9)
        assert check.tolerance_kpa == PRESSURE_TOLERANCE_KPA

    def test_within_tolerance(self, reading_5km):
        """+0.05 hPa = +0.005 kPa is inside the 0.01 kPa tolerance."""
        T, p_hpa = reading_5km
        assert check_reading(T, p_hpa + 0.05, 5000.0).matches

    def test_mismatch_is_a_result(self, reading_5km):
        """+0.2 hPa = +0.02 kPa is reported, not raised."""
        T, p_hpa = reading_5km
        check = check_reading(T, p_hpa + 0.2, 5000.0)
        assert not check.matches
        assert check.difference_kpa == pytest.approx(0.02, abs=1e-9)
        assert check.measured_pressure_kpa > check.expected_pressure_kpa

    def test_hpa_converted(self, reading_5km):
        T, p_hpa = reading_5km
        check = check_reading(T, p_hpa, 5000.0)
        assert check.measured_pressure_kpa == pytest.approx(p_hpa / 10.0)

    def test_lower_stratosphere_reading(self):
        """120.9 hPa at 15 km agrees with the model (12.087 kPa)."""
        check = check_reading(-56.46, 120.9, 15000.0)
        assert check.zone == AtmosphereZone.LOWER_STRATOSPHERE
        assert check.matches

    def test_upper_stratosphere_mismatch(self):
        """24.9 hPa is far above the model's 11.6 hPa at 30 km."""
        check = check_reading(-41.51, 24.9, 30000.0)
        assert check.zone == AtmosphereZone.UPPER_STRATOSPHERE
        assert not check.matches
        assert check.difference_kpa > 1.0
        assert check.expected_pressure_kpa == pytest.approx(1.1636, abs=0.005)

    def test_expected_temperature_reported(self):
        check = check_reading(-50.0, 120.9, 15000.0)
        assert check.temperature_c == -50.0
        assert check.expected_temperature_c == pytest.approx(-56.46)

    def test_custom_tolerance(self, reading_5km):
        T, p_hpa = reading_5km
        assert check_reading(T, p_hpa + 0.2, 5000.0, tolerance_kpa=0.05).matches


class TestReadingSummary:

    def test_consistent(self, reading_5km):
        T, p_hpa = reading_5km
        text = reading_summary(check_reading(T, p_hpa, 5000.0))
        assert "consistent" in text
        assert "troposphere" in text

    def test_mismatch(self):
        text = reading_summary(check_reading(-41.51, 24.9, 30000.0))
        assert "MISMATCH" in text
        assert "upper stratosphere" in text
