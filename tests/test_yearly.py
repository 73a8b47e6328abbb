# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for day-of-year sampling and yearly elevation statistics."""
import logging
from datetime import date, datetime, timedelta, timezone

import pytest

from sunpath.domain.orientation import IDENTITY_QUATERNION, sun_rotation
from sunpath.domain.solar import OutOfRangeError, SolarPosition
from sunpath.domain.yearly import (
    YearlyElevationStats,
    days_in_year,
    format_utc_offset,
    interpolate_angles,
    longitude_utc_offset_hours,
    rotation_for_day,
    solar_position_for_day,
    yearly_elevation_statistics,
)

TOKYO = (35.6762, 139.6503)


def _position(elevation, azimuth):
    return SolarPosition(
        elevation_deg=elevation, azimuth_deg=azimuth,
        instant=datetime(2025, 1, 1, tzinfo=timezone.utc),
        latitude_deg=0.0, longitude_deg=0.0,
    )


# ── Calendar helpers ──────────────────────────────────────────────

class TestDaysInYear:

    @pytest.mark.parametrize("year,expected", [
        (2024, 366), (2025, 365), (1900, 365), (2000, 366),
    ])
    def test_leap_years(self, year, expected):
        assert days_in_year(year) == expected


class TestLongitudeOffset:

    @pytest.mark.parametrize("lon,expected", [
        (0.0, 0.0),
        (139.6503, 9.25),
        (-74.0060, -5.0),
        (180.0, 12.0),
        (-180.0, -12.0),
        (136.875, 9.0),  # 9.125 h: half rounds to even
        (7.5, 0.5),
    ])
    def test_quarter_hour_rounding(self, lon, expected):
        assert longitude_utc_offset_hours(lon) == expected

    @pytest.mark.parametrize("lon,expected", [
        (139.6503, "UTC+09:15"),
        (-74.0060, "UTC-05:00"),
        (0.0, "UTC+00:00"),
        (-56.25, "UTC-03:45"),
    ])
    def test_format(self, lon, expected):
        assert format_utc_offset(lon) == expected


# ── Daily positions ───────────────────────────────────────────────

class TestSolarPositionForDay:

    def test_local_clock_time(self):
        sp = solar_position_for_day(2025, 80, *TOKYO)
        assert sp.instant.date() == date(2025, 3, 21)
        assert (sp.instant.hour, sp.instant.minute) == (12, 0)
        assert sp.instant.utcoffset() == timedelta(hours=9, minutes=15)
        assert sp.elevation_deg > 30.0

    def test_custom_time(self):
        sp = solar_position_for_day(2025, 1, *TOKYO, hour=6, minute=30)
        assert (sp.instant.hour, sp.instant.minute) == (6, 30)

    def test_last_day_of_leap_year(self):
        sp = solar_position_for_day(2024, 366, *TOKYO)
        assert sp.instant.date() == date(2024, 12, 31)

    @pytest.mark.parametrize("day", [0, 366, -3])
    def test_invalid_day(self, day):
        with pytest.raises(ValueError, match="day_of_year"):
            solar_position_for_day(2025, day, *TOKYO)

    def test_invalid_observer(self):
        with pytest.raises(OutOfRangeError):
            solar_position_for_day(2025, 10, 0.0, 250.0)


class TestRotationForDay:

    def test_matches_sun_rotation(self):
        sp = solar_position_for_day(2025, 172, *TOKYO)
        q = rotation_for_day(2025, 172, *TOKYO)
        assert q == sun_rotation(sp.elevation_deg, sp.azimuth_deg)

    def test_invalid_day_returns_identity_and_warns(self, caplog):
        caplog.set_level(logging.WARNING, logger="sunpath.domain.yearly")
        q = rotation_for_day(2025, 0, *TOKYO)
        assert q == IDENTITY_QUATERNION
        assert "Invalid day of year 0" in caplog.text


# ── Interpolation ─────────────────────────────────────────────────

class TestInterpolateAngles:

    def test_linear_elevation(self):
        el, az = interpolate_angles(_position(10.0, 100.0), _position(20.0, 120.0), 0.5)
        assert el == pytest.approx(15.0)
        assert az == pytest.approx(110.0)

    def test_azimuth_wraps_through_north(self):
        _, az = interpolate_angles(_position(0.0, 350.0), _position(0.0, 10.0), 0.5)
        assert min(az, 360.0 - az) == pytest.approx(0.0, abs=1e-9)

    def test_azimuth_wraps_backwards(self):
        _, az = interpolate_angles(_position(0.0, 10.0), _position(0.0, 350.0), 0.75)
        assert az == pytest.approx(355.0)

    def test_t_clamped(self):
        el, az = interpolate_angles(_position(10.0, 100.0), _position(20.0, 120.0), 2.0)
        assert el == pytest.approx(20.0)
        assert az == pytest.approx(120.0)

    def test_tiny_step_west_of_north_stays_below_360(self):
        """A step just west of 0° must not round up to exactly 360°."""
        _, az = interpolate_angles(_position(0.0, 0.0), _position(0.0, 359.9999999), 1e-12)
        assert 0.0 <= az < 360.0


# ── Yearly statistics ─────────────────────────────────────────────

class TestYearlyStatistics:

    def test_tokyo_noon_extremes(self):
        stats = yearly_elevation_statistics(2025, *TOKYO)
        assert isinstance(stats, YearlyElevationStats)
        assert stats.days_in_year == 365
        assert stats.samples == 37
        assert stats.max_elevation_date.month == 6
        assert stats.min_elevation_date.month == 12
        # 90 - 35.7 ± 23.4
        assert 75.0 < stats.max_elevation_deg < 79.0
        assert 29.0 < stats.min_elevation_deg < 33.0

    def test_southern_hemisphere_reversed(self):
        stats = yearly_elevation_statistics(2025, -33.8688, 151.2093)
        assert stats.max_elevation_date.month == 12
        assert stats.min_elevation_date.month == 6

    def test_daily_step(self):
        stats = yearly_elevation_statistics(2024, *TOKYO, step_days=1)
        assert stats.samples == 366

    def test_invalid_step(self):
        with pytest.raises(ValueError, match="step_days"):
            yearly_elevation_statistics(2025, *TOKYO, step_days=0)

    def test_invalid_observer(self):
        with pytest.raises(OutOfRangeError):
            yearly_elevation_statistics(2025, -91.0, 0.0)
