# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Time scale helpers for the solar ephemeris.

UTC normalisation, Julian Day, elapsed time since J2000.0 and
Greenwich mean sidereal time. Everything here works on UTC; the
UTC/UT1 difference is below the accuracy of the low-order ephemeris.
"""
import math
from datetime import datetime, timezone

# --------------------------------------------------------------------------- #
# Constants
# --------------------------------------------------------------------------- #

J2000_JD: float = 2451545.0
"""Julian Day of the J2000.0 epoch (2000-01-01 12:00:00 UTC)."""

DAYS_PER_JULIAN_CENTURY: float = 36525.0


def ensure_utc(dt: datetime) -> datetime:
    """Return ``dt`` as an aware UTC datetime.

    Naive datetimes are taken to already be UTC. Aware datetimes are
    converted, so two datetimes naming the same instant under different
    offsets normalise to the same value.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


# --------------------------------------------------------------------------- #
# Julian Day
# --------------------------------------------------------------------------- #

def datetime_to_jd(dt: datetime) -> float:
    """Convert a datetime to a Julian Day on the UTC time scale.

    Uses the Gregorian calendar algorithm (Meeus, Astronomical
    Algorithms, Ch. 7). The fractional day carries hours, minutes,
    seconds and milliseconds.
    """
    utc = ensure_utc(dt)

    y = utc.year
    m = utc.month
    hour = (utc.hour
            + utc.minute / 60.0
            + utc.second / 3600.0
            + (utc.microsecond // 1000) / 3_600_000.0)

    if m <= 2:
        y -= 1
        m += 12

    A = y // 100
    B = 2 - A + A // 4

    return (math.floor(365.25 * (y + 4716))
            + math.floor(30.6001 * (m + 1))
            + utc.day + hour / 24.0 + B - 1524.5)


def days_since_j2000(jd: float) -> float:
    """Days elapsed since J2000.0 for a Julian Day."""
    return jd - J2000_JD


def julian_centuries_j2000(jd: float) -> float:
    """Julian centuries elapsed since J2000.0 for a Julian Day."""
    return days_since_j2000(jd) / DAYS_PER_JULIAN_CENTURY


# --------------------------------------------------------------------------- #
# Sidereal time
# --------------------------------------------------------------------------- #

def greenwich_sidereal_time_deg(jd: float) -> float:
    """
    Greenwich Mean Sidereal Time for a Julian Day.

    IAU expression in days and Julian centuries from J2000.0:
        GMST(°) = 280.46061837 + 360.98564736629 * (JD - 2451545.0)
                  + 0.000387933 * T² - T³/38710000

    Args:
        jd: Julian Day (UTC).

    Returns:
        GMST in degrees, normalized to [0, 360).
    """
    n = days_since_j2000(jd)
    t_centuries = julian_centuries_j2000(jd)

    gst_deg = (
        280.46061837
        + 360.98564736629 * n
        + 0.000387933 * t_centuries**2
        - t_centuries**3 / 38710000.0
    )

    gst_deg = gst_deg % 360.0
    if gst_deg < 0:
        gst_deg += 360.0

    return gst_deg
