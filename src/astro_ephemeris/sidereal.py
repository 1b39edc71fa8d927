"""Apparent sidereal time at Greenwich and at an observer's longitude."""

from __future__ import annotations

import math

from astro_ephemeris.angle_utils import normalize_radians
from astro_ephemeris.bodies.base import nutation_in_longitude, obliquity
from astro_ephemeris.constants import DAYS_PER_CENTURY


def greenwich_sidereal(t: float) -> float:
    """Return apparent Greenwich sidereal time in radians, in [0, 2π).

    Mean sidereal time from the IAU 1982 expression in days and centuries
    since J2000.0, plus the equation of the equinoxes (Δψ·cos ε).

    Parameters:
        t: Julian centuries since J2000.0 (UT).

    Returns:
        Sidereal angle in radians.
    """
    days = t * DAYS_PER_CENTURY
    mean_deg = (
        280.46061837
        + 360.98564736629 * days
        + 0.000387933 * t * t
        - t * t * t / 38710000.0
    )
    equinoxes_deg = nutation_in_longitude(t) * math.cos(math.radians(obliquity(t)))
    return normalize_radians(math.radians(mean_deg + equinoxes_deg))


def local_sidereal(t: float, longitude_rad: float) -> float:
    """Return local apparent sidereal time in radians for an east-positive longitude."""
    return normalize_radians(greenwich_sidereal(t) + longitude_rad)
