"""Ecliptic to equatorial to horizontal coordinate transforms.

The low-level transforms work in radians; the ``apparent_*`` helpers take a
body model and return degrees.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from astro_ephemeris.angle_utils import normalize_degrees, normalize_radians
from astro_ephemeris.bodies.base import BodyModel, obliquity
from astro_ephemeris.sidereal import local_sidereal


@dataclass(frozen=True)
class EquatorialPosition:
    """Right ascension in [0, 360) and declination in [-90, 90], degrees."""

    right_ascension: float
    declination: float


@dataclass(frozen=True)
class HorizontalPosition:
    """Azimuth in [0, 360) from north through east, and elevation in [-90, 90], degrees."""

    azimuth: float
    elevation: float


def _clamp(value: float) -> float:
    # Rounding can push a sine just past +-1.
    return max(-1.0, min(1.0, value))


def to_equatorial(latitude: float, longitude: float, obliquity_rad: float) -> tuple[float, float]:
    """Rotate ecliptic coordinates into equatorial coordinates.

    Parameters:
        latitude: Ecliptic latitude (radians).
        longitude: Ecliptic longitude (radians).
        obliquity_rad: Obliquity of the ecliptic (radians).

    Returns:
        (right_ascension in [0, 2π), declination), radians.
    """
    sin_eps = math.sin(obliquity_rad)
    cos_eps = math.cos(obliquity_rad)
    ra = math.atan2(
        math.sin(longitude) * cos_eps - math.tan(latitude) * sin_eps,
        math.cos(longitude),
    )
    dec = math.asin(
        _clamp(math.sin(latitude) * cos_eps + math.cos(latitude) * sin_eps * math.sin(longitude))
    )
    return (normalize_radians(ra), dec)


def hour_angle(local_sidereal_rad: float, right_ascension: float) -> float:
    """Return the hour angle (radians, west-positive) from local sidereal time and RA.

    Both operands are reduced to [0, 2π) before subtracting, so the result is
    in (-2π, 2π).
    """
    return normalize_radians(local_sidereal_rad) - normalize_radians(right_ascension)


def to_horizontal(latitude: float, declination: float, ha: float) -> tuple[float, float]:
    """Convert hour angle and declination to azimuth and elevation for an observer.

    Parameters:
        latitude: Observer's geographic latitude (radians).
        declination: Body's declination (radians).
        ha: Body's hour angle (radians).

    Returns:
        (azimuth in [0, 2π) from north through east, elevation), radians.
    """
    sin_lat = math.sin(latitude)
    cos_lat = math.cos(latitude)
    sin_dec = math.sin(declination)
    cos_dec = math.cos(declination)
    elevation = math.asin(_clamp(sin_lat * sin_dec + cos_lat * cos_dec * math.cos(ha)))
    azimuth = math.atan2(
        -cos_dec * math.sin(ha),
        sin_dec * cos_lat - cos_dec * math.cos(ha) * sin_lat,
    )
    return (normalize_radians(azimuth), elevation)


def _equatorial_rad(model: BodyModel, t: float) -> tuple[float, float]:
    pos = model.position(t)
    return to_equatorial(
        math.radians(pos.latitude),
        math.radians(pos.longitude),
        math.radians(obliquity(t)),
    )


def apparent_equatorial(model: BodyModel, t: float) -> EquatorialPosition:
    """Return the body's right ascension and declination of date, in degrees."""
    ra, dec = _equatorial_rad(model, t)
    return EquatorialPosition(
        right_ascension=normalize_degrees(math.degrees(ra)),
        declination=math.degrees(dec),
    )


def body_hour_angle(model: BodyModel, t: float, longitude: float) -> float:
    """Return the body's hour angle in radians for an east-positive longitude in degrees."""
    ra, _ = _equatorial_rad(model, t)
    return hour_angle(local_sidereal(t, math.radians(longitude)), ra)


def apparent_horizontal(
    model: BodyModel, t: float, latitude: float, longitude: float
) -> HorizontalPosition:
    """Return the body's azimuth and elevation for an observer.

    Parameters:
        model: Body position model.
        t: Julian centuries since J2000.0.
        latitude: Observer latitude (degrees).
        longitude: Observer longitude (degrees, east-positive).

    Returns:
        HorizontalPosition in degrees (geocentric, no refraction).
    """
    ra, dec = _equatorial_rad(model, t)
    ha = hour_angle(local_sidereal(t, math.radians(longitude)), ra)
    azimuth, elev = to_horizontal(math.radians(latitude), dec, ha)
    return HorizontalPosition(
        azimuth=normalize_degrees(math.degrees(azimuth)),
        elevation=math.degrees(elev),
    )


def elevation(model: BodyModel, t: float, latitude: float, longitude: float) -> float:
    """Return the body's geocentric elevation in degrees."""
    return apparent_horizontal(model, t, latitude, longitude).elevation
