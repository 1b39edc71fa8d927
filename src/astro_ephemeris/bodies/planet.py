"""Planet position model: Keplerian mean elements, perturbations, geocentric reduction.

Mean elements are linear in days since 1999-12-31T00:00 UT. Jupiter, Saturn and
Uranus carry small sine series in the mean anomalies of Jupiter, Saturn and
Uranus that correct their heliocentric longitude (and Saturn's latitude).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from astro_ephemeris.angle_utils import normalize_radians
from astro_ephemeris.bodies.base import (
    BodyModel,
    EclipticPosition,
    PeriodicTerm,
    aberration_in_longitude,
    ecliptic_position,
    nutation_in_longitude,
    sum_series,
)
from astro_ephemeris.bodies.sun import SUN, SolarModel
from astro_ephemeris.constants import (
    DAYS_PER_CENTURY,
    ELEMENTS_EPOCH_OFFSET_DAYS,
    KEPLER_MAX_ITERATIONS,
    KEPLER_TOLERANCE,
    LIGHT_TIME_DAYS_PER_AU,
)


@dataclass(frozen=True)
class Element:
    """One mean orbital element: value at the element epoch plus a daily rate."""

    epoch_value: float
    daily_rate: float = 0.0

    def __call__(self, days: float) -> float:
        return self.epoch_value + self.daily_rate * days


@dataclass(frozen=True)
class OrbitalElements:
    """Mean heliocentric elements of a planet (angles in degrees, axis in AU).

    Perturbation terms take (Jupiter, Saturn, Uranus) mean anomalies as
    arguments and yield degrees.
    """

    node: Element
    inclination: Element
    perihelion: Element
    semi_major_axis: Element
    eccentricity: Element
    mean_anomaly: Element
    longitude_perturbations: tuple[PeriodicTerm, ...] = ()
    latitude_perturbations: tuple[PeriodicTerm, ...] = ()


JUPITER_MEAN_ANOMALY = Element(19.8950, 0.0830853001)
SATURN_MEAN_ANOMALY = Element(316.9670, 0.0334442282)
URANUS_MEAN_ANOMALY = Element(142.5905, 0.011725806)


def elements_days(t: float) -> float:
    """Days since the mean-element epoch for Julian centuries ``t``."""
    return t * DAYS_PER_CENTURY + ELEMENTS_EPOCH_OFFSET_DAYS


def solve_kepler(mean_anomaly: float, eccentricity: float) -> float:
    """Solve Kepler's equation ``M = E - e sin E`` for E by Newton iteration.

    Parameters:
        mean_anomaly: Mean anomaly M in radians.
        eccentricity: Orbital eccentricity (0 <= e < 1).

    Returns:
        Eccentric anomaly E in radians.
    """
    m = normalize_radians(mean_anomaly)
    e = eccentricity
    ecc_anomaly = m + e * math.sin(m) * (1.0 + e * math.cos(m))
    for _ in range(KEPLER_MAX_ITERATIONS):
        delta = (ecc_anomaly - e * math.sin(ecc_anomaly) - m) / (1.0 - e * math.cos(ecc_anomaly))
        ecc_anomaly -= delta
        if abs(delta) < KEPLER_TOLERANCE:
            break
    return ecc_anomaly


class PlanetModel(BodyModel):
    """Geocentric planet from its heliocentric orbit and the Sun's geometric position."""

    def __init__(self, name: str, elements: OrbitalElements, sun: SolarModel = SUN) -> None:
        self.name = name
        self.elements = elements
        self.sun = sun

    def heliocentric(self, days: float) -> tuple[float, float, float]:
        """Return heliocentric ecliptic (x, y, z) in AU at ``days`` from the element epoch."""
        el = self.elements
        e = el.eccentricity(days)
        a = el.semi_major_axis(days)
        ecc_anomaly = solve_kepler(math.radians(el.mean_anomaly(days)), e)
        xv = a * (math.cos(ecc_anomaly) - e)
        yv = a * math.sqrt(1.0 - e * e) * math.sin(ecc_anomaly)
        r = math.hypot(xv, yv)
        true_anomaly = math.atan2(yv, xv)

        node = math.radians(el.node(days))
        incl = math.radians(el.inclination(days))
        u = true_anomaly + math.radians(el.perihelion(days))
        x = r * (math.cos(node) * math.cos(u) - math.sin(node) * math.sin(u) * math.cos(incl))
        y = r * (math.sin(node) * math.cos(u) + math.cos(node) * math.sin(u) * math.cos(incl))
        z = r * math.sin(u) * math.sin(incl)

        if not (el.longitude_perturbations or el.latitude_perturbations):
            return (x, y, z)

        args = (
            JUPITER_MEAN_ANOMALY(days),
            SATURN_MEAN_ANOMALY(days),
            URANUS_MEAN_ANOMALY(days),
        )
        lon = math.atan2(y, x) + math.radians(sum_series(el.longitude_perturbations, args))
        lat = math.atan2(z, math.hypot(x, y)) + math.radians(
            sum_series(el.latitude_perturbations, args)
        )
        return (
            r * math.cos(lon) * math.cos(lat),
            r * math.sin(lon) * math.cos(lat),
            r * math.sin(lat),
        )

    def position(self, t: float) -> EclipticPosition:
        days = elements_days(t)
        sun_longitude, sun_distance = self.sun.geometric(t)
        sun_lon_rad = math.radians(sun_longitude)
        sun_x = sun_distance * math.cos(sun_lon_rad)
        sun_y = sun_distance * math.sin(sun_lon_rad)

        x, y, z = self.heliocentric(days)
        distance = math.sqrt((x + sun_x) ** 2 + (y + sun_y) ** 2 + z * z)
        # One light-time pass: the planet as it was when the light left it.
        x, y, z = self.heliocentric(days - LIGHT_TIME_DAYS_PER_AU * distance)
        gx, gy = x + sun_x, y + sun_y
        distance = math.sqrt(gx * gx + gy * gy + z * z)

        longitude = math.degrees(math.atan2(gy, gx))
        latitude = math.degrees(math.atan2(z, math.hypot(gx, gy)))
        longitude += aberration_in_longitude(longitude, latitude, sun_longitude)
        longitude += nutation_in_longitude(t)
        return ecliptic_position(longitude, latitude, distance)
