"""Sun position model: mean elements plus a three-term equation of the center."""

from __future__ import annotations

import math
from dataclasses import dataclass

from astro_ephemeris.bodies.base import (
    BodyModel,
    EclipticPosition,
    PeriodicTerm,
    Polynomial,
    ecliptic_position,
    nutation_in_longitude,
)
from astro_ephemeris.constants import ABERRATION_CONSTANT_DEG


@dataclass(frozen=True)
class SolarElements:
    """Coefficient table of the solar model (degrees, Julian centuries)."""

    mean_longitude: Polynomial
    mean_anomaly: Polynomial
    eccentricity: Polynomial
    semi_major_axis: float
    # Equation of the center over the mean anomaly.
    center: tuple[PeriodicTerm, ...]


SOLAR_ELEMENTS = SolarElements(
    mean_longitude=Polynomial((280.46646, 36000.76983, 0.0003032)),
    mean_anomaly=Polynomial((357.52911, 35999.05029, -0.0001537)),
    eccentricity=Polynomial((0.016708634, -0.000042037, -0.0000001267)),
    semi_major_axis=1.000001018,
    center=(
        PeriodicTerm(1.914602, (1,), amplitude_rate=-0.004817),
        PeriodicTerm(0.019993, (2,), amplitude_rate=-0.000101),
        PeriodicTerm(0.000289, (3,)),
    ),
)


class SolarModel(BodyModel):
    """Geocentric Sun: Earth's Keplerian orbit seen from the other end."""

    def __init__(self, elements: SolarElements) -> None:
        self.name = 'sun'
        self.elements = elements

    def mean_anomaly(self, t: float) -> float:
        """Sun's mean anomaly in degrees (not normalized)."""
        return self.elements.mean_anomaly(t)

    def geometric(self, t: float) -> tuple[float, float]:
        """Return the geometric (true) longitude in degrees and the distance in AU."""
        el = self.elements
        anomaly = el.mean_anomaly(t)
        center = sum(term.value((anomaly,), t) for term in el.center)
        true_anomaly = math.radians(anomaly + center)
        ecc = el.eccentricity(t)
        distance = el.semi_major_axis * (1.0 - ecc * ecc) / (1.0 + ecc * math.cos(true_anomaly))
        return (el.mean_longitude(t) + center, distance)

    def position(self, t: float) -> EclipticPosition:
        longitude, distance = self.geometric(t)
        apparent = longitude - ABERRATION_CONSTANT_DEG + nutation_in_longitude(t)
        return ecliptic_position(apparent, 0.0, distance)


SUN = SolarModel(SOLAR_ELEMENTS)
