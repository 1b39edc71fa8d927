"""Saturn mean orbital elements and perturbations by Jupiter."""

from __future__ import annotations

from astro_ephemeris.bodies.base import PeriodicTerm
from astro_ephemeris.bodies.planet import (
    SATURN_MEAN_ANOMALY,
    Element,
    OrbitalElements,
    PlanetModel,
)

SATURN_LONGITUDE_TERMS = (
    PeriodicTerm(0.812, (2, -5), phase=-67.6),
    PeriodicTerm(-0.229, (2, -4), phase=-2.0, cosine=True),
    PeriodicTerm(0.119, (1, -2), phase=-3.0),
    PeriodicTerm(0.046, (2, -6), phase=-69.0),
    PeriodicTerm(0.014, (1, -3), phase=32.0),
)

SATURN_LATITUDE_TERMS = (
    PeriodicTerm(-0.020, (2, -4), phase=-2.0, cosine=True),
    PeriodicTerm(0.018, (2, -6), phase=-49.0),
)

SATURN_ELEMENTS = OrbitalElements(
    node=Element(113.6634, 2.38980e-5),
    inclination=Element(2.4886, -1.081e-7),
    perihelion=Element(339.3939, 2.97661e-5),
    semi_major_axis=Element(9.55475),
    eccentricity=Element(0.055546, -9.499e-9),
    mean_anomaly=SATURN_MEAN_ANOMALY,
    longitude_perturbations=SATURN_LONGITUDE_TERMS,
    latitude_perturbations=SATURN_LATITUDE_TERMS,
)

SATURN = PlanetModel('saturn', SATURN_ELEMENTS)
