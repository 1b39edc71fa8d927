"""Uranus mean orbital elements and perturbations by Jupiter and Saturn."""

from __future__ import annotations

from astro_ephemeris.bodies.base import PeriodicTerm
from astro_ephemeris.bodies.planet import (
    URANUS_MEAN_ANOMALY,
    Element,
    OrbitalElements,
    PlanetModel,
)

URANUS_LONGITUDE_TERMS = (
    PeriodicTerm(0.040, (0, 1, -2), phase=6.0),
    PeriodicTerm(0.035, (0, 1, -3), phase=33.0),
    PeriodicTerm(-0.015, (1, 0, -1), phase=20.0),
)

URANUS_ELEMENTS = OrbitalElements(
    node=Element(74.0005, 1.3978e-5),
    inclination=Element(0.7733, 1.9e-8),
    perihelion=Element(96.6612, 3.0565e-5),
    semi_major_axis=Element(19.18171, -1.55e-8),
    eccentricity=Element(0.047318, 7.45e-9),
    mean_anomaly=URANUS_MEAN_ANOMALY,
    longitude_perturbations=URANUS_LONGITUDE_TERMS,
)

URANUS = PlanetModel('uranus', URANUS_ELEMENTS)
