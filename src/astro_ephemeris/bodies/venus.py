"""Venus mean orbital elements."""

from __future__ import annotations

from astro_ephemeris.bodies.planet import Element, OrbitalElements, PlanetModel

VENUS_ELEMENTS = OrbitalElements(
    node=Element(76.6799, 2.46590e-5),
    inclination=Element(3.3946, 2.75e-8),
    perihelion=Element(54.8910, 1.38374e-5),
    semi_major_axis=Element(0.723330),
    eccentricity=Element(0.006773, -1.302e-9),
    mean_anomaly=Element(48.0052, 1.6021302244),
)

VENUS = PlanetModel('venus', VENUS_ELEMENTS)
