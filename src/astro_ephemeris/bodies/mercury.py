"""Mercury mean orbital elements."""

from __future__ import annotations

from astro_ephemeris.bodies.planet import Element, OrbitalElements, PlanetModel

MERCURY_ELEMENTS = OrbitalElements(
    node=Element(48.3313, 3.24587e-5),
    inclination=Element(7.0047, 5.00e-8),
    perihelion=Element(29.1241, 1.01444e-5),
    semi_major_axis=Element(0.387098),
    eccentricity=Element(0.205635, 5.59e-10),
    mean_anomaly=Element(168.6562, 4.0923344368),
)

MERCURY = PlanetModel('mercury', MERCURY_ELEMENTS)
