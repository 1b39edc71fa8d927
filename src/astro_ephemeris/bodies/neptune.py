"""Neptune mean orbital elements."""

from __future__ import annotations

from astro_ephemeris.bodies.planet import Element, OrbitalElements, PlanetModel

NEPTUNE_ELEMENTS = OrbitalElements(
    node=Element(131.7806, 3.0173e-5),
    inclination=Element(1.7700, -2.55e-7),
    perihelion=Element(272.8461, -6.027e-6),
    semi_major_axis=Element(30.05826, 3.313e-8),
    eccentricity=Element(0.008606, 2.15e-9),
    mean_anomaly=Element(260.2471, 0.005995147),
)

NEPTUNE = PlanetModel('neptune', NEPTUNE_ELEMENTS)
