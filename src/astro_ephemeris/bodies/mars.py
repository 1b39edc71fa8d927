"""Mars mean orbital elements."""

from __future__ import annotations

from astro_ephemeris.bodies.planet import Element, OrbitalElements, PlanetModel

MARS_ELEMENTS = OrbitalElements(
    node=Element(49.5574, 2.11081e-5),
    inclination=Element(1.8497, -1.78e-8),
    perihelion=Element(286.5016, 2.92961e-5),
    semi_major_axis=Element(1.523688),
    eccentricity=Element(0.093405, 2.516e-9),
    mean_anomaly=Element(18.6021, 0.5240207766),
)

MARS = PlanetModel('mars', MARS_ELEMENTS)
