"""Jupiter mean orbital elements and the Jupiter-Saturn longitude perturbations."""

from __future__ import annotations

from astro_ephemeris.bodies.base import PeriodicTerm
from astro_ephemeris.bodies.planet import (
    JUPITER_MEAN_ANOMALY,
    Element,
    OrbitalElements,
    PlanetModel,
)

# Degrees; multipliers of (Mj, Ms, Mu). 2Mj - 5Ms is the great inequality.
JUPITER_LONGITUDE_TERMS = (
    PeriodicTerm(-0.332, (2, -5), phase=-67.6),
    PeriodicTerm(-0.056, (2, -2), phase=21.0),
    PeriodicTerm(0.042, (3, -5), phase=21.0),
    PeriodicTerm(-0.036, (1, -2)),
    PeriodicTerm(0.022, (1, -1), cosine=True),
    PeriodicTerm(0.023, (2, -3), phase=52.0),
    PeriodicTerm(-0.016, (1, -5), phase=-69.0),
)

JUPITER_ELEMENTS = OrbitalElements(
    node=Element(100.4542, 2.76854e-5),
    inclination=Element(1.3030, -1.557e-7),
    perihelion=Element(273.8777, 1.64505e-5),
    semi_major_axis=Element(5.20256),
    eccentricity=Element(0.048498, 4.469e-9),
    mean_anomaly=JUPITER_MEAN_ANOMALY,
    longitude_perturbations=JUPITER_LONGITUDE_TERMS,
)

JUPITER = PlanetModel('jupiter', JUPITER_ELEMENTS)
