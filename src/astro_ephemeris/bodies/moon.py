"""Moon position model: truncated periodic series in the Delaunay arguments.

Series amplitudes are in millionths of a degree (longitude, latitude) and in
metres (distance). Terms that contain the Sun's mean anomaly M are damped by
the Earth-orbit eccentricity factor E (E² for 2M).
"""

from __future__ import annotations

from dataclasses import dataclass

from astro_ephemeris.bodies.base import (
    BodyModel,
    EclipticPosition,
    PeriodicTerm,
    Polynomial,
    ecliptic_position,
    nutation_in_longitude,
)
from astro_ephemeris.constants import KM_PER_AU

# Columns: D, M, M', F, longitude (1e-6 deg, sine), distance (m, cosine).
_LONGITUDE_DISTANCE_ROWS = (
    (0, 0, 1, 0, 6288774, -20905355),
    (2, 0, -1, 0, 1274027, -3699111),
    (2, 0, 0, 0, 658314, -2955968),
    (0, 0, 2, 0, 213618, -569925),
    (0, 1, 0, 0, -185116, 48888),
    (0, 0, 0, 2, -114332, -3149),
    (2, 0, -2, 0, 58793, 246158),
    (2, -1, -1, 0, 57066, -152138),
    (2, 0, 1, 0, 53322, -170733),
    (2, -1, 0, 0, 45758, -204586),
    (0, 1, -1, 0, -40923, -129620),
    (1, 0, 0, 0, -34720, 108743),
    (0, 1, 1, 0, -30383, 104755),
    (2, 0, 0, -2, 15327, 10321),
    (0, 0, 1, 2, -12528, 0),
    (0, 0, 1, -2, 10980, 79661),
    (4, 0, -1, 0, 10675, -34782),
    (0, 0, 3, 0, 10034, -23210),
    (4, 0, -2, 0, 8548, -21636),
    (2, 1, -1, 0, -7888, 24208),
    (2, 1, 0, 0, -6766, 30824),
    (1, 0, -1, 0, -5163, -8379),
    (1, 1, 0, 0, 4987, -16675),
    (2, -1, 1, 0, 4036, -12831),
    (2, 0, 2, 0, 3994, -10445),
    (4, 0, 0, 0, 3861, -11650),
    (2, 0, -3, 0, 3665, 14403),
    (0, 1, -2, 0, -2689, -7003),
    (2, 0, -1, 2, -2602, 0),
    (2, -1, -2, 0, 2390, 10056),
    (1, 0, 1, 0, -2348, 6322),
    (2, -2, 0, 0, 2236, -9884),
)

# Columns: D, M, M', F, latitude (1e-6 deg, sine).
_LATITUDE_ROWS = (
    (0, 0, 0, 1, 5128122),
    (0, 0, 1, 1, 280602),
    (0, 0, 1, -1, 277693),
    (2, 0, 0, -1, 173237),
    (2, 0, -1, 1, 55413),
    (2, 0, -1, -1, 46271),
    (2, 0, 0, 1, 32573),
    (0, 0, 2, 1, 17198),
    (2, 0, 1, -1, 9266),
    (0, 0, 2, -1, 8822),
    (2, -1, 0, -1, 8216),
    (2, 0, -2, -1, 4324),
    (2, 0, 1, 1, 4200),
    (2, 1, 0, -1, -3359),
)

# Additive terms over the full argument vector
# (D, M, M', F, L', A1 Venus, A2 Jupiter, A3 flattening).
_LONGITUDE_ADDITIVE = (
    PeriodicTerm(3958, (0, 0, 0, 0, 0, 1)),
    PeriodicTerm(1962, (0, 0, 0, -1, 1)),
    PeriodicTerm(318, (0, 0, 0, 0, 0, 0, 1)),
)
_LATITUDE_ADDITIVE = (
    PeriodicTerm(-2235, (0, 0, 0, 0, 1)),
    PeriodicTerm(382, (0, 0, 0, 0, 0, 0, 0, 1)),
    PeriodicTerm(175, (0, 0, 0, -1, 0, 1)),
    PeriodicTerm(175, (0, 0, 0, 1, 0, 1)),
    PeriodicTerm(127, (0, 0, -1, 0, 1)),
    PeriodicTerm(-115, (0, 0, 1, 0, 1)),
)


@dataclass(frozen=True)
class LunarElements:
    """Coefficient table of the lunar model."""

    mean_longitude: Polynomial
    elongation: Polynomial
    sun_mean_anomaly: Polynomial
    mean_anomaly: Polynomial
    node_distance: Polynomial
    eccentricity_factor: Polynomial
    venus_argument: Polynomial
    jupiter_argument: Polynomial
    flattening_argument: Polynomial
    mean_distance_km: float
    longitude: tuple[PeriodicTerm, ...]
    latitude: tuple[PeriodicTerm, ...]
    distance: tuple[PeriodicTerm, ...]


LUNAR_ELEMENTS = LunarElements(
    mean_longitude=Polynomial((218.3164477, 481267.88123421)),
    elongation=Polynomial((297.8501921, 445267.1114034)),
    sun_mean_anomaly=Polynomial((357.5291092, 35999.0502909)),
    mean_anomaly=Polynomial((134.9633964, 477198.8675055)),
    node_distance=Polynomial((93.2720950, 483202.0175233)),
    eccentricity_factor=Polynomial((1.0, -0.002516)),
    venus_argument=Polynomial((119.75, 131.849)),
    jupiter_argument=Polynomial((53.09, 479264.290)),
    flattening_argument=Polynomial((313.45, 481266.484)),
    mean_distance_km=385000.56,
    longitude=tuple(PeriodicTerm(row[4], row[:4]) for row in _LONGITUDE_DISTANCE_ROWS)
    + _LONGITUDE_ADDITIVE,
    latitude=tuple(PeriodicTerm(row[4], row[:4]) for row in _LATITUDE_ROWS) + _LATITUDE_ADDITIVE,
    distance=tuple(
        PeriodicTerm(row[5], row[:4], cosine=True) for row in _LONGITUDE_DISTANCE_ROWS if row[5]
    ),
)


class LunarModel(BodyModel):
    """Geocentric Moon from a truncated lunar theory."""

    def __init__(self, elements: LunarElements) -> None:
        self.name = 'moon'
        self.elements = elements

    def mean_anomaly(self, t: float) -> float:
        """Moon's mean anomaly M′ in degrees (not normalized)."""
        return self.elements.mean_anomaly(t)

    def node_distance(self, t: float) -> float:
        """Mean distance F of the Moon from its ascending node, in degrees (not normalized)."""
        return self.elements.node_distance(t)

    def _arguments(self, t: float) -> tuple[float, ...]:
        el = self.elements
        return (
            el.elongation(t),
            el.sun_mean_anomaly(t),
            el.mean_anomaly(t),
            el.node_distance(t),
            el.mean_longitude(t),
            el.venus_argument(t),
            el.jupiter_argument(t),
            el.flattening_argument(t),
        )

    def _series(self, terms: tuple[PeriodicTerm, ...], args: tuple[float, ...], ecc: float) -> float:
        total = 0.0
        for term in terms:
            # Only the first four multipliers are Delaunay arguments; index 1 is M.
            power = abs(term.multipliers[1]) if len(term.multipliers) > 1 else 0
            total += term.value(args, scale=ecc**power)
        return total

    def position(self, t: float) -> EclipticPosition:
        el = self.elements
        args = self._arguments(t)
        ecc = el.eccentricity_factor(t)
        longitude = el.mean_longitude(t) + self._series(el.longitude, args, ecc) / 1e6
        latitude = self._series(el.latitude, args, ecc) / 1e6
        distance_km = el.mean_distance_km + self._series(el.distance, args, ecc) / 1000.0
        return ecliptic_position(
            longitude + nutation_in_longitude(t), latitude, distance_km / KM_PER_AU
        )


MOON = LunarModel(LUNAR_ELEMENTS)
