"""Shared building blocks for body position models.

Every body is a coefficient table evaluated by one of three model shapes
(solar, lunar, planetary). The tables are made of ``Polynomial`` mean
elements in Julian centuries and ``PeriodicTerm`` series.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from astro_ephemeris.angle_utils import normalize_degrees
from astro_ephemeris.constants import ABERRATION_CONSTANT_DEG, ARCSEC_PER_DEGREE


@dataclass(frozen=True)
class EclipticPosition:
    """Apparent geocentric ecliptic position of date.

    Parameters:
        longitude: Degrees in [0, 360).
        latitude: Degrees in [-90, 90].
        distance: Geocentric distance in AU.
    """

    longitude: float
    latitude: float
    distance: float


@dataclass(frozen=True)
class Polynomial:
    """Polynomial in one variable; coefficients in increasing power order."""

    coefficients: tuple[float, ...]

    def __call__(self, x: float) -> float:
        result = 0.0
        for c in reversed(self.coefficients):
            result = result * x + c
        return result


@dataclass(frozen=True)
class PeriodicTerm:
    """One term ``A(t) * sin(Σ kᵢ·argᵢ + phase)`` (or cosine) of a series.

    Parameters:
        amplitude: Amplitude at the epoch, in the unit of the series.
        multipliers: Integer multiple of each fundamental argument.
        phase: Constant phase in degrees.
        cosine: Use cosine instead of sine.
        amplitude_rate: Change of amplitude per Julian century.
    """

    amplitude: float
    multipliers: tuple[int, ...]
    phase: float = 0.0
    cosine: bool = False
    amplitude_rate: float = 0.0

    def argument(self, args: Sequence[float]) -> float:
        """Return the term's argument in degrees for fundamental arguments ``args`` (degrees)."""
        return self.phase + sum(k * a for k, a in zip(self.multipliers, args))

    def value(self, args: Sequence[float], t: float = 0.0, scale: float = 1.0) -> float:
        """Evaluate the term; ``scale`` multiplies the amplitude (e.g. eccentricity damping)."""
        angle = math.radians(self.argument(args))
        trig = math.cos(angle) if self.cosine else math.sin(angle)
        return (self.amplitude + self.amplitude_rate * t) * scale * trig


def sum_series(terms: Sequence[PeriodicTerm], args: Sequence[float], t: float = 0.0) -> float:
    """Sum a periodic series at the given fundamental arguments."""
    return sum(term.value(args, t) for term in terms)


# Mean obliquity of the ecliptic (degrees) in Julian centuries.
_OBLIQUITY = Polynomial((23.439291, -0.0130042, -1.64e-7, 5.04e-7))

# Nutation arguments: Moon's ascending node, mean longitudes of Sun and Moon (degrees).
_NODE = Polynomial((125.04452, -1934.136261))
_SUN_MEAN_LONGITUDE = Polynomial((280.4665, 36000.7698))
_MOON_MEAN_LONGITUDE = Polynomial((218.3165, 481267.8813))

# Nutation in longitude (arcseconds) over (node, Sun longitude, Moon longitude).
_NUTATION_TERMS = (
    PeriodicTerm(-17.20, (1, 0, 0)),
    PeriodicTerm(-1.32, (0, 2, 0)),
    PeriodicTerm(-0.23, (0, 0, 2)),
    PeriodicTerm(0.21, (2, 0, 0)),
)


def obliquity(t: float) -> float:
    """Return the mean obliquity of the ecliptic in degrees at Julian centuries ``t``."""
    return _OBLIQUITY(t)


def nutation_in_longitude(t: float) -> float:
    """Return the nutation in longitude Δψ in degrees at Julian centuries ``t``."""
    args = (_NODE(t), _SUN_MEAN_LONGITUDE(t), _MOON_MEAN_LONGITUDE(t))
    return sum_series(_NUTATION_TERMS, args) / ARCSEC_PER_DEGREE


def aberration_in_longitude(longitude: float, latitude: float, sun_longitude: float) -> float:
    """Return the annual aberration in ecliptic longitude (degrees) for a body.

    Parameters:
        longitude: Body's geocentric ecliptic longitude (degrees).
        latitude: Body's geocentric ecliptic latitude (degrees).
        sun_longitude: Sun's geometric longitude (degrees).
    """
    return (
        -ABERRATION_CONSTANT_DEG
        * math.cos(math.radians(sun_longitude - longitude))
        / math.cos(math.radians(latitude))
    )


class BodyModel(ABC):
    """A body's position model: ecliptic position as a function of Julian centuries."""

    name: str

    @abstractmethod
    def position(self, t: float) -> EclipticPosition:
        """Return the apparent geocentric ecliptic position at Julian centuries ``t``."""


def ecliptic_position(longitude: float, latitude: float, distance: float) -> EclipticPosition:
    """Build an EclipticPosition with the longitude reduced to [0, 360)."""
    return EclipticPosition(
        longitude=normalize_degrees(longitude),
        latitude=latitude,
        distance=distance,
    )
