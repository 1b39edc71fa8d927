"""Sun, Moon and planet positions from low-order analytic series.

Given an instant in milliseconds since the Unix epoch, compute a body's
apparent ecliptic and equatorial coordinates, its azimuth and elevation for
an observer, its rise, set and meridian transit times, the Sun's civil
twilight, and the Moon's phase. Angles are degrees, longitudes are
east-positive, and events that do not happen are ``math.nan``.
"""

from astro_ephemeris.coordinates import EquatorialPosition, HorizontalPosition
from astro_ephemeris.phase import MoonPhase, phase
from astro_ephemeris.positions import (
    BodyPosition,
    EventTimes,
    MoonPosition,
    RiseSetTimes,
    SunPosition,
    body,
    jupiter,
    mars,
    mercury,
    moon,
    neptune,
    saturn,
    sun,
    uranus,
    venus,
)

__all__ = [
    'BodyPosition',
    'EquatorialPosition',
    'EventTimes',
    'HorizontalPosition',
    'MoonPhase',
    'MoonPosition',
    'RiseSetTimes',
    'SunPosition',
    'body',
    'jupiter',
    'mars',
    'mercury',
    'moon',
    'neptune',
    'phase',
    'saturn',
    'sun',
    'uranus',
    'venus',
]
