"""Public position objects: one body at one instant, with observer-dependent events.

Instants are epoch milliseconds and angles are degrees (east-positive
longitude). Events that do not occur in the day window are ``math.nan``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from astro_ephemeris.angle_utils import TWO_PI
from astro_ephemeris.bodies import (
    JUPITER,
    MARS,
    MERCURY,
    MOON,
    NEPTUNE,
    SATURN,
    SUN,
    URANUS,
    VENUS,
    BodyModel,
    get_model,
)
from astro_ephemeris.constants import CIVIL_TWILIGHT_DEG, DAYS_PER_CENTURY
from astro_ephemeris.coordinates import (
    HorizontalPosition,
    apparent_equatorial,
    apparent_horizontal,
)
from astro_ephemeris.events import horizon_threshold, rise_and_set, transit
from astro_ephemeris.phase import MoonPhase
from astro_ephemeris.phase import phase as moon_phase
from astro_ephemeris.time_utils import julian_centuries


@dataclass(frozen=True)
class RiseSetTimes:
    """Rise and set in epoch milliseconds (NaN when the event does not occur)."""

    rise: float
    set: float


@dataclass(frozen=True)
class EventTimes:
    """Day events in epoch milliseconds (NaN when the event does not occur).

    ``dawn`` and ``dusk`` (civil twilight) are only computed for the Sun.
    """

    rise: float
    set: float
    transit: float
    dawn: float = math.nan
    dusk: float = math.nan


def _or_nan(value: float | None) -> float:
    return math.nan if value is None else value


class BodyPosition:
    """Apparent position of a body at one instant.

    Parameters:
        model: The body's position model.
        ms: Instant in milliseconds since 1970-01-01T00:00Z.
    """

    def __init__(self, model: BodyModel, ms: float) -> None:
        self.model = model
        self.ms = ms
        self.t = julian_centuries(ms)
        self._ecliptic = model.position(self.t)
        self._equatorial = apparent_equatorial(model, self.t)

    def __repr__(self) -> str:
        return (
            f'{type(self).__name__}({self.model.name!r}, ms={self.ms!r}, '
            f'longitude={self.longitude:.4f}, latitude={self.latitude:.4f})'
        )

    @property
    def name(self) -> str:
        return self.model.name

    @property
    def longitude(self) -> float:
        """Apparent ecliptic longitude, degrees in [0, 360)."""
        return self._ecliptic.longitude

    @property
    def latitude(self) -> float:
        """Apparent ecliptic latitude, degrees."""
        return self._ecliptic.latitude

    @property
    def distance(self) -> float:
        """Geocentric distance, AU."""
        return self._ecliptic.distance

    @property
    def right_ascension(self) -> float:
        """Right ascension of date, degrees in [0, 360)."""
        return self._equatorial.right_ascension

    @property
    def declination(self) -> float:
        """Declination of date, degrees."""
        return self._equatorial.declination

    def observer(self, latitude: float, longitude: float) -> HorizontalPosition:
        """Return azimuth and elevation (degrees) seen from an observer."""
        return apparent_horizontal(self.model, self.t, latitude, longitude)

    def _window_start(self, longitude: float) -> float:
        """Start of the 24-hour event window, Julian centuries."""
        return self.t

    def _rise_and_set(self, latitude: float, longitude: float, threshold: float) -> RiseSetTimes:
        found = rise_and_set(self.model, self._window_start(longitude), latitude, longitude, threshold)
        return RiseSetTimes(rise=_or_nan(found.rise), set=_or_nan(found.set))

    def rise_and_set(self, latitude: float, longitude: float) -> RiseSetTimes:
        """Return rise and set from a single sweep of the day window."""
        return self._rise_and_set(latitude, longitude, horizon_threshold(self.model))

    def rise(self, latitude: float, longitude: float) -> float:
        """Rise time in epoch milliseconds, or NaN."""
        return self.rise_and_set(latitude, longitude).rise

    def set(self, latitude: float, longitude: float) -> float:
        """Set time in epoch milliseconds, or NaN."""
        return self.rise_and_set(latitude, longitude).set

    def transit(self, latitude: float, longitude: float) -> float:
        """Meridian transit time in epoch milliseconds, or NaN.

        The latitude does not affect the transit; it is accepted for symmetry
        with rise and set.
        """
        return _or_nan(transit(self.model, self._window_start(longitude), longitude))

    def events(self, latitude: float, longitude: float) -> EventTimes:
        """Return rise, set and transit together."""
        times = self.rise_and_set(latitude, longitude)
        return EventTimes(
            rise=times.rise,
            set=times.set,
            transit=self.transit(latitude, longitude),
        )


class SunPosition(BodyPosition):
    """Sun position; events are solved over the local mean solar day."""

    def __init__(self, ms: float) -> None:
        super().__init__(SUN, ms)

    def _window_start(self, longitude: float) -> float:
        # Local mean midnight before the local mean noon nearest the instant.
        turn = math.radians(longitude) / TWO_PI
        days = self.t * DAYS_PER_CENTURY
        noon = math.floor(days + turn + 0.5)
        return (noon - turn - 0.5) / DAYS_PER_CENTURY

    def dawn(self, latitude: float, longitude: float) -> float:
        """Start of civil twilight (Sun at -6 degrees, rising), epoch ms or NaN."""
        return self._rise_and_set(latitude, longitude, CIVIL_TWILIGHT_DEG).rise

    def dusk(self, latitude: float, longitude: float) -> float:
        """End of civil twilight (Sun at -6 degrees, setting), epoch ms or NaN."""
        return self._rise_and_set(latitude, longitude, CIVIL_TWILIGHT_DEG).set

    def events(self, latitude: float, longitude: float) -> EventTimes:
        times = self.rise_and_set(latitude, longitude)
        twilight = self._rise_and_set(latitude, longitude, CIVIL_TWILIGHT_DEG)
        return EventTimes(
            rise=times.rise,
            set=times.set,
            transit=self.transit(latitude, longitude),
            dawn=twilight.rise,
            dusk=twilight.set,
        )


class MoonPosition(BodyPosition):
    """Moon position with its synodic phase."""

    def __init__(self, ms: float) -> None:
        super().__init__(MOON, ms)

    def phase(self) -> MoonPhase:
        """Return the Moon's phase for this instant's UTC date."""
        return moon_phase(self.ms)


def sun(ms: float) -> SunPosition:
    """Return the Sun's position at epoch milliseconds ``ms``."""
    return SunPosition(ms)


def moon(ms: float) -> MoonPosition:
    """Return the Moon's position at epoch milliseconds ``ms``."""
    return MoonPosition(ms)


def mercury(ms: float) -> BodyPosition:
    return BodyPosition(MERCURY, ms)


def venus(ms: float) -> BodyPosition:
    return BodyPosition(VENUS, ms)


def mars(ms: float) -> BodyPosition:
    return BodyPosition(MARS, ms)


def jupiter(ms: float) -> BodyPosition:
    return BodyPosition(JUPITER, ms)


def saturn(ms: float) -> BodyPosition:
    return BodyPosition(SATURN, ms)


def uranus(ms: float) -> BodyPosition:
    return BodyPosition(URANUS, ms)


def neptune(ms: float) -> BodyPosition:
    return BodyPosition(NEPTUNE, ms)


def body(name: str, ms: float) -> BodyPosition:
    """Return the position of a body by name (case-insensitive).

    Raises:
        ValueError: If the name is not a known body.
    """
    model = get_model(name)
    if model is SUN:
        return SunPosition(ms)
    if model is MOON:
        return MoonPosition(ms)
    return BodyPosition(model, ms)
