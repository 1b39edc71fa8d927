"""Rise, set and meridian transit solvers.

Rise and set are found by sweeping a 24-hour window in 2-hour segments,
fitting a parabola to the elevation (minus the event threshold) sampled at
each segment's start, middle and end, and solving it analytically. Transit is
found by a fixed four-step hour-angle iteration.

Times in and out of the solvers are Julian centuries (``t``) and epoch
milliseconds; an event that does not occur in the window is ``None``.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass

from astro_ephemeris.angle_utils import TWO_PI, normalize_radians, signed_radians
from astro_ephemeris.bodies.base import BodyModel
from astro_ephemeris.constants import (
    DAYS_PER_CENTURY,
    HOURS_PER_DAY,
    MOON_HORIZON_DEG,
    PLANET_HORIZON_DEG,
    SUN_HORIZON_DEG,
    SWEEP_STEP_HOURS,
    TRANSIT_ITERATIONS,
)
from astro_ephemeris.coordinates import body_hour_angle, elevation
from astro_ephemeris.time_utils import hours_later, ms_from_day_fraction, ms_from_julian_centuries

logger = logging.getLogger(__name__)


class Crossing(enum.Enum):
    """How the elevation curve crosses the threshold within one segment."""

    NONE = 'none'
    RISING = 'rising'
    SETTING = 'setting'
    DOUBLE = 'double'


@dataclass(frozen=True)
class SegmentCrossing:
    """Classified segment: crossing state and root offsets in [-1, 1] (segment half-widths).

    ``rise`` and ``set`` are offsets from the segment middle, or None when the
    segment holds no such crossing.
    """

    state: Crossing
    rise: float | None = None
    set: float | None = None


@dataclass(frozen=True)
class RiseSet:
    """Rise and set instants in epoch milliseconds, None when they do not occur."""

    rise: float | None
    set: float | None


def classify_segment(before: float, middle: float, after: float) -> SegmentCrossing:
    """Fit a parabola through three equally spaced samples and classify its roots.

    Samples are elevation minus threshold at offsets -1, 0 and +1.

    Parameters:
        before: Sample at the segment start.
        middle: Sample at the segment middle.
        after: Sample at the segment end.

    Returns:
        SegmentCrossing with the state and the root offsets.
    """
    a = 0.5 * (after + before) - middle
    b = 0.5 * (after - before)
    c = middle

    if a == 0.0:
        if b == 0.0:
            return SegmentCrossing(Crossing.NONE)
        root = -c / b
        if abs(root) > 1.0:
            return SegmentCrossing(Crossing.NONE)
        if before < 0.0:
            return SegmentCrossing(Crossing.RISING, rise=root)
        return SegmentCrossing(Crossing.SETTING, set=root)

    x_vertex = -b / (2.0 * a)
    y_vertex = (a * x_vertex + b) * x_vertex + c
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return SegmentCrossing(Crossing.NONE)

    dx = 0.5 * math.sqrt(discriminant) / abs(a)
    x1 = x_vertex - dx
    x2 = x_vertex + dx
    n_roots = int(abs(x1) <= 1.0) + int(abs(x2) <= 1.0)
    if x1 < -1.0:
        x1 = x2

    if n_roots == 0:
        return SegmentCrossing(Crossing.NONE)
    if n_roots == 1:
        if before < 0.0:
            return SegmentCrossing(Crossing.RISING, rise=x1)
        return SegmentCrossing(Crossing.SETTING, set=x1)
    if y_vertex < 0.0:
        return SegmentCrossing(Crossing.DOUBLE, rise=x2, set=x1)
    return SegmentCrossing(Crossing.DOUBLE, rise=x1, set=x2)


def rise_and_set(
    model: BodyModel,
    start: float,
    latitude: float,
    longitude: float,
    threshold: float,
) -> RiseSet:
    """Find the first rise and first set of a body in the 24 hours after ``start``.

    Parameters:
        model: Body position model.
        start: Window start, Julian centuries.
        latitude: Observer latitude (degrees).
        longitude: Observer longitude (degrees, east-positive).
        threshold: Elevation (degrees) of the body's center at the event.

    Returns:
        RiseSet with epoch milliseconds, or None for an event that does not occur.
    """

    def sample(hours: float) -> float:
        return elevation(model, hours_later(start, hours), latitude, longitude) - threshold

    rise_hours: float | None = None
    set_hours: float | None = None
    half_step = 0.5 * SWEEP_STEP_HOURS
    before = sample(0.0)
    middle_hours = half_step
    while middle_hours < HOURS_PER_DAY:
        middle = sample(middle_hours)
        after = sample(middle_hours + half_step)
        crossing = classify_segment(before, middle, after)
        if rise_hours is None and crossing.rise is not None:
            rise_hours = middle_hours + crossing.rise * half_step
        if set_hours is None and crossing.set is not None:
            set_hours = middle_hours + crossing.set * half_step
        if rise_hours is not None and set_hours is not None:
            break
        before = after
        middle_hours += SWEEP_STEP_HOURS

    if rise_hours is None or set_hours is None:
        logger.debug(
            '%s at (%.4f, %.4f): rise %s, set %s in window',
            model.name,
            latitude,
            longitude,
            'found' if rise_hours is not None else 'not found',
            'found' if set_hours is not None else 'not found',
        )
    return RiseSet(
        rise=_hours_to_ms(start, rise_hours),
        set=_hours_to_ms(start, set_hours),
    )


def _hours_to_ms(start: float, hours: float | None) -> float | None:
    if hours is None:
        return None
    return ms_from_day_fraction(start, hours / HOURS_PER_DAY)


def _refine_transit(model: BodyModel, t: float, longitude: float, ha: float) -> float:
    """Run the fixed transit iteration from instant ``t`` with hour-angle estimate ``ha``."""
    for _ in range(TRANSIT_ITERATIONS):
        estimate = t - ha / TWO_PI / DAYS_PER_CENTURY
        ha += signed_radians(body_hour_angle(model, estimate, longitude))
    return t - ha / TWO_PI / DAYS_PER_CENTURY


def transit(model: BodyModel, start: float, longitude: float) -> float | None:
    """Find the body's meridian transit in the 24 hours after ``start``.

    Searches backward from the window end first, then forward from the
    window start.

    Parameters:
        model: Body position model.
        start: Window start, Julian centuries.
        longitude: Observer longitude (degrees, east-positive).

    Returns:
        Transit instant in epoch milliseconds, or None if it is not in the window.
    """
    later = hours_later(start, HOURS_PER_DAY)

    ha = normalize_radians(body_hour_angle(model, later, longitude))
    result = _refine_transit(model, later, longitude, ha)
    if start <= result <= later:
        return ms_from_julian_centuries(result)

    ha = normalize_radians(body_hour_angle(model, start, longitude))
    if ha > 0.0:
        ha -= TWO_PI
    result = _refine_transit(model, start, longitude, ha)
    if start <= result <= later:
        return ms_from_julian_centuries(result)

    logger.debug('%s: no transit at longitude %.4f in window', model.name, longitude)
    return None


def horizon_threshold(model: BodyModel) -> float:
    """Return the rise/set elevation threshold (degrees) for a body."""
    if model.name == 'sun':
        return SUN_HORIZON_DEG
    if model.name == 'moon':
        return MOON_HORIZON_DEG
    return PLANET_HORIZON_DEG
