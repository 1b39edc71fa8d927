"""Tests for rise/set/transit solving and twilight."""

from __future__ import annotations

import math
from datetime import datetime

import pytest

import astro_ephemeris
from astro_ephemeris.angle_utils import signed_radians
from astro_ephemeris.bodies import MOON, SUN
from astro_ephemeris.coordinates import body_hour_angle
from astro_ephemeris.events import Crossing, classify_segment, rise_and_set, transit
from astro_ephemeris.time_utils import julian_centuries

ALBUQUERQUE = (35.05, -106.62)
ALBANY = (42.6525, -73.7572)
TOLERANCE_MS = 90_000.0


def _ms(text: str) -> float:
    return datetime.fromisoformat(text.replace('Z', '+00:00')).timestamp() * 1000.0


def test_sun_events_albuquerque() -> None:
    """Dawn, rise, transit, set and dusk at Albuquerque on the 2006 equinox."""
    sun = astro_ephemeris.sun(_ms('2006-03-20T19:06:28.800Z'))
    lat, lon = ALBUQUERQUE
    assert sun.dawn(lat, lon) == pytest.approx(_ms('2006-03-20T05:45-07:00'), abs=TOLERANCE_MS)
    assert sun.rise(lat, lon) == pytest.approx(_ms('2006-03-20T06:10-07:00'), abs=TOLERANCE_MS)
    assert sun.transit(lat, lon) == pytest.approx(
        _ms('2006-03-20T12:14-07:00'), abs=TOLERANCE_MS
    )
    assert sun.set(lat, lon) == pytest.approx(_ms('2006-03-20T18:18-07:00'), abs=TOLERANCE_MS)
    assert sun.dusk(lat, lon) == pytest.approx(_ms('2006-03-20T18:43-07:00'), abs=TOLERANCE_MS)


def test_sun_events_albany() -> None:
    """Rise, transit and set at Albany, queried late in the local afternoon."""
    sun = astro_ephemeris.sun(_ms('2020-03-25T17:23-04:00'))
    lat, lon = ALBANY
    assert sun.rise(lat, lon) == pytest.approx(_ms('2020-03-25T06:48-04:00'), abs=TOLERANCE_MS)
    assert sun.transit(lat, lon) == pytest.approx(
        _ms('2020-03-25T13:00-04:00'), abs=TOLERANCE_MS
    )
    assert sun.set(lat, lon) == pytest.approx(_ms('2020-03-25T19:13-04:00'), abs=TOLERANCE_MS)


def test_sun_events_bundle_matches_single_calls() -> None:
    """events() reports the same instants as the individual methods."""
    sun = astro_ephemeris.sun(_ms('2006-03-20T19:06:28.800Z'))
    lat, lon = ALBUQUERQUE
    events = sun.events(lat, lon)
    assert events.rise == sun.rise(lat, lon)
    assert events.set == sun.set(lat, lon)
    assert events.transit == sun.transit(lat, lon)
    assert events.dawn == sun.dawn(lat, lon)
    assert events.dusk == sun.dusk(lat, lon)
    times = sun.rise_and_set(lat, lon)
    assert (times.rise, times.set) == (events.rise, events.set)
    assert events.dawn < events.rise < events.transit < events.set < events.dusk


def test_moon_events_albuquerque() -> None:
    """Moonrise, transit and moonset in the 24 hours after the query."""
    moon = astro_ephemeris.moon(_ms('2006-03-20T19:06:28.800Z'))
    lat, lon = ALBUQUERQUE
    assert moon.rise(lat, lon) == pytest.approx(_ms('2006-03-21T00:16-07:00'), abs=TOLERANCE_MS)
    assert moon.transit(lat, lon) == pytest.approx(
        _ms('2006-03-21T05:02-07:00'), abs=TOLERANCE_MS
    )
    assert moon.set(lat, lon) == pytest.approx(_ms('2006-03-21T09:45-07:00'), abs=TOLERANCE_MS)


def test_planet_events_are_in_window() -> None:
    """Planet events, when they occur, fall in the 24 hours after the query."""
    ms = _ms('2020-03-23T19:20Z')
    for name in ('mercury', 'venus', 'mars', 'jupiter', 'saturn', 'uranus', 'neptune'):
        events = astro_ephemeris.body(name, ms).events(*ALBANY)
        for value in (events.rise, events.set, events.transit):
            assert math.isnan(value) or ms <= value <= ms + 86_400_000.0
        assert math.isnan(events.dawn) and math.isnan(events.dusk)


@pytest.mark.parametrize('latitude', [80.0, -80.0])
def test_polar_day_and_night_have_no_rise_or_set(latitude: float) -> None:
    """Midnight sun (north) and polar night (south) at the June solstice."""
    sun = astro_ephemeris.sun(_ms('2020-06-21T12:00Z'))
    times = sun.rise_and_set(latitude, 15.0)
    assert math.isnan(times.rise)
    assert math.isnan(times.set)
    assert math.isnan(sun.dawn(latitude, 15.0))
    assert not math.isnan(sun.transit(latitude, 15.0))


def test_missing_events_are_none_internally() -> None:
    """The solver reports events that do not occur as None."""
    t = julian_centuries(_ms('2020-06-21T00:00Z'))
    found = rise_and_set(SUN, t, 80.0, 15.0, -0.833)
    assert found.rise is None
    assert found.set is None


@pytest.mark.parametrize('latitude', [-89.5, -66.0, 0.0, 66.0, 89.5])
@pytest.mark.parametrize('model', [SUN, MOON], ids=['sun', 'moon'])
def test_transit_drives_hour_angle_to_zero(model, latitude: float) -> None:  # type: ignore[no-untyped-def]
    """Four hour-angle steps land on the meridian at any latitude."""
    longitude = -73.7572
    transit_ms = astro_ephemeris.body(model.name, _ms('2020-12-21T07:00Z')).transit(
        latitude, longitude
    )
    assert not math.isnan(transit_ms)
    ha = signed_radians(body_hour_angle(model, julian_centuries(transit_ms), longitude))
    assert abs(ha) < 1e-5


@pytest.mark.parametrize(('latitude', 'longitude'), [(40.0, -75.0), (-33.85, 151.2), (51.5, 0.0)])
def test_sun_rise_transit_set_order(latitude: float, longitude: float) -> None:
    """Rise precedes transit precedes set through the year at mid-latitudes."""
    for month in range(1, 13):
        sun = astro_ephemeris.sun(_ms(f'2021-{month:02d}-15T12:00Z'))
        events = sun.events(latitude, longitude)
        assert events.rise <= events.transit <= events.set


def test_events_are_bit_identical_on_repeat() -> None:
    """Repeated event queries give identical instants."""
    moon = astro_ephemeris.moon(_ms('2006-03-20T19:06:28.800Z'))
    assert moon.events(*ALBUQUERQUE) == moon.events(*ALBUQUERQUE)


def test_classify_segment_none() -> None:
    """No crossing when the curve stays on one side or never reaches zero."""
    assert classify_segment(1.0, 2.0, 1.0).state is Crossing.NONE
    assert classify_segment(-1.0, -2.0, -3.0).state is Crossing.NONE
    assert classify_segment(1.0, 0.5, 1.0).state is Crossing.NONE
    assert classify_segment(0.5, 0.5, 0.5).state is Crossing.NONE


def test_classify_segment_linear() -> None:
    """A straight line through zero is a single rise or set."""
    rising = classify_segment(-1.0, 0.0, 1.0)
    assert rising.state is Crossing.RISING
    assert rising.rise == pytest.approx(0.0)
    assert rising.set is None
    setting = classify_segment(1.0, 0.5, 0.0)
    assert setting.state is Crossing.SETTING
    assert setting.set == pytest.approx(1.0)


def test_classify_segment_single_root() -> None:
    """One root in the segment: its direction follows the starting sign."""
    rising = classify_segment(-1.0, 0.5, 0.8)
    assert rising.state is Crossing.RISING
    assert rising.rise == pytest.approx(-0.4314, abs=1e-4)
    setting = classify_segment(0.8, 0.5, -1.0)
    assert setting.state is Crossing.SETTING
    assert setting.set == pytest.approx(0.4314, abs=1e-4)


def test_classify_segment_double() -> None:
    """Two roots: a dip below the threshold sets first, a peak above rises first."""
    dip = classify_segment(1.0, -1.0, 1.0)
    assert dip.state is Crossing.DOUBLE
    assert dip.set == pytest.approx(-math.sqrt(0.5))
    assert dip.rise == pytest.approx(math.sqrt(0.5))
    peak = classify_segment(-1.0, 1.0, -1.0)
    assert peak.state is Crossing.DOUBLE
    assert peak.rise == pytest.approx(-math.sqrt(0.5))
    assert peak.set == pytest.approx(math.sqrt(0.5))


def test_transit_solver_window() -> None:
    """The raw solver returns the transit inside the 24 hours after the start."""
    start = julian_centuries(_ms('2006-03-20T19:06:28.800Z'))
    transit_ms = transit(MOON, start, ALBUQUERQUE[1])
    assert transit_ms is not None
    assert transit_ms == pytest.approx(_ms('2006-03-21T05:02-07:00'), abs=TOLERANCE_MS)
