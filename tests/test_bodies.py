"""Tests for the Sun, Moon and planet position models."""

from __future__ import annotations

import math
from datetime import datetime

import pytest

import astro_ephemeris
from astro_ephemeris.bodies import MOON, get_model
from astro_ephemeris.bodies.base import (
    PeriodicTerm,
    Polynomial,
    nutation_in_longitude,
    obliquity,
)
from astro_ephemeris.bodies.planet import solve_kepler
from astro_ephemeris.constants import BODY_NAMES
from astro_ephemeris.time_utils import julian_centuries


def _ms(text: str) -> float:
    return datetime.fromisoformat(text.replace('Z', '+00:00')).timestamp() * 1000.0


def _angle_diff(actual: float, expected: float) -> float:
    difference = abs(actual - expected) % 360.0
    return min(difference, 360.0 - difference)


@pytest.mark.parametrize(
    ('when', 'longitude', 'distance'),
    [
        ('1999-03-21T01:46Z', 0.0, 0.996),
        ('1999-06-21T19:49Z', 90.0, 1.016),
        ('1999-09-23T11:32Z', 180.0, 1.003),
        ('1999-12-22T07:44Z', 270.0, 0.984),
    ],
)
def test_sun_equinoxes_and_solstices(when: str, longitude: float, distance: float) -> None:
    """Sun longitude at the 1999 equinoxes and solstices, within 1 arcminute."""
    sun = astro_ephemeris.sun(_ms(when))
    assert _angle_diff(sun.longitude, longitude) <= 1 / 60
    assert abs(sun.latitude) <= 1 / 3600
    assert sun.distance == pytest.approx(distance, abs=0.001)


@pytest.mark.parametrize(
    ('name', 'longitude', 'tolerance'),
    [
        ('sun', 3.62, 1 / 60),
        ('moon', 357.21, 2 / 60),
        ('mercury', 335.86, 1 / 60),
        ('venus', 49.62, 1 / 60),
        ('mars', 295.12, 1 / 60),
        ('jupiter', 293.30, 2 / 60),
        ('saturn', 300.12, 2 / 60),
        ('uranus', 34.73, 2 / 60),
        ('neptune', 348.97, 2 / 60),
    ],
)
def test_ecliptic_longitude_of_every_body(name: str, longitude: float, tolerance: float) -> None:
    """Apparent longitudes on 2020-03-23T19:20Z against almanac values."""
    pos = astro_ephemeris.body(name, _ms('2020-03-23T19:20Z'))
    assert _angle_diff(pos.longitude, longitude) <= tolerance


def test_factories_match_body_lookup() -> None:
    """Each named factory gives the same position as body(name, ms)."""
    ms = _ms('2020-03-23T19:20Z')
    factories = {
        'sun': astro_ephemeris.sun,
        'moon': astro_ephemeris.moon,
        'mercury': astro_ephemeris.mercury,
        'venus': astro_ephemeris.venus,
        'mars': astro_ephemeris.mars,
        'jupiter': astro_ephemeris.jupiter,
        'saturn': astro_ephemeris.saturn,
        'uranus': astro_ephemeris.uranus,
        'neptune': astro_ephemeris.neptune,
    }
    for name, factory in factories.items():
        direct = factory(ms)
        looked_up = astro_ephemeris.body(name.upper(), ms)
        assert direct.name == name
        assert (direct.longitude, direct.latitude, direct.distance) == (
            looked_up.longitude,
            looked_up.latitude,
            looked_up.distance,
        )


@pytest.mark.parametrize('name', BODY_NAMES)
def test_outputs_are_normalized(name: str) -> None:
    """Angles stay in range and distances positive from 1950 to 2050."""
    start = _ms('1950-01-01T00:00Z')
    step = 365.2425 * 86_400_000.0 * 1.37
    for i in range(74):
        pos = astro_ephemeris.body(name, start + i * step)
        assert 0.0 <= pos.longitude < 360.0
        assert -90.0 <= pos.latitude <= 90.0
        assert pos.distance > 0.0
        assert 0.0 <= pos.right_ascension < 360.0
        assert -90.0 <= pos.declination <= 90.0


@pytest.mark.parametrize(
    ('name', 'low', 'high'),
    [
        ('sun', 0.98, 1.02),
        ('moon', 0.0023, 0.0028),
        ('mercury', 0.5, 1.5),
        ('venus', 0.25, 1.75),
        ('mars', 0.35, 2.7),
        ('jupiter', 3.9, 6.5),
        ('saturn', 7.9, 11.1),
        ('uranus', 17.2, 21.2),
        ('neptune', 28.7, 31.4),
    ],
)
def test_distances_are_plausible(name: str, low: float, high: float) -> None:
    """Geocentric distances stay within each body's physical range."""
    start = _ms('2000-01-01T00:00Z')
    for i in range(40):
        pos = astro_ephemeris.body(name, start + i * 29.3 * 86_400_000.0)
        assert low <= pos.distance <= high


def test_positions_are_bit_identical_on_repeat() -> None:
    """Identical inputs give identical outputs."""
    ms = _ms('2011-07-04T03:21:17Z')
    for name in BODY_NAMES:
        first = astro_ephemeris.body(name, ms)
        second = astro_ephemeris.body(name, ms)
        assert first.longitude == second.longitude
        assert first.latitude == second.latitude
        assert first.distance == second.distance
        assert first.right_ascension == second.right_ascension
        assert first.observer(10.0, 20.0) == second.observer(10.0, 20.0)


def test_moon_intermediate_arguments() -> None:
    """Moon's mean anomaly and node distance are their polynomials at t."""
    assert MOON.mean_anomaly(0.0) == pytest.approx(134.9633964)
    assert MOON.node_distance(0.0) == pytest.approx(93.2720950)
    assert MOON.node_distance(0.01) - MOON.node_distance(0.0) == pytest.approx(4832.020175233)


def test_moon_latitude_bounded_by_orbit_inclination() -> None:
    """Moon's ecliptic latitude never exceeds about 5.3 degrees."""
    start = julian_centuries(_ms('2015-01-01T00:00Z'))
    latitudes = [MOON.position(start + day / 36525.0).latitude for day in range(60)]
    assert max(abs(lat) for lat in latitudes) <= 5.35
    assert max(latitudes) > 4.5


def test_obliquity_and_nutation() -> None:
    """Mean obliquity at J2000 and the size of the nutation in longitude."""
    assert obliquity(0.0) == pytest.approx(23.439291)
    for t in (-0.3, 0.0, 0.17, 0.4):
        assert abs(nutation_in_longitude(t)) < 19.0 / 3600.0


def test_polynomial_and_periodic_term() -> None:
    """Coefficient tables evaluate in increasing-power order and in degrees."""
    assert Polynomial((1.0, 2.0, 3.0))(2.0) == 17.0
    term = PeriodicTerm(2.0, (1, -1), phase=30.0)
    assert term.value((90.0, 30.0)) == pytest.approx(2.0)
    cosine = PeriodicTerm(1.0, (2,), cosine=True, amplitude_rate=1.0)
    assert cosine.value((90.0,), t=1.0) == pytest.approx(-2.0)
    assert cosine.value((90.0,), scale=0.5) == pytest.approx(-0.5)


@pytest.mark.parametrize('eccentricity', [0.0, 0.0068, 0.2056, 0.5])
def test_solve_kepler(eccentricity: float) -> None:
    """The eccentric anomaly satisfies Kepler's equation."""
    for mean_anomaly in (0.0, 0.3, 2.0, math.pi, 4.5, 6.2):
        ecc_anomaly = solve_kepler(mean_anomaly, eccentricity)
        residual = ecc_anomaly - eccentricity * math.sin(ecc_anomaly) - mean_anomaly
        assert math.remainder(residual, 2 * math.pi) == pytest.approx(0.0, abs=1e-10)


def test_get_model_rejects_unknown_body() -> None:
    """Unknown body names raise ValueError naming the body."""
    with pytest.raises(ValueError, match='pluto'):
        get_model('pluto')
    with pytest.raises(ValueError, match='pluto'):
        astro_ephemeris.body('pluto', 0.0)
