"""Tests for angle normalization, parsing and formatting."""

from __future__ import annotations

import math

import pytest

from astro_ephemeris.angle_utils import (
    format_sexagesimal,
    normalize_degrees,
    normalize_radians,
    parse_angle,
    signed_radians,
)


def test_normalize_degrees() -> None:
    """Degrees reduce to [0, 360)."""
    assert normalize_degrees(370.0) == pytest.approx(10.0)
    assert normalize_degrees(-10.0) == pytest.approx(350.0)
    assert normalize_degrees(360.0) == 0.0
    assert normalize_degrees(-1e-17) == 0.0


def test_normalize_and_sign_radians() -> None:
    """Radians reduce to [0, 2π) and (-π, π]."""
    assert normalize_radians(-0.5) == pytest.approx(2 * math.pi - 0.5)
    assert signed_radians(2 * math.pi - 0.5) == pytest.approx(-0.5)
    assert signed_radians(math.pi) == pytest.approx(math.pi)


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('35.05', 35.05),
        ('-106.62', -106.62),
        ('35 03 00', 35.05),
        ('-106:37:12', -106.62),
        ('-0 30', -0.5),
        ('  12 30  ', 12.5),
    ],
)
def test_parse_angle(text: str, expected: float) -> None:
    """Decimal and sexagesimal forms parse to degrees."""
    assert parse_angle(text) == pytest.approx(expected)


@pytest.mark.parametrize('text', ['', 'north', '1 2 3 4', '12 -30'])
def test_parse_angle_rejects(text: str) -> None:
    """Malformed angles return None."""
    assert parse_angle(text) is None


def test_format_sexagesimal() -> None:
    """Sign, units, minutes and seconds with the requested separators."""
    assert format_sexagesimal(35.05) == '35:03:00.0'
    assert format_sexagesimal(-106.62, ndecimal=0) == '-106:37:12'
    assert format_sexagesimal(12.5, 'hm', 2) == '12h30m00.00'
    assert format_sexagesimal(-0.00001, ndecimal=1) == '0:00:00.0'
