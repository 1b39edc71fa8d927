"""Tests for body, observer and column parsing."""

from __future__ import annotations

import pytest

from astro_ephemeris.params import (
    COL_AZEL,
    COL_ECLIPTIC,
    COL_PHASE,
    COL_RADEC,
    COL_YMDHMS,
    EphemerisParams,
    parse_body,
    parse_column_spec,
    parse_observer,
)


def test_parse_body_case_insensitive() -> None:
    """Body names are matched case-insensitively and trimmed."""
    assert parse_body(' Jupiter ') == 'jupiter'
    assert parse_body('SUN') == 'sun'


def test_parse_body_rejects_unknown() -> None:
    """Unknown body names raise ValueError naming the token."""
    with pytest.raises(ValueError, match='pluto'):
        parse_body('pluto')


def test_parse_observer_decimal() -> None:
    """Decimal degrees, east-positive longitude."""
    observer = parse_observer(['35.05', '-106.62'])
    assert observer.latitude_deg == 35.05
    assert observer.longitude_deg == -106.62


def test_parse_observer_sexagesimal() -> None:
    """Blank- or colon-separated sexagesimal degrees."""
    observer = parse_observer(['35 03 00', '-106:37:12'])
    assert observer.latitude_deg == pytest.approx(35.05)
    assert observer.longitude_deg == pytest.approx(-106.62)


@pytest.mark.parametrize(
    ('tokens', 'message'),
    [
        (['35.05'], 'two values'),
        (['35', '10', '20'], 'two values'),
        (['north', '10'], 'north'),
        (['10', 'east'], 'east'),
        (['91', '10'], 'outside'),
        (['10', '400'], 'outside'),
    ],
)
def test_parse_observer_rejects(tokens: list[str], message: str) -> None:
    """Bad observer tokens raise ValueError naming the problem."""
    with pytest.raises(ValueError, match=message):
        parse_observer(tokens)


def test_parse_column_spec_names_ids_and_commas() -> None:
    """Names, numeric IDs and comma lists all map to column IDs in order."""
    assert parse_column_spec(['ymdhms', '3', 'RADEC,azel']) == [
        COL_YMDHMS,
        COL_ECLIPTIC,
        COL_RADEC,
        COL_AZEL,
    ]


def test_parse_column_spec_drops_duplicates() -> None:
    """Repeated columns are kept once."""
    assert parse_column_spec(['phase', 'phase', '7']) == [COL_PHASE]


@pytest.mark.parametrize('token', ['sundist', '0', '8'])
def test_parse_column_spec_rejects(token: str) -> None:
    """Unknown names and out-of-range IDs raise ValueError."""
    with pytest.raises(ValueError):
        parse_column_spec([token])


def test_ephemeris_params_defaults() -> None:
    """EphemerisParams has sensible defaults."""
    p = EphemerisParams(body='mars', start_time='2025-01-01 00:00', stop_time='2025-01-02 00:00')
    assert p.interval == 1.0
    assert p.time_unit == 'hour'
    assert p.observer is None
    assert p.columns == []
