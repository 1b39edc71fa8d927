"""Ephemeris table generator: one body's position at a fixed step over a time range."""

from __future__ import annotations

import logging
import math
from typing import TextIO

import numpy as np

from astro_ephemeris.bodies import get_model
from astro_ephemeris.bodies.base import obliquity
from astro_ephemeris.constants import (
    DEGREES_PER_HOUR_RA,
    MAX_EPHEMERIS_ROWS,
    MIN_EPHEMERIS_ROWS,
    MS_PER_SECOND,
)
from astro_ephemeris.coordinates import to_equatorial
from astro_ephemeris.params import (
    COL_AZEL,
    COL_DISTANCE,
    COL_ECLIPTIC,
    COL_MS,
    COL_PHASE,
    COL_RADEC,
    COL_YMDHMS,
    DEFAULT_COLUMNS,
    EphemerisParams,
    parse_body,
)
from astro_ephemeris.phase import phase
from astro_ephemeris.positions import body
from astro_ephemeris.record import Record
from astro_ephemeris.sidereal import local_sidereal
from astro_ephemeris.time_utils import (
    hms_from_ms,
    interval_seconds,
    julian_centuries,
    parse_datetime,
    ymd_from_ms,
)

logger = logging.getLogger(__name__)

_PHASE_WIDTH = 21  # 5-digit number, blank, longest label

_HEADERS = {
    COL_YMDHMS: 'year mo dy hr mi sc',
    COL_MS: '            epoch_ms',
    COL_ECLIPTIC: '  ecl_lon   ecl_lat',
    COL_DISTANCE: '  distance_au',
    COL_RADEC: '  ra_hours   dec_deg',
    COL_AZEL: '  azimuth elevation',
    COL_PHASE: 'phase label'.ljust(_PHASE_WIDTH),
}


def horizontal_series(
    name: str,
    start_ms: float,
    step_ms: float,
    count: int,
    latitude: float,
    longitude: float,
) -> tuple[np.ndarray, np.ndarray]:
    """Return a body's azimuth and elevation at ``count`` evenly spaced instants.

    Parameters:
        name: Body name.
        start_ms: First instant, epoch milliseconds.
        step_ms: Step between instants, milliseconds.
        count: Number of instants.
        latitude: Observer latitude (degrees).
        longitude: Observer longitude (degrees, east-positive).

    Returns:
        (azimuth, elevation) arrays in degrees; azimuth in [0, 360).

    Raises:
        ValueError: If the body name is unknown.
    """
    model = get_model(name)
    times = start_ms + step_ms * np.arange(count, dtype=float)
    ra = np.empty(count)
    dec = np.empty(count)
    lst = np.empty(count)
    lon_rad = math.radians(longitude)
    for i, ms in enumerate(times):
        t = julian_centuries(float(ms))
        pos = model.position(t)
        ra[i], dec[i] = to_equatorial(
            math.radians(pos.latitude),
            math.radians(pos.longitude),
            math.radians(obliquity(t)),
        )
        lst[i] = local_sidereal(t, lon_rad)

    ha = lst - ra
    lat = math.radians(latitude)
    sin_elev = np.sin(lat) * np.sin(dec) + np.cos(lat) * np.cos(dec) * np.cos(ha)
    elevation = np.arcsin(np.clip(sin_elev, -1.0, 1.0))
    azimuth = np.arctan2(
        -np.cos(dec) * np.sin(ha),
        np.sin(dec) * np.cos(lat) - np.cos(dec) * np.cos(ha) * np.sin(lat),
    )
    return (np.mod(np.degrees(azimuth), 360.0), np.degrees(elevation))


def _format_ymdhms(ms: float) -> str:
    rounded = MS_PER_SECOND * round(ms / MS_PER_SECOND)
    year, month, day = ymd_from_ms(rounded)
    hour, minute, second = hms_from_ms(rounded)
    return f'{year:4d}{month:3d}{day:3d}{hour:3d}{minute:3d}{int(second):3d}'


def generate_ephemeris(params: EphemerisParams, output: TextIO | None = None) -> int:
    """Generate an ephemeris table and write it to a stream.

    If output is None, uses params.output. If both are None, nothing is
    written but the parameters are still validated.

    Parameters:
        params: Body, time range, step, observer and columns.
        output: Text stream for the table.

    Returns:
        Number of data rows (excluding the header).

    Raises:
        ValueError: If the body, times, range, row count or columns are invalid.
    """
    name = parse_body(params.body)
    start_ms = parse_datetime(params.start_time)
    stop_ms = parse_datetime(params.stop_time)
    if start_ms is None or stop_ms is None:
        raise ValueError(f'Invalid start or stop time {params.start_time!r}, {params.stop_time!r}')
    if stop_ms < start_ms:
        raise ValueError('Stop time is before start time')
    step_ms = interval_seconds(params.interval, params.time_unit) * MS_PER_SECOND
    ntimes = int((stop_ms - start_ms) / step_ms) + 1
    if ntimes < MIN_EPHEMERIS_ROWS:
        raise ValueError('Time range too short or interval too large')
    if ntimes > MAX_EPHEMERIS_ROWS:
        raise ValueError(f'Number of time steps exceeds limit of {MAX_EPHEMERIS_ROWS}')

    columns = list(params.columns) or list(DEFAULT_COLUMNS)
    if COL_AZEL in columns and params.observer is None:
        raise ValueError('The azel column requires an observer')

    out = output or params.output
    if out is None:
        return ntimes

    azimuth = elevation = None
    if COL_AZEL in columns:
        azimuth, elevation = horizontal_series(
            name,
            start_ms,
            step_ms,
            ntimes,
            params.observer.latitude_deg,
            params.observer.longitude_deg,
        )

    rec = Record()
    for col in columns:
        rec.append(_HEADERS[col])
    rec.write(out)

    for irec in range(ntimes):
        ms = start_ms + irec * step_ms
        pos = body(name, ms)
        for col in columns:
            if col == COL_YMDHMS:
                rec.append(_format_ymdhms(ms))
            elif col == COL_MS:
                rec.append(f'{ms:20.0f}')
            elif col == COL_ECLIPTIC:
                rec.append(f'{pos.longitude:9.5f}{pos.latitude:10.5f}')
            elif col == COL_DISTANCE:
                rec.append(f'{pos.distance:13.8f}')
            elif col == COL_RADEC:
                rec.append(
                    f'{pos.right_ascension / DEGREES_PER_HOUR_RA:10.6f}{pos.declination:10.5f}'
                )
            elif col == COL_AZEL:
                rec.append(f'{azimuth[irec]:9.4f}{elevation[irec]:10.4f}')
            elif col == COL_PHASE:
                if name == 'moon':
                    moon_phase = phase(ms)
                    field = f'{moon_phase.number:5d} {moon_phase.label or ""}'
                    rec.append(field.ljust(_PHASE_WIDTH))
                else:
                    rec.append(' ' * _PHASE_WIDTH)
        rec.write(out)

    logger.info('Wrote %d ephemeris rows for %s', ntimes, name)
    return ntimes
