"""Parameter parsing for positions, events and ephemeris tables (CLI and API)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TextIO

from astro_ephemeris.angle_utils import parse_angle
from astro_ephemeris.constants import BODY_NAMES, DEFAULT_INTERVAL

logger = logging.getLogger(__name__)

# Ephemeris column IDs
COL_YMDHMS = 1
COL_MS = 2
COL_ECLIPTIC = 3
COL_DISTANCE = 4
COL_RADEC = 5
COL_AZEL = 6
COL_PHASE = 7

# Case-insensitive name -> column ID for --columns
COL_NAME_TO_ID: dict[str, int] = {
    'ymdhms': COL_YMDHMS,
    'ms': COL_MS,
    'ecliptic': COL_ECLIPTIC,
    'distance': COL_DISTANCE,
    'radec': COL_RADEC,
    'azel': COL_AZEL,
    'phase': COL_PHASE,
}

DEFAULT_COLUMNS = (COL_YMDHMS, COL_ECLIPTIC, COL_DISTANCE, COL_RADEC)


@dataclass
class Observer:
    """Geographic observer.

    Parameters:
        latitude_deg: Latitude in degrees, north-positive.
        longitude_deg: Longitude in degrees, east-positive.
    """

    latitude_deg: float
    longitude_deg: float


@dataclass
class EphemerisParams:
    """Parameters for ephemeris table generation."""

    body: str
    start_time: str
    stop_time: str
    interval: float = DEFAULT_INTERVAL
    time_unit: str = 'hour'
    observer: Observer | None = None
    columns: list[int] = field(default_factory=list)
    output: TextIO | None = None


def parse_body(value: str) -> str:
    """Parse a body name (case-insensitive).

    Parameters:
        value: Body name, e.g. ``Sun`` or ``jupiter``.

    Returns:
        Lowercase body name.

    Raises:
        ValueError: If value is not a known body.
    """
    key = value.strip().lower()
    if key in BODY_NAMES:
        return key
    raise ValueError(f'Unknown body {value!r}; use one of: ' + ', '.join(BODY_NAMES))


def parse_observer(tokens: list[str]) -> Observer:
    """Parse ``latitude longitude`` tokens into an Observer.

    Each token is decimal degrees or sexagesimal degrees (``"35 03 00"`` or
    ``"35:03:00"``). Longitude is east-positive.

    Parameters:
        tokens: Two angle tokens.

    Returns:
        Observer with validated coordinates.

    Raises:
        ValueError: If the tokens are not two angles or are out of range.
    """
    normalized = [tok.strip() for tok in tokens if tok.strip()]
    if len(normalized) != 2:
        raise ValueError('Observer requires two values: latitude longitude')
    latitude = parse_angle(normalized[0])
    if latitude is None:
        raise ValueError(f'Invalid observer latitude {normalized[0]!r}')
    longitude = parse_angle(normalized[1])
    if longitude is None:
        raise ValueError(f'Invalid observer longitude {normalized[1]!r}')
    if not -90.0 <= latitude <= 90.0:
        raise ValueError(f'Observer latitude {normalized[0]!r} is outside [-90, 90]')
    if not -360.0 <= longitude <= 360.0:
        raise ValueError(f'Observer longitude {normalized[1]!r} is outside [-360, 360]')
    return Observer(latitude_deg=latitude, longitude_deg=longitude)


def parse_column_spec(tokens: list[str]) -> list[int]:
    """Convert column tokens to column IDs (COL_*).

    Parameters:
        tokens: Decimal IDs or case-insensitive names (e.g. ymdhms, radec);
            a token may hold several comma-separated entries.

    Returns:
        List of column IDs in the given order, without duplicates.

    Raises:
        ValueError: If a token is neither a known name nor a known ID.
    """
    valid_ids = set(COL_NAME_TO_ID.values())
    out: list[int] = []
    for token in tokens:
        for s in token.replace(',', ' ').split():
            key = s.lower()
            if key in COL_NAME_TO_ID:
                col = COL_NAME_TO_ID[key]
            else:
                try:
                    col = int(s)
                except ValueError:
                    raise ValueError(
                        f'Unknown column {s!r}; use an ID (1-7) or one of: '
                        + ', '.join(COL_NAME_TO_ID)
                    ) from None
                if col not in valid_ids:
                    raise ValueError(f'Column ID {col} out of range 1-7')
            if col in out:
                logger.warning('Duplicate column %r ignored', s)
                continue
            out.append(col)
    return out
