"""Time scales: epoch milliseconds, Julian Dates, Julian centuries, and calendar helpers.

The position engine works on Julian centuries ``t`` since J2000.0. Calendar
conversion, parsing and formatting are thin wrappers around rms-julian.
"""

from __future__ import annotations

import logging
import math
import re

import julian

from astro_ephemeris.config import get_leapsecs_path
from astro_ephemeris.constants import (
    DAYS_PER_CENTURY,
    DEFAULT_MIN_INTERVAL_SECONDS,
    HOURS_PER_DAY,
    J2000_JD,
    MS_PER_DAY,
    MS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_EPOCH_JD,
    UNIX_EPOCH_TO_J2000_DAYS,
)

logger = logging.getLogger(__name__)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


def julian_date(ms: float) -> float:
    """Return the Julian Date of an epoch-millisecond instant."""
    return ms / MS_PER_DAY + UNIX_EPOCH_JD


def julian_centuries(ms: float) -> float:
    """Return Julian centuries since J2000.0 for an epoch-millisecond instant.

    Parameters:
        ms: Milliseconds since 1970-01-01T00:00Z.

    Returns:
        ``t = (JD - 2451545.0) / 36525``.
    """
    return (julian_date(ms) - J2000_JD) / DAYS_PER_CENTURY


def ms_from_julian_centuries(t: float) -> float:
    """Return epoch milliseconds for Julian centuries since J2000.0 (inverse of julian_centuries)."""
    return (t * DAYS_PER_CENTURY + J2000_JD - UNIX_EPOCH_JD) * MS_PER_DAY


def hours_later(t: float, hours: float) -> float:
    """Shift Julian centuries ``t`` by a number of hours."""
    return t + hours / (HOURS_PER_DAY * DAYS_PER_CENTURY)


def ms_from_day_fraction(t: float, fraction: float) -> float:
    """Return the instant ``fraction`` days after Julian centuries ``t``, in epoch milliseconds.

    Parameters:
        t: Reference instant (for example the start of a search window).
        fraction: Days after the reference; may exceed 1 or be negative.

    Returns:
        Epoch milliseconds.
    """
    return ms_from_julian_centuries(t + fraction / DAYS_PER_CENTURY)


def _ensure_leapsecs() -> None:
    """Load leap seconds for rms-julian if not already loaded.

    Uses the LSK named by JULIAN_LEAPSECS when set and readable; otherwise
    falls back to the kernel bundled with rms-julian.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info('Leap seconds from %s not used (%s); using rms-julian bundled LSK.', path, e)
    julian.load_lsk()
    _leapsecs_loaded = True


def day_sec_from_ms(ms: float) -> tuple[int, float]:
    """Split an epoch-millisecond instant into (day since 2000-01-01, seconds within day).

    Leap seconds are ignored: every day is 86400 s long, like the epoch scale.
    """
    day_count = math.floor(ms / MS_PER_DAY)
    sec = (ms - day_count * MS_PER_DAY) / MS_PER_SECOND
    return (int(day_count) - UNIX_EPOCH_TO_J2000_DAYS, sec)


def ymd_from_ms(ms: float) -> tuple[int, int, int]:
    """Return the UTC calendar date (year, month, day) of an epoch-millisecond instant."""
    day, _ = day_sec_from_ms(ms)
    year, month, mday = julian.ymd_from_day(day)
    return (int(year), int(month), int(mday))


def hms_from_ms(ms: float) -> tuple[int, int, float]:
    """Return the UTC time of day (hour, minute, second) of an epoch-millisecond instant."""
    _, sec = day_sec_from_ms(ms)
    hour, minute, second = julian.hms_from_sec(sec)
    return (int(hour), int(minute), float(second))


def format_ms(ms: float) -> str:
    """Format an epoch-millisecond instant as ``YYYY-MM-DD HH:MM:SS`` (UTC).

    Non-finite instants (events that do not occur) format as ``--``.
    """
    if not math.isfinite(ms):
        return '--'
    rounded = MS_PER_SECOND * round(ms / MS_PER_SECOND)
    year, month, day = ymd_from_ms(rounded)
    hour, minute, second = hms_from_ms(rounded)
    return f'{year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{int(second):02d}'


def parse_datetime(string: str) -> float | None:
    """Parse a UTC date/time string to epoch milliseconds.

    Parameters:
        string: Date/time string in any form rms-julian accepts; a trailing
            ``Z`` and the ``YYYY HH:MM:SS`` shorthand are also accepted.

    Returns:
        Epoch milliseconds, or None on parse failure.
    """
    _ensure_leapsecs()
    stripped = string.strip()
    candidate_strings = [stripped]
    if stripped.endswith(('Z', 'z')):
        # rms-julian does not parse the ISO "Z" suffix; the value is UTC either way.
        candidate_strings.append(stripped[:-1])
    year_hms_match = re.fullmatch(r'(\d{4})\s+(\d{1,2}:\d{2}:\d{2})', stripped)
    if year_hms_match is not None:
        year, hms = year_hms_match.groups()
        candidate_strings.append(f'{year}-01-01 {hms}')
    for candidate in candidate_strings:
        try:
            result = julian.day_sec_from_string(candidate)
        except (ValueError, TypeError, LookupError, OSError):
            continue
        day, sec = int(result[0]), float(result[1])
        return (day + UNIX_EPOCH_TO_J2000_DAYS) * MS_PER_DAY + sec * MS_PER_SECOND
    return None


def interval_seconds(
    interval: float,
    time_unit: str,
    *,
    min_seconds: float = DEFAULT_MIN_INTERVAL_SECONDS,
) -> float:
    """Convert interval and time_unit to seconds.

    Parameters:
        interval: Numeric interval value.
        time_unit: One of 'sec', 'min', 'hour', 'day' (case-insensitive, first 4 chars).
        min_seconds: Minimum returned value.

    Returns:
        Interval in seconds, at least min_seconds.

    Raises:
        ValueError: If time_unit is not recognized.
    """
    u = time_unit.strip().lower()[:4]
    if u in ('sec', 'seco'):
        dsec = abs(interval)
    elif u in ('min', 'minu'):
        dsec = abs(interval) * SECONDS_PER_MINUTE
    elif u == 'hour':
        dsec = abs(interval) * SECONDS_PER_HOUR
    elif u == 'day':
        dsec = abs(interval) * SECONDS_PER_DAY
    else:
        raise ValueError(f'Invalid time_unit {time_unit!r}; expected one of sec, min, hour, day')
    return max(dsec, min_seconds)
