"""Configuration: leap-second kernel, default observer, and log level from environment."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

LEAPSECS_ENV = 'JULIAN_LEAPSECS'
LATITUDE_ENV = 'ASTRO_EPHEMERIS_LATITUDE'
LONGITUDE_ENV = 'ASTRO_EPHEMERIS_LONGITUDE'
LOG_LEVEL_ENV = 'ASTRO_EPHEMERIS_LOG'

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian, if configured.

    Returns:
        Path string from JULIAN_LEAPSECS, or None to use the kernel bundled
        with rms-julian.
    """
    path = os.environ.get(LEAPSECS_ENV, '').strip()
    return path or None


def get_default_observer() -> tuple[float, float] | None:
    """Return the default observer (latitude, longitude) in degrees.

    Both ASTRO_EPHEMERIS_LATITUDE and ASTRO_EPHEMERIS_LONGITUDE must be set to
    numbers; otherwise there is no default observer.

    Returns:
        (latitude_deg, longitude_deg) east-positive, or None.
    """
    lat_text = os.environ.get(LATITUDE_ENV, '').strip()
    lon_text = os.environ.get(LONGITUDE_ENV, '').strip()
    if not lat_text or not lon_text:
        return None
    try:
        return (float(lat_text), float(lon_text))
    except ValueError:
        logger.warning(
            'Ignoring default observer %s=%r, %s=%r (not numeric)',
            LATITUDE_ENV,
            lat_text,
            LONGITUDE_ENV,
            lon_text,
        )
        return None


def get_log_level(verbose: bool = False) -> int:
    """Return the CLI log level: ASTRO_EPHEMERIS_LOG wins, then --verbose, then WARNING."""
    env_level = os.environ.get(LOG_LEVEL_ENV, '').strip().upper()
    if env_level in _LOG_LEVELS:
        return int(getattr(logging, env_level))
    return logging.DEBUG if verbose else logging.WARNING
