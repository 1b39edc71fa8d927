"""Angle normalization, sexagesimal parsing, and sexagesimal formatting."""

from __future__ import annotations

import math
import re

from astro_ephemeris.constants import (
    ARCMIN_PER_DEGREE,
    ARCSEC_PER_DEGREE,
    DEGREES_PER_CIRCLE,
)

TWO_PI = 2.0 * math.pi


def normalize_degrees(angle: float) -> float:
    """Reduce an angle in degrees to [0, 360)."""
    reduced = angle % DEGREES_PER_CIRCLE
    # x % 360 can round up to exactly 360 for tiny negative x.
    return 0.0 if reduced == DEGREES_PER_CIRCLE else reduced


def normalize_radians(angle: float) -> float:
    """Reduce an angle in radians to [0, 2π)."""
    reduced = angle % TWO_PI
    return 0.0 if reduced == TWO_PI else reduced


def signed_radians(angle: float) -> float:
    """Reduce an angle in radians to (-π, π]."""
    reduced = normalize_radians(angle)
    return reduced - TWO_PI if reduced > math.pi else reduced


def parse_angle(string: str) -> float | None:
    """Parse an angle given as decimal or sexagesimal degrees (or hours).

    Accepts one, two, or three numbers separated by blanks or colons, e.g.
    ``"35.05"``, ``"-106 37.2"`` or ``"35:03:00"``. Minutes and seconds must be
    non-negative; a leading minus applies to the whole angle.

    Parameters:
        string: Angle text.

    Returns:
        Angle in the units of the first field, or None on parse failure.
    """
    text = string.strip()
    if not text:
        return None
    parts = [p for p in re.split(r'[\s:]+', text) if p]
    if not 1 <= len(parts) <= 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values[1:]):
        return None
    angle = abs(values[0])
    for scale, value in zip((ARCMIN_PER_DEGREE, ARCSEC_PER_DEGREE), values[1:]):
        angle += value / scale
    return -angle if text.startswith('-') else angle


def format_sexagesimal(value: float, separators: str = '::', ndecimal: int = 1) -> str:
    """Format an angle (degrees or hours) as sign, whole units, minutes, seconds.

    Parameters:
        value: Angle in degrees (or hours for right ascension).
        separators: Two characters placed after the units and the minutes.
        ndecimal: Decimal places for the seconds field.

    Returns:
        Formatted string such as ``"-12:34:56.7"``.
    """
    sep1, sep2 = (separators + '  ')[:2]
    scale = 10**ndecimal
    total = round(abs(value) * ARCSEC_PER_DEGREE * scale)
    whole_secs, frac = divmod(total, scale)
    minutes, secs = divmod(whole_secs, 60)
    units, minutes = divmod(minutes, 60)
    sign = '-' if value < 0 and total > 0 else ''
    sec_text = f'{secs:02d}'
    if ndecimal > 0:
        sec_text += f'.{frac:0{ndecimal}d}'
    return f'{sign}{units:d}{sep1}{minutes:02d}{sep2}{sec_text}'
