"""Moon synodic phase from the calendar date."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from astro_ephemeris.time_utils import ymd_from_ms

logger = logging.getLogger(__name__)

SYNODIC_DAYS = 30

# (first day, last day, label) over the 0..29 phase day.
_PHASE_LABELS = (
    (0, 0, 'new-moon'),
    (1, 7, 'waxing-crescent'),
    (8, 8, 'first-quarter'),
    (9, 14, 'waxing-gibbous'),
    (15, 15, 'full-moon'),
    (16, 21, 'waning-gibbous'),
    (22, 22, 'last-quarter'),
    (23, 29, 'waning-crescent'),
)


@dataclass(frozen=True)
class MoonPhase:
    """Phase day (0 = new moon, 15 = full moon) and its label."""

    number: int
    label: str | None

    @property
    def string(self) -> str | None:
        """Alias of ``label``."""
        return self.label


def phase_number(ms: float) -> int:
    """Return the Moon's phase day 0..29 for the UTC calendar date of ``ms``.

    A closed-form approximation good to about a day: the year's position in
    the 19-year Metonic cycle sets the epact, to which month and day are added.
    """
    year, month, day = ymd_from_ms(ms)
    r = year % 100 % 19
    if r > 9:
        r -= 19
    r = (r * 11) % 30 + month + day
    if month < 3:
        r += 2
    r -= 4 if year < 2000 else 8.3
    return int(math.floor(r + 0.5)) % SYNODIC_DAYS


def phase_label(number: int) -> str | None:
    """Return the label for a phase day, or None (with a warning) for an unmapped value."""
    for first, last, label in _PHASE_LABELS:
        if first <= number <= last:
            return label
    logger.warning('Phase number %r has no label', number)
    return None


def phase(ms: float) -> MoonPhase:
    """Return the Moon's phase for an epoch-millisecond instant."""
    number = phase_number(ms)
    return MoonPhase(number=number, label=phase_label(number))
