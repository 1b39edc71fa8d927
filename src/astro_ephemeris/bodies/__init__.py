"""Body position models (Sun, Moon, Mercury through Neptune)."""

import logging

from astro_ephemeris.bodies.base import BodyModel, EclipticPosition, obliquity
from astro_ephemeris.bodies.jupiter import JUPITER
from astro_ephemeris.bodies.mars import MARS
from astro_ephemeris.bodies.mercury import MERCURY
from astro_ephemeris.bodies.moon import MOON
from astro_ephemeris.bodies.neptune import NEPTUNE
from astro_ephemeris.bodies.saturn import SATURN
from astro_ephemeris.bodies.sun import SUN
from astro_ephemeris.bodies.uranus import URANUS
from astro_ephemeris.bodies.venus import VENUS

logger = logging.getLogger(__name__)

_BODY_MODELS: dict[str, BodyModel] = {
    model.name: model
    for model in (SUN, MOON, MERCURY, VENUS, MARS, JUPITER, SATURN, URANUS, NEPTUNE)
}


def get_model(name: str) -> BodyModel:
    """Return the position model for a body name (case-insensitive).

    Parameters:
        name: Body name, e.g. ``'Mars'``.

    Returns:
        The body's model.

    Raises:
        ValueError: If the name is not a known body.
    """
    model = _BODY_MODELS.get(name.strip().lower())
    if model is None:
        logger.warning('Unknown body name %r', name)
        raise ValueError(f'Unknown body {name!r}; expected one of {", ".join(_BODY_MODELS)}')
    return model


__all__ = [
    'BodyModel',
    'EclipticPosition',
    'JUPITER',
    'MARS',
    'MERCURY',
    'MOON',
    'NEPTUNE',
    'SATURN',
    'SUN',
    'URANUS',
    'VENUS',
    'get_model',
    'obliquity',
]
