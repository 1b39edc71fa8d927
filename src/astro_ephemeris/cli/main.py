"""CLI entry point: astro-ephemeris position|events|phase|ephemeris subcommands."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from datetime import datetime, timezone
from typing import NoReturn, cast

from astro_ephemeris.angle_utils import format_sexagesimal
from astro_ephemeris.config import get_default_observer, get_log_level
from astro_ephemeris.constants import DEFAULT_INTERVAL, DEGREES_PER_HOUR_RA, MS_PER_SECOND
from astro_ephemeris.ephemeris import generate_ephemeris
from astro_ephemeris.params import (
    EphemerisParams,
    Observer,
    parse_body,
    parse_column_spec,
    parse_observer,
)
from astro_ephemeris.phase import phase
from astro_ephemeris.positions import SunPosition, body
from astro_ephemeris.time_utils import format_ms, parse_datetime

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or ASTRO_EPHEMERIS_LOG)."""
    logging.basicConfig(
        level=get_log_level(verbose),
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _time_ms(text: str | None) -> float:
    """Parse --time to epoch milliseconds; the current time when omitted.

    Raises:
        ValueError: If the text is not a date/time.
    """
    if not text:
        return datetime.now(timezone.utc).timestamp() * MS_PER_SECOND
    ms = parse_datetime(text)
    if ms is None:
        raise ValueError(f'Invalid time {text!r}')
    return ms


def _observer(tokens: list[str] | None, *, required: bool) -> Observer | None:
    """Resolve --observer tokens, falling back to the environment default observer."""
    if tokens is not None:
        return parse_observer(tokens)
    default = get_default_observer()
    if default is not None:
        logger.debug('Using default observer %r from environment', default)
        return Observer(latitude_deg=default[0], longitude_deg=default[1])
    if required:
        raise ValueError('An observer is required: --observer LAT LON')
    return None


def _position_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print one body's position (position subcommand).

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        ms = _time_ms(args.time)
        observer = _observer(args.observer, required=False)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    pos = body(args.body, ms)
    print(f'body:            {pos.name}')
    print(f'time:            {format_ms(ms)} UTC')
    print(f'longitude:       {pos.longitude:.5f}')
    print(f'latitude:        {pos.latitude:.5f}')
    print(f'distance_au:     {pos.distance:.8f}')
    ra_text = format_sexagesimal(pos.right_ascension / DEGREES_PER_HOUR_RA, 'hm', 2)
    print(f'right_ascension: {pos.right_ascension:.5f} ({ra_text}s)')
    print(f'declination:     {pos.declination:.5f} ({format_sexagesimal(pos.declination)})')
    if observer is not None:
        horizontal = pos.observer(observer.latitude_deg, observer.longitude_deg)
        print(f'azimuth:         {horizontal.azimuth:.4f}')
        print(f'elevation:       {horizontal.elevation:.4f}')
    return 0


def _events_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print rise, transit and set (and Sun twilight) for an observer (events subcommand).

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        ms = _time_ms(args.time)
        observer = cast(Observer, _observer(args.observer, required=True))
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    pos = body(args.body, ms)
    events = pos.events(observer.latitude_deg, observer.longitude_deg)
    print(f'body:    {pos.name}')
    print(f'observer: {observer.latitude_deg:.4f} {observer.longitude_deg:.4f}')
    rows = [('rise', events.rise), ('transit', events.transit), ('set', events.set)]
    if isinstance(pos, SunPosition):
        rows = [('dawn', events.dawn), *rows, ('dusk', events.dusk)]
    for label, value in rows:
        print(f'{label + ":":8s} {format_ms(value)}')
    if any(math.isnan(value) for _, value in rows):
        logger.info('Some events of %s do not occur in the day window', pos.name)
    return 0


def _phase_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print the Moon's phase (phase subcommand).

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        ms = _time_ms(args.time)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    moon_phase = phase(ms)
    print(f'{moon_phase.number} {moon_phase.label or "unknown"}')
    return 0


def _ephemeris_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Run ephemeris generator (ephemeris subcommand).

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        params = EphemerisParams(
            body=args.body,
            start_time=args.start,
            stop_time=args.stop,
            interval=args.interval,
            time_unit=args.time_unit,
            observer=_observer(args.observer, required=False),
            columns=parse_column_spec([str(x) for x in (args.columns or [])]),
        )
        if args.output is not None:
            with open(args.output, 'w') as f:
                generate_ephemeris(params, f)
        else:
            generate_ephemeris(params, sys.stdout)
    except (ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


def _add_common(sub: argparse.ArgumentParser, *, with_body: bool = True) -> None:
    if with_body:
        sub.add_argument(
            '--body',
            type=parse_body,
            required=True,
            help='Body name: sun, moon, mercury ... neptune',
        )
    sub.add_argument(
        '--time',
        type=str,
        default=None,
        help='UTC date/time (e.g. 2020-03-23T19:20Z); default now',
    )
    sub.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')


def main() -> int:
    """Entry point for astro-ephemeris CLI (position | events | phase | ephemeris).

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='astro-ephemeris',
        description='Sun, Moon and planet positions, rise/set/transit times, and Moon phase.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)
    observer_help = 'Observer latitude and longitude (degrees, east-positive; "35 03 00" ok)'

    pos_parser = subparsers.add_parser('position', help='Print a body position')
    _add_common(pos_parser)
    pos_parser.add_argument('--observer', type=str, nargs=2, default=None, help=observer_help)
    pos_parser.set_defaults(func=_position_cmd)

    events_parser = subparsers.add_parser('events', help='Print rise, transit and set times')
    _add_common(events_parser)
    events_parser.add_argument(
        '--observer',
        type=str,
        nargs=2,
        default=None,
        help=observer_help + '; env: ASTRO_EPHEMERIS_LATITUDE, ASTRO_EPHEMERIS_LONGITUDE',
    )
    events_parser.set_defaults(func=_events_cmd)

    phase_parser = subparsers.add_parser('phase', help='Print the Moon phase')
    _add_common(phase_parser, with_body=False)
    phase_parser.set_defaults(func=_phase_cmd)

    ephem_parser = subparsers.add_parser('ephemeris', help='Generate ephemeris table')
    ephem_parser.add_argument(
        '--body', type=parse_body, required=True, help='Body name: sun, moon, mercury ... neptune'
    )
    ephem_parser.add_argument('--start', type=str, required=True, help='Start time (UTC)')
    ephem_parser.add_argument('--stop', type=str, required=True, help='Stop time (UTC)')
    ephem_parser.add_argument(
        '--interval', type=float, default=DEFAULT_INTERVAL, help='Time step in --time-unit'
    )
    ephem_parser.add_argument(
        '--time-unit',
        type=str,
        default='hour',
        choices=['sec', 'min', 'hour', 'day'],
    )
    ephem_parser.add_argument('--observer', type=str, nargs=2, default=None, help=observer_help)
    ephem_parser.add_argument(
        '--columns',
        type=str,
        nargs='*',
        default=None,
        help='Column IDs or names (ymdhms ms ecliptic distance radec azel phase)',
    )
    ephem_parser.add_argument('-o', '--output', type=str, default=None, help='Output file')
    ephem_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    ephem_parser.set_defaults(func=_ephemeris_cmd)

    args = parser.parse_args()
    _configure_logging(verbose=args.verbose)
    return cast(int, args.func(parser, args))


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
