"""
Command line entry point for webmercator-dist

Prints, for latitudes from the equator to the pole, how far the spherical Web
Mercator northing is from the ellipsoidal one, and how much ground distance that
offset amounts to.

    webmercator-dist 10
"""

__all__ = ['main']

import argparse
import sys
from typing import List, Optional

from webmercator_dist._const import MAX_LATITUDE_DEGREES
from webmercator_dist.scan import format_sample, scan_distortion, validate_increment

PROG = 'webmercator-dist'
USAGE = f'Usage: {PROG} <increment>'


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage='%(prog)s <increment>',
        description=(
            'Compare the spherical (Web Mercator) projection with the ellipsoidal '
            'Mercator projection from the equator to the pole.'
        ),
    )
    parser.add_argument(
        'increment',
        help=f'Latitude step in degrees, within (0, {MAX_LATITUDE_DEGREES:g}]',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else argv

    # Only the first argument is read; anything dash-prefixed that parses as a
    # float (e.g. -5e1, -inf) is an increment, not an option
    try:
        increment = float(argv[0])
    except (IndexError, ValueError):
        if argv and argv[0] in ('-h', '--help'):
            _build_parser().print_help()
        else:
            print(USAGE)
        return

    if not validate_increment(increment):
        print(f'Increment should be in (0.0, {MAX_LATITUDE_DEGREES}].')
        return

    for sample in scan_distortion(increment):
        print(format_sample(sample))


if __name__ == '__main__':
    main()
