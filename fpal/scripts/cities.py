import sys
import argparse

from typing import List

from fpal.exceptions import FPParseError
from fpal.parsers.parsers import ParseError
from fpal.parsers.cities import CityRecord
from fpal.pipelines import City, DEFAULT_CITIES, city_report

import logging
logger = logging.getLogger(__name__)


def cli_cities(parser):
    parser.add_argument(
        "infile",
        type=argparse.FileType('r'),
        nargs="?",
        default=None,
        help=(
            "Tab separated file of city names and populations "
            "(in thousands). Use '-' for stdin. "
            "Without it the built-in sample cities are used."
        ),
    )

    parser.add_argument(
        "-m", "--min-population",
        type=int,
        default=1000,
        help=(
            "Only report cities with more than this population "
            "(in thousands). Default 1000."
        ),
    )

    parser.add_argument(
        "--header",
        type=str,
        default="City: Population",
        help="The first line of the report.",
    )

    parser.add_argument(
        "-o", "--outfile",
        type=argparse.FileType('w'),
        default=sys.stdout,
        help="Output file path. Default stdout.",
    )
    return


def cities(args: argparse.Namespace) -> None:
    if args.infile is None:
        logger.debug("No input given, using the sample cities.")
        records: List[City] = list(DEFAULT_CITIES)
    else:
        try:
            records = [r.as_city() for r in CityRecord.from_file(args.infile)]
        except ParseError as e:
            raise FPParseError(e)

    report = city_report(records, args.min_population, args.header)
    print(report, file=args.outfile)
    return
