import sys
import argparse

from fpal.exceptions import FPParseError
from fpal.parsers.parsers import ParseError
from fpal.parsers.numbers import ints_from_file
from fpal.pipelines import total as total_of


def cli_total(parser):
    parser.add_argument(
        "infile",
        type=argparse.FileType('r'),
        help=(
            "A file with one integer per line. "
            "Use '-' for stdin."
        ),
    )

    parser.add_argument(
        "-o", "--outfile",
        type=argparse.FileType('w'),
        default=sys.stdout,
        help="Output file path. Default stdout.",
    )
    return


def total(args: argparse.Namespace) -> None:
    try:
        numbers = list(ints_from_file(args.infile))
    except ParseError as e:
        raise FPParseError(e)

    print(total_of(numbers), file=args.outfile)
    return
