import sys
import argparse

from fpal.exceptions import FPParseError
from fpal.parsers.parsers import ParseError
from fpal.parsers.numbers import ints_from_file
from fpal.pipelines import increment_all


def cli_increment(parser):
    parser.add_argument(
        "infile",
        type=argparse.FileType('r'),
        help=(
            "A file with one integer per line. "
            "Use '-' for stdin."
        ),
    )

    parser.add_argument(
        "-n", "--step",
        type=int,
        default=1,
        help="How much to add to each number. Default 1.",
    )

    parser.add_argument(
        "-o", "--outfile",
        type=argparse.FileType('w'),
        default=sys.stdout,
        help="Output file path. Default stdout.",
    )
    return


def increment(args: argparse.Namespace) -> None:
    try:
        numbers = list(ints_from_file(args.infile))
    except ParseError as e:
        raise FPParseError(e)

    for number in increment_all(numbers, args.step):
        print(number, file=args.outfile)
    return
