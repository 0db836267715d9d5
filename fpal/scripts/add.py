import sys
import argparse

from fpal.exceptions import FPCLIError
from fpal.higher import add_optionals, fmap, or_else
from fpal.parsers.parsers import parse_or_none, parse_int, LineParseError


def cli_add(parser):
    parser.add_argument(
        "x",
        type=str,
        help="The first integer. Use '.' for a missing value.",
    )

    parser.add_argument(
        "y",
        type=str,
        help="The second integer. Use '.' for a missing value.",
    )

    parser.add_argument(
        "-o", "--outfile",
        type=argparse.FileType('w'),
        default=sys.stdout,
        help="Output file path. Default stdout.",
    )
    return


def add(args: argparse.Namespace) -> None:
    try:
        x = parse_or_none(args.x, "x", ".", parse_int)
        y = parse_or_none(args.y, "y", ".", parse_int)
    except LineParseError as e:
        raise FPCLIError(e.message)

    result = add_optionals(x, y)
    print(or_else(".", fmap(str, result)), file=args.outfile)
    return
