import sys
import argparse

from fpal.pipelines import select_by_suffix

import logging
logger = logging.getLogger(__name__)


def cli_suffix(parser):
    parser.add_argument(
        "infile",
        type=argparse.FileType('r'),
        help=(
            "A file with one file name per line. "
            "Use '-' for stdin."
        ),
    )

    parser.add_argument(
        "-s", "--suffix",
        type=str,
        default=".swift",
        help="Keep names ending with this suffix. Default '.swift'.",
    )

    parser.add_argument(
        "-o", "--outfile",
        type=argparse.FileType('w'),
        default=sys.stdout,
        help="Output file path. Default stdout.",
    )
    return


def suffix(args: argparse.Namespace) -> None:
    names = [l.strip() for l in args.infile if l.strip() != ""]
    selected = select_by_suffix(names, args.suffix)
    logger.debug("Kept %d of %d names.", len(selected), len(names))

    for name in selected:
        print(name, file=args.outfile)
    return
