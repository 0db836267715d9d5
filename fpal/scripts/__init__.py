import sys
import argparse
import logging

from fpal.exceptions import FPException, ECode
from fpal.scripts.suffix import suffix, cli_suffix
from fpal.scripts.increment import increment, cli_increment
from fpal.scripts.total import total, cli_total
from fpal.scripts.cities import cities, cli_cities
from fpal.scripts.add import add, cli_add

logging.basicConfig(level=logging.ERROR)


def cli(prog, args):

    parser = argparse.ArgumentParser(
        prog=prog,
        description="Filter, map and reduce small datasets."
    )

    subparsers = parser.add_subparsers(dest='subparser_name')

    suffix_subparser = subparsers.add_parser(
        "suffix",
        help="Select the file names ending with a suffix."
    )

    cli_suffix(suffix_subparser)

    increment_subparser = subparsers.add_parser(
        "increment",
        help="Add a step to each number."
    )

    cli_increment(increment_subparser)

    total_subparser = subparsers.add_parser(
        "sum",
        help="Sum a list of numbers."
    )

    cli_total(total_subparser)

    cities_subparser = subparsers.add_parser(
        "cities",
        help="Report the populations of the large cities."
    )

    cli_cities(cities_subparser)

    add_subparser = subparsers.add_parser(
        "add",
        help="Add two numbers that may be missing."
    )

    cli_add(add_subparser)

    parsed = parser.parse_args(args)

    if parsed.subparser_name is None:
        parser.print_help()
        sys.exit(0)

    return parsed


def main():
    args = cli(prog=sys.argv[0], args=sys.argv[1:])
    try:
        if args.subparser_name == "suffix":
            suffix(args)
        elif args.subparser_name == "increment":
            increment(args)
        elif args.subparser_name == "sum":
            total(args)
        elif args.subparser_name == "cities":
            cities(args)
        elif args.subparser_name == "add":
            add(args)
        else:
            raise ValueError("I shouldn't reach this point ever")
    except FPException as e:
        print(f"Error: {str(e)}")
        sys.exit(e.ecode)
    except BrokenPipeError:
        # Pipes get closed and that's normal
        sys.exit(0)
    except KeyboardInterrupt:
        print("Received keyboard interrupt. Exiting.", file=sys.stderr)
        sys.exit(ECode.SIGINT)
    except EnvironmentError as e:
        print((
            "Encountered a system error.\n"
            "We can't control these, and they're usually related to your OS.\n"
            "Try running again."
        ), file=sys.stderr)
        raise e
    except Exception as e:
        print((
            "I'm so sorry, but we've encountered an unexpected error.\n"
            "This shouldn't happen, so please file a bug report with the "
            "authors.\nWe will be extremely grateful!\n\n"
        ), file=sys.stderr)
        raise e
    return
