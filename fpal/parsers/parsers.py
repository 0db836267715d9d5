#!/usr/bin/env python3

from typing import Optional
from typing import Callable
from typing import TypeVar


T = TypeVar("T")


class ParseError(Exception):
    """ Some aspect of parsing failed. """

    def __init__(
        self,
        filename: Optional[str],
        line: Optional[int],
        message: str
    ):
        self.filename = filename
        self.line = line
        self.message = message
        return

    def __str__(self) -> str:
        return (
            f"Could not parse line {self.line} of {self.filename}. "
            f"{self.message}"
        )


class LineParseError(Exception):

    def __init__(self, message: str):
        self.message = message
        return


def parse_or_none(
    field: str,
    field_name: str,
    none_value: str,
    fn: Callable[[str, str], T],
) -> Optional[T]:
    """ If the value is the same as the none value, will return None.
    Otherwise will attempt to run the fn with field and field name as the
    first and 2nd arguments.
    """

    if field == none_value:
        return None

    try:
        val = fn(field, field_name)
    except LineParseError as e:
        msg = e.message + (
            f"\nThe value may also be '{none_value}', which will be "
            "interpreted as None."
        )
        raise LineParseError(msg)

    return val


def parse_int(field: str, field_name: str) -> int:
    """ Parse a string as an integer, raising a custom error if fails. """

    try:
        return int(field)
    except ValueError:
        raise LineParseError(
            f"Could not parse value in {field_name} column as an integer. "
            f"The offending value was: '{field}'."
        )


def parse_float(field: str, field_name: str) -> float:
    """ Parse a string as a float, raising a custom error if fails. """

    try:
        return float(field)
    except ValueError:
        raise LineParseError(
            f"Could not parse value in {field_name} column as a float. "
            f"The offending value was: '{field}'."
        )


def parse_string_not_empty(field: str, field_name: str) -> str:
    """ """

    if field.strip() == "":
        raise LineParseError(f"The value in column: '{field_name}' was empty.")
    else:
        return field
