from typing import Iterator
from typing import TextIO
from typing import Optional

from fpal.parsers.parsers import parse_int, LineParseError, ParseError


def ints_from_file(handle: TextIO) -> Iterator[int]:
    """ Read one integer per line, skipping blanks and # comments. """

    for i, line in enumerate(handle):
        sline = line.strip()

        if sline.startswith("#") or sline == "":
            continue

        try:
            yield parse_int(sline, "number")

        except LineParseError as e:
            if hasattr(handle, "name"):
                filename: Optional[str] = handle.name
            else:
                filename = None

            raise ParseError(filename, i, e.message)
    return
