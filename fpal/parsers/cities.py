import logging
from typing import NamedTuple
from typing import Iterator, List
from typing import TextIO
from typing import Optional

from fpal.pipelines import City
from fpal.parsers.parsers import (
    parse_int,
    parse_string_not_empty,
    LineParseError,
    ParseError
)

logger = logging.getLogger(__name__)


class CityRecord(NamedTuple):

    name: str
    population: int

    @staticmethod
    def columns() -> List[str]:
        return [
            "name",
            "population",
        ]

    @classmethod
    def from_line(cls, line: str) -> 'CityRecord':
        sline = line.strip().split("\t")
        if len(sline) != len(cls.columns()):
            raise LineParseError(
                "The line had the wrong number of columns. "
                f"Expected {len(cls.columns())} but got {len(sline)}."
            )

        dline = dict(zip(cls.columns(), sline))

        return cls(
            parse_string_not_empty(dline["name"], "name"),
            parse_int(dline["population"], "population"),
        )

    @classmethod
    def from_file(cls, handle: TextIO) -> Iterator['CityRecord']:
        for i, line in enumerate(handle):
            sline = line.strip()

            if sline.startswith("#"):
                logger.debug("Skipping comment on line %d.", i)
                continue
            elif sline == "":
                continue

            try:
                yield cls.from_line(sline)

            except LineParseError as e:
                if hasattr(handle, "name"):
                    filename: Optional[str] = handle.name
                else:
                    filename = None

                raise ParseError(
                    filename,
                    i,
                    e.message
                )
        return

    def as_city(self) -> City:
        return City(self.name, self.population)

    def __str__(self) -> str:
        return "\t".join(str(getattr(self, c)) for c in self.columns())
