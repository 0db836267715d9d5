#!/usr/bin/env python3

import logging
from typing import NamedTuple
from typing import Callable
from typing import Sequence, List

from fpal.higher import Number
from fpal import sequences

logger = logging.getLogger(__name__)


EXAMPLE_FILES = ["README.md", "HelloWorld.swift", "FlappyBird.swift"]


class City(NamedTuple):

    name: str
    # Measured in thousands of inhabitants.
    population: int

    def scale_population(self, factor: int = 1000) -> "City":
        return City(self.name, self.population * factor)

    def __str__(self) -> str:
        return f"{self.name}: {self.population}"


DEFAULT_CITIES = [
    City("Orlando", 262),
    City("Boston", 4180),
    City("New York City", 8550),
    City("Berlin", 3562),
]


def has_suffix(suffix: str) -> Callable[[str], bool]:
    def pred(name: str) -> bool:
        return name.endswith(suffix)
    return pred


def select_by_suffix(
    files: Sequence[str],
    suffix: str = ".swift"
) -> List[str]:
    return sequences.filter(files, has_suffix(suffix))


def increment_all(numbers: Sequence[int], step: int = 1) -> List[int]:
    return sequences.map(numbers, lambda x: x + step)


def total(numbers: Sequence[Number]) -> Number:
    return sequences.reduce(numbers, 0, lambda acc, x: acc + x)


def city_report(
    cities: Sequence[City],
    min_population: int = 1000,
    header: str = "City: Population",
) -> str:
    """ Summarise the cities bigger than min_population (in 1000's).

    Each selected city gets one line with its population scaled to
    actual inhabitants, in the same order as the input.
    """

    big = sequences.filter(cities, lambda c: c.population > min_population)
    logger.debug(
        "Selected %d of %d cities above %d.",
        len(big), len(cities), min_population
    )

    scaled = sequences.map(big, lambda c: c.scale_population())
    return sequences.reduce(
        scaled,
        header,
        lambda result, c: result + "\n" + str(c)
    )
