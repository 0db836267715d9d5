""" Some higher order functions for dealing with optional values. """

from typing import TypeVar
from typing import Optional
from typing import Callable
from typing import Union


T = TypeVar("T")
U = TypeVar("U")
X = TypeVar("X")
Y = TypeVar("Y")
Z = TypeVar("Z")

Number = Union[int, float]


def identity(x: T) -> T:
    return x


def fmap(function: Callable[[T], U], option: Optional[T]) -> Optional[U]:
    if option is None:
        return None
    else:
        return function(option)


def applicative(
    function: Callable[[T], Optional[U]],
    option: Optional[T],
) -> Optional[U]:
    """ Same as fmap except for the type signature. """
    if option is None:
        return None
    else:
        return function(option)


def or_else(default: U, option: Optional[T]) -> Union[T, U]:
    """ Replaces None with some default value. """
    if option is None:
        return default
    else:
        return option


def chain_optional(
    a: Optional[X],
    b: Optional[Y],
    combine: Callable[[X, Y], Z],
) -> Optional[Z]:
    """ Combine two optional values, giving None if either is missing.

    combine is only called when both values are present.
    Falsy values like 0 or "" count as present.
    """

    return applicative(lambda x: fmap(lambda y: combine(x, y), b), a)


def add_optionals(
    x: Optional[Number],
    y: Optional[Number]
) -> Optional[Number]:
    return chain_optional(x, y, lambda i, j: i + j)
