""" Generic filter, map and reduce over ordered sequences.

These mirror the builtins but always return new lists (or the folded
value), and never touch the input sequence.
"""

from typing import TypeVar
from typing import Callable
from typing import Sequence, List


T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")


def filter(seq: Sequence[T], pred: Callable[[T], bool]) -> List[T]:
    """ Keep the elements where pred is true, in their original order. """

    result: List[T] = []
    for element in seq:
        if pred(element):
            result.append(element)
    return result


def map(seq: Sequence[T], function: Callable[[T], U]) -> List[U]:
    """ Apply function to every element, preserving order and length. """

    result: List[U] = []
    for element in seq:
        result.append(function(element))
    return result


def reduce(
    seq: Sequence[T],
    initial: A,
    combine: Callable[[A, T], A],
) -> A:
    """ Left fold. An empty sequence gives back initial itself. """

    acc = initial
    for element in seq:
        acc = combine(acc, element)
    return acc
