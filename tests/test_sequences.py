import pytest

from fpal import sequences


def is_even(x):
    return x % 2 == 0


@pytest.mark.parametrize("seq", [[], [1], [1, 2, 3, 4, 5, 6], [2, 4, 6], [1, 3]])
def test_filter_keeps_matching_elements_in_order(seq):
    result = sequences.filter(seq, is_even)

    assert all(is_even(x) for x in result)
    # Subsequence check: walking the input finds every result element in turn.
    it = iter(seq)
    assert all(any(x == y for y in it) for x in result)
    assert len(result) == sum(1 for x in seq if is_even(x))


def test_filter_does_not_mutate_input():
    seq = [1, 2, 3, 4]
    result = sequences.filter(seq, is_even)

    assert seq == [1, 2, 3, 4]
    assert result is not seq


def test_filter_calls_predicate_once_per_element():
    calls = []

    def pred(x):
        calls.append(x)
        return True

    sequences.filter(["a", "b", "c"], pred)
    assert calls == ["a", "b", "c"]


def test_filter_swift_files():
    files = ["README.md", "HelloWorld.swift", "FlappyBird.swift"]
    result = sequences.filter(files, lambda f: f.endswith(".swift"))
    assert result == ["HelloWorld.swift", "FlappyBird.swift"]


def test_map_preserves_length_and_order():
    seq = [1, 2, 3, 4, 5]
    result = sequences.map(seq, lambda x: x * 10)

    assert len(result) == len(seq)
    assert all(result[i] == seq[i] * 10 for i in range(len(seq)))


def test_map_can_change_type():
    assert sequences.map([1, 22, 333], str) == ["1", "22", "333"]


def test_map_empty():
    assert sequences.map([], lambda x: x + 1) == []


def test_map_works_on_tuples():
    assert sequences.map((1, 2), lambda x: -x) == [-1, -2]


def test_reduce_sum():
    assert sequences.reduce([1, 2, 3, 4, 5], 0, lambda a, x: a + x) == 15


def test_reduce_empty_returns_initial_unchanged():
    initial = object()
    assert sequences.reduce([], initial, lambda a, x: x) is initial


def test_reduce_folds_left_to_right():
    result = sequences.reduce(["a", "b", "c"], "", lambda a, x: a + x)
    assert result == "abc"

    result = sequences.reduce([1, 2, 3], 100, lambda a, x: a - x)
    assert result == 94
