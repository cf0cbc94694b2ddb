import pandas as pd

import suite
from seqkit import take, drop, first, last, move_element, InvalidArgument

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

letters = ['a', 'b', 'c', 'd']


# --- take / drop ---

@test("take returns the first n values")
def test_take_basic():
    assert_that(take(letters, 2) == ['a', 'b'], "first two")
    assert_that(take(letters, 10) == letters, "n past the end takes everything")
    assert_that(take(letters, 0) == [], "zero takes nothing")


@test("take with a step")
def test_take_step():
    data = list(range(10))
    assert_that(take(data, 3, step=2) == [0, 2, 4], "every second value")
    assert_that(take(data, 5, step=3) == [0, 3, 6, 9], "stops at the end of the list")


@test("take on a map takes values in iteration order")
def test_take_map():
    assert_that(take({'x': 1, 'y': 2, 'z': 3}, 2) == [1, 2], "keys are dropped")


@test("take rejects bad counts")
def test_take_invalid():
    assert_raises(InvalidArgument, take, letters, -1)
    assert_raises(InvalidArgument, take, letters, 2, step=0)
    assert_raises(InvalidArgument, take, letters, 1.5)


@test("drop skips the first n values")
def test_drop_basic():
    assert_that(drop(letters, 1) == ['b', 'c', 'd'], "first one dropped")
    assert_that(drop(letters, 9) == [], "dropping past the end leaves nothing")
    assert_that(drop(letters, 0) == letters, "dropping zero keeps everything")


@test("drop keeps the remaining keys of a map")
def test_drop_map():
    result = drop({'x': 1, 'y': 2, 'z': 3}, 1)
    assert_that(result == {'y': 2, 'z': 3}, f"got {result}")

    series = drop(pd.Series([1, 2, 3], index=['p', 'q', 'r']), 2)
    assert_that(list(series.index) == ['r'], "series keep their labels")


@test("drop rejects negative counts")
def test_drop_invalid():
    assert_raises(InvalidArgument, drop, letters, -2)


# --- first / last ---

@test("first and last read the ends of a list")
def test_first_last():
    assert_that(first(letters) == 'a', "first value")
    assert_that(last(letters) == 'd', "last value")
    assert_that(first([None, 1]) is None, "a None first value is still a value")


@test("first prefers key 0 on a map")
def test_first_map():
    assert_that(first({'x': 1, 'y': 2}) == 1, "first in iteration order")
    assert_that(first({3: 'a', 0: 'b'}) == 'b', "key 0 wins when present")
    assert_that(last({3: 'a', 0: 'b'}) == 'b', "last in iteration order")


@test("first and last fail on empty input")
def test_first_last_empty():
    error = assert_raises(InvalidArgument, first, [])
    assert_that("first item of an empty list" in str(error), "message names the operation")
    assert_raises(InvalidArgument, last, {})
    assert_that(isinstance(error, ValueError), "InvalidArgument is a ValueError")


# --- move_element ---

@test("move_element moves forward and backward")
def test_move_element():
    assert_that(move_element(letters, 1, 3) == ['a', 'c', 'd', 'b'], "forward move shifts the gap left")
    assert_that(move_element(letters, 3, 0) == ['d', 'a', 'b', 'c'], "backward move shifts the gap right")
    assert_that(move_element(letters, 0, 1) == ['b', 'a', 'c', 'd'], "neighbours swap")


@test("move_element to the same index is a no-op")
def test_move_element_same():
    for i in range(len(letters)):
        result = move_element(letters, i, i)
        assert_that(result == letters, f"index {i} should leave the list unchanged")
        assert_that(result is not letters, "a new list is still returned")


@test("move_element does not mutate its input")
def test_move_element_copy():
    data = [1, 2, 3]
    move_element(data, 0, 2)
    assert_that(data == [1, 2, 3], "input should be untouched")


@test("move_element keeps the relative order of untouched values")
def test_move_element_order():
    data = list(range(8))
    for src in range(8):
        for dst in range(8):
            result = move_element(data, src, dst)
            assert_that(result[dst] == src, "moved value lands at the target")
            rest = [v for v in result if v != src]
            assert_that(rest == [v for v in data if v != src], "everything else keeps its order")


@test("move_element accepts tuples and dense mappings")
def test_move_element_shapes():
    assert_that(move_element(('x', 'y', 'z'), 2, 0) == ['z', 'x', 'y'], "tuples give lists")
    assert_that(move_element({0: 'x', 1: 'y'}, 0, 1) == ['y', 'x'], "dense mappings are lists")


@test("move_element rejects maps and bad positions")
def test_move_element_invalid():
    assert_raises(InvalidArgument, move_element, {'a': 1, 'b': 2}, 0, 1)
    assert_raises(InvalidArgument, move_element, {1: 'a', 0: 'b'}, 0, 1)
    assert_raises(InvalidArgument, move_element, ['a', 'b', 'c'], 5, 0)
    assert_raises(InvalidArgument, move_element, ['a', 'b', 'c'], 0, 3)
    assert_raises(InvalidArgument, move_element, ['a', 'b', 'c'], -1, 0)
    assert_raises(InvalidArgument, move_element, ['a', 'b'], True, 0)
    assert_raises(InvalidArgument, move_element, [], 0, 0)
    assert_raises(InvalidArgument, move_element, 'abc', 0, 1)
    assert_raises(InvalidArgument, move_element, {3, 1, 2}, 0, 1)
    assert_raises(InvalidArgument, move_element, frozenset(['a', 'b']), 0, 1)


if __name__ == "__main__":
    suite.main("seqkit slicing test suite")
