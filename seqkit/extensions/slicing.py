from __future__ import annotations
from collections.abc import Set
from ..types import *
from ..types import _MISSING
from ..collection import (
    is_collection, is_list, is_int_key, values_of, keyed_items, rebuild
)
from .core import get_by_key


def _require_count(value: Any, name: str) -> None:
    if not is_int_key(value) or value < 0:
        raise InvalidArgument(f"{name} should be a non-negative integer, got {value!r}")


def take(collection: Any, n: int, step: int = 1) -> List[Any]:
    """first n values, taking every step-th one"""
    _require_count(n, "n")
    if not is_int_key(step) or step < 1:
        raise InvalidArgument(f"step should be a positive integer, got {step!r}")
    return values_of(collection)[:n * step:step]


def drop(collection: Any, n: int) -> Any:
    """drops the first n values. keyed collections keep the keys of what remains"""
    _require_count(n, "n")
    return rebuild(collection, keyed_items(collection)[n:], is_list(collection))


def first(collection: Any) -> Any:
    """the value at key 0 when there is one, otherwise the first value in iteration order"""
    items = keyed_items(collection)
    if not items:
        raise InvalidArgument("can not return the first item of an empty list")
    value = get_by_key(collection, 0, _MISSING)
    return items[0][1] if value is _MISSING else value


def last(collection: Any) -> Any:
    """the last value in iteration order"""
    values = values_of(collection)
    if not values:
        raise InvalidArgument("can not return the last item of an empty list")
    return values[-1]


def move_element(collection: Any, from_: int, to: int) -> List[Any]:
    """
    moves the value at position from_ to position to. the values in between shift by one
    to close the gap. returns a new list, the input is left untouched.
    unordered collections such as sets have no positions and are rejected.
    """
    if not is_collection(collection) or isinstance(collection, Set) or not is_list(collection):
        raise InvalidArgument("first argument should be a list")

    values = values_of(collection)
    size = len(values)
    if not (is_int_key(from_) and 0 <= from_ < size and is_int_key(to) and 0 <= to < size):
        raise InvalidArgument(f"from and to should be valid list positions, got {from_!r} and {to!r}")

    if from_ == to:
        return values

    values.insert(to, values.pop(from_))
    return values
