from __future__ import annotations
from itertools import chain
import numpy as np
import pandas as pd
from ..types import *
from ..collection import (
    is_list, is_int_key, iter_values, values_of, keyed_items, require_collection
)


def all_(collection: Any, predicate: Optional[Predicate[Any]] = None) -> bool:
    """true if every value satisfies the predicate (or is truthy without one); true when empty"""
    check = predicate if predicate is not None else bool
    return all(check(value) for value in iter_values(collection))


def any_(collection: Any, predicate: Optional[Predicate[Any]] = None) -> bool:
    """true if some value satisfies the predicate (or is truthy without one); false when empty"""
    check = predicate if predicate is not None else bool
    return any(check(value) for value in iter_values(collection))


def get_by_key(collection: Any, key: Any, default: Any = None) -> Any:
    """the value stored at key, or default when the key is absent. present None values are returned as is."""
    if isinstance(collection, Mapping):
        return collection[key] if key in collection else default
    if isinstance(collection, (list, tuple, range)):
        return collection[key] if is_int_key(key) and 0 <= key < len(collection) else default
    require_collection(collection)
    for item_key, value in keyed_items(collection):
        if item_key == key and is_int_key(item_key) == is_int_key(key):
            return value
    return default


def _renumbered(key: Any) -> bool:
    """keys that hash like integers: ints, bools and integral floats"""
    if is_int_key(key) or isinstance(key, (bool, np.bool_)):
        return True
    return isinstance(key, (float, np.floating)) and float(key).is_integer()


def extend(first: Any, second: Any) -> Any:
    """
    adds the values of second to the end of first.
    if either side is keyed, integer keys are renumbered in order while other keys keep their
    first position and take the last value written to them. bools and integral floats count
    as integer keys, since they hash like the positions they would collide with.
    """
    if is_list(first) and is_list(second):
        return values_of(first) + values_of(second)

    merged = {}
    position = 0
    for key, value in chain(keyed_items(first), keyed_items(second)):
        if _renumbered(key):
            merged[position] = value
            position += 1
        else:
            merged[key] = value
    return list(merged.values()) if is_list(merged) else merged


def _is_branch(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, (list, tuple, range, Mapping, pd.Series))


def flatten(collection: Any) -> List[Any]:
    """
    recursively collects the leaf values of nested lists, tuples, ranges, mappings, series and arrays.
    other iterables nested inside (sets, generators, strings) are kept as single leaves.
    """
    result = []

    def flatten_recursive(node):
        for value in iter_values(node):
            if _is_branch(value):
                flatten_recursive(value)
            else:
                result.append(value)

    flatten_recursive(collection)
    return result


def pairs(collection: Any, value_key: bool = False) -> List[Tuple[Any, Any]]:
    """(key, value) tuples in iteration order, or (value, key) when value_key is true"""
    if value_key:
        return [(value, key) for key, value in keyed_items(collection)]
    return list(keyed_items(collection))
