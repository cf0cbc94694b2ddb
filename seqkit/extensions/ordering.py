from __future__ import annotations
import logging
from functools import cmp_to_key
import numpy as np
from ..types import *
from ..config import SortOptions, DEFAULT_SORT_OPTIONS
from ..collection import keyed_items, is_list, rebuild
from ..comparators import compose_comparator

logger = logging.getLogger(__name__)

# largest integer a float64 holds exactly
_FLOAT_EXACT_LIMIT = 2 ** 53


def _try_numpy_order(values: List[Any], reverse: bool, options: SortOptions) -> Optional[List[int]]:
    """stable argsort positions for plain real numbers, or none when numpy can't be trusted with the data."""
    if not options.numpy_fast_path or len(values) < options.numpy_min_size:
        return None
    if not all(type(v) in (int, float) for v in values):
        return None
    try:
        arr = np.asarray(values)
        if arr.dtype.kind not in 'if':
            return None
        if arr.dtype.kind == 'f':
            if np.isnan(arr).any():
                return None
            if any(type(v) is int and abs(v) > _FLOAT_EXACT_LIMIT for v in values):
                return None
        if not reverse:
            return np.argsort(arr, kind='stable').tolist()
        # descending but stable: sort the mirrored array, then mirror the positions back
        mirrored = np.argsort(arr[::-1], kind='stable')[::-1]
        return (len(arr) - 1 - mirrored).tolist()
    except (TypeError, ValueError, OverflowError) as e:
        logger.debug(f"numpy sort fast path abandoned: {e}")
        return None


def sorted_(collection: Any,
            reverse: bool = False,
            key: Optional[KeyExtractor[Any, Any]] = None,
            cmp: Optional[Comparer[Any]] = None,
            *,
            options: Optional[SortOptions] = None) -> Any:
    """
    returns a sorted copy of the collection.

    :param collection: a list-shaped or keyed collection; it is never mutated.
    :param reverse: invert the effective (keyed) comparison.
    :param key: function of one argument extracting the comparison key from each value.
    :param cmp: function of two arguments returning a negative number, zero or a positive number.
    :param options: numpy fast path tunables, defaults to DEFAULT_SORT_OPTIONS.
    :return: a new dense list for list-shaped input, otherwise the original keys reordered.
    """
    options = options or DEFAULT_SORT_OPTIONS
    items = keyed_items(collection)
    dense = is_list(collection)

    order = None
    if key is None and cmp is None:
        order = _try_numpy_order([value for _, value in items], reverse, options)

    if order is not None:
        logger.debug(f"sorted {len(items)} values with the numpy fast path")
        ordered = [items[i] for i in order]
    else:
        comparator = compose_comparator(cmp, key, reverse)
        # python's sort is stable, so equal values keep their original order
        ordered = sorted(items, key=cmp_to_key(lambda a, b: comparator(a[1], b[1])))

    return rebuild(collection, ordered, dense)
