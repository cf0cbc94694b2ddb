from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple
)
from collections.abc import Mapping, Sequence

import numpy as np
import pandas as pd

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Transform = Callable[[T], U]
KeyExtractor = Callable[[T], K]
Comparer = Callable[[T, T], int]

_MISSING = object()


def is_int_key(key: Any) -> bool:
    """true for python and numpy integers, never for bools"""
    return isinstance(key, (int, np.integer)) and not isinstance(key, (bool, np.bool_))


class InvalidArgument(ValueError):
    """raised for structurally invalid input: wrong shape, bad position, empty list"""
    pass


class ByKey(Generic[K]):
    """selects the value stored under a literal key of each item"""

    def __init__(self, key: K):
        self.key = key

    def lookup(self, item: Any) -> Any:
        """return the keyed value, or the _MISSING sentinel when the item lacks the key"""
        key = self.key
        if isinstance(item, Mapping):
            return item[key] if key in item else _MISSING
        if isinstance(item, (str, bytes)):
            return _MISSING
        if isinstance(item, Sequence):
            if is_int_key(key) and 0 <= key < len(item):
                return item[key]
            # namedtuples are sequences but still carry named fields
            if isinstance(key, str) and hasattr(item, '_fields') and key in item._fields:
                return getattr(item, key)
            return _MISSING
        if isinstance(item, pd.Series):
            # e.g. a dataframe row
            return item.loc[key] if key in item.index else _MISSING
        if isinstance(key, str) and hasattr(item, key):
            return getattr(item, key)
        return _MISSING

    def __repr__(self) -> str:
        return f"ByKey({self.key!r})"


class ByFunc(Generic[T, K]):
    """derives the key of each item with a function"""

    def __init__(self, func: KeyExtractor[T, K]):
        self.func = func

    def lookup(self, item: T) -> K:
        return self.func(item)

    def __repr__(self) -> str:
        return f"ByFunc({getattr(self.func, '__name__', self.func)!r})"


KeySelector = Union[ByKey, ByFunc]


def key_selector(by: Any) -> KeySelector:
    """resolve a literal key or a callable into a selector, once per call"""
    if isinstance(by, (ByKey, ByFunc)):
        return by
    return ByFunc(by) if callable(by) else ByKey(by)
