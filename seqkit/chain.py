from __future__ import annotations

import numpy as np
import pandas as pd
from .types import *
from .config import SortOptions
from .collection import iter_values, values_of, keyed_items, is_keyed

# --- operations ---
from .extensions.core import all_, any_, get_by_key, extend, flatten, pairs
from .extensions.ordering import sorted_
from .extensions.grouping import indexed
from .extensions.zip import zip_
from .extensions.slicing import take, drop, first, last, move_element


class Chain(Generic[T]):
    """a lazy, chainable view over a list or keyed collection."""

    def __init__(self, data_func: Callable[[], Any]):
        """init with a function that returns the collection when called"""
        self._data_func = data_func
        self._cached_result: Any = None
        self._is_cached = False

    def _get_data(self) -> Any:
        """get the current collection, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter_values(self._get_data())

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        state = repr(self._cached_result) if self._is_cached else "<pending>"
        return f"Chain({state})"

    # --- reordering ---

    def sorted(self, reverse: bool = False, key: Optional[KeyExtractor[T, K]] = None,
               cmp: Optional[Comparer[T]] = None, *, options: Optional[SortOptions] = None) -> 'Chain[T]':
        """sorted copy; keyed collections keep their keys"""
        return Chain(lambda: sorted_(self._get_data(), reverse, key, cmp, options=options))

    def move_element(self, from_: int, to: int) -> 'Chain[T]':
        return Chain(lambda: move_element(self._get_data(), from_, to))

    # --- slicing ---

    def take(self, n: int, step: int = 1) -> 'Chain[T]':
        return Chain(lambda: take(self._get_data(), n, step))

    def drop(self, n: int) -> 'Chain[T]':
        return Chain(lambda: drop(self._get_data(), n))

    # --- combining ---

    def zip(self, *others: Any) -> 'Chain[Tuple[Any, ...]]':
        """zip with one or more collections, stopping at the shortest"""
        return Chain(lambda: zip_(self._get_data(), *others))

    def extend(self, other: Any) -> 'Chain[T]':
        return Chain(lambda: extend(self._get_data(), other))

    def flatten(self) -> 'Chain[Any]':
        return Chain(lambda: flatten(self._get_data()))

    def pairs(self, value_key: bool = False) -> 'Chain[Tuple[Any, Any]]':
        return Chain(lambda: pairs(self._get_data(), value_key))

    def indexed(self, by: Union[Any, KeyExtractor[T, K]], keep_last: bool = True,
                transform: Optional[Transform[T, Any]] = None) -> 'Chain[Any]':
        """index the records by key; the result is keyed, iterate it for its values or call to_dict()"""
        return Chain(lambda: indexed(self._get_data(), by, keep_last, transform))

    # --- terminal ---

    def all(self, predicate: Optional[Predicate[T]] = None) -> bool:
        return all_(self._get_data(), predicate)

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        return any_(self._get_data(), predicate)

    def first(self) -> T:
        return first(self._get_data())

    def last(self) -> T:
        return last(self._get_data())

    def get(self, key: Any, default: Any = None) -> Any:
        return get_by_key(self._get_data(), key, default)

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count values"""
        if predicate is None: return len(values_of(self._get_data()))
        return sum(1 for value in self if predicate(value))

    def to_list(self) -> List[T]:
        """values as a new list"""
        return values_of(self._get_data())

    def to_dict(self) -> Dict[Any, T]:
        """keys to values; positions stand in for keys on list-shaped data"""
        return dict(keyed_items(self._get_data()))

    def to_array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.to_list())

    def to_series(self) -> pd.Series:
        """convert to pandas series, keeping keys as the index"""
        data = self._get_data()
        if is_keyed(data):
            items = keyed_items(data)
            return pd.Series([value for _, value in items], index=[key for key, _ in items])
        return pd.Series(values_of(data))
