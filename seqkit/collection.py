from __future__ import annotations
import numpy as np
import pandas as pd
from .types import *

# --- key helpers ---

def _is_dense(keys: Iterable[Any]) -> bool:
    return all(is_int_key(key) and key == i for i, key in enumerate(keys))


# --- classification ---

def is_collection(value: Any) -> bool:
    """anything iterable except strings, bytes and 0-d arrays"""
    if isinstance(value, (str, bytes)):
        return False
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, (Mapping, pd.Series, pd.DataFrame)) or hasattr(value, '__iter__')


def require_collection(value: Any, name: str = "collection") -> None:
    if not is_collection(value):
        raise InvalidArgument(f"{name} should be a collection, got {type(value).__name__}")


def is_keyed(collection: Any) -> bool:
    """true for collections that carry their own keys"""
    return isinstance(collection, (Mapping, pd.Series, pd.DataFrame))


def is_list(collection: Any) -> bool:
    """
    true when the keys of the collection are exactly 0..n-1 in order.
    plain sequences and iterables are lists by construction; mappings and
    pandas objects are checked key by key.
    """
    if isinstance(collection, (pd.Series, pd.DataFrame)):
        return _is_dense(collection.index)
    if isinstance(collection, Mapping):
        return _is_dense(collection.keys())
    return True


# --- normalization ---

def iter_values(collection: Any) -> Iterator[Any]:
    """iterate the values of a collection, never its keys"""
    require_collection(collection)
    if isinstance(collection, pd.DataFrame):
        return iter(collection.to_dict('records'))
    if isinstance(collection, (pd.Series, np.ndarray)):
        return iter(collection.tolist())
    if isinstance(collection, Mapping):
        return iter(collection.values())
    return iter(collection)


def values_of(collection: Any) -> List[Any]:
    """a fresh list of the values, in iteration order"""
    return list(iter_values(collection))


def keyed_items(collection: Any) -> List[Tuple[Any, Any]]:
    """(key, value) pairs in iteration order; positions stand in for keys on plain sequences"""
    require_collection(collection)
    if isinstance(collection, pd.DataFrame):
        return list(zip(collection.index, collection.to_dict('records')))
    if isinstance(collection, (pd.Series, Mapping)):
        return list(collection.items())
    return list(enumerate(values_of(collection)))


def rebuild(source: Any, items: List[Tuple[Any, Any]], dense: bool) -> Any:
    """
    build the output for a keyed result in the shape of the source.
    dense results drop their keys and become lists; a series stays a series.
    """
    values = [value for _, value in items]
    if isinstance(source, pd.Series):
        if dense:
            return pd.Series(values, dtype=source.dtype, name=source.name)
        return pd.Series(values, index=[key for key, _ in items], dtype=source.dtype, name=source.name)
    if dense:
        return values
    return dict(items)
