from .types import *
from .collection import is_keyed


def from_iterable(data: Iterable[T]) -> 'Chain[T]':
    """create a chain over a list, iterable or keyed collection"""
    from .chain import Chain
    return Chain(lambda: data if is_keyed(data) else list(data))


def from_range(start: int, count: int) -> 'Chain[int]':
    """create a chain over count consecutive integers"""
    from .chain import Chain
    return Chain(lambda: list(range(start, start + count)))


def empty() -> 'Chain[Any]':
    """create an empty chain"""
    from .chain import Chain
    return Chain(lambda: [])


# --- aliases ---
S = from_iterable
