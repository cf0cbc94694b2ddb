from dataclasses import dataclass


@dataclass(frozen=True)
class SortOptions:
    """tunables for sorted_()"""
    numpy_fast_path: bool = True
    numpy_min_size: int = 64


DEFAULT_SORT_OPTIONS = SortOptions()
