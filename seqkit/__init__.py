r"""
'  ___  ___  __ _  | | __(_) |_
' / __|/ _ \/ _` | | |/ /| | __|
' \__ \  __/ (_| | |   < | | |_
' |___/\___|\__, | |_|\_\|_|\__|
'              |_|
"""

# expose the operations
from .extensions.core import all_, any_, get_by_key, extend, flatten, pairs
from .extensions.ordering import sorted_
from .extensions.grouping import indexed
from .extensions.zip import zip_
from .extensions.slicing import take, drop, first, last, move_element

# expose the building blocks
from .collection import is_list
from .comparators import compare, legacy_compare, compose_comparator
from .config import SortOptions, DEFAULT_SORT_OPTIONS
from .types import InvalidArgument, ByKey, ByFunc, key_selector

# expose the fluent wrapper and its factories
from .chain import Chain
from .factories import from_iterable, from_range, empty, S

# define what `import *` does
__all__ = [
    "all_",
    "any_",
    "get_by_key",
    "extend",
    "flatten",
    "pairs",
    "sorted_",
    "indexed",
    "zip_",
    "take",
    "drop",
    "first",
    "last",
    "move_element",
    "is_list",
    "compare",
    "legacy_compare",
    "compose_comparator",
    "SortOptions",
    "DEFAULT_SORT_OPTIONS",
    "InvalidArgument",
    "ByKey",
    "ByFunc",
    "key_selector",
    "Chain",
    "from_iterable",
    "from_range",
    "empty",
    "S",
]
