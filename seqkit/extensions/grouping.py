from __future__ import annotations
from collections import defaultdict
from ..types import *
from ..types import _MISSING
from ..collection import iter_values


def indexed(items: Any,
            by: Union[Any, KeyExtractor[Any, K]],
            keep_last: bool = True,
            transform: Optional[Transform[Any, Any]] = None) -> Dict[K, Any]:
    """
    index a list of records by a key or a derived key.

    :param items: list of dicts, sequences, series rows or objects; a dataframe is indexed over its rows.
    :param by: a literal key looked up on every item, or a function of one item returning its index.
               items lacking a literal key are skipped.
    :param keep_last: if true, each index holds the last matching item; otherwise a list of all of them.
    :param transform: applied to each item after its index is computed.
    :return: a dict in first-seen index order.
    """
    selector = key_selector(by)

    if keep_last:
        result = {}
        for item in iter_values(items):
            index = selector.lookup(item)
            if index is _MISSING: continue
            result[index] = transform(item) if transform is not None else item
        return result

    groups = defaultdict(list)
    for item in iter_values(items):
        index = selector.lookup(item)
        if index is _MISSING: continue
        groups[index].append(transform(item) if transform is not None else item)
    return dict(groups)
