from .types import *


def compare(a: Any, b: Any) -> int:
    """default comparator: -1, 0 or 1 using the native < and > operators"""
    if a < b: return -1
    if a > b: return 1
    return 0


def legacy_compare(a: Any, b: Any) -> int:
    """
    comparator that never reports equality: 1 if a > b, otherwise -1.
    equal values come out as 'less', so a sort driven by it is not guaranteed
    to keep equal elements in their original order. opt in by passing it as cmp.
    """
    return 1 if a > b else -1


def compose_comparator(cmp: Optional[Comparer[Any]] = None,
                       key: Optional[KeyExtractor[Any, Any]] = None,
                       reverse: bool = False) -> Comparer[Any]:
    """
    build a single comparator from an optional base comparator, key extractor and reversal flag.
    the key extractor wraps the base comparator first; reversal wraps the keyed result last.
    """
    comparator = cmp if cmp is not None else compare

    if key is not None:
        base = comparator
        def keyed(a, b): return base(key(a), key(b))
        comparator = keyed

    if reverse:
        inner = comparator
        def negated(a, b): return -inner(a, b)
        comparator = negated

    return comparator
