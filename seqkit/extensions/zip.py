from __future__ import annotations
from ..types import *
from ..collection import values_of


def zip_(*collections: Any) -> List[Tuple[Any, ...]]:
    """
    zips two or more collections index by index.
    keyed collections contribute their values in iteration order. the result stops at the
    shortest input; a None value is a present value, not a gap.
    """
    if len(collections) < 2:
        raise InvalidArgument(f"zip needs at least two collections, got {len(collections)}")
    columns = [values_of(collection) for collection in collections]
    return list(zip(*columns))
