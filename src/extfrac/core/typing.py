from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any, Tuple, Union

import numpy as np


# Value categories of an extended rational. Derived from the sign pattern of the canonical pair, never stored.
class Category(Enum):
    FINITE = "finite"
    POS_INF = "+inf"
    NEG_INF = "-inf"
    NAN = "nan"


# Integer types that can be lifted into an integer domain
IntegerLike = Union[
    int,
    np.signedinteger,
]


def is_integer_like(x: Any) -> bool:
    # bool is an int subclass, but True/False as fraction operands is almost always a bug
    if isinstance(x, bool | np.bool_):
        return False
    return isinstance(x, int | np.signedinteger)


@lru_cache(maxsize=1)
def _fixed_width_dtypes() -> Tuple[Any, ...]:
    """
    Return the signed numpy integer dtypes usable as fixed-width domains.
    Platform aliases (e.g. intc == int32, longlong == int64) are collapsed.
    """
    out: list[Any] = []
    seen: set[Any] = set()
    for dt in (np.int8, np.int16, np.int32, np.int64):
        canonical = np.dtype(dt)
        if canonical not in seen:
            seen.add(canonical)
            out.append(canonical)
    return tuple(out)


# signed integer dtypes which are valid fixed-width domains
FIXED_WIDTH_DTYPES = _fixed_width_dtypes()
