from __future__ import annotations
import functools
from typing import Iterable

from extfrac.functional.collection import FUNCTION_DICT
from extfrac.functional.comparison import sort_key
from extfrac.functional.utils import AnyOperand, as_extended
from extfrac.rational.extended import ExtendedRational


def fold(
    op_name: str,
    values: Iterable[AnyOperand],
    initial: AnyOperand | None = None,
) -> ExtendedRational:
    """
    Left fold of ``values`` with one of the binary operations in ``FUNCTION_DICT``.

    Args:
        op_name (str): Name of the operation, e.g. "add" or "multiply"
        values (Iterable[AnyOperand]): Extended rationals or integers
        initial (AnyOperand | None): Start value. Required if ``values`` may be empty.

    Returns:
        ExtendedRational: Result of the fold, always a new instance
    """
    if op_name not in FUNCTION_DICT:
        raise ValueError(f"Unknown operation {op_name!r}, expected one of {list(FUNCTION_DICT)}")
    fn = FUNCTION_DICT[op_name]
    it = iter(values)
    if initial is None:
        try:
            initial = next(it)
        except StopIteration:
            raise ValueError(f"fold of {op_name!r} over an empty iterable without initial value") from None
    # copy, so the result never aliases an input
    return functools.reduce(fn, it, as_extended(initial).copy())


def fsum(values: Iterable[AnyOperand], start: AnyOperand = 0) -> ExtendedRational:
    return fold("add", values, start)


def fprod(values: Iterable[AnyOperand], start: AnyOperand = 1) -> ExtendedRational:
    return fold("multiply", values, start)


def fmin(values: Iterable[AnyOperand]) -> ExtendedRational:
    # nan is the greatest element, so it only wins if nothing else is present
    vals = list(values)
    if not vals:
        raise ValueError("fmin() arg is an empty iterable")
    return as_extended(min(vals, key=sort_key)).copy()


def fmax(values: Iterable[AnyOperand]) -> ExtendedRational:
    vals = list(values)
    if not vals:
        raise ValueError("fmax() arg is an empty iterable")
    return as_extended(max(vals, key=sort_key)).copy()
