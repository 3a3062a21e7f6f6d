from __future__ import annotations
from typing import Any, Iterable

import numpy as np

from extfrac.core.domain import PYTHON_INT_DOMAIN, FixedWidthDomain, IntegerDomain, common_domain, fixed_width_domain
from extfrac.functional.utils import AnyOperand, get_parts
from extfrac.rational.extended import ExtendedRational


def to_arrays(
    values: Iterable[AnyOperand] | np.ndarray,
    dtype: Any = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Split extended rationals into a numerator and a denominator array of the same shape.

    Args:
        values (Iterable[AnyOperand] | np.ndarray): Extended rationals or integers, possibly nested in an object array
        dtype (Any): Signed integer dtype of the output. Defaults to the common domain of all values,
            where Python int values give object arrays holding exact Python ints.

    Returns:
        tuple[np.ndarray, np.ndarray]: Canonical numerators and denominators
    """
    arr = values if isinstance(values, np.ndarray) else np.asarray(list(values), dtype=object)
    parts: dict[tuple[int, ...], tuple[int, int]] = {}
    domain: IntegerDomain = PYTHON_INT_DOMAIN
    for idx in np.ndindex(arr.shape):
        num, denom, value_domain = get_parts(arr[idx])
        parts[idx] = (num, denom)
        domain = common_domain(domain, value_domain)

    if dtype is not None:
        domain = fixed_width_domain(dtype)
    out_dtype = domain.dtype if isinstance(domain, FixedWidthDomain) else object

    numerators = np.empty(arr.shape, dtype=out_dtype)
    denominators = np.empty(arr.shape, dtype=out_dtype)
    for idx in np.ndindex(arr.shape):
        num, denom = parts[idx]
        numerators[idx] = domain.fit(num)
        denominators[idx] = domain.fit_denominator(denom)
    return numerators, denominators


def from_arrays(
    numerators: Any,
    denominators: Any,
) -> np.ndarray:
    """
    Build an object array of extended rationals from numerator and denominator arrays of the same shape.
    Fixed-width integer arrays produce values in the fixed-width domain of their dtype.
    """
    nums = np.asarray(numerators)
    denoms = np.asarray(denominators)
    if nums.shape != denoms.shape:
        raise ValueError(f"Shape mismatch: numerators {nums.shape} and denominators {denoms.shape}")
    for arr in (nums, denoms):
        if arr.dtype.kind not in ("i", "O"):
            raise TypeError(f"Expected signed integer or object arrays, got dtype {arr.dtype}")

    result = np.empty(nums.shape, dtype=object)
    for idx in np.ndindex(nums.shape):
        result[idx] = ExtendedRational(nums[idx], denoms[idx])
    return result
