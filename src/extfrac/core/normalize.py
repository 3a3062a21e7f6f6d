from __future__ import annotations

from extfrac.core.domain import PYTHON_INT_DOMAIN, IntegerDomain
from extfrac.core.typing import Category


def normalize(
    num: int,
    denom: int,
    domain: IntegerDomain = PYTHON_INT_DOMAIN,
) -> tuple[int, int]:
    """
    Bring a numerator/denominator pair into canonical form.

    Canonical pairs have a non-negative denominator and carry the sign in the numerator.
    Finite values are fully reduced with a single zero ``(0, 1)``. A zero denominator
    encodes the non-finite values ``(1, 0)`` (+inf), ``(-1, 0)`` (-inf) and ``(0, 0)`` (nan).

    Args:
        num (int): Numerator, already representable in ``domain``
        denom (int): Denominator, already representable in ``domain``
        domain (IntegerDomain): Integer domain the canonical pair has to fit into

    Returns:
        tuple[int, int]: Canonical (numerator, denominator)
    """
    if denom == 0:
        if num > 0:
            return 1, 0
        if num < 0:
            return -1, 0
        return 0, 0
    if num == 0:
        return 0, 1

    common_divisor = domain.gcd(abs(num), abs(denom))
    reduced_num = num // common_divisor
    reduced_denom = denom // common_divisor

    # Ensure denominator is positive
    if reduced_denom < 0:
        reduced_num = -reduced_num
        reduced_denom = -reduced_denom

    return domain.fit(reduced_num), domain.fit_denominator(reduced_denom)


def classify(num: int, denom: int) -> Category:
    assert denom >= 0, f"Internal error: ({num}, {denom}) is not canonical"
    if denom > 0:
        return Category.FINITE
    if num > 0:
        return Category.POS_INF
    if num < 0:
        return Category.NEG_INF
    return Category.NAN


def signum(num: int, denom: int) -> int | None:
    """Sign of a canonical pair, infinities included. None for nan, which has no sign."""
    category = classify(num, denom)
    if category == Category.NAN:
        return None
    if num > 0:
        return 1
    if num < 0:
        return -1
    return 0
