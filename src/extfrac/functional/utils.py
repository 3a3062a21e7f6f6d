from __future__ import annotations
from typing import Any, Union

import numpy as np

from extfrac.core.domain import IntegerDomain, common_domain, domain_of
from extfrac.core.typing import is_integer_like
from extfrac.rational.extended import ExtendedRational

AnyOperand = Union[ExtendedRational, int, np.signedinteger]


def get_parts(
    x: AnyOperand,
) -> tuple[int, int, IntegerDomain]:
    """
    Canonical (numerator, denominator) pair of an operand together with its domain.
    Integers are lifted to ``(k, 1)`` in their own domain.
    """
    if isinstance(x, ExtendedRational):
        return x._num, x._denom, x._domain
    if is_integer_like(x):
        domain = domain_of(x)
        return domain.lift(x), 1, domain
    raise TypeError(f"Expected ExtendedRational or integer operand, got {type(x).__name__}: {x!r}")


def get_binary_parts(
    x: AnyOperand,
    y: AnyOperand,
) -> tuple[tuple[int, int], tuple[int, int], IntegerDomain]:
    """Canonical pairs of both operands, fitted into the domain the operation is carried out in."""
    x_num, x_denom, x_domain = get_parts(x)
    y_num, y_denom, y_domain = get_parts(y)
    domain = common_domain(x_domain, y_domain)
    if domain != x_domain:
        x_num, x_denom = domain.fit(x_num), domain.fit_denominator(x_denom)
    if domain != y_domain:
        y_num, y_denom = domain.fit(y_num), domain.fit_denominator(y_denom)
    return (x_num, x_denom), (y_num, y_denom), domain


def as_extended(x: Any) -> ExtendedRational:
    if isinstance(x, ExtendedRational):
        return x
    num, denom, domain = get_parts(x)
    return ExtendedRational._from_canonical(num, denom, domain)
