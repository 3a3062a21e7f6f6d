"""
Comparison of extended rationals.

Equality is equality of canonical pairs, so ``nan == nan`` holds (unlike IEEE floats).
The order is total and consistent with equality: -inf < finite values < +inf < nan.
Finite values are ordered by cross-multiplication. All comparisons are carried out on
exact Python ints and never overflow, whatever the integer domain of the operands.
"""
from __future__ import annotations
from fractions import Fraction

from frozendict import frozendict

from extfrac.core.normalize import classify
from extfrac.core.typing import Category
from extfrac.functional.utils import AnyOperand, get_parts

# nan is placed above +inf so that sorting is well defined
CATEGORY_RANK: frozendict[Category, int] = frozendict({
    Category.NEG_INF: 0,
    Category.FINITE: 1,
    Category.POS_INF: 2,
    Category.NAN: 3,
})


def compare(x: AnyOperand, y: AnyOperand) -> int:
    """Return -1, 0 or 1 if x is less than, equal to or greater than y."""
    x_num, x_denom, _ = get_parts(x)
    y_num, y_denom, _ = get_parts(y)
    x_category = classify(x_num, x_denom)
    y_category = classify(y_num, y_denom)
    if x_category != Category.FINITE or y_category != Category.FINITE:
        diff = CATEGORY_RANK[x_category] - CATEGORY_RANK[y_category]
        return (diff > 0) - (diff < 0)
    # Cross multiply to avoid division, denominators are positive
    lhs = x_num * y_denom
    rhs = y_num * x_denom
    return (lhs > rhs) - (lhs < rhs)


def eq(x: AnyOperand, y: AnyOperand) -> bool:
    x_num, x_denom, _ = get_parts(x)
    y_num, y_denom, _ = get_parts(y)
    return x_num == y_num and x_denom == y_denom


def ne(x: AnyOperand, y: AnyOperand) -> bool:
    return not eq(x, y)


def lt(x: AnyOperand, y: AnyOperand) -> bool:
    return compare(x, y) < 0


def le(x: AnyOperand, y: AnyOperand) -> bool:
    return compare(x, y) <= 0


def gt(x: AnyOperand, y: AnyOperand) -> bool:
    return compare(x, y) > 0


def ge(x: AnyOperand, y: AnyOperand) -> bool:
    return compare(x, y) >= 0


def sort_key(x: AnyOperand) -> tuple[int, Fraction]:
    """Key for ``sorted``, ``min`` and ``max`` that orders like ``compare``."""
    num, denom, _ = get_parts(x)
    category = classify(num, denom)
    if category != Category.FINITE:
        return CATEGORY_RANK[category], Fraction(0)
    return CATEGORY_RANK[category], Fraction(num, denom)
