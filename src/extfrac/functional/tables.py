"""
Category combination tables for the arithmetic of extended rationals.

Operands are keyed by their *kind*: the category for non-finite values and the sign
(-1, 0, 1) for finite ones. A table entry is the category of the result; ``Category.FINITE``
means the result is computed with ordinary fraction arithmetic. Subtraction and division
are looked up in the same tables with the kind of the negated or inverted right operand, see
``NEGATIVE_KIND`` and ``RECIPROCAL_KIND``; the finite value itself is computed directly.

| x      | -1   | 0    | 1    | +inf | -inf | nan |
| ------ | ---- | ---- | ---- | ---- | ---- | --- |
| -1     | fin  | fin  | fin  | -inf | +inf | nan |
| 0      | fin  | fin  | fin  | nan  | nan  | nan |
| 1      | fin  | fin  | fin  | +inf | -inf | nan |
| +inf   | -inf | nan  | +inf | +inf | -inf | nan |
| -inf   | +inf | nan  | -inf | -inf | +inf | nan |
| nan    | nan  | nan  | nan  | nan  | nan  | nan |

| +      | fin  | +inf | -inf | nan |
| ------ | ---- | ---- | ---- | --- |
| fin    | fin  | +inf | -inf | nan |
| +inf   | +inf | +inf | nan  | nan |
| -inf   | -inf | nan  | -inf | nan |
| nan    | nan  | nan  | nan  | nan |
"""
from __future__ import annotations
from itertools import product

from frozendict import frozendict

from extfrac.core.normalize import classify, signum
from extfrac.core.typing import Category

Kind = Category | int

FINITE_KINDS: tuple[int, ...] = (-1, 0, 1)
NON_FINITE_KINDS: tuple[Category, ...] = (Category.POS_INF, Category.NEG_INF, Category.NAN)
ALL_KINDS: tuple[Kind, ...] = FINITE_KINDS + NON_FINITE_KINDS

_KIND_SIGN: frozendict[Kind, int | None] = frozendict({
    -1: -1,
    0: 0,
    1: 1,
    Category.POS_INF: 1,
    Category.NEG_INF: -1,
    Category.NAN: None,
})

# kind of -y and 1/y for an operand of kind y
NEGATIVE_KIND: frozendict[Kind, Kind] = frozendict({
    -1: 1,
    0: 0,
    1: -1,
    Category.POS_INF: Category.NEG_INF,
    Category.NEG_INF: Category.POS_INF,
    Category.NAN: Category.NAN,
})

RECIPROCAL_KIND: frozendict[Kind, Kind] = frozendict({
    -1: -1,
    0: Category.POS_INF,
    1: 1,
    Category.POS_INF: 0,
    Category.NEG_INF: 0,
    Category.NAN: Category.NAN,
})


def kind_of(num: int, denom: int) -> Kind:
    category = classify(num, denom)
    if category != Category.FINITE:
        return category
    return signum(num, denom)  # type: ignore[return-value]


def _infinity(sign: int) -> Category:
    return Category.POS_INF if sign > 0 else Category.NEG_INF


def _multiply_entry(a: Kind, b: Kind) -> Category:
    if Category.NAN in (a, b):
        return Category.NAN
    if a in FINITE_KINDS and b in FINITE_KINDS:
        return Category.FINITE
    sign = _KIND_SIGN[a] * _KIND_SIGN[b]  # type: ignore[operator]
    # zero times infinity
    if sign == 0:
        return Category.NAN
    return _infinity(sign)


def _add_entry(a: Kind, b: Kind) -> Category:
    if Category.NAN in (a, b):
        return Category.NAN
    if a in FINITE_KINDS and b in FINITE_KINDS:
        return Category.FINITE
    if a in FINITE_KINDS:
        return b  # type: ignore[return-value]
    if b in FINITE_KINDS:
        return a  # type: ignore[return-value]
    # both infinite: equal infinities add up, opposite ones cancel to nan
    if a == b:
        return a  # type: ignore[return-value]
    return Category.NAN


MULTIPLY_TABLE: frozendict[tuple[Kind, Kind], Category] = frozendict({
    (a, b): _multiply_entry(a, b) for a, b in product(ALL_KINDS, repeat=2)
})

ADD_TABLE: frozendict[tuple[Kind, Kind], Category] = frozendict({
    (a, b): _add_entry(a, b) for a, b in product(ALL_KINDS, repeat=2)
})
