# ruff: noqa: F811
from __future__ import annotations
from typing import Callable, overload

import numpy as np

from extfrac.core.domain import IntegerDomain
from extfrac.core.typing import Category, IntegerLike, is_integer_like
from extfrac.functional.tables import ADD_TABLE, MULTIPLY_TABLE, NEGATIVE_KIND, RECIPROCAL_KIND, kind_of
from extfrac.functional.utils import AnyOperand, as_extended, get_binary_parts, get_parts
from extfrac.rational.extended import ExtendedRational


def _finite_multiply(
    x: tuple[int, int],
    y: tuple[int, int],
    domain: IntegerDomain,
) -> ExtendedRational:
    # cross cancel before multiplying, keeps intermediates small for fixed-width domains
    x_num, x_denom = x
    y_num, y_denom = y
    g1 = domain.gcd(abs(x_num), y_denom)
    g2 = domain.gcd(abs(y_num), x_denom)
    new_num = domain.mul(x_num // g1, y_num // g2)
    new_denom = domain.mul(x_denom // g2, y_denom // g1)
    return ExtendedRational._from_pair(new_num, new_denom, domain)


def _finite_divide(
    x: tuple[int, int],
    y: tuple[int, int],
    domain: IntegerDomain,
) -> ExtendedRational:
    # y is finite and non-zero. 1/y is never formed, it may not fit (e.g. -128 in int8)
    x_num, x_denom = x
    y_num, y_denom = y
    g1 = domain.gcd(abs(x_num), abs(y_num))
    g2 = domain.gcd(x_denom, y_denom)
    num_factor = x_num // g1
    denom_factor = y_num // g1
    if denom_factor < 0:
        num_factor, denom_factor = -num_factor, -denom_factor
    new_num = domain.mul(num_factor, y_denom // g2)
    new_denom = domain.mul(x_denom // g2, denom_factor)
    return ExtendedRational._from_pair(new_num, new_denom, domain)


def _finite_add(
    x: tuple[int, int],
    y: tuple[int, int],
    domain: IntegerDomain,
    combine: Callable[[int, int], int] | None = None,
) -> ExtendedRational:
    # combine is domain.add for sums and domain.sub for differences
    combine = domain.add if combine is None else combine
    x_num, x_denom = x
    y_num, y_denom = y
    g = domain.gcd(x_denom, y_denom)
    if g == 1:
        new_num = combine(domain.mul(x_num, y_denom), domain.mul(x_denom, y_num))
        new_denom = domain.mul(x_denom, y_denom)
        return ExtendedRational._from_pair(new_num, new_denom, domain)
    s = x_denom // g
    t = combine(domain.mul(x_num, y_denom // g), domain.mul(y_num, s))
    g2 = domain.gcd(abs(t), g)
    return ExtendedRational._from_pair(t // g2, domain.mul(s, y_denom // g2), domain)


## Multiplication ###########################
@overload
def multiply(x: ExtendedRational, y: ExtendedRational) -> ExtendedRational: ...


@overload
def multiply(x: ExtendedRational, y: int | np.signedinteger) -> ExtendedRational: ...


@overload
def multiply(x: int | np.signedinteger, y: ExtendedRational) -> ExtendedRational: ...


def multiply(x: AnyOperand, y: AnyOperand) -> ExtendedRational:
    x_pair, y_pair, domain = get_binary_parts(x, y)
    category = MULTIPLY_TABLE[kind_of(*x_pair), kind_of(*y_pair)]
    if category != Category.FINITE:
        return ExtendedRational._from_category(category, domain)
    return _finite_multiply(x_pair, y_pair, domain)


## Division ###########################
@overload
def divide(x: ExtendedRational, y: ExtendedRational) -> ExtendedRational: ...


@overload
def divide(x: ExtendedRational, y: int | np.signedinteger) -> ExtendedRational: ...


@overload
def divide(x: int | np.signedinteger, y: ExtendedRational) -> ExtendedRational: ...


def divide(x: AnyOperand, y: AnyOperand) -> ExtendedRational:
    """
    Total division. Division by zero gives +inf or -inf by the sign of the dividend
    and nan for 0 / 0, since the reciprocal of zero is +inf.
    """
    x_pair, y_pair, domain = get_binary_parts(x, y)
    category = MULTIPLY_TABLE[kind_of(*x_pair), RECIPROCAL_KIND[kind_of(*y_pair)]]
    if category != Category.FINITE:
        return ExtendedRational._from_category(category, domain)
    if y_pair[1] == 0:
        # finite / inf
        return ExtendedRational._from_canonical(0, 1, domain)
    return _finite_divide(x_pair, y_pair, domain)


## Addition ###########################
@overload
def add(x: ExtendedRational, y: ExtendedRational) -> ExtendedRational: ...


@overload
def add(x: ExtendedRational, y: int | np.signedinteger) -> ExtendedRational: ...


@overload
def add(x: int | np.signedinteger, y: ExtendedRational) -> ExtendedRational: ...


def add(x: AnyOperand, y: AnyOperand) -> ExtendedRational:
    x_pair, y_pair, domain = get_binary_parts(x, y)
    category = ADD_TABLE[kind_of(*x_pair), kind_of(*y_pair)]
    if category != Category.FINITE:
        return ExtendedRational._from_category(category, domain)
    return _finite_add(x_pair, y_pair, domain)


## Subtraction ###########################
@overload
def subtract(x: ExtendedRational, y: ExtendedRational) -> ExtendedRational: ...


@overload
def subtract(x: ExtendedRational, y: int | np.signedinteger) -> ExtendedRational: ...


@overload
def subtract(x: int | np.signedinteger, y: ExtendedRational) -> ExtendedRational: ...


def subtract(x: AnyOperand, y: AnyOperand) -> ExtendedRational:
    x_pair, y_pair, domain = get_binary_parts(x, y)
    category = ADD_TABLE[kind_of(*x_pair), NEGATIVE_KIND[kind_of(*y_pair)]]
    if category != Category.FINITE:
        return ExtendedRational._from_category(category, domain)
    return _finite_add(x_pair, y_pair, domain, domain.sub)


## Unary ###########################
def negative(x: AnyOperand) -> ExtendedRational:
    num, denom, domain = get_parts(x)
    return ExtendedRational._from_pair(domain.neg(num), denom, domain)


def absolute(x: AnyOperand) -> ExtendedRational:
    num, denom, domain = get_parts(x)
    return ExtendedRational._from_pair(domain.abs(num), denom, domain)


def reciprocal(x: AnyOperand) -> ExtendedRational:
    """
    Swap numerator and denominator and normalize. Unlike ``ExtendedRational.reciprocal`` this
    returns a new value. Zero maps to +inf, both infinities map to zero, nan stays nan.
    """
    num, denom, domain = get_parts(x)
    return ExtendedRational._from_pair(denom, num, domain)


def power(x: AnyOperand, exponent: IntegerLike) -> ExtendedRational:
    """
    Integer power by square-and-multiply through ``multiply``, so the multiplication table
    decides every non-finite intermediate. ``x ** 0`` is one for every x except nan.
    """
    if not is_integer_like(exponent):
        raise TypeError(f"Exponent must be an integer, got {type(exponent).__name__}: {exponent!r}")
    base = as_extended(x)
    exp = int(exponent)
    if exp == 0:
        if base.is_nan():
            return base.copy()
        return ExtendedRational._from_canonical(1, 1, base.domain)
    if exp < 0:
        base = reciprocal(base)
        exp = -exp

    result = base.copy()
    exp -= 1
    while exp:
        if exp & 1:
            result = multiply(result, base)
        exp >>= 1
        if exp:
            base = multiply(base, base)
    return result
