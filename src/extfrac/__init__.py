from extfrac.core.domain import (
    FixedWidthDomain,
    FixedWidthOverflowError,
    IntegerDomain,
    PythonIntegerDomain,
)
from extfrac.core.flags import get_overflow_policy, overflow_policy, set_overflow_policy
from extfrac.core.typing import Category
from extfrac.functional.arithmetic import absolute, add, divide, multiply, negative, power, reciprocal, subtract
from extfrac.functional.array import from_arrays, to_arrays
from extfrac.functional.comparison import compare, sort_key
from extfrac.functional.reduction import fmax, fmin, fold, fprod, fsum
from extfrac.rational.extended import ExtendedRational

Fraction = ExtendedRational


__all__ = [
    "ExtendedRational",
    "Fraction",
    "Category",
    "IntegerDomain",
    "PythonIntegerDomain",
    "FixedWidthDomain",
    "FixedWidthOverflowError",
    "get_overflow_policy",
    "set_overflow_policy",
    "overflow_policy",
    "add",
    "subtract",
    "multiply",
    "divide",
    "negative",
    "absolute",
    "reciprocal",
    "power",
    "compare",
    "sort_key",
    "fold",
    "fsum",
    "fprod",
    "fmin",
    "fmax",
    "to_arrays",
    "from_arrays",
]
