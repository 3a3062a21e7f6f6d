from __future__ import annotations
import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

import numpy as np

from extfrac.core import flags
from extfrac.core.typing import FIXED_WIDTH_DTYPES, IntegerLike, is_integer_like

logger = logging.getLogger(__name__)


class FixedWidthOverflowError(OverflowError):
    """Raised by a fixed-width domain under the "checked" policy when a result leaves the dtype range."""


class IntegerDomain(ABC):
    """
    The integer domain Z an extended rational is built over. All values handed to and returned by a domain are
    Python ints; a domain only decides which ints are representable and how results are boxed for callers.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def fit(self, value: int) -> int:
        """Map an exact integer result into the domain, applying its overflow behaviour."""

    @abstractmethod
    def box(self, value: int) -> Any:
        """Return ``value`` as the domain's native scalar type."""

    def lift(self, value: IntegerLike) -> int:
        if not is_integer_like(value):
            raise TypeError(f"Cannot lift {type(value).__name__} into integer domain {self.name}")
        return self.fit(int(value))

    def fit_denominator(self, value: int) -> int:
        # only called by normalize, after the sign has been moved into the numerator
        assert value >= 0, f"Internal error: denominator {value} is negative"
        return self.fit(value)

    def add(self, a: int, b: int) -> int:
        return self.fit(a + b)

    def sub(self, a: int, b: int) -> int:
        return self.fit(a - b)

    def mul(self, a: int, b: int) -> int:
        return self.fit(a * b)

    def neg(self, a: int) -> int:
        return self.fit(-a)

    def abs(self, a: int) -> int:
        return self.fit(abs(a))

    def gcd(self, a: int, b: int) -> int:
        return math.gcd(a, b)

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True)
class PythonIntegerDomain(IntegerDomain):
    """Arbitrary precision Python ints. Never overflows."""

    @property
    def name(self) -> str:
        return "int"

    def fit(self, value: int) -> int:
        return value

    def box(self, value: int) -> int:
        return value

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FixedWidthDomain(IntegerDomain):
    """
    Signed two's complement integers of a numpy dtype. Every primitive operation is range checked against
    ``numpy.iinfo(dtype)`` and handled according to ``extfrac.core.flags.OVERFLOW_POLICY``.
    """
    dtype: np.dtype
    min_value: int = field(init=False, repr=False, compare=False)
    max_value: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        dt = np.dtype(self.dtype)
        if dt not in FIXED_WIDTH_DTYPES:
            raise TypeError(f"{dt} is not a signed fixed-width integer dtype, expected one of {FIXED_WIDTH_DTYPES}")
        info = np.iinfo(dt)
        object.__setattr__(self, "dtype", dt)
        object.__setattr__(self, "min_value", int(info.min))
        object.__setattr__(self, "max_value", int(info.max))

    @property
    def name(self) -> str:
        return str(self.dtype)

    @property
    def bits(self) -> int:
        return self.dtype.itemsize * 8

    def fit(self, value: int) -> int:
        if self.min_value <= value <= self.max_value:
            return value
        if flags.OVERFLOW_POLICY == "checked":
            raise FixedWidthOverflowError(f"{value} does not fit into {self.name}")
        wrapped = (value - self.min_value) % (1 << self.bits) + self.min_value
        logger.debug("%s overflow: %d wrapped to %d", self.name, value, wrapped)
        return wrapped

    def fit_denominator(self, value: int) -> int:
        # 2**(bits-1) wraps onto itself with a negative sign, so no policy can represent it as a denominator
        if value > self.max_value:
            raise FixedWidthOverflowError(f"Denominator {value} cannot be represented in {self.name}")
        return value

    def box(self, value: int) -> np.signedinteger:
        return self.dtype.type(value)

    def __repr__(self) -> str:
        return self.name


PYTHON_INT_DOMAIN = PythonIntegerDomain()


@lru_cache(maxsize=None)
def fixed_width_domain(dtype: Any) -> FixedWidthDomain:
    return FixedWidthDomain(np.dtype(dtype))


def domain_of(value: IntegerLike) -> IntegerDomain:
    if not is_integer_like(value):
        raise TypeError(f"Expected an integer, got {type(value).__name__}: {value!r}")
    if isinstance(value, np.signedinteger):
        return fixed_width_domain(value.dtype)
    return PYTHON_INT_DOMAIN


def common_domain(d1: IntegerDomain, d2: IntegerDomain) -> IntegerDomain:
    """
    Domain in which a binary operation between values of ``d1`` and ``d2`` is carried out.
    Python ints adopt the fixed-width domain of the other operand, two different fixed-width
    dtypes are promoted with numpy's promotion rules.
    """
    if d1 == d2:
        return d1
    if isinstance(d1, PythonIntegerDomain):
        return d2
    if isinstance(d2, PythonIntegerDomain):
        return d1
    assert isinstance(d1, FixedWidthDomain) and isinstance(d2, FixedWidthDomain)
    promoted = fixed_width_domain(np.promote_types(d1.dtype, d2.dtype))
    logger.debug("promoting %s and %s to %s", d1.name, d2.name, promoted.name)
    return promoted
