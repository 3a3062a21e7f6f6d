from __future__ import annotations
from fractions import Fraction
from typing import Any, Self

from extfrac.core.domain import PYTHON_INT_DOMAIN, IntegerDomain, common_domain, domain_of, fixed_width_domain
from extfrac.core.normalize import classify, normalize
from extfrac.core.typing import Category, IntegerLike, is_integer_like


class ExtendedRational:
    """
    A rational number extended by +inf, -inf and nan, for which every arithmetic operation is total.

    The value is stored as a canonical (numerator, denominator) pair: the denominator is never negative,
    finite values are fully reduced, and a zero denominator encodes ``(1, 0)`` (+inf), ``(-1, 0)`` (-inf)
    or ``(0, 0)`` (nan). Division by zero yields a signed infinity or nan instead of raising.

    >>> ExtendedRational(3, 4) * ExtendedRational(5, 6)
    ExtendedRational(5, 8)
    >>> ExtendedRational(3, 4) / 0
    ExtendedRational(1, 0)

    Instances are mutable through ``reciprocal()`` and the in-place operators, and therefore unhashable.
    """
    __slots__ = ("_num", "_denom", "_domain")

    # let numpy scalars on the left hand side defer to the reflected operators
    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        numerator: IntegerLike | ExtendedRational,
        denominator: IntegerLike = 1,
        dtype: Any = None,
    ):
        if isinstance(numerator, ExtendedRational):
            if denominator != 1:
                raise TypeError("Cannot combine an ExtendedRational numerator with a denominator")
            domain = numerator._domain if dtype is None else fixed_width_domain(dtype)
            num, denom = domain.fit(numerator._num), domain.fit(numerator._denom)
        else:
            if not is_integer_like(numerator):
                raise TypeError(f"Numerator must be an integer, got {type(numerator).__name__}: {numerator!r}")
            if not is_integer_like(denominator):
                raise TypeError(f"Denominator must be an integer, got {type(denominator).__name__}: {denominator!r}")
            if dtype is None:
                domain = common_domain(domain_of(numerator), domain_of(denominator))
            else:
                domain = fixed_width_domain(dtype)
            num, denom = domain.lift(numerator), domain.lift(denominator)
        self._num, self._denom = normalize(num, denom, domain)
        self._domain = domain

    @classmethod
    def _from_canonical(
        cls,
        num: int,
        denom: int,
        domain: IntegerDomain = PYTHON_INT_DOMAIN,
    ) -> Self:
        result = cls.__new__(cls)
        result._num = num
        result._denom = denom
        result._domain = domain
        return result

    @classmethod
    def _from_pair(
        cls,
        num: int,
        denom: int,
        domain: IntegerDomain = PYTHON_INT_DOMAIN,
    ) -> Self:
        """Normalize a pair of ints that are already representable in ``domain``."""
        num, denom = normalize(num, denom, domain)
        return cls._from_canonical(num, denom, domain)

    @classmethod
    def _from_category(cls, category: Category, domain: IntegerDomain = PYTHON_INT_DOMAIN) -> Self:
        assert category != Category.FINITE, "Internal error: finite values have no unique representative"
        pairs = {
            Category.POS_INF: (1, 0),
            Category.NEG_INF: (-1, 0),
            Category.NAN: (0, 0),
        }
        return cls._from_canonical(*pairs[category], domain)

    @classmethod
    def infinity(cls, sign: int = 1, dtype: Any = None) -> Self:
        domain = PYTHON_INT_DOMAIN if dtype is None else fixed_width_domain(dtype)
        return cls._from_category(Category.NEG_INF if sign < 0 else Category.POS_INF, domain)

    @classmethod
    def nan(cls, dtype: Any = None) -> Self:
        domain = PYTHON_INT_DOMAIN if dtype is None else fixed_width_domain(dtype)
        return cls._from_category(Category.NAN, domain)

    @classmethod
    def zero(cls, dtype: Any = None) -> Self:
        domain = PYTHON_INT_DOMAIN if dtype is None else fixed_width_domain(dtype)
        return cls._from_canonical(0, 1, domain)

    @classmethod
    def one(cls, dtype: Any = None) -> Self:
        domain = PYTHON_INT_DOMAIN if dtype is None else fixed_width_domain(dtype)
        return cls._from_canonical(1, 1, domain)

    @classmethod
    def from_fraction(cls, value: Fraction, dtype: Any = None) -> Self:
        if not isinstance(value, Fraction):
            raise TypeError(f"Expected fractions.Fraction, got {type(value).__name__}")
        return cls(value.numerator, value.denominator, dtype=dtype)

    @property
    def numerator(self) -> Any:
        return self._domain.box(self._num)

    @property
    def denominator(self) -> Any:
        return self._domain.box(self._denom)

    @property
    def domain(self) -> IntegerDomain:
        return self._domain

    @property
    def category(self) -> Category:
        return classify(self._num, self._denom)

    def is_finite(self) -> bool:
        return self._denom != 0

    def is_infinite(self) -> bool:
        return self._denom == 0 and self._num != 0

    def is_nan(self) -> bool:
        return self._denom == 0 and self._num == 0

    def is_zero(self) -> bool:
        return self._num == 0 and self._denom == 1

    def is_integer(self) -> bool:
        return self._denom == 1

    def as_fraction(self) -> Fraction:
        if not self.is_finite():
            raise ValueError(f"{self} has no fractions.Fraction representation")
        return Fraction(self._num, self._denom)

    def copy(self) -> Self:
        return self._from_canonical(self._num, self._denom, self._domain)

    def _assign(self, other: ExtendedRational) -> Self:
        self._num = other._num
        self._denom = other._denom
        self._domain = other._domain
        return self

    def reciprocal(self) -> None:
        """Replace this value by its reciprocal in place. Zero becomes +inf, both infinities become zero."""
        from extfrac.functional.arithmetic import reciprocal
        self._assign(reciprocal(self))

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.copy()

    def __str__(self) -> str:
        category = self.category
        if category == Category.POS_INF:
            return "inf"
        if category == Category.NEG_INF:
            return "-inf"
        if category == Category.NAN:
            return "nan"
        if self._denom == 1:
            return str(self._num)
        return f"{self._num}/{self._denom}"

    def __repr__(self) -> str:
        if self._domain == PYTHON_INT_DOMAIN:
            return f"{self.__class__.__name__}({self._num}, {self._denom})"
        return f"{self.__class__.__name__}({self._num}, {self._denom}, dtype={self._domain.name})"

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __mul__(self, other: IntegerLike | ExtendedRational) -> ExtendedRational:
        from extfrac.functional.arithmetic import multiply
        if not _is_operand(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other: IntegerLike) -> ExtendedRational:
        from extfrac.functional.arithmetic import multiply
        if not _is_operand(other):
            return NotImplemented
        return multiply(other, self)

    def __imul__(self, other: IntegerLike | ExtendedRational) -> Self:
        from extfrac.functional.arithmetic import multiply
        if not _is_operand(other):
            return NotImplemented
        return self._assign(multiply(self, other))

    def __truediv__(self, other: IntegerLike | ExtendedRational) -> ExtendedRational:
        from extfrac.functional.arithmetic import divide
        if not _is_operand(other):
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other: IntegerLike) -> ExtendedRational:
        from extfrac.functional.arithmetic import divide
        if not _is_operand(other):
            return NotImplemented
        return divide(other, self)

    def __itruediv__(self, other: IntegerLike | ExtendedRational) -> Self:
        from extfrac.functional.arithmetic import divide
        if not _is_operand(other):
            return NotImplemented
        return self._assign(divide(self, other))

    def __add__(self, other: IntegerLike | ExtendedRational) -> ExtendedRational:
        from extfrac.functional.arithmetic import add
        if not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: IntegerLike) -> ExtendedRational:
        from extfrac.functional.arithmetic import add
        if not _is_operand(other):
            return NotImplemented
        return add(other, self)

    def __iadd__(self, other: IntegerLike | ExtendedRational) -> Self:
        from extfrac.functional.arithmetic import add
        if not _is_operand(other):
            return NotImplemented
        return self._assign(add(self, other))

    def __sub__(self, other: IntegerLike | ExtendedRational) -> ExtendedRational:
        from extfrac.functional.arithmetic import subtract
        if not _is_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other: IntegerLike) -> ExtendedRational:
        from extfrac.functional.arithmetic import subtract
        if not _is_operand(other):
            return NotImplemented
        return subtract(other, self)

    def __isub__(self, other: IntegerLike | ExtendedRational) -> Self:
        from extfrac.functional.arithmetic import subtract
        if not _is_operand(other):
            return NotImplemented
        return self._assign(subtract(self, other))

    def __neg__(self) -> ExtendedRational:
        from extfrac.functional.arithmetic import negative
        return negative(self)

    def __pos__(self) -> ExtendedRational:
        return self.copy()

    def __abs__(self) -> ExtendedRational:
        from extfrac.functional.arithmetic import absolute
        return absolute(self)

    def __pow__(self, other: IntegerLike) -> ExtendedRational:
        from extfrac.functional.arithmetic import power
        if not is_integer_like(other):
            return NotImplemented
        return power(self, other)

    def __eq__(self, other: object) -> bool:
        from extfrac.functional.comparison import eq
        if not _is_operand(other):
            return NotImplemented
        return eq(self, other)  # type: ignore[arg-type]

    def __ne__(self, other: object) -> bool:
        from extfrac.functional.comparison import ne
        if not _is_operand(other):
            return NotImplemented
        return ne(self, other)  # type: ignore[arg-type]

    def __lt__(self, other: IntegerLike | ExtendedRational) -> bool:
        from extfrac.functional.comparison import lt
        if not _is_operand(other):
            return NotImplemented
        return lt(self, other)

    def __le__(self, other: IntegerLike | ExtendedRational) -> bool:
        from extfrac.functional.comparison import le
        if not _is_operand(other):
            return NotImplemented
        return le(self, other)

    def __gt__(self, other: IntegerLike | ExtendedRational) -> bool:
        from extfrac.functional.comparison import gt
        if not _is_operand(other):
            return NotImplemented
        return gt(self, other)

    def __ge__(self, other: IntegerLike | ExtendedRational) -> bool:
        from extfrac.functional.comparison import ge
        if not _is_operand(other):
            return NotImplemented
        return ge(self, other)


def _is_operand(x: Any) -> bool:
    return isinstance(x, ExtendedRational) or is_integer_like(x)
