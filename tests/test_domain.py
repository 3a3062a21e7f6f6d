import logging

import numpy as np
import pytest

from extfrac import (
    ExtendedRational as Fraction,
    FixedWidthDomain,
    FixedWidthOverflowError,
    PythonIntegerDomain,
    get_overflow_policy,
    overflow_policy,
    set_overflow_policy,
)
from extfrac.core.domain import PYTHON_INT_DOMAIN, common_domain, domain_of, fixed_width_domain


def test_python_ints_never_overflow():
    big = Fraction(2**100, 3)
    assert big * big == Fraction(2**200, 9)
    assert big.domain == PythonIntegerDomain()


def test_domain_of():
    assert domain_of(3) == PYTHON_INT_DOMAIN
    assert domain_of(np.int16(3)) == FixedWidthDomain(np.int16)
    with pytest.raises(TypeError):
        domain_of(3.0)  # type: ignore


def test_fixed_width_domain_rejects_non_signed_dtypes():
    with pytest.raises(TypeError):
        FixedWidthDomain(np.uint8)  # type: ignore
    with pytest.raises(TypeError):
        FixedWidthDomain(np.float64)  # type: ignore
    with pytest.raises(TypeError):
        Fraction(np.uint8(3))  # type: ignore


def test_numpy_scalars_select_fixed_width_domain():
    p = Fraction(np.int32(3), np.int32(-6))
    assert p.domain == fixed_width_domain(np.int32)
    assert p.numerator == -1
    assert p.denominator == 2
    assert isinstance(p.numerator, np.int32)
    assert isinstance(p.denominator, np.int32)


def test_dtype_keyword():
    p = Fraction(3, 4, dtype=np.int16)
    assert p.domain == FixedWidthDomain(np.int16)
    assert isinstance(p.numerator, np.int16)


def test_python_int_adopts_fixed_width_domain():
    p = Fraction(3, 4, dtype=np.int8)
    result = p + 1
    assert result == Fraction(7, 4)
    assert result.domain == FixedWidthDomain(np.int8)


def test_fixed_width_domains_are_promoted():
    a = Fraction(np.int8(1), np.int8(2))
    b = Fraction(np.int32(1), np.int32(3))
    result = a + b
    assert result == Fraction(5, 6)
    assert result.domain == FixedWidthDomain(np.int32)
    assert isinstance(result.numerator, np.int32)


def test_common_domain():
    int8 = fixed_width_domain(np.int8)
    int64 = fixed_width_domain(np.int64)
    assert common_domain(PYTHON_INT_DOMAIN, PYTHON_INT_DOMAIN) == PYTHON_INT_DOMAIN
    assert common_domain(PYTHON_INT_DOMAIN, int8) == int8
    assert common_domain(int64, PYTHON_INT_DOMAIN) == int64
    assert common_domain(int8, int64) == int64


def test_promotion_is_logged(caplog):
    int8 = fixed_width_domain(np.int8)
    int16 = fixed_width_domain(np.int16)
    with caplog.at_level(logging.DEBUG, logger="extfrac.core.domain"):
        common_domain(int8, int16)
    assert "promoting" in caplog.text


def test_checked_overflow_raises():
    assert get_overflow_policy() == "checked"
    a = Fraction(np.int8(100))
    with pytest.raises(FixedWidthOverflowError):
        a + a
    with pytest.raises(OverflowError):
        a * 2


def test_checked_overflow_on_lift():
    p = Fraction(1, 2, dtype=np.int8)
    with pytest.raises(FixedWidthOverflowError):
        p + 1000


def test_wrapping_overflow():
    a = Fraction(np.int8(100))
    with overflow_policy("wrapping"):
        result = a + a
    assert result == Fraction(-56)
    assert isinstance(result.numerator, np.int8)
    assert get_overflow_policy() == "checked"


def test_wrapping_overflow_is_logged(caplog):
    a = Fraction(np.int8(100))
    with caplog.at_level(logging.DEBUG, logger="extfrac.core.domain"):
        with overflow_policy("wrapping"):
            a + a
    assert "wrapped" in caplog.text


def test_overflow_policy_restored_after_exception():
    with pytest.raises(RuntimeError):
        with overflow_policy("wrapping"):
            raise RuntimeError("boom")
    assert get_overflow_policy() == "checked"


def test_unknown_overflow_policy():
    with pytest.raises(ValueError):
        set_overflow_policy("saturating")  # type: ignore


def test_unrepresentable_denominator():
    """2**(bits-1) cannot be a positive int8 denominator under any policy"""
    with pytest.raises(FixedWidthOverflowError):
        Fraction(np.int8(1), np.int8(-128))
    with overflow_policy("wrapping"):
        with pytest.raises(FixedWidthOverflowError):
            Fraction(np.int8(1), np.int8(-128))


def test_cross_cancellation_avoids_intermediate_overflow():
    """(64/3) * (3/64) fits int8 because factors are cancelled before multiplying"""
    a = Fraction(np.int8(64), np.int8(3))
    b = Fraction(np.int8(3), np.int8(64))
    assert a * b == 1


def test_comparison_never_overflows():
    a = Fraction(np.int8(127), np.int8(2))
    b = Fraction(np.int8(126), np.int8(127))
    # 127 * 127 does not fit int8
    assert b < a
    assert a > 63
    assert a < 64
    assert Fraction(np.int8(-127), np.int8(2)) < Fraction(np.int8(1), np.int8(127))
    assert Fraction(np.int8(127)) > Fraction(np.int8(126))
    assert Fraction(np.int8(-128)) < Fraction(np.int8(-127), np.int8(126))


def test_division_by_zero_in_fixed_width_domain():
    p = Fraction(np.int16(-3), np.int16(4))
    result = p / 0
    assert result == Fraction(-1, 0)
    assert result.domain == FixedWidthDomain(np.int16)


def test_division_by_minimum_value():
    """1 / -128 does not fit int8, but 64 / -128 does"""
    a = Fraction(64, dtype=np.int8)
    b = Fraction(-128, dtype=np.int8)
    result = a / b
    assert result == Fraction(-1, 2)
    assert result.domain == FixedWidthDomain(np.int8)
    assert b / b == 1
    assert Fraction(np.int8(-128)) / np.int8(-64) == 2
    assert 0 / b == 0


def test_division_of_minimum_value():
    b = Fraction(-128, dtype=np.int8)
    assert b / Fraction(np.int8(4), np.int8(3)) == -96
    with pytest.raises(FixedWidthOverflowError):
        b / Fraction(np.int8(2), np.int8(3))
    assert b / Fraction(np.int8(-64), np.int8(5)) == 10
    with pytest.raises(FixedWidthOverflowError):
        b / -1


def test_subtraction_of_minimum_value():
    """-1 - (-128) fits int8 even though -(-128) does not"""
    a = Fraction(-1, dtype=np.int8)
    b = Fraction(-128, dtype=np.int8)
    result = a - b
    assert result == 127
    assert isinstance(result.numerator, np.int8)
    assert b - b == 0
    assert Fraction(np.int8(-1), np.int8(2)) - Fraction(np.int8(-127), np.int8(2)) == 63
    with pytest.raises(FixedWidthOverflowError):
        Fraction(np.int8(0)) - b


def test_minimum_value_with_infinities():
    b = Fraction(-128, dtype=np.int8)
    inf = Fraction.infinity(dtype=np.int8)
    assert b / inf == 0
    assert b - inf == Fraction.infinity(-1)
    assert inf - b == inf
    assert b / 0 == Fraction.infinity(-1)
    assert (inf / b).is_infinite()
    assert inf / b == Fraction.infinity(-1)


def test_inplace_subtract_and_divide_by_minimum_value():
    b = Fraction(-128, dtype=np.int8)
    p = Fraction(-1, dtype=np.int8)
    p -= b
    assert p == 127
    q = Fraction(64, dtype=np.int8)
    q /= b
    assert q == Fraction(-1, 2)
