from fractions import Fraction as PyFraction

from extfrac import ExtendedRational as Fraction
from extfrac import compare, sort_key
from utils import finite_values, special_values


def test_comparison_operators():
    assert Fraction(1, 2) < Fraction(2, 3)
    assert Fraction(1, 2) <= Fraction(2, 3)
    assert Fraction(2, 3) > Fraction(1, 2)
    assert Fraction(2, 3) >= Fraction(1, 2)
    assert Fraction(1, 2) == Fraction(2, 4)
    assert Fraction(1, 2) != Fraction(2, 3)


def test_finite_order_is_total():
    """Exactly one of <, == and > holds, consistent with cross multiplication"""
    values = finite_values()
    for a in values:
        for b in values:
            outcomes = [a < b, a == b, a > b]
            assert sum(outcomes) == 1
            expected = PyFraction(a.numerator, a.denominator) < PyFraction(b.numerator, b.denominator)
            assert (a < b) == expected


def test_compare_returns_sign():
    assert compare(Fraction(1, 3), Fraction(1, 2)) == -1
    assert compare(Fraction(2, 4), Fraction(1, 2)) == 0
    assert compare(Fraction(1, 2), Fraction(1, 3)) == 1


def test_infinities_bound_finite_values():
    vals = special_values()
    for x in finite_values():
        assert vals["-inf"] < x < vals["inf"]


def test_nan_equals_nan():
    """Unlike IEEE floats, nan is equal to itself"""
    vals = special_values()
    assert vals["nan"] == Fraction(0, 0)
    assert not (vals["nan"] != Fraction(0, 0))
    assert vals["nan"] <= Fraction(0, 0)


def test_nan_is_greatest():
    vals = special_values()
    assert vals["inf"] < vals["nan"]
    assert vals["-inf"] < vals["nan"]
    assert Fraction(10**9) < vals["nan"]
    assert compare(vals["nan"], vals["inf"]) == 1


def test_sorting_is_well_defined():
    vals = special_values()
    p = Fraction(3, 4)
    unsorted = [vals["nan"], p, vals["inf"], vals["-inf"], vals["zero"], Fraction(-5, 2)]
    expected = [vals["-inf"], Fraction(-5, 2), vals["zero"], p, vals["inf"], vals["nan"]]
    assert sorted(unsorted) == expected
    assert sorted(unsorted, key=sort_key) == expected


def test_compare_with_integers():
    assert Fraction(4, 2) == 2
    assert 2 == Fraction(4, 2)
    assert Fraction(1, 2) < 1
    assert 0 < Fraction(1, 2)
    assert Fraction(1, 0) > 10**30
    assert Fraction(7, 2) != 3


def test_compare_with_other_types():
    """Non integer types are never equal"""
    assert not (Fraction(1, 2) == 0.5)
    assert Fraction(1, 2) != 0.5
    assert Fraction(1, 2) != "1/2"


def test_sort_key():
    vals = special_values()
    assert sort_key(vals["-inf"]) < sort_key(Fraction(-10**6)) < sort_key(Fraction(10**6)) < sort_key(vals["inf"])
    assert sort_key(vals["inf"]) < sort_key(vals["nan"])
    assert sort_key(Fraction(2, 4)) == sort_key(Fraction(1, 2))
