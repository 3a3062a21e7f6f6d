from extfrac import ExtendedRational


def get_commuted_function_list_from_op(op):
    def _fn0(x, y):
        return op(x, y)
    def _fn1(x, y):
        return op(y, x)
    return [
        _fn0,
        _fn1,
    ]


def special_values() -> dict[str, ExtendedRational]:
    """Fresh instances of the named special values, safe to mutate in a test."""
    return {
        "inf": ExtendedRational(1, 0),
        "-inf": ExtendedRational(-1, 0),
        "nan": ExtendedRational(0, 0),
        "zero": ExtendedRational(0, 1),
    }


def finite_values() -> list[ExtendedRational]:
    return [ExtendedRational(n, d) for n in range(-6, 7) for d in (1, 2, 3, 5, -4)]
