from __future__ import annotations
from typing import Callable
from extfrac.functional.arithmetic import add, divide, multiply, subtract


FUNCTION_DICT: dict[str, Callable] = {
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
}
