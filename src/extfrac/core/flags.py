from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, Literal

OverflowPolicy = Literal["checked", "wrapping"]

"""Overflow policy of fixed-width integer domains. "checked" raises FixedWidthOverflowError whenever a primitive
integer operation leaves the range of the dtype, "wrapping" wraps around in two's complement and re-normalizes.
Python int domains are arbitrary precision and ignore this flag.
"""
OVERFLOW_POLICY: OverflowPolicy = "checked"

_VALID_POLICIES: tuple[str, ...] = ("checked", "wrapping")


def get_overflow_policy() -> OverflowPolicy:
    return OVERFLOW_POLICY


def set_overflow_policy(policy: OverflowPolicy) -> None:
    global OVERFLOW_POLICY
    if policy not in _VALID_POLICIES:
        raise ValueError(f"Unknown overflow policy {policy!r}, expected one of {_VALID_POLICIES}")
    OVERFLOW_POLICY = policy


@contextmanager
def overflow_policy(policy: OverflowPolicy) -> Iterator[None]:
    """Temporarily switch the overflow policy of fixed-width domains.

    >>> with overflow_policy("wrapping"):
    ...     pass
    """
    prev_policy = get_overflow_policy()
    set_overflow_policy(policy)
    try:
        yield
    finally:
        set_overflow_policy(prev_policy)
