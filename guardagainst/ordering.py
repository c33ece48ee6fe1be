"""Ordering used by the range guards.

Text is always compared ordinally (by code point, bytes by byte value), never
by locale collation. Every other type uses its natural ordering, with NaN
sorted below every other value; pairs with no order at all raise TypeError.
"""
from __future__ import annotations

from functools import singledispatch

from guardagainst.types import Comparable


def _is_nan(value: Comparable) -> bool:
    return value != value


def _natural(left: Comparable, right: Comparable) -> int:
    if left < right:
        return -1
    if left > right:
        return 1
    if left == right:
        return 0
    # NaN sorts below every other value and equal to itself.
    left_nan, right_nan = _is_nan(left), _is_nan(right)
    if left_nan and right_nan:
        return 0
    if left_nan:
        return -1
    if right_nan:
        return 1
    raise TypeError(f"{left!r} and {right!r} have no defined order")


@singledispatch
def compare(left: Comparable, right: Comparable) -> int:
    return _natural(left, right)


@compare.register
def _compare_text(left: str, right: str) -> int:
    if not isinstance(right, str):
        return _natural(left, right)
    # str subclasses may override the rich comparisons; bypass them.
    if str.__lt__(left, right):
        return -1
    if str.__gt__(left, right):
        return 1
    return 0


@compare.register
def _compare_bytes(left: bytes, right: bytes) -> int:
    if not isinstance(right, bytes):
        return _natural(left, right)
    if bytes.__lt__(left, right):
        return -1
    if bytes.__gt__(left, right):
        return 1
    return 0


def is_less_than(value: Comparable, lower_bound: Comparable) -> bool:
    return compare(value, lower_bound) < 0


def is_more_than(value: Comparable, upper_bound: Comparable) -> bool:
    return compare(value, upper_bound) > 0


def is_in_range(
    value: Comparable, lower_bound: Comparable, upper_bound: Comparable
) -> bool:
    return compare(value, lower_bound) >= 0 and compare(value, upper_bound) <= 0
