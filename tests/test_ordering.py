from __future__ import annotations

import math
from datetime import date

from guardagainst.ordering import compare, is_in_range, is_less_than, is_more_than


class ReversedText(str):
    def __lt__(self, other: object) -> bool:
        return str.__gt__(self, str(other))

    def __gt__(self, other: object) -> bool:
        return str.__lt__(self, str(other))


def test_text_compares_by_code_point() -> None:
    assert compare("A", "B") == -1
    assert compare("a", "B") == 1
    assert compare("é", "z") == 1
    assert compare("abc", "abc") == 0


def test_text_subclass_overrides_are_ignored() -> None:
    assert compare(ReversedText("A"), ReversedText("B")) == -1


def test_bytes_compare_by_byte_value() -> None:
    assert compare(b"a", b"B") == 1
    assert compare(b"", b"\x00") == -1


def test_natural_order_for_other_types() -> None:
    assert compare(1, 2) == -1
    assert compare(2.5, 2.5) == 0
    assert compare(date(2024, 2, 1), date(2024, 1, 1)) == 1


def test_helpers() -> None:
    assert is_less_than(1, 2)
    assert not is_less_than(2, 2)
    assert is_more_than(3, 2)
    assert is_in_range(2, 2, 2)
    assert not is_in_range(3, 1, 2)


def test_nan_sorts_below_numbers() -> None:
    assert compare(math.nan, 1.0) == -1
    assert compare(1.0, math.nan) == 1
    assert compare(math.nan, math.nan) == 0
    assert compare(-math.inf, math.nan) == 1
    assert not is_in_range(math.nan, 1.0, 10.0)
