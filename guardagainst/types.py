from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Protocol, Self, TypeVar

Annotations = Mapping[object, object]
Condition = bool | Callable[[], object]


class Comparable(Protocol):
    """Minimal ordering interface required by the range guards."""

    def __lt__(self, other: Self, /) -> bool: ...

    def __gt__(self, other: Self, /) -> bool: ...


C = TypeVar("C", bound=Comparable)
