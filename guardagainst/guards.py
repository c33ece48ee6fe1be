"""Guard clauses.

Every guard returns its value unchanged when the precondition holds, so call
sites can rebind inline::

    port = argument_being_null_or_out_of_range(port, 1, 65535, "port")

and raises a ``GuardError`` subclass built from a ``Failure`` when it does not.
``argument_name`` and ``message`` are optional; blank strings are treated as
absent. ``annotations`` are copied onto the failure for diagnostics.

Guards hold no state, never log and never catch.
"""
from __future__ import annotations

from collections.abc import Collection, Iterable, Sized
from datetime import datetime
from enum import Enum
from itertools import chain
from typing import TypeVar, overload
from uuid import UUID

from guardagainst.errors import FailureKind, raise_failure
from guardagainst.models import DateTimeKind, Platform, datetime_kind
from guardagainst.models import current_platform as detect_platform
from guardagainst.ordering import is_in_range, is_less_than, is_more_than
from guardagainst.types import Annotations, C, Condition

T = TypeVar("T")
E = TypeVar("E", bound=Enum)
SizedT = TypeVar("SizedT", bound=Collection[object])

_NIL_UUID = UUID(int=0)


# Presence and text


def argument_being_null(
    value: T | None,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> T:
    if value is None:
        raise_failure(FailureKind.NULL_ARGUMENT, argument_name, message, annotations)
    return value


def argument_being_null_or_whitespace(
    value: str | None,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> str:
    """Reject ``None`` (null argument) and empty or all-whitespace text (invalid)."""
    if value is None:
        raise_failure(FailureKind.NULL_ARGUMENT, argument_name, message, annotations)
    if _is_blank(value):
        raise_failure(FailureKind.INVALID_ARGUMENT, argument_name, message, annotations)
    return value


def argument_being_whitespace(
    value: str | None,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> str | None:
    """Reject text that is empty or all whitespace; ``None`` passes."""
    if value is not None and _is_blank(value):
        raise_failure(FailureKind.INVALID_ARGUMENT, argument_name, message, annotations)
    return value


def _is_blank(text: str) -> bool:
    return not text or text.isspace()


@overload
def argument_being_null_or_empty(
    value: SizedT | None,
    argument_name: str | None = ...,
    message: str | None = ...,
    annotations: Annotations | None = ...,
) -> SizedT: ...


@overload
def argument_being_null_or_empty(
    value: UUID | None,
    argument_name: str | None = ...,
    message: str | None = ...,
    annotations: Annotations | None = ...,
) -> UUID: ...


@overload
def argument_being_null_or_empty(
    value: Iterable[T] | None,
    argument_name: str | None = ...,
    message: str | None = ...,
    annotations: Annotations | None = ...,
) -> Iterable[T]: ...


def argument_being_null_or_empty(
    value: object,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> object:
    """Reject ``None`` (null argument), then empty text, sequences or nil UUIDs.

    One-shot iterators are consumed by at most one element; the returned
    iterator yields the complete original sequence, so rebind the result.
    """
    if value is None:
        raise_failure(FailureKind.NULL_ARGUMENT, argument_name, message, annotations)
    empty, result = _emptiness(value)
    if empty:
        raise_failure(FailureKind.INVALID_ARGUMENT, argument_name, message, annotations)
    return result


@overload
def argument_being_empty(
    value: SizedT,
    argument_name: str | None = ...,
    message: str | None = ...,
    annotations: Annotations | None = ...,
) -> SizedT: ...


@overload
def argument_being_empty(
    value: UUID,
    argument_name: str | None = ...,
    message: str | None = ...,
    annotations: Annotations | None = ...,
) -> UUID: ...


@overload
def argument_being_empty(
    value: Iterable[T],
    argument_name: str | None = ...,
    message: str | None = ...,
    annotations: Annotations | None = ...,
) -> Iterable[T]: ...


@overload
def argument_being_empty(
    value: None,
    argument_name: str | None = ...,
    message: str | None = ...,
    annotations: Annotations | None = ...,
) -> None: ...


def argument_being_empty(
    value: object,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> object:
    """Reject empty text, sequences or nil UUIDs; ``None`` passes."""
    if value is None:
        return None
    empty, result = _emptiness(value)
    if empty:
        raise_failure(FailureKind.INVALID_ARGUMENT, argument_name, message, annotations)
    return result


def _emptiness(value: object) -> tuple[bool, object]:
    if isinstance(value, UUID):
        return value == _NIL_UUID, value
    if isinstance(value, Sized):
        return len(value) == 0, value
    if not isinstance(value, Iterable):
        raise TypeError(
            f"expected text, a sized collection, an iterable or a UUID, "
            f"got {type(value).__name__}"
        )
    iterator = iter(value)
    for first in iterator:
        if iterator is value:
            return False, chain((first,), iterator)
        return False, value
    return True, value


# Ordering


def _required_bound(
    bound: C | None, bound_name: str, annotations: Annotations | None
) -> C:
    if bound is None:
        raise_failure(FailureKind.NULL_ARGUMENT, bound_name, None, annotations)
    return bound


def argument_being_less_than_minimum(
    value: C | None,
    minimum_allowed_value: C | None,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> C | None:
    """Reject a value below ``minimum_allowed_value`` (inclusive bound).

    ``None`` values pass without inspecting the bound. A ``None`` bound on a
    present value raises a null-argument failure naming
    ``minimum_allowed_value``.
    """
    if value is None:
        return None
    minimum = _required_bound(
        minimum_allowed_value, "minimum_allowed_value", annotations
    )
    if is_less_than(value, minimum):
        raise_failure(
            FailureKind.OUT_OF_RANGE, argument_name, message, annotations, value
        )
    return value


def argument_being_null_or_less_than_minimum(
    value: C | None,
    minimum_allowed_value: C | None,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> C:
    if value is None:
        raise_failure(FailureKind.NULL_ARGUMENT, argument_name, message, annotations)
    minimum = _required_bound(
        minimum_allowed_value, "minimum_allowed_value", annotations
    )
    if is_less_than(value, minimum):
        raise_failure(
            FailureKind.OUT_OF_RANGE, argument_name, message, annotations, value
        )
    return value


def argument_being_greater_than_maximum(
    value: C | None,
    maximum_allowed_value: C | None,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> C | None:
    if value is None:
        return None
    maximum = _required_bound(
        maximum_allowed_value, "maximum_allowed_value", annotations
    )
    if is_more_than(value, maximum):
        raise_failure(
            FailureKind.OUT_OF_RANGE, argument_name, message, annotations, value
        )
    return value


def argument_being_null_or_greater_than_maximum(
    value: C | None,
    maximum_allowed_value: C | None,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> C:
    if value is None:
        raise_failure(FailureKind.NULL_ARGUMENT, argument_name, message, annotations)
    maximum = _required_bound(
        maximum_allowed_value, "maximum_allowed_value", annotations
    )
    if is_more_than(value, maximum):
        raise_failure(
            FailureKind.OUT_OF_RANGE, argument_name, message, annotations, value
        )
    return value


def argument_being_out_of_range(
    value: C | None,
    minimum_allowed_value: C | None,
    maximum_allowed_value: C | None,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> C | None:
    """Reject a value outside ``[minimum_allowed_value, maximum_allowed_value]``.

    Both bounds are inclusive. ``None`` values pass; ``None`` bounds are
    reported before any comparison, minimum first.
    """
    if value is None:
        return None
    minimum = _required_bound(
        minimum_allowed_value, "minimum_allowed_value", annotations
    )
    maximum = _required_bound(
        maximum_allowed_value, "maximum_allowed_value", annotations
    )
    if not is_in_range(value, minimum, maximum):
        raise_failure(
            FailureKind.OUT_OF_RANGE, argument_name, message, annotations, value
        )
    return value


def argument_being_null_or_out_of_range(
    value: C | None,
    minimum_allowed_value: C | None,
    maximum_allowed_value: C | None,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> C:
    if value is None:
        raise_failure(FailureKind.NULL_ARGUMENT, argument_name, message, annotations)
    minimum = _required_bound(
        minimum_allowed_value, "minimum_allowed_value", annotations
    )
    maximum = _required_bound(
        maximum_allowed_value, "maximum_allowed_value", annotations
    )
    if not is_in_range(value, minimum, maximum):
        raise_failure(
            FailureKind.OUT_OF_RANGE, argument_name, message, annotations, value
        )
    return value


# Conditions


def _holds(condition: Condition) -> bool:
    if callable(condition):
        return bool(condition())
    return bool(condition)


def argument_being_invalid(
    condition: Condition,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> None:
    """Raise an invalid-argument failure when ``condition`` is true.

    ``condition`` may be a zero-argument callable; it is called once.
    """
    if _holds(condition):
        raise_failure(FailureKind.INVALID_ARGUMENT, argument_name, message, annotations)


def operation_being_invalid(
    condition: Condition,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> None:
    """Raise an invalid-operation failure when ``condition`` is true."""
    if _holds(condition):
        raise_failure(FailureKind.INVALID_OPERATION, None, message, annotations)


def argument_being_invalid_enum(
    value: E,
    invalid_member: E,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> E:
    if value == invalid_member:
        raise_failure(FailureKind.INVALID_ARGUMENT, argument_name, message, annotations)
    return value


# Date, time and platform


def argument_being_unspecified_datetime(
    value: datetime,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> datetime:
    """Reject a naive datetime (no timezone information)."""
    if datetime_kind(value) is DateTimeKind.UNSPECIFIED:
        raise_failure(FailureKind.INVALID_ARGUMENT, argument_name, message, annotations)
    return value


def argument_not_being_utc_datetime(
    value: datetime,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
) -> datetime:
    """Reject any datetime that is not UTC, naive values included."""
    if datetime_kind(value) is not DateTimeKind.UTC:
        raise_failure(FailureKind.INVALID_ARGUMENT, argument_name, message, annotations)
    return value


def platform_not_supported(
    supported_platforms: Platform | Iterable[Platform],
    message: str | None = None,
    annotations: Annotations | None = None,
    current_platform: Platform | None = None,
) -> Platform:
    """Raise a fatal failure unless the running platform is supported.

    ``current_platform`` defaults to the detected platform; an unrecognised
    system is never supported. Returns the running platform.
    """
    if isinstance(supported_platforms, Platform):
        supported = {supported_platforms}
    else:
        supported = set(supported_platforms)
    running = current_platform if current_platform is not None else detect_platform()
    if running is None or running not in supported:
        raise_failure(FailureKind.PLATFORM_NOT_SUPPORTED, None, message, annotations)
    return running
