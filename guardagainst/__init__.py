"""Guard clauses for argument and operation preconditions.

Each guard checks one precondition, returns the value unchanged when it holds,
and raises a typed ``GuardError`` carrying a ``Failure`` when it does not::

    name = argument_being_null_or_whitespace(name, "name", "Name is required.")
"""
from __future__ import annotations

from guardagainst.errors import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    Failure,
    FailureKind,
    GuardError,
    InvalidOperationError,
    PlatformNotSupportedError,
)
from guardagainst.guards import (
    argument_being_empty,
    argument_being_greater_than_maximum,
    argument_being_invalid,
    argument_being_invalid_enum,
    argument_being_less_than_minimum,
    argument_being_null,
    argument_being_null_or_empty,
    argument_being_null_or_greater_than_maximum,
    argument_being_null_or_less_than_minimum,
    argument_being_null_or_out_of_range,
    argument_being_null_or_whitespace,
    argument_being_out_of_range,
    argument_being_unspecified_datetime,
    argument_being_whitespace,
    argument_not_being_utc_datetime,
    operation_being_invalid,
    platform_not_supported,
)
from guardagainst.models import DateTimeKind, Platform

__all__ = [
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "DateTimeKind",
    "Failure",
    "FailureKind",
    "GuardError",
    "InvalidOperationError",
    "Platform",
    "PlatformNotSupportedError",
    "argument_being_empty",
    "argument_being_greater_than_maximum",
    "argument_being_invalid",
    "argument_being_invalid_enum",
    "argument_being_less_than_minimum",
    "argument_being_null",
    "argument_being_null_or_empty",
    "argument_being_null_or_greater_than_maximum",
    "argument_being_null_or_less_than_minimum",
    "argument_being_null_or_out_of_range",
    "argument_being_null_or_whitespace",
    "argument_being_out_of_range",
    "argument_being_unspecified_datetime",
    "argument_being_whitespace",
    "argument_not_being_utc_datetime",
    "operation_being_invalid",
    "platform_not_supported",
]
