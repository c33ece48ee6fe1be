from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel

from guardagainst.errors import Failure, FailureKind

FailureCode = Literal[
    "NULL_ARGUMENT",
    "INVALID_ARGUMENT",
    "OUT_OF_RANGE",
    "INVALID_OPERATION",
    "PLATFORM_NOT_SUPPORTED",
]

_CODES: dict[FailureKind, FailureCode] = {
    FailureKind.NULL_ARGUMENT: "NULL_ARGUMENT",
    FailureKind.INVALID_ARGUMENT: "INVALID_ARGUMENT",
    FailureKind.OUT_OF_RANGE: "OUT_OF_RANGE",
    FailureKind.INVALID_OPERATION: "INVALID_OPERATION",
    FailureKind.PLATFORM_NOT_SUPPORTED: "PLATFORM_NOT_SUPPORTED",
}

_DEFAULT_TEXT: dict[FailureKind, str] = {
    FailureKind.NULL_ARGUMENT: "Value cannot be null.",
    FailureKind.INVALID_ARGUMENT: "Value does not fall within the expected range.",
    FailureKind.OUT_OF_RANGE: "Value was out of the range of valid values.",
    FailureKind.INVALID_OPERATION: "Operation is not valid due to the current state.",
    FailureKind.PLATFORM_NOT_SUPPORTED: "Operation is not supported on this platform.",
}


class FailureReport(BaseModel):
    error: str
    code: FailureCode
    argument_name: str | None = None
    message: str | None = None
    actual_value: str | None = None
    annotations: dict[str, str] = {}
    timestamp: datetime


def render_error(failure: Failure) -> str:
    """Render a failure for display, filling a missing message with default wording."""
    text = failure.message or _DEFAULT_TEXT[failure.kind]
    if failure.argument_name:
        return f"{text} (argument '{failure.argument_name}')"
    return text


def to_report(failure: Failure, include_value: bool = True) -> FailureReport:
    actual: str | None = None
    if include_value and failure.kind is FailureKind.OUT_OF_RANGE:
        actual = repr(failure.actual_value)
    return FailureReport(
        error=render_error(failure),
        code=_CODES[failure.kind],
        argument_name=failure.argument_name,
        message=failure.message,
        actual_value=actual,
        annotations={str(k): str(v) for k, v in failure.annotations.items()},
        timestamp=datetime.now(timezone.utc),
    )
