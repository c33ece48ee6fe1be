from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NoReturn

from guardagainst.types import Annotations


class FailureKind(str, Enum):
    NULL_ARGUMENT = "NULL_ARGUMENT"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_OPERATION = "INVALID_OPERATION"
    PLATFORM_NOT_SUPPORTED = "PLATFORM_NOT_SUPPORTED"


@dataclass(frozen=True)
class Failure:
    """A violated precondition.

    ``actual_value`` is only meaningful for ``OUT_OF_RANGE``; ``argument_name``
    is never set for ``INVALID_OPERATION`` or ``PLATFORM_NOT_SUPPORTED``.
    """

    kind: FailureKind
    argument_name: str | None = None
    message: str | None = None
    actual_value: object = None
    annotations: dict[object, object] = field(default_factory=dict)


def null_if_whitespace(text: str | None) -> str | None:
    if text is None or not text.strip():
        return None
    return text


def build_failure(
    kind: FailureKind,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
    actual_value: object = None,
) -> Failure:
    """Build a complete failure in one step.

    Blank names and messages become ``None``; annotations are copied only when
    a non-empty mapping is supplied.
    """
    return Failure(
        kind=kind,
        argument_name=null_if_whitespace(argument_name),
        message=null_if_whitespace(message),
        actual_value=actual_value if kind is FailureKind.OUT_OF_RANGE else None,
        annotations=dict(annotations) if annotations else {},
    )


class GuardError(Exception):
    """Base class for every error raised by a guard."""

    def __init__(self, failure: Failure) -> None:
        super().__init__(*([failure.message] if failure.message else []))
        self.failure = failure

    def __reduce__(self) -> tuple[type[GuardError], tuple[Failure]]:
        return (type(self), (self.failure,))

    @property
    def kind(self) -> FailureKind:
        return self.failure.kind

    @property
    def argument_name(self) -> str | None:
        return self.failure.argument_name

    @property
    def message(self) -> str | None:
        return self.failure.message

    @property
    def actual_value(self) -> object:
        return self.failure.actual_value

    @property
    def annotations(self) -> dict[object, object]:
        return self.failure.annotations

    def __str__(self) -> str:
        parts: list[str] = []
        if self.failure.message:
            parts.append(self.failure.message)
        if self.failure.argument_name:
            parts.append(f"(argument '{self.failure.argument_name}')")
        return " ".join(parts)


class ArgumentError(GuardError, ValueError):
    pass


class ArgumentNullError(ArgumentError):
    pass


class ArgumentOutOfRangeError(ArgumentError):
    pass


class InvalidOperationError(GuardError, RuntimeError):
    pass


class PlatformNotSupportedError(GuardError, RuntimeError):
    """The running platform is unsupported; not meant to be caught and retried."""


_ERROR_FOR_KIND: dict[FailureKind, type[GuardError]] = {
    FailureKind.NULL_ARGUMENT: ArgumentNullError,
    FailureKind.INVALID_ARGUMENT: ArgumentError,
    FailureKind.OUT_OF_RANGE: ArgumentOutOfRangeError,
    FailureKind.INVALID_OPERATION: InvalidOperationError,
    FailureKind.PLATFORM_NOT_SUPPORTED: PlatformNotSupportedError,
}


def error_for(failure: Failure) -> GuardError:
    return _ERROR_FOR_KIND[failure.kind](failure)


def raise_failure(
    kind: FailureKind,
    argument_name: str | None = None,
    message: str | None = None,
    annotations: Annotations | None = None,
    actual_value: object = None,
) -> NoReturn:
    raise error_for(
        build_failure(kind, argument_name, message, annotations, actual_value)
    )
