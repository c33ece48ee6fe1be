from __future__ import annotations

import platform
from datetime import datetime, timedelta
from enum import Enum


class DateTimeKind(str, Enum):
    UTC = "utc"
    LOCAL = "local"
    UNSPECIFIED = "unspecified"


class Platform(str, Enum):
    WINDOWS = "Windows"
    LINUX = "Linux"
    OSX = "Darwin"
    FREEBSD = "FreeBSD"


def datetime_kind(value: datetime) -> DateTimeKind:
    """Classify a datetime by its timezone information.

    Naive values are unspecified. Aware values are UTC only when their offset
    is zero and their zone reports itself as ``UTC``; a zone that merely
    happens to sit at offset zero (Europe/London in winter) counts as local.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        return DateTimeKind.UNSPECIFIED
    if value.utcoffset() == timedelta(0) and value.tzname() == "UTC":
        return DateTimeKind.UTC
    return DateTimeKind.LOCAL


def current_platform() -> Platform | None:
    system = platform.system()
    for candidate in Platform:
        if candidate.value == system:
            return candidate
    return None
