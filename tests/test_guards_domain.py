from __future__ import annotations

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

import pytest

from guardagainst import (
    ArgumentError,
    DateTimeKind,
    Platform,
    PlatformNotSupportedError,
    argument_being_empty,
    argument_being_null_or_empty,
    argument_being_unspecified_datetime,
    argument_not_being_utc_datetime,
    platform_not_supported,
)
from guardagainst.models import current_platform, datetime_kind

UTC_NOW = datetime.now(timezone.utc)
LOCAL = datetime(2024, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
NAIVE = datetime(2024, 5, 1, 12, 0)


def test_datetime_kind() -> None:
    assert datetime_kind(UTC_NOW) is DateTimeKind.UTC
    assert datetime_kind(datetime(2024, 1, 1, tzinfo=ZoneInfo("UTC"))) is (
        DateTimeKind.UTC
    )
    assert datetime_kind(LOCAL) is DateTimeKind.LOCAL
    assert datetime_kind(NAIVE) is DateTimeKind.UNSPECIFIED
    # zero offset alone does not make a value UTC
    london_winter = datetime(2024, 1, 1, tzinfo=ZoneInfo("Europe/London"))
    assert datetime_kind(london_winter) is DateTimeKind.LOCAL


def test_unspecified_datetime() -> None:
    assert argument_being_unspecified_datetime(UTC_NOW) is UTC_NOW
    assert argument_being_unspecified_datetime(LOCAL) is LOCAL
    with pytest.raises(ArgumentError) as info:
        argument_being_unspecified_datetime(NAIVE, "when", None, {"a": "1"})
    assert info.value.argument_name == "when"
    assert info.value.annotations == {"a": "1"}


def test_not_utc_datetime() -> None:
    assert argument_not_being_utc_datetime(UTC_NOW) is UTC_NOW
    for value in (LOCAL, NAIVE):
        with pytest.raises(ArgumentError):
            argument_not_being_utc_datetime(value, "when")


def test_nil_uuid_is_empty() -> None:
    nil = UUID(int=0)
    with pytest.raises(ArgumentError):
        argument_being_empty(nil, "id")
    with pytest.raises(ArgumentError):
        argument_being_null_or_empty(nil, "id")
    value = uuid4()
    assert argument_being_empty(value) is value


def test_supported_platform_passes() -> None:
    assert platform_not_supported(Platform.LINUX, current_platform=Platform.LINUX) is (
        Platform.LINUX
    )
    assert (
        platform_not_supported(
            [Platform.WINDOWS, Platform.OSX], current_platform=Platform.OSX
        )
        is Platform.OSX
    )


def test_unsupported_platform_raises_with_annotations() -> None:
    with pytest.raises(PlatformNotSupportedError) as info:
        platform_not_supported(
            Platform.WINDOWS, None, {"a": "1"}, current_platform=Platform.LINUX
        )
    assert info.value.annotations == {"a": "1"}
    assert info.value.argument_name is None


def test_detected_platform_is_supported_when_listed() -> None:
    running = current_platform()
    if running is None:
        pytest.skip("unrecognised platform")
    assert platform_not_supported(running) is running
    others = [p for p in Platform if p is not running]
    with pytest.raises(PlatformNotSupportedError):
        platform_not_supported(others)


def test_unknown_platform_is_never_supported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("guardagainst.models.platform.system", lambda: "Plan9")
    assert current_platform() is None
    with pytest.raises(PlatformNotSupportedError):
        platform_not_supported(list(Platform))
