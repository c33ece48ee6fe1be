from __future__ import annotations

import asyncio
import json

import pytest

pytest.importorskip("fastapi")

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from starlette.requests import Request  # noqa: E402

from guardagainst import (  # noqa: E402
    argument_being_null_or_out_of_range,
    operation_being_invalid,
    platform_not_supported,
)
from guardagainst.errors import FailureKind, build_failure, error_for  # noqa: E402
from guardagainst.handlers import (  # noqa: E402
    guard_exception_handler,
    install_exception_handlers,
)
from guardagainst.models import Platform  # noqa: E402


def _req(path: str) -> Request:
    return Request({"type": "http", "method": "GET", "path": path, "headers": []})


def _create_app() -> FastAPI:
    app = FastAPI()
    install_exception_handlers(app)

    @app.get("/items/{count}")
    async def items(count: int) -> dict[str, int]:
        return {"count": argument_being_null_or_out_of_range(count, 1, 10, "count")}

    @app.post("/queue/close")
    async def close() -> dict[str, str]:
        operation_being_invalid(True, "Queue is already closed.")
        return {"status": "closed"}

    @app.get("/native")
    async def native() -> dict[str, str]:
        platform_not_supported([], current_platform=Platform.LINUX)
        return {"status": "ok"}

    return app


def test_handler_maps_argument_failures_to_422() -> None:
    exc = error_for(
        build_failure(FailureKind.OUT_OF_RANGE, "n", None, {"a": "1"}, actual_value=11)
    )
    resp = asyncio.run(guard_exception_handler(_req("/items"), exc))
    assert resp.status_code == 422
    body = json.loads(resp.body)
    assert body["code"] == "OUT_OF_RANGE"
    assert body["argument_name"] == "n"
    assert body["actual_value"] == "11"
    assert body["annotations"] == {"a": "1"}


def test_handler_hides_values_when_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUARDAGAINST_EXPOSE_VALUES", "0")
    exc = error_for(build_failure(FailureKind.OUT_OF_RANGE, "pin", actual_value=1234))
    resp = asyncio.run(guard_exception_handler(_req("/login"), exc))
    assert json.loads(resp.body)["actual_value"] is None


def test_handler_re_raises_for_unexpected() -> None:
    with pytest.raises(RuntimeError):
        asyncio.run(guard_exception_handler(_req("/items"), RuntimeError("boom")))


def test_installed_handler_renders_guard_failures() -> None:
    client = TestClient(_create_app())

    ok = client.get("/items/3")
    assert ok.status_code == 200
    assert ok.json() == {"count": 3}

    bad = client.get("/items/11")
    assert bad.status_code == 422
    assert bad.json()["code"] == "OUT_OF_RANGE"
    assert bad.json()["error"] == (
        "Value was out of the range of valid values. (argument 'count')"
    )

    closed = client.post("/queue/close")
    assert closed.status_code == 409
    assert closed.json()["code"] == "INVALID_OPERATION"
    assert closed.json()["argument_name"] is None

    native = client.get("/native")
    assert native.status_code == 500
    assert native.json()["code"] == "PLATFORM_NOT_SUPPORTED"
