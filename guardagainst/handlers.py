"""FastAPI integration: render guard failures as JSON error responses.

Requires the ``fastapi`` extra. Register with ``install_exception_handlers``.
"""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from guardagainst.config import Settings
from guardagainst.errors import FailureKind, GuardError
from guardagainst.logging import get_logger, setup_logging
from guardagainst.reports import to_report

_log = get_logger(__name__)


def _status_for(kind: FailureKind) -> int:
    if kind is FailureKind.INVALID_OPERATION:
        return 409
    if kind is FailureKind.PLATFORM_NOT_SUPPORTED:
        return 500
    return 422


async def guard_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, GuardError):
        raise exc
    settings = Settings.from_env()
    report = to_report(exc.failure, include_value=settings.expose_values)
    _log.warning(
        "guard failure on %s: %s",
        request.url.path,
        report.error,
        extra={"failure": exc.failure},
    )
    return JSONResponse(
        status_code=_status_for(exc.kind), content=report.model_dump(mode="json")
    )


def install_exception_handlers(app: FastAPI) -> None:
    setup_logging(Settings.from_env().log_level)
    app.add_exception_handler(GuardError, guard_exception_handler)
