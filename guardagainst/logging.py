from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from guardagainst.errors import Failure, GuardError


def _failure_of(record: logging.LogRecord) -> Failure | None:
    attached = getattr(record, "failure", None)
    if isinstance(attached, Failure):
        return attached
    if record.exc_info and isinstance(record.exc_info[1], GuardError):
        return record.exc_info[1].failure
    return None


class StructuredFormatter(logging.Formatter):
    """JSON formatter with stable keys and guard failure context."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, object] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        failure = _failure_of(record)
        if failure is not None:
            data["failure_kind"] = failure.kind.value
            if failure.argument_name is not None:
                data["argument_name"] = failure.argument_name
            if failure.annotations:
                data["annotations"] = {
                    str(k): str(v) for k, v in failure.annotations.items()
                }

        return json.dumps(data, ensure_ascii=False)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging with the structured formatter; safe to call twice."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
