from __future__ import annotations

import os
from dataclasses import dataclass

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Presentation settings for failure reporting, loaded from the environment.

    The guards themselves never read these.
    """

    log_level: str
    expose_values: bool

    @staticmethod
    def from_env() -> Settings:
        prefix = "GUARDAGAINST_"
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "INFO").strip().upper() or "INFO"
        raw_expose = os.getenv(f"{prefix}EXPOSE_VALUES", "true").strip().lower()
        return Settings(
            log_level=log_level, expose_values=raw_expose not in _FALSE_VALUES
        )
