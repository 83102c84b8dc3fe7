"""domainaddr configuration from environment variables."""

from __future__ import annotations

import os


def _env_flag(name: str, default: str = "") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings:
    """CLI settings, read from environment variables with defaults."""

    def __init__(self) -> None:
        self.log_level: str = os.getenv("DOMAINADDR_LOG_LEVEL", "WARNING").upper()
        self.debug: bool = _env_flag("DOMAINADDR_DEBUG")
        self.json_output: bool = _env_flag("DOMAINADDR_JSON")
