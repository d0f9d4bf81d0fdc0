from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("devhub")

DEFAULT_API_URL = "http://localhost:8080/api"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(slots=True)
class ClientConfig:
    """Connection settings for the DevHub REST API."""

    api_url: str = DEFAULT_API_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "ClientConfig":
        def _float_env(name: str, default: float) -> float:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return float(raw)
            except ValueError:
                logger.warning("Invalid number for %s: %s", name, raw)
                return default

        return cls(
            api_url=os.getenv("DEVHUB_API_URL") or DEFAULT_API_URL,
            timeout_seconds=_float_env("DEVHUB_HTTP_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
        )


__all__ = ["ClientConfig", "DEFAULT_API_URL", "DEFAULT_TIMEOUT_SECONDS"]
