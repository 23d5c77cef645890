# backend/engine_backend/config.py
from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

log = logging.getLogger("engine_backend.config")

DEFAULT_PORT = 3001

# Environment variable -> settings field
_ENV_FIELDS = {
    "HOST": "host",
    "PORT": "port",
    "LOG_LEVEL": "log_level",
}


class ServiceSettings(BaseModel):
    """
    Listen settings for the backend process.
    - host: bind address, all interfaces unless HOST is set
    - port: TCP port, PORT or DEFAULT_PORT
    - log_level: root logger level name
    """
    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = Field(DEFAULT_PORT, ge=0, le=65535)
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Optional[str]) -> str:
        if value is None:
            return "INFO"
        if isinstance(value, str):
            name = value.strip().upper() or "INFO"
            # getLevelName maps known names to ints, anything else to "Level X"
            if isinstance(logging.getLevelName(name), int):
                return name
            raise ValueError(f"unknown log level: {value!r}")
        return value  # type: ignore[return-value]

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        default_port: int = DEFAULT_PORT,
    ) -> "ServiceSettings":
        """Build settings from ``environ`` (``os.environ`` by default).

        Empty values are treated as unset. An unparsable ``PORT`` raises
        ``pydantic.ValidationError``.
        """

        env = os.environ if environ is None else environ
        data: dict[str, object] = {"port": default_port}
        for var, field in _ENV_FIELDS.items():
            raw = env.get(var)
            if raw is not None and raw.strip():
                data[field] = raw.strip()
        settings = cls.model_validate(data)
        log.debug("Resolved settings: %s", settings.model_dump())
        return settings
