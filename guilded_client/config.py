from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE = "https://www.guilded.gg/api/v1"


class Settings(BaseSettings):
    """
    Environment-driven configuration.

    Loads from:
    - Process environment variables
    - Optional `.env` file in the working directory (if present)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    guilded_token: str = Field(..., validation_alias="GUILDED_TOKEN")
    guilded_api_base: str = Field(DEFAULT_API_BASE, validation_alias="GUILDED_API_BASE")
    # Unset means the httpx default timeout.
    http_timeout: Optional[float] = Field(None, validation_alias="GUILDED_HTTP_TIMEOUT")

    @model_validator(mode="after")
    def _normalize_and_validate(self) -> "Settings":
        log_level = (self.log_level or "INFO").upper().strip() or "INFO"
        object.__setattr__(self, "log_level", log_level)

        guilded_token = (self.guilded_token or "").strip()
        object.__setattr__(self, "guilded_token", guilded_token)

        api_base = (self.guilded_api_base or "").strip() or DEFAULT_API_BASE
        object.__setattr__(self, "guilded_api_base", api_base.rstrip("/"))

        errors: list[str] = []
        if not self.guilded_token:
            errors.append("Missing GUILDED_TOKEN.")
        if not self.guilded_api_base.startswith(("http://", "https://")):
            errors.append("GUILDED_API_BASE must be an http(s) URL.")
        if self.http_timeout is not None and self.http_timeout <= 0:
            errors.append("GUILDED_HTTP_TIMEOUT must be > 0.")
        if self.log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            errors.append("LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL.")

        if errors:
            raise ValueError(" ".join(errors))

        return self
