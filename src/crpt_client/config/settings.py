from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.domain.enums import TimeUnit
from .urls import DEFAULT_BASE_URL


class AppConfig(BaseSettings):
    """Application configuration with automatic environment variable loading.

    All settings can be overridden via environment variables with the CRPT_CLIENT_ prefix.
    For example:
        - CRPT_CLIENT_AUTH_TOKEN=eyJhbGciOi...
        - CRPT_CLIENT_REQUEST_LIMIT=5
        - CRPT_CLIENT_TIME_UNIT=minutes
        - CRPT_CLIENT_WINDOW_SECONDS=0.5

    Alternatively, settings can be provided programmatically:
        client = CrptClient(time_unit=TimeUnit.MINUTES, request_limit=5)
    """

    model_config = SettingsConfigDict(
        env_prefix="CRPT_CLIENT_",
        case_sensitive=False,
        extra="forbid",
    )

    auth_token: Optional[str] = Field(
        default=None,
        description="Bearer token from /api/v3/auth/cert/ (valid for 10 hours)",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API host; the documents/create path is appended",
    )

    request_limit: int = Field(
        default=10,
        ge=1,
        description="Maximum number of document submissions per window",
    )

    time_unit: TimeUnit = Field(
        default=TimeUnit.SECONDS,
        description="Window length as one time unit (seconds, minutes, hours, days)",
    )

    window_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description="Explicit window length in seconds. Takes precedence over time_unit",
    )

    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        allow_inf_nan=False,
        description="HTTP timeout for API calls",
    )

    def effective_window_seconds(self) -> float:
        if self.window_seconds is not None:
            return self.window_seconds
        return self.time_unit.seconds
