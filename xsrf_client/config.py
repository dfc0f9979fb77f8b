from __future__ import annotations

from pydantic import AliasChoices, AnyHttpUrl, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class XsrfClientSettings(BaseSettings):
    """Client configuration loaded from environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="XSRF_CLIENT_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    cookie_name: str = Field(
        "XSRF-TOKEN=",
        description="Cookie carrying the XSRF token, including its trailing '='.",
    )
    header_name: str = Field("X-XSRF-TOKEN", description="Header the token is echoed in.")
    cookie: str | None = Field(
        default=None,
        description="Raw cookie string handed over by the host environment.",
        validation_alias=AliasChoices("XSRF_COOKIE", "XSRF_CLIENT_COOKIE"),
    )
    base_url: AnyHttpUrl | None = Field(
        default=None,
        description="Base URL relative request URLs are resolved against.",
    )
    timeout_ms: float | None = Field(
        default=None,
        gt=0,
        description="Default request timeout in milliseconds.",
    )

    log_level: str = Field("INFO", description="Root log level.")

    @model_validator(mode="before")
    @classmethod
    def _empty_strings_to_none(cls, values: dict[str, object]) -> dict[str, object]:
        for key in ("base_url", "timeout_ms"):
            if values.get(key) == "":
                values[key] = None
        return values

    @field_validator("cookie_name")
    @classmethod
    def _ensure_separator(cls, value: str) -> str:
        return value if value.endswith("=") else f"{value}="

    @property
    def base_url_str(self) -> str | None:
        return str(self.base_url) if self.base_url else None
