"""Environment-driven settings for building an :class:`~alertlogic.client.AlertLogic`."""

from __future__ import annotations

from typing import Any

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .clients.base import DEFAULT_BASE_URL

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _secret(value: SecretStr | None) -> str | None:
    return value.get_secret_value() if value is not None else None


class AlertLogicSettings(BaseSettings):
    """Runtime settings exposed via ``ALERTLOGIC_*`` environment variables.

    Credential resolution order when building a client is: ``api_token``,
    then ``access_key_id``/``secret_key``, then ``username``/``password``.
    """

    account_id: str = Field(default="", description="Alert Logic account id")
    api_token: SecretStr | None = Field(default=None, description="Existing AIMS token")
    username: str | None = Field(default=None, description="AIMS username or email")
    password: SecretStr | None = None
    access_key_id: str | None = Field(default=None, description="AIMS access key id")
    secret_key: SecretStr | None = None
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Cloud Insight API root")
    timeout: float = Field(default=60.0, description="HTTP timeout in seconds")
    log_level: str = Field(default="WARNING", description="Log level used by the CLI")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ALERTLOGIC_",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _check_log_level(cls, value: Any) -> str:
        level = str(value).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def api_token_value(self) -> str | None:
        return _secret(self.api_token)

    @property
    def password_value(self) -> str | None:
        return _secret(self.password)

    @property
    def secret_key_value(self) -> str | None:
        return _secret(self.secret_key)


__all__ = ["LOG_LEVELS", "AlertLogicSettings"]
