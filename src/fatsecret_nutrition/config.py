"""Application configuration."""

import os
from dataclasses import dataclass
from typing import Protocol

from pydantic_settings import BaseSettings, SettingsConfigDict

from fatsecret_nutrition.domain.tokens import ClientCredentials

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    fatsecret_client_id: str | None = None
    fatsecret_client_secret: str | None = None
    fatsecret_token_url: str = "https://oauth.fatsecret.com/connect/token"
    fatsecret_api_url: str = "https://platform.fatsecret.com/rest/server.api"
    fatsecret_scope: str = "basic premier barcode localization"
    http_timeout_seconds: float = 15
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


class CredentialsProvider(Protocol):
    """Source of the OAuth2 client id/secret pair."""

    def get_credentials(self) -> ClientCredentials | None:
        """Return configured credentials, or None when unset."""


@dataclass
class SettingsCredentialsProvider(CredentialsProvider):
    """Credentials provider backed by application settings."""

    settings: Settings

    def get_credentials(self) -> ClientCredentials | None:
        """Return credentials if both values are configured."""
        client_id = (self.settings.fatsecret_client_id or "").strip()
        client_secret = (self.settings.fatsecret_client_secret or "").strip()
        if not client_id or not client_secret:
            return None
        return ClientCredentials(client_id=client_id, client_secret=client_secret)
