"""OAuth2 client-credentials token management."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from fatsecret_nutrition.adapters.fatsecret_client import FatSecretClient
from fatsecret_nutrition.config import CredentialsProvider
from fatsecret_nutrition.domain.errors import ConfigurationError, UpstreamError
from fatsecret_nutrition.domain.tokens import AccessToken
from fatsecret_nutrition.services.cache import Cache, utc_now

TOKEN_CACHE_KEY = "fatsecret_token"

_logger = logging.getLogger(__name__)


@dataclass
class TokenService:
    """Obtains bearer tokens and reuses them until shortly before expiry."""

    client: FatSecretClient
    cache: Cache
    credentials: CredentialsProvider
    scope: str = "basic premier barcode localization"
    safety_margin_seconds: int = 60
    clock: Callable[[], datetime] = utc_now

    async def get_access_token(self) -> str:
        """Return a valid bearer token, requesting a new one when needed."""
        cached = self.cache.get(TOKEN_CACHE_KEY)
        if isinstance(cached, AccessToken) and cached.is_valid(self.clock()):
            _logger.debug("Using cached FatSecret access token")
            return cached.value

        credentials = self.credentials.get_credentials()
        if credentials is None:
            _logger.error("FatSecret API credentials not configured")
            raise ConfigurationError("FatSecret API credentials not configured")

        payload = await self.client.request_token(
            credentials.client_id, credentials.client_secret, self.scope
        )
        value = payload.get("access_token")
        if not isinstance(value, str) or not value:
            raise UpstreamError(
                "FatSecret token response missing access_token", status_code=200
            )
        expires_in = int(payload.get("expires_in") or 0)
        token = AccessToken(
            value=value,
            expires_at=self.clock()
            + timedelta(seconds=expires_in - self.safety_margin_seconds),
        )
        self.cache.set(TOKEN_CACHE_KEY, token, ttl_seconds=expires_in)
        _logger.info("Obtained new FatSecret access token")
        return token.value
