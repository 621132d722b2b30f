"""OAuth2 token domain models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ClientCredentials:
    """Client id/secret pair for the client-credentials grant."""

    client_id: str
    client_secret: str


@dataclass(frozen=True)
class AccessToken:
    """Bearer token with its effective expiry."""

    value: str
    expires_at: datetime

    def is_valid(self, now: datetime) -> bool:
        """Return True while the token has not reached its expiry."""
        return self.expires_at > now
