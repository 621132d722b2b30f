"""FatSecret Platform API client."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from fatsecret_nutrition.domain.errors import UpstreamError

_logger = logging.getLogger(__name__)


class FatSecretClient(Protocol):
    """Interface for FatSecret OAuth2 and server.api interactions."""

    async def request_token(
        self, client_id: str, client_secret: str, scope: str
    ) -> dict[str, object]:
        """Exchange client credentials for a token payload."""

    async def call(
        self, method: str, params: dict[str, str], access_token: str
    ) -> dict[str, object]:
        """Invoke a server.api method and return the decoded JSON body."""


@dataclass
class HttpxFatSecretClient(FatSecretClient):
    """HTTPX-backed FatSecret client."""

    token_url: str
    api_url: str
    http_client: httpx.AsyncClient
    timeout: float = 15

    @classmethod
    def create(
        cls, token_url: str, api_url: str, timeout: float = 15
    ) -> "HttpxFatSecretClient":
        """Create a FatSecret client with a managed httpx session."""
        return cls(
            token_url=token_url,
            api_url=api_url,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def request_token(
        self, client_id: str, client_secret: str, scope: str
    ) -> dict[str, object]:
        """Run the client-credentials grant against the token endpoint."""
        response = await self.http_client.post(
            self.token_url,
            data={
                "grant_type": "client_credentials",
                "scope": scope,
                "client_id": client_id,
                "client_secret": client_secret,
            },
            timeout=self.timeout,
        )
        _raise_for_upstream(response, action="token request")
        return response.json()

    async def call(
        self, method: str, params: dict[str, str], access_token: str
    ) -> dict[str, object]:
        """POST a form-encoded server.api request with bearer auth."""
        response = await self.http_client.post(
            self.api_url,
            data={"method": method, **params, "format": "json"},
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=self.timeout,
        )
        _raise_for_upstream(response, action=method)
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _raise_for_upstream(response: httpx.Response, *, action: str) -> None:
    """Raise UpstreamError for non-success responses."""
    if response.is_success:
        return
    _logger.error(
        "FatSecret %s failed: status=%s body=%s",
        action,
        response.status_code,
        response.text,
    )
    raise UpstreamError(
        f"FatSecret {action} failed: {response.status_code}",
        status_code=response.status_code,
        body=response.text,
    )
