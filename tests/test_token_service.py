"""Tests for OAuth2 token caching."""

import asyncio

import pytest

from fatsecret_nutrition.domain.errors import ConfigurationError, UpstreamError
from fatsecret_nutrition.services.cache import InMemoryCache
from fatsecret_nutrition.services.tokens import TokenService
from tests.conftest import FakeClock, FakeFatSecretClient, StaticCredentialsProvider


def test_token_reused_until_safety_margin(
    token_service: TokenService,
    fatsecret_client: FakeFatSecretClient,
    clock: FakeClock,
) -> None:
    assert asyncio.run(token_service.get_access_token()) == "token-1"
    assert fatsecret_client.token_calls == 1

    clock.advance(3539)
    assert asyncio.run(token_service.get_access_token()) == "token-1"
    assert fatsecret_client.token_calls == 1

    fatsecret_client.token_payload = {"access_token": "token-2", "expires_in": 3600}
    clock.advance(1)
    assert asyncio.run(token_service.get_access_token()) == "token-2"
    assert fatsecret_client.token_calls == 2


def test_missing_credentials_raise_configuration_error(
    fatsecret_client: FakeFatSecretClient, clock: FakeClock
) -> None:
    service = TokenService(
        client=fatsecret_client,
        cache=InMemoryCache(clock=clock),
        credentials=StaticCredentialsProvider(credentials=None),
        clock=clock,
    )

    with pytest.raises(ConfigurationError):
        asyncio.run(service.get_access_token())
    assert fatsecret_client.token_calls == 0


def test_upstream_failure_propagates(
    token_service: TokenService, fatsecret_client: FakeFatSecretClient
) -> None:
    fatsecret_client.errors["token"] = UpstreamError("denied", status_code=400)

    with pytest.raises(UpstreamError):
        asyncio.run(token_service.get_access_token())


def test_token_response_without_access_token_is_rejected(
    token_service: TokenService, fatsecret_client: FakeFatSecretClient
) -> None:
    fatsecret_client.token_payload = {"error": "invalid_scope"}

    with pytest.raises(UpstreamError):
        asyncio.run(token_service.get_access_token())
