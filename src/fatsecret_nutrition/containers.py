"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fatsecret_nutrition.adapters.fatsecret_client import HttpxFatSecretClient
from fatsecret_nutrition.config import Settings, SettingsCredentialsProvider
from fatsecret_nutrition.services.cache import Cache, InMemoryCache
from fatsecret_nutrition.services.foods import FoodLookupService
from fatsecret_nutrition.services.nutrition import NutritionService
from fatsecret_nutrition.services.operations import FatSecretOperations
from fatsecret_nutrition.services.tokens import TokenService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    cache: Cache
    token_service: TokenService
    food_service: FoodLookupService
    nutrition_service: NutritionService
    operations: FatSecretOperations
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, cache: Cache | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_cache = cache or InMemoryCache()
    fatsecret_client = HttpxFatSecretClient.create(
        token_url=resolved_settings.fatsecret_token_url,
        api_url=resolved_settings.fatsecret_api_url,
        timeout=resolved_settings.http_timeout_seconds,
    )
    token_service = TokenService(
        client=fatsecret_client,
        cache=resolved_cache,
        credentials=SettingsCredentialsProvider(resolved_settings),
        scope=resolved_settings.fatsecret_scope,
    )
    food_service = FoodLookupService(
        client=fatsecret_client,
        tokens=token_service,
        cache=resolved_cache,
    )
    nutrition_service = NutritionService(foods=food_service, cache=resolved_cache)
    operations = FatSecretOperations(foods=food_service, nutrition=nutrition_service)

    async def close_resources() -> None:
        await fatsecret_client.close()

    return AppContainer(
        settings=resolved_settings,
        cache=resolved_cache,
        token_service=token_service,
        food_service=food_service,
        nutrition_service=nutrition_service,
        operations=operations,
        close_resources=close_resources,
    )
