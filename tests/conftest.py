"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from fatsecret_nutrition.adapters.fatsecret_client import FatSecretClient
from fatsecret_nutrition.config import CredentialsProvider, Settings
from fatsecret_nutrition.containers import AppContainer
from fatsecret_nutrition.domain.tokens import ClientCredentials
from fatsecret_nutrition.services.cache import InMemoryCache
from fatsecret_nutrition.services.foods import FoodLookupService
from fatsecret_nutrition.services.nutrition import NutritionService
from fatsecret_nutrition.services.operations import FatSecretOperations
from fatsecret_nutrition.services.tokens import TokenService


@dataclass
class FakeClock:
    """Manually advanced UTC clock."""

    now: datetime = field(default_factory=lambda: datetime(2024, 1, 1, tzinfo=UTC))

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@dataclass
class StaticCredentialsProvider(CredentialsProvider):
    """Credentials provider returning a fixed value."""

    credentials: ClientCredentials | None = field(
        default_factory=lambda: ClientCredentials("client-id", "client-secret")
    )

    def get_credentials(self) -> ClientCredentials | None:
        return self.credentials


@dataclass
class FakeFatSecretClient(FatSecretClient):
    """Fake FatSecret client with in-memory responses per method."""

    token_payload: dict[str, object] = field(
        default_factory=lambda: {"access_token": "token-1", "expires_in": 3600}
    )
    responses: dict[str, dict[str, object]] = field(
        default_factory=lambda: {
            "foods.search": {
                "foods": {
                    "food": [
                        {"food_id": "33691", "food_name": "Kale"},
                        {"food_id": "4881", "food_name": "Kale Chips"},
                    ]
                }
            },
            "food.get.v2": {
                "food": {
                    "food_id": "33691",
                    "food_name": "Kale",
                    "servings": {
                        "serving": [
                            {
                                "serving_description": "1 cup chopped",
                                "calories": "33",
                                "protein": "2.87",
                                "fat": "0.62",
                                "carbohydrate": "5.88",
                                "fiber": "1.3",
                            },
                            {
                                "serving_description": "100 g",
                                "calories": "49",
                                "protein": "4.28",
                                "fat": "0.93",
                                "carbohydrate": "8.75",
                            },
                        ]
                    },
                }
            },
            "foods.autocomplete.v2": {
                "suggestions": {"suggestion": ["chicken breast", "chicken soup"]}
            },
        }
    )
    errors: dict[str, Exception] = field(default_factory=dict)
    token_calls: int = 0
    calls: list[tuple[str, dict[str, str], str]] = field(default_factory=list)

    async def request_token(
        self, client_id: str, client_secret: str, scope: str
    ) -> dict[str, object]:
        self.token_calls += 1
        if "token" in self.errors:
            raise self.errors["token"]
        return self.token_payload

    async def call(
        self, method: str, params: dict[str, str], access_token: str
    ) -> dict[str, object]:
        self.calls.append((method, params, access_token))
        if method in self.errors:
            raise self.errors[method]
        return self.responses.get(method, {})

    def calls_for(self, method: str) -> list[dict[str, str]]:
        return [params for name, params, _ in self.calls if name == method]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fatsecret_client_id="client-id",
        fatsecret_client_secret="client-secret",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> InMemoryCache:
    return InMemoryCache(clock=clock)


@pytest.fixture
def fatsecret_client() -> FakeFatSecretClient:
    return FakeFatSecretClient()


@pytest.fixture
def token_service(
    fatsecret_client: FakeFatSecretClient, cache: InMemoryCache, clock: FakeClock
) -> TokenService:
    return TokenService(
        client=fatsecret_client,
        cache=cache,
        credentials=StaticCredentialsProvider(),
        clock=clock,
    )


@pytest.fixture
def food_service(
    fatsecret_client: FakeFatSecretClient,
    token_service: TokenService,
    cache: InMemoryCache,
) -> FoodLookupService:
    return FoodLookupService(
        client=fatsecret_client, tokens=token_service, cache=cache
    )


@pytest.fixture
def nutrition_service(
    food_service: FoodLookupService, cache: InMemoryCache
) -> NutritionService:
    return NutritionService(foods=food_service, cache=cache)


@pytest.fixture
def operations(
    food_service: FoodLookupService, nutrition_service: NutritionService
) -> FatSecretOperations:
    return FatSecretOperations(foods=food_service, nutrition=nutrition_service)


@pytest.fixture
def container(
    settings: Settings,
    cache: InMemoryCache,
    token_service: TokenService,
    food_service: FoodLookupService,
    nutrition_service: NutritionService,
    operations: FatSecretOperations,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        cache=cache,
        token_service=token_service,
        food_service=food_service,
        nutrition_service=nutrition_service,
        operations=operations,
        close_resources=close_resources,
    )
