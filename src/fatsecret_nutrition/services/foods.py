"""FatSecret food search, detail and autocomplete lookups with caching."""

import logging
from dataclasses import dataclass

from fatsecret_nutrition.adapters.fatsecret_client import FatSecretClient
from fatsecret_nutrition.domain.payloads import repeated_field
from fatsecret_nutrition.services.cache import Cache
from fatsecret_nutrition.services.tokens import TokenService

AUTOCOMPLETE_MIN_LENGTH = 2
AUTOCOMPLETE_MAX_RESULTS = 10

_logger = logging.getLogger(__name__)


@dataclass
class FoodLookupService:
    """Cached access to the FatSecret food endpoints.

    Search and autocomplete fail open (errors become an empty list) while
    detail lookups fail closed and propagate upstream errors.
    """

    client: FatSecretClient
    tokens: TokenService
    cache: Cache
    search_ttl_seconds: int = 86400
    food_ttl_seconds: int = 604800
    autocomplete_ttl_seconds: int = 900

    async def search_foods(
        self, query: str, max_results: int = 3
    ) -> list[dict[str, object]]:
        """Search foods by name; returns raw food summaries."""
        try:
            return await self._search_foods(query, max_results)
        except Exception:
            _logger.exception("Error searching FatSecret for %r", query)
            return []

    async def get_food_details(self, food_id: str) -> dict[str, object] | None:
        """Fetch the raw detail payload for a food id."""
        cache_key = f"fatsecret_food_{food_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, dict):
            _logger.debug("Using cached FatSecret food details for id %s", food_id)
            return cached

        access_token = await self.tokens.get_access_token()
        payload = await self.client.call(
            "food.get.v2",
            {"food_id": str(food_id), "include_sub_categories": "true"},
            access_token,
        )
        food = payload.get("food")
        if not isinstance(food, dict):
            _logger.info("No FatSecret food details for id %s", food_id)
            return None
        self.cache.set(cache_key, food, ttl_seconds=self.food_ttl_seconds)
        _logger.info("Retrieved FatSecret details for food id %s", food_id)
        return food

    async def autocomplete_search(
        self, expression: str, max_results: int = 4, region: str | None = None
    ) -> list[str]:
        """Return search-term suggestions for a partial expression."""
        try:
            return await self._autocomplete_search(expression, max_results, region)
        except Exception:
            _logger.exception(
                "Error getting autocomplete suggestions for %r", expression
            )
            return []

    async def _search_foods(
        self, query: str, max_results: int
    ) -> list[dict[str, object]]:
        cache_key = f"fatsecret_search_{query.lower().strip()}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            _logger.debug("Using cached FatSecret search results for %r", query)
            return cached

        access_token = await self.tokens.get_access_token()
        payload = await self.client.call(
            "foods.search",
            {"search_expression": query, "max_results": str(max_results)},
            access_token,
        )
        foods = repeated_field(payload, "foods", "food")
        if not foods:
            _logger.info("No FatSecret results found for %r", query)
            return []
        self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        _logger.info("Found %s FatSecret results for %r", len(foods), query)
        return foods

    async def _autocomplete_search(
        self, expression: str, max_results: int, region: str | None
    ) -> list[str]:
        if not expression or len(expression.strip()) < AUTOCOMPLETE_MIN_LENGTH:
            return []

        cache_key = (
            f"fatsecret_autocomplete_{expression.lower().strip()}"
            f"_{max_results}_{region or 'default'}"
        )
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            _logger.debug("Using cached FatSecret autocomplete for %r", expression)
            return cached

        params = {
            "expression": expression.strip(),
            "max_results": str(min(max_results, AUTOCOMPLETE_MAX_RESULTS)),
        }
        if region:
            params["region"] = region
        access_token = await self.tokens.get_access_token()
        payload = await self.client.call("foods.autocomplete.v2", params, access_token)
        suggestions = repeated_field(payload, "suggestions", "suggestion")
        if not suggestions:
            _logger.info("No autocomplete suggestions found for %r", expression)
            return []
        self.cache.set(
            cache_key, suggestions, ttl_seconds=self.autocomplete_ttl_seconds
        )
        _logger.info(
            "Retrieved %s autocomplete suggestions for %r",
            len(suggestions),
            expression,
        )
        return suggestions
