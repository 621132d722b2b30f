"""Client-facing FatSecret operations with argument validation."""

import logging
from dataclasses import dataclass

from fatsecret_nutrition.domain.errors import InternalError, InvalidArgumentError
from fatsecret_nutrition.domain.nutrition import SOURCE_NAME
from fatsecret_nutrition.services.foods import FoodLookupService
from fatsecret_nutrition.services.normalizer import standardize_nutrition
from fatsecret_nutrition.services.nutrition import NutritionService

DEFAULT_AUTOCOMPLETE_RESULTS = 4

_logger = logging.getLogger(__name__)


@dataclass
class FatSecretOperations:
    """Result-shaped operations surfaced by the API layer."""

    foods: FoodLookupService
    nutrition: NutritionService

    async def search_nutrition(self, food_name: str | None) -> dict[str, object]:
        """Look up canonical nutrition data for a food name."""
        search_term = _require(food_name, "Missing food name to search")
        _logger.info("Searching FatSecret for nutrition data: %s", search_term)
        try:
            record = await self.nutrition.get_nutrition(search_term)
        except Exception as exc:
            _logger.exception("Error searching FatSecret for %r", search_term)
            raise InternalError(
                "Error searching for nutrition data", details=str(exc)
            ) from exc

        if record is None:
            return {
                "success": False,
                "message": f'No nutrition data found for "{search_term}"',
                "source": SOURCE_NAME,
            }
        return {
            "success": True,
            "source": SOURCE_NAME,
            "nutritionData": record.to_payload(),
            "message": f'Found nutrition data for "{search_term}" from FatSecret',
        }

    async def get_food_details(self, food_id: str | int | None) -> dict[str, object]:
        """Return raw and normalized details for a FatSecret food id."""
        resolved_id = _require(food_id, "Missing food ID")
        _logger.info("Getting FatSecret food details for id %s", resolved_id)
        try:
            details = await self.foods.get_food_details(resolved_id)
        except Exception as exc:
            _logger.exception(
                "Error getting FatSecret food details for %s", resolved_id
            )
            raise InternalError("Error getting food details", details=str(exc)) from exc

        if not details:
            return {
                "success": False,
                "message": f'No food details found for ID "{resolved_id}"',
                "source": SOURCE_NAME,
            }
        return {
            "success": True,
            "foodDetails": details,
            "nutritionData": standardize_nutrition(details).to_payload(),
            "source": SOURCE_NAME,
            "message": f'Found food details for ID "{resolved_id}" from FatSecret',
        }

    async def autocomplete(
        self,
        query: str | None,
        max_results: int | None = None,
        region: str | None = None,
    ) -> dict[str, object]:
        """Return autocomplete suggestions for a partial query."""
        search_query = _require(query, "Missing search query")
        try:
            suggestions = await self.foods.autocomplete_search(
                search_query,
                max_results or DEFAULT_AUTOCOMPLETE_RESULTS,
                region or None,
            )
        except Exception as exc:
            _logger.exception("Error getting autocomplete for %r", search_query)
            raise InternalError(
                "Error getting autocomplete suggestions", details=str(exc)
            ) from exc

        return {
            "success": True,
            "suggestions": suggestions,
            "message": (
                f"Found {len(suggestions)} autocomplete suggestions "
                f'for "{search_query}"'
            ),
        }


def _require(value: str | int | None, message: str) -> str:
    """Return the trimmed argument, raising InvalidArgumentError when blank."""
    text = str(value).strip() if value is not None else ""
    if not text:
        raise InvalidArgumentError(message)
    return text
