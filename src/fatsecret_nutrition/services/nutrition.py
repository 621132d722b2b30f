"""Nutrition lookup composing FatSecret search, detail and normalization."""

import logging
from dataclasses import dataclass

from fatsecret_nutrition.domain.nutrition import NutritionRecord
from fatsecret_nutrition.services.cache import Cache
from fatsecret_nutrition.services.foods import FoodLookupService
from fatsecret_nutrition.services.normalizer import standardize_nutrition

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Resolves a food label to a canonical nutrition record."""

    foods: FoodLookupService
    cache: Cache
    nutrition_ttl_seconds: int = 86400

    async def get_nutrition(self, food_label: str | None) -> NutritionRecord | None:
        """Return nutrition for the best match of a label, or None."""
        if not food_label:
            return None
        cache_key = f"fatsecret_nutrition_{food_label.lower().strip()}"
        try:
            cached = self.cache.get(cache_key)
            if isinstance(cached, NutritionRecord):
                _logger.debug("Using cached FatSecret nutrition for %r", food_label)
                return cached

            results = await self.foods.search_foods(food_label)
            if not results:
                _logger.info("No FatSecret results found for %r", food_label)
                return None

            details = await self.foods.get_food_details(str(results[0]["food_id"]))
            if details is None:
                return None
            record = standardize_nutrition(details)
            self.cache.set(cache_key, record, ttl_seconds=self.nutrition_ttl_seconds)
            _logger.info("Retrieved FatSecret nutrition for %r", food_label)
            return record
        except Exception:
            _logger.exception("Error getting FatSecret nutrition for %r", food_label)
            return None
