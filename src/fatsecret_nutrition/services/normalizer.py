"""Conversion of FatSecret food details into nutrition records."""

import logging
import math

from fatsecret_nutrition.domain.errors import ParseError
from fatsecret_nutrition.domain.nutrition import NutritionRecord
from fatsecret_nutrition.domain.payloads import repeated_field

_MICRO_NUTRIENTS = {
    "fiber": "fiber",
    "sugar": "sugar",
    "sodium": "sodium",
    "potassium": "potassium",
    "cholesterol": "cholesterol",
    "saturated_fat": "saturatedFat",
}

_logger = logging.getLogger(__name__)


def standardize_nutrition(detail: object) -> NutritionRecord:
    """Build a NutritionRecord from the first serving of a food detail.

    Never raises: unparsable macros fall back to 0 and unparsable
    micronutrients are left out of the record.
    """
    food_name = "Unknown Food"
    if isinstance(detail, dict) and detail.get("food_name"):
        food_name = str(detail["food_name"])
    fields: dict[str, object] = {"food_name": food_name}

    servings = repeated_field(detail, "servings", "serving")
    if not servings:
        return NutritionRecord(**fields)

    serving = servings[0]
    if not isinstance(serving, dict):
        _logger.error("Unexpected FatSecret serving shape: %s", type(serving).__name__)
        return NutritionRecord(**fields)

    fields["calories"] = _to_float(serving.get("calories"))
    fields["protein"] = _to_float(serving.get("protein"))
    fields["fat"] = _to_float(serving.get("fat"))
    fields["carbohydrates"] = _to_float(serving.get("carbohydrate"))
    fields["serving_size"] = str(serving.get("serving_description") or "100g")
    micro: dict[str, float] = {}
    for source_key, target_key in _MICRO_NUTRIENTS.items():
        if not serving.get(source_key):
            continue
        try:
            micro[target_key] = _parse_float(serving[source_key])
        except ParseError as exc:
            _logger.warning("Skipping FatSecret %s: %s", source_key, exc)
    fields["micro_nutrients"] = micro
    return NutritionRecord(**fields)


def _parse_float(value: object) -> float:
    """Parse a numeric-as-string value, raising ParseError when not finite."""
    try:
        parsed = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError) as exc:
        raise ParseError(f"Not a number: {value!r}") from exc
    if not math.isfinite(parsed):
        raise ParseError(f"Not a finite number: {value!r}")
    return parsed


def _to_float(value: object) -> float:
    """Parse a numeric value, defaulting to 0 when absent or invalid."""
    try:
        return _parse_float(value)
    except ParseError:
        return 0.0
