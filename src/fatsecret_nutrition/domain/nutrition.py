"""Nutrition domain models."""

from dataclasses import dataclass, field

SOURCE_NAME = "FatSecret"


@dataclass(frozen=True)
class NutritionRecord:
    """Canonical nutrition values for one serving of a food."""

    food_name: str = "Unknown Food"
    source: str = SOURCE_NAME
    serving_size: str = "100g"
    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbohydrates: float = 0.0
    micro_nutrients: dict[str, float] = field(default_factory=dict)

    def to_payload(self) -> dict[str, object]:
        """Render the record with the client-facing camelCase keys."""
        return {
            "foodName": self.food_name,
            "source": self.source,
            "servingSize": self.serving_size,
            "calories": self.calories,
            "protein": self.protein,
            "fat": self.fat,
            "carbohydrates": self.carbohydrates,
            "microNutrients": dict(self.micro_nutrients),
        }
