"""Pydantic request models for the FatSecret endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SearchNutritionRequest(_Request):
    """Body for a nutrition search by food name."""

    food_name: str | None = Field(default=None, alias="foodName")


class FoodDetailsRequest(_Request):
    """Body for a food detail lookup."""

    food_id: str | int | None = Field(default=None, alias="foodId")


class AutocompleteRequest(_Request):
    """Body for an autocomplete query."""

    query: str | None = None
    max_results: int | None = Field(default=None, alias="maxResults")
    region: str | None = None
