from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PreferenceInput(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    vegan_only: bool = Field(default=False, alias="veganOnly")
    vegetarian_only: bool = Field(default=False, alias="vegetarianOnly")
    max_calories: int | None = Field(default=None, alias="maxCalories")
    query: str = ""
    # Scoring coefficients; the server clamps each to [0, 1].
    popularity_weight: float = Field(default=0.45, alias="popularityWeight")
    dietary_weight: float = Field(default=0.35, alias="dietaryWeight")
    calorie_weight: float = Field(default=0.20, alias="calorieWeight")


class RecommendationRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hall_id: int = Field(..., alias="hallId")
    limit: int = 10
    prefs: PreferenceInput = Field(default_factory=PreferenceInput)

    def to_variables(self) -> dict:
        return self.model_dump(by_alias=True)


class RecommendedItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int | str
    hall_id: int | None = Field(default=None, alias="hallId")
    name: str
    calories: int | None = None
    vegan: bool | None = None
    vegetarian: bool | None = None
    popularity_score: float | None = Field(default=None, alias="popularityScore")
    score: float


class DiningHall(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    lat: float
    lon: float
    cuisine: str | None = None
    opening_hours: str | None = Field(default=None, alias="openingHours")


DEFAULT_HALL_ID = 1
DEFAULT_LIMIT = 10

DEFAULT_PREFERENCES = PreferenceInput(
    vegan_only=False,
    vegetarian_only=False,
    max_calories=700,
    query="pizza",
    popularity_weight=0.45,
    dietary_weight=0.35,
    calorie_weight=0.20,
)
