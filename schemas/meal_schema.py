"""Schemas for meals and macro budgets."""

import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MacroTargets(BaseModel):
    """A calorie and macro budget, daily or per meal."""

    model_config = ConfigDict(frozen=True)

    calories: int = Field(..., ge=0, examples=[2400])
    protein: int = Field(..., ge=0, examples=[180], description="Protein grams")
    carbs: int = Field(..., ge=0, examples=[240], description="Carbohydrate grams")
    fat: int = Field(..., ge=0, examples=[80], description="Fat grams")


class UserTargets(BaseModel):
    """Result of deriving targets from a user profile."""

    model_config = ConfigDict(frozen=True)

    daily: MacroTargets
    per_meal: MacroTargets
    tdee: int


class Meal(BaseModel):
    """A restaurant menu item with its nutrition facts.

    Optional text fields tolerate missing data: `None` becomes an empty
    string or list so a sparse record never breaks a ranking pass.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    restaurant: str = ""
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    description: str = ""
    allergens: str = Field("", description="Comma-separated allergen tags, e.g. 'dairy, gluten'")
    tags: List[str] = Field(default_factory=list)
    brand_id: Optional[str] = None
    insight: str = ""
    is_estimated: bool = False
    source: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value):
        if value is None:
            raise ValueError("meal id is required")
        return str(value)

    @field_validator("restaurant", "description", "allergens", "insight", mode="before")
    @classmethod
    def _none_to_blank(cls, value):
        return "" if value is None else value

    @field_validator("calories", "protein", "carbs", "fat", mode="before")
    @classmethod
    def _none_to_zero(cls, value):
        # NaN and infinite amounts are data gaps too
        if value is None:
            return 0.0
        if isinstance(value, float) and not math.isfinite(value):
            return 0.0
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [t.strip() for t in value.split(",") if t.strip()]
        return value


class MacroDelta(BaseModel):
    """Macro amounts that may go negative, e.g. a budget left after a meal."""

    calories: float
    protein: float
    carbs: float
    fat: float
