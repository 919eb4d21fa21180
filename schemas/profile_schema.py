"""Schemas for the user's body profile and food preferences."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Goal(str, Enum):
    BULK = "bulk"
    CUT = "cut"
    MAINTAIN = "maintain"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very-active"


class EatingStyle(str, Enum):
    NONE = "none"
    KETO = "keto"
    CARNIVORE = "carnivore"
    GLUTEN_FREE = "gluten-free"
    VEGAN = "vegan"


def normalize_choice(value):
    """Lowercase an enum-like string and unify separators ("VeryActive" -> "very-active")."""
    if not isinstance(value, str):
        return value
    cleaned = value.strip().lower().replace("_", "-").replace(" ", "-")
    return _CHOICE_ALIASES.get(cleaned, cleaned)


_CHOICE_ALIASES = {
    "veryactive": "very-active",
    "glutenfree": "gluten-free",
}


class UserProfile(BaseModel):
    """Physiological profile collected during onboarding."""

    model_config = ConfigDict(frozen=True)

    gender: Gender = Field(..., examples=["male"], description="male, female or other")
    height_inches: float = Field(..., examples=[70], description="Height in inches")
    current_weight_lbs: float = Field(..., examples=[180], description="Current weight in pounds")
    goal_weight_lbs: Optional[float] = Field(None, examples=[170], description="Goal weight in pounds (defaults to current weight)")
    goal: Goal = Field(Goal.MAINTAIN, examples=["cut"], description="bulk, cut or maintain")
    activity_level: Optional[ActivityLevel] = Field(
        ActivityLevel.MODERATE,
        examples=["moderate"],
        description="sedentary, light, moderate, active or very-active; unknown values become None",
    )
    timeline_weeks: Optional[float] = Field(None, examples=[12], description="Weeks to reach the goal weight (defaults to 12)")
    eating_style: EatingStyle = Field(EatingStyle.NONE, examples=["keto"], description="Special eating style")
    age: Optional[int] = Field(None, examples=[30], description="Age in years (assumed 30 when unknown)")

    @field_validator("gender", "goal", mode="before")
    @classmethod
    def _normalize(cls, value):
        return normalize_choice(value)

    @field_validator("eating_style", mode="before")
    @classmethod
    def _normalize_eating_style(cls, value):
        if value is None or value == "":
            return EatingStyle.NONE
        return normalize_choice(value)

    @field_validator("activity_level", mode="before")
    @classmethod
    def _normalize_activity_level(cls, value):
        # unrecognized levels are kept as None so the calculator applies its default multiplier
        value = normalize_choice(value)
        if value in {level.value for level in ActivityLevel}:
            return value
        return None


class FoodTags(BaseModel):
    """Free-text food tags grouped by category."""

    model_config = ConfigDict(frozen=True)

    cuisines: List[str] = Field(default_factory=list)
    entrees: List[str] = Field(default_factory=list)
    proteins: List[str] = Field(default_factory=list)
    sides: List[str] = Field(default_factory=list)
    flavors: List[str] = Field(default_factory=list)

    @field_validator("cuisines", "entrees", "proteins", "sides", "flavors", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return [] if value is None else value

    def all_tags(self) -> List[str]:
        """Return every tag in category order: cuisines, entrees, proteins, sides, flavors."""
        return [*self.cuisines, *self.entrees, *self.proteins, *self.sides, *self.flavors]


class PreferenceProfile(BaseModel):
    """Likes, dislikes, allergies and dietary restrictions of a user."""

    model_config = ConfigDict(frozen=True)

    food_likes: FoodTags = Field(default_factory=FoodTags)
    food_dislikes: FoodTags = Field(default_factory=FoodTags)
    allergies: List[str] = Field(default_factory=list, examples=[["dairy", "peanut"]])
    dietary_preferences: List[str] = Field(default_factory=list, examples=[["vegetarian"]])

    @field_validator("food_likes", "food_dislikes", mode="before")
    @classmethod
    def _none_to_empty_tags(cls, value):
        return FoodTags() if value is None else value

    @field_validator("allergies", "dietary_preferences", mode="before")
    @classmethod
    def _none_to_empty_list(cls, value):
        return [] if value is None else value
