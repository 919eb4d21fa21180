"""Pydantic schema package for engine inputs and results."""

from .profile_schema import (
    ActivityLevel,
    EatingStyle,
    FoodTags,
    Gender,
    Goal,
    PreferenceProfile,
    UserProfile,
)
from .meal_schema import MacroDelta, MacroTargets, Meal, UserTargets
from .recommendation_schema import (
    DailyFit,
    MatchBreakdown,
    MatchInfo,
    MatchReasons,
    MatchResult,
    PreferenceEvaluation,
    QuickFilter,
    RankedRecommendations,
    Rating,
    ScoredMeal,
    Tier,
)

__all__ = [
    "ActivityLevel",
    "EatingStyle",
    "FoodTags",
    "Gender",
    "Goal",
    "PreferenceProfile",
    "UserProfile",
    "MacroDelta",
    "MacroTargets",
    "Meal",
    "UserTargets",
    "DailyFit",
    "MatchBreakdown",
    "MatchInfo",
    "MatchReasons",
    "MatchResult",
    "PreferenceEvaluation",
    "QuickFilter",
    "RankedRecommendations",
    "Rating",
    "ScoredMeal",
    "Tier",
]
