"""Schemas for match scores, ranked recommendations and daily fit."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .meal_schema import Meal, MacroDelta


class Rating(str, Enum):
    EXCELLENT = "excellent"
    GREAT = "great"
    GOOD = "good"
    OKAY = "okay"
    POOR = "poor"


class Tier(str, Enum):
    TOP = "top"
    GREAT = "great"
    OTHER = "other"


class QuickFilter(str, Enum):
    ALL = "all"
    HIGH_PROTEIN = "high_protein"
    LOW_CAL = "low_cal"
    QUICK_EATS = "quick_eats"


class MatchBreakdown(BaseModel):
    """Sub-scores (0-100) behind a match score."""

    calories: float = Field(..., ge=0, le=100)
    protein: float = Field(..., ge=0, le=100)
    macro_balance: float = Field(..., ge=0, le=100)
    preferences: float = Field(..., ge=0, le=100)


class MatchReasons(BaseModel):
    """Human-readable reasons in calories, protein, balance, preferences order."""

    positive: List[str] = Field(default_factory=list)
    negative: List[str] = Field(default_factory=list)


class MatchInfo(BaseModel):
    """Which preference tags a meal matched."""

    matched_likes: List[str] = Field(default_factory=list)
    matched_dislikes: List[str] = Field(default_factory=list)
    has_allergen: bool = False
    allergen_triggered: Optional[str] = None


class PreferenceEvaluation(BaseModel):
    """Output of the preference matcher for one meal."""

    score: int = Field(..., ge=0, le=100)
    match_info: MatchInfo


class MatchResult(BaseModel):
    """How well one meal fits a user's targets and preferences."""

    score: int = Field(..., ge=0, le=100)
    rating: Rating
    breakdown: MatchBreakdown
    reasons: MatchReasons
    match_info: MatchInfo


class ScoredMeal(Meal):
    """A meal together with its match result."""

    match: MatchResult

    @property
    def match_score(self) -> int:
        return self.match.score


class RankedRecommendations(BaseModel):
    """Scored meals sorted by score and partitioned into display tiers."""

    top_picks: List[ScoredMeal] = Field(default_factory=list)
    great_options: List[ScoredMeal] = Field(default_factory=list)
    other_options: List[ScoredMeal] = Field(default_factory=list)
    all: List[ScoredMeal] = Field(default_factory=list)


class DailyFit(BaseModel):
    """How a chosen meal fits into the remaining daily budget."""

    remaining: MacroDelta
    is_over_calories: bool
    meets_protein: bool
    percent_of_daily: Dict[str, int]
