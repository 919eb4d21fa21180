"""Recommendation engine service.

Filters a meal catalog by the user's allergies and dietary restrictions,
scores what survives, sorts it and groups it into display tiers. Also hosts
the target-resolution entry points and small presentation helpers.
"""

from typing import Iterable, List, Optional, Sequence

from core import config
from core.logger import get_logger
from schemas.meal_schema import MacroDelta, MacroTargets, Meal, UserTargets
from schemas.profile_schema import PreferenceProfile, UserProfile
from schemas.recommendation_schema import (
    DailyFit,
    QuickFilter,
    RankedRecommendations,
    ScoredMeal,
    Tier,
)
from services.meal_scorer import MealScorer, meal_scorer
from services.nutrition_calculator import (
    DEFAULT_PER_MEAL_TARGETS,
    NutritionCalculator,
    nutrition_calculator,
    round_half_up,
)
from services.preference_matcher import find_triggered_allergy

logger = get_logger("services.recommendation_engine")

MEAT_KEYWORDS = ("chicken", "beef", "pork", "steak", "turkey", "ham", "bacon", "fish")
MEATLESS_PREFERENCES = frozenset({"vegetarian", "vegan"})
LOW_CARB_PREFERENCES = frozenset({"keto", "low-carb"})
LOW_CARB_MAX_GRAMS = 30

TOP_PICK_MIN = 85
GREAT_OPTION_MIN = 70
OTHER_OPTION_MIN = 50

HIGH_PROTEIN_MIN_GRAMS = 40
LOW_CAL_MAX_CALORIES = 600
QUICK_EATS_COUNT = 3
LOW_CAL_LABEL_MAX_CALORIES = 500


def violates_dietary_preference(meal: Meal, dietary_preferences: Iterable[str]) -> Optional[str]:
    """Return the first dietary preference the meal breaks, if any."""
    for pref in dietary_preferences:
        pref_lower = (pref or "").strip().lower()
        if pref_lower in MEATLESS_PREFERENCES:
            tags_text = " ".join(meal.tags).lower()
            name = meal.name.lower()
            if any(meat in tags_text or meat in name for meat in MEAT_KEYWORDS):
                return pref
        if pref_lower in LOW_CARB_PREFERENCES and meal.carbs > LOW_CARB_MAX_GRAMS:
            return pref
    return None


def tier_for_score(score: int) -> Optional[Tier]:
    """Return the display tier of a score, or None below the lowest tier."""
    if score >= TOP_PICK_MIN:
        return Tier.TOP
    if score >= GREAT_OPTION_MIN:
        return Tier.GREAT
    if score >= OTHER_OPTION_MIN:
        return Tier.OTHER
    return None


class RecommendationEngine:
    """Class-based recommendation engine for ranking restaurant meals."""

    def __init__(self, scorer: Optional[MealScorer] = None, calculator: Optional[NutritionCalculator] = None):
        self.scorer = scorer or meal_scorer
        self.calculator = calculator or nutrition_calculator

    # Target resolution
    def calculate_user_targets(self, profile: UserProfile, meals_per_day: Optional[int] = None) -> UserTargets:
        """Derive daily and per-meal targets for a profile."""
        return self.calculator.calculate_user_targets(profile, meals_per_day)

    def resolve_targets(
        self,
        profile: Optional[UserProfile] = None,
        daily: Optional[MacroTargets] = None,
        meals_per_day: Optional[int] = None,
    ) -> MacroTargets:
        """Pick per-meal targets from a stored daily budget, a profile or the defaults."""
        if daily is not None and daily.calories > 0:
            return self.calculator.calculate_per_meal_targets(daily, meals_per_day)
        if profile is not None:
            return self.calculate_user_targets(profile, meals_per_day).per_meal
        logger.info("No profile or daily budget, using default per-meal targets")
        return DEFAULT_PER_MEAL_TARGETS

    # Meal selection
    def filter_meals(self, meals: Sequence[Meal], preferences: Optional[PreferenceProfile] = None) -> List[Meal]:
        """Drop meals that trigger an allergy or break a dietary preference.

        This is the authoritative allergy check: an excluded meal never
        reaches scoring, however well its macros fit.
        """
        preferences = preferences or PreferenceProfile()
        out = []
        for meal in meals:
            allergy = find_triggered_allergy(meal.allergens, preferences.allergies)
            if allergy is not None:
                logger.debug("Excluded %s: allergy %s", meal.id, allergy)
                continue
            pref = violates_dietary_preference(meal, preferences.dietary_preferences)
            if pref is not None:
                logger.debug("Excluded %s: dietary preference %s", meal.id, pref)
                continue
            out.append(meal)
        logger.info("Filtered meals: %s -> %s", len(meals), len(out))
        return out

    def score_meals(
        self,
        meals: Sequence[Meal],
        targets: MacroTargets,
        preferences: Optional[PreferenceProfile] = None,
    ) -> List[ScoredMeal]:
        """Filter, score and sort meals by descending match score.

        Equal scores keep their catalog order.
        """
        scored = [
            ScoredMeal(**meal.model_dump(exclude={"match"}), match=self.scorer.score(meal, targets, preferences))
            for meal in self.filter_meals(meals, preferences)
        ]
        return sorted(scored, key=lambda m: m.match.score, reverse=True)

    def rank_meals(
        self,
        meals: Sequence[Meal],
        targets: MacroTargets,
        preferences: Optional[PreferenceProfile] = None,
        min_score: Optional[int] = None,
    ) -> List[ScoredMeal]:
        """Return meals scoring at least `min_score`, best first."""
        if min_score is None:
            min_score = config.DEFAULT_MIN_SCORE
        ranked = [m for m in self.score_meals(meals, targets, preferences) if m.match.score >= min_score]
        logger.info("Ranked %s meals with score >= %s", len(ranked), min_score)
        return ranked

    def get_top_recommendations(
        self,
        meals: Sequence[Meal],
        targets: MacroTargets,
        preferences: Optional[PreferenceProfile] = None,
        limit: Optional[int] = None,
    ) -> List[ScoredMeal]:
        """Return the best `limit` meals scoring at least the top-list minimum."""
        if limit is None:
            limit = config.TOP_RECOMMENDATIONS_LIMIT
        ranked = self.rank_meals(meals, targets, preferences, min_score=config.TOP_RECOMMENDATIONS_MIN_SCORE)
        return ranked[:limit]

    def get_personalized_recommendations(
        self,
        meals: Sequence[Meal],
        targets: MacroTargets,
        preferences: Optional[PreferenceProfile] = None,
    ) -> RankedRecommendations:
        """Score every allowed meal and partition the result into tiers.

        Meals below the lowest tier stay in `all` but appear in no tier.
        """
        scored = self.score_meals(meals, targets, preferences)
        tiers = {Tier.TOP: [], Tier.GREAT: [], Tier.OTHER: []}
        for meal in scored:
            tier = tier_for_score(meal.match.score)
            if tier is not None:
                tiers[tier].append(meal)
        logger.info(
            "Recommendations: top=%s great=%s other=%s dropped=%s",
            len(tiers[Tier.TOP]),
            len(tiers[Tier.GREAT]),
            len(tiers[Tier.OTHER]),
            len(scored) - sum(len(v) for v in tiers.values()),
        )
        return RankedRecommendations(
            top_picks=tiers[Tier.TOP],
            great_options=tiers[Tier.GREAT],
            other_options=tiers[Tier.OTHER],
            all=scored,
        )

    # Presentation helpers
    def calculate_daily_fit(self, meal: Meal, remaining: MacroTargets) -> DailyFit:
        """Describe how `meal` fits into the budget still `remaining` today."""
        after = MacroDelta(
            calories=remaining.calories - meal.calories,
            protein=remaining.protein - meal.protein,
            carbs=remaining.carbs - meal.carbs,
            fat=remaining.fat - meal.fat,
        )

        def percent(meal_value: float, after_value: float) -> int:
            budget = after_value + meal_value
            if budget <= 0:
                return 0
            return round_half_up(meal_value / budget * 100)

        return DailyFit(
            remaining=after,
            is_over_calories=after.calories < 0,
            meets_protein=meal.protein >= remaining.protein * 0.3,
            percent_of_daily={
                "calories": percent(meal.calories, after.calories),
                "protein": percent(meal.protein, after.protein),
                "carbs": percent(meal.carbs, after.carbs),
                "fat": percent(meal.fat, after.fat),
            },
        )

    def apply_quick_filter(self, meals: Sequence[ScoredMeal], quick_filter: QuickFilter = QuickFilter.ALL) -> List[ScoredMeal]:
        """Narrow an already ranked list with one of the quick filter chips."""
        if quick_filter == QuickFilter.HIGH_PROTEIN:
            return [m for m in meals if m.protein >= HIGH_PROTEIN_MIN_GRAMS]
        if quick_filter == QuickFilter.LOW_CAL:
            return [m for m in meals if m.calories <= LOW_CAL_MAX_CALORIES]
        if quick_filter == QuickFilter.QUICK_EATS:
            return list(meals[:QUICK_EATS_COUNT])
        return list(meals)

    def why_label(self, meal: ScoredMeal, tier: Tier) -> Optional[str]:
        """Pick the one-line reason shown on a meal card."""
        reasons = meal.match.reasons
        info = meal.match.match_info
        if tier == Tier.OTHER:
            if info.matched_dislikes:
                return f"Contains {info.matched_dislikes[0]} (not your usual)"
            if reasons.negative:
                return reasons.negative[0]
        if reasons.positive:
            return reasons.positive[0]
        if meal.protein >= HIGH_PROTEIN_MIN_GRAMS:
            return f"{round_half_up(meal.protein)}g protein"
        if meal.calories <= LOW_CAL_LABEL_MAX_CALORIES:
            return f"Only {round_half_up(meal.calories)} calories"
        return None


# export a default instance
recommendation_service = RecommendationEngine()
