"""Meal scoring service.

Combines calorie fit, protein fit, macro balance and preference fit into a
single weighted 0-100 match score with a rating and explanatory reasons.
"""

from typing import List, Optional, Tuple

from core.logger import get_logger
from schemas.meal_schema import MacroTargets, Meal
from schemas.profile_schema import PreferenceProfile
from schemas.recommendation_schema import (
    MatchBreakdown,
    MatchReasons,
    MatchResult,
    PreferenceEvaluation,
    Rating,
)
from services.nutrition_calculator import round_half_up
from services.preference_matcher import PreferenceMatcher, preference_matcher

logger = get_logger("services.meal_scorer")

WEIGHTS = {
    "calories": 0.30,
    "protein": 0.35,
    "macro_balance": 0.20,
    "preferences": 0.15,
}

RATING_THRESHOLDS: Tuple[Tuple[int, Rating], ...] = (
    (90, Rating.EXCELLENT),
    (80, Rating.GREAT),
    (70, Rating.GOOD),
    (60, Rating.OKAY),
)

# (score, positive reasons, negative reasons)
SubScore = Tuple[float, List[str], List[str]]


def get_match_rating(score: float) -> Rating:
    """Map a match score to its rating label."""
    for threshold, rating in RATING_THRESHOLDS:
        if score >= threshold:
            return rating
    return Rating.POOR


def _fmt(value: float) -> str:
    return str(round_half_up(value))


def score_calories(meal: Meal, target: MacroTargets) -> SubScore:
    """Score how close a meal's calories are to the per-meal target."""
    diff = meal.calories - target.calories
    if target.calories > 0:
        pct_diff = abs(diff) / target.calories
    else:
        pct_diff = 0.0 if meal.calories == 0 else float("inf")
    direction = "over" if diff > 0 else "under"
    pct_label = f"{_fmt(pct_diff * 100)}% {direction} your calorie target" if pct_diff != float("inf") else ""

    if pct_diff <= 0.20:
        return 100.0, [f"{_fmt(meal.calories)} cal fits your calorie target"], []
    if pct_diff <= 0.35:
        negative = [pct_label] if pct_diff > 0.30 else []
        return 85 - (pct_diff - 0.20) * 50, [], negative
    if pct_diff <= 0.50:
        return 70 - (pct_diff - 0.35) * 60, [], [pct_label]
    reason = "Higher calorie option" if diff > 0 else "Lower calorie option"
    return max(40.0, 60 - (pct_diff - 0.50) * 40), [], [reason]


def score_protein(meal: Meal, target: MacroTargets) -> SubScore:
    """Score protein sufficiency; meeting or beating the target is a full score."""
    deficit = target.protein - meal.protein
    protein = _fmt(meal.protein)
    if deficit <= 0:
        return 100.0, [f"{protein}g protein hits your target"], []

    pct_diff = abs(deficit) / target.protein if target.protein > 0 else 0.0
    if pct_diff <= 0.15:
        return 95.0, [f"{protein}g protein, close to target"], []
    if pct_diff <= 0.25:
        return 85.0, [f"{protein}g protein"], []
    if pct_diff <= 0.40:
        negative = [f"{protein}g protein, below your target"] if pct_diff > 0.35 else []
        return 70.0, [], negative
    return max(45.0, 65 - pct_diff * 40), [], ["Lower protein option"]


def score_macro_balance(meal: Meal) -> SubScore:
    """Score how each macro's share of calories sits within its ideal range."""
    protein_cals = meal.protein * 4
    carb_cals = meal.carbs * 4
    fat_cals = meal.fat * 9
    total = protein_cals + carb_cals + fat_cals
    if total <= 0:
        return 50.0, [], []

    protein_pct = protein_cals / total
    carb_pct = carb_cals / total
    fat_pct = fat_cals / total

    score = 0.0
    if 0.20 <= protein_pct <= 0.40:
        score += 40
    if 0.25 <= carb_pct <= 0.55:
        score += 30
    if 0.20 <= fat_pct <= 0.40:
        score += 30

    positive = ["Well-balanced macros"] if score >= 80 else []
    negative: List[str] = []
    if fat_pct > 0.45:
        negative.append("High in fat")
    elif carb_pct > 0.60:
        negative.append("High in carbs")
    return score, positive, negative


def preference_reasons(evaluation: PreferenceEvaluation) -> Tuple[List[str], List[str]]:
    """Turn a preference evaluation into positive and negative reasons."""
    info = evaluation.match_info
    if info.has_allergen:
        return [], [f"Contains {info.allergen_triggered} (allergen)"]
    positive = [f"Includes {', '.join(info.matched_likes)} you like"] if info.matched_likes else []
    negative = [f"Contains {info.matched_dislikes[0]} (not your usual)"] if info.matched_dislikes else []
    return positive, negative


class MealScorer:
    """Weighted multi-factor scorer for a single meal."""

    def __init__(self, matcher: Optional[PreferenceMatcher] = None):
        self.matcher = matcher or preference_matcher

    def score(self, meal: Meal, targets: MacroTargets, preferences: Optional[PreferenceProfile] = None) -> MatchResult:
        """Compute the match result of `meal` against per-meal `targets`.

        An allergen hit only zeroes the preference sub-score here; excluding
        the meal altogether is the ranker's job.
        """
        cal_score, cal_pos, cal_neg = score_calories(meal, targets)
        pro_score, pro_pos, pro_neg = score_protein(meal, targets)
        bal_score, bal_pos, bal_neg = score_macro_balance(meal)
        evaluation = self.matcher.evaluate(meal, preferences)
        pref_pos, pref_neg = preference_reasons(evaluation)

        breakdown = MatchBreakdown(
            calories=cal_score,
            protein=pro_score,
            macro_balance=bal_score,
            preferences=evaluation.score,
        )
        total = (
            breakdown.calories * WEIGHTS["calories"]
            + breakdown.protein * WEIGHTS["protein"]
            + breakdown.macro_balance * WEIGHTS["macro_balance"]
            + breakdown.preferences * WEIGHTS["preferences"]
        )
        score = max(0, min(100, round_half_up(total)))

        logger.debug(
            "Score meal %s: %s (cal=%.1f, protein=%.1f, balance=%.1f, prefs=%s)",
            meal.name, score, cal_score, pro_score, bal_score, evaluation.score,
        )
        return MatchResult(
            score=score,
            rating=get_match_rating(score),
            breakdown=breakdown,
            reasons=MatchReasons(
                positive=cal_pos + pro_pos + bal_pos + pref_pos,
                negative=cal_neg + pro_neg + bal_neg + pref_neg,
            ),
            match_info=evaluation.match_info,
        )


meal_scorer = MealScorer()
