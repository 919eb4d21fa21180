"""Preference matching for a single meal.

Checks a meal against the user's allergies (an absolute veto) and rewards or
penalises it for liked and disliked food tags. Matching is plain
case-insensitive substring containment, so a tag like "ham" also matches
"hamburger".
"""

from typing import Dict, Iterable, List, Optional, Tuple

from core.logger import get_logger
from schemas.meal_schema import Meal
from schemas.profile_schema import PreferenceProfile
from schemas.recommendation_schema import MatchInfo, PreferenceEvaluation

logger = get_logger("services.preference_matcher")

ALLERGY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "dairy": ("dairy", "milk", "cheese", "cream", "butter"),
    "gluten": ("gluten", "wheat", "bread", "bun"),
    "peanut": ("peanut", "peanuts"),
    "tree nuts": ("almond", "cashew", "walnut", "nuts"),
    "shellfish": ("shrimp", "crab", "lobster", "shellfish"),
    "fish": ("fish", "salmon", "tuna"),
    "egg": ("egg", "eggs"),
    "soy": ("soy", "tofu", "sofritas"),
    "sesame": ("sesame", "tahini"),
}

BASE_SCORE = 80
LIKE_BONUS = 10
DISLIKE_PENALTY = 10


def allergen_keywords(allergy: str) -> Tuple[str, ...]:
    """Return the allergen-tag keywords for a declared allergy.

    Allergies outside the synonym table match on their own name.
    """
    key = allergy.strip().lower()
    if not key:
        return ()
    return ALLERGY_KEYWORDS.get(key, (key,))


def find_triggered_allergy(allergens: Optional[str], allergies: Iterable[str]) -> Optional[str]:
    """Return the first declared allergy whose keywords appear in `allergens`."""
    allergens_lower = (allergens or "").lower()
    if not allergens_lower:
        return None
    for allergy in allergies:
        for keyword in allergen_keywords(allergy or ""):
            if keyword in allergens_lower:
                return allergy
    return None


def meal_text(meal: Meal) -> str:
    """Lowercase blob of name, description and tags used for tag matching."""
    return " ".join([meal.name or "", meal.description or "", " ".join(meal.tags or [])]).lower()


def _matching_tags(tags: List[str], text: str) -> List[str]:
    return [tag for tag in tags if tag and tag.strip() and tag.strip().lower() in text]


class PreferenceMatcher:
    """Scores a meal against a user's preference profile."""

    def evaluate(self, meal: Meal, preferences: Optional[PreferenceProfile] = None) -> PreferenceEvaluation:
        """Return a 0-100 preference score and the tags that matched.

        An allergen hit short-circuits to a score of 0 before any like or
        dislike is considered.
        """
        preferences = preferences or PreferenceProfile()

        triggered = find_triggered_allergy(meal.allergens, preferences.allergies)
        if triggered is not None:
            logger.debug("Meal %s disqualified by allergy %s", meal.id, triggered)
            return PreferenceEvaluation(
                score=0,
                match_info=MatchInfo(has_allergen=True, allergen_triggered=triggered),
            )

        text = meal_text(meal)
        matched_likes = _matching_tags(preferences.food_likes.all_tags(), text)
        matched_dislikes = _matching_tags(preferences.food_dislikes.all_tags(), text)

        score = BASE_SCORE + LIKE_BONUS * len(matched_likes) - DISLIKE_PENALTY * len(matched_dislikes)
        score = max(0, min(100, score))
        return PreferenceEvaluation(
            score=score,
            match_info=MatchInfo(matched_likes=matched_likes, matched_dislikes=matched_dislikes),
        )


preference_matcher = PreferenceMatcher()
