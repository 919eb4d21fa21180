"""Tests for the weighted meal scoring model."""

import pytest

from data.meals_dataset import load_default_catalog
from schemas.meal_schema import MacroTargets, Meal
from schemas.profile_schema import PreferenceProfile
from schemas.recommendation_schema import Rating
from services.meal_scorer import (
    MealScorer,
    get_match_rating,
    score_calories,
    score_macro_balance,
    score_protein,
)

scorer = MealScorer()
TARGETS = MacroTargets(calories=500, protein=40, carbs=50, fat=20)


def _meal(calories=500, protein=40, carbs=50, fat=20, **kwargs):
    data = {"id": "m", "name": "Test Plate", "calories": calories, "protein": protein, "carbs": carbs, "fat": fat}
    data.update(kwargs)
    return Meal(**data)


def test_calorie_band_within_twenty_percent_is_full_score():
    score, positive, negative = score_calories(_meal(calories=590), TARGETS)
    assert score == 100
    assert positive == ["590 cal fits your calorie target"]
    assert negative == []


def test_calorie_band_twenty_to_thirty_five_percent():
    score, _, negative = score_calories(_meal(calories=620), TARGETS)
    assert score == pytest.approx(83)
    assert negative == []

    score, _, negative = score_calories(_meal(calories=660), TARGETS)
    assert score == pytest.approx(79)
    assert negative == ["32% over your calorie target"]


def test_calorie_band_thirty_five_to_fifty_percent():
    score, _, negative = score_calories(_meal(calories=300), TARGETS)
    assert score == pytest.approx(67)
    assert negative == ["40% under your calorie target"]


def test_calorie_band_beyond_fifty_percent_has_floor():
    score, _, negative = score_calories(_meal(calories=100), TARGETS)
    assert score == pytest.approx(48)
    assert negative == ["Lower calorie option"]

    score, _, negative = score_calories(_meal(calories=1500), TARGETS)
    assert score == 40
    assert negative == ["Higher calorie option"]


def test_calorie_score_zero_target_does_not_crash():
    score, _, _ = score_calories(_meal(calories=300), MacroTargets(calories=0, protein=40, carbs=0, fat=0))
    assert score == 40


def test_calorie_score_is_monotonic_in_distance():
    """Moving away from the target in either direction never raises the score."""
    for sign in (1, -1):
        previous = None
        for offset in range(0, 500, 5):
            score, _, _ = score_calories(_meal(calories=500 + sign * offset), TARGETS)
            if previous is not None:
                assert score <= previous + 1e-9
            previous = score


@pytest.mark.parametrize(
    "protein,expected,positive,negative",
    [
        (52, 100, ["52g protein hits your target"], []),
        (36, 95, ["36g protein, close to target"], []),
        (31, 85, ["31g protein"], []),
        (28, 70, [], []),
        (25, 70, [], ["25g protein, below your target"]),
        (20, 45, [], ["Lower protein option"]),
        (10, 45, [], ["Lower protein option"]),
    ],
)
def test_protein_bands(protein, expected, positive, negative):
    score, pos, neg = score_protein(_meal(protein=protein), TARGETS)
    assert score == pytest.approx(expected)
    assert pos == positive
    assert neg == negative


def test_protein_score_is_monotonic():
    previous = None
    for protein in range(0, 61):
        score, _, _ = score_protein(_meal(protein=protein), TARGETS)
        if previous is not None:
            assert score >= previous
        previous = score


def test_macro_balance_ideal_split():
    score, positive, negative = score_macro_balance(_meal(calories=600, protein=45, carbs=60, fat=20))
    assert score == 100
    assert positive == ["Well-balanced macros"]
    assert negative == []


def test_macro_balance_without_macros_is_neutral():
    assert score_macro_balance(_meal(protein=0, carbs=0, fat=0))[0] == 50


def test_macro_balance_flags_fat_and_carbs():
    _, _, negative = score_macro_balance(_meal(protein=10, carbs=10, fat=40))
    assert negative == ["High in fat"]
    _, _, negative = score_macro_balance(_meal(protein=10, carbs=100, fat=5))
    assert negative == ["High in carbs"]


@pytest.mark.parametrize(
    "score,rating",
    [(100, Rating.EXCELLENT), (90, Rating.EXCELLENT), (89.9, Rating.GREAT), (80, Rating.GREAT),
     (70, Rating.GOOD), (60, Rating.OKAY), (59, Rating.POOR), (0, Rating.POOR)],
)
def test_get_match_rating(score, rating):
    assert get_match_rating(score) == rating


def test_score_exact_calorie_and_protein_hit():
    """A 500/52/18/22 meal against 480 kcal and 40 g protein fully meets both."""
    meal = _meal(calories=500, protein=52, carbs=18, fat=22)
    result = scorer.score(meal, MacroTargets(calories=480, protein=40, carbs=50, fat=20))
    assert result.breakdown.calories == 100
    assert result.breakdown.protein == 100
    # protein 43%, carbs 15%, fat 41% of energy: no macro range is met
    assert result.breakdown.macro_balance == 0
    assert result.score == 77
    assert result.rating == Rating.GOOD
    assert result.reasons.positive == ["500 cal fits your calorie target", "52g protein hits your target"]


def test_score_excellent_meal():
    meal = _meal(calories=600, protein=45, carbs=60, fat=20)
    result = scorer.score(meal, MacroTargets(calories=600, protein=40, carbs=60, fat=20))
    assert result.score == 97
    assert result.rating == Rating.EXCELLENT


def test_score_rounds_half_up():
    """30 + 35 + 20 + 13.5 = 98.5 rounds to 99."""
    meal = _meal(calories=600, protein=45, carbs=60, fat=20, tags=["chicken"])
    prefs = PreferenceProfile(food_likes={"proteins": ["chicken"]})
    result = scorer.score(meal, MacroTargets(calories=600, protein=40, carbs=60, fat=20), prefs)
    assert result.breakdown.preferences == 90
    assert result.score == 99


def test_score_reasons_follow_component_order():
    meal = _meal(calories=1500, protein=10, carbs=10, fat=40, tags=["mushroom"], allergens="")
    prefs = PreferenceProfile(food_dislikes={"sides": ["mushroom"]})
    result = scorer.score(meal, TARGETS, prefs)
    assert result.reasons.negative == [
        "Higher calorie option",
        "Lower protein option",
        "High in fat",
        "Contains mushroom (not your usual)",
    ]


def test_score_allergen_only_zeroes_preference_component():
    meal = _meal(allergens="dairy")
    result = scorer.score(meal, TARGETS, PreferenceProfile(allergies=["dairy"]))
    assert result.breakdown.preferences == 0
    assert result.match_info.has_allergen is True
    assert "Contains dairy (allergen)" in result.reasons.negative
    assert result.score > 0


def test_liked_tags_reason():
    meal = _meal(tags=["chicken", "mexican"])
    prefs = PreferenceProfile(food_likes={"cuisines": ["mexican"], "proteins": ["chicken"]})
    result = scorer.score(meal, TARGETS, prefs)
    assert "Includes mexican, chicken you like" in result.reasons.positive


def test_scores_stay_in_range_for_catalog():
    for meal in load_default_catalog():
        result = scorer.score(meal, TARGETS)
        assert 0 <= result.score <= 100
        assert result.rating == get_match_rating(result.score)
