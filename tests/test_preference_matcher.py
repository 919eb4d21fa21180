"""Tests for allergy vetoes and like/dislike preference scoring."""

import pytest

from schemas.meal_schema import Meal
from schemas.profile_schema import PreferenceProfile
from services.preference_matcher import (
    PreferenceMatcher,
    allergen_keywords,
    find_triggered_allergy,
)

matcher = PreferenceMatcher()


def _meal(**kwargs):
    data = {
        "id": "m1",
        "name": "Chicken Burrito Bowl",
        "restaurant": "Chipotle",
        "calories": 650,
        "protein": 45,
        "carbs": 60,
        "fat": 22,
        "description": "Chicken, rice, black beans, cheese",
        "allergens": "",
        "tags": ["chicken", "mexican", "bowl"],
    }
    data.update(kwargs)
    return Meal(**data)


def test_no_preferences_gives_base_score():
    evaluation = matcher.evaluate(_meal())
    assert evaluation.score == 80
    assert evaluation.match_info.matched_likes == []
    assert evaluation.match_info.matched_dislikes == []
    assert evaluation.match_info.has_allergen is False


def test_sparse_meal_gives_base_score():
    meal = Meal(id=7, name="Mystery Plate", description=None, tags=None, allergens=None)
    assert matcher.evaluate(meal, PreferenceProfile(allergies=["dairy"])).score == 80


def test_allergen_is_an_absolute_veto():
    """An allergen hit returns 0 even when likes would push the score up."""
    meal = _meal(allergens="Dairy, gluten")
    prefs = PreferenceProfile(
        food_likes={"proteins": ["chicken"], "cuisines": ["mexican"]},
        allergies=["dairy"],
    )
    evaluation = matcher.evaluate(meal, prefs)
    assert evaluation.score == 0
    assert evaluation.match_info.has_allergen is True
    assert evaluation.match_info.allergen_triggered == "dairy"
    assert evaluation.match_info.matched_likes == []


def test_allergy_synonyms_match_allergen_tags():
    meal = _meal(allergens="cheese, wheat")
    assert matcher.evaluate(meal, PreferenceProfile(allergies=["dairy"])).score == 0
    assert matcher.evaluate(meal, PreferenceProfile(allergies=["gluten"])).score == 0
    assert matcher.evaluate(meal, PreferenceProfile(allergies=["fish"])).score == 80


def test_unknown_allergy_matches_its_own_name():
    meal = _meal(allergens="mustard")
    evaluation = matcher.evaluate(meal, PreferenceProfile(allergies=["Mustard"]))
    assert evaluation.score == 0
    assert evaluation.match_info.allergen_triggered == "Mustard"


def test_allergy_checks_allergen_field_only():
    """Allergies look at the allergen tags, not the name or description."""
    meal = _meal(allergens="")
    assert matcher.evaluate(meal, PreferenceProfile(allergies=["dairy"])).score == 80


def test_likes_add_ten_each_and_clamp_at_100():
    prefs = PreferenceProfile(food_likes={"proteins": ["chicken"], "cuisines": ["mexican"], "entrees": ["bowl"]})
    evaluation = matcher.evaluate(_meal(), prefs)
    assert evaluation.score == 100
    # category order: cuisines, entrees, proteins
    assert evaluation.match_info.matched_likes == ["mexican", "bowl", "chicken"]


def test_single_like_and_dislike_cancel_out():
    prefs = PreferenceProfile(food_likes={"proteins": ["chicken"]}, food_dislikes={"sides": ["beans"]})
    evaluation = matcher.evaluate(_meal(), prefs)
    assert evaluation.score == 80
    assert evaluation.match_info.matched_dislikes == ["beans"]


def test_dislikes_clamp_at_zero():
    dislikes = ["chicken", "rice", "beans", "cheese", "mexican", "bowl", "burrito", "black", "chipotle"]
    evaluation = matcher.evaluate(_meal(), PreferenceProfile(food_dislikes={"entrees": dislikes}))
    assert evaluation.score == 0
    assert evaluation.match_info.has_allergen is False


def test_matching_is_case_insensitive_and_uses_description():
    prefs = PreferenceProfile(food_likes={"proteins": ["CHICKEN"], "sides": ["Black Beans"]})
    assert matcher.evaluate(_meal(), prefs).score == 100


def test_substring_matching_has_false_positives():
    """'ham' is found inside 'Hamburger'; containment is not word-aware."""
    meal = _meal(name="Hamburger", description="Beef patty", tags=["beef"])
    evaluation = matcher.evaluate(meal, PreferenceProfile(food_dislikes={"proteins": ["ham"]}))
    assert evaluation.score == 70
    assert evaluation.match_info.matched_dislikes == ["ham"]


@pytest.mark.parametrize(
    "allergy,expected",
    [
        ("dairy", ("dairy", "milk", "cheese", "cream", "butter")),
        (" Soy ", ("soy", "tofu", "sofritas")),
        ("kiwi", ("kiwi",)),
        ("", ()),
    ],
)
def test_allergen_keywords(allergy, expected):
    assert allergen_keywords(allergy) == expected


def test_find_triggered_allergy_returns_first_declared():
    assert find_triggered_allergy("dairy, sesame", ["sesame", "dairy"]) == "sesame"
    assert find_triggered_allergy("", ["dairy"]) is None
    assert find_triggered_allergy(None, ["dairy"]) is None
