"""Tests for rule-based menu estimation and goal insights."""

from schemas.meal_schema import Meal
from schemas.profile_schema import Goal
from services.menu_estimator import estimate_menu_nutrition, estimate_single_item, generate_meal_insight


def _macros(meal: Meal):
    return (meal.calories, meal.protein, meal.carbs, meal.fat)


def test_protein_keyword_sets_base():
    estimate, insight = estimate_single_item("grilled chicken")
    assert estimate == {"calories": 550, "protein": 42, "carbs": 35, "fat": 18}
    assert insight.startswith("Chicken is a lean protein")


def test_unknown_dish_uses_default_base():
    estimate, insight = estimate_single_item("house special")
    assert estimate == {"calories": 600, "protein": 25, "carbs": 50, "fat": 25}
    assert insight == "A balanced restaurant meal."


def test_salad_modifier_scales_calories_and_carbs():
    estimate, insight = estimate_single_item("chicken salad")
    assert estimate == {"calories": 385, "protein": 42, "carbs": 18, "fat": 18}
    assert "Salads" in insight


def test_pizza_with_cuisine_and_size_modifiers():
    meals = estimate_menu_nutrition(["Large Pepperoni Pizza"], cuisine_type="Italian", restaurant="Tony's")
    assert len(meals) == 1
    assert _macros(meals[0]) == (980, 36, 126, 45)
    assert meals[0].restaurant == "Tony's"
    assert "Pizza" in meals[0].insight


def test_side_modifiers():
    meals = estimate_menu_nutrition(
        [
            {"name": "Steak Frites", "description": "with fries"},
            {"name": "Salmon Plate", "description": "steamed vegetables"},
        ]
    )
    steak, salmon = meals
    assert _macros(steak) == (1000, 52, 60, 52)
    assert _macros(salmon) == (580, 38, 35, 25)
    assert salmon.insight == "Vegetables add nutrients with minimal calories."


def test_estimates_are_flagged_and_unnamed_items_skipped():
    meals = estimate_menu_nutrition(["Chicken Wrap", {"name": "", "description": "mystery"}, "Shrimp Tacos"])
    assert [m.id for m in meals] == ["est-0", "est-2"]
    assert all(m.is_estimated and m.source == "rules" for m in meals)


def test_insight_for_bulk():
    meal = Meal(id="b", name="Chicken Burrito Bowl", calories=1050, protein=62, carbs=95, fat=42)
    assert generate_meal_insight(meal, Goal.BULK).startswith("Great bulking choice with 62g protein")
    lean = Meal(id="l", name="Nuggets", calories=200, protein=38, carbs=2, fat=4)
    assert generate_meal_insight(lean, Goal.BULK).startswith("Moderate protein")


def test_insight_for_cut():
    meal = Meal(id="c", name="Naked Wings", calories=360, protein=48, carbs=0, fat=18)
    assert generate_meal_insight(meal, Goal.CUT) == "Excellent cutting option - high protein (48g) at only 360 calories."
    heavy = Meal(id="h", name="Steak Burrito", calories=1150, protein=58, carbs=100, fat=48)
    assert generate_meal_insight(heavy, Goal.CUT).startswith("Higher calorie option (1150 cal)")


def test_insight_for_maintain_uses_protein_density():
    dense = Meal(id="d", name="Chicken Bowl", calories=680, protein=48, carbs=58, fat=26)
    assert generate_meal_insight(dense).startswith("Well-balanced with good protein density")
    light = Meal(id="v", name="Veggie Bowl", calories=580, protein=18, carbs=72, fat=24)
    assert generate_meal_insight(light, Goal.MAINTAIN).startswith("Balanced macros")
