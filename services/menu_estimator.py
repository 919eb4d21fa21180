"""Rule-based menu nutrition estimation.

Estimates calories and macros for restaurants without published nutrition
data by matching keywords in dish names and descriptions. Results are
flagged `is_estimated` so callers can label them as approximations.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from core.logger import get_logger
from schemas.meal_schema import Meal
from schemas.profile_schema import Goal
from services.nutrition_calculator import round_half_up

logger = get_logger("services.menu_estimator")

MenuItem = Union[str, Mapping[str, Any]]

DEFAULT_BASE = {"calories": 600, "protein": 25, "carbs": 50, "fat": 25}
DEFAULT_INSIGHT = "A balanced restaurant meal."

# (keywords, base macros, insight); first match wins
PROTEIN_RULES: Tuple[Tuple[Tuple[str, ...], Dict[str, int], str], ...] = (
    (("chicken",), {"calories": 550, "protein": 42, "carbs": 35, "fat": 18},
     "Chicken is a lean protein source, great for hitting protein goals."),
    (("steak", "sirloin", "ribeye", "filet"), {"calories": 650, "protein": 52, "carbs": 15, "fat": 35},
     "Steak delivers high protein, perfect for muscle building."),
    (("salmon", "fish", "seafood"), {"calories": 500, "protein": 38, "carbs": 20, "fat": 25},
     "Fish provides protein plus healthy omega-3 fats."),
    (("shrimp",), {"calories": 400, "protein": 35, "carbs": 25, "fat": 15},
     "Shrimp is very low calorie with solid protein."),
    (("burger", "patty"), {"calories": 750, "protein": 35, "carbs": 45, "fat": 45},
     "Burgers are calorie-dense; good for bulking, watch portions for cutting."),
)


def _scale(base: Dict[str, int], **factors: float) -> None:
    for key, factor in factors.items():
        base[key] = round_half_up(base[key] * factor)


def _has_any(text: str, keywords: Sequence[str]) -> bool:
    return any(k in text for k in keywords)


def _apply_dish_modifier(text: str, base: Dict[str, int], insight: str) -> Tuple[Dict[str, int], str]:
    if "salad" in text and "pasta salad" not in text:
        _scale(base, calories=0.7, carbs=0.5)
        return base, "Salads are typically lower calorie. Watch out for heavy dressings."
    if _has_any(text, ("fried", "crispy", "breaded")):
        _scale(base, calories=1.3, fat=1.5)
        return base, "Fried foods add significant calories from oil."
    if "bowl" in text:
        _scale(base, carbs=1.3)
        return base, "Bowls often have good macro balance with protein, carbs, and veggies."
    if _has_any(text, ("wrap", "burrito")):
        _scale(base, carbs=1.2)
        return base, "Wraps can be a good balanced option depending on fillings."
    if _has_any(text, ("pasta", "spaghetti", "fettuccine")):
        return (
            {"calories": 800, "protein": 25, "carbs": 95, "fat": 30},
            "Pasta is carb-heavy. Ask for extra protein or go half portion for cutting.",
        )
    if "pizza" in text:
        return (
            {"calories": 700, "protein": 28, "carbs": 75, "fat": 32},
            "Pizza varies widely. Thin crust with lean toppings is better for macros.",
        )
    return base, insight


def _apply_cuisine_modifier(cuisine: str, base: Dict[str, int]) -> None:
    cuisine = (cuisine or "").lower()
    if "mexican" in cuisine:
        _scale(base, carbs=1.1, fat=1.1)
    elif "italian" in cuisine:
        _scale(base, carbs=1.2)
    elif _has_any(cuisine, ("asian", "chinese", "thai")):
        _scale(base, carbs=1.15)
    elif "indian" in cuisine:
        _scale(base, fat=1.2)
    elif _has_any(cuisine, ("mediterranean", "greek")):
        _scale(base, calories=0.9)


def _apply_size_modifier(text: str, base: Dict[str, int]) -> None:
    if _has_any(text, ("large", "xl", "double")):
        _scale(base, calories=1.4, protein=1.3, carbs=1.4, fat=1.4)
    elif _has_any(text, ("small", "petite", "lunch")):
        _scale(base, calories=0.7, protein=0.7, carbs=0.7, fat=0.7)


def _apply_side_modifier(text: str, base: Dict[str, int], insight: str) -> str:
    if "fries" in text:
        base["calories"] += 350
        base["carbs"] += 45
        base["fat"] += 17
    elif _has_any(text, ("vegetable", "veggie", "steamed")):
        base["calories"] += 80
        base["carbs"] += 15
        return "Vegetables add nutrients with minimal calories."
    elif _has_any(text, ("mashed potato", "baked potato")):
        base["calories"] += 250
        base["carbs"] += 40
    return insight


def estimate_single_item(text: str, cuisine_type: Optional[str] = "American") -> Tuple[Dict[str, int], str]:
    """Estimate macros and an insight for one lowercase dish text."""
    base = dict(DEFAULT_BASE)
    insight = DEFAULT_INSIGHT
    for keywords, macros, rule_insight in PROTEIN_RULES:
        if _has_any(text, keywords):
            base, insight = dict(macros), rule_insight
            break

    base, insight = _apply_dish_modifier(text, base, insight)
    _apply_cuisine_modifier(cuisine_type or "", base)
    _apply_size_modifier(text, base)
    insight = _apply_side_modifier(text, base, insight)
    return base, insight


def estimate_menu_nutrition(
    menu_items: Sequence[MenuItem],
    cuisine_type: Optional[str] = "American",
    restaurant: str = "",
) -> List[Meal]:
    """Estimate nutrition for each menu entry.

    Entries are plain dish names or mappings with `name` and an optional
    `description`. Entries without a name are skipped.
    """
    meals = []
    for index, item in enumerate(menu_items):
        if isinstance(item, str):
            name, description = item, ""
        else:
            name, description = item.get("name") or "", item.get("description") or ""
        if not name.strip():
            logger.warning("Skipping unnamed menu item at index %s", index)
            continue
        estimate, insight = estimate_single_item(f"{name} {description}".lower(), cuisine_type)
        meals.append(Meal(
            id=f"est-{index}",
            name=name,
            restaurant=restaurant,
            description=description,
            insight=insight,
            is_estimated=True,
            source="rules",
            **estimate,
        ))
    logger.info("Estimated nutrition for %s menu items", len(meals))
    return meals


def generate_meal_insight(meal: Meal, goal: Optional[Goal] = None) -> str:
    """Return goal-specific advice for ordering `meal`."""
    goal = goal or Goal.MAINTAIN
    calories = round_half_up(meal.calories)
    protein = round_half_up(meal.protein)

    if goal == Goal.BULK:
        if protein >= 40 and calories >= 600:
            return f"Great bulking choice with {protein}g protein. This will help fuel muscle growth."
        if protein >= 40:
            return f"Solid protein at {protein}g. Consider adding a side to boost calories for bulking."
        return "Moderate protein. Ask for extra meat or a protein side to optimize for muscle building."
    if goal == Goal.CUT:
        if calories <= 500 and protein >= 30:
            return f"Excellent cutting option - high protein ({protein}g) at only {calories} calories."
        if calories <= 600:
            return f"Reasonable for cutting at {calories} cal. Prioritize the protein and skip heavy sauces."
        return f"Higher calorie option ({calories} cal). Ask for dressing on side or skip the bread to reduce."

    protein_per_100_cal = meal.protein / (meal.calories / 100) if meal.calories > 0 else 0.0
    if protein_per_100_cal >= 7:
        return "Well-balanced with good protein density. A solid choice for maintaining."
    return "Balanced macros. Add a side salad or veggies to round out the meal."
