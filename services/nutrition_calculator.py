"""Nutrition calculation helpers.

Derives BMR, TDEE, a goal-adjusted daily calorie budget and macro gram
targets from a user's profile, then splits the daily budget across meals.
Every output is a non-negative integer; grams are rounded independently, so
`protein*4 + carbs*4 + fat*9` only approximates the calorie budget.
"""

import math
from typing import Dict, Optional, Tuple

from core import config
from core.exceptions import InputError
from core.logger import get_logger
from schemas.meal_schema import MacroTargets, UserTargets
from schemas.profile_schema import ActivityLevel, EatingStyle, Gender, Goal, UserProfile

logger = get_logger("services.nutrition_calculator")

LBS_TO_KG = 0.453592
INCHES_TO_CM = 2.54
DEFAULT_AGE = 30
KCAL_PER_LB = 3500
DEFAULT_TIMELINE_WEEKS = 12
MAX_BULK_SURPLUS = 500
MAX_CUT_DEFICIT = 750

ACTIVITY_MULTIPLIERS: Dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.55

# goal -> (protein g per lb, protein ratio, carb ratio, fat ratio)
GOAL_MACRO_PLANS: Dict[Goal, Tuple[float, float, float, float]] = {
    Goal.BULK: (1.0, 0.30, 0.45, 0.25),
    Goal.CUT: (1.2, 0.35, 0.35, 0.30),
    Goal.MAINTAIN: (0.8, 0.25, 0.45, 0.30),
}

# eating style -> (protein ratio, carb ratio, fat ratio); the per-pound protein floor is kept
EATING_STYLE_RATIOS: Dict[EatingStyle, Optional[Tuple[float, float, float]]] = {
    EatingStyle.NONE: None,
    EatingStyle.KETO: (0.25, 0.05, 0.70),
    EatingStyle.CARNIVORE: (0.35, 0.0, 0.65),
    EatingStyle.GLUTEN_FREE: None,
    EatingStyle.VEGAN: None,
}

DEFAULT_PER_MEAL_TARGETS = MacroTargets(calories=700, protein=40, carbs=80, fat=25)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def _non_negative(value: float) -> int:
    return max(0, round_half_up(value))


class NutritionCalculator:
    """Class-based nutrition calculator used across the engine."""

    def calculate_bmr(self, gender: Gender, weight_lbs: float, height_inches: float, age: Optional[int] = None) -> float:
        """Calculate BMR (kcal/day) using the Mifflin-St Jeor equation.

        Weight and height arrive in imperial units and are converted to metric.
        For `Gender.OTHER` the male and female results are averaged.

        Raises:
            InputError: If weight or height is not positive.
        """
        if weight_lbs is None or weight_lbs <= 0:
            raise InputError("Weight must be positive to calculate BMR", field="current_weight_lbs")
        if height_inches is None or height_inches <= 0:
            raise InputError("Height must be positive to calculate BMR", field="height_inches")
        age = DEFAULT_AGE if age is None or age <= 0 else age

        weight_kg = weight_lbs * LBS_TO_KG
        height_cm = height_inches * INCHES_TO_CM
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        male = base + 5
        female = base - 161
        if gender == Gender.MALE:
            return male
        if gender == Gender.FEMALE:
            return female
        return (male + female) / 2

    def calculate_tdee(self, bmr: float, activity_level: Optional[ActivityLevel]) -> int:
        """Estimate TDEE from BMR and an activity multiplier."""
        multiplier = ACTIVITY_MULTIPLIERS.get(activity_level)
        if multiplier is None:
            logger.warning("Unknown activity level %r, using multiplier %s", activity_level, DEFAULT_ACTIVITY_MULTIPLIER)
            multiplier = DEFAULT_ACTIVITY_MULTIPLIER
        val = _non_negative(bmr * multiplier)
        logger.debug("TDEE calculated: %s", val)
        return val

    def calculate_daily_calories(
        self,
        tdee: float,
        goal: Goal,
        current_weight: float,
        goal_weight: Optional[float],
        timeline_weeks: Optional[float] = None,
    ) -> int:
        """Derive a daily calorie target from TDEE and a weight goal.

        The surplus or deficit needed to reach `goal_weight` in `timeline_weeks`
        is capped at +500 kcal/day for bulking and -750 kcal/day for cutting.
        """
        if goal == Goal.MAINTAIN:
            return _non_negative(tdee)

        if goal_weight is None:
            goal_weight = current_weight
        weeks = timeline_weeks
        if weeks is None or weeks <= 0:
            logger.warning("Timeline %r is not positive, defaulting to %s weeks", timeline_weeks, DEFAULT_TIMELINE_WEEKS)
            weeks = DEFAULT_TIMELINE_WEEKS

        weekly_adjustment = abs(goal_weight - current_weight) * KCAL_PER_LB / weeks
        daily_adjustment = weekly_adjustment / 7

        if goal == Goal.BULK:
            val = tdee + min(daily_adjustment, MAX_BULK_SURPLUS)
        else:
            val = tdee - min(daily_adjustment, MAX_CUT_DEFICIT)
        logger.debug("Target calories for goal %s: %s", goal.value, val)
        return _non_negative(val)

    def calculate_macros(
        self,
        calories: float,
        goal: Goal,
        weight_lbs: float,
        eating_style: EatingStyle = EatingStyle.NONE,
    ) -> MacroTargets:
        """Allocate macro gram targets from a calorie budget.

        Protein takes the larger of the per-pound floor and its calorie ratio,
        fat follows its ratio and carbs absorb whatever calories remain.
        """
        protein_per_lb, protein_ratio, carb_ratio, fat_ratio = GOAL_MACRO_PLANS[goal]
        style_ratios = EATING_STYLE_RATIOS.get(eating_style)
        if style_ratios is not None:
            protein_ratio, carb_ratio, fat_ratio = style_ratios

        calories = max(0.0, calories)
        weight_lbs = max(0.0, weight_lbs or 0.0)
        protein_g = round_half_up(max(weight_lbs * protein_per_lb, calories * protein_ratio / 4))
        fat_g = round_half_up(calories * fat_ratio / 9)
        carbs_g = round_half_up((calories - protein_g * 4 - fat_g * 9) / 4)

        macros = MacroTargets(
            calories=_non_negative(calories),
            protein=max(0, protein_g),
            carbs=max(0, carbs_g),
            fat=max(0, fat_g),
        )
        logger.debug("Macros calculated: %s", macros)
        return macros

    def calculate_per_meal_targets(self, daily: MacroTargets, meals_per_day: Optional[int] = None) -> MacroTargets:
        """Split a daily budget evenly across meals, rounding each field on its own."""
        if meals_per_day is None:
            meals_per_day = config.MEALS_PER_DAY
        if meals_per_day <= 0:
            logger.warning("meals_per_day=%s is not positive, using %s", meals_per_day, config.MEALS_PER_DAY)
            meals_per_day = config.MEALS_PER_DAY
        return MacroTargets(
            calories=_non_negative(daily.calories / meals_per_day),
            protein=_non_negative(daily.protein / meals_per_day),
            carbs=_non_negative(daily.carbs / meals_per_day),
            fat=_non_negative(daily.fat / meals_per_day),
        )

    def calculate_user_targets(self, profile: UserProfile, meals_per_day: Optional[int] = None) -> UserTargets:
        """Run the full profile -> TDEE -> daily -> per-meal pipeline.

        A profile without a usable height or weight yields the default
        per-meal targets instead of an error.
        """
        if meals_per_day is None or meals_per_day <= 0:
            meals_per_day = config.MEALS_PER_DAY
        try:
            bmr = self.calculate_bmr(profile.gender, profile.current_weight_lbs, profile.height_inches, profile.age)
        except InputError as exc:
            logger.warning("Incomplete profile (%s), using default targets", exc.message)
            per_meal = DEFAULT_PER_MEAL_TARGETS
            daily = MacroTargets(
                calories=per_meal.calories * meals_per_day,
                protein=per_meal.protein * meals_per_day,
                carbs=per_meal.carbs * meals_per_day,
                fat=per_meal.fat * meals_per_day,
            )
            return UserTargets(daily=daily, per_meal=per_meal, tdee=daily.calories)

        tdee = self.calculate_tdee(bmr, profile.activity_level)
        calories = self.calculate_daily_calories(
            tdee,
            profile.goal,
            profile.current_weight_lbs,
            profile.goal_weight_lbs,
            profile.timeline_weeks,
        )
        daily = self.calculate_macros(calories, profile.goal, profile.current_weight_lbs, profile.eating_style)
        per_meal = self.calculate_per_meal_targets(daily, meals_per_day)
        logger.info(
            "Targets for %s/%s profile: tdee=%s daily=%s kcal per_meal=%s kcal",
            profile.goal.value,
            profile.eating_style.value,
            tdee,
            daily.calories,
            per_meal.calories,
        )
        return UserTargets(daily=daily, per_meal=per_meal, tdee=tdee)


# export singleton
nutrition_calculator = NutritionCalculator()
__all__ = ["NutritionCalculator", "nutrition_calculator", "round_half_up", "DEFAULT_PER_MEAL_TARGETS"]
