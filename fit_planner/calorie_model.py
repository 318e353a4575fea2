"""Daily calorie target calculation.

Uses:
- Mifflin-St Jeor equation for Basal Metabolic Rate (BMR)
- Activity multipliers for Total Daily Energy Expenditure (TDEE)
- A fixed kcal adjustment per goal, clamped to a safe daily range

References:
- Mifflin MD, St Jeor ST, et al. (1990). "A new predictive equation for
  resting energy expenditure in healthy individuals." Am J Clin Nutr.
"""

import math

from fit_planner.config import (
    ACTIVITY_MULTIPLIERS,
    GOAL_CALORIE_ADJUSTMENTS,
    MAX_DAILY_CALORIES,
    MIN_DAILY_CALORIES,
    SEX_OFFSETS,
)
from fit_planner.models import ActivityLevel, CalorieTargets, Goal, Sex, UserProfile


def calculate_bmr(profile: UserProfile) -> float:
    """Calculate Basal Metabolic Rate using the Mifflin-St Jeor equation.

    Male:   BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) + 5
    Female: BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) − 161
    """
    bmr = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
    return bmr + SEX_OFFSETS[Sex.parse(profile.sex).value]


def calculate_tdee(bmr: float, activity_level) -> float:
    """Calculate Total Daily Energy Expenditure.

    TDEE = BMR × activity multiplier. Unrecognised levels count as sedentary.
    """
    multiplier = ACTIVITY_MULTIPLIERS[ActivityLevel.parse(activity_level).value]
    return bmr * multiplier


def goal_adjustment(goal) -> int:
    """kcal added to TDEE for a goal (deficit for fat loss, surplus for muscle)."""
    return GOAL_CALORIE_ADJUSTMENTS[Goal.parse(goal).value]


def clamp_calories(calories: float) -> int:
    """Round half up and clamp to the safe daily range."""
    rounded = math.floor(calories + 0.5)
    return max(MIN_DAILY_CALORIES, min(MAX_DAILY_CALORIES, rounded))


def calculate_calorie_targets(profile: UserProfile) -> CalorieTargets:
    """Calculate BMR, TDEE and the daily calorie target for a user.

    Steps:
    1. Calculate BMR via Mifflin-St Jeor
    2. Multiply by activity factor to get TDEE
    3. Add the goal adjustment
    4. Round and clamp to [MIN_DAILY_CALORIES, MAX_DAILY_CALORIES]
    """
    bmr = calculate_bmr(profile)
    tdee = calculate_tdee(bmr, profile.activity_level)
    return CalorieTargets(
        bmr=bmr,
        tdee=tdee,
        calories=clamp_calories(tdee + goal_adjustment(profile.goal)),
    )


def calculate_target_calories(profile: UserProfile) -> int:
    """The single daily target shared by every day of the week."""
    return calculate_calorie_targets(profile).calories


def format_targets(targets: CalorieTargets) -> str:
    """Format calorie targets for display."""
    lines = [
        f"BMR:      {targets.bmr:.0f} kcal",
        f"TDEE:     {targets.tdee:.0f} kcal",
        f"Target:   {targets.calories} kcal/day",
        f"Weekly:   {targets.calories * 7} kcal",
    ]
    return "\n".join(lines)
