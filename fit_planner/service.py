"""Request/response adapter between form-style input and the planning engine.

Web forms and other callers send flat dictionaries of strings; this module
turns them into a ``UserProfile`` (applying defaults and schedule clamps)
and turns a ``WeeklyPlan`` back into plain JSON-ready data.
"""

import logging
from typing import Mapping, Optional

from fit_planner.config import (
    DEFAULT_SEED,
    PROFILE_DEFAULTS,
    SESSION_MINUTES_RANGE,
    WORKOUT_DAYS_RANGE,
)
from fit_planner.models import (
    ActivityLevel,
    DayPlan,
    DietPreference,
    Equipment,
    Exercise,
    Experience,
    Goal,
    Meal,
    Schedule,
    Sex,
    UserProfile,
    WeeklyPlan,
)
from fit_planner.planner import aggregate_shopping_list, generate_weekly_plan

logger = logging.getLogger(__name__)

TRUTHY = {"y", "yes", "true", "on", "1"}


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def split_terms(text, lower: bool = True) -> frozenset:
    """Split comma-separated input into trimmed, non-blank terms."""
    if not text:
        return frozenset()
    if isinstance(text, str):
        parts = text.split(",")
    else:
        parts = list(text)
    terms = (p.strip() for p in parts)
    return frozenset(t.lower() if lower else t for t in terms if t)


def parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY


def _parse_number(value, default, cast):
    """Blank or malformed numbers fall back to the default."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    try:
        return cast(value)
    except (TypeError, ValueError):
        logger.debug("Could not parse %r, using default %r", value, default)
        return default


def normalize_schedule(workout_days_per_week, minutes_per_workout, daily_food_budget) -> Schedule:
    """Build a Schedule with days and minutes clamped to supported ranges."""
    days = _parse_number(workout_days_per_week, PROFILE_DEFAULTS["workout_days_per_week"], int)
    minutes = _parse_number(minutes_per_workout, PROFILE_DEFAULTS["minutes_per_workout"], int)
    budget = _parse_number(daily_food_budget, PROFILE_DEFAULTS["daily_food_budget"], float)
    return Schedule(
        workout_days_per_week=clamp(days, *WORKOUT_DAYS_RANGE),
        minutes_per_workout=clamp(minutes, *SESSION_MINUTES_RANGE),
        daily_food_budget=budget,
    )


def profile_from_form(form: Mapping) -> UserProfile:
    """Map a flat form dictionary to a UserProfile.

    Missing fields take PROFILE_DEFAULTS; enum fields parse leniently.
    Allergies and dislikes are lower-cased, cuisines are kept as typed.
    """
    def get(key):
        value = form.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            return PROFILE_DEFAULTS.get(key)
        return value.strip() if isinstance(value, str) else value

    diet = DietPreference(
        vegetarian=parse_bool(form.get("vegetarian")),
        vegan=parse_bool(form.get("vegan")),
        lactose_free=parse_bool(form.get("lactose_free")),
        gluten_free=parse_bool(form.get("gluten_free")),
        halal=parse_bool(form.get("halal")),
        allergies=split_terms(form.get("allergies")),
        disliked_ingredients=split_terms(form.get("disliked_ingredients")),
        preferred_cuisines=split_terms(form.get("preferred_cuisines"), lower=False),
    )
    equipment = Equipment(
        gym=parse_bool(form.get("has_gym")),
        dumbbells=parse_bool(form.get("has_dumbbells")),
        resistance_bands=parse_bool(form.get("has_resistance_bands")),
        yoga_mat=parse_bool(form.get("has_yoga_mat")),
        can_run_outside=parse_bool(form.get("can_run_outside")),
    )
    schedule = normalize_schedule(
        form.get("workout_days_per_week"),
        form.get("minutes_per_workout"),
        form.get("daily_food_budget"),
    )
    return UserProfile(
        name=get("name"),
        age=_parse_number(form.get("age"), PROFILE_DEFAULTS["age"], int),
        sex=Sex.parse(get("sex")),
        height_cm=_parse_number(form.get("height_cm"), PROFILE_DEFAULTS["height_cm"], float),
        weight_kg=_parse_number(form.get("weight_kg"), PROFILE_DEFAULTS["weight_kg"], float),
        activity_level=ActivityLevel.parse(get("activity_level")),
        experience=Experience.parse(get("experience")),
        goal=Goal.parse(get("goal")),
        diet=diet,
        equipment=equipment,
        schedule=schedule,
        region=get("region"),
    )


# --- Serialization ---

def exercise_to_dict(exercise: Exercise) -> dict:
    return {
        "name": exercise.name,
        "muscle_group": exercise.muscle_group.value,
        "equipment": exercise.equipment.value,
        "intensity": exercise.intensity.value,
        "minutes": exercise.minutes,
        "level": exercise.level.value,
        "outdoors": exercise.outdoors,
    }


def meal_to_dict(meal: Meal) -> dict:
    return {
        "name": meal.name,
        "cuisine": meal.cuisine,
        "vegetarian": meal.vegetarian,
        "vegan": meal.vegan,
        "ingredients": list(meal.ingredients),
        "calories": meal.calories,
        "protein_g": meal.protein_g,
        "carbs_g": meal.carbs_g,
        "fat_g": meal.fat_g,
        "cost": meal.cost,
        "halal": meal.halal,
        "lactose_free": meal.lactose_free,
        "gluten_free": meal.gluten_free,
    }


def day_to_dict(day: DayPlan) -> dict:
    return {
        "day": day.day_name,
        "rest_day": day.rest_day,
        "exercises": [exercise_to_dict(e) for e in day.exercises],
        "workout_minutes": day.workout_minutes,
        "meals": [meal_to_dict(m) for m in day.meals],
        "target_calories": day.target_calories,
        "calories": day.calories,
        "protein_g": day.protein_g,
        "carbs_g": day.carbs_g,
        "fat_g": day.fat_g,
        "cost": day.cost,
    }


def plan_to_dict(plan: WeeklyPlan) -> dict:
    return {
        "days": [day_to_dict(d) for d in plan.days],
        "target_calories": plan.target_calories,
        "weekly_target_calories": plan.weekly_target_calories,
        "weekly_budget": plan.weekly_budget,
        "weekly_cost": plan.weekly_cost,
        "seed": plan.seed,
    }


def profile_to_dict(profile: UserProfile) -> dict:
    diet = profile.diet
    equipment = profile.equipment
    schedule = profile.schedule
    return {
        "name": profile.name,
        "age": profile.age,
        "sex": profile.sex.value,
        "height_cm": profile.height_cm,
        "weight_kg": profile.weight_kg,
        "activity_level": profile.activity_level.value,
        "experience": profile.experience.value,
        "goal": profile.goal.value,
        "region": profile.region,
        "diet": {
            "vegetarian": diet.vegetarian,
            "vegan": diet.vegan,
            "lactose_free": diet.lactose_free,
            "gluten_free": diet.gluten_free,
            "halal": diet.halal,
            "allergies": sorted(diet.allergies),
            "disliked_ingredients": sorted(diet.disliked_ingredients),
            "preferred_cuisines": sorted(diet.preferred_cuisines),
        },
        "equipment": {
            "gym": equipment.gym,
            "dumbbells": equipment.dumbbells,
            "resistance_bands": equipment.resistance_bands,
            "yoga_mat": equipment.yoga_mat,
            "can_run_outside": equipment.can_run_outside,
        },
        "schedule": {
            "workout_days_per_week": schedule.workout_days_per_week,
            "minutes_per_workout": schedule.minutes_per_workout,
            "daily_food_budget": schedule.daily_food_budget,
        },
    }


def build_plan_response(form: Mapping, seed: Optional[int] = DEFAULT_SEED) -> dict:
    """Profile + plan + shopping list for one request.

    Each call seeds its own generator, so concurrent requests never share
    random state.
    """
    profile = profile_from_form(form)
    plan = generate_weekly_plan(profile, seed=seed)
    empty_days = [d.day_name for d in plan.days if not d.has_meals]
    return {
        "profile": profile_to_dict(profile),
        "daily_calories": plan.target_calories,
        "daily_budget": plan.daily_budget,
        "weekly_budget": plan.weekly_budget,
        "weekly_cost": plan.weekly_cost,
        "plan": plan_to_dict(plan),
        "shopping_list": aggregate_shopping_list(plan),
        "days_without_meals": empty_days,
    }
