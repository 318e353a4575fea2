"""Weekly workout and meal plan generation."""

import logging
import random
from collections import Counter
from typing import Optional

from fit_planner.calorie_model import calculate_target_calories
from fit_planner.catalog import Catalog, default_catalog
from fit_planner.config import DAYS_PER_WEEK, DEFAULT_SEED, WORKOUT_DAY_PATTERNS
from fit_planner.meal_selector import select_day_meals
from fit_planner.models import (
    ActivityLevel,
    DayPlan,
    Experience,
    Goal,
    Sex,
    UserProfile,
    WeeklyPlan,
)
from fit_planner.workout_selector import select_workout

logger = logging.getLogger(__name__)


def pick_workout_days(days_per_week: int) -> tuple:
    """Return the 7-slot workout mask (Monday first) for a requested day count.

    Only four fixed patterns exist: 3 or fewer, 4, 5, and 6 or more.
    """
    smallest, largest = min(WORKOUT_DAY_PATTERNS), max(WORKOUT_DAY_PATTERNS)
    key = max(smallest, min(largest, int(days_per_week)))
    return tuple(bool(slot) for slot in WORKOUT_DAY_PATTERNS[key])


def generate_weekly_plan(
    profile: UserProfile,
    seed: Optional[int] = DEFAULT_SEED,
    catalog: Optional[Catalog] = None,
    rng: Optional[random.Random] = None,
) -> WeeklyPlan:
    """Generate a 7-day workout and meal plan for a profile.

    For each day (Monday first):
    1. Workout days get a session from the workout selector; rest days none
    2. Every day gets meals from the meal selector against the same target

    A fresh generator seeded with ``seed`` is used unless ``rng`` is given,
    so the same profile, catalog and seed always produce the same plan.
    """
    if catalog is None:
        catalog = default_catalog()
    if rng is None:
        rng = random.Random(seed)

    target = calculate_target_calories(profile)
    workout_days = pick_workout_days(profile.schedule.workout_days_per_week)

    days = []
    for day in range(DAYS_PER_WEEK):
        rest_day = not workout_days[day]
        exercises = () if rest_day else tuple(select_workout(profile, catalog.exercises, rng))
        selection = select_day_meals(profile, target, catalog.meals)
        days.append(DayPlan(
            day_index=day,
            rest_day=rest_day,
            exercises=exercises,
            meals=selection.meals,
            target_calories=target,
            calories=selection.calories,
            protein_g=selection.protein_g,
            carbs_g=selection.carbs_g,
            fat_g=selection.fat_g,
            cost=selection.cost,
        ))

    plan = WeeklyPlan(
        days=tuple(days),
        target_calories=target,
        daily_budget=profile.schedule.daily_food_budget,
        seed=seed,
    )
    logger.info(
        "Generated plan for %s: %d kcal/day, %d workout days, weekly cost %.2f",
        profile.name, target, len(plan.workout_days), plan.weekly_cost,
    )
    return plan


def aggregate_shopping_list(plan: Optional[WeeklyPlan]) -> dict:
    """Count each ingredient across every meal of the week (keys as stored)."""
    if plan is None:
        return {}
    counts = Counter()
    for day in plan.days:
        for meal in day.meals:
            counts.update(meal.ingredients)
    return dict(counts)


# --- Text formatting ---

def format_summary(profile: UserProfile, plan: WeeklyPlan) -> str:
    """Format the profile and weekly targets for display."""
    diet = profile.diet
    flags = [name for name, on in (
        ("vegetarian", diet.vegetarian), ("vegan", diet.vegan),
        ("lactose-free", diet.lactose_free), ("gluten-free", diet.gluten_free),
        ("halal", diet.halal),
    ) if on]
    equipment = profile.equipment
    kit = [name for name, on in (
        ("gym", equipment.gym), ("dumbbells", equipment.dumbbells),
        ("bands", equipment.resistance_bands), ("mat", equipment.yoga_mat),
        ("outdoor runs", equipment.can_run_outside),
    ) if on]
    schedule = profile.schedule
    lines = [
        "Summary",
        "=" * 50,
        f"Name:      {profile.name}",
        f"Body:      {profile.age}y {Sex.parse(profile.sex).value}, "
        f"{profile.height_cm:.1f} cm, {profile.weight_kg:.1f} kg",
        f"Goal:      {Goal.parse(profile.goal).value}  Activity: {ActivityLevel.parse(profile.activity_level).value}  "
        f"Experience: {Experience.parse(profile.experience).value}",
        f"Diet:      {', '.join(flags) or 'no restrictions'}",
    ]
    if diet.allergies:
        lines.append(f"Allergies: {', '.join(sorted(diet.allergies))}")
    if diet.disliked_ingredients:
        lines.append(f"Dislikes:  {', '.join(sorted(diet.disliked_ingredients))}")
    if diet.preferred_cuisines:
        lines.append(f"Cuisines:  {', '.join(sorted(diet.preferred_cuisines))}")
    lines.extend([
        f"Equipment: {', '.join(kit) or 'bodyweight only'}",
        f"Schedule:  {schedule.workout_days_per_week} days/wk, {schedule.minutes_per_workout} min/session",
        f"Region:    {profile.region or '-'}",
        "",
        f"Target calories/day: {plan.target_calories}  (weekly target: {plan.weekly_target_calories})",
        f"Daily budget: {plan.daily_budget:.2f}  Weekly budget: {plan.weekly_budget:.2f}  "
        f"Weekly cost: {plan.weekly_cost:.2f}",
    ])
    return "\n".join(lines)


def format_weekly_workout(plan: WeeklyPlan) -> str:
    """Format the 7-day workout schedule for display."""
    lines = ["Workout Plan (7 days)", "=" * 50]
    for day in plan.days:
        if day.rest_day:
            lines.append(f"{day.day_name}: REST")
            continue
        lines.append(f"{day.day_name}: WORKOUT (~{day.workout_minutes} min)")
        for e in day.exercises:
            lines.append(
                f"  - {e.name:<20s} | {e.muscle_group.value:<9s} | {e.intensity.value:<8s} | "
                f"{e.equipment.value:<9s} | ~{e.minutes} min"
            )
    return "\n".join(lines)


def format_weekly_meals(plan: WeeklyPlan) -> str:
    """Format the 7-day meal plan with daily totals."""
    lines = ["Meal Plan (7 days)", "=" * 50]
    for day in plan.days:
        lines.append(
            f"\n{day.day_name}: {day.calories}/{day.target_calories} kcal | "
            f"P:{day.protein_g}g C:{day.carbs_g}g F:{day.fat_g}g | Cost: {day.cost:.2f}"
        )
        lines.append("-" * 30)
        if not day.has_meals:
            lines.append("  No suitable meal options for these dietary filters.")
            continue
        for i, m in enumerate(day.meals, 1):
            lines.append(
                f"  {i}) {m.name:<28s} | {m.cuisine:<14s} | {m.calories:4d} kcal | "
                f"P:{m.protein_g:2d}g C:{m.carbs_g:3d}g F:{m.fat_g:2d}g | {m.cost:.0f}"
            )
    return "\n".join(lines)


def format_shopping_list(shopping_list: dict) -> str:
    """Format aggregated ingredient counts, most used first."""
    lines = ["Shopping List (aggregated)", "=" * 50]
    if not shopping_list:
        lines.append("Nothing to buy.")
    for name, count in sorted(shopping_list.items(), key=lambda kv: (-kv[1], kv[0])):
        lines.append(f"- {name} x{count}")
    return "\n".join(lines)


def format_weekly_plan(profile: UserProfile, plan: WeeklyPlan) -> str:
    """Full plain-text report: summary, workouts, meals and shopping list."""
    return "\n\n".join([
        format_summary(profile, plan),
        format_weekly_workout(plan),
        format_weekly_meals(plan),
        format_shopping_list(aggregate_shopping_list(plan)),
    ])
