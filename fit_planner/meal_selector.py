"""Daily meal selection.

Selects a day's meals from the catalog for a calorie target and a food
budget while honouring dietary restrictions.

Algorithm overview:
1. Filter meals by diet flags, allergies/dislikes and preferred cuisines
2. Seed the day with a protein-dense item, a carb-dense item, a breakfast
   item and a snack (each only when one exists and is not already chosen)
3. Fill: while well under the calorie target and within budget, add the
   cheapest item that fits the remaining budget and calorie gap
4. Repair: while over budget or far over the calorie target, drop the
   meal with the highest removal score, keeping at least 3 meals
5. Totals are exact sums over the retained meals

No randomness is involved; the same profile and target always give the
same day.
"""

import logging
from dataclasses import dataclass

from fit_planner.config import (
    BREAKFAST_KEYWORDS,
    CALORIE_OVERSHOOT_TOLERANCE,
    CALORIE_SHORTFALL_TOLERANCE,
    FILL_CALORIE_SLACK,
    MAX_FILL_ITERATIONS,
    MIN_MEALS_AFTER_REPAIR,
    REGIONAL_CUISINE_FALLBACK,
    REMOVAL_SCORE_WEIGHTS,
    SNACK_KEYWORDS,
)
from fit_planner.models import DietPreference, Meal, UserProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MealSelection:
    """A day's retained meals with their summed nutrition and cost."""
    meals: tuple
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    cost: float

    @staticmethod
    def from_meals(meals) -> "MealSelection":
        return MealSelection(
            meals=tuple(meals),
            calories=sum(m.calories for m in meals),
            protein_g=sum(m.protein_g for m in meals),
            carbs_g=sum(m.carbs_g for m in meals),
            fat_g=sum(m.fat_g for m in meals),
            cost=round(sum(m.cost for m in meals), 2),
        )


def _contains_term(ingredients, terms) -> bool:
    lowered = {i.lower() for i in ingredients}
    return any(t.lower() in lowered for t in terms)


def diet_ok(diet: DietPreference, meal: Meal) -> bool:
    """Reject meals missing a required flag or containing an excluded ingredient."""
    if diet.vegan and not meal.vegan:
        return False
    if diet.vegetarian and not meal.vegetarian:
        return False
    if diet.halal and not meal.halal:
        return False
    if diet.lactose_free and not meal.lactose_free:
        return False
    if diet.gluten_free and not meal.gluten_free:
        return False
    if _contains_term(meal.ingredients, diet.allergies):
        return False
    if _contains_term(meal.ingredients, diet.disliked_ingredients):
        return False
    return True


def cuisine_ok(diet: DietPreference, meal: Meal, region: str) -> bool:
    """Preferred cuisines match exactly (any case); some regions also allow their own cuisines."""
    if not diet.preferred_cuisines:
        return True
    cuisine = meal.cuisine.lower()
    if any(cuisine == c.lower() for c in diet.preferred_cuisines):
        return True
    fallback = REGIONAL_CUISINE_FALLBACK.get((region or "").strip().lower())
    return fallback is not None and fallback in cuisine


def filter_meals(profile: UserProfile, meals) -> list:
    """Catalog meals the profile may eat, in catalog order."""
    return [
        m for m in meals
        if diet_ok(profile.diet, m) and cuisine_ok(profile.diet, m, profile.region)
    ]


def protein_density(meal: Meal) -> float:
    return meal.protein_g / max(1, meal.calories)


def carb_density(meal: Meal) -> float:
    return meal.carbs_g / max(1, meal.calories)


def removal_score(meal: Meal) -> float:
    """Repair priority: calorie/cost heavy, protein light meals score highest."""
    w = REMOVAL_SCORE_WEIGHTS
    return meal.calories * w["calories"] + meal.protein_g * w["protein"] + meal.cost * w["cost"]


def _pick_top_by(pool: list, chosen: list, key) -> None:
    """Add the highest-ranked pool item not already chosen."""
    for meal in sorted(pool, key=key, reverse=True):
        if meal not in chosen:
            chosen.append(meal)
            return


def _pick_by_keyword(pool: list, chosen: list, keywords) -> None:
    """Add the first pool item whose name contains a keyword, unless already chosen."""
    for meal in pool:
        name = meal.name.lower()
        if any(k in name for k in keywords):
            if meal not in chosen:
                chosen.append(meal)
            return


def _pick_affordable(by_cost: list, calorie_gap: int, budget_left: float):
    for meal in by_cost:
        if meal.cost <= budget_left and meal.calories <= calorie_gap + FILL_CALORIE_SLACK:
            return meal
    return None


def select_day_meals(profile: UserProfile, target_calories: int, meals) -> MealSelection:
    """Choose one day's meals for a calorie target within the daily budget.

    An empty filtered pool yields an empty selection with zero totals.
    """
    pool = filter_meals(profile, meals)
    if not pool:
        logger.warning("No catalog meals satisfy the diet and cuisine filters for %s", profile.name)
        return MealSelection.from_meals([])

    budget = profile.schedule.daily_food_budget
    chosen = []

    _pick_top_by(pool, chosen, protein_density)
    _pick_top_by(pool, chosen, carb_density)
    _pick_by_keyword(pool, chosen, BREAKFAST_KEYWORDS)
    _pick_by_keyword(pool, chosen, SNACK_KEYWORDS)

    calories = sum(m.calories for m in chosen)
    cost = sum(m.cost for m in chosen)

    by_cost = sorted(pool, key=lambda m: m.cost)
    iterations = 0
    while (calories < target_calories - CALORIE_SHORTFALL_TOLERANCE
           and cost <= budget
           and iterations < MAX_FILL_ITERATIONS):
        meal = _pick_affordable(by_cost, target_calories - calories, budget - cost)
        if meal is None:
            break
        chosen.append(meal)
        calories += meal.calories
        cost += meal.cost
        iterations += 1

    while ((cost > budget or calories > target_calories + CALORIE_OVERSHOOT_TOLERANCE)
           and len(chosen) > MIN_MEALS_AFTER_REPAIR):
        # Highest score goes first; among equal scores the later meal
        worst = max(range(len(chosen)), key=lambda i: (removal_score(chosen[i]), i))
        removed = chosen.pop(worst)
        calories -= removed.calories
        cost -= removed.cost
        logger.debug("Dropped %s (score %.2f)", removed.name, removal_score(removed))

    selection = MealSelection.from_meals(chosen)
    logger.debug(
        "Meals: %d items, %d/%d kcal, cost %.2f/%.2f",
        len(selection.meals), selection.calories, target_calories, selection.cost, budget,
    )
    return selection
