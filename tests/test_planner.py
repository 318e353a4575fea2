"""Tests for weekly plan generation and formatting."""

import json
import unittest
from collections import Counter

from fit_planner.models import (
    ActivityLevel,
    DietPreference,
    Equipment,
    Experience,
    Goal,
    Schedule,
    Sex,
    UserProfile,
)
from fit_planner.planner import (
    aggregate_shopping_list,
    format_shopping_list,
    format_summary,
    format_weekly_plan,
    generate_weekly_plan,
    pick_workout_days,
)
from fit_planner.service import plan_to_dict

T, F = True, False


def _profile(days=4, diet=None, budget=300.0, region="India"):
    return UserProfile(
        name="Asha", age=30, sex=Sex.MALE, height_cm=175, weight_kg=70,
        activity_level=ActivityLevel.MODERATE, experience=Experience.INTERMEDIATE,
        goal=Goal.MAINTAIN, diet=diet or DietPreference(),
        equipment=Equipment(gym=True, dumbbells=True),
        schedule=Schedule(workout_days_per_week=days, minutes_per_workout=45, daily_food_budget=budget),
        region=region,
    )


class TestWorkoutDays(unittest.TestCase):
    def test_patterns(self):
        self.assertEqual(pick_workout_days(3), (T, F, T, F, T, F, F))
        self.assertEqual(pick_workout_days(4), (T, F, T, F, T, F, T))
        self.assertEqual(pick_workout_days(5), (T, F, T, T, F, T, F))
        self.assertEqual(pick_workout_days(6), (T, T, T, F, T, T, F))

    def test_out_of_range_counts(self):
        self.assertEqual(pick_workout_days(2), pick_workout_days(3))
        self.assertEqual(pick_workout_days(0), pick_workout_days(3))
        self.assertEqual(pick_workout_days(7), pick_workout_days(6))

    def test_non_integer_count(self):
        self.assertEqual(pick_workout_days(4.5), pick_workout_days(4))
        self.assertEqual(pick_workout_days("5"), pick_workout_days(5))

    def test_six_day_pattern_has_five_sessions(self):
        self.assertEqual(sum(pick_workout_days(6)), 5)


class TestGenerateWeeklyPlan(unittest.TestCase):
    def setUp(self):
        self.profile = _profile()
        self.plan = generate_weekly_plan(self.profile, seed=42)

    def test_seven_days_with_shared_target(self):
        self.assertEqual(len(self.plan.days), 7)
        self.assertEqual(self.plan.target_calories, 2556)
        for i, day in enumerate(self.plan.days):
            self.assertEqual(day.day_index, i)
            self.assertEqual(day.target_calories, 2556)

    def test_rest_mask(self):
        self.assertEqual(tuple(not d.rest_day for d in self.plan.days), (T, F, T, F, T, F, T))

    def test_rest_days_have_no_exercises(self):
        for day in self.plan.days:
            if day.rest_day:
                self.assertEqual(day.exercises, ())
            else:
                self.assertTrue(day.exercises)
                self.assertLessEqual(len(day.exercises), 10)

    def test_day_totals(self):
        for day in self.plan.days:
            self.assertEqual(day.calories, sum(m.calories for m in day.meals))
            self.assertEqual(day.protein_g, sum(m.protein_g for m in day.meals))
            self.assertAlmostEqual(day.cost, sum(m.cost for m in day.meals))

    def test_weekly_figures(self):
        self.assertEqual(self.plan.weekly_target_calories, 2556 * 7)
        self.assertEqual(self.plan.weekly_budget, 2100.0)
        self.assertAlmostEqual(self.plan.weekly_cost, sum(d.cost for d in self.plan.days))

    def test_same_seed_same_plan(self):
        again = generate_weekly_plan(self.profile, seed=42)
        self.assertEqual(
            json.dumps(plan_to_dict(self.plan), sort_keys=True),
            json.dumps(plan_to_dict(again), sort_keys=True),
        )

    def test_restrictive_diet_does_not_fail(self):
        diet = DietPreference(vegan=True, gluten_free=True)
        plan = generate_weekly_plan(_profile(diet=diet, budget=50), seed=42)
        self.assertEqual(len(plan.days), 7)
        for day in plan.days:
            for meal in day.meals:
                self.assertTrue(meal.vegan and meal.gluten_free)

    def test_no_meal_options(self):
        diet = DietPreference(preferred_cuisines=frozenset({"Klingon"}))
        with self.assertLogs("fit_planner.meal_selector", level="WARNING"):
            plan = generate_weekly_plan(_profile(diet=diet, region="Germany"), seed=42)
        for day in plan.days:
            self.assertFalse(day.has_meals)
            self.assertEqual(day.calories, 0)
        self.assertEqual(plan.weekly_cost, 0)
        self.assertIn("No suitable meal options", format_weekly_plan(_profile(), plan))


class TestShoppingList(unittest.TestCase):
    def test_counts_every_ingredient(self):
        plan = generate_weekly_plan(_profile(), seed=7)
        expected = Counter()
        for day in plan.days:
            for meal in day.meals:
                expected.update(meal.ingredients)
        self.assertEqual(aggregate_shopping_list(plan), dict(expected))

    def test_absent_plan(self):
        self.assertEqual(aggregate_shopping_list(None), {})

    def test_format_sorted_by_count(self):
        text = format_shopping_list({"rice": 2, "oats": 5, "chana": 2})
        lines = text.splitlines()[2:]
        self.assertEqual(lines, ["- oats x5", "- chana x2", "- rice x2"])

    def test_format_empty(self):
        self.assertIn("Nothing to buy.", format_shopping_list({}))


class TestFormatting(unittest.TestCase):
    def test_report_sections(self):
        profile = _profile()
        text = format_weekly_plan(profile, generate_weekly_plan(profile))
        self.assertIn("Target calories/day: 2556", text)
        self.assertIn("Monday: WORKOUT", text)
        self.assertIn("Tuesday: REST", text)
        self.assertIn("Meal Plan (7 days)", text)
        self.assertIn("Shopping List (aggregated)", text)

    def test_summary_accepts_raw_strings(self):
        profile = UserProfile(
            name="Neha", age=28, sex="F", height_cm=160, weight_kg=55,
            activity_level="light", experience="advanced", goal="lose",
        )
        text = format_summary(profile, generate_weekly_plan(profile))
        self.assertIn("28y female", text)
        self.assertIn("Goal:      lose_fat  Activity: light  Experience: advanced", text)


if __name__ == "__main__":
    unittest.main()
