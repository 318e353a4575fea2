"""Tests for data models."""

import dataclasses
import unittest

from fit_planner.models import (
    ActivityLevel,
    DayPlan,
    EquipmentRequirement,
    Experience,
    Goal,
    Meal,
    MuscleGroup,
    Schedule,
    Sex,
    WeeklyPlan,
)


class TestEnumParsing(unittest.TestCase):
    def test_parse_value_any_case(self):
        self.assertIs(Sex.parse("FEMALE"), Sex.FEMALE)
        self.assertIs(Experience.parse(" Advanced "), Experience.ADVANCED)

    def test_parse_aliases(self):
        self.assertIs(Sex.parse("f"), Sex.FEMALE)
        self.assertIs(Goal.parse("lose"), Goal.LOSE_FAT)
        self.assertIs(Goal.parse("build_muscle"), Goal.GAIN_MUSCLE)
        self.assertIs(ActivityLevel.parse("moderately_active"), ActivityLevel.MODERATE)

    def test_parse_spaces_and_hyphens(self):
        self.assertIs(ActivityLevel.parse("Very Active"), ActivityLevel.VERY_ACTIVE)
        self.assertIs(Goal.parse("gain-muscle"), Goal.GAIN_MUSCLE)
        self.assertIs(MuscleGroup.parse("full body"), MuscleGroup.FULL_BODY)

    def test_parse_member_passthrough(self):
        self.assertIs(Goal.parse(Goal.MAINTAIN), Goal.MAINTAIN)

    def test_unknown_falls_back_to_conservative_default(self):
        self.assertIs(ActivityLevel.parse("couch"), ActivityLevel.SEDENTARY)
        self.assertIs(Goal.parse("bulk"), Goal.MAINTAIN)
        self.assertIs(Experience.parse(None), Experience.BEGINNER)
        self.assertIs(Sex.parse("other"), Sex.MALE)

    def test_strict_constructor_rejects_unknown(self):
        self.assertIs(EquipmentRequirement("gym"), EquipmentRequirement.GYM)
        with self.assertRaises(ValueError):
            EquipmentRequirement("kettlebell")


def _meal(name, cost, calories=300):
    return Meal(
        name=name, cuisine="Indian", vegetarian=True, vegan=True, ingredients=("rice",),
        calories=calories, protein_g=10, carbs_g=50, fat_g=5, cost=cost,
    )


class TestWeeklyPlan(unittest.TestCase):
    def setUp(self):
        days = tuple(
            DayPlan(
                day_index=i, rest_day=i % 2 == 1, exercises=(), meals=(_meal("Khichdi", 10.1),),
                target_calories=2000, calories=300, cost=10.1,
            )
            for i in range(7)
        )
        self.plan = WeeklyPlan(days=days, target_calories=2000, daily_budget=250.0, seed=42)

    def test_weekly_figures(self):
        self.assertEqual(self.plan.weekly_target_calories, 14000)
        self.assertEqual(self.plan.weekly_budget, 1750.0)
        self.assertEqual(self.plan.weekly_cost, 70.7)

    def test_workout_days(self):
        self.assertEqual([d.day_index for d in self.plan.workout_days], [0, 2, 4, 6])

    def test_day_properties(self):
        day = self.plan.days[0]
        self.assertEqual(day.day_name, "Monday")
        self.assertEqual(self.plan.days[6].day_name, "Sunday")
        self.assertEqual(day.workout_minutes, 0)
        self.assertTrue(day.has_meals)

    def test_empty_day_has_no_meals(self):
        day = DayPlan(day_index=3, rest_day=True, exercises=(), meals=(), target_calories=2000)
        self.assertFalse(day.has_meals)
        self.assertEqual(day.cost, 0.0)

    def test_frozen(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.plan.days[0].calories = 1


class TestSchedule(unittest.TestCase):
    def test_defaults(self):
        schedule = Schedule()
        self.assertEqual(schedule.workout_days_per_week, 4)
        self.assertEqual(schedule.minutes_per_workout, 45)
        self.assertEqual(schedule.daily_food_budget, 250.0)


if __name__ == "__main__":
    unittest.main()
