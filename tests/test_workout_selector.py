"""Tests for daily workout selection."""

import random
import unittest

from fit_planner.catalog import default_catalog
from fit_planner.models import (
    ActivityLevel,
    Equipment,
    EquipmentRequirement,
    Exercise,
    Experience,
    Goal,
    Intensity,
    MuscleGroup,
    Schedule,
    Sex,
    UserProfile,
)
from fit_planner.workout_selector import (
    available_exercises,
    equipment_ok,
    select_workout,
    session_minutes,
)


def _profile(equipment=None, minutes=45, experience=Experience.BEGINNER):
    return UserProfile(
        name="Test", age=25, sex=Sex.MALE, height_cm=175, weight_kg=70,
        activity_level=ActivityLevel.MODERATE, experience=experience, goal=Goal.MAINTAIN,
        equipment=equipment or Equipment(),
        schedule=Schedule(workout_days_per_week=4, minutes_per_workout=minutes),
    )


def _exercise(name, group, minutes, equipment=EquipmentRequirement.NONE, level=Experience.BEGINNER):
    return Exercise(
        name=name, muscle_group=group, equipment=equipment,
        intensity=Intensity.MODERATE, minutes=minutes, level=level,
    )


class TestEquipment(unittest.TestCase):
    def test_bodyweight_always_ok(self):
        self.assertTrue(equipment_ok(Equipment(), EquipmentRequirement.NONE))

    def test_dumbbells(self):
        self.assertFalse(equipment_ok(Equipment(), EquipmentRequirement.DUMBBELLS))
        self.assertTrue(equipment_ok(Equipment(dumbbells=True), EquipmentRequirement.DUMBBELLS))

    def test_gym_covers_dumbbells_and_bands(self):
        gym = Equipment(gym=True)
        self.assertTrue(equipment_ok(gym, EquipmentRequirement.DUMBBELLS))
        self.assertTrue(equipment_ok(gym, EquipmentRequirement.BANDS))
        self.assertTrue(equipment_ok(gym, EquipmentRequirement.GYM))

    def test_bands_do_not_cover_gym(self):
        self.assertFalse(equipment_ok(Equipment(resistance_bands=True), EquipmentRequirement.GYM))

    def test_available_exercises_bodyweight_only(self):
        pool = available_exercises(_profile(), default_catalog().exercises)
        self.assertTrue(pool)
        for e in pool:
            self.assertIs(e.equipment, EquipmentRequirement.NONE)


class TestSelectWorkout(unittest.TestCase):
    def setUp(self):
        self.exercises = default_catalog().exercises

    def test_session_minutes_floor(self):
        self.assertEqual(session_minutes(_profile(minutes=5)), 10)
        self.assertEqual(session_minutes(_profile(minutes=45)), 45)

    def test_anchors_lead_when_not_trimmed(self):
        plan = select_workout(_profile(minutes=90), self.exercises, random.Random(1))
        self.assertEqual([e.name for e in plan[:2]], ["Jumping Jacks", "Plank"])

    def test_respects_equipment(self):
        profile = _profile(equipment=Equipment(dumbbells=True))
        for seed in range(20):
            for e in select_workout(profile, self.exercises, random.Random(seed)):
                self.assertTrue(equipment_ok(profile.equipment, e.equipment), e.name)

    def test_never_more_than_ten(self):
        profile = _profile(equipment=Equipment(gym=True), minutes=90)
        for seed in range(50):
            self.assertLessEqual(len(select_workout(profile, self.exercises, random.Random(seed))), 10)

    def test_trim_keeps_three(self):
        # Seven picks of at least 5 min each cannot fit in 20 min; trimming stops at 3
        for seed in range(20):
            plan = select_workout(_profile(minutes=20), self.exercises, random.Random(seed))
            self.assertEqual(len(plan), 3)

    def test_trim_drops_shortest_first(self):
        pool = [
            _exercise("Jumping Jacks", MuscleGroup.CARDIO, 5),
            _exercise("Plank", MuscleGroup.CORE, 5),
            _exercise("Push-ups", MuscleGroup.PUSH, 8),
            _exercise("Rows", MuscleGroup.PULL, 12),
            _exercise("Squats", MuscleGroup.LEGS, 15),
        ]
        # Cardio pick is Jumping Jacks again: 5+5+8+12+15+5 = 50 > 30
        plan = select_workout(_profile(minutes=30), pool, random.Random(0))
        self.assertEqual([e.name for e in plan], ["Push-ups", "Rows", "Squats"])

    def test_prefers_user_level(self):
        pool = [
            _exercise("Easy Push", MuscleGroup.PUSH, 5, level=Experience.BEGINNER),
            _exercise("Hard Push", MuscleGroup.PUSH, 5, level=Experience.ADVANCED),
        ]
        for seed in range(10):
            plan = select_workout(_profile(minutes=90, experience=Experience.ADVANCED), pool, random.Random(seed))
            self.assertEqual(plan[0].name, "Hard Push")

    def test_falls_back_to_other_levels(self):
        pool = [_exercise("Hard Pull", MuscleGroup.PULL, 5, level=Experience.ADVANCED)]
        plan = select_workout(_profile(minutes=90), pool, random.Random(0))
        self.assertEqual(plan[0].name, "Hard Pull")

    def test_fillers_are_cardio_or_core(self):
        profile = _profile(minutes=90)
        plan = select_workout(profile, self.exercises, random.Random(3))
        # Anchors plus one per main group: 2 + 5 picks
        for e in plan[7:]:
            self.assertIn(e.muscle_group, (MuscleGroup.CARDIO, MuscleGroup.CORE))

    def test_empty_pool(self):
        self.assertEqual(select_workout(_profile(), [], random.Random(0)), [])

    def test_seeded_generator_reproduces_session(self):
        profile = _profile(equipment=Equipment(gym=True), minutes=60)
        first = select_workout(profile, self.exercises, random.Random(42))
        second = select_workout(profile, self.exercises, random.Random(42))
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
