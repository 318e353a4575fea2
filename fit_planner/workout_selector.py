"""Daily workout selection.

Builds one session from the exercise catalog:
1. Keep exercises the user's equipment can support
2. Start with the warm-up and core anchors when available
3. Add one exercise per main muscle group, preferring the user's level
4. Trim the shortest exercises while over the session time budget
5. Top up with cardio/core fillers while under it (capped at MAX_EXERCISES)

All randomness comes from the ``rng`` passed in, so a seeded generator
reproduces the same session.
"""

import logging
import random

from fit_planner.config import (
    ANCHOR_EXERCISES,
    FILLER_GROUPS,
    MAIN_GROUP_ORDER,
    MAX_EXERCISES,
    MIN_SESSION_MINUTES,
    MIN_TRIMMED_EXERCISES,
)
from fit_planner.models import Equipment, EquipmentRequirement, Experience, MuscleGroup, UserProfile

logger = logging.getLogger(__name__)


def equipment_ok(equipment: Equipment, requirement: EquipmentRequirement) -> bool:
    """Whether the available equipment satisfies an exercise's requirement.

    Gym access covers dumbbell and band exercises.
    """
    if requirement is EquipmentRequirement.NONE:
        return True
    if requirement is EquipmentRequirement.DUMBBELLS:
        return equipment.dumbbells or equipment.gym
    if requirement is EquipmentRequirement.BANDS:
        return equipment.resistance_bands or equipment.gym
    if requirement is EquipmentRequirement.GYM:
        return equipment.gym
    raise ValueError(f"Unhandled equipment requirement: {requirement!r}")


def available_exercises(profile: UserProfile, exercises) -> list:
    """Catalog exercises the profile's equipment supports, in catalog order."""
    return [e for e in exercises if equipment_ok(profile.equipment, e.equipment)]


def _pick_by_group(pool: list, group: MuscleGroup, experience: Experience, rng: random.Random):
    in_group = [e for e in pool if e.muscle_group is group]
    if not in_group:
        return None
    at_level = [e for e in in_group if e.level is experience]
    candidates = at_level or in_group
    return candidates[rng.randrange(len(candidates))]


def session_minutes(profile: UserProfile) -> int:
    return max(MIN_SESSION_MINUTES, profile.schedule.minutes_per_workout)


def select_workout(profile: UserProfile, exercises, rng: random.Random) -> list:
    """Pick one day's exercises for the profile.

    Returns a possibly short (or empty) list when the equipment-filtered pool
    is small; never raises.
    """
    pool = available_exercises(profile, exercises)
    experience = Experience.parse(profile.experience)
    plan = []

    for name in ANCHOR_EXERCISES:
        anchor = next((e for e in pool if e.name == name), None)
        if anchor is not None:
            plan.append(anchor)

    for group_name in MAIN_GROUP_ORDER:
        choice = _pick_by_group(pool, MuscleGroup(group_name), experience, rng)
        if choice is not None:
            plan.append(choice)

    budget = session_minutes(profile)
    total = sum(e.minutes for e in plan)

    if total > budget:
        # Drop shortest first; stable sort keeps selection order among ties
        plan.sort(key=lambda e: e.minutes)
        while total > budget and len(plan) > MIN_TRIMMED_EXERCISES:
            removed = plan.pop(0)
            total -= removed.minutes
            logger.debug("Trimmed %s (%d min) to fit %d min", removed.name, removed.minutes, budget)

    fillers = [e for e in pool if e.muscle_group.value in FILLER_GROUPS]
    while total < budget and len(plan) < MAX_EXERCISES:
        offset = rng.randrange(max(1, len(pool) // 4))
        if offset >= len(fillers):
            break
        filler = fillers[offset]
        plan.append(filler)
        total += filler.minutes

    logger.debug("Workout: %d exercises, %d/%d min", len(plan), total, budget)
    return plan
