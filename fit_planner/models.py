"""Data models for the workout and meal planner."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from fit_planner.config import DAY_NAMES, DAYS_PER_WEEK


def _normalize(value) -> str:
    return str(value).strip().lower().replace("-", "_").replace(" ", "_")


class ParseableEnum(Enum):
    """Enum that maps free-form user input onto a member.

    ``parse`` is lenient: it accepts a member, its value or its name in any
    case, plus a few short aliases, and falls back to the conservative
    default for anything it does not recognise. Catalog data goes through
    the strict ``cls(value)`` constructor instead.
    """

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if value is None:
            return cls(_DEFAULTS[cls.__name__])
        key = _normalize(value)
        for member in cls:
            if key in (_normalize(member.value), _normalize(member.name)):
                return member
        alias = _ALIASES.get(cls.__name__, {}).get(key)
        if alias is not None:
            return cls(alias)
        return cls(_DEFAULTS[cls.__name__])


class Sex(ParseableEnum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(ParseableEnum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class Experience(ParseableEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Goal(ParseableEnum):
    LOSE_FAT = "lose_fat"
    MAINTAIN = "maintain"
    GAIN_MUSCLE = "gain_muscle"


class MuscleGroup(ParseableEnum):
    PUSH = "Push"
    PULL = "Pull"
    LEGS = "Legs"
    FULL_BODY = "Full Body"
    CARDIO = "Cardio"
    CORE = "Core"


class EquipmentRequirement(ParseableEnum):
    NONE = "none"
    DUMBBELLS = "dumbbells"
    BANDS = "bands"
    GYM = "gym"


class Intensity(ParseableEnum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


_DEFAULTS = {
    "Sex": "male",
    "ActivityLevel": "sedentary",
    "Experience": "beginner",
    "Goal": "maintain",
    "MuscleGroup": "Full Body",
    "EquipmentRequirement": "none",
    "Intensity": "moderate",
}

_ALIASES = {
    "Sex": {"m": "male", "f": "female"},
    "ActivityLevel": {"very": "very_active", "lightly_active": "light",
                      "moderately_active": "moderate"},
    "Goal": {"lose": "lose_fat", "gain": "gain_muscle", "build_muscle": "gain_muscle"},
    "EquipmentRequirement": {"band": "bands", "dumbbell": "dumbbells"},
}


@dataclass(frozen=True)
class DietPreference:
    """Dietary flags and term sets. Term matching is case-insensitive."""
    vegetarian: bool = False
    vegan: bool = False
    lactose_free: bool = False
    gluten_free: bool = False
    halal: bool = False
    allergies: frozenset = field(default_factory=frozenset)
    disliked_ingredients: frozenset = field(default_factory=frozenset)
    preferred_cuisines: frozenset = field(default_factory=frozenset)


@dataclass(frozen=True)
class Equipment:
    gym: bool = False
    dumbbells: bool = False
    resistance_bands: bool = False
    yoga_mat: bool = False
    can_run_outside: bool = False


@dataclass(frozen=True)
class Schedule:
    workout_days_per_week: int = 4  # 2-6, clamped upstream
    minutes_per_workout: int = 45  # 20-90, clamped upstream
    daily_food_budget: float = 250.0


@dataclass(frozen=True)
class UserProfile:
    """Everything a planning run needs to know about the user."""
    name: str
    age: int
    sex: Sex
    height_cm: float
    weight_kg: float
    activity_level: ActivityLevel
    experience: Experience
    goal: Goal
    diet: DietPreference = field(default_factory=DietPreference)
    equipment: Equipment = field(default_factory=Equipment)
    schedule: Schedule = field(default_factory=Schedule)
    region: str = ""


@dataclass(frozen=True)
class Exercise:
    """A catalog exercise. Names are unique within the catalog."""
    name: str
    muscle_group: MuscleGroup
    equipment: EquipmentRequirement
    intensity: Intensity
    minutes: int
    level: Experience
    outdoors: bool = False


@dataclass(frozen=True)
class Meal:
    """A catalog meal; macros and cost are per serving."""
    name: str
    cuisine: str
    vegetarian: bool
    vegan: bool
    ingredients: tuple
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    cost: float
    halal: bool = True
    lactose_free: bool = False
    gluten_free: bool = False


@dataclass(frozen=True)
class CalorieTargets:
    """Daily energy figures calculated for a user."""
    bmr: float
    tdee: float
    calories: int


@dataclass(frozen=True)
class DayPlan:
    """One day of the weekly plan (0=Monday)."""
    day_index: int
    rest_day: bool
    exercises: tuple
    meals: tuple
    target_calories: int
    calories: int = 0
    protein_g: int = 0
    carbs_g: int = 0
    fat_g: int = 0
    cost: float = 0.0

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day_index]

    @property
    def workout_minutes(self) -> int:
        return sum(e.minutes for e in self.exercises)

    @property
    def has_meals(self) -> bool:
        """False when filtering left nothing to eat; callers report 'no suitable options'."""
        return bool(self.meals)


@dataclass(frozen=True)
class WeeklyPlan:
    """Seven Monday-indexed days. Weekly figures are derived from the days."""
    days: tuple
    target_calories: int
    daily_budget: float
    seed: Optional[int] = None

    @property
    def weekly_target_calories(self) -> int:
        return self.target_calories * DAYS_PER_WEEK

    @property
    def weekly_budget(self) -> float:
        return self.daily_budget * DAYS_PER_WEEK

    @property
    def weekly_cost(self) -> float:
        return round(sum(d.cost for d in self.days), 2)

    @property
    def workout_days(self) -> list:
        return [d for d in self.days if not d.rest_day]
