"""Application configuration and constants."""

import os

# Reference data
CATALOG_PATH = os.path.join(os.path.dirname(__file__), "data", "catalog.json")

# Planning run
DEFAULT_SEED = 42
DAYS_PER_WEEK = 7
DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

# Activity level multipliers for TDEE calculation
ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}

# Goal-based calorie adjustments (kcal added to TDEE)
GOAL_CALORIE_ADJUSTMENTS = {
    "lose_fat": -400,
    "maintain": 0,
    "gain_muscle": 300,
}

# Mifflin-St Jeor sex constant
SEX_OFFSETS = {
    "male": 5,
    "female": -161,
}

MIN_DAILY_CALORIES = 1400
MAX_DAILY_CALORIES = 3500

# Weekly workout masks (Monday first), chosen by requested days per week.
# The 6-day mask only has 5 active days; kept as observed.
WORKOUT_DAY_PATTERNS = {
    3: (1, 0, 1, 0, 1, 0, 0),
    4: (1, 0, 1, 0, 1, 0, 1),
    5: (1, 0, 1, 1, 0, 1, 0),
    6: (1, 1, 1, 0, 1, 1, 0),
}

# Workout selection
ANCHOR_EXERCISES = ["Jumping Jacks", "Plank"]  # warm-up + core
MAIN_GROUP_ORDER = ["Push", "Pull", "Legs", "Full Body", "Cardio"]
FILLER_GROUPS = ["Cardio", "Core"]
MIN_SESSION_MINUTES = 10
MIN_TRIMMED_EXERCISES = 3
MAX_EXERCISES = 10

# Meal selection
BREAKFAST_KEYWORDS = ["oats", "poha", "upma", "dosa", "idli", "paratha", "omelette", "smoothie"]
SNACK_KEYWORDS = ["chana", "sprouts", "nuts", "curd", "yogurt", "fruit", "salad"]
REGIONAL_CUISINE_FALLBACK = {
    "india": "indian",  # region -> cuisine substring always allowed
}
CALORIE_SHORTFALL_TOLERANCE = 150  # keep filling while further below target than this
FILL_CALORIE_SLACK = 250
MAX_FILL_ITERATIONS = 20
CALORIE_OVERSHOOT_TOLERANCE = 200
MIN_MEALS_AFTER_REPAIR = 3

# Removal score weights: higher score = dropped first during repair
REMOVAL_SCORE_WEIGHTS = {
    "calories": 0.002,
    "protein": -0.05,
    "cost": 0.02,
}

# Schedule clamps applied by input adapters
WORKOUT_DAYS_RANGE = (2, 6)
SESSION_MINUTES_RANGE = (20, 90)

# Defaults used when a form or prompt leaves a field blank
PROFILE_DEFAULTS = {
    "name": "Student",
    "age": 20,
    "sex": "male",
    "height_cm": 170.0,
    "weight_kg": 65.0,
    "activity_level": "sedentary",
    "experience": "beginner",
    "goal": "maintain",
    "workout_days_per_week": 4,
    "minutes_per_workout": 45,
    "daily_food_budget": 250.0,
    "region": "India",
}
