"""Command-line interface for the workout and meal planner."""

import argparse
import json
import logging
import sys

from fit_planner.calorie_model import calculate_calorie_targets, format_targets
from fit_planner.catalog import default_catalog
from fit_planner.config import (
    ACTIVITY_MULTIPLIERS,
    DEFAULT_SEED,
    GOAL_CALORIE_ADJUSTMENTS,
    PROFILE_DEFAULTS,
)
from fit_planner.models import Experience, UserProfile
from fit_planner.planner import format_weekly_plan, generate_weekly_plan
from fit_planner.service import build_plan_response, profile_from_form

logger = logging.getLogger(__name__)

EXPERIENCE_CHOICES = [e.value for e in Experience]


# --- Profile helpers ---

def _form_from_args(args) -> dict:
    """Collect parsed flags into the same flat form the web adapter accepts."""
    return {
        "name": args.name,
        "age": args.age,
        "sex": args.sex,
        "height_cm": args.height,
        "weight_kg": args.weight,
        "activity_level": args.activity,
        "experience": getattr(args, "experience", None),
        "goal": args.goal,
        "vegetarian": getattr(args, "vegetarian", False),
        "vegan": getattr(args, "vegan", False),
        "lactose_free": getattr(args, "lactose_free", False),
        "gluten_free": getattr(args, "gluten_free", False),
        "halal": getattr(args, "halal", False),
        "allergies": getattr(args, "allergies", None),
        "disliked_ingredients": getattr(args, "dislikes", None),
        "preferred_cuisines": getattr(args, "cuisines", None),
        "has_gym": getattr(args, "gym", False),
        "has_dumbbells": getattr(args, "dumbbells", False),
        "has_resistance_bands": getattr(args, "bands", False),
        "has_yoga_mat": getattr(args, "mat", False),
        "can_run_outside": getattr(args, "outdoor", False),
        "workout_days_per_week": getattr(args, "days", None),
        "minutes_per_workout": getattr(args, "minutes", None),
        "daily_food_budget": getattr(args, "budget", None),
        "region": getattr(args, "region", None),
    }


def _ask(prompt: str, default, input_fn=input) -> str:
    answer = input_fn(f"{prompt} [{default}]: ").strip()
    return answer if answer else str(default)


def _ask_yes(prompt: str, input_fn=input) -> bool:
    return input_fn(f"{prompt} (y/n): ").strip().lower() in ("y", "yes")


def prompt_profile(input_fn=input) -> UserProfile:
    """Interactively collect a profile. Blank or invalid answers use defaults."""
    d = PROFILE_DEFAULTS
    form = {
        "name": _ask("Your name", d["name"], input_fn),
        "age": _ask("Age", d["age"], input_fn),
        "sex": _ask("Sex (M/F)", "M", input_fn),
        "height_cm": _ask("Height (cm)", d["height_cm"], input_fn),
        "weight_kg": _ask("Weight (kg)", d["weight_kg"], input_fn),
        "activity_level": _ask("Activity (sedentary/light/moderate/active/very)", d["activity_level"], input_fn),
        "experience": _ask("Experience (beginner/intermediate/advanced)", d["experience"], input_fn),
        "goal": _ask("Goal (lose/maintain/gain)", d["goal"], input_fn),
        "vegetarian": _ask_yes("Vegetarian?", input_fn),
        "vegan": _ask_yes("Vegan?", input_fn),
        "lactose_free": _ask_yes("Lactose-free?", input_fn),
        "gluten_free": _ask_yes("Gluten-free?", input_fn),
        "halal": _ask_yes("Halal?", input_fn),
        "allergies": input_fn("Allergies (comma-separated, blank for none): "),
        "disliked_ingredients": input_fn("Disliked ingredients (comma-separated): "),
        "preferred_cuisines": input_fn("Preferred cuisines (comma-separated, e.g. Indian,South Indian,Western): "),
        "has_gym": _ask_yes("Has gym access?", input_fn),
        "has_dumbbells": _ask_yes("Has dumbbells?", input_fn),
        "has_resistance_bands": _ask_yes("Has resistance bands?", input_fn),
        "has_yoga_mat": _ask_yes("Has yoga mat?", input_fn),
        "can_run_outside": _ask_yes("Can run outside?", input_fn),
        "workout_days_per_week": _ask("Workout days per week (2-6)", d["workout_days_per_week"], input_fn),
        "minutes_per_workout": _ask("Minutes per workout (20-90)", d["minutes_per_workout"], input_fn),
        "daily_food_budget": _ask("Daily food budget", d["daily_food_budget"], input_fn),
        "region": _ask("Region", d["region"], input_fn),
    }
    return profile_from_form(form)


def _print_plan(profile: UserProfile, seed: int) -> None:
    plan = generate_weekly_plan(profile, seed=seed)
    print(format_weekly_plan(profile, plan))
    empty = [d.day_name for d in plan.days if not d.has_meals]
    if empty:
        logger.info("%d of %d days have no meals for %s", len(empty), len(plan.days), profile.name)
        print(f"\nNo suitable meal options on: {', '.join(empty)}. Try relaxing diet or cuisine filters.")


# --- Command handlers ---

def cmd_plan(args):
    form = _form_from_args(args)
    if args.json:
        print(json.dumps(build_plan_response(form, seed=args.seed), indent=2))
        return
    _print_plan(profile_from_form(form), args.seed)


def cmd_interactive(args):
    print("\n=== Personalized Workout & Diet Planner ===\n")
    try:
        profile = prompt_profile()
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.")
        sys.exit(1)
    print()
    _print_plan(profile, args.seed)


def cmd_targets(args):
    profile = profile_from_form(_form_from_args(args))
    print(format_targets(calculate_calorie_targets(profile)))


def cmd_catalog_exercises(args):
    catalog = default_catalog()
    print(f"{'Name':<22}  {'Group':<9}  {'Equip':<9}  {'Intensity':<9}  {'Min':>3}  {'Level':<12}  Outdoor")
    print("-" * 85)
    for e in catalog.exercises:
        print(f"{e.name:<22}  {e.muscle_group.value:<9}  {e.equipment.value:<9}  {e.intensity.value:<9}  "
              f"{e.minutes:>3}  {e.level.value:<12}  {'yes' if e.outdoors else ''}")


def cmd_catalog_meals(args):
    catalog = default_catalog()
    print(f"{'Name':<28}  {'Cuisine':<14}  {'Cal':>4}  {'P(g)':>4}  {'C(g)':>4}  {'F(g)':>4}  {'Cost':>5}  Flags")
    print("-" * 95)
    for m in catalog.meals:
        flags = [label for label, on in (
            ("veg", m.vegetarian), ("vegan", m.vegan), ("halal", m.halal),
            ("LF", m.lactose_free), ("GF", m.gluten_free),
        ) if on]
        print(f"{m.name:<28}  {m.cuisine:<14}  {m.calories:>4}  {m.protein_g:>4}  {m.carbs_g:>4}  "
              f"{m.fat_g:>4}  {m.cost:>5.0f}  {','.join(flags)}")


# --- Argument parser ---

def _add_body_args(p: argparse.ArgumentParser) -> None:
    d = PROFILE_DEFAULTS
    p.add_argument("--name", default=d["name"])
    p.add_argument("--age", type=int, default=d["age"])
    p.add_argument("--sex", choices=["male", "female"], default=d["sex"])
    p.add_argument("--height", type=float, default=d["height_cm"], help="Height in cm")
    p.add_argument("--weight", type=float, default=d["weight_kg"], help="Weight in kg")
    p.add_argument("--activity", choices=list(ACTIVITY_MULTIPLIERS.keys()),
                   default=d["activity_level"], help="Activity level")
    p.add_argument("--goal", choices=list(GOAL_CALORIE_ADJUSTMENTS.keys()),
                   default=d["goal"], help="Fitness goal")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fit_planner",
        description="Personalized 7-day workout and meal planner",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- plan ---
    plan_p = subparsers.add_parser("plan", help="Generate a weekly plan from flags")
    _add_body_args(plan_p)
    plan_p.add_argument("--experience", choices=EXPERIENCE_CHOICES, default=PROFILE_DEFAULTS["experience"])
    plan_p.add_argument("--vegetarian", action="store_true")
    plan_p.add_argument("--vegan", action="store_true")
    plan_p.add_argument("--lactose-free", action="store_true")
    plan_p.add_argument("--gluten-free", action="store_true")
    plan_p.add_argument("--halal", action="store_true")
    plan_p.add_argument("--allergies", help="Comma-separated allergy terms")
    plan_p.add_argument("--dislikes", help="Comma-separated disliked ingredients")
    plan_p.add_argument("--cuisines", help="Comma-separated preferred cuisines")
    plan_p.add_argument("--gym", action="store_true", help="Has gym access")
    plan_p.add_argument("--dumbbells", action="store_true")
    plan_p.add_argument("--bands", action="store_true", help="Has resistance bands")
    plan_p.add_argument("--mat", action="store_true", help="Has a yoga mat")
    plan_p.add_argument("--outdoor", action="store_true", help="Can run outside")
    plan_p.add_argument("--days", type=int, default=PROFILE_DEFAULTS["workout_days_per_week"],
                        help="Workout days per week (clamped to 2-6)")
    plan_p.add_argument("--minutes", type=int, default=PROFILE_DEFAULTS["minutes_per_workout"],
                        help="Minutes per session (clamped to 20-90)")
    plan_p.add_argument("--budget", type=float, default=PROFILE_DEFAULTS["daily_food_budget"],
                        help="Daily food budget")
    plan_p.add_argument("--region", default=PROFILE_DEFAULTS["region"])
    plan_p.add_argument("--seed", type=int, default=DEFAULT_SEED)
    plan_p.add_argument("--json", action="store_true", help="Print the plan as JSON")
    plan_p.set_defaults(func=cmd_plan)

    # --- interactive ---
    inter_p = subparsers.add_parser("interactive", help="Answer prompts to build a plan")
    inter_p.add_argument("--seed", type=int, default=DEFAULT_SEED)
    inter_p.set_defaults(func=cmd_interactive)

    # --- targets ---
    targets_p = subparsers.add_parser("targets", help="Show daily calorie targets")
    _add_body_args(targets_p)
    targets_p.set_defaults(func=cmd_targets)

    # --- catalog ---
    catalog_parser = subparsers.add_parser("catalog", help="Browse the reference catalog")
    catalog_sub = catalog_parser.add_subparsers(dest="subcommand")

    ex_p = catalog_sub.add_parser("exercises", help="List all exercises")
    ex_p.set_defaults(func=cmd_catalog_exercises)

    meals_p = catalog_sub.add_parser("meals", help="List all meals")
    meals_p.set_defaults(func=cmd_catalog_meals)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return

    if hasattr(args, "func"):
        args.func(args)
    elif args.command == "catalog":
        # Subcommand not specified
        sub = parser._subparsers._group_actions[0].choices[args.command]
        sub.print_help()
    else:
        parser.print_help()
