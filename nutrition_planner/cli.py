"""Command-line interface for the nutrition planning application."""

import argparse
import logging
import sys

from nutrition_planner.app_logging import configure_logging
from nutrition_planner.config import ACTIVITY_LEVELS, DB_PATH, DIET_GOALS, GENDERS
from nutrition_planner.db import init_db
from nutrition_planner.macro_calculator import (
    compute_custom_targets,
    compute_daily_targets,
    compute_recommended_protein,
    format_targets,
    summarize_targets,
)
from nutrition_planner.meal_distribution import (
    DistributionError,
    split_daily_targets,
    validate_distributions,
)
from nutrition_planner.models import Profile, UserProfile
from nutrition_planner.profile_store import (
    load_meal_distributions,
    load_profile,
    save_profile,
    update_profile,
)
from nutrition_planner.units import format_height, format_weight, parse_height_cm, parse_weight_kg

logger = logging.getLogger(__name__)

ACTIVITY_CHOICES = [level.value for level in ACTIVITY_LEVELS]
NOT_ENOUGH_DATA = "Not enough information to calculate targets. Missing: {}"


def _weight(text: str) -> float:
    try:
        return parse_weight_kg(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def _height(text: str) -> float:
    try:
        return parse_height_cm(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def _get_active_user(args) -> UserProfile:
    user = load_profile(db_path=args.db)
    if not user:
        print("No user profile found. Create one first:")
        print("  nutrition-planner profile create --name NAME ...")
        sys.exit(1)
    return user


def _print_targets(profile) -> None:
    snapshot = profile.snapshot() if isinstance(profile, UserProfile) else profile
    result = compute_daily_targets(snapshot)
    if result is None:
        print(NOT_ENOUGH_DATA.format(", ".join(snapshot.missing_fields())))
        sys.exit(1)
    print(format_targets(summarize_targets(result, snapshot.weight_kg)))
    protein = compute_recommended_protein(snapshot.weight_kg, snapshot.activity_level)
    print(f"\nRecommended protein for your activity level: {protein:.0f}g")


# --- Command handlers ---

def cmd_targets(args):
    profile = Profile(
        gender=args.gender,
        weight_kg=args.weight,
        height_cm=args.height,
        age=args.age,
        activity_level=args.activity,
        diet_goal=args.goal,
    )
    _print_targets(profile)


def cmd_profile_create(args):
    profile = UserProfile(
        id=None,
        name=args.name,
        gender=args.gender,
        age=args.age,
        weight_kg=args.weight,
        height_cm=args.height,
        activity_level=args.activity,
        diet_goal=args.goal,
        goal_weight_kg=args.goal_weight,
    )
    user_id = save_profile(profile, args.db)
    print(f"Profile created (ID: {user_id})")

    if profile.snapshot().is_complete():
        print("\nYour daily targets:")
        _print_targets(profile)


def cmd_profile_show(args):
    user = _get_active_user(args)
    print(f"Name:     {user.name}")
    print(f"Gender:   {user.gender or '-'}")
    print(f"Age:      {user.age if user.age is not None else '-'}")
    print(f"Weight:   {format_weight(user.weight_kg) if user.weight_kg is not None else '-'}")
    print(f"Height:   {format_height(user.height_cm) if user.height_cm is not None else '-'}")
    print(f"Activity: {user.activity_level or '-'}")
    print(f"Goal:     {user.diet_goal or '-'}")

    print("\nDaily Targets:")
    _print_targets(user)


def cmd_profile_update(args):
    user = _get_active_user(args)
    for attr, value in (
        ("gender", args.gender),
        ("age", args.age),
        ("weight_kg", args.weight),
        ("height_cm", args.height),
        ("activity_level", args.activity),
        ("diet_goal", args.goal),
        ("goal_weight_kg", args.goal_weight),
    ):
        if value is not None:
            setattr(user, attr, value)

    update_profile(user, args.db)
    print("Profile updated.")
    print("\nUpdated daily targets:")
    _print_targets(user)


def cmd_macros(args):
    user = _get_active_user(args)
    _print_targets(user)


def cmd_meals(args):
    user = _get_active_user(args)
    result = compute_daily_targets(user)
    if result is None:
        print(NOT_ENOUGH_DATA.format(", ".join(user.snapshot().missing_fields())))
        sys.exit(1)

    custom = load_meal_distributions(user.id, args.db) if args.custom else None
    if custom:
        try:
            validate_distributions(custom)
        except DistributionError as exc:
            logger.warning("Ignoring saved meal distributions: %s", exc)
            custom = None

    daily = split_daily_targets(result, custom)
    print(f"{'Meal':<16}  {'Cal':>5}  {'P(g)':>5}  {'C(g)':>5}  {'F(g)':>5}")
    print("-" * 44)
    for meal in daily.meals:
        print(f"{meal.meal_name:<16}  {meal.calories:>5}  {meal.protein:>5}  {meal.carbs:>5}  {meal.fat:>5}")


def cmd_custom(args):
    user = _get_active_user(args)
    result = compute_daily_targets(user)
    if result is None:
        print(NOT_ENOUGH_DATA.format(", ".join(user.snapshot().missing_fields())))
        sys.exit(1)

    base = summarize_targets(result, user.weight_kg)
    custom = compute_custom_targets(
        base,
        custom_total_calories=args.calories,
        custom_protein_per_kg=args.protein_per_kg,
        remaining_carb_pct=args.carb_pct,
    )
    if custom is None:
        print("A positive body weight is required for a custom plan.")
        sys.exit(1)
    print(format_targets(custom))


# --- Argument parser ---

def _add_body_args(parser: argparse.ArgumentParser, required: bool = False) -> None:
    parser.add_argument("--gender", choices=GENDERS, required=required)
    parser.add_argument("--age", type=int, required=required)
    parser.add_argument("--weight", type=_weight, required=required,
                        help="Weight, e.g. 80, 80kg or 176lb")
    parser.add_argument("--height", type=_height, required=required,
                        help="Height, e.g. 180, 180cm or 5'11\"")
    parser.add_argument("--activity", choices=ACTIVITY_CHOICES, required=required,
                        help="Activity level")
    parser.add_argument("--goal", choices=DIET_GOALS, required=required, help="Diet goal")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nutrition-planner",
        description="Daily calorie and macro targets",
    )
    parser.add_argument("--db", default=DB_PATH, help="SQLite database path")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- targets ---
    targets_p = subparsers.add_parser("targets", help="Calculate targets without saving a profile")
    _add_body_args(targets_p)
    targets_p.set_defaults(func=cmd_targets)

    # --- profile ---
    profile_parser = subparsers.add_parser("profile", help="Manage user profile")
    profile_sub = profile_parser.add_subparsers(dest="subcommand")

    create_p = profile_sub.add_parser("create", help="Create a new profile")
    create_p.add_argument("--name", required=True)
    _add_body_args(create_p)
    create_p.add_argument("--goal-weight", type=_weight, help="Goal weight in one month")
    create_p.set_defaults(func=cmd_profile_create)

    show_p = profile_sub.add_parser("show", help="Show current profile")
    show_p.set_defaults(func=cmd_profile_show)

    update_p = profile_sub.add_parser("update", help="Update profile")
    _add_body_args(update_p)
    update_p.add_argument("--goal-weight", type=_weight)
    update_p.set_defaults(func=cmd_profile_update)

    # --- macros ---
    macros_p = subparsers.add_parser("macros", help="Show daily macro targets")
    macros_p.set_defaults(func=cmd_macros)

    # --- meals ---
    meals_p = subparsers.add_parser("meals", help="Split daily targets across meals")
    meals_p.add_argument("--custom", action="store_true",
                         help="Use your saved meal split instead of the default one")
    meals_p.set_defaults(func=cmd_meals)

    # --- custom ---
    custom_p = subparsers.add_parser("custom", help="Targets with your own overrides")
    custom_p.add_argument("--calories", type=float, help="Total daily calories")
    custom_p.add_argument("--protein-per-kg", type=float, help="Protein grams per kg body weight")
    custom_p.add_argument("--carb-pct", type=float,
                          help="Percent of non-protein calories from carbs (default 50)")
    custom_p.set_defaults(func=cmd_custom)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if not args.command:
        parser.print_help()
        return

    init_db(args.db)
    if hasattr(args, "func"):
        args.func(args)
    elif args.command == "profile":
        # Subcommand not specified
        sub = parser._subparsers._group_actions[0].choices[args.command]
        sub.print_help()
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
