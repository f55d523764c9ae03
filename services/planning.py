"""
Planning Service

Household resolution, plan weeks and dinner entries. These are the sources
the shopping list is computed from; changing them needs no list rebuild
because the list is recomputed on every read.
"""

from sqlalchemy.exc import IntegrityError

from constants import DINNER, MAX_SERVINGS
from models import db, HouseholdMember, ManualShoppingItem, PlanEntry, PlanWeek, Recipe
from utils.logging_utils import get_logger
from utils.week import in_week, parse_date, start_of_week_monday

from .errors import NotFound, ValidationError
from .repository import persistence

logger = get_logger(__name__)


def resolve_household_id(user_id):
    """Household of the signed-in user; NotFound when there is none."""
    if not user_id:
        raise NotFound("No household found.")
    with persistence('load household'):
        member = HouseholdMember.query.filter_by(user_id=str(user_id)).first()
    if member is None:
        raise NotFound("No household found.")
    return member.household_id


def find_plan_week(household_id, week_start):
    with persistence('load plan week'):
        return PlanWeek.query.filter_by(
            household_id=household_id,
            week_start=start_of_week_monday(week_start),
        ).first()


def require_plan_week(household_id, plan_week_id):
    """Plan week by id, only if it belongs to the household."""
    with persistence('load plan week'):
        plan_week = PlanWeek.query.filter_by(id=plan_week_id, household_id=household_id).first()
    if plan_week is None:
        raise NotFound(f"Plan week {plan_week_id} not found")
    return plan_week


def _carry_forward(plan_week):
    """Copy carry-forward manual items from the household's latest earlier week."""
    previous = (
        PlanWeek.query
        .filter(PlanWeek.household_id == plan_week.household_id,
                PlanWeek.week_start < plan_week.week_start)
        .order_by(PlanWeek.week_start.desc())
        .first()
    )
    if previous is None:
        return 0

    items = (
        ManualShoppingItem.query
        .filter_by(plan_week_id=previous.id, carry_forward=True)
        .order_by(ManualShoppingItem.created_at, ManualShoppingItem.id)
        .all()
    )
    for item in items:
        db.session.add(ManualShoppingItem(
            plan_week_id=plan_week.id,
            name=item.name,
            category=item.category,
            qty=item.qty,
            unit=item.unit,
            carry_forward=True,
        ))
    return len(items)


def get_or_create_plan_week(household_id, week_start=None):
    """The household's plan week containing week_start (default: this week)."""
    week_start = start_of_week_monday(week_start)
    existing = find_plan_week(household_id, week_start)
    if existing is not None:
        return existing

    with persistence('create plan week'):
        try:
            plan_week = PlanWeek(household_id=household_id, week_start=week_start)
            db.session.add(plan_week)
            db.session.flush()
            carried = _carry_forward(plan_week)
            db.session.commit()
        except IntegrityError:
            # Created by a concurrent request
            db.session.rollback()
            return find_plan_week(household_id, week_start)

    logger.info("Created plan week %s for household %s starting %s (%d items carried forward)",
                plan_week.id, household_id, week_start, carried)
    return plan_week


def parse_servings(value):
    """Optional servings override: None for blank, else an integer 1..MAX_SERVINGS."""
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise ValidationError("Servings must be a whole number")
    try:
        servings = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Servings must be a whole number") from None
    if isinstance(value, float) and value != servings:
        raise ValidationError("Servings must be a whole number")
    if servings < 1 or servings > MAX_SERVINGS:
        raise ValidationError(f"Servings must be between 1 and {MAX_SERVINGS}")
    return servings


def set_dinner(plan_week, entry_date, recipe_id=None, servings_override=None):
    """
    Set, replace or clear the dinner for a date in the plan week.

    A missing recipe_id clears the date. The recipe must belong to the plan
    week's household.

    Returns 'cleared', 'updated' or 'inserted'.
    """
    day = parse_date(entry_date)
    if day is None:
        raise ValidationError("Date must be YYYY-MM-DD")
    if not in_week(day, plan_week.week_start):
        raise ValidationError(f"{day} is not in the week starting {plan_week.week_start}")
    servings_override = parse_servings(servings_override)

    with persistence('load dinner'):
        entry = PlanEntry.query.filter_by(plan_week_id=plan_week.id, entry_date=day, meal=DINNER).first()

    if recipe_id in (None, ''):
        if entry is not None:
            with persistence('clear dinner'):
                db.session.delete(entry)
                db.session.commit()
        return 'cleared'

    try:
        recipe_id = int(recipe_id)
    except (TypeError, ValueError):
        raise ValidationError("Recipe id must be a number") from None

    with persistence('load recipe'):
        recipe = Recipe.query.filter_by(id=recipe_id, household_id=plan_week.household_id).first()
    if recipe is None:
        raise NotFound(f"Recipe not found: {recipe_id}")

    with persistence('save dinner'):
        if entry is not None:
            entry.recipe_id = recipe.id
            entry.servings_override = servings_override
            action = 'updated'
        else:
            db.session.add(PlanEntry(
                plan_week_id=plan_week.id,
                entry_date=day,
                meal=DINNER,
                recipe_id=recipe.id,
                servings_override=servings_override,
            ))
            action = 'inserted'
        db.session.commit()

    logger.info("Dinner %s on %s: recipe %s (servings %s)", action, day, recipe.id, servings_override)
    return action


def clear_plan_week(plan_week):
    """Delete every entry of the plan week; returns how many were removed."""
    with persistence('clear plan'):
        deleted = PlanEntry.query.filter_by(plan_week_id=plan_week.id).delete(synchronize_session=False)
        db.session.commit()
    logger.info("Cleared %d entries from plan week %s", deleted, plan_week.id)
    return deleted
