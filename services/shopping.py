"""
Shopping List Service

Turns a plan week's dinners into scaled, consolidated ingredient rows, merges
in manual items and overlays the stored cupboard/trolley ticks.

The functions here are pure; only compute_shopping_list talks to a repository.
"""

from constants import DEFAULT_CATEGORY, UNKNOWN_INGREDIENT
from utils.logging_utils import get_logger

from .errors import ReferentialGap
from .records import IngredientRow, ManualRow

logger = get_logger(__name__)


def _positive(value):
    """Return value as a number if it is a positive number, else None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def default_servings(recipe):
    """Servings a recipe's quantities are written for, floored at 1."""
    return max(_positive(recipe.servings_default) or 1, 1)


def scale_servings(dinners, recipes_by_id):
    """
    Sum a servings multiplier per recipe across the week's dinners.

    Each dinner contributes used / default, where used is the servings
    override when positive and the recipe default otherwise. A recipe served
    twice at default servings ends up with a multiplier of 2.0.

    Dinners without a recipe are ignored. Dinners whose recipe is not in
    recipes_by_id are skipped with a warning.

    Returns {recipe_id: multiplier}.
    """
    multipliers = {}
    for dinner in dinners:
        if dinner.recipe_id is None:
            continue

        recipe = recipes_by_id.get(dinner.recipe_id)
        if recipe is None:
            logger.warning("%s; skipping", ReferentialGap(dinner.recipe_id, dinner.entry_date))
            continue

        default = default_servings(recipe)
        used = _positive(dinner.servings_override) or default
        multipliers[dinner.recipe_id] = multipliers.get(dinner.recipe_id, 0.0) + used / default

    return multipliers


def aggregate_ingredients(items, multipliers):
    """
    Scale recipe lines by their recipe multiplier and sum them per (ingredient, unit).

    Lines for recipes missing from multipliers are skipped. Units are never
    converted, so 500 g and 1 kg of the same ingredient stay separate.
    Quantities are not rounded here.

    Returns {(ingredient_id, unit): {ingredient_id, name, category, unit, total_qty}}.
    """
    consolidated = {}
    for item in items:
        multiplier = multipliers.get(item.recipe_id)
        if multiplier is None:
            continue

        unit = item.unit or ''
        scaled_qty = float(item.qty or 0) * multiplier
        key = (item.ingredient_id, unit)

        if key in consolidated:
            consolidated[key]['total_qty'] += scaled_qty
        else:
            consolidated[key] = {
                'ingredient_id': item.ingredient_id,
                'name': item.ingredient_name or UNKNOWN_INGREDIENT,
                'category': item.ingredient_category or DEFAULT_CATEGORY,
                'unit': unit,
                'total_qty': scaled_qty,
            }

    return consolidated


def assemble_rows(consolidated, manual_items, overlay):
    """
    Merge aggregated ingredients with manual items and apply stored ticks.

    Ingredient rows come first in aggregation order, then one manual row per
    manual item in the order given.
    """
    rows = []
    for (ingredient_id, unit), item in consolidated.items():
        state = overlay.for_ingredient(ingredient_id, unit)
        rows.append(IngredientRow(
            ingredient_id=ingredient_id,
            name=item['name'],
            category=item['category'],
            unit=unit,
            total_qty=item['total_qty'],
            in_cupboard=state.in_cupboard,
            in_trolley=state.in_trolley,
        ))

    for manual in manual_items:
        state = overlay.for_manual(manual.id)
        rows.append(ManualRow(
            manual_item_id=manual.id,
            name=manual.name,
            category=manual.category or DEFAULT_CATEGORY,
            unit=manual.unit or '',
            qty=manual.qty,
            in_cupboard=state.in_cupboard,
            in_trolley=state.in_trolley,
        ))

    return rows


def dinner_recipe_ids(dinners):
    """Distinct recipe ids of the week's dinners, in first-seen order."""
    seen = []
    for dinner in dinners:
        if dinner.recipe_id is not None and dinner.recipe_id not in seen:
            seen.append(dinner.recipe_id)
    return seen


def compute_shopping_list(plan_week_id, repository):
    """
    Build the shopping list rows for a plan week.

    Any repository failure propagates; a partial list is never returned.
    A week with no dinners and no manual items yields [].
    """
    dinners = repository.get_dinner_entries(plan_week_id)
    recipe_ids = dinner_recipe_ids(dinners)
    manual_items = repository.get_manual_items(plan_week_id)

    if not recipe_ids and not manual_items:
        return []

    overlay = repository.get_checklist_state(plan_week_id)

    consolidated = {}
    if recipe_ids:
        recipes = repository.get_recipes_by_ids(recipe_ids)
        multipliers = scale_servings(dinners, {r.id: r for r in recipes})
        if multipliers:
            items = repository.get_recipe_items_by_recipe_ids(list(multipliers))
            consolidated = aggregate_ingredients(items, multipliers)

    rows = assemble_rows(consolidated, manual_items, overlay)
    logger.debug(
        "Plan week %s: %d dinners, %d ingredient rows, %d manual rows",
        plan_week_id, len(dinners), len(consolidated), len(manual_items),
    )
    return rows
