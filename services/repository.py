"""
Shopping Repository

SQLAlchemy-backed data access for the shopping list. Every method either
completes or raises PersistenceFailure with the session rolled back; callers
never see a half-applied write.
"""

from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from constants import DINNER
from models import (
    db, Ingredient, Recipe, RecipeItem, PlanEntry,
    ManualShoppingItem, ShoppingListState, ManualShoppingState,
)
from utils.logging_utils import get_logger

from .errors import NotFound, PersistenceFailure
from .records import (
    CheckState, ChecklistOverlay, DinnerEntry, ManualItemRecord,
    RecipeItemRecord, RecipeRecord,
)

logger = get_logger(__name__)


def _manual_record(item):
    return ManualItemRecord(
        id=item.id,
        name=item.name,
        category=item.category,
        qty=item.qty,
        unit=item.unit,
        carry_forward=bool(item.carry_forward),
    )


@contextmanager
def persistence(action):
    """Roll back and raise PersistenceFailure if a database call inside fails."""
    try:
        yield
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Failed to %s: %s", action, e)
        raise PersistenceFailure(f"Could not {action}") from e


class ShoppingRepository:
    """Reads and writes shopping list data for one plan week at a time."""

    # ---- reads ----

    def get_recipes_by_ids(self, ids):
        if not ids:
            return []
        with persistence('load recipes'):
            recipes = Recipe.query.filter(Recipe.id.in_(ids)).all()
        return [RecipeRecord(id=r.id, servings_default=r.servings_default) for r in recipes]

    def get_recipe_items_by_recipe_ids(self, ids):
        if not ids:
            return []
        with persistence('load recipe items'):
            rows = (
                db.session.query(RecipeItem, Ingredient.name, Ingredient.category)
                .outerjoin(Ingredient, RecipeItem.ingredient_id == Ingredient.id)
                .filter(RecipeItem.recipe_id.in_(ids))
                .order_by(RecipeItem.id)
                .all()
            )
        return [
            RecipeItemRecord(
                recipe_id=ri.recipe_id,
                ingredient_id=ri.ingredient_id,
                qty=ri.qty or 0.0,
                unit=ri.unit or '',
                ingredient_name=name,
                ingredient_category=category,
            )
            for ri, name, category in rows
        ]

    def get_dinner_entries(self, plan_week_id):
        with persistence('load dinners'):
            entries = (
                PlanEntry.query
                .filter_by(plan_week_id=plan_week_id, meal=DINNER)
                .order_by(PlanEntry.entry_date)
                .all()
            )
        return [
            DinnerEntry(entry_date=e.entry_date, recipe_id=e.recipe_id, servings_override=e.servings_override)
            for e in entries
        ]

    def get_manual_items(self, plan_week_id):
        with persistence('load manual items'):
            items = (
                ManualShoppingItem.query
                .filter_by(plan_week_id=plan_week_id)
                .order_by(ManualShoppingItem.created_at, ManualShoppingItem.id)
                .all()
            )
        return [_manual_record(item) for item in items]

    def get_checklist_state(self, plan_week_id):
        with persistence('load checklist state'):
            ingredient_rows = ShoppingListState.query.filter_by(plan_week_id=plan_week_id).all()
            manual_rows = ManualShoppingState.query.filter_by(plan_week_id=plan_week_id).all()

        overlay = ChecklistOverlay()
        for s in ingredient_rows:
            overlay.ingredient_states[(s.ingredient_id, s.unit or '')] = CheckState(
                in_cupboard=bool(s.in_cupboard), in_trolley=bool(s.in_trolley))
        for s in manual_rows:
            overlay.manual_states[s.manual_item_id] = CheckState(
                in_cupboard=bool(s.in_cupboard), in_trolley=bool(s.in_trolley))
        return overlay

    # ---- checklist writes ----

    def _apply_patch(self, model, key, patch):
        row = model.query.filter_by(**key).first()
        if row is None:
            row = model(in_cupboard=False, in_trolley=False, **key)
            db.session.add(row)
        for field, value in patch.items():
            setattr(row, field, value)

    def _upsert(self, model, key, patch):
        with persistence('save checklist state'):
            try:
                self._apply_patch(model, key, patch)
                db.session.commit()
            except IntegrityError:
                # Another request inserted the same key first; last write wins
                db.session.rollback()
                self._apply_patch(model, key, patch)
                db.session.commit()

    def upsert_ingredient_state(self, plan_week_id, ingredient_id, unit, patch):
        key = {'plan_week_id': plan_week_id, 'ingredient_id': ingredient_id, 'unit': unit or ''}
        self._upsert(ShoppingListState, key, patch)

    def upsert_manual_state(self, plan_week_id, manual_item_id, patch):
        self._get_manual_item(plan_week_id, manual_item_id)
        key = {'plan_week_id': plan_week_id, 'manual_item_id': manual_item_id}
        self._upsert(ManualShoppingState, key, patch)

    def reset_checklist_state(self, plan_week_id):
        """Delete both checklist keyspaces for the week in one transaction."""
        with persistence('reset checklist state'):
            ingredient_count = (
                ShoppingListState.query
                .filter_by(plan_week_id=plan_week_id)
                .delete(synchronize_session=False)
            )
            manual_count = (
                ManualShoppingState.query
                .filter_by(plan_week_id=plan_week_id)
                .delete(synchronize_session=False)
            )
            db.session.commit()
        return ingredient_count, manual_count

    # ---- manual items ----

    def _get_manual_item(self, plan_week_id, manual_item_id):
        with persistence('load manual item'):
            item = ManualShoppingItem.query.filter_by(id=manual_item_id, plan_week_id=plan_week_id).first()
        if item is None:
            raise NotFound(f"Manual item {manual_item_id} not found in this week")
        return item

    def add_manual_item(self, plan_week_id, name, category, qty=None, unit=None, carry_forward=False):
        with persistence('add manual item'):
            item = ManualShoppingItem(
                plan_week_id=plan_week_id,
                name=name,
                category=category,
                qty=qty,
                unit=unit,
                carry_forward=carry_forward,
            )
            db.session.add(item)
            db.session.commit()
        return _manual_record(item)

    def delete_manual_item(self, plan_week_id, manual_item_id):
        item = self._get_manual_item(plan_week_id, manual_item_id)
        with persistence('delete manual item'):
            db.session.delete(item)
            db.session.commit()
