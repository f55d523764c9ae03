"""
Checklist Service

Cupboard/trolley tick state for shopping list rows.

ChecklistStateStore is the server-side store: partial upserts in two
independent keyspaces plus an idempotent weekly reset.

ChecklistCache is the client-side projection of a rendered list. It applies a
toggle locally first, then persists it, and puts the old value back if the
write fails, so the visible list never drifts from what is stored.
"""

from dataclasses import replace

from constants import CHECKLIST_FIELDS
from utils.logging_utils import get_logger

from .errors import NotFound, ShoppingListError, ValidationError

logger = get_logger(__name__)


def validate_patch(patch):
    """Return a clean {field: bool} patch or raise ValidationError."""
    if not isinstance(patch, dict):
        raise ValidationError("Checklist patch must be an object")

    clean = {}
    for field, value in patch.items():
        if field not in CHECKLIST_FIELDS:
            raise ValidationError(f"Unknown checklist field: {field}")
        if not isinstance(value, bool):
            raise ValidationError(f"{field} must be true or false")
        clean[field] = value
    if not clean:
        raise ValidationError("Checklist patch must set in_cupboard or in_trolley")
    return clean


class ChecklistStateStore:
    """Stored tick state for a plan week's shopping list rows."""

    def __init__(self, repository):
        self.repository = repository

    def get(self, plan_week_id):
        """Overlay for the week; keys without a stored row read as unticked."""
        return self.repository.get_checklist_state(plan_week_id)

    def set_ingredient_state(self, plan_week_id, ingredient_id, unit, patch):
        """Upsert ticks for an (ingredient, unit) row; fields not in patch keep their value."""
        patch = validate_patch(patch)
        self.repository.upsert_ingredient_state(plan_week_id, ingredient_id, unit or '', patch)
        logger.debug("Plan week %s ingredient %s/%r: %s", plan_week_id, ingredient_id, unit, patch)

    def set_manual_state(self, plan_week_id, manual_item_id, patch):
        """Upsert ticks for a manual item row; fields not in patch keep their value."""
        patch = validate_patch(patch)
        self.repository.upsert_manual_state(plan_week_id, manual_item_id, patch)
        logger.debug("Plan week %s manual item %s: %s", plan_week_id, manual_item_id, patch)

    def reset(self, plan_week_id):
        """
        Clear every tick for the week. Manual items themselves are kept.

        Safe to call on a week with no stored ticks.
        """
        ingredient_count, manual_count = self.repository.reset_checklist_state(plan_week_id)
        logger.info(
            "Reset checklist for plan week %s (%d ingredient, %d manual rows cleared)",
            plan_week_id, ingredient_count, manual_count,
        )
        return ingredient_count, manual_count


class ChecklistCache:
    """Rows of one rendered shopping list, keyed by row identity."""

    def __init__(self, store, plan_week_id, rows):
        self.store = store
        self.plan_week_id = plan_week_id
        self.rows = {row.key: row for row in rows}

    def get(self, key):
        try:
            return self.rows[key]
        except KeyError:
            raise NotFound(f"No shopping list row {key}") from None

    def values(self):
        return list(self.rows.values())

    def _persist(self, row, patch):
        if row.kind == 'ingredient':
            self.store.set_ingredient_state(self.plan_week_id, row.ingredient_id, row.unit, patch)
        else:
            self.store.set_manual_state(self.plan_week_id, row.manual_item_id, patch)

    def toggle(self, key, field, value):
        """
        Set one checklist field on a row, optimistically.

        If the save fails the row is restored to its previous state and the
        error is re-raised for the caller to report.
        """
        patch = validate_patch({field: value})
        previous = self.get(key)
        self.rows[key] = replace(previous, **patch)
        try:
            self._persist(previous, patch)
        except ShoppingListError:
            self.rows[key] = previous
            logger.warning("Reverted %s on %s after failed save", field, key)
            raise
        return self.rows[key]
