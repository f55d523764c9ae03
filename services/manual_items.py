"""
Manual Item Service

Validation and pass-through writes for shopping items the user adds by hand.
Invalid input is rejected here, before anything reaches the database.
"""

import math

from constants import DEFAULT_CATEGORY, MAX_LENGTHS
from utils.logging_utils import get_logger
from utils.sanitizer import sanitize_text

from .errors import ValidationError

logger = get_logger(__name__)

TRUTHY = {'1', 'true', 'on', 'yes'}


def parse_qty(value):
    """
    Parse an optional quantity.

    Blank input means "no quantity" and returns None. Anything else must be a
    finite, non-negative number.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError("Qty must be a number (or leave it blank)")
    if isinstance(value, str):
        value = value.strip()
        if value == '':
            return None
    try:
        qty = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Qty must be a number (or leave it blank)") from None
    if not math.isfinite(qty):
        raise ValidationError("Qty must be a number (or leave it blank)")
    if qty < 0:
        raise ValidationError("Qty cannot be negative")
    return qty


def parse_flag(value):
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY


def clean_manual_item(name, category=None, qty=None, unit=None, carry_forward=False):
    """Return validated manual item fields as a dict, or raise ValidationError."""
    name = sanitize_text(name, MAX_LENGTHS['item_name'])
    if not name:
        raise ValidationError("Please enter an item name")

    return {
        'name': name,
        'category': sanitize_text(category, MAX_LENGTHS['category']) or DEFAULT_CATEGORY,
        'qty': parse_qty(qty),
        'unit': sanitize_text(unit, MAX_LENGTHS['unit']),
        'carry_forward': parse_flag(carry_forward),
    }


def add_manual_item(repository, plan_week_id, data):
    """Validate and store a manual item; returns the stored ManualItemRecord."""
    fields = clean_manual_item(
        data.get('name'),
        category=data.get('category'),
        qty=data.get('qty'),
        unit=data.get('unit'),
        carry_forward=data.get('carry_forward'),
    )
    item = repository.add_manual_item(plan_week_id, **fields)
    logger.info("Added manual item %s (%r) to plan week %s", item.id, item.name, plan_week_id)
    return item


def delete_manual_item(repository, plan_week_id, manual_item_id):
    """Delete a manual item and its tick state."""
    repository.delete_manual_item(plan_week_id, manual_item_id)
    logger.info("Deleted manual item %s from plan week %s", manual_item_id, plan_week_id)
