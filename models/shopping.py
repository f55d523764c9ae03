"""
Shopping Models

Contains the manual shopping item model and the two checklist state tables:
one keyed by (plan week, ingredient, unit) for recipe-derived rows and one
keyed by (plan week, manual item) for manual rows.
"""

from datetime import datetime, timezone

from .base import db


def _utcnow():
    return datetime.now(timezone.utc)


class ManualShoppingItem(db.Model):
    """Shopping list item entered directly by the user, not derived from recipes."""
    id = db.Column(db.Integer, primary_key=True)
    plan_week_id = db.Column(db.Integer, db.ForeignKey('plan_week.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(50), default='Other')
    qty = db.Column(db.Float, nullable=True)  # blank for things like "bin bags"
    unit = db.Column(db.String(20), nullable=True)
    # Copied into the next plan week when that week is created
    carry_forward = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)
    state = db.relationship('ManualShoppingState', backref='manual_item', lazy=True, cascade='all, delete-orphan')


class ShoppingListState(db.Model):
    """Cupboard/trolley ticks for an aggregated ingredient row."""
    __table_args__ = (
        db.UniqueConstraint('plan_week_id', 'ingredient_id', 'unit', name='uq_shopping_state_key'),
    )

    id = db.Column(db.Integer, primary_key=True)
    plan_week_id = db.Column(db.Integer, db.ForeignKey('plan_week.id', ondelete='CASCADE'), nullable=False, index=True)
    ingredient_id = db.Column(db.Integer, nullable=False)
    unit = db.Column(db.String(20), nullable=False, default='')
    in_cupboard = db.Column(db.Boolean, default=False, nullable=False)
    in_trolley = db.Column(db.Boolean, default=False, nullable=False)


class ManualShoppingState(db.Model):
    """Cupboard/trolley ticks for a manual shopping item."""
    __table_args__ = (
        db.UniqueConstraint('plan_week_id', 'manual_item_id', name='uq_manual_state_key'),
    )

    id = db.Column(db.Integer, primary_key=True)
    plan_week_id = db.Column(db.Integer, db.ForeignKey('plan_week.id', ondelete='CASCADE'), nullable=False, index=True)
    manual_item_id = db.Column(db.Integer, db.ForeignKey('manual_shopping_item.id', ondelete='CASCADE'), nullable=False, index=True)
    in_cupboard = db.Column(db.Boolean, default=False, nullable=False)
    in_trolley = db.Column(db.Boolean, default=False, nullable=False)
