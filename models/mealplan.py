"""
Meal Plan Models

Contains the PlanWeek and PlanEntry models for weekly meal planning.
"""

from .base import db


class PlanWeek(db.Model):
    """A household's Monday-aligned planning week."""
    __table_args__ = (
        db.UniqueConstraint('household_id', 'week_start', name='uq_plan_week_household_start'),
    )

    id = db.Column(db.Integer, primary_key=True)
    household_id = db.Column(db.Integer, db.ForeignKey('household.id', ondelete='CASCADE'), nullable=False, index=True)
    week_start = db.Column(db.Date, nullable=False)  # always a Monday
    entries = db.relationship('PlanEntry', backref='plan_week', lazy=True, cascade='all, delete-orphan')


class PlanEntry(db.Model):
    """A meal slot on one date; dinner entries drive the shopping list."""
    __table_args__ = (
        db.UniqueConstraint('plan_week_id', 'entry_date', 'meal', name='uq_plan_entry_slot'),
    )

    id = db.Column(db.Integer, primary_key=True)
    plan_week_id = db.Column(db.Integer, db.ForeignKey('plan_week.id', ondelete='CASCADE'), nullable=False, index=True)
    entry_date = db.Column(db.Date, nullable=False)
    meal = db.Column(db.String(20), nullable=False, default='dinner')
    # No FK cascade: entries may outlive a deleted recipe and are skipped when aggregating
    recipe_id = db.Column(db.Integer, nullable=True, index=True)
    servings_override = db.Column(db.Integer, nullable=True)
