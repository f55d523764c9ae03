"""
Ingredient Model

Household-scoped ingredient names and their shopping categories.
"""

from .base import db


class Ingredient(db.Model):
    """Ingredient with the category used to group shopping list rows."""
    __table_args__ = (
        db.UniqueConstraint('household_id', 'name', name='uq_ingredient_household_name'),
    )

    id = db.Column(db.Integer, primary_key=True)
    household_id = db.Column(db.Integer, db.ForeignKey('household.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False, index=True)
    category = db.Column(db.String(50), default='Other', index=True)
