"""
Recipe Models

Contains the Recipe and RecipeItem models for managing recipes and their
ingredient lines.
"""

from .base import db


class Recipe(db.Model):
    """Recipe with the number of servings its ingredient quantities make."""
    id = db.Column(db.Integer, primary_key=True)
    household_id = db.Column(db.Integer, db.ForeignKey('household.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False, index=True)
    servings_default = db.Column(db.Integer, default=4)
    items = db.relationship('RecipeItem', backref='recipe', lazy=True, cascade='all, delete-orphan')


class RecipeItem(db.Model):
    """One ingredient line of a recipe: quantity and unit for the default servings."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    ingredient_id = db.Column(db.Integer, db.ForeignKey('ingredient.id', ondelete='CASCADE'), nullable=False, index=True)
    qty = db.Column(db.Float, nullable=False, default=0.0)
    unit = db.Column(db.String(20), nullable=False, default='')
    ingredient = db.relationship('Ingredient')
