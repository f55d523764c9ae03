"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .household import Household, HouseholdMember
from .ingredient import Ingredient
from .recipe import Recipe, RecipeItem
from .mealplan import PlanWeek, PlanEntry
from .shopping import ManualShoppingItem, ShoppingListState, ManualShoppingState

__all__ = [
    'db',
    'Household',
    'HouseholdMember',
    'Ingredient',
    'Recipe',
    'RecipeItem',
    'PlanWeek',
    'PlanEntry',
    'ManualShoppingItem',
    'ShoppingListState',
    'ManualShoppingState',
]
