"""
Pytest Configuration and Fixtures
=================================

Every test gets a fresh app bound to an in-memory SQLite database, so tests
never share rows. The `kitchen` fixture seeds one household with a few
ingredients and recipes; `plan_week` is that household's week starting
Monday 2026-10-12.
"""

import os
import sys
from datetime import date, timedelta
from types import SimpleNamespace

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from models import db, Household, HouseholdMember, Ingredient, Recipe, RecipeItem
from services import planning

WEEK_START = date(2026, 10, 12)
USER_ID = 'user-1'


def day(offset):
    """Date `offset` days into the test week."""
    return WEEK_START + timedelta(days=offset)


@pytest.fixture()
def app():
    application = create_app('testing')
    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def logged_in(client):
    """Test client whose session belongs to the seeded household's member."""
    with client.session_transaction() as sess:
        sess['user_id'] = USER_ID
    return client


@pytest.fixture()
def household(app):
    h = Household(name='Test Household')
    db.session.add(h)
    db.session.flush()
    db.session.add(HouseholdMember(household_id=h.id, user_id=USER_ID))
    db.session.commit()
    return h


def _ingredient(household, name, category):
    ing = Ingredient(household_id=household.id, name=name, category=category)
    db.session.add(ing)
    return ing


@pytest.fixture()
def kitchen(household):
    """Ingredients and recipes for the seeded household."""
    onion = _ingredient(household, 'Onion', 'Veg')
    mince = _ingredient(household, 'Beef mince', 'Meat')
    pasta = _ingredient(household, 'Spaghetti', 'Pasta')
    eggs = _ingredient(household, 'Eggs', 'Dairy')
    db.session.flush()

    bolognese = Recipe(household_id=household.id, name='Bolognese', servings_default=4)
    omelette = Recipe(household_id=household.id, name='Omelette', servings_default=2)
    db.session.add_all([bolognese, omelette])
    db.session.flush()

    db.session.add_all([
        RecipeItem(recipe_id=bolognese.id, ingredient_id=mince.id, qty=500, unit='g'),
        RecipeItem(recipe_id=bolognese.id, ingredient_id=onion.id, qty=1, unit='each'),
        RecipeItem(recipe_id=bolognese.id, ingredient_id=pasta.id, qty=400, unit='g'),
        RecipeItem(recipe_id=omelette.id, ingredient_id=eggs.id, qty=3, unit='each'),
        RecipeItem(recipe_id=omelette.id, ingredient_id=onion.id, qty=0.5, unit='each'),
    ])
    db.session.commit()

    return SimpleNamespace(
        household=household,
        onion=onion, mince=mince, pasta=pasta, eggs=eggs,
        bolognese=bolognese, omelette=omelette,
    )


@pytest.fixture()
def plan_week(household):
    return planning.get_or_create_plan_week(household.id, WEEK_START)
