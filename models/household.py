"""
Household Models

Contains the Household and HouseholdMember models. Every plan week, recipe
and ingredient belongs to exactly one household.
"""

from .base import db


class Household(db.Model):
    """A household sharing recipes, plans and shopping lists."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, default='Home')
    members = db.relationship('HouseholdMember', backref='household', lazy=True, cascade='all, delete-orphan')


class HouseholdMember(db.Model):
    """Links a signed-in user (opaque id from the session) to a household."""
    id = db.Column(db.Integer, primary_key=True)
    household_id = db.Column(db.Integer, db.ForeignKey('household.id', ondelete='CASCADE'), nullable=False, index=True)
    user_id = db.Column(db.String(64), nullable=False, unique=True, index=True)
