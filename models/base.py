"""
Database Base Module

Shared SQLAlchemy instance for every model. Kept apart from app.py so
models and services can import it without pulling in the web layer.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the app in create_app()
db = SQLAlchemy()
