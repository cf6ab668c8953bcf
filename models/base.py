"""
Database Base Module

The shared Flask-SQLAlchemy instance. Kept apart from the models so the
repositories and app factory can import it without circular imports.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the app in app.create_app()
db = SQLAlchemy()
