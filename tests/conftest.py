"""
Pytest fixtures: a testing app bound to a fresh in-memory database per test.
"""

import pytest

from app import create_app
from models import db
from services import OptionService


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def service(app):
    return OptionService()
