import os

os.environ['SQLALCHEMY_DATABASE_URI'] = 'sqlite:///:memory:'

import pytest
from app import app
from models import db
from services.tracker_store import TrackerStore

@pytest.fixture
def client():
    app.config['TESTING'] = True

    with app.test_client() as client:
        with app.app_context():
            db.create_all()
            yield client
            db.session.remove()
            db.drop_all()

@pytest.fixture
def app_ctx():
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()

@pytest.fixture
def make_store():
    def _make(entries):
        # Fill in missing habits so tests can list only the ones they care about
        full = {}
        for key, record in entries.items():
            full[key] = {'med': False, 'walk': False, 'vit': False, **record}
        return TrackerStore(full)
    return _make
