"""
Pytest fixtures for PVZ backend tests.

Provides a fresh in-memory database per test, the Flask test client, and
role tokens.
"""

from datetime import timedelta

import pytest

from pvz import create_app
from pvz.extensions import db
from pvz.models import Reception
from pvz.permissions import Role
from pvz.services import pvz_service, token_service
from pvz.time_utils import utcnow


TEST_JWT_SECRET = "test-secret"


@pytest.fixture(scope='function')
def app():
    """Create application with its own in-memory database."""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'JWT_SECRET': TEST_JWT_SECRET,
        'BCRYPT_ROUNDS': 4,
    })

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    yield db.session
    db.session.rollback()


def auth_headers(token: str) -> dict:
    """Helper to create Authorization headers."""
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def employee_headers(app):
    return auth_headers(token_service.issue_token(Role.EMPLOYEE, TEST_JWT_SECRET))


@pytest.fixture
def moderator_headers(app):
    return auth_headers(token_service.issue_token(Role.MODERATOR, TEST_JWT_SECRET))


@pytest.fixture
def pickup_point(db_session):
    """A pickup point in Moscow."""
    return pvz_service.create_pickup_point("Москва")


@pytest.fixture
def make_pickup_point(db_session):
    """Factory: pickup point registered `minutes_ago` minutes in the past."""
    def _make(city="Москва", minutes_ago=0):
        return pvz_service.create_pickup_point(
            city,
            registered_at=utcnow() - timedelta(minutes=minutes_ago),
        )
    return _make


@pytest.fixture
def make_reception(db_session):
    """Factory: reception row with an explicit timestamp and status."""
    def _make(pvz_id, date_time, status=Reception.STATUS_CLOSED):
        reception = Reception(pvz_id=pvz_id, date_time=date_time, status=status)
        db_session.add(reception)
        db_session.commit()
        return reception
    return _make
