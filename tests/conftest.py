"""
Pytest configuration and fixtures.
Ensures tests use an isolated test database, not the production database.
"""

import os
import shutil
import pytest
import tempfile

# Set test database path BEFORE importing app
# This ensures all tests use an isolated database
TEST_DB_DIR = tempfile.mkdtemp(prefix='clubspace_test_')
TEST_DB_PATH = os.path.join(TEST_DB_DIR, 'clubspace_test.db')
os.environ['DATABASE_PATH'] = TEST_DB_PATH

ADMIN_CREDENTIALS = {'identifier': 'admin', 'password': 'admin123'}
CLUB_CREDENTIALS = {'identifier': 'cs-club@example.com', 'password': 'password123'}

# Seeded ids (see database/seed.py)
AUDITORIUM_ID = 2
CS_CLUB_ID = 1


@pytest.fixture(scope='session', autouse=True)
def setup_test_environment():
    """Set up test environment before any tests run."""
    os.environ['DATABASE_PATH'] = TEST_DB_PATH
    os.environ['FLASK_ENV'] = 'test'

    yield

    # Cleanup: remove test database after all tests
    shutil.rmtree(TEST_DB_DIR, ignore_errors=True)


@pytest.fixture
def app():
    """Create test application with a freshly seeded database."""
    from app import create_app
    from database import init_db

    app = create_app('test')
    app.config['TESTING'] = True
    app.config['WTF_CSRF_ENABLED'] = False
    app.config['DATABASE_PATH'] = TEST_DB_PATH

    with app.app_context():
        init_db()

    yield app


@pytest.fixture
def client(app):
    """Create anonymous test client."""
    return app.test_client()


def _login(app, credentials):
    client = app.test_client()
    response = client.post('/auth/login', json=credentials)
    assert response.status_code == 200, response.get_json()
    return client


@pytest.fixture
def admin_client(app):
    """Test client signed in as the seeded administrator."""
    return _login(app, ADMIN_CREDENTIALS)


@pytest.fixture
def club_client(app):
    """Test client signed in as the seeded Computer Science Club."""
    return _login(app, CLUB_CREDENTIALS)


@pytest.fixture
def make_reservation(app):
    """Factory inserting a reservation through the model layer."""
    from models.reservation import create_reservation

    def _make(title='Weekly Meeting', space_id=AUDITORIUM_ID, club_id=CS_CLUB_ID,
              start_time='2024-06-10T14:00:00Z', end_time='2024-06-10T16:00:00Z', **kwargs):
        with app.app_context():
            return create_reservation(
                space_id=space_id,
                club_id=club_id,
                title=title,
                start_time=start_time,
                end_time=end_time,
                **kwargs
            )

    return _make
