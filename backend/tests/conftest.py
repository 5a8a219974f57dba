"""
Central pytest configuration for the Scheduler API tests.

Provides the Flask app/client fixtures (with a mocked repository for unit
tests and a real in-memory SQLite repository for integration tests).
"""

import os

# Set before any application import so config getters see test values
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["TESTING"] = "true"
os.environ.setdefault("API_DOCS_ENABLED", "true")

import pytest  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from scheduler_api.db.session import build_engine, create_tables  # noqa: E402
from scheduler_api.main import create_app  # noqa: E402
from scheduler_api.repositories.doctor_repo import DoctorRepository  # noqa: E402
from tests.factories.repository_factories import (  # noqa: E402
    DoctorRepositoryFactory,
    ScheduleServiceFactory,
)
from tests.fixtures.doctor_fixtures import *  # noqa: E402,F401,F403


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "api: mark test as API endpoint test")
    config.addinivalue_line("markers", "controllers: mark test as controller-related")
    config.addinivalue_line("markers", "repositories: mark test as repository test")
    config.addinivalue_line("markers", "validation: mark test as validation test")
    config.addinivalue_line("markers", "logging: mark test as logging-related")


# =====================================================
# DATABASE FIXTURES
# =====================================================


@pytest.fixture
def db_engine():
    """Fresh in-memory SQLite database per test."""
    engine = build_engine("sqlite:///:memory:")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=db_engine
    )


@pytest.fixture
def doctor_repository(session_factory):
    return DoctorRepository(session_factory)


# =====================================================
# APP FIXTURES
# =====================================================


@pytest.fixture
def mock_repository():
    """Mocked IDoctorRepository; controllers never reach a database."""
    return DoctorRepositoryFactory.create_mock()


@pytest.fixture
def mock_schedule_service():
    return ScheduleServiceFactory.create_mock()


@pytest.fixture
def app(mock_repository, mock_schedule_service):
    return create_app(
        config_overrides={"TESTING": True},
        repository=mock_repository,
        schedule_service=mock_schedule_service,
    )


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def integration_app(session_factory):
    return create_app(config_overrides={"TESTING": True}, session_factory=session_factory)


@pytest.fixture
def integration_client(integration_app):
    with integration_app.test_client() as test_client:
        yield test_client
