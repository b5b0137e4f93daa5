import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["INIT_DB_ON_STARTUP"] = "false"

import pytest
from datetime import date, datetime
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from leavedesk.main import app
from leavedesk.db.init_db import create_schema
from leavedesk.db.session import Base
from leavedesk.core.security import get_password_hash
from leavedesk.models.user import User, UserRole
from leavedesk.schemas import Identity
from leavedesk.services.auth import Authenticator
from leavedesk.services.lifecycle import LeaveRequestManager
from leavedesk.api.dependencies import get_authenticator, get_leave_manager

# Fixed clock for scenario tests
TODAY = date(2024, 6, 1)


@pytest.fixture
def engine():
    """Fresh in-memory database for each test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    create_schema(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, expire_on_commit=False, bind=engine)


def create_user(session_factory, username, name, email, password, role, is_active=True):
    with session_factory.begin() as db:
        user = User(
            username=username,
            name=name,
            email=email,
            password_hash=get_password_hash(password),
            role=role,
            is_active=is_active
        )
        db.add(user)
    return user


@pytest.fixture
def admin_user(session_factory):
    """Create admin user for testing"""
    return create_user(session_factory, "admin_test", "Admin Test", "admin_test@test.com", "admin123", UserRole.ADMIN)


@pytest.fixture
def employee_user(session_factory):
    """Create employee user for testing"""
    return create_user(
        session_factory, "employee_test", "Employee Test", "employee_test@test.com", "employee123", UserRole.EMPLOYEE
    )


@pytest.fixture
def inactive_user(session_factory):
    return create_user(
        session_factory, "former", "Former Employee", "former@test.com", "former123", UserRole.EMPLOYEE,
        is_active=False
    )


@pytest.fixture
def admin_identity(admin_user):
    return Identity.model_validate(admin_user)


@pytest.fixture
def employee_identity(employee_user):
    return Identity.model_validate(employee_user)


@pytest.fixture
def authenticator(session_factory):
    return Authenticator(session_factory)


@pytest.fixture
def manager(session_factory):
    """Lifecycle manager whose calendar is pinned to TODAY"""
    return LeaveRequestManager(
        session_factory,
        max_days=30,
        today=lambda: TODAY,
        now=datetime.now
    )


@pytest.fixture
def client(authenticator, manager):
    """Create test client wired to the test store"""
    app.dependency_overrides[get_authenticator] = lambda: authenticator
    app.dependency_overrides[get_leave_manager] = lambda: manager
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def login(client, username, password):
    response = client.post(
        "/auth/login",
        json={"username": username, "password": password}
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def admin_login(client, admin_user):
    """Log the test client in as the admin"""
    return login(client, "admin_test", "admin123")


@pytest.fixture
def employee_login(client, employee_user):
    """Log the test client in as the employee"""
    return login(client, "employee_test", "employee123")
