import os
import sys

# Add the project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Settings are read at import time
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("APP_PUBLIC_BASE_URL", "https://school.example.com")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import student_records.db.base  # noqa: F401  registers every model
from student_records.core.security import create_access_token
from student_records.db.base_class import Base
from student_records.models.student import StudentProfile
from student_records.models.user import Role, User


# Create an in-memory SQLite database for each test
@pytest.fixture
def engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def TestingSessionLocal(engine):
    """Create a session factory for the test database."""
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


# Override the database dependency to use our test database
@pytest.fixture
def override_get_db(TestingSessionLocal):
    """Override the database dependency to use our test database."""
    def _override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()
    return _override_get_db


@pytest.fixture
def db_session(TestingSessionLocal):
    """Create a database session for each test."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def mail_outbox(monkeypatch):
    """Capture outgoing e-mails instead of talking to an SMTP server."""
    sent = []

    def _fake_send_email(subject, to, html, text=None):
        sent.append({"subject": subject, "to": list(to), "html": html, "text": text})

    monkeypatch.setattr(
        "student_records.services.account_verification.send_email", _fake_send_email
    )
    return sent


@pytest.fixture
def client(override_get_db):
    """Create a test client for API tests."""
    from fastapi.testclient import TestClient
    from student_records.main import app
    from student_records.db import get_db

    # Override the database dependency
    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    # Clear overrides after test
    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db_session):
    """Create the admin that calls the API."""
    user = User(
        name="Admin User",
        email="admin@example.com",
        role=Role.ADMIN,
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(admin_user):
    token = create_access_token(str(admin_user.id))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def test_student(db_session):
    """Create a student with a full profile."""
    user = User(
        name="Maria Silva",
        email="maria@example.com",
        role=Role.STUDENT,
        is_active=True,
    )
    db_session.add(user)
    db_session.flush()
    db_session.add(
        StudentProfile(
            user_id=user.id,
            gender="Female",
            phone="5550001",
            class_name="Grade 5",
            section_name="A",
            roll=7,
            guardian_name="Joana Silva",
            relation_of_guardian="Mother",
        )
    )
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def student_body():
    return {
        "name": "Carlos Souza",
        "email": "carlos@example.com",
        "gender": "Male",
        "phone": "5551234",
        "class": "Grade 6",
        "section": "B",
        "roll": 12,
        "currentAddress": "12 Main St",
        "permanentAddress": "12 Main St",
        "fatherName": "Paulo Souza",
        "fatherPhone": "5559876",
        "motherName": "Ana Souza",
        "motherPhone": "5558765",
        "guardianName": "Paulo Souza",
        "guardianPhone": "5559876",
        "relationOfGuardian": "Father",
    }
