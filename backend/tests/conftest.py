import os
import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the application's default engine in memory and logs on the console
os.environ.setdefault("TODO_API_DATABASE_URL", "sqlite://")
os.environ.setdefault("TODO_API_LOG_DIR", "")

# Now import after path is set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, enable_sqlite_pragmas, get_db
import models  # noqa: F401
from dependencies import get_password_hasher
from dtos.request import UserRegistrationRequest
from services.password_hasher import PasswordHasher
from services.todo_list_service import ToDoListService
from services.user_service import UserService

ALICE_PASSWORD = "alice-secret-1"
BOB_PASSWORD = "bob-secret-22"


@pytest.fixture
def engine():
    """Create in-memory database for testing"""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    enable_sqlite_pragmas(engine)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def password_hasher():
    """Minimum bcrypt work factor keeps the suite fast"""
    return PasswordHasher(rounds=4)


@pytest.fixture
def user_service(db_session, password_hasher):
    return UserService(db_session, password_hasher)


@pytest.fixture
def todo_list_service(db_session):
    return ToDoListService(db_session)


@pytest.fixture
def alice(user_service):
    return user_service.create_user(
        UserRegistrationRequest(username="alice", password=ALICE_PASSWORD, email="alice@example.com")
    )


@pytest.fixture
def bob(user_service):
    return user_service.create_user(
        UserRegistrationRequest(username="bob", password=BOB_PASSWORD)
    )


@pytest.fixture
def client(engine, password_hasher):
    """TestClient bound to the per-test database"""
    from main import app

    TestingSessionLocal = sessionmaker(bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register a user over HTTP and return its basic auth tuple"""
    def _register(username: str, password: str):
        response = client.post(
            "/api/v1/user/register",
            json={"username": username, "password": password},
        )
        assert response.status_code == 201, response.text
        return (username, password)

    return _register


@pytest.fixture
def alice_auth(register):
    return register("alice", ALICE_PASSWORD)


@pytest.fixture
def bob_auth(register):
    return register("bob", BOB_PASSWORD)
