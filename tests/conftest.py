import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from recipebook.auth.deps import get_db
from recipebook.db.session import Base
from recipebook.main import app
from recipebook.models import recipe, user  # noqa: F401  (register tables)
from recipebook.repositories.recipe_repository import RecipeRepository
from recipebook.repositories.user_repository import UserRepository
from recipebook.schemas.recipe import RecipeIn
from recipebook.services.recipes import RecipeService
from recipebook.services.users import UserService

# StaticPool keeps a single in-memory database shared across sessions
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_service(db):
    return UserService(UserRepository(db))


@pytest.fixture
def recipe_service(db):
    return RecipeService(RecipeRepository(db))


@pytest.fixture
def make_user(db, user_service):
    def _make(email="a@x.com", password="password1"):
        user_service.register(email, password)
        return UserRepository(db).get_by_email(email)
    return _make


def recipe_payload(**overrides):
    data = {
        "name": "Soup",
        "category": "Dinner",
        "description": "d",
        "ingredients": ["salt"],
        "directions": ["boil"],
    }
    data.update(overrides)
    return data


@pytest.fixture
def recipe_in():
    def _make(**overrides):
        return RecipeIn(**recipe_payload(**overrides))
    return _make
