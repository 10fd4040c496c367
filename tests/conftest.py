import os
from datetime import date

# Settings are read at import time, so the test database must be configured first
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ENVIRONMENT"] = "development"
os.environ["DEFAULT_TIMEZONE"] = "UTC"

import pytest
from fastapi.testclient import TestClient

from lifetrack import crud
from lifetrack.api import deps
from lifetrack.core.security import create_access_token
from lifetrack.db.base import Base
from lifetrack.db.session import SessionLocal, engine
from lifetrack.main import app
from lifetrack.schemas.exercise import ExerciseCreate

AS_OF_DAY = date(2019, 5, 24)


@pytest.fixture(autouse=True)
def schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    app.dependency_overrides[deps.get_as_of_day] = lambda: AS_OF_DAY
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user(db):
    return crud.user.create(db, email="runner@example.com", full_name="Runner")


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def other_headers(db):
    other = crud.user.create(db, email="other@example.com")
    return {"Authorization": f"Bearer {create_access_token(other.id)}"}


@pytest.fixture
def make_exercise(db):
    def _make(name, exercise_type="cardio", exercise_intensity="medium", pmg="none"):
        return crud.exercise.create(
            db,
            obj_in=ExerciseCreate(
                name=name,
                exercise_type=exercise_type,
                pmg=pmg,
                exercise_intensity=exercise_intensity,
            ),
        )
    return _make


@pytest.fixture
def log_activity(client, auth_headers):
    def _log(exercise_id, **extra):
        response = client.post(
            "/api/activities/", json={"exercise_id": exercise_id, **extra}, headers=auth_headers
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _log
