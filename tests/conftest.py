import os

os.environ.setdefault("PLATFORM", "dev")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("POLKA_KEY", "test-polka-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker

from chirpy.database import Base, get_db
from chirpy.main import app
from chirpy.models import User
from chirpy.utils.security import hash_password

DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(DATABASE_URL,
                       connect_args={
                           "check_same_thread": False,
                       },
                       poolclass=StaticPool)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False,
                                   expire_on_commit=False, bind=engine)

SEED_EMAIL = "user@example.com"
SEED_PASSWORD = "password"


def override_get_db():
    database = TestingSessionLocal()
    try:
        yield database
    finally:
        database.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def setup_and_teardown():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    session.add(User(email=SEED_EMAIL, hashed_password=hash_password(SEED_PASSWORD)))
    session.commit()
    session.close()
    app.state.hits.reset()

    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seed_user(db):
    return db.query(User).filter(User.email == SEED_EMAIL).one()


@pytest.fixture
def logged_in_user(client):
    response = client.post("/api/login", json={"email": SEED_EMAIL, "password": SEED_PASSWORD})
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def auth_headers(logged_in_user):
    return {"Authorization": f"Bearer {logged_in_user['token']}"}


def register_and_login(client, email: str, password: str = "hunter2") -> dict:
    response = client.post("/api/users", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    response = client.post("/api/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()
