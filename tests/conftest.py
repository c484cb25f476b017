# /tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base_class import Base
from app.db.database import get_db, init_db
from app.main import app


@pytest.fixture
def session_factory():
    """
    A fresh in-memory SQLite database for EACH test function. StaticPool
    keeps the single connection alive so every session sees the same data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield TestingSessionLocal
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(session_factory):
    """A TestClient whose `get_db` dependency is redirected to the test database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager, so the lifespan (and its real database) never runs.
    yield TestClient(app)
    app.dependency_overrides.clear()


# --- Seed helpers ---

@pytest.fixture
def make_department(client):
    def _make(code="CSE", name="Computer Science"):
        response = client.post("/api/departments", json={"code": code, "name": name})
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_batch(client):
    def _make(name="2022-2026", startYear=2022, endYear=2026):
        response = client.post("/api/batches", json={"name": name, "startYear": startYear, "endYear": endYear})
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_class(client):
    def _make(name="A", departmentId=None, batchId=None):
        response = client.post("/api/classes", json={"name": name, "departmentId": departmentId, "batchId": batchId})
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_faculty(client):
    def _make(name="Anna Joseph", email="anna@college.edu", password="s3cret-pass", departmentId=None):
        response = client.post("/api/faculty", json={
            "name": name, "email": email, "password": password, "departmentId": departmentId
        })
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_course(client):
    def _make(code="CSE101", title="Programming Fundamentals", departmentId=None, **extra):
        payload = {"code": code, "title": title, "departmentId": departmentId, **extra}
        response = client.post("/api/courses", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_student(client):
    def _make(classId, name="John Smith", rollNo="R-001", email="john@college.edu", guardianMobile=None):
        response = client.post("/api/students", json={
            "name": name, "rollNo": rollNo, "email": email,
            "guardianMobile": guardianMobile, "classId": classId
        })
        assert response.status_code == 201, response.text
        return response.json()
    return _make
