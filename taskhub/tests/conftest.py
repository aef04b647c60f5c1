# tests/conftest.py
import uuid
import pytest
import mongomock
import sys
import os

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from taskhub import create_app, close_db


@pytest.fixture
def mongo_client():
    """In-memory document store standing in for MongoDB"""
    return mongomock.MongoClient()


@pytest.fixture
def app(mongo_client):
    app = create_app({"TESTING": True, "MONGO_DB": "taskhub_test"}, mongo_client=mongo_client)
    yield app
    close_db(app)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(mongo_client):
    return mongo_client["taskhub_test"]


@pytest.fixture
def make_user(client):
    def _make(name="Ada", email=None):
        email = email or f"{name.lower()}-{uuid.uuid4().hex[:6]}@example.com"
        r = client.post("/users", json={"name": name, "email": email})
        assert r.status_code == 201, r.get_data(as_text=True)
        return r.get_json()
    return _make


@pytest.fixture
def make_project(client, make_user):
    def _make(name="Apollo", user_id=None, **extra):
        if user_id is None:
            user_id = make_user()["id"]
        body = {"name": name, "start_date": "2024-01-01", "user_id": user_id, **extra}
        r = client.post("/projects", json=body)
        assert r.status_code == 201, r.get_data(as_text=True)
        return r.get_json()
    return _make


@pytest.fixture
def make_task(client, make_project):
    def _make(title="Write docs", project_id=None, **extra):
        if project_id is None:
            project_id = make_project()["id"]
        body = {
            "title": title,
            "status": "pending",
            "due_date": "2024-02-01",
            "project_id": project_id,
            **extra,
        }
        r = client.post("/tasks", json=body)
        assert r.status_code == 201, r.get_data(as_text=True)
        return r.get_json()
    return _make
