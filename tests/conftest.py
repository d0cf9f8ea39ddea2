import pytest
from fastapi.testclient import TestClient

from student_api.config import settings
from student_api.database import get_connection
from student_api.main import app
from student_api.seed import seed_database


@pytest.fixture
def db_file(tmp_path, monkeypatch):
    """Point the app at a fresh database file for each test."""
    path = str(tmp_path / "students.db")
    monkeypatch.setattr(settings, "database_file", path)
    return path


@pytest.fixture
def client(db_file):
    # entering the client runs the lifespan: engine + tables
    with TestClient(app) as client:
        yield client


@pytest.fixture
def seeded_client(client):
    with get_connection(app.state.db_engine) as conn:
        seed_database(conn=conn)
    return client


@pytest.fixture
def student():
    return {"NAME": "Chiranjeevi", "TITLE": "Gorantla", "CLASS": "V", "SECTION": "C", "ROLLID": 47}
