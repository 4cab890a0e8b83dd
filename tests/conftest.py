import os
import sys
import tempfile
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

# Base SQLite de test, à définir AVANT d'importer app
TEST_DB_PATH = Path(tempfile.gettempdir()) / "todotracker_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"

import pytest
from fastapi.testclient import TestClient

from app.core.database import Base, engine, SessionLocal
from app.main import app
from app.view.api import TodoApiClient
from app.view.task_view import TaskView
from fakes import Confirm


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Client de test FastAPI"""
    return TestClient(app)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    db = SessionLocal()
    yield db
    db.close()


@pytest.fixture
def confirm():
    return Confirm()


@pytest.fixture
def api(client):
    """Client API de la vue, branché sur le TestClient"""
    return TodoApiClient(base_url="", session=client)


@pytest.fixture
def view(api, confirm):
    # Un seul worker: le TestClient et SQLite restent sur un thread à la fois
    view = TaskView(api, confirm=confirm, max_workers=1)
    view.load()
    return view
