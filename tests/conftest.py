import os
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so tests can import the 'timelog' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Settings are read at import time: point them at a throwaway database and keep
# the upstream client unconfigured so lookups fall back without network access
os.environ["DATABASE_URL"] = f"sqlite:///{ROOT / 'test_timelog.db'}"
os.environ["UPSTREAM_CLIENT_ID"] = ""
os.environ["UPSTREAM_CLIENT_SECRET"] = ""

from timelog.db import Base, engine, SessionLocal  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    # Drop all and re-create so the test DB matches the current models exactly
    Base.metadata.drop_all(bind=engine)
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
    from fastapi.testclient import TestClient
    from timelog.main import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def project(client):
    """An imported project; with no upstream credentials it gets the mock pad (well-1..well-5)"""
    r = client.post("/api/v1/projects/import", json={"project_number": "1001"})
    assert r.status_code == 201
    return r.json()
