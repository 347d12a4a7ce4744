"""
Pytest configuration and fixtures.

Every test gets a fresh in-memory SQLite database (StaticPool keeps the one
connection alive across the TestClient threadpool) and a FastAPI client
whose ``get_db`` / ``get_password_hasher`` dependencies point at it.
"""

import os
import sys
from pathlib import Path

# Settings are read at import time: point them at SQLite before any app
# module is imported, and keep hashing cheap.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"

project_root = Path(__file__).parent.parent
backend_root = project_root / "backend"
if str(backend_root) not in sys.path:
    sys.path.insert(0, str(backend_root))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from database import Base, get_db  # noqa: E402
from core.security import PasswordHasher, get_password_hasher  # noqa: E402
import models.user  # noqa: F401, E402
import models.ghost_net  # noqa: F401, E402
import models.audit_log  # noqa: F401, E402


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=1000)


@pytest.fixture
def client(db_session, hasher):
    from main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
