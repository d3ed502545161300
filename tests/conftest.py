"""
Shared fixtures.

Environment is set before any app module is imported: settings are read
once at import time and the engine binds to DATABASE_URL.
"""
import os
import tempfile
from pathlib import Path

_TEST_DIR = Path(tempfile.mkdtemp(prefix="ir-translator-tests-"))
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TEST_DIR / 'test.db'}")
os.environ.setdefault("LOG_LEVEL", "warning")

import pytest
from jose import jwt

from agent.term_detection.models import Term
from app.config import settings
from app.core.term_cache import term_cache
from app.database import SessionLocal, init_db
from app.models.term import CustomTerm


def make_token(username: str = "tanaka", role: str = "user", **claims) -> str:
    payload = {"username": username, "role": role, "displayName": username, **claims}
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHMS[0])


@pytest.fixture
def db_session():
    """Fresh custom_terms table and empty cache for each test"""
    init_db()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.query(CustomTerm).delete()
        session.commit()
        session.close()
        term_cache.clear()


@pytest.fixture
def client(db_session):
    from fastapi.testclient import TestClient
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {make_token('tanaka', 'user')}"}


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {make_token('admin', 'admin')}"}


@pytest.fixture
def sample_dictionary():
    return (
        Term(en="state", ja="国家", category="theory"),
        Term(en="nation state", ja="国民国家", category="theory"),
        Term(en="power", ja="権力", category="theory"),
        Term(en="balance of power", ja="勢力均衡", category="theory", reference="Waltz (1979)"),
        Term(en="security dilemma", ja="安全保障のジレンマ", category="security", note="Jervis"),
    )


@pytest.fixture
def token_factory():
    return make_token
