"""Shared pytest fixtures for league backend test suites."""

from collections.abc import Generator
from pathlib import Path
import os
import sys

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# The engine is built at import time, so the test database must be chosen first.
os.environ["LIGA_DATABASE_URL"] = os.getenv("LIGA_TEST_DATABASE_URL", "sqlite://")


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Provide an API test client backed by a freshly created schema."""
    from liga.db.base import engine
    from liga.db.models import Base
    from liga.main import app

    Base.metadata.drop_all(engine)
    with TestClient(app) as test_client:
        yield test_client
