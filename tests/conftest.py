"""
Shared fixtures for the test suite.

Keeps CORDELIA_* variables from the developer's shell (or a local .env)
out of tests, and provides a TestClient over the real FastAPI app.
"""

import pytest
from fastapi.testclient import TestClient

from cordelia.api.main import app
from cordelia.config import ENV_BATCH_ENCODING, ENV_LOG_LEVEL, ENV_MAX_KEYS


@pytest.fixture(autouse=True)
def _clean_cordelia_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove CORDELIA_* settings so every test starts from defaults."""
    for var in (ENV_LOG_LEVEL, ENV_MAX_KEYS, ENV_BATCH_ENCODING):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture()
def client() -> TestClient:
    """Synchronous TestClient against the real app; no mocks needed."""
    return TestClient(app)
