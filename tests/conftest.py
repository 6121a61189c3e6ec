from __future__ import annotations

import os
from datetime import datetime, timezone

# Settings are resolved at import time; pin the test profile first.
os.environ.setdefault("ENV", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from naijatax.api.main import create_app  # noqa: E402
from naijatax.services.history import SessionState, SessionStore  # noqa: E402


@pytest.fixture
def fixed_now():
    """A stable timestamp so CSV/PDF output can be asserted exactly."""
    return datetime(2025, 1, 15, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def session_store():
    """A fresh English session with empty history."""
    return SessionStore(SessionState(language="en"))


@pytest.fixture
def client():  # noqa: D401 - simple factory fixture
    """Provide a TestClient bound to a fresh app (and so a fresh session)."""
    return TestClient(create_app())
