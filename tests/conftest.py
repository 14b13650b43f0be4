"""Shared fixtures for the ARES backend test suite."""

import pytest
from fastapi.testclient import TestClient

from main import app
from models.waitlist import WaitlistEntry
from services import SinkError, WaitlistSink, get_waitlist_sink
from services.sinks import FileSink


# ---------------------------------------------------------------------------
# Sample analysis inputs
# ---------------------------------------------------------------------------

PRIVILEGED_POD = """\
apiVersion: v1
kind: Pod
metadata:
  name: auth-service
spec:
  containers:
    - name: auth
      image: auth:1.4
      securityContext:
        privileged: true
"""

LEAKED_PASSWORD = """\
database:
  host: db.internal
  user: admin
  password: password123
"""

BENIGN_LOG = """\
2026-01-12 10:01:44 INFO  request served in 12ms
2026-01-12 10:01:45 INFO  health check ok
"""


@pytest.fixture
def privileged_pod():
    return PRIVILEGED_POD


@pytest.fixture
def leaked_password():
    return LEAKED_PASSWORD


@pytest.fixture
def benign_log():
    return BENIGN_LOG


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class FailingSink(WaitlistSink):
    name = "failing"

    async def append(self, entry: WaitlistEntry) -> None:
        raise SinkError("sheet unavailable")

    async def list_entries(self):
        raise SinkError("sheet unavailable")


@pytest.fixture
def file_sink(tmp_path):
    return FileSink(tmp_path / "waitlist.txt")


@pytest.fixture
def failing_sink():
    return FailingSink()


@pytest.fixture
def client(file_sink):
    app.dependency_overrides[get_waitlist_sink] = lambda: file_sink
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(failing_sink):
    app.dependency_overrides[get_waitlist_sink] = lambda: failing_sink
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
