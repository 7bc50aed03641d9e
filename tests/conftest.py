from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from sla_service.main import app
from sla_service.sla.application import SLAService
from sla_service.sla.domain import SLACalculator
from sla_service.sla.infrastructure import YAMLConfigProvider
from sla_service.sla.interfaces import get_sla_service


def utc(year, month, day, hour=0, minute=0):
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


@pytest.fixture
def calculator():
    return SLACalculator()


@pytest.fixture
def sla_service(tmp_path):
    # Missing file -> built-in defaults
    return SLAService(YAMLConfigProvider(tmp_path / "missing.yaml"))


@pytest.fixture
def client(sla_service):
    app.dependency_overrides[get_sla_service] = lambda: sla_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
