import logging
from concurrent.futures import ThreadPoolExecutor
from types import SimpleNamespace

from fastapi.testclient import TestClient

from sla_service.main import app
from sla_service.sla.interfaces import get_sla_service


MIDDLEWARE_LOGGER = "sla_service.shared.api.middleware"


def test_calculate_sla_example(client):
    resp = client.post(
        "/calculate-sla",
        json={"create_time": "2024-03-04T08:00:00Z", "sla_ref": "A"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data == {
        "sla_50_percentage": 100.0,
        "sla_75_percentage": 100.0,
        "sla_100_percentage": 100.0,
        "details": {"04_Mar_24": 8, "05_Mar_24": -1},
    }
    assert list(data["details"]) == ["04_Mar_24", "05_Mar_24"]


def test_calculate_sla_with_offset(client):
    resp = client.post(
        "/calculate-sla",
        json={"create_time": "2024-03-08T12:00:00+02:00", "sla_ref": "C"},
    )
    assert resp.status_code == 200
    details = resp.json()["details"]
    assert "09_Mar_24" not in details
    assert "10_Mar_24" not in details
    assert details["08_Mar_24"] == 7


def test_calculate_sla_unknown_tier(client):
    resp = client.post(
        "/calculate-sla",
        json={"create_time": "2024-03-04T08:00:00Z", "sla_ref": "Z"},
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "sla_50_percentage": 0.0,
        "sla_75_percentage": 0.0,
        "sla_100_percentage": 0.0,
        "details": {},
    }


def test_calculate_sla_missing_field(client):
    resp = client.post("/calculate-sla", json={"create_time": "2024-03-04T08:00:00Z"})
    assert resp.status_code == 400
    body = resp.json()
    assert "sla_ref" in body["error"]
    assert body["detail"]


def test_calculate_sla_bad_timestamp(client):
    resp = client.post(
        "/calculate-sla",
        json={"create_time": "yesterday", "sla_ref": "A"},
    )
    assert resp.status_code == 400
    assert "create_time" in resp.json()["error"]


def test_calculate_sla_malformed_json(client):
    resp = client.post(
        "/calculate-sla",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_correlation_id_is_echoed(client):
    resp = client.post(
        "/calculate-sla",
        json={"create_time": "2024-03-04T08:00:00Z", "sla_ref": "A"},
        headers={"X-Correlation-ID": "req-123"},
    )
    assert resp.headers["X-Correlation-ID"] == "req-123"
    assert "X-Response-Time" in resp.headers


def test_list_tiers(client):
    resp = client.get("/sla/tiers")
    assert resp.status_code == 200
    data = resp.json()
    assert data["tiers"] == {"A": 24, "B": 72, "C": 144}
    assert data["calendar"]["work_start_hour"] == 9
    assert data["calendar"]["weekend_days"] == [5, 6]


def test_health_after_startup():
    with TestClient(app) as client:
        resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["checks"]["sla_config"].startswith("loaded")


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["service"] == "SLA Calculator"


def test_request_logs_carry_correlation_id(client, caplog):
    with caplog.at_level(logging.INFO, logger=MIDDLEWARE_LOGGER):
        client.post(
            "/calculate-sla",
            json={"create_time": "2024-03-04T08:00:00Z", "sla_ref": "A"},
            headers={"X-Correlation-ID": "req-xyz"},
        )

    request_logs = [
        r for r in caplog.records
        if r.name == MIDDLEWARE_LOGGER and r.getMessage().startswith("Request ")
    ]
    assert [r.getMessage() for r in request_logs] == ["Request started", "Request completed"]
    assert all(r.correlation_id == "req-xyz" for r in request_logs)


def test_calculate_sla_far_future_is_client_error(client):
    resp = client.post(
        "/calculate-sla",
        json={"create_time": "9999-12-31T00:00:00Z", "sla_ref": "C"},
    )
    assert resp.status_code == 400
    body = resp.json()
    assert "create_time" in body["error"]
    assert body["details"]["sla_ref"] == "C"


def test_calculate_sla_far_past_is_client_error(client):
    resp = client.post(
        "/calculate-sla",
        json={"create_time": "0001-01-01T00:00:00+01:00", "sla_ref": "A"},
    )
    assert resp.status_code == 400
    assert "create_time" in resp.json()["error"]


def test_service_built_lazily_once_without_lifespan():
    if hasattr(app.state, "sla_service"):
        del app.state.sla_service
    client = TestClient(app)

    assert client.get("/sla/tiers").status_code == 200
    first = app.state.sla_service
    assert client.get("/sla/tiers").status_code == 200
    assert app.state.sla_service is first


def test_concurrent_first_requests_share_one_service():
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace()))
    with ThreadPoolExecutor(max_workers=8) as pool:
        services = list(pool.map(lambda _: get_sla_service(request), range(16)))

    assert all(service is services[0] for service in services)
    assert request.app.state.sla_service is services[0]
