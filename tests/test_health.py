import pytest
from fastapi.testclient import TestClient

from invoicemath.main import create_app


@pytest.fixture(scope="module")
def client():
    app = create_app()
    with TestClient(app) as client:
        yield client


def test_healthz(client):
    response = client.get("/v1/healthz")
    assert response.status_code == 200
    assert response.json()["ok"] is True


def test_version(client):
    response = client.get("/v1/version")
    assert response.status_code == 200
    data = response.json()
    assert data["locale"] == "en-IN"
    assert data["currency"] == "INR"


def test_root_lists_links(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["links"]["health"].endswith("/v1/healthz")


def test_request_id_is_echoed(client):
    response = client.get("/v1/healthz", headers={"X-Request-Id": "req-123"})
    assert response.headers["X-Request-Id"] == "req-123"
