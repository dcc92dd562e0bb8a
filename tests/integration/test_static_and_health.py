import pytest
from fastapi.testclient import TestClient

from task_control_panel.infrastructure.entrypoints.api.app_factory import create_app


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))


def test_root_redirects_to_ui(client):
    response = client.get("/", follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == "/static/index.html"


def test_ui_is_served_without_auth(client):
    response = client.get("/static/index.html")

    assert response.status_code == 200
    assert "Task Control Panel" in response.text


def test_health_reports_task_count(client, auth_headers):
    client.post("/api/tasks", json=[{"id": "a"}, {"id": "b"}], headers=auth_headers)

    body = client.get("/health").json()

    assert body["status"] == "ok"
    assert body["service"] == "task-control-panel"
    assert body["tasks"] == 2


def test_metrics_count_mutations(client, auth_headers):
    client.post("/api/tasks/add", json={"id": "a"}, headers=auth_headers)

    response = client.get("/metrics")

    assert response.status_code == 200
    assert 'task_panel_mutations_total{operation="add"}' in response.text
    assert "task_panel_tasks_stored" in response.text


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["x-correlation-id"] == "abc-123"
