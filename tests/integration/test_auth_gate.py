from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from task_control_panel.infrastructure.entrypoints.api import security
from task_control_panel.infrastructure.entrypoints.api.app_factory import create_app

ROUTES = [
    ("GET", "/api/tasks", None),
    ("POST", "/api/tasks", [{"id": "intruder"}]),
    ("POST", "/api/tasks/add", {"id": "intruder"}),
    ("PUT", "/api/tasks/a", {"id": "intruder"}),
    ("DELETE", "/api/tasks/a", None),
]

BAD_HEADERS = [
    {},
    {"Authorization": "Bearer wrong-token"},
    {"Authorization": "test-token"},
    {"Authorization": "bearer test-token"},
    {"Authorization": "Basic dGVzdC10b2tlbg=="},
]


@pytest.fixture
def client(settings, auth_headers):
    client = TestClient(create_app(settings))
    client.post("/api/tasks", json=[{"id": "a"}], headers=auth_headers)
    return client


@pytest.mark.parametrize("method, path, body", ROUTES)
@pytest.mark.parametrize("headers", BAD_HEADERS)
def test_unauthorized_requests_are_rejected(client, settings, auth_headers, method, path, body, headers):
    before = settings.tasks_file.read_bytes()

    response = client.request(method, path, json=body, headers=headers)

    assert response.status_code == 401
    assert response.json() == {"error": "unauthorized"}
    assert client.get("/api/tasks", headers=auth_headers).json() == [
        {"id": "a", "name": "", "schedule": "", "type": ""}
    ]
    assert settings.tasks_file.read_bytes() == before


def test_auth_is_checked_before_the_body(client):
    response = client.post(
        "/api/tasks/add",
        content="{broken",
        headers={"Authorization": "Bearer wrong", "Content-Type": "application/json"},
    )

    assert response.status_code == 401
    assert response.json() == {"error": "unauthorized"}


@pytest.mark.parametrize(
    "header, scheme",
    [
        ("test-token", "unknown"),
        ("Token test-token", "Token"),
        ("bearer test-token", "bearer"),
    ],
)
def test_rejected_header_is_not_logged(client, monkeypatch, header, scheme):
    fake_logger = MagicMock()
    monkeypatch.setattr(security, "logger", fake_logger)

    response = client.get("/api/tasks", headers={"Authorization": header})

    assert response.status_code == 401
    fake_logger.warning.assert_called_once()
    assert fake_logger.warning.call_args.kwargs["authorization_scheme"] == scheme
    assert "test-token" not in repr(fake_logger.mock_calls)
