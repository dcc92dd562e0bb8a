import pytest

from task_control_panel.infrastructure.observability.redaction_service import (
    authorization_scheme,
    redact_dict,
)


def test_sensitive_keys_are_redacted_recursively():
    data = {
        "port": 8080,
        "token": "secret123",
        "config": {"remote_url": "https://x", "auth_token": "abc"},
        "agents": [{"name": "a1", "api_secret": "zzz"}],
    }

    redacted = redact_dict(data)

    assert redacted["port"] == 8080
    assert redacted["token"] == "[REDACTED]"
    assert redacted["config"] == {"remote_url": "https://x", "auth_token": "[REDACTED]"}
    assert redacted["agents"] == [{"name": "a1", "api_secret": "[REDACTED]"}]


def test_input_is_not_modified():
    data = {"token": "secret123"}

    redact_dict(data)

    assert data == {"token": "secret123"}


@pytest.mark.parametrize(
    "header, expected",
    [
        (None, None),
        ("", None),
        ("Bearer abc", "Bearer"),
        ("basic dGVzdA==", "basic"),
        ("test-token", "unknown"),
        ("Bearer", "unknown"),
        ("secret123 more", "unknown"),
    ],
)
def test_authorization_scheme_never_returns_credentials(header, expected):
    assert authorization_scheme(header) == expected
