"""Keeps the shared API token and agent auth tokens out of log output."""

from typing import Any, Optional

REDACTED = "[REDACTED]"

# Substrings of setting/task keys whose values are secrets
SENSITIVE_KEYS = ("token", "secret", "password", "authorization")

KNOWN_AUTH_SCHEMES = {"basic", "bearer", "digest", "token"}


def redact_dict(obj: dict[str, Any]) -> dict[str, Any]:
    """
    Copy of obj with every sensitive key masked, including in nested dicts and lists.
    Used for the boot diagnostics settings dump.
    """
    return {
        key: REDACTED if _is_sensitive(key) else _redact_value(value)
        for key, value in obj.items()
    }


def authorization_scheme(header: Optional[str]) -> Optional[str]:
    """
    The scheme word of an Authorization header, never its credentials.
    Anything that does not start with a known scheme is reported as "unknown",
    since a bare header may be the secret itself.
    """
    if not header:
        return None
    scheme, _, credentials = header.partition(" ")
    if credentials and scheme.lower() in KNOWN_AUTH_SCHEMES:
        return scheme
    return "unknown"


def _is_sensitive(key: Any) -> bool:
    key_lower = str(key).lower()
    return any(marker in key_lower for marker in SENSITIVE_KEYS)


def _redact_value(value: Any) -> Any:
    if isinstance(value, dict):
        return redact_dict(value)
    if isinstance(value, list):
        return [_redact_value(item) for item in value]
    return value
