"""Scrub request bodies before they reach the debug log."""

import json
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "password",
    "token",
    "api_token",
    "access_token",
    "refresh_token",
    "oauth_token",
    "client_secret",
    "secret",
    "authorization",
    "remote_login_token",
})

REDACTED_VALUE = "[REDACTED]"
LOG_BODY_MAX_BYTES = 4 * 1024


def redact_payload(payload: Any) -> Any:
    """Return a copy of a JSON body with sensitive values replaced.

    The original payload is never mutated. Keys are matched case-insensitively.
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            if isinstance(key, str) and key.lower() in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    if isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    return payload


def loggable_body(payload: Any, *, max_bytes: int = LOG_BODY_MAX_BYTES) -> str:
    """Redact and serialize a body, collapsing it to a size notice when too large."""
    text = json.dumps(redact_payload(payload), default=str)
    size = len(text.encode("utf-8"))
    if size <= max_bytes:
        return text
    return f"<{size} bytes, truncated>"
