"""Redaction helpers that keep TMDB credentials out of logs."""

from __future__ import annotations

import re
from typing import Mapping

_QUERY_SECRET_RE = re.compile(r"(?i)(api_key|access_token|session_id|token)=([^&\s]+)")
_BEARER_RE = re.compile(r"(?i)(bearer\s+)([A-Za-z0-9._~+/=-]+)")
_SENSITIVE_HEADERS = {"authorization", "cookie", "set-cookie"}


def redact_secrets(text: str) -> str:
    """Redact bearer tokens and secret query parameters from a log string."""
    if not text:
        return text
    redacted = _QUERY_SECRET_RE.sub(r"\1=***", text)
    redacted = _BEARER_RE.sub(r"\1***", redacted)
    return redacted


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of request headers that is safe to log."""
    return {
        name: ("***" if name.lower() in _SENSITIVE_HEADERS else value)
        for name, value in headers.items()
    }
