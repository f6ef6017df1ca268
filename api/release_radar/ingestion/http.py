from __future__ import annotations

import logging
from typing import Any

import httpx

from release_radar.core.config import settings
from release_radar.utils.redaction import redact_headers, redact_secrets

logger = logging.getLogger("release_radar.ingestion.http")


class AcquisitionError(Exception):
    """Base class for failures reported by the TMDB fetchers."""
    kind = "acquisition_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingCredentialError(AcquisitionError):
    kind = "missing_credential"

    def __init__(self, message: str = "Missing TMDB token. Set TMDB_BEARER_TOKEN in your environment.") -> None:
        super().__init__(message)


class RequestFailedError(AcquisitionError):
    kind = "request_failed"

    def __init__(self, status_code: int) -> None:
        super().__init__(f"TMDB request failed ({status_code}). Check your token and quota.")
        self.status_code = status_code


class TransportError(AcquisitionError):
    kind = "transport_error"


async def fetch_json(url: str, *, headers: dict[str, str] | None = None, params: dict | None = None) -> Any:
    """GET a JSON document once, mapping every failure onto the acquisition errors."""
    logger.debug("GET %s params=%s headers=%s", url, params, redact_headers(headers or {}))
    try:
        async with httpx.AsyncClient(timeout=settings.http_timeout_seconds) as client:
            response = await client.get(url, headers=headers, params=params)
    except httpx.HTTPError as exc:
        raise TransportError(redact_secrets(str(exc)) or exc.__class__.__name__) from exc
    if not response.is_success:
        raise RequestFailedError(response.status_code)
    try:
        return response.json()
    except ValueError as exc:
        raise TransportError(f"Malformed TMDB response body: {exc}") from exc
