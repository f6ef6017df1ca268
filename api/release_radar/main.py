"""FastAPI application entrypoint and health reporting utilities."""

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from release_radar.api.router import api_router
from release_radar.core.config import settings
from release_radar.ingestion.observability import fetch_monitor

LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"


def _configure_logging() -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, force=True)


_configure_logging()

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router, prefix=settings.api_prefix)


def _summarize_fetches(snapshot: dict[str, Any]) -> dict[str, Any]:
    """Condense fetch monitor state into health-friendly telemetry.

    An operation whose most recent call failed marks the service degraded.
    """
    issues: list[dict[str, Any]] = []
    sources: dict[str, Any] = {}
    for source, operations in snapshot.items():
        state = "ok"
        for operation, metrics in operations.items():
            last_error = metrics.get("last_error")
            if last_error:
                issues.append({"source": source, "operation": operation, "error": last_error})
                state = "degraded"
        sources[source] = {"state": state, "operations": operations}
    return {"sources": sources, "issues": issues}


@app.get("/health", tags=["internal"])
@app.get(f"{settings.api_prefix}/health", tags=["internal"])
async def health() -> dict[str, Any]:
    """Return health status with upstream fetch telemetry."""
    snapshot = await fetch_monitor.snapshot()
    telemetry = _summarize_fetches(snapshot)
    status = "ok" if not telemetry["issues"] else "degraded"
    return {
        "status": status,
        "tmdb_credential_configured": bool(settings.tmdb_bearer_token),
        "fetches": telemetry,
    }


def run() -> None:
    import uvicorn

    uvicorn.run("release_radar.main:app", host="0.0.0.0", port=8000, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
