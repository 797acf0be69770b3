# ============================================================================
# PINGCHECK - DEMO APPLICATION
# ============================================================================
# STATUS: Entry point - FastAPI application wrapped in PingMiddleware
# PURPOSE: Runnable example of the ping endpoint
# CREATED: 19 OCT 2026
# ============================================================================
"""
Pingcheck Demo Application

FastAPI application with PingMiddleware mounted:
1. GET /_ping answers with the health document
2. Every other path is served by the FastAPI app

Environment:
    PING_PATH, PING_MAX_SECONDS, PING_CHECK_TIMEOUT  middleware defaults
    PING_UPSTREAM_URL                                optional upstream HTTP check
    LOG_LEVEL, LOG_FORMAT                            logging

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

import os

from fastapi import FastAPI

from __version__ import __version__, BUILD_DATE
from core.logging import configure_logging, get_logger
from pingcheck import CheckRegistry, PingMiddleware
from pingcheck.checks import http_check, memory_check, process_check

configure_logging(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    json_output=os.environ.get("LOG_FORMAT", "").lower() == "json",
)
logger = get_logger(__name__)


def configure_checks(ping: CheckRegistry) -> None:
    """Register the demo checks."""
    ping.register(None, process_check())
    ping.register("memory", memory_check(max_percent=95.0))

    upstream = os.environ.get("PING_UPSTREAM_URL")
    if upstream:
        ping.register("upstream", http_check(upstream, timeout=2.0), timeout=2.5)


app = FastAPI(
    title="Pingcheck Demo",
    version=__version__,
)

app.add_middleware(PingMiddleware, setup=configure_checks)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "pingcheck-demo",
        "version": __version__,
        "build_date": BUILD_DATE,
        "ping": os.environ.get("PING_PATH", "/_ping"),
    }


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))

    logger.info(f"Starting pingcheck demo v{__version__} on {host}:{port}")
    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=os.environ.get("RELOAD", "false").lower() == "true",
    )
