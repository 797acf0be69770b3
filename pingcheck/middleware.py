# ============================================================================
# PING MIDDLEWARE
# ============================================================================
# STATUS: Boundary - ASGI middleware
# PURPOSE: Serve the ping document on one path, pass everything else through
# CREATED: 19 OCT 2026
# ============================================================================
"""
Ping Middleware

ASGI middleware that answers a single path (default /_ping) with a JSON
health document and delegates every other request to the wrapped app.

Response Codes:
    200 - Every check passed          {"now": "...", "status": "ok", ...}
    503 - At least one check failed   {"now": "...", "status": "failures",
                                       "failures": [...], "timeouts": [...]}
    500 - The checks could not be run at all (e.g. overall deadline)
                                      {"status": "failures", "now": "..."}

Usage:
    def configure(ping):
        @ping.check("db")
        async def db():
            return await pool.fetchval("SELECT 'up'")

        ping.register("queue", queue.ping, timeout=2.0)

    app = FastAPI()
    app.add_middleware(PingMiddleware, setup=configure, max_seconds=10)
"""

import json
import time
import uuid
from typing import Callable, Optional

from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from core.config import PingDefaults, get_defaults
from core.contracts import CONTENT_TYPE
from core.logging import ComponentType, get_logger, log_checkpoint, log_context
from pingcheck.aggregator import aggregate
from pingcheck.classifier import DEFAULT_CLASSIFIER, Classifier
from pingcheck.core import ResultDocument
from pingcheck.executor import CheckExecutor
from pingcheck.registry import CheckRegistry

logger = get_logger(__name__, ComponentType.MIDDLEWARE)

# Pre-encoded pieces of the fallback response
_FALLBACK_STATUS = 500
_FALLBACK_HEAD = b'{"status":"failures","now":"'
_FALLBACK_TAIL = b'"}'
_FALLBACK_CONTENT_TYPE = CONTENT_TYPE.encode("latin-1")


class PingMiddleware:
    """
    Health-check endpoint wrapped around an ASGI application.

    Args:
        app: Downstream ASGI application
        path: Path answered by the middleware (default from PING_PATH)
        max_seconds: Overall deadline for all checks (default from PING_MAX_SECONDS)
        setup: Called once with the CheckRegistry to register checks
        classifier: Custom failure/timeout predicates
        defaults: Configuration defaults (environment-based if None)
    """

    def __init__(
        self,
        app: ASGIApp,
        path: Optional[str] = None,
        max_seconds: Optional[float] = None,
        setup: Optional[Callable[[CheckRegistry], None]] = None,
        classifier: Optional[Classifier] = None,
        defaults: Optional[PingDefaults] = None,
    ):
        defaults = defaults or get_defaults()

        self.app = app
        self.path = path or defaults.path
        self.classifier = classifier or DEFAULT_CLASSIFIER
        self.registry = CheckRegistry(default_timeout=defaults.check_timeout)

        if setup is not None:
            setup(self.registry)
        self.registry.freeze()

        self.executor = CheckExecutor(
            self.registry,
            max_seconds=defaults.max_seconds if max_seconds is None else max_seconds,
        )
        logger.info(
            f"Ping endpoint at {self.path} "
            f"({len(self.registry)} checks, max {self.executor.max_seconds}s)"
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or self._request_path(scope) != self.path:
            await self.app(scope, receive, send)
            return

        request_id = self._request_id(scope)
        with log_context(request_id=request_id, path=self.path, operation="ping"):
            try:
                response = await self._render()
            except Exception:
                logger.exception("Ping checks could not be run, sending fallback")
                await self._send_fallback(send)
                return

            await response(scope, receive, send)

    async def evaluate(self) -> ResultDocument:
        """Run every check once and aggregate the outcomes."""
        outcomes = await self.executor.execute_all()
        return aggregate(outcomes, self.classifier)

    async def _render(self) -> Response:
        document = await self.evaluate()
        body = json.dumps(document.to_dict(), separators=(",", ":"))

        log_checkpoint(
            "ping_completed",
            {
                "status": document.status.value,
                "failures": document.failures,
                "timeouts": document.timeouts,
            },
        )
        return Response(
            content=body,
            status_code=document.http_status,
            media_type=CONTENT_TYPE,
        )

    @staticmethod
    async def _send_fallback(send: Send) -> None:
        body = _FALLBACK_HEAD + str(int(time.time())).encode("ascii") + _FALLBACK_TAIL
        await send({
            "type": "http.response.start",
            "status": _FALLBACK_STATUS,
            "headers": [
                (b"content-type", _FALLBACK_CONTENT_TYPE),
                (b"content-length", str(len(body)).encode("ascii")),
            ],
        })
        await send({"type": "http.response.body", "body": body})

    @staticmethod
    def _request_path(scope: Scope) -> str:
        """Request path relative to the mount point."""
        path = scope.get("path", "")
        root_path = scope.get("root_path", "")
        if root_path and path.startswith(root_path):
            path = path[len(root_path):] or "/"
        return path

    @staticmethod
    def _request_id(scope: Scope) -> str:
        for key, value in scope.get("headers", []):
            if key == b"x-request-id":
                return value.decode("latin-1")
        return uuid.uuid4().hex[:12]


__all__ = [
    "PingMiddleware",
]
