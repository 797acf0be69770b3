# ============================================================================
# PINGCHECK MODULE
# ============================================================================
# STATUS: Package root - Health-check middleware
# PURPOSE: Machine-readable /_ping endpoint for ASGI applications
# CREATED: 19 OCT 2026
# ============================================================================
"""
Pingcheck

Health-check aggregator exposed as ASGI middleware:
- Checks are registered once, by name, each with its own timeout
- Every request to the ping path runs all checks concurrently
- The whole batch is bounded by an overall deadline
- Results render as {"now", "status", <name>: <value>, "failures", "timeouts"}

Architecture:
- Check / CheckRegistry: registration (add-or-replace, one unnamed slot)
- CheckExecutor: concurrent execution with per-check and overall deadlines
- Classifier: pluggable failure/timeout predicates
- aggregate: outcome mapping -> ResultDocument
- PingMiddleware: path matching, rendering, fallback

Usage:
    from pingcheck import PingMiddleware

    def configure(ping):
        ping.register("db", lambda: "up")

    app.add_middleware(PingMiddleware, setup=configure)
"""

from pingcheck.core import (
    Check,
    Outcome,
    Value,
    BooleanFailure,
    Failed,
    TimedOut,
    ResultDocument,
)
from pingcheck.exceptions import (
    PingCheckError,
    CheckConfigurationError,
    RegistryFrozenError,
    CheckTimeoutError,
    DeadlineExceededError,
)
from pingcheck.registry import CheckRegistry
from pingcheck.classifier import Classifier, is_failure, is_timeout
from pingcheck.executor import CheckExecutor
from pingcheck.aggregator import aggregate
from pingcheck.middleware import PingMiddleware

__all__ = [
    # Core types
    "Check",
    "Outcome",
    "Value",
    "BooleanFailure",
    "Failed",
    "TimedOut",
    "ResultDocument",
    # Errors
    "PingCheckError",
    "CheckConfigurationError",
    "RegistryFrozenError",
    "CheckTimeoutError",
    "DeadlineExceededError",
    # Registry
    "CheckRegistry",
    # Classification
    "Classifier",
    "is_failure",
    "is_timeout",
    # Execution
    "CheckExecutor",
    "aggregate",
    # Middleware
    "PingMiddleware",
]
