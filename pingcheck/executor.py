# ============================================================================
# CHECK EXECUTOR
# ============================================================================
# STATUS: Core - Concurrent check execution
# PURPOSE: Run every check under its own timeout and the overall deadline
# CREATED: 19 OCT 2026
# ============================================================================
"""
Check Executor

Executes registered checks with:
- Concurrent execution (async checks on the loop, sync checks on their
  own daemon thread per invocation)
- Per-check timeouts
- Overall execution deadline

Outcome rules:
- work returns          -> Value(result), or BooleanFailure() for False
- work raises           -> Failed(error), including TimeoutErrors the work
                           raises on its own
- own timeout fires     -> TimedOut(CheckTimeoutError)
- overall deadline fires -> DeadlineExceededError raised to the caller,
                           pending checks cancelled

Cancellation is best effort. A timed-out coroutine is cancelled; a
timed-out thread runs to completion and its result is dropped. Threads
are never pooled, so an abandoned one cannot delay later checks, and
they are daemons, so they never hold up interpreter exit.
"""

import asyncio
import contextvars
import inspect
import threading
import time
from typing import Any, Dict, Optional

from core.logging import ComponentType, get_logger, log_context
from pingcheck.core import (
    Check,
    Failed,
    Outcome,
    TimedOut,
    outcome_from_result,
)
from pingcheck.exceptions import CheckTimeoutError, DeadlineExceededError
from pingcheck.registry import CheckRegistry

logger = get_logger(__name__, ComponentType.EXECUTOR)

DEFAULT_MAX_SECONDS = 29.0
THREAD_NAME_PREFIX = "pingcheck"


class CheckExecutor:
    """
    Executes checks concurrently with timeouts.

    One executor serves every request of a middleware instance; it holds
    no per-request state.
    """

    def __init__(
        self,
        registry: CheckRegistry,
        max_seconds: float = DEFAULT_MAX_SECONDS,
    ):
        """
        Initialize executor.

        Args:
            registry: Checks to run
            max_seconds: Overall deadline for one batch
        """
        if max_seconds <= 0:
            raise ValueError(f"max_seconds must be positive, got {max_seconds}")
        self.registry = registry
        self.max_seconds = max_seconds
    async def execute_all(self) -> Dict[Optional[str], Outcome]:
        """
        Execute all registered checks.

        Returns:
            Outcome per check name, in registration order

        Raises:
            DeadlineExceededError: Checks still running at the overall deadline
        """
        checks = self.registry.get_all()
        if not checks:
            return {}

        tasks = {
            check.name: asyncio.ensure_future(self.run_check(check))
            for check in checks
        }

        try:
            _, pending = await asyncio.wait(
                tasks.values(),
                timeout=self.max_seconds,
                return_when=asyncio.ALL_COMPLETED,
            )
        finally:
            for task in tasks.values():
                if not task.done():
                    task.cancel()

        if pending:
            still_running = [name for name, task in tasks.items() if task in pending]
            logger.warning(
                f"Health check overall deadline ({self.max_seconds}s) exceeded, "
                f"pending: {still_running}"
            )
            raise DeadlineExceededError(self.max_seconds, still_running)

        return {name: task.result() for name, task in tasks.items()}

    async def run_check(self, check: Check) -> Outcome:
        """Execute a single check with its own timeout."""
        start_time = time.monotonic()

        with log_context(check_name=check.name, operation="run_check"):
            task = asyncio.ensure_future(self._invoke(check))
            try:
                done, _ = await asyncio.wait({task}, timeout=check.timeout)
            finally:
                if not task.done():
                    task.cancel()

            duration_ms = (time.monotonic() - start_time) * 1000

            if not done:
                logger.warning(
                    f"Health check {check.name!r} timed out after {check.timeout}s"
                )
                return TimedOut(CheckTimeoutError(check.name, check.timeout))

            if task.cancelled():
                error = asyncio.CancelledError(f"Check {check.name!r} was cancelled")
                logger.error(f"Health check {check.name!r} cancelled itself")
                return Failed(error)

            error = task.exception()
            if error is not None:
                logger.error(f"Health check {check.name!r} failed: {error!r}")
                return Failed(error)

            outcome = outcome_from_result(task.result())
            logger.debug(
                f"Health check {check.name!r}: {type(outcome).__name__} "
                f"({duration_ms:.1f}ms)"
            )
            return outcome


    async def _invoke(self, check: Check) -> Any:
        """Call the check's work on the loop or on a dedicated thread."""
        if inspect.iscoroutinefunction(check.work):
            return await check.call()

        result = await self._call_in_thread(check)
        if inspect.isawaitable(result):
            result = await result
        return result

    def _call_in_thread(self, check: Check) -> "asyncio.Future[Any]":
        """
        Start the check's work on a fresh daemon thread.

        The returned future resolves on the loop when the work finishes.
        Once the caller has stopped waiting (timeout, deadline) the
        future is done or cancelled and the late result is dropped.
        """
        loop = asyncio.get_running_loop()
        future = loop.create_future()
        context = contextvars.copy_context()

        def deliver(result: Any, error: Optional[BaseException]) -> None:
            if future.done():
                return
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(result)

        def target() -> None:
            try:
                result = context.run(check.call)
            except Exception as e:
                outcome = (None, e)
            else:
                outcome = (result, None)
            try:
                loop.call_soon_threadsafe(deliver, *outcome)
            except RuntimeError:
                # Loop already closed
                logger.debug(f"Health check {check.name!r} finished after its loop closed")

        thread = threading.Thread(
            target=target,
            name=f"{THREAD_NAME_PREFIX}-{check.name or 'unnamed'}",
            daemon=True,
        )
        thread.start()
        return future


__all__ = [
    "DEFAULT_MAX_SECONDS",
    "CheckExecutor",
]
