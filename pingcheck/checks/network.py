# ============================================================================
# NETWORK CHECKS
# ============================================================================
# STATUS: Extensions - Upstream connectivity checks
# PURPOSE: HTTP and TCP reachability checks
# CREATED: 19 OCT 2026
# ============================================================================
"""
Network Checks

Both factories return coroutine functions, so they run on the event loop
and are cancelled cleanly when their timeout fires.
"""

import asyncio
from typing import Awaitable, Callable, Union

import httpx

from core.logging import ComponentType, get_logger

logger = get_logger(__name__, ComponentType.CHECK)


def http_check(
    url: str,
    expected_status: int = 200,
    timeout: float = 5.0,
    method: str = "GET",
) -> Callable[[], Awaitable[Union[int, bool]]]:
    """
    Request an HTTP endpoint.

    The check returns the response status code when it matches
    `expected_status` and False otherwise. Connection errors propagate and
    are reported as failures.

    Args:
        url: Endpoint to request
        expected_status: Status code that counts as healthy
        timeout: httpx client timeout (keep it at or below the check timeout)
        method: HTTP method
    """
    async def check() -> Union[int, bool]:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.request(method, url)

        if resp.status_code != expected_status:
            logger.warning(
                f"{method} {url} returned {resp.status_code}, "
                f"expected {expected_status}"
            )
            return False
        return resp.status_code

    return check


def tcp_check(host: str, port: int) -> Callable[[], Awaitable[str]]:
    """Check that `host:port` accepts TCP connections."""
    async def check() -> str:
        _, writer = await asyncio.open_connection(host, port)
        writer.close()
        await writer.wait_closed()
        return f"{host}:{port}"

    return check


__all__ = [
    "http_check",
    "tcp_check",
]
