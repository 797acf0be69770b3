# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# STATUS: Foundation - Core enums shared across the ping pipeline
# PURPOSE: Define the wire-level status values and their HTTP mapping
# CREATED: 19 OCT 2026
# EXPORTS: PingStatus, CONTENT_TYPE
# ============================================================================
"""
Base contracts for the ping middleware.

The status strings and content type are read by external monitors,
so their exact values are part of the public contract.
"""

from enum import Enum


# Sent on every response the middleware produces, fallback included
CONTENT_TYPE = "application/json; charset=UTF-8"


# ============================================================================
# STATUS ENUMS
# ============================================================================

class PingStatus(str, Enum):
    """
    Overall status of a ping document.

    Two-valued: any failing check (named or unnamed) turns the whole
    document into FAILURES.
    """
    OK = "ok"
    FAILURES = "failures"

    @property
    def http_status(self) -> int:
        """HTTP status code sent with a document carrying this status."""
        return 200 if self is PingStatus.OK else 503

    @classmethod
    def from_failed(cls, failed: bool) -> "PingStatus":
        return cls.FAILURES if failed else cls.OK


__all__ = [
    "CONTENT_TYPE",
    "PingStatus",
]
