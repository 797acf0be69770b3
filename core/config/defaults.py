# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for the ping endpoint and check execution
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides sensible defaults for the ping middleware.
These can be overridden via environment variables or constructor arguments.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PingDefaults:
    """
    Defaults for the ping endpoint.

    Controls where the middleware listens and how long checks may run.
    """
    # Endpoint
    path: str = "/_ping"

    # Overall deadline for one request's batch of checks (seconds)
    max_seconds: float = 29.0

    # Per-check timeout when a check does not specify one (seconds)
    check_timeout: float = 1.0

    @classmethod
    def from_env(cls) -> "PingDefaults":
        """Create from environment variables."""
        return cls(
            path=os.getenv("PING_PATH", "/_ping"),
            max_seconds=float(os.getenv("PING_MAX_SECONDS", 29.0)),
            check_timeout=float(os.getenv("PING_CHECK_TIMEOUT", 1.0)),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

_defaults: Optional[PingDefaults] = None


def get_defaults() -> PingDefaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = PingDefaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "PingDefaults",
    "get_defaults",
    "reset_defaults",
]
