# ============================================================================
# PINGCHECK EXCEPTIONS
# ============================================================================
# STATUS: Foundation - Error taxonomy for registration and execution
# PURPOSE: Distinguish configuration errors, check timeouts and batch failures
# CREATED: 19 OCT 2026
# ============================================================================
"""
Pingcheck Exceptions

Hierarchy:
    PingCheckError
    ├── CheckConfigurationError   bad registration (raised at setup time)
    ├── RegistryFrozenError       registration after the registry was frozen
    ├── CheckTimeoutError         a check exceeded its own timeout (outcome payload)
    └── DeadlineExceededError     the overall deadline fired (batch failure)
"""

from typing import List, Optional


class PingCheckError(Exception):
    """Base class for all pingcheck errors."""


class CheckConfigurationError(PingCheckError, ValueError):
    """A check could not be registered as given."""


class RegistryFrozenError(PingCheckError):
    """The registry no longer accepts registrations."""


class CheckTimeoutError(PingCheckError):
    """A check did not finish within its own timeout."""

    def __init__(self, name: Optional[str], timeout: float):
        self.name = name
        self.timeout = timeout
        super().__init__(f"Check {name!r} timed out after {timeout}s")


class DeadlineExceededError(PingCheckError):
    """The batch of checks did not finish within the overall deadline."""

    def __init__(self, max_seconds: float, pending: List[Optional[str]]):
        self.max_seconds = max_seconds
        self.pending = pending
        super().__init__(
            f"Overall deadline of {max_seconds}s exceeded "
            f"({len(pending)} check(s) still running)"
        )


__all__ = [
    "PingCheckError",
    "CheckConfigurationError",
    "RegistryFrozenError",
    "CheckTimeoutError",
    "DeadlineExceededError",
]
