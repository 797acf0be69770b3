# ============================================================================
# PINGCHECK CORE TYPES
# ============================================================================
# STATUS: Foundation - Check registration and outcome types
# PURPOSE: Immutable check definitions, per-request outcomes, result document
# CREATED: 19 OCT 2026
# ============================================================================
"""
Pingcheck Core Types

Check:
    Immutable registration of a unit of work: name (None for the unnamed
    check), timeout budget in seconds, optional group label, and the
    zero-argument callable that tests a dependency. The callable may be a
    plain function or a coroutine function.

Outcome (one per check per request):
    Value(result)      work returned something other than False
    BooleanFailure()   work returned False
    Failed(error)      work raised
    TimedOut(error)    work exceeded its own timeout

ResultDocument:
    What the aggregator produces and the middleware serializes.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.contracts import PingStatus
from pingcheck.exceptions import CheckTimeoutError

# Keys the document itself uses; a check named like this would clobber them
RESERVED_NAMES = frozenset({"now", "status", "failures", "timeouts"})

DEFAULT_TIMEOUT = 1.0


class Check(BaseModel):
    """
    A registered health check.

    Example:
        check = Check(name="db", timeout=2.0, work=lambda: db.execute("SELECT 1"))
        check.call()
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: Optional[str] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, allow_inf_nan=False)
    work: Callable[[], Any]
    group: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_reserved(cls, value: Optional[str]) -> Optional[str]:
        if value in RESERVED_NAMES:
            raise ValueError(f"'{value}' is reserved by the ping document")
        return value

    @property
    def is_unnamed(self) -> bool:
        return self.name is None

    def call(self) -> Any:
        """Call this check's work, returning whatever it returns."""
        return self.work()


# ============================================================================
# OUTCOMES
# ============================================================================

@dataclass(frozen=True)
class Outcome:
    """Base for the four outcome variants."""

    @property
    def value(self) -> Any:
        """The raw value this outcome stands for in the document."""
        raise NotImplementedError


@dataclass(frozen=True)
class Value(Outcome):
    result: Any

    @property
    def value(self) -> Any:
        return self.result


@dataclass(frozen=True)
class BooleanFailure(Outcome):

    @property
    def value(self) -> Any:
        return False


@dataclass(frozen=True)
class Failed(Outcome):
    error: BaseException

    @property
    def value(self) -> Any:
        return self.error


@dataclass(frozen=True)
class TimedOut(Outcome):
    error: CheckTimeoutError

    @property
    def value(self) -> Any:
        return self.error


def outcome_from_result(result: Any) -> Outcome:
    """Wrap what a check's work returned; boolean False signals failure."""
    if result is False:
        return BooleanFailure()
    return Value(result)


# ============================================================================
# RESULT DOCUMENT
# ============================================================================

@dataclass
class ResultDocument:
    """Aggregated result of one ping request."""
    status: PingStatus
    timestamp: int = field(default_factory=lambda: int(time.time()))
    values: Dict[str, str] = field(default_factory=dict)
    failures: List[str] = field(default_factory=list)
    timeouts: List[str] = field(default_factory=list)

    @property
    def http_status(self) -> int:
        return self.status.http_status

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON response."""
        data: Dict[str, Any] = {
            "now": str(self.timestamp),
            "status": self.status.value,
        }
        data.update(self.values)
        if self.failures:
            data["failures"] = list(self.failures)
        if self.timeouts:
            data["timeouts"] = list(self.timeouts)
        return data


__all__ = [
    "RESERVED_NAMES",
    "DEFAULT_TIMEOUT",
    "Check",
    "Outcome",
    "Value",
    "BooleanFailure",
    "Failed",
    "TimedOut",
    "outcome_from_result",
    "ResultDocument",
]
