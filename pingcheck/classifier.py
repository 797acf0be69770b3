# ============================================================================
# OUTCOME CLASSIFIER
# ============================================================================
# STATUS: Core - Failure and timeout predicates
# PURPOSE: Decide what counts as unhealthy, independently of execution
# CREATED: 19 OCT 2026
# ============================================================================
"""
Outcome Classifier

Two predicates drive aggregation:
- is_failure: does this outcome make the document unhealthy?
- is_timeout: is that failure specifically a timeout?

Deployments can swap either one without touching execution or
aggregation:

    strict = Classifier(is_failure=lambda o: is_failure(o) or o.value is None)
"""

from dataclasses import dataclass
from typing import Callable

from pingcheck.core import BooleanFailure, Failed, Outcome, TimedOut

OutcomePredicate = Callable[[Outcome], bool]


def is_failure(outcome: Outcome) -> bool:
    """True for raised errors, timeouts and a boolean False result."""
    return isinstance(outcome, (Failed, TimedOut, BooleanFailure))


def is_timeout(outcome: Outcome) -> bool:
    """True only when the check ran past its own timeout."""
    return isinstance(outcome, TimedOut)


@dataclass(frozen=True)
class Classifier:
    """Pair of predicates used by the aggregator."""
    is_failure: OutcomePredicate = is_failure
    is_timeout: OutcomePredicate = is_timeout


DEFAULT_CLASSIFIER = Classifier()


__all__ = [
    "OutcomePredicate",
    "is_failure",
    "is_timeout",
    "Classifier",
    "DEFAULT_CLASSIFIER",
]
