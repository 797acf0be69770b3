# ============================================================================
# RESULT AGGREGATOR
# ============================================================================
# STATUS: Core - Outcome aggregation
# PURPOSE: Build the ping document from classified check outcomes
# CREATED: 19 OCT 2026
# ============================================================================
"""
Result Aggregator

Turns the executor's name -> Outcome mapping into a ResultDocument:

1. The document fails if any outcome (the unnamed one included) is a failure.
2. Named failures go to `timeouts` or `failures`, in registration order.
3. Named successes with a value contribute `str(value)` under their name.
4. The unnamed check never appears in the document body.

A value of None or False is "no value": it is omitted, not stringified.
"""

import time
from typing import Any, Dict, Optional

from core.contracts import PingStatus
from pingcheck.classifier import DEFAULT_CLASSIFIER, Classifier
from pingcheck.core import Outcome, ResultDocument


def _has_value(value: Any) -> bool:
    return value is not None and value is not False


def aggregate(
    outcomes: Dict[Optional[str], Outcome],
    classifier: Optional[Classifier] = None,
    now: Optional[int] = None,
) -> ResultDocument:
    """
    Aggregate check outcomes into a document.

    Args:
        outcomes: Outcome per check name (None for the unnamed check)
        classifier: Failure/timeout predicates (defaults apply if None)
        now: Epoch seconds to stamp the document with (current time if None)

    Returns:
        ResultDocument ready for rendering
    """
    classifier = classifier or DEFAULT_CLASSIFIER

    failed = any(classifier.is_failure(o) for o in outcomes.values())
    document = ResultDocument(
        status=PingStatus.from_failed(failed),
        timestamp=int(time.time()) if now is None else now,
    )

    for name, outcome in outcomes.items():
        if name is None:
            continue

        if classifier.is_failure(outcome):
            if classifier.is_timeout(outcome):
                document.timeouts.append(name)
            else:
                document.failures.append(name)
        elif _has_value(outcome.value):
            document.values[name] = str(outcome.value)

    return document


__all__ = [
    "aggregate",
]
