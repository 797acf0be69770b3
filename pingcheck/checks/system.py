# ============================================================================
# SYSTEM CHECKS
# ============================================================================
# STATUS: Extensions - Host resource checks
# PURPOSE: Process, memory and disk checks backed by psutil
# CREATED: 19 OCT 2026
# ============================================================================
"""
System Checks

Synchronous check bodies; the executor runs each call on its own thread.
Threshold checks return the usage as a string (e.g. "42.0%") so it shows
up in the ping document, or False once the threshold is crossed.
"""

import os
from typing import Callable, Union

import psutil

from core.logging import ComponentType, get_logger

logger = get_logger(__name__, ComponentType.CHECK)


def process_check() -> Callable[[], int]:
    """Report the serving process id."""
    def check() -> int:
        return os.getpid()

    return check


def _threshold(label: str, percent: float, max_percent: float) -> Union[str, bool]:
    if percent > max_percent:
        logger.warning(f"{label} usage {percent:.1f}% above {max_percent:.1f}%")
        return False
    return f"{percent:.1f}%"


def memory_check(max_percent: float = 95.0) -> Callable[[], Union[str, bool]]:
    """Virtual memory usage must stay at or below `max_percent`."""
    def check() -> Union[str, bool]:
        return _threshold("Memory", psutil.virtual_memory().percent, max_percent)

    return check


def disk_check(path: str = "/", max_percent: float = 95.0) -> Callable[[], Union[str, bool]]:
    """Disk usage of the filesystem holding `path` must stay at or below `max_percent`."""
    def check() -> Union[str, bool]:
        return _threshold(f"Disk {path}", psutil.disk_usage(path).percent, max_percent)

    return check


__all__ = [
    "process_check",
    "memory_check",
    "disk_check",
]
