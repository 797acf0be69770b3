# ============================================================================
# STOCK CHECKS
# ============================================================================
# STATUS: Extensions - Ready-made check bodies
# PURPOSE: Common dependency checks to register with a CheckRegistry
# CREATED: 19 OCT 2026
# ============================================================================
"""
Stock Checks

Factories returning zero-argument check bodies:

Network:
- http_check: upstream HTTP endpoint answers with the expected status
- tcp_check: a TCP port accepts connections

System:
- process_check: the serving process id
- memory_check: virtual memory usage below a threshold
- disk_check: disk usage below a threshold

Usage:
    from pingcheck.checks import http_check, memory_check

    def configure(ping):
        ping.register("search", http_check("http://search:9200/"), timeout=2.0)
        ping.register("memory", memory_check(max_percent=90))
"""

from pingcheck.checks.network import http_check, tcp_check
from pingcheck.checks.system import disk_check, memory_check, process_check

__all__ = [
    # Network
    "http_check",
    "tcp_check",
    # System
    "process_check",
    "memory_check",
    "disk_check",
]
