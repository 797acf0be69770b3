# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Export shared contracts, configuration and logging helpers
# CREATED: 19 OCT 2026
# ============================================================================

from core.contracts import CONTENT_TYPE, PingStatus
from core.config import PingDefaults, get_defaults, reset_defaults
from core.logging import get_logger, configure_logging, log_context

__all__ = [
    # Contracts
    "CONTENT_TYPE",
    "PingStatus",
    # Config
    "PingDefaults",
    "get_defaults",
    "reset_defaults",
    # Logging
    "get_logger",
    "configure_logging",
    "log_context",
]
