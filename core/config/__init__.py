# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the ping middleware.
"""

from core.config.defaults import (
    PingDefaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "PingDefaults",
    "get_defaults",
    "reset_defaults",
]
